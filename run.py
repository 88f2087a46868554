import uvicorn

from logik.config import load_settings

if __name__ == "__main__":
    settings = load_settings()
    uvicorn.run(
        "logik.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "local",
    )
