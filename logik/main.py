'''
Logik API

Endpoints:
POST   /games                  -> start a game
GET    /games/{id}             -> board state & history
POST   /games/{id}/pins        -> pick the next pin color
DELETE /games/{id}/pins/last   -> take back the last pin
POST   /games/{id}/commit      -> submit the five picked pins as a guess
POST   /games/{id}/keys        -> same operations, driven by a key name
DELETE /games/{id}             -> quit the game

Extras:
GET  /games/{id}/board         -> plain-text board
GET  /palette                  -> the eight pin colors

Games live in memory only (SessionStore); nothing survives a restart.
'''

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .actions import translate_key
from .config import load_settings
from .palette import PALETTE, check_palette
from .random_client import fetch_seed
from .render import render_board
from .session import Snapshot
from .store import SessionStore

from .schemas import (
    KeyRequest,
    KeyResponse,
    PaletteColorOut,
    SelectColorRequest,
    SnapshotOut,
    to_palette_out,
    to_snapshot_out,
)

logger = logging.getLogger(__name__)

# Bad settings stop the app here, before any game exists
settings = load_settings()

@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    check_palette()
    app.state.store = SessionStore(max_games=settings.max_games)
    logger.info("Logik started (env=%s, seed source=%s)", settings.app_env, settings.seed_source)
    try:
        yield
    finally:
        app.state.store.clear()
        logger.info("Logik stopped")

app = FastAPI(title="Logik API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

def get_store(request: Request) -> SessionStore:
    return request.app.state.store

def _require(snapshot: Optional[Snapshot]) -> Snapshot:
    if snapshot is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return snapshot

# ---------------- Routes ----------------

@app.post("/games", response_model=SnapshotOut, summary="Start a new game")
def start_game(store: SessionStore = Depends(get_store)) -> SnapshotOut:
    game_id, session = store.create(fetch_seed(settings.seed_source))
    # nobody else knows the id yet
    return to_snapshot_out(game_id, session.snapshot())

@app.get("/games/{game_id}", response_model=SnapshotOut, summary="Get current board")
def get_game(game_id: str, store: SessionStore = Depends(get_store)) -> SnapshotOut:
    snapshot = _require(store.snapshot(game_id))
    return to_snapshot_out(game_id, snapshot)

@app.post("/games/{game_id}/pins", response_model=SnapshotOut, summary="Pick the next pin color")
def select_color(
    game_id: str,
    payload: SelectColorRequest,
    store: SessionStore = Depends(get_store),
) -> SnapshotOut:
    # A full guess or a finished game simply ignores the pick
    snapshot = _require(store.select_color(game_id, payload.color))
    return to_snapshot_out(game_id, snapshot)

@app.delete("/games/{game_id}/pins/last", response_model=SnapshotOut, summary="Take back the last pin")
def revert_last(game_id: str, store: SessionStore = Depends(get_store)) -> SnapshotOut:
    snapshot = _require(store.revert_last(game_id))
    return to_snapshot_out(game_id, snapshot)

@app.post("/games/{game_id}/commit", response_model=SnapshotOut, summary="Submit the picked pins")
def commit_guess(game_id: str, store: SessionStore = Depends(get_store)) -> SnapshotOut:
    snapshot = _require(store.commit_guess(game_id))
    return to_snapshot_out(game_id, snapshot)

@app.post("/games/{game_id}/keys", response_model=KeyResponse, summary="Apply a key press")
def press_key(
    game_id: str,
    payload: KeyRequest,
    store: SessionStore = Depends(get_store),
) -> KeyResponse:
    command = translate_key(payload.key)
    if command.kind == "quit":
        if not store.discard(game_id):
            raise HTTPException(status_code=404, detail="Game not found")
        return KeyResponse(action=command.kind, snapshot=None)

    snapshot = _require(store.apply(game_id, command))
    return KeyResponse(action=command.kind, snapshot=to_snapshot_out(game_id, snapshot))

@app.delete("/games/{game_id}", summary="Quit a game")
def quit_game(game_id: str, store: SessionStore = Depends(get_store)) -> dict:
    if not store.discard(game_id):
        raise HTTPException(status_code=404, detail="Game not found")
    return {"message": "Game closed."}

@app.get("/games/{game_id}/board", response_class=PlainTextResponse, summary="Plain-text board")
def get_board(game_id: str, store: SessionStore = Depends(get_store)) -> str:
    snapshot = _require(store.snapshot(game_id))
    return render_board(snapshot)

@app.get("/palette", response_model=list[PaletteColorOut], summary="Pin colors")
def get_palette() -> list[PaletteColorOut]:
    return [to_palette_out(c) for c in PALETTE]
