"""
- Pin the app to test settings before it is imported
- Provide a client fixture (TestClient(app)) that runs the app's lifespan,
  so every test starts with an empty in-memory store.
- Provide a session factory with a fixed seed for deterministic secrets.
"""
import os
import pytest

from fastapi.testclient import TestClient

# Keep test runs off the network and quiet
os.environ.setdefault("APP_ENV", "test")
os.environ["LOGIK_SEED_SOURCE"] = "time"

from logik.main import app
from logik.session import GameSession
from logik.types import COLOR_COUNT

FIXED_SEED = 1234

@pytest.fixture
def client():
    # Entering the context runs startup (store created) and shutdown (store cleared)
    with TestClient(app) as test_client:
        yield test_client

@pytest.fixture
def make_session():
    def _make(secret=None, seed=FIXED_SEED):
        return GameSession(seed, secret=secret)
    return _make

def near_miss(secret):
    """Same as the secret except the first pin: never a win."""
    return [(secret[0] + 1) % COLOR_COUNT] + list(secret[1:])

def enter(session, pins):
    for color in pins:
        session.select_color(color)
