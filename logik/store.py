"""
In-memory store
Holds live game sessions in memory, keyed by game id.
Nothing is persisted: a restart forgets every game.

The store keeps at most `max_games` sessions. Starting a game on a full store
drops a finished game first, or else the game left untouched the longest.
"""

import logging
from threading import RLock
from typing import Dict, Optional, Tuple
from uuid import uuid4

from .actions import Command, apply_command
from .session import GameSession, Snapshot
from .types import ColorIndex

logger = logging.getLogger(__name__)

DEFAULT_MAX_GAMES = 1000

class SessionStore:
    def __init__(self, max_games: int = DEFAULT_MAX_GAMES) -> None:
        if max_games < 1:
            raise ValueError("max_games must be at least 1.")
        # Insertion order doubles as recency: touched games move to the end
        self._sessions: Dict[str, GameSession] = {}
        self._max_games = max_games
        self._lock = RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, game_id: str) -> bool:
        with self._lock:
            return game_id in self._sessions

    def create(self, seed: Optional[int] = None) -> Tuple[str, GameSession]:
        new_id = str(uuid4())
        session = GameSession(seed)
        with self._lock:
            while len(self._sessions) >= self._max_games:
                self._evict_one()
            self._sessions[new_id] = session
        logger.info("Game %s created", new_id)
        return new_id, session

    def _evict_one(self) -> None:
        victim = next((gid for gid, s in self._sessions.items() if s.is_over), None)
        if victim is None:
            victim = next(iter(self._sessions))
        self._sessions.pop(victim)
        logger.info("Game %s evicted: store full (%d games)", victim, self._max_games)

    def _touch(self, game_id: str) -> Optional[GameSession]:
        session = self._sessions.pop(game_id, None)
        if session is not None:
            self._sessions[game_id] = session
        return session

    def get(self, game_id: str) -> Optional[GameSession]:
        with self._lock:
            return self._sessions.get(game_id)

    def snapshot(self, game_id: str) -> Optional[Snapshot]:
        with self._lock:
            session = self._touch(game_id)
            return None if session is None else session.snapshot()

    def discard(self, game_id: str) -> bool:
        """Drop a game (the player quit). Returns False if there was no such game."""
        with self._lock:
            removed = self._sessions.pop(game_id, None)
        if removed is None:
            return False
        logger.info("Game %s discarded after %d guess(es)", game_id, removed.guesses_used)
        return True

    def clear(self) -> None:
        with self._lock:
            count = len(self._sessions)
            self._sessions.clear()
        logger.info("Dropped %d live game(s)", count)

    # --- Session operations, one at a time per store ---
    # Each returns the board as it was right after the change, or None for an unknown id.

    def select_color(self, game_id: str, color: ColorIndex) -> Optional[Snapshot]:
        with self._lock:
            session = self._touch(game_id)
            if session is None:
                return None
            session.select_color(color)
            return session.snapshot()

    def revert_last(self, game_id: str) -> Optional[Snapshot]:
        with self._lock:
            session = self._touch(game_id)
            if session is None:
                return None
            session.revert_last()
            return session.snapshot()

    def commit_guess(self, game_id: str) -> Optional[Snapshot]:
        with self._lock:
            session = self._touch(game_id)
            if session is None:
                return None
            session.commit_guess()
            return session.snapshot()

    def apply(self, game_id: str, command: Command) -> Optional[Snapshot]:
        """Run a translated key command; quit is handled by discard()."""
        with self._lock:
            session = self._touch(game_id)
            if session is None:
                return None
            apply_command(session, command)
            return session.snapshot()
