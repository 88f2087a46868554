"""
One game of Logik.
Owns the secret, the guess being assembled and the history of scored guesses.

Every operation is total: anything out of protocol (full buffer, empty buffer,
finished game) is ignored instead of raising, the same way a stray click on
the board does nothing.
"""

import logging
import random
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .engine import MatchResult, is_win, score
from .types import (
    Buffer, ColorIndex, COLOR_COUNT, MAX_GUESSES, PIN_COUNT, PinState, SessionState,
)

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Guess:
    pins: PinState
    result: MatchResult
    # True only for the synthetic guess showing the secret after a loss
    revealed: bool = False

@dataclass(frozen=True)
class Snapshot:
    history: Tuple[Guess, ...]
    in_progress: Tuple[Optional[ColorIndex], ...]
    state: SessionState
    won: bool = False
    guesses_used: int = 0

    @property
    def filled(self) -> PinState:
        """Filled colors of the in-progress guess, left to right."""
        return tuple(c for c in self.in_progress if c is not None)


def random_pins(rng: random.Random) -> PinState:
    return tuple(rng.randrange(COLOR_COUNT) for _ in range(PIN_COUNT))


class GameSession:
    def __init__(self, seed: Optional[int] = None, *, secret: Optional[PinState] = None) -> None:
        # Session-local generator; time seeded unless a seed is injected
        self._rng = random.Random(time.time_ns() if seed is None else seed)
        if secret is None:
            self._secret = random_pins(self._rng)
        else:
            if len(secret) != PIN_COUNT or any(c not in range(COLOR_COUNT) for c in secret):
                raise ValueError(f"Secret must be {PIN_COUNT} colors between 0 and {COLOR_COUNT - 1}.")
            self._secret = tuple(secret)
        self._history: List[Guess] = []
        self._buffer: Buffer = [None] * PIN_COUNT

    # --- Read-only views ---

    @property
    def secret(self) -> PinState:
        return self._secret

    @property
    def history(self) -> Tuple[Guess, ...]:
        return tuple(self._history)

    @property
    def is_over(self) -> bool:
        """Over once the last guess is perfect or all guesses are spent."""
        if not self._history:
            return False
        return len(self._history) >= MAX_GUESSES or is_win(self._history[-1].result)

    @property
    def state(self) -> SessionState:
        return "over" if self.is_over else "in_progress"

    @property
    def guesses_used(self) -> int:
        """Player guesses, not counting the revealed secret."""
        return sum(1 for g in self._history if not g.revealed)

    @property
    def won(self) -> bool:
        players = [g for g in self._history if not g.revealed]
        return bool(players) and is_win(players[-1].result)

    # --- Operations ---

    def select_color(self, color: ColorIndex) -> None:
        if self.is_over:
            logger.debug("select_color ignored: game over")
            return
        if not isinstance(color, int) or isinstance(color, bool) or color not in range(COLOR_COUNT):
            logger.debug("select_color ignored: %r is not a palette index", color)
            return

        # Leftmost empty slot
        for i in range(PIN_COUNT):
            if self._buffer[i] is None:
                self._buffer[i] = color
                return
        logger.debug("select_color ignored: guess already complete")

    def revert_last(self) -> None:
        if self.is_over:
            logger.debug("revert_last ignored: game over")
            return

        # Rightmost filled slot; slots fill left to right so there are no gaps
        for i in reversed(range(PIN_COUNT)):
            if self._buffer[i] is not None:
                self._buffer[i] = None
                return
        logger.debug("revert_last ignored: nothing to revert")

    def commit_guess(self) -> None:
        if self.is_over:
            logger.debug("commit_guess ignored: game over")
            return
        if any(c is None for c in self._buffer):
            logger.debug("commit_guess ignored: guess incomplete")
            return

        pins: PinState = tuple(self._buffer)
        result = score(pins, self._secret)
        self._history.append(Guess(pins=pins, result=result))
        self._buffer = [None] * PIN_COUNT
        logger.info(
            "Guess %d committed: %d exact, %d color only",
            len(self._history), result.exact, result.color_only,
        )

        # Ten misses: show the answer as one more (perfect) row
        if len(self._history) == MAX_GUESSES and not is_win(result):
            self._history.append(
                Guess(pins=self._secret, result=score(self._secret, self._secret), revealed=True)
            )

        if self.is_over:
            logger.info("Game over after %d guess(es): %s", self.guesses_used, "won" if self.won else "lost")

    def snapshot(self) -> Snapshot:
        return Snapshot(
            history=tuple(self._history),
            in_progress=tuple(self._buffer),
            state=self.state,
            won=self.won,
            guesses_used=self.guesses_used,
        )
