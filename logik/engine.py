"""
Pure game logic (no HTTP, no storage).
We compute two feedback numbers for each guess:
- exact: how many pins have the right color in the right place
- color_only: how many of the remaining pins have a color found somewhere
  else in the secret

Scanning is first-match-wins: a secret pin is never marked as used, so
repeated colors can be counted more than once.
"""

from typing import NamedTuple, Sequence

from .types import ColorIndex, PIN_COUNT

class MatchResult(NamedTuple):
    exact: int
    color_only: int

def score(guess: Sequence[ColorIndex], secret: Sequence[ColorIndex]) -> MatchResult:
    """
    Example:
      guess  = [0, 0, 1, 2, 3]
      secret = [0, 1, 1, 2, 3]
      exact      = 4  (positions 0, 2, 3, 4)
      color_only = 1  (guess[1] == 0 is found at secret[0])
    """

    # 0. Validate lengths match
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")

    exact = 0
    color_only = 0
    for i in range(n):
        # 1. Same color, same place
        if guess[i] == secret[i]:
            exact += 1
            continue

        # 2. First other position holding this color, scanning left to right
        for j in range(n):
            if i != j and guess[i] == secret[j]:
                color_only += 1
                break

    return MatchResult(exact, color_only)

def is_win(result: MatchResult) -> bool:
    """All pins in the right place."""
    return result.exact == PIN_COUNT
