"""
Text board for a session snapshot.

Layout (top to bottom):
- the guess being assembled, while the game is in progress
- committed guesses, newest first, each followed by its pegs
  (one ● per exact match, one ○ per color-only match)
- the palette legend
"""

from typing import List, Optional, Sequence

from .palette import PALETTE
from .session import Guess, Snapshot

EXACT_PEG = "●"
COLOR_PEG = "○"
EMPTY_PIN = "··"

def _pins(colors: Sequence[Optional[int]]) -> str:
    return " ".join(EMPTY_PIN if c is None else PALETTE[c].code for c in colors)

def render_guess(guess: Guess) -> str:
    pegs = EXACT_PEG * guess.result.exact + COLOR_PEG * guess.result.color_only
    line = f"{_pins(guess.pins)} | {pegs}"
    if guess.revealed:
        line += "  (secret)"
    return line.rstrip()

def render_board(snapshot: Snapshot) -> str:
    lines: List[str] = []

    if snapshot.state == "in_progress":
        lines.append(f"{_pins(snapshot.in_progress)} |")

    for guess in reversed(snapshot.history):
        lines.append(render_guess(guess))

    lines.append("-" * 20)
    lines.append("  ".join(f"{c.index + 1}:{c.code}" for c in PALETTE))
    return "\n".join(lines)
