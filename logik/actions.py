"""
Input translation.
Raw key names (X11 keysym names, as sent by the client) become one of the
session commands; the command is then applied to a session.
"""

import logging
from dataclasses import dataclass
from typing import Literal, Optional

from .session import GameSession
from .types import COLOR_COUNT

logger = logging.getLogger(__name__)

CommandKind = Literal["select_color", "revert_last", "commit_guess", "quit", "nothing"]

@dataclass(frozen=True)
class Command:
    kind: CommandKind
    color: Optional[int] = None

QUIT = Command("quit")
NOTHING = Command("nothing")
REVERT_LAST = Command("revert_last")
COMMIT_GUESS = Command("commit_guess")

QUIT_KEYS = {"Escape"}
REVERT_KEYS = {"BackSpace"}
COMMIT_KEYS = {"KP_Enter", "ISO_Enter", "Return"}
# ASCII "1".."8" only
SELECT_KEYS = {str(n): n - 1 for n in range(1, COLOR_COUNT + 1)}

def translate_key(key: str) -> Command:
    """
    Escape          -> quit
    BackSpace       -> revert the last pin
    Enter variants  -> commit the guess
    1..8            -> pick palette color 0..7
    anything else   -> nothing
    """
    if key in QUIT_KEYS:
        return QUIT
    if key in REVERT_KEYS:
        return REVERT_LAST
    if key in COMMIT_KEYS:
        return COMMIT_GUESS
    if key in SELECT_KEYS:
        return Command("select_color", color=SELECT_KEYS[key])
    return NOTHING

def apply_command(session: GameSession, command: Command) -> None:
    """Run a command against the session. Quit is left to the session's owner."""
    if command.kind == "select_color":
        session.select_color(command.color)
    elif command.kind == "revert_last":
        session.revert_last()
    elif command.kind == "commit_guess":
        session.commit_guess()
    else:
        logger.debug("No session change for %s", command.kind)
