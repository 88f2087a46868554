"""
Explicit validation & Pydantic models
- Models are used to validate and serialize/deserialize data
  exchanged between the client and server.
- Defines the structure of API requests and responses.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from .palette import PaletteColor
from .session import Guess, Snapshot
from .types import COLOR_COUNT, MAX_GUESSES

# 1. Validates a picked pin color
class SelectColorRequest(BaseModel):
    color: int = Field(..., description="Palette index of the pin color, 0 to 7")

    @field_validator("color")
    @classmethod
    def validate_color(cls, color: int) -> int:
        if color < 0 or color >= COLOR_COUNT:
            raise ValueError(f"Color must be between 0 and {COLOR_COUNT - 1} inclusive.")
        return color

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"color": 0},  # white
                {"color": 7},  # yellow
            ]
        }
    }

# 2. A raw key press from the client
class KeyRequest(BaseModel):
    key: str = Field(..., min_length=1, description="Key name, e.g. '3', 'BackSpace', 'KP_Enter', 'Escape'")

# 3. Describes a single committed guess
class GuessOut(BaseModel):
    pins: List[int] = Field(..., description="The five guessed colors")
    exact: int = Field(..., description="Right color in the right place")
    color_only: int = Field(..., description="Right color in another place")
    revealed: bool = Field(False, description="True for the row showing the secret after a loss")

# 4. Everything a client needs to draw the board
class SnapshotOut(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    state: Literal["in_progress", "over"] = Field(..., description="Current state of the game")
    won: bool = Field(..., description="Whether the secret was found")
    guesses_left: int = Field(..., description="How many guesses remain")
    history: List[GuessOut] = Field(..., description="Committed guesses, oldest first")
    in_progress: List[int] = Field(..., description="Colors picked so far for the next guess")
    note: Optional[str] = Field(None, description="Extra note (ex. 'Game lost. No more guesses.')")

# 5. Result of a key press
class KeyResponse(BaseModel):
    action: Literal["select_color", "revert_last", "commit_guess", "quit", "nothing"]
    snapshot: Optional[SnapshotOut] = Field(None, description="Board after the action; empty after quit")

# 6. One palette entry
class PaletteColorOut(BaseModel):
    index: int
    name: str
    code: str
    hex: str


def to_guess_out(guess: Guess) -> GuessOut:
    return GuessOut(
        pins=list(guess.pins),
        exact=guess.result.exact,
        color_only=guess.result.color_only,
        revealed=guess.revealed,
    )

def to_snapshot_out(game_id: str, snapshot: Snapshot) -> SnapshotOut:
    note = None
    if snapshot.state == "over":
        note = f"Game {'won' if snapshot.won else 'lost'}. No more guesses allowed."
    return SnapshotOut(
        game_id=game_id,
        state=snapshot.state,
        won=snapshot.won,
        guesses_left=max(0, MAX_GUESSES - snapshot.guesses_used),
        history=[to_guess_out(g) for g in snapshot.history],
        in_progress=list(snapshot.filled),
        note=note,
    )

def to_palette_out(color: PaletteColor) -> PaletteColorOut:
    return PaletteColorOut(index=color.index, name=color.name, code=color.code, hex=color.hex)
