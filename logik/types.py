"""
Labels and fixed game constants.
"""

from typing import List, Literal, Optional, Tuple

PIN_COUNT = 5     # pins per guess
COLOR_COUNT = 8   # colors in the palette
MAX_GUESSES = 10  # player guesses before the secret is revealed

ColorIndex = int  # 0 -> 7
Slot = Optional[ColorIndex]  # None = empty slot
PinState = Tuple[ColorIndex, ...]  # 5 filled slots
Buffer = List[Slot]  # guess being assembled
SessionState = Literal["in_progress", "over"]
