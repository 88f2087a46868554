"""
The eight pin colors, in index order.
Only names and hex values live here; drawing them is up to the client.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .types import COLOR_COUNT

@dataclass(frozen=True)
class PaletteColor:
    index: int
    name: str
    code: str  # two letters for text boards
    hex: str

PALETTE: Tuple[PaletteColor, ...] = (
    PaletteColor(0, "white", "WH", "#FFFFFF"),
    PaletteColor(1, "black", "BK", "#000000"),
    PaletteColor(2, "red", "RD", "#FF0000"),
    PaletteColor(3, "pink", "PK", "#FFC0CB"),
    PaletteColor(4, "dark goldenrod", "GD", "#B8860B"),
    PaletteColor(5, "gray", "GY", "#BEBEBE"),
    PaletteColor(6, "medium sea green", "GN", "#3CB371"),
    PaletteColor(7, "yellow", "YE", "#FFFF00"),
)

def check_palette(palette: Tuple[PaletteColor, ...] = PALETTE) -> Dict[int, PaletteColor]:
    """
    Index the palette and make sure it is usable: one entry per color index,
    unique codes, and hex values of the form #RRGGBB.
    Raises RuntimeError so the app refuses to start with a broken palette.
    """
    if len(palette) != COLOR_COUNT:
        raise RuntimeError(f"Palette must have {COLOR_COUNT} colors, got {len(palette)}.")

    by_index: Dict[int, PaletteColor] = {}
    codes = set()
    for color in palette:
        if color.index in by_index or color.index not in range(COLOR_COUNT):
            raise RuntimeError(f"Bad palette index {color.index} for {color.name}.")
        if color.code in codes:
            raise RuntimeError(f"Duplicate palette code {color.code}.")
        if len(color.hex) != 7 or not color.hex.startswith("#"):
            raise RuntimeError(f"Cannot use color {color.name}: {color.hex!r} is not #RRGGBB.")
        try:
            int(color.hex[1:], 16)
        except ValueError:
            raise RuntimeError(f"Cannot use color {color.name}: {color.hex!r} is not #RRGGBB.")
        by_index[color.index] = color
        codes.add(color.code)
    return by_index
