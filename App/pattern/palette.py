"""Palette helpers: hex parsing and copy-on-write edits.

AIDEV-NOTE: Palette ids are list positions. Colours are only ever appended
or recoloured in place, never removed, so ids painted into a grid stay valid.
"""

import re
from typing import Sequence, Tuple

from errors import InvalidPalette
from models import NEW_COLOR

HEX_RE = re.compile(r"^#([0-9a-fA-F]{6})$")

Palette = Tuple[str, ...]


def normalize_hex(value: str) -> str:
    """Return `value` as upper-case #RRGGBB.

    Raises:
        InvalidPalette: For anything other than a 6-digit hex colour
    """
    if not isinstance(value, str) or not HEX_RE.match(value.strip()):
        raise InvalidPalette(f"Colour must be #RRGGBB, got {value!r}")
    return value.strip().upper()


def hex_to_rgb(value: str) -> "tuple[int, int, int]":
    """Parse #RRGGBB into an (r, g, b) tuple."""
    digits = normalize_hex(value)[1:]
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(rgb: "Sequence[int]") -> str:
    r, g, b = (max(0, min(255, int(c))) for c in rgb[:3])
    return f"#{r:02X}{g:02X}{b:02X}"


def make_palette(colors: "Sequence[str]") -> Palette:
    """Validate and normalize a palette.

    Raises:
        InvalidPalette: If the palette is empty or holds a malformed colour
    """
    if not colors:
        raise InvalidPalette("Palette must contain at least one colour")
    return tuple(normalize_hex(color) for color in colors)


def palette_rgb(palette: "Sequence[str]") -> "list[tuple[int, int, int]]":
    """RGB triples for every palette entry, in id order."""
    if not palette:
        raise InvalidPalette("Palette must contain at least one colour")
    return [hex_to_rgb(color) for color in palette]


def add_color(palette: "Sequence[str]", color: str = NEW_COLOR) -> Palette:
    """New palette with `color` appended; its id is len(palette)."""
    return tuple(palette) + (normalize_hex(color),)


def update_color(palette: "Sequence[str]", color_id: int, color: str) -> Palette:
    """New palette with entry `color_id` recoloured."""
    if not 0 <= color_id < len(palette):
        raise InvalidPalette(
            f"Colour id {color_id} is outside the palette (size {len(palette)})"
        )
    updated = list(palette)
    updated[color_id] = normalize_hex(color)
    return tuple(updated)
