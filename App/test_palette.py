"""
Tests for palette parsing and edits.
"""

import pytest

from errors import InvalidPalette
from models import NEW_COLOR
from pattern.palette import (
    add_color,
    hex_to_rgb,
    make_palette,
    normalize_hex,
    palette_rgb,
    rgb_to_hex,
    update_color,
)


class TestHexParsing:
    """Tests for #RRGGBB handling."""

    def test_hex_to_rgb(self) -> None:
        """Test parsing a colour."""
        assert hex_to_rgb("#FF8000") == (255, 128, 0)
        assert hex_to_rgb("#ff8000") == (255, 128, 0)

    def test_normalize_upper_case(self) -> None:
        """Test that colours are stored upper-case."""
        assert normalize_hex(" #abcdef ") == "#ABCDEF"

    @pytest.mark.parametrize("value", ["#FFF", "FF0000", "#GG0000", "#FF00000", "", None, 123])
    def test_malformed_hex_rejected(self, value) -> None:
        """Test that anything other than #RRGGBB raises InvalidPalette."""
        with pytest.raises(InvalidPalette):
            normalize_hex(value)

    def test_rgb_to_hex_clamps(self) -> None:
        """Test formatting with out-of-range components."""
        assert rgb_to_hex((300, -5, 16)) == "#FF0010"


class TestPaletteEdits:
    """Tests for palette construction and copy-on-write edits."""

    def test_make_palette(self) -> None:
        """Test validation and normalization of a list."""
        assert make_palette(["#ffffff", "#000000"]) == ("#FFFFFF", "#000000")

    def test_empty_palette(self) -> None:
        """Test that an empty palette is invalid."""
        with pytest.raises(InvalidPalette):
            make_palette([])
        with pytest.raises(InvalidPalette):
            palette_rgb([])

    def test_add_color_appends(self) -> None:
        """Test that new colours take the next id."""
        palette = ("#FFFFFF",)
        updated = add_color(palette)
        assert updated == ("#FFFFFF", NEW_COLOR)
        assert palette == ("#FFFFFF",)

    def test_update_color(self) -> None:
        """Test recolouring in place keeps every id."""
        updated = update_color(("#FFFFFF", "#000000"), 1, "#123456")
        assert updated == ("#FFFFFF", "#123456")

    @pytest.mark.parametrize("color_id", [-1, 2])
    def test_update_out_of_range(self, color_id: int) -> None:
        """Test recolouring an id the palette does not have."""
        with pytest.raises(InvalidPalette):
            update_color(("#FFFFFF", "#000000"), color_id, "#123456")
