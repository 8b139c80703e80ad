"""Tests for color resolution."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from klippy.colors import ResolvedColor, palette_color, resolve_color
from klippy.errors import InvalidColor
from klippy.theme import COLOR_CYCLE


class TestAuto:
    def test_auto_is_passed_through(self) -> None:
        assert resolve_color("auto") == ResolvedColor("auto", 1.0)

    def test_auto_skips_parsing(self) -> None:
        with patch("klippy.colors.to_rgba") as to_rgba:
            resolve_color("auto")
        to_rgba.assert_not_called()


class TestNamedAndHex:
    @pytest.mark.parametrize(
        ("spec", "expected"),
        [
            ("red", "#FF0000"),
            ("steelblue", "#4682B4"),
            ("#2e4d37", "#2E4D37"),
            ("#abc", "#AABBCC"),
        ],
    )
    def test_opaque_colors(self, spec: str, expected: str) -> None:
        assert resolve_color(spec) == ResolvedColor(expected, 1.0)

    def test_alpha_channel(self) -> None:
        resolved = resolve_color("#FF000080")
        assert resolved.color == "#FF0000"
        assert resolved.alpha == pytest.approx(128 / 255)

    def test_deterministic(self) -> None:
        assert resolve_color("red") == resolve_color("red")

    @pytest.mark.parametrize("spec", ["notacolor", "#12345", ""])
    def test_unresolvable(self, spec: str) -> None:
        with pytest.raises(InvalidColor) as excinfo:
            resolve_color(spec)
        assert isinstance(excinfo.value.__cause__, ValueError)


class TestPaletteIndex:
    def test_one_based(self) -> None:
        assert resolve_color(1).color == COLOR_CYCLE[0].upper()
        assert resolve_color(2).color == COLOR_CYCLE[1].upper()

    def test_digit_string(self) -> None:
        assert resolve_color("2") == resolve_color(2)

    def test_wraps_around(self) -> None:
        assert resolve_color(len(COLOR_CYCLE) + 1) == resolve_color(1)

    def test_zero_is_transparent_background(self) -> None:
        assert resolve_color(0) == ResolvedColor("#FFFFFF", 0.0)

    def test_custom_palette(self) -> None:
        assert resolve_color(2, palette=["black", "white"]).color == "#FFFFFF"

    def test_negative_index(self) -> None:
        with pytest.raises(InvalidColor, match="non-negative"):
            palette_color(-1)

    def test_empty_palette(self) -> None:
        with pytest.raises(InvalidColor, match="empty"):
            resolve_color(1, palette=[])
