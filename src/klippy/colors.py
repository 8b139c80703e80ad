"""Resolve color specifications to a hex RGB string and an opacity."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from matplotlib.colors import to_hex, to_rgba

from .errors import InvalidColor
from .theme import AUTO, BACKGROUND, COLOR_CYCLE


@dataclass(frozen=True)
class ResolvedColor:
    color: str
    alpha: float


def palette_color(index: int, palette: Sequence[str] = COLOR_CYCLE) -> str | tuple[str, float]:
    """Look up a 1-based palette index. Index 0 is the transparent background.

    Indices past the end wrap around, so any non-negative int is valid.
    """
    if index < 0:
        raise InvalidColor(f"palette index must be non-negative, got {index}")
    if index == 0:
        return BACKGROUND
    if not palette:
        raise InvalidColor("palette is empty")
    return palette[(index - 1) % len(palette)]


def resolve_color(color: str | int, palette: Sequence[str] = COLOR_CYCLE) -> ResolvedColor:
    """Resolve a color name, hex string, or palette index.

    ``"auto"`` is passed through untouched with opacity 1; the browser side
    then uses the document's link color.
    """
    if color == AUTO:
        return ResolvedColor(AUTO, 1.0)

    if isinstance(color, bool):
        raise InvalidColor(f"not a color: {color!r}")
    if isinstance(color, str) and color.isascii() and color.isdigit():
        color = int(color)

    spec = palette_color(color, palette) if isinstance(color, int) else color
    try:
        rgba = to_rgba(spec)
    except (ValueError, TypeError) as err:
        raise InvalidColor(f"invalid color specification: {color!r}") from err

    return ResolvedColor(to_hex(rgba, keep_alpha=False).upper(), float(rgba[3]))
