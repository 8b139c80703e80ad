"""Validate and normalize klippy options."""

from __future__ import annotations

import sys
import unicodedata
import warnings
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .errors import InvalidArgument, PositionConflict
from .theme import DEFAULTS, POSITIONS

Warn = Callable[[str], None]


@dataclass(frozen=True)
class Options:
    lang: tuple[str, ...]
    all_precode: bool
    handside: str
    headside: str
    color: str | int
    tooltip_message: str
    tooltip_success: str


def _caller_stacklevel() -> int:
    """Stack level of the first frame outside the klippy package."""
    frame = sys._getframe(1)
    level = 1
    while frame is not None and frame.f_globals.get("__name__", "").partition(".")[0] == "klippy":
        frame = frame.f_back
        level += 1
    return level


def warn_position_conflict(message: str) -> None:
    """Default diagnostics sink: issue a PositionConflict warning.

    The warning points at the code that called into klippy.
    """
    warnings.warn(message, PositionConflict, stacklevel=_caller_stacklevel())


def _is_strings(value: object) -> bool:
    return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)


def has_control_chars(text: str) -> bool:
    """True if text contains any Unicode "Other" (C*) character."""
    return any(unicodedata.category(ch).startswith("C") for ch in text)


def _check_lang(lang: object) -> tuple[str, ...]:
    if isinstance(lang, str):
        return (lang,)
    if _is_strings(lang):
        return tuple(lang)
    raise InvalidArgument(f"lang must be a string or a list of strings, got {lang!r}")


def _check_all_precode(all_precode: object) -> bool:
    if not isinstance(all_precode, bool):
        raise InvalidArgument(f"all_precode must be True or False, got {all_precode!r}")
    return all_precode


def _check_color(color: object) -> str | int:
    if isinstance(color, bool) or not isinstance(color, (str, int)):
        raise InvalidArgument(f"color must be a single string or palette index, got {color!r}")
    return color


def _check_tooltip(name: str, text: object) -> str:
    if not isinstance(text, str):
        raise InvalidArgument(f"{name} must be a string, got {text!r}")
    if has_control_chars(text):
        raise InvalidArgument(f"{name} must not contain control characters: {text!r}")
    return text


def _check_position(position: object) -> tuple[str, ...]:
    if isinstance(position, str):
        position = (position,)
    if not _is_strings(position) or not position:
        raise InvalidArgument(f"position must be a non-empty list of strings, got {position!r}")
    unknown = [p for p in position if p not in POSITIONS]
    if unknown:
        raise InvalidArgument(
            f"position values must be one of {', '.join(POSITIONS)}; got {', '.join(map(repr, unknown))}"
        )
    return tuple(position)


def resolve_position(position: object, warn: Warn | None = None) -> tuple[str, str]:
    """Reduce a position list to one (horizontal, vertical) pair.

    "right" and "bottom" override the left/top defaults. When both sides of
    an axis are given, left and top win and the conflict is reported to
    ``warn``.
    """
    return _resolve_sides(_check_position(position), warn)


def _resolve_sides(position: tuple[str, ...], warn: Warn | None) -> tuple[str, str]:
    if warn is None:
        warn = warn_position_conflict

    handside = "right" if "right" in position else "left"
    if handside == "right" and "left" in position:
        warn('Klippy positions are defined to "left".')
        handside = "left"

    headside = "bottom" if "bottom" in position else "top"
    if headside == "bottom" and "top" in position:
        warn('Klippy positions are defined to "top".')
        headside = "top"

    return handside, headside


def validate_options(
    lang: str | Sequence[str] = DEFAULTS["lang"],
    all_precode: bool = DEFAULTS["all_precode"],
    position: str | Sequence[str] = DEFAULTS["position"],
    color: str | int = DEFAULTS["color"],
    tooltip_message: str = DEFAULTS["tooltip_message"],
    tooltip_success: str = DEFAULTS["tooltip_success"],
    warn: Warn | None = None,
) -> Options:
    """Check raw arguments and return normalized Options.

    Raises InvalidArgument on the first bad argument. Position conflicts are
    not errors; they go to ``warn`` once every argument has been checked.
    """
    checked_lang = _check_lang(lang)
    checked_all_precode = _check_all_precode(all_precode)
    checked_position = _check_position(position)
    checked_color = _check_color(color)
    message = _check_tooltip("tooltip_message", tooltip_message)
    success = _check_tooltip("tooltip_success", tooltip_success)
    handside, headside = _resolve_sides(checked_position, warn)

    return Options(
        lang=checked_lang,
        all_precode=checked_all_precode,
        handside=handside,
        headside=headside,
        color=checked_color,
        tooltip_message=message,
        tooltip_success=success,
    )
