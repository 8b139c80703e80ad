"""klippy — copy-to-clipboard buttons for code blocks on howinator.io."""

__version__ = "0.1.0"

from .colors import ResolvedColor, resolve_color
from .errors import InvalidArgument, InvalidColor, KlippyError, PositionConflict
from .markup import (
    HtmlDependency,
    ScriptTag,
    build_script,
    generate,
    klippy,
    klippy_dependencies,
)
from .options import Options, validate_options
from .theme import COLOR_CYCLE, COLORS, DEFAULTS

__all__ = [
    "klippy",
    "generate",
    "build_script",
    "klippy_dependencies",
    "validate_options",
    "resolve_color",
    "HtmlDependency",
    "Options",
    "ResolvedColor",
    "ScriptTag",
    "KlippyError",
    "InvalidArgument",
    "InvalidColor",
    "PositionConflict",
    "COLORS",
    "COLOR_CYCLE",
    "DEFAULTS",
    "__version__",
]
