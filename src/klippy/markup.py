"""Build the klippy <script> tag and its attached asset bundle."""

from __future__ import annotations

import html
import json
import re
import shutil
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from . import __version__
from .colors import ResolvedColor, resolve_color
from .options import Options, validate_options
from .theme import COLOR_CYCLE, DEFAULTS


ASSETS_DIR = Path(__file__).parent / "assets"
CLIPBOARD_JS_VERSION = "2.0.11"
CLIPBOARD_JS_CDN = f"https://cdn.jsdelivr.net/npm/clipboard@{CLIPBOARD_JS_VERSION}/dist"

_WORD = re.compile(r"\w+")


@dataclass(frozen=True)
class HtmlDependency:
    """A named, versioned set of scripts and stylesheets.

    ``src`` is either a local directory (copied next to the site's static
    files) or an http(s) base URL used as-is.
    """

    name: str
    version: str
    src: Path | str
    scripts: tuple[str, ...] = ()
    stylesheets: tuple[str, ...] = ()

    @property
    def is_remote(self) -> bool:
        return isinstance(self.src, str) and self.src.startswith(("http://", "https://"))

    @property
    def dirname(self) -> str:
        return f"{self.name}-{self.version}"

    def href(self, filename: str, base_url: str = "") -> str:
        if self.is_remote:
            return f"{self.src}/{filename}"
        return f"{base_url.rstrip('/')}/{self.dirname}/{filename}"

    def tags(self, base_url: str = "") -> list[str]:
        """<link> tags first, then <script src> tags."""
        out = [
            f'<link href="{html.escape(self.href(css, base_url))}" rel="stylesheet" />'
            for css in self.stylesheets
        ]
        out += [
            f'<script src="{html.escape(self.href(js, base_url))}"></script>'
            for js in self.scripts
        ]
        return out

    def copy_to(self, dest: str | Path) -> list[Path]:
        """Copy local files into ``dest/<name>-<version>/``. Remote deps copy nothing."""
        if self.is_remote:
            return []
        target = Path(dest) / self.dirname
        target.mkdir(parents=True, exist_ok=True)
        copied = []
        for filename in (*self.stylesheets, *self.scripts):
            copied.append(Path(shutil.copy2(Path(self.src) / filename, target / filename)))
        return copied


@dataclass(frozen=True)
class ScriptTag:
    """An inline <script> element with the dependencies it needs."""

    text: str
    dependencies: tuple[HtmlDependency, ...] = ()

    def __str__(self) -> str:
        return f"<script>{self.text}</script>"

    def render(self, base_url: str = "", include_dependencies: bool = True) -> str:
        """HTML for embedding: dependency tags, then the script element."""
        lines = []
        if include_dependencies:
            for dep in self.dependencies:
                lines.extend(dep.tags(base_url))
        lines.append(str(self))
        return "\n".join(lines) + "\n"


def klippy_dependencies() -> tuple[HtmlDependency, ...]:
    return (
        HtmlDependency(
            name="clipboard",
            version=CLIPBOARD_JS_VERSION,
            src=CLIPBOARD_JS_CDN,
            scripts=("clipboard.min.js",),
        ),
        HtmlDependency(
            name="klippy",
            version=__version__,
            src=ASSETS_DIR,
            scripts=("klippy.js",),
            stylesheets=("klippy.css",),
        ),
    )


def language_selectors(lang: Sequence[str]) -> list[str]:
    """Distinct word tokens of every lang string, as ``pre.<token>`` selectors."""
    tokens: list[str] = []
    for text in lang:
        for token in _WORD.findall(text):
            if token not in tokens:
                tokens.append(token)
    return [f"pre.{token}" for token in tokens]


def js_string(value: str) -> str:
    """Encode a value as a JS string literal safe inside an HTML <script>.

    json.dumps escapes quotes, backslashes, and every non-ASCII character
    (U+2028 and U+2029 included). ``<`` becomes ``\\u003c`` so ``</script>``
    and ``<!--`` never reach the HTML parser.
    """
    return json.dumps(value).replace("<", "\\u003c")


def format_alpha(alpha: float) -> str:
    return format(alpha, ".7g")


def build_script(options: Options, resolved: ResolvedColor) -> str:
    js_script = ""

    if options.all_precode:
        # <pre> elements wrapping a <code> element
        js_script += "\n  addClassKlippyToPreCode();"

    selectors = language_selectors(options.lang)
    if selectors:
        js_script += f'\n  addClassKlippyTo("{", ".join(selectors)}");'

    args = ", ".join(
        js_string(arg)
        for arg in (
            options.handside,
            options.headside,
            resolved.color,
            format_alpha(resolved.alpha),
            options.tooltip_message,
            options.tooltip_success,
        )
    )
    js_script += f"\n  addKlippy({args});\n"
    return js_script


def klippy(
    lang: str | Sequence[str] = DEFAULTS["lang"],
    all_precode: bool = DEFAULTS["all_precode"],
    position: str | Sequence[str] = DEFAULTS["position"],
    color: str | int = DEFAULTS["color"],
    tooltip_message: str = DEFAULTS["tooltip_message"],
    tooltip_success: str = DEFAULTS["tooltip_success"],
    *,
    palette: Sequence[str] = COLOR_CYCLE,
    warn: Callable[[str], None] | None = None,
) -> ScriptTag:
    """Script tag that adds copy-to-clipboard buttons to code blocks.

    ``lang`` selects ``<pre>`` elements by class; several names in one string
    are split on word boundaries and an empty value selects none.
    ``all_precode`` also selects every ``<pre>`` wrapping a ``<code>``.
    ``position`` takes any of top/bottom/left/right; left and top win ties.
    ``color`` is "auto" (the document's link color), a color name, a hex
    string (alpha allowed), or an index into ``palette``.

    Raises InvalidArgument or InvalidColor before anything is built.
    """
    options = validate_options(
        lang, all_precode, position, color, tooltip_message, tooltip_success, warn=warn
    )
    resolved = resolve_color(options.color, palette)
    return ScriptTag(build_script(options, resolved), klippy_dependencies())


generate = klippy
