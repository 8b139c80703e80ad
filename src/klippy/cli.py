#!/usr/bin/env python3
"""Write the klippy script tag as a Hugo partial.

Generates:
  1. themes/timberline/layouts/partials/klippy.html — <link>/<script> tags
     plus the inline klippy script, included once per page
  2. static/klippy/klippy-<version>/ — klippy.css and klippy.js

clipboard.js itself is loaded from the CDN and is not copied.

Usage:
  klippy --lang python bash --position top right --color '#2E4D37'
  klippy --stdout > partial.html
"""

import argparse
import os
import sys
from pathlib import Path

from .errors import KlippyError
from .markup import klippy
from .theme import DEFAULTS

PARTIAL_DIR = "themes/timberline/layouts/partials"
PARTIAL_NAME = "klippy.html"
STATIC_DIR = "static"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="klippy",
        description="Write the copy-to-clipboard partial for the blog theme.",
    )
    parser.add_argument(
        "--lang",
        nargs="*",
        default=list(DEFAULTS["lang"]),
        help="languages whose <pre> blocks get a button (default: r markdown)",
    )
    parser.add_argument(
        "--all-precode",
        action="store_true",
        help="add a button to every <pre> wrapping a <code>",
    )
    parser.add_argument(
        "--position",
        nargs="+",
        default=list(DEFAULTS["position"]),
        help="any of top, bottom, left, right (default: top left)",
    )
    parser.add_argument(
        "--color",
        default=DEFAULTS["color"],
        help='color name, hex string, palette index, or "auto" (default)',
    )
    parser.add_argument("--tooltip-message", default=DEFAULTS["tooltip_message"])
    parser.add_argument("--tooltip-success", default=DEFAULTS["tooltip_success"])
    parser.add_argument(
        "--base-url",
        default="/klippy",
        help="URL prefix the copied assets are served under (default: /klippy)",
    )
    parser.add_argument(
        "--blog-root",
        type=Path,
        default=Path(os.environ.get("KLIPPY_BLOG_ROOT", ".")),
        help="site root (default: $KLIPPY_BLOG_ROOT or the current directory)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="print the partial instead of writing files",
    )
    return parser


def _warn(message: str) -> None:
    print(f"klippy warning: {message}", file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        _main(args)
    except KlippyError as e:
        print(f"klippy error: {e}", file=sys.stderr)
        sys.exit(1)


def _main(args: argparse.Namespace) -> None:
    tag = klippy(
        lang=args.lang,
        all_precode=args.all_precode,
        position=args.position,
        color=args.color,
        tooltip_message=args.tooltip_message,
        tooltip_success=args.tooltip_success,
        warn=_warn,
    )
    partial = tag.render(base_url=args.base_url)

    if args.stdout:
        sys.stdout.write(partial)
        return

    # --- Assets under static/<base-url>/ ---
    static_dest = args.blog_root / STATIC_DIR / args.base_url.strip("/")
    for dep in tag.dependencies:
        for path in dep.copy_to(static_dest):
            print(f"Wrote {path} ({path.stat().st_size} bytes)", file=sys.stderr)

    # --- Partial ---
    partial_path = args.blog_root / PARTIAL_DIR / PARTIAL_NAME
    partial_path.parent.mkdir(parents=True, exist_ok=True)
    partial_path.write_text(partial)
    print(f"Wrote {partial_path} ({partial_path.stat().st_size} bytes)", file=sys.stderr)


if __name__ == "__main__":
    main()
