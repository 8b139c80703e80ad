"""Pure data: palette and klippy defaults for the timberline theme.

No library imports. The palette doubles as the lookup table for
palette-index colors (``color=3`` means the third palette entry).
"""

# Core palette (from CSS custom properties in VIBES.md)
COLORS = {
    "bg": "#EBE1C3",
    "text": "#2B2B2B",
    "muted": "#6B6860",
    "accent": "#2E4D37",
    "surface": "#E4DAB9",
    "border": "#C4B892",
}

# Palette for integer colors. Forest green first, then darkened syntax colors
COLOR_CYCLE = [
    COLORS["accent"],  # forest green
    "#A0522D",  # burnt sienna
    "#A26200",  # dark amber
    "#D1064F",  # dark magenta
    "#7021FF",  # dark purple
    "#496D00",  # dark olive
    "#75715E",  # taupe
]

# Palette index 0 is the page background, fully transparent
BACKGROUND = ("#FFFFFF", 0.0)

# Sentinel: inherit the document's link color
AUTO = "auto"

POSITIONS = ("top", "left", "bottom", "right")

DEFAULTS = {
    "lang": ("r", "markdown"),
    "all_precode": False,
    "position": ("top", "left"),
    "color": AUTO,
    "tooltip_message": "Copy code",
    "tooltip_success": "Copied!",
}
