"""Highlight color codes and their display symbols."""

DEFAULT_COLOR_SYMBOL = "\U0001F7E8"  # yellow square

HIGHLIGHT_COLORS: dict[str, str] = {
    "#FFB": DEFAULT_COLOR_SYMBOL,
    "#DFC": "\U0001F49A",  # green heart
    "#FFE0EC": "\U0001F497",  # growing heart
}


def resolve_color(code: object) -> str:
    """Map a raw Libby color code to its symbol; unknown or absent codes get the default."""
    if not isinstance(code, str):
        return DEFAULT_COLOR_SYMBOL
    return HIGHLIGHT_COLORS.get(code, DEFAULT_COLOR_SYMBOL)
