"""Color parsing for user configured column colors.

Colors may be given as a color name ("red", "bright_white"), a hex triplet
("#ff8800"), or an rgb() call ("rgb(255, 136, 0)"). Whitespace and case are
ignored. Values are normalized to strings rich understands.
"""

from __future__ import annotations

from rich.color import Color, ColorParseError

_INVALID_RGB = "invalid RGB color"
_INVALID_HEX = "invalid hex color"


def _parse_channel(value: str, error: str) -> int:
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        raise ValueError(error)
    channel = int(value)
    if channel > 255:
        raise ValueError(error)
    return channel


def parse_color(value: str) -> str:
    """Normalize a configured color to a rich color definition.

    Args:
        value: The color as written in the config file. An empty string
            means "use the default".

    Returns:
        A rich color string ("#rrggbb" or a color name), or "" for default.

    Raises:
        ValueError: If the color can't be parsed.
    """
    text = value.strip().lower()
    if not text:
        return ""

    if text.startswith("#"):
        digits = text.lstrip("#")
        if len(digits) != 6:
            raise ValueError("RGB color must be 6 characters long")
        try:
            r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        except ValueError as e:
            raise ValueError(_INVALID_HEX) from e
        return f"#{r:02x}{g:02x}{b:02x}"

    if text.startswith("rgb"):
        inner = text[len("rgb"):].strip()
        if not (inner.startswith("(") and inner.endswith(")")):
            raise ValueError(_INVALID_RGB)
        channels = inner[1:-1].split(",")
        if len(channels) != 3:
            raise ValueError(_INVALID_RGB)
        r, g, b = (_parse_channel(channel, _INVALID_RGB) for channel in channels)
        return f"#{r:02x}{g:02x}{b:02x}"

    # anything else must be a name rich knows, e.g. "bright_magenta"
    try:
        Color.parse(text)
    except ColorParseError as e:
        raise ValueError(f"unknown color {value.strip()!r}") from e
    return text


def build_style(foreground: str, background: str) -> str:
    """Combine parsed foreground and background colors into a style string."""
    if foreground and background:
        return f"{foreground} on {background}"
    if background:
        return f"on {background}"
    return foreground
