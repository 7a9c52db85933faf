"""ANSI terminal colouring of strings using compact style specifications."""

from __future__ import annotations

import logging
import math
import re

logger = logging.getLogger(__name__)

COLOR_PREFIX = "\x1b["
COLOR_SUFFIX = "m"
RESET = COLOR_PREFIX + "0" + COLOR_SUFFIX
BOLD = "1"
UNDERLINE = "4"
REVERSE = "7"

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def fg(hex_color: str) -> str:
    """Return the ANSI code selecting ``hex_color`` as foreground."""
    return "38;5;" + str(hex_to_color256(hex_color))


def bg(hex_color: str) -> str:
    """Return the ANSI code selecting ``hex_color`` as background."""
    return "48;5;" + str(hex_to_color256(hex_color))


def hex_to_color256(hex_color: str) -> int:
    """Convert a 3- or 6-digit hex RGB string to an xterm-256 colour code."""
    return rgb_to_color256(*hex_to_rgb(hex_color))


def rgb_to_color256(red: int, green: int, blue: int) -> int:
    """Convert an RGB triple (0-255 each) to an xterm-256 colour code."""
    if red == green == blue:
        if red == 255:
            return 15
        if red == 0:
            return 0
        return (232 + _round_half_up(red / 10.65)) % 256
    return (
        36 * color_to_ansi_index(red)
        + 6 * color_to_ansi_index(green)
        + color_to_ansi_index(blue)
        + 16
    )


def color_to_ansi_index(value: int) -> int:
    """Convert a colour component (0-255) to an ANSI cube index (0-5)."""
    return _round_half_up(value / 51.0)


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Split a 3- or 6-digit hex string into red, green and blue values.

    Any other length is logged and gives white.
    """
    if len(hex_color) == 6:
        return (
            hex_to_uint8(hex_color[:2]),
            hex_to_uint8(hex_color[2:4]),
            hex_to_uint8(hex_color[4:]),
        )
    if len(hex_color) == 3:
        return (
            hex_to_uint8(hex_color[0] * 2),
            hex_to_uint8(hex_color[1] * 2),
            hex_to_uint8(hex_color[2] * 2),
        )
    logger.error("Unsupported color %s", hex_color)
    return 255, 255, 255


def hex_to_uint8(hex_byte: str) -> int:
    """Parse a hexadecimal string as a byte; invalid input gives 0."""
    if not _HEX_DIGITS.fullmatch(hex_byte):
        return 0
    return min(int(hex_byte, 16), 255)


def expand_style(style: str) -> str:
    """Expand one style part (Fg#rgb, Bg#rgb, Bold, ...) into an ANSI code."""
    if style.startswith("Fg#"):
        return fg(style[3:])
    if style.startswith("Bg#"):
        return bg(style[3:])
    if style == "Bold":
        return BOLD
    if style == "Underline":
        return UNDERLINE
    if style == "Reverse":
        return REVERSE
    logger.warning("Unhandled style [%s]", style)
    return style


def colorize(style: str, message: str) -> str:
    """Wrap ``message`` in the ANSI codes described by ``style``.

    ``style`` is a "|"-separated list of parts such as ``Fg#fff|Bold``.
    It may instead hold "?"-separated clauses ``pattern=style``; the first
    clause whose pattern equals ``message`` supplies the style, and if
    none does the message is returned unchanged.
    """
    if not message:
        return message

    for clause in style.split("?"):
        clause = clause.strip()
        if not clause:
            continue
        if "=" in clause:
            pattern, _, clause_style = clause.partition("=")
            style = clause_style.strip()
            if pattern.strip() != message:
                style = ""
                continue
            break

    if not style:
        return message

    codes = ";".join(expand_style(part.strip()) for part in style.split("|"))
    return f"{COLOR_PREFIX}{codes}{COLOR_SUFFIX}{message}{RESET}"