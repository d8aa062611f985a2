import logging

from .color import RGB, hex_to_rgb, rgb_to_hex

logger = logging.getLogger(__name__)

DARK_FALLBACK_BACKGROUND = "#1a1a1a"
DARK_FOREGROUND = "#e5e5e5"
DARK_BACKGROUND_SCALE = 0.3

LIGHT_FALLBACK_BACKGROUND = "#f8f8f8"
LIGHT_FOREGROUND = "#2a2a2a"
LIGHT_BACKGROUND_KEEP = 0.1


def darken_background(hex_color):
    r, g, b = hex_to_rgb(hex_color)
    return rgb_to_hex(RGB(*(int(c * DARK_BACKGROUND_SCALE) for c in (r, g, b))))


def lighten_background(hex_color):
    r, g, b = hex_to_rgb(hex_color)
    return rgb_to_hex(
        RGB(*(255 - int((255 - c) * LIGHT_BACKGROUND_KEEP) for c in (r, g, b)))
    )


def apply_variant(colors, dark=False, light=False):
    """Return a dark or light derivative of a generated palette.

    Only background and foreground change; every other role is copied as is.
    With neither flag set the result is a plain copy.

    Raises:
        ValueError: if both dark and light are requested.
    """
    if dark and light:
        raise ValueError("cannot apply both dark and light variants")

    adjusted = dict(colors)
    if dark:
        background = colors.get("background")
        adjusted["background"] = (
            darken_background(background) if background else DARK_FALLBACK_BACKGROUND
        )
        adjusted["foreground"] = DARK_FOREGROUND
        logger.debug("dark variant background %s", adjusted["background"])
    elif light:
        background = colors.get("background")
        adjusted["background"] = (
            lighten_background(background) if background else LIGHT_FALLBACK_BACKGROUND
        )
        adjusted["foreground"] = LIGHT_FOREGROUND
        logger.debug("light variant background %s", adjusted["background"])

    return adjusted
