import colorsys
import logging
import string
from collections import namedtuple

from .errors import InvalidHexFormatError

logger = logging.getLogger(__name__)

RGB = namedtuple("RGB", ["r", "g", "b"])
HSL = namedtuple("HSL", ["h", "s", "l"])
Color = namedtuple("Color", ["hex", "rgb", "hsl", "luminance"])

CONTRAST_STEPS = 100
CONTRAST_STEP = 0.01

_HEX_DIGITS = frozenset(string.hexdigits)


def clamp_channel(value):
    return max(0, min(255, int(value)))


def clamp_unit(value):
    return max(0.0, min(1.0, value))


def rgb_to_hex(rgb):
    r, g, b = (clamp_channel(c) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    """Parse a strict ``#rrggbb`` string into an RGB triple.

    Raises:
        InvalidHexFormatError: if the string is not exactly ``#`` followed by
            six hex digits.
    """
    if not isinstance(hex_color, str) or len(hex_color) != 7 or hex_color[0] != "#":
        raise InvalidHexFormatError(hex_color)
    digits = hex_color[1:]
    if not _HEX_DIGITS.issuperset(digits):
        raise InvalidHexFormatError(hex_color, reason="failed to parse hex color")
    return RGB(*(int(digits[i : i + 2], 16) for i in (0, 2, 4)))


def is_valid_hex(hex_color):
    try:
        hex_to_rgb(hex_color)
    except InvalidHexFormatError:
        return False
    return True


def rgb_to_hsl(rgb):
    """Convert an RGB triple to HSL with every component in [0, 1].

    Achromatic colors come back with hue and saturation of zero.
    """
    r, g, b = rgb
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return HSL(h % 1.0, s, l)


def hsl_to_rgb(hsl):
    """Convert HSL back to RGB, truncating each channel to an integer."""
    h, s, l = hsl
    r, g, b = colorsys.hls_to_rgb(h % 1.0, clamp_unit(l), clamp_unit(s))
    return RGB(clamp_channel(r * 255), clamp_channel(g * 255), clamp_channel(b * 255))


def hsl_to_hex(hsl):
    return rgb_to_hex(hsl_to_rgb(hsl))


def hex_to_hsl(hex_color):
    return rgb_to_hsl(hex_to_rgb(hex_color))


def relative_luminance(rgb):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = rgb
    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def color_contrast(rgb1, rgb2):
    return contrast_ratio(relative_luminance(rgb1), relative_luminance(rgb2))


def create_color(r, g, b):
    """Create a Color namedtuple with all representations"""
    rgb = RGB(clamp_channel(r), clamp_channel(g), clamp_channel(b))
    return Color(
        hex=rgb_to_hex(rgb),
        rgb=rgb,
        hsl=rgb_to_hsl(rgb),
        luminance=relative_luminance(rgb),
    )


def color_from_hex(hex_color):
    return create_color(*hex_to_rgb(hex_color))


def ensure_contrast(foreground, background, min_ratio):
    """
    Nudge the foreground lightness until it reaches min_ratio against background.

    Lightness moves in 0.01 steps for at most 100 steps, darkening on a light
    background and lightening on a dark one. If no step passes, the original
    foreground is returned untouched.
    """
    foreground = RGB(*foreground)
    if color_contrast(foreground, background) >= min_ratio:
        return foreground

    h, s, l = rgb_to_hsl(foreground)
    step = -CONTRAST_STEP if relative_luminance(background) > 0.5 else CONTRAST_STEP

    for _ in range(CONTRAST_STEPS):
        l = clamp_unit(l + step)
        candidate = hsl_to_rgb(HSL(h, s, l))
        if color_contrast(candidate, background) >= min_ratio:
            return candidate

    logger.debug(
        "contrast %.2f unreachable for %s on %s",
        min_ratio,
        rgb_to_hex(foreground),
        rgb_to_hex(background),
    )
    return foreground


def ensure_palette_contrast(colors, min_ratio):
    """Return a copy of colors with foreground and terminal roles readable on background."""
    background = hex_to_rgb(colors["background"])
    adjusted = dict(colors)
    for key, value in colors.items():
        if key in ("background", "selection_background"):
            continue
        fixed = ensure_contrast(hex_to_rgb(value), background, min_ratio)
        adjusted[key] = rgb_to_hex(fixed)
    return adjusted
