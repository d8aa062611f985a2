"""Procedural Alacritty color theme generation."""

from .color import (
    HSL,
    RGB,
    Color,
    color_contrast,
    contrast_ratio,
    create_color,
    ensure_contrast,
    ensure_palette_contrast,
    hex_to_rgb,
    hsl_to_rgb,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
)
from .errors import (
    ConfigError,
    InvalidHexFormatError,
    ThemeGeneratorError,
    UnknownSchemeError,
)
from .naming import generate_random_name
from .schemes import (
    SCHEME_NAMES,
    generate_color_scheme,
    generate_color_scheme_with_variant,
)
from .variant import apply_variant

__version__ = "1.0.0"

__all__ = [
    "HSL",
    "RGB",
    "Color",
    "ConfigError",
    "InvalidHexFormatError",
    "SCHEME_NAMES",
    "ThemeGeneratorError",
    "UnknownSchemeError",
    "apply_variant",
    "color_contrast",
    "contrast_ratio",
    "create_color",
    "ensure_contrast",
    "ensure_palette_contrast",
    "generate_color_scheme",
    "generate_color_scheme_with_variant",
    "generate_random_name",
    "hex_to_rgb",
    "hsl_to_rgb",
    "relative_luminance",
    "rgb_to_hex",
    "rgb_to_hsl",
]
