import logging

from ..errors import UnknownSchemeError
from ..randomness import default_source
from ..variant import apply_variant
from .base_palette import (
    generate_dracula_colors,
    generate_gruvbox_colors,
    generate_nord_colors,
    generate_solarized_colors,
)
from .hue_rotation import (
    generate_cool_colors,
    generate_cyberpunk_colors,
    generate_mono_colors,
    generate_nature_colors,
    generate_neon_colors,
    generate_pastel_colors,
    generate_random_colors,
    generate_warm_colors,
)
from .tables import ALL_KEYS, BRIGHT_ROLES, PRIMARY_KEYS, ROLES

logger = logging.getLogger(__name__)

SCHEMES = {
    "random": generate_random_colors,
    "pastel": generate_pastel_colors,
    "neon": generate_neon_colors,
    "mono": generate_mono_colors,
    "warm": generate_warm_colors,
    "cool": generate_cool_colors,
    "nature": generate_nature_colors,
    "cyberpunk": generate_cyberpunk_colors,
    "dracula": generate_dracula_colors,
    "nord": generate_nord_colors,
    "solarized": generate_solarized_colors,
    "gruvbox": generate_gruvbox_colors,
}

SCHEME_ALIASES = {"monochrome": "mono"}

SCHEME_NAMES = tuple(SCHEMES)

SCHEME_DESCRIPTIONS = {
    "random": "Completely random colors",
    "pastel": "Soft, muted tones perfect for long coding sessions",
    "neon": "Bright, vibrant colors for high contrast",
    "mono": "Monochromatic grayscale for minimalist setups",
    "warm": "Reds, oranges, yellows for cozy environments",
    "cool": "Blues, greens, purples for clean professional look",
    "nature": "Earth tones and forest colors",
    "cyberpunk": "Neon greens and magentas for futuristic aesthetic",
    "dracula": "Dracula-inspired dark theme variations",
    "nord": "Nord-inspired cool tones and minimalism",
    "solarized": "Solarized variations with scientific precision",
    "gruvbox": "Warm retro computing feel",
}


def resolve_scheme(scheme):
    name = SCHEME_ALIASES.get(scheme, scheme)
    if name not in SCHEMES:
        raise UnknownSchemeError(scheme)
    return name


def generate_color_scheme(scheme, source=None):
    """Generate a complete 19-color mapping for the named scheme.

    Raises:
        UnknownSchemeError: if scheme is not a known scheme id.
    """
    name = resolve_scheme(scheme)
    logger.debug("generating %s palette", name)
    return SCHEMES[name](source or default_source())


def generate_color_scheme_with_variant(scheme, dark=False, light=False, source=None):
    colors = generate_color_scheme(scheme, source=source)
    return apply_variant(colors, dark=dark, light=light)


__all__ = [
    "ALL_KEYS",
    "BRIGHT_ROLES",
    "PRIMARY_KEYS",
    "ROLES",
    "SCHEMES",
    "SCHEME_ALIASES",
    "SCHEME_DESCRIPTIONS",
    "SCHEME_NAMES",
    "generate_color_scheme",
    "generate_color_scheme_with_variant",
    "resolve_scheme",
]
