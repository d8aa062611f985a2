"""Generators that perturb a well-known community palette."""

from ..color import HSL, clamp_unit, hex_to_hsl, hsl_to_hex
from ..randomness import jitter
from . import tables
from .tables import PRIMARY_KEYS


def perturb(hsl, scheme, source):
    """Shift h, s and l by independent symmetric jitter, wrapping hue."""
    h, s, l = hsl
    return HSL(
        (h + jitter(source, scheme.hue_spread)) % 1.0,
        clamp_unit(s + jitter(source, scheme.saturation_spread)),
        clamp_unit(l + jitter(source, scheme.lightness_spread)),
    )


def generate_base_palette_colors(scheme, source):
    colors = {}
    for name, hex_color in scheme.palette.items():
        hsl = perturb(hex_to_hsl(hex_color), scheme, source)
        colors[name] = hsl_to_hex(hsl)

        if name in PRIMARY_KEYS:
            continue
        bright = HSL(
            hsl.h,
            min(1.0, hsl.s + scheme.bright_saturation),
            min(1.0, hsl.l + scheme.bright_lightness),
        )
        colors[f"bright_{name}"] = hsl_to_hex(bright)

    return colors


def generate_dracula_colors(source):
    return generate_base_palette_colors(tables.DRACULA, source)


def generate_nord_colors(source):
    return generate_base_palette_colors(tables.NORD, source)


def generate_solarized_colors(source):
    return generate_base_palette_colors(tables.SOLARIZED, source)


def generate_gruvbox_colors(source):
    return generate_base_palette_colors(tables.GRUVBOX, source)
