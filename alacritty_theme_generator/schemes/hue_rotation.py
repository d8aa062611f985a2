"""Generators that place each terminal role at a hue and jitter saturation/lightness."""

from ..color import HSL, hsl_to_hex
from . import tables
from .tables import ROLES


def _draw(source, base_spread):
    base, spread = base_spread
    return base + source.random() * spread


def _set_role(colors, role, normal, bright):
    colors[role] = hsl_to_hex(normal)
    colors[f"bright_{role}"] = hsl_to_hex(bright)


def generate_random_colors(source):
    """Random base hue with golden-ratio spacing for the chromatic roles."""
    colors = {}
    base_hue = source.random()

    bg_sat, bg_max_light = tables.RANDOM_BACKGROUND
    fg_sat, fg_light, fg_spread = tables.RANDOM_FOREGROUND
    sel_sat, sel_light = tables.RANDOM_SELECTION
    colors["background"] = hsl_to_hex(HSL(base_hue, bg_sat, source.random() * bg_max_light))
    colors["foreground"] = hsl_to_hex(
        HSL(base_hue, fg_sat, fg_light + source.random() * fg_spread)
    )
    colors["selection_background"] = hsl_to_hex(HSL(base_hue, sel_sat, sel_light))

    for role, offset in zip(ROLES, tables.RANDOM_HUE_OFFSETS):
        if role == "black":
            hue = base_hue
            sat = tables.RANDOM_NEUTRAL_SATURATION
            light = _draw(source, tables.RANDOM_BLACK_LIGHTNESS)
        elif role == "white":
            hue = base_hue
            sat = tables.RANDOM_NEUTRAL_SATURATION
            light = _draw(source, tables.RANDOM_WHITE_LIGHTNESS)
        else:
            hue = (
                base_hue
                + offset * tables.RANDOM_HARMONY
                + source.random() * tables.RANDOM_HUE_SPREAD
            ) % 1.0
            sat = _draw(source, tables.RANDOM_SATURATION)
            light = _draw(source, tables.RANDOM_LIGHTNESS)

        bright_sat = min(1.0, sat + tables.RANDOM_BRIGHT_SATURATION)
        bright_light = min(
            tables.RANDOM_BRIGHT_LIGHTNESS_CAP, light + tables.RANDOM_BRIGHT_LIGHTNESS
        )
        _set_role(colors, role, HSL(hue, sat, light), HSL(hue, bright_sat, bright_light))

    return colors


def generate_pastel_colors(source):
    """Light background with muted, airy accents."""
    colors = {
        "background": tables.PASTEL_BACKGROUND,
        "foreground": tables.PASTEL_FOREGROUND,
        "selection_background": tables.PASTEL_SELECTION,
    }
    base_hue = source.random()
    half_spread = tables.PASTEL_HUE_SPREAD / 2

    for role, offset in zip(ROLES, tables.PASTEL_HUE_OFFSETS):
        if role == "black":
            colors["black"], colors["bright_black"] = tables.PASTEL_BLACK
            continue
        if role == "white":
            colors["white"], colors["bright_white"] = tables.PASTEL_WHITE
            continue

        hue = (base_hue + offset + source.random() * tables.PASTEL_HUE_SPREAD - half_spread) % 1.0
        sat = _draw(source, tables.PASTEL_SATURATION)
        light = _draw(source, tables.PASTEL_LIGHTNESS)
        bright = HSL(
            hue,
            min(1.0, sat + tables.PASTEL_BRIGHT_SATURATION),
            min(tables.PASTEL_BRIGHT_LIGHTNESS_CAP, light + tables.PASTEL_BRIGHT_LIGHTNESS),
        )
        _set_role(colors, role, HSL(hue, sat, light), bright)

    return colors


def generate_mono_colors(source):
    """Single hue, roles spread along a fixed lightness ramp."""
    base_hue = source.random()
    colors = {}
    for key, (sat, light) in (
        ("background", tables.MONO_BACKGROUND),
        ("foreground", tables.MONO_FOREGROUND),
        ("selection_background", tables.MONO_SELECTION),
    ):
        colors[key] = hsl_to_hex(HSL(base_hue, sat, light))

    for role, light in zip(ROLES, tables.MONO_LIGHTNESS_RAMP):
        bright_light = min(1.0, light + tables.MONO_BRIGHT_STEP)
        _set_role(
            colors,
            role,
            HSL(base_hue, tables.MONO_SATURATION, light),
            HSL(base_hue, tables.MONO_SATURATION, bright_light),
        )

    return colors


def generate_fixed_hue_colors(scheme, source):
    """Shared body for schemes with literal primaries and a fixed hue per role.

    Black and white come straight from the scheme's literal pairs; every other
    role draws its saturation and lightness from the scheme ranges.
    """
    colors = {
        "background": scheme.background,
        "foreground": scheme.foreground,
        "selection_background": scheme.selection_background,
    }

    for role, hue in zip(ROLES, scheme.hues):
        if role == "black":
            colors["black"], colors["bright_black"] = scheme.black
            continue
        if role == "white":
            colors["white"], colors["bright_white"] = scheme.white
            continue

        sat = min(1.0, _draw(source, scheme.saturation))
        light = _draw(source, scheme.lightness)
        bright_light = min(1.0, light + scheme.bright_lightness)
        _set_role(colors, role, HSL(hue, sat, light), HSL(hue, sat, bright_light))

    return colors


def generate_neon_colors(source):
    return generate_fixed_hue_colors(tables.NEON, source)


def generate_warm_colors(source):
    return generate_fixed_hue_colors(tables.WARM, source)


def generate_cool_colors(source):
    return generate_fixed_hue_colors(tables.COOL, source)


def generate_nature_colors(source):
    return generate_fixed_hue_colors(tables.NATURE, source)


def generate_cyberpunk_colors(source):
    return generate_fixed_hue_colors(tables.CYBERPUNK, source)
