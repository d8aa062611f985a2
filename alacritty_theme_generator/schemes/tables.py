"""Static color tables, one block per scheme.

Hue values are fractions of a full turn. ``(base, spread)`` pairs describe a
uniform draw ``base + random() * spread``.
"""

from collections import namedtuple

ROLES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")
BRIGHT_ROLES = tuple(f"bright_{role}" for role in ROLES)
PRIMARY_KEYS = ("background", "foreground", "selection_background")
ALL_KEYS = PRIMARY_KEYS + ROLES + BRIGHT_ROLES

FixedHueScheme = namedtuple(
    "FixedHueScheme",
    [
        "background",
        "foreground",
        "selection_background",
        "hues",
        "saturation",
        "lightness",
        "bright_lightness",
        "black",
        "white",
    ],
)

BasePaletteScheme = namedtuple(
    "BasePaletteScheme",
    [
        "palette",
        "hue_spread",
        "saturation_spread",
        "lightness_spread",
        "bright_lightness",
        "bright_saturation",
    ],
)

# --- random ---------------------------------------------------------------
RANDOM_HUE_OFFSETS = (0.0, 0.0, 0.33, 0.16, 0.66, 0.83, 0.5, 0.0)
RANDOM_HARMONY = 0.618
RANDOM_HUE_SPREAD = 0.05
RANDOM_BACKGROUND = (0.15, 0.2)  # saturation, max lightness
RANDOM_FOREGROUND = (0.1, 0.8, 0.2)  # saturation, lightness base, spread
RANDOM_SELECTION = (0.4, 0.25)  # saturation, lightness
RANDOM_SATURATION = (0.7, 0.3)
RANDOM_LIGHTNESS = (0.45, 0.25)
RANDOM_BLACK_LIGHTNESS = (0.0, 0.15)
RANDOM_WHITE_LIGHTNESS = (0.85, 0.15)
RANDOM_NEUTRAL_SATURATION = 0.1
RANDOM_BRIGHT_SATURATION = 0.1
RANDOM_BRIGHT_LIGHTNESS = 0.25
RANDOM_BRIGHT_LIGHTNESS_CAP = 0.9

# --- pastel ---------------------------------------------------------------
PASTEL_BACKGROUND = "#faf7f4"
PASTEL_FOREGROUND = "#5c5c5c"
PASTEL_SELECTION = "#e8e0db"
PASTEL_HUE_OFFSETS = (0.0, 0.0, 0.25, 0.15, 0.6, 0.8, 0.5, 0.0)
PASTEL_HUE_SPREAD = 0.1
PASTEL_SATURATION = (0.3, 0.2)
PASTEL_LIGHTNESS = (0.6, 0.15)
PASTEL_BRIGHT_SATURATION = 0.1
PASTEL_BRIGHT_LIGHTNESS = 0.15
PASTEL_BRIGHT_LIGHTNESS_CAP = 0.85
# Pastel themes are light, so "black" is a pale tone and "white" a dark one.
PASTEL_BLACK = ("#f0ede8", "#d4ccc2")
PASTEL_WHITE = ("#928374", "#7c6f64")

# --- mono -----------------------------------------------------------------
MONO_BACKGROUND = (0.05, 0.08)  # saturation, lightness
MONO_FOREGROUND = (0.05, 0.85)
MONO_SELECTION = (0.1, 0.2)
MONO_SATURATION = 0.1
MONO_LIGHTNESS_RAMP = (0.1, 0.2, 0.35, 0.45, 0.55, 0.65, 0.75, 0.9)
MONO_BRIGHT_STEP = 0.1

# --- fixed-hue schemes ----------------------------------------------------
NEON = FixedHueScheme(
    background="#0a0a0a",
    foreground="#00ff00",
    selection_background="#333333",
    hues=(0.0, 0.0, 0.33, 0.16, 0.66, 0.83, 0.5, 0.0),
    saturation=(1.0, 0.0),
    lightness=(0.5, 0.3),
    bright_lightness=0.2,
    black=("#1a1a1a", "#333333"),
    white=("#ffffff", "#ffffff"),
)

WARM = FixedHueScheme(
    background="#2d1b12",
    foreground="#f4e8d0",
    selection_background="#4a3426",
    hues=(0.0, 0.0, 0.08, 0.15, 0.05, 0.02, 0.12, 0.0),
    saturation=(0.6, 0.3),
    lightness=(0.4, 0.3),
    bright_lightness=0.2,
    black=("#1a0f08", "#3d2317"),
    white=("#f4e8d0", "#fff8e7"),
)

COOL = FixedHueScheme(
    background="#0f1419",
    foreground="#e6f1ff",
    selection_background="#1f2937",
    hues=(0.0, 0.95, 0.4, 0.45, 0.6, 0.75, 0.5, 0.0),
    saturation=(0.6, 0.3),
    lightness=(0.4, 0.3),
    bright_lightness=0.2,
    black=("#0b0e14", "#1f2328"),
    white=("#e6f1ff", "#ffffff"),
)

NATURE = FixedHueScheme(
    background="#1a2318",
    foreground="#e8f5e8",
    selection_background="#2d3a2b",
    hues=(0.0, 0.02, 0.25, 0.12, 0.55, 0.8, 0.45, 0.0),
    saturation=(0.5, 0.3),
    lightness=(0.4, 0.2),
    bright_lightness=0.15,
    black=("#0f1a0e", "#2d3a2b"),
    white=("#e8f5e8", "#f0fff0"),
)

CYBERPUNK = FixedHueScheme(
    background="#0d001a",
    foreground="#00ff41",
    selection_background="#330066",
    hues=(0.0, 0.95, 0.33, 0.16, 0.66, 0.83, 0.5, 0.0),
    saturation=(0.9, 0.1),
    lightness=(0.5, 0.2),
    bright_lightness=0.2,
    black=("#1a0033", "#330066"),
    white=("#00ff41", "#66ff99"),
)

# --- base palettes --------------------------------------------------------
DRACULA = BasePaletteScheme(
    palette={
        "background": "#282a36",
        "foreground": "#f8f8f2",
        "selection_background": "#44475a",
        "black": "#21222c",
        "red": "#ff5555",
        "green": "#50fa7b",
        "yellow": "#f1fa8c",
        "blue": "#bd93f9",
        "magenta": "#ff79c6",
        "cyan": "#8be9fd",
        "white": "#f8f8f2",
    },
    hue_spread=0.05,
    saturation_spread=0.1,
    lightness_spread=0.05,
    bright_lightness=0.15,
    bright_saturation=0.0,
)

NORD = BasePaletteScheme(
    palette={
        "background": "#2e3440",
        "foreground": "#d8dee9",
        "selection_background": "#434c5e",
        "black": "#3b4252",
        "red": "#bf616a",
        "green": "#a3be8c",
        "yellow": "#ebcb8b",
        "blue": "#81a1c1",
        "magenta": "#b48ead",
        "cyan": "#88c0d0",
        "white": "#e5e9f0",
    },
    hue_spread=0.03,
    saturation_spread=0.05,
    lightness_spread=0.03,
    bright_lightness=0.1,
    bright_saturation=0.0,
)

SOLARIZED = BasePaletteScheme(
    palette={
        "background": "#002b36",
        "foreground": "#839496",
        "selection_background": "#073642",
        "black": "#073642",
        "red": "#dc322f",
        "green": "#859900",
        "yellow": "#b58900",
        "blue": "#268bd2",
        "magenta": "#d33682",
        "cyan": "#2aa198",
        "white": "#eee8d5",
    },
    hue_spread=0.02,
    saturation_spread=0.03,
    lightness_spread=0.02,
    bright_lightness=0.12,
    bright_saturation=0.0,
)

GRUVBOX = BasePaletteScheme(
    palette={
        "background": "#282828",
        "foreground": "#ebdbb2",
        "selection_background": "#3c3836",
        "black": "#282828",
        "red": "#cc241d",
        "green": "#98971a",
        "yellow": "#d79921",
        "blue": "#458588",
        "magenta": "#b16286",
        "cyan": "#689d6a",
        "white": "#a89984",
    },
    hue_spread=0.04,
    saturation_spread=0.08,
    lightness_spread=0.04,
    bright_lightness=0.15,
    bright_saturation=0.05,
)
