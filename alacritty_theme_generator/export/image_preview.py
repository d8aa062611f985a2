import numpy as np
from PIL import Image

from ..color import hex_to_rgb
from ..schemes.tables import BRIGHT_ROLES, PRIMARY_KEYS, ROLES

GRID_COLUMNS = len(ROLES)


def swatch_rows():
    """Swatch layout: primary colors, then the normal and bright terminal rows."""
    return [list(PRIMARY_KEYS), list(ROLES), list(BRIGHT_ROLES)]


def build_swatch_array(colors, swatch=48):
    """Build an RGB uint8 array with one square per color.

    Cells without a color (the tail of the primary row) are filled with the
    theme background.
    """
    rows = swatch_rows()
    background = hex_to_rgb(colors["background"])
    pixels = np.empty((len(rows) * swatch, GRID_COLUMNS * swatch, 3), dtype=np.uint8)
    pixels[:, :] = background

    for row_index, keys in enumerate(rows):
        top = row_index * swatch
        for col_index, key in enumerate(keys):
            left = col_index * swatch
            pixels[top : top + swatch, left : left + swatch] = hex_to_rgb(colors[key])

    return pixels


def create_image_preview(colors, output_path, swatch=48):
    """Save a PNG swatch grid of a generated theme."""
    if swatch <= 0:
        raise ValueError(f"swatch size must be positive, got {swatch}")
    image = Image.fromarray(build_swatch_array(colors, swatch=swatch))
    image.save(output_path, format="PNG")
    return image.size
