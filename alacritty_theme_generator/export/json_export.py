import json

from ..color import is_valid_hex
from ..errors import InvalidHexFormatError
from ..schemes.tables import ALL_KEYS


def export_json(colors, filepath, scheme=None, name=None, variant=None):
    """Export a generated palette as JSON with metadata.

    Args:
        colors: The color mapping
        filepath: Output file path
        scheme: Scheme id the palette came from
        name: Theme name
        variant: "dark", "light" or None
    """
    ordered = [k for k in ALL_KEYS if k in colors]
    ordered += sorted(k for k in colors if k not in ALL_KEYS)
    data = {k: colors[k] for k in ordered}

    if scheme:
        data["_scheme"] = scheme
    if name:
        data["_name"] = name
    if variant:
        data["_variant"] = variant

    data["_note"] = (
        "19 colors: background/foreground/selection_background plus "
        "black/red/green/yellow/blue/magenta/cyan/white with bright_ variants"
    )

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def load_palette_from_json(json_path):
    """Load a color mapping back from a JSON export.

    Metadata keys (leading underscore) are skipped.

    Raises:
        InvalidHexFormatError: if a color value is not a ``#rrggbb`` string
    """
    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)

    colors = {}
    for key, value in data.items():
        if key.startswith("_"):
            continue
        if not is_valid_hex(value):
            raise InvalidHexFormatError(value)
        colors[key] = value.lower()

    return colors
