from .html_preview import create_html_preview
from .image_preview import create_image_preview
from .json_export import export_json, load_palette_from_json
from .toml_export import create_theme_content, save_theme

__all__ = [
    "create_html_preview",
    "create_image_preview",
    "create_theme_content",
    "export_json",
    "load_palette_from_json",
    "save_theme",
]
