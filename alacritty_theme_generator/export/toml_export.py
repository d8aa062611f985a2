import logging
from datetime import datetime
from pathlib import Path

from ..schemes.tables import ROLES

logger = logging.getLogger(__name__)

THEME_TEMPLATE = """# {name}
# Generated theme: {name}
# Scheme: {scheme}
# Generated at: {generated_at}

[colors.primary]
background = "{background}"
foreground = "{foreground}"

[colors.cursor]
text = "{background}"
cursor = "{foreground}"

[colors.selection]
text = "{foreground}"
background = "{selection_background}"

[colors.normal]
{normal}

[colors.bright]
{bright}
"""


def _role_lines(colors, prefix=""):
    return "\n".join(f'{role} = "{colors[prefix + role]}"' for role in ROLES)


def create_theme_content(colors, scheme, name, generated_at=None):
    """Render a generated palette as an Alacritty TOML theme.

    Args:
        colors: Complete color mapping (background, foreground,
            selection_background and the normal/bright terminal roles)
        scheme: Scheme id recorded in the header comment
        name: Theme name recorded in the header comment
        generated_at: Timestamp for the header, defaults to now

    Returns:
        The theme file text

    Raises:
        KeyError: if a required color role is missing
    """
    generated_at = generated_at or datetime.now()
    return THEME_TEMPLATE.format(
        name=name,
        scheme=scheme,
        generated_at=generated_at.strftime("%Y-%m-%d %H:%M:%S"),
        background=colors["background"],
        foreground=colors["foreground"],
        selection_background=colors["selection_background"],
        normal=_role_lines(colors),
        bright=_role_lines(colors, prefix="bright_"),
    )


def save_theme(content, path):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.debug("wrote theme %s", path)
    return path
