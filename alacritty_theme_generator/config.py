"""
Generator settings: where themes are written and which defaults the CLI uses.

Precedence, lowest first: built-in defaults, the JSON settings file,
the ALACRITTY_THEMES_DIR environment variable, then CLI flags.
"""

import json
import logging
import os
import sys
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "alacritty-colors.json"
THEMES_DIR_ENV = "ALACRITTY_THEMES_DIR"


def alacritty_config_dir():
    home = Path.home()
    if sys.platform.startswith("win"):
        return home / "AppData" / "Roaming" / "alacritty"
    return home / ".config" / "alacritty"


def default_config_path():
    return alacritty_config_dir() / CONFIG_FILE_NAME


@dataclass(frozen=True)
class GeneratorConfig:
    themes_dir: Path
    default_scheme: str = "random"
    min_contrast: float | None = None

    def theme_path(self, name):
        return Path(self.themes_dir) / f"{name}.toml"

    def to_dict(self):
        data = asdict(self)
        data["themes_dir"] = str(self.themes_dir)
        return data


def _defaults():
    return GeneratorConfig(themes_dir=alacritty_config_dir() / "themes")


def load_config(path=None):
    """Load settings, falling back to defaults when the file does not exist.

    Raises:
        ConfigError: if the file exists but is not a UTF-8 JSON object, or a
            setting has the wrong type.
    """
    config = _defaults()
    path = Path(path) if path is not None else default_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigError(f"failed to parse config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"config file {path} must contain a JSON object")

        known = {f.name for f in fields(GeneratorConfig)}
        overrides = {k: v for k, v in data.items() if k in known and v not in (None, "")}
        for key in ("themes_dir", "default_scheme"):
            if key in overrides and not isinstance(overrides[key], str):
                raise ConfigError(f"{key} must be a string in {path}")
        if "themes_dir" in overrides:
            overrides["themes_dir"] = Path(overrides["themes_dir"]).expanduser()
        if "min_contrast" in overrides:
            try:
                overrides["min_contrast"] = float(overrides["min_contrast"])
            except (TypeError, ValueError) as e:
                raise ConfigError(f"min_contrast must be a number in {path}") from e
        config = replace(config, **overrides)
        logger.debug("loaded config from %s", path)

    env_dir = os.environ.get(THEMES_DIR_ENV)
    if env_dir:
        config = replace(config, themes_dir=Path(env_dir).expanduser())

    return config
