import json
from pathlib import Path

import pytest

from alacritty_theme_generator.config import (
    THEMES_DIR_ENV,
    GeneratorConfig,
    alacritty_config_dir,
    load_config,
)
from alacritty_theme_generator.errors import ConfigError


def test_defaults_when_file_missing(missing_config):
    config = load_config(missing_config)
    assert config.themes_dir == alacritty_config_dir() / "themes"
    assert config.default_scheme == "random"
    assert config.min_contrast is None


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "themes_dir": str(tmp_path / "themes"),
                "default_scheme": "nord",
                "min_contrast": "4.5",
                "current_theme": "ignored",
            }
        ),
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.themes_dir == tmp_path / "themes"
    assert config.default_scheme == "nord"
    assert config.min_contrast == 4.5


def test_environment_overrides_file(tmp_path, monkeypatch, missing_config):
    monkeypatch.setenv(THEMES_DIR_ENV, str(tmp_path / "env-themes"))
    assert load_config(missing_config).themes_dir == tmp_path / "env-themes"


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_non_object_raises(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_bad_min_contrast_raises(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"min_contrast": "high"}), encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_non_utf8_file_raises(tmp_path):
    path = tmp_path / "settings.json"
    path.write_bytes(b"\xff")
    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize(
    "data",
    [
        pytest.param({"themes_dir": 5}, id="themes_dir-number"),
        pytest.param({"themes_dir": ["a", "b"]}, id="themes_dir-list"),
        pytest.param({"default_scheme": 3}, id="default_scheme-number"),
    ],
)
def test_wrong_setting_type_raises(tmp_path, data):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_theme_path():
    config = GeneratorConfig(themes_dir=Path("/tmp/themes"))
    assert config.theme_path("glow") == Path("/tmp/themes/glow.toml")
    assert config.to_dict()["themes_dir"] == str(Path("/tmp/themes"))
