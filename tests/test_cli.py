import json

import pytest
from PIL import Image

from alacritty_theme_generator.cli import main
from alacritty_theme_generator.color import color_contrast, hex_to_rgb
from alacritty_theme_generator.config import THEMES_DIR_ENV
from alacritty_theme_generator.schemes.tables import ALL_KEYS

# Keys ensure_palette_contrast leaves alone or the report exempts.
CONTRAST_EXEMPT = {"background", "selection_background", "black", "bright_black"}


def run(argv, missing_config):
    main(argv + ["--config", str(missing_config)])


def test_generate_writes_all_exports(tmp_path, missing_config, capsys):
    run(
        [
            "--scheme", "neon",
            "--name", "glow",
            "-o", str(tmp_path),
            "--json", "--html", "--png",
            "--seed", "7",
        ],
        missing_config,
    )  # fmt: skip

    toml_text = (tmp_path / "glow.toml").read_text(encoding="utf-8")
    assert "# Scheme: neon" in toml_text
    assert 'background = "#0a0a0a"' in toml_text

    data = json.loads((tmp_path / "glow.json").read_text(encoding="utf-8"))
    assert data["_name"] == "glow"
    assert data["foreground"] == "#00ff00"

    assert (tmp_path / "glow.html").exists()
    with Image.open(tmp_path / "glow.png") as image:
        assert image.format == "PNG"

    out = capsys.readouterr().out
    assert "Generated theme: glow" in out


def test_seed_is_reproducible(tmp_path, missing_config):
    for sub in ("a", "b"):
        run(["-s", "gruvbox", "-n", "t", "-o", str(tmp_path / sub), "--seed", "3"], missing_config)
    strip = lambda p: [l for l in p.read_text().splitlines() if not l.startswith("#")]  # noqa: E731
    assert strip(tmp_path / "a" / "t.toml") == strip(tmp_path / "b" / "t.toml")


def test_random_name_carries_variant(tmp_path, missing_config):
    run(["-s", "cool", "--light", "-o", str(tmp_path)], missing_config)
    written = list(tmp_path.glob("*.toml"))
    assert len(written) == 1
    assert written[0].name.startswith("cool_light_")
    assert 'foreground = "#2a2a2a"' in written[0].read_text()


def test_default_output_comes_from_environment(tmp_path, monkeypatch, missing_config):
    monkeypatch.setenv(THEMES_DIR_ENV, str(tmp_path / "themes"))
    run(["-s", "mono", "-n", "grey"], missing_config)
    assert (tmp_path / "themes" / "grey.toml").exists()


def test_output_flag_overrides_config_dir(tmp_path):
    config = tmp_path / "settings.json"
    config.write_text(json.dumps({"themes_dir": str(tmp_path / "from-config")}))
    main(["-s", "nord", "-n", "frost", "-o", str(tmp_path / "out"), "--config", str(config)])
    assert (tmp_path / "out" / "frost.toml").exists()
    assert not (tmp_path / "from-config").exists()


@pytest.mark.parametrize("scheme", ["nature", "mono", "solarized"])
def test_min_contrast_applied(tmp_path, missing_config, capsys, scheme):
    run(
        [
            "-s", scheme,
            "-n", "leaf",
            "-o", str(tmp_path),
            "--min-contrast", "3",
            "--seed", "11",
            "--json", "--report",
        ],
        missing_config,
    )  # fmt: skip
    out = capsys.readouterr().out
    assert "READABILITY REPORT" in out
    assert "FAIL" not in out

    data = json.loads((tmp_path / "leaf.json").read_text(encoding="utf-8"))
    background = hex_to_rgb(data["background"])
    for key in set(ALL_KEYS) - CONTRAST_EXEMPT:
        ratio = color_contrast(hex_to_rgb(data[key]), background)
        assert ratio >= 3, (key, data[key], ratio)


def test_dark_and_light_conflict(tmp_path, missing_config, capsys):
    with pytest.raises(SystemExit) as exc:
        run(["--dark", "--light", "-o", str(tmp_path)], missing_config)
    assert exc.value.code == 2
    assert "cannot specify both --dark and --light" in capsys.readouterr().err


def test_unknown_scheme_exits_with_error(tmp_path, missing_config, capsys):
    with pytest.raises(SystemExit) as exc:
        run(["-s", "bogus", "-o", str(tmp_path)], missing_config)
    assert exc.value.code == 1
    assert "unknown color scheme: bogus" in capsys.readouterr().err
    assert not list(tmp_path.iterdir())


@pytest.mark.parametrize(
    "content",
    [
        pytest.param(b"\xff", id="not-utf8"),
        pytest.param(b'{"themes_dir": 5}', id="themes_dir-number"),
        pytest.param(b"{broken", id="not-json"),
    ],
)
def test_bad_config_exits_with_error(tmp_path, capsys, content):
    config = tmp_path / "settings.json"
    config.write_bytes(content)
    with pytest.raises(SystemExit) as exc:
        main(["-s", "neon", "-o", str(tmp_path / "out"), "--config", str(config)])
    assert exc.value.code == 1
    assert capsys.readouterr().err.startswith("Error: ")
    assert not (tmp_path / "out").exists()


def test_list_schemes(capsys):
    main(["--list-schemes"])
    out = capsys.readouterr().out
    for name in ("random", "cyberpunk", "gruvbox"):
        assert name in out
