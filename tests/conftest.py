import random
import re

import pytest

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


class ConstantSource:
    """Randomness source that always returns the same draw."""

    def __init__(self, value=0.5):
        self.value = value

    def random(self):
        return self.value

    def randrange(self, n):
        return min(int(self.value * n), n - 1)


@pytest.fixture
def seeded():
    return random.Random(1234)


@pytest.fixture
def midpoint():
    return ConstantSource(0.5)


@pytest.fixture
def missing_config(tmp_path):
    return tmp_path / "no-such-config.json"


@pytest.fixture(autouse=True)
def _no_themes_dir_env(monkeypatch):
    monkeypatch.delenv("ALACRITTY_THEMES_DIR", raising=False)
