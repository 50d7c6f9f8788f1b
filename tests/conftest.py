"""Pytest fixtures for tests."""

import json
from pathlib import Path

import pytest

from huepicker.codec import ColorCache
from huepicker.core import PickerStateMachine
from huepicker.models import HsvColor


class DictResolver:
    """Named-color resolver backed by a plain dict."""

    def __init__(self, names: dict[str, str]):
        self.names = names
        self.calls: list[str] = []

    def resolve(self, name: str) -> str | None:
        self.calls.append(name)
        return self.names.get(name.strip().lower())


@pytest.fixture
def cache():
    """Fresh, private parse cache."""
    return ColorCache(maxsize=64)


@pytest.fixture
def make_resolver():
    """Factory for dict-backed resolvers."""
    return DictResolver


@pytest.fixture
def resolver(make_resolver):
    """Resolver knowing a single brand color."""
    return make_resolver({"brand": "#123456"})


@pytest.fixture
def picker(cache):
    """Picker seeded with opaque red."""
    return PickerStateMachine("#ff0000", cache=cache)


@pytest.fixture
def hue_picker(cache):
    """Picker seeded with a mid-saturation, mid-value blue (h=200)."""
    return PickerStateMachine(HsvColor(h=200, s=0.5, v=0.5), cache=cache)


@pytest.fixture
def write_config(tmp_path: Path):
    """Factory writing a config file and returning its path."""

    def _write(content, name: str = "config.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
