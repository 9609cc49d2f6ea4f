from __future__ import annotations

from pathlib import Path
from textwrap import dedent
from typing import Callable, Iterator

import pytest

from rotlist.config.loader import get_settings, use_settings
from rotlist.rotation.rotating_list import RotatingList


@pytest.fixture(autouse=True)
def restore_settings() -> Iterator[None]:
    previous = get_settings()
    yield
    use_settings(previous)


@pytest.fixture
def five() -> RotatingList[int]:
    return RotatingList.new([1, 2, 3, 4, 5])


@pytest.fixture
def letters() -> RotatingList[str]:
    return RotatingList.new(["a", "b", "c", "d", "e"])


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(dedent(content), encoding="utf-8")
        return path

    return _write
