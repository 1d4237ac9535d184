"""Shared fixtures for pyini tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

SAMPLE = """\
; sample configuration
[Section1]
var1 = 10
[Section2]
var2 = hello ; a greeting
"""


@pytest.fixture
def write_ini(tmp_path: Path) -> Callable[..., Path]:
    def _write(text: str, name: str = "config.ini", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return path

    return _write


@pytest.fixture
def sample_path(write_ini: Callable[..., Path]) -> Path:
    return write_ini(SAMPLE)
