from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


def write_manifest(directory: Path, data: dict[str, Any] | str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "package.json"
    text = data if isinstance(data, str) else json.dumps(data)
    path.write_text(text, encoding="utf-8")
    return path


def write_file(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def manifest():
    return write_manifest


@pytest.fixture
def source():
    return write_file


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("RSC_SCANNER_CONFIG", raising=False)
    monkeypatch.delenv("RSC_SCANNER_WARN_ONLY", raising=False)
