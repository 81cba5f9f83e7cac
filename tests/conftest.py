# tests/conftest.py

import os

import pytest
from pathlib import Path


@pytest.fixture
def write_csv(tmp_path: Path):
    """Factory fixture: write_csv("name.csv", "key,value\\n...") -> Path."""
    def _write(filename: str, content: str) -> Path:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch):
    """Keeps config loading away from the real home directory, cwd and environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("kvcsv.config.loaders.USER_CONFIG_FILE", tmp_path / "user" / "kvcsv.toml")
    for name in list(os.environ):
        if name.startswith("KVCSV_"):
            monkeypatch.delenv(name)
    return tmp_path
