"""Shared helpers for yamlmatrix unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest


def write_fixture(root: Path, test_id: str, files: dict[str, str]) -> Path:
    """Create ``root/test_id`` holding *files* (name -> content)."""
    test_dir = root / test_id
    test_dir.mkdir(parents=True)
    for name, content in files.items():
        (test_dir / name).write_text(content, encoding="utf-8")
    return test_dir


@pytest.fixture
def matrix_dir(tmp_path: Path) -> Path:
    """An empty matrix root directory."""
    root = tmp_path / "matrix"
    root.mkdir()
    return root


@pytest.fixture
def make_fixture(matrix_dir: Path):
    """Factory writing a fixture directory under ``matrix_dir``."""

    def _make(test_id: str, files: dict[str, str]) -> Path:
        return write_fixture(matrix_dir, test_id, files)

    return _make
