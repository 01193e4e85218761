from __future__ import annotations

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_only_sumtree_is_installed() -> None:
    with open(REPO_ROOT / "pyproject.toml", "rb") as f:
        project = tomllib.load(f)

    assert project["tool"]["setuptools"]["py-modules"] == ["sumtree"]
    # benchmark scripts stay at the repo root, reached through pytest's pythonpath
    assert "." in project["tool"]["pytest"]["ini_options"]["pythonpath"]
    assert (REPO_ROOT / "config.py").exists()
    assert (REPO_ROOT / "run.py").exists()
