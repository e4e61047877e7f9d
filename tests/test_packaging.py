from __future__ import annotations

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

ROOT = Path(__file__).resolve().parents[1]


def test_single_entry_point_and_no_readme_key():
    project = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))["project"]
    assert project["scripts"] == {"trollpad": "trollpad.main:main"}
    assert "gui-scripts" not in project
    assert "readme" not in project
