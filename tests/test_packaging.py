"""Tests for the project metadata."""

from pathlib import Path
import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


class TestProjectMetadata:

    def test_declares_runtime_stack(self):
        with PYPROJECT.open("rb") as f:
            project = tomllib.load(f)["project"]
        assert {"numpy", "numba", "Pillow", "pygame"} <= set(project["dependencies"])
        assert project["scripts"]["raytrace"] == "raytracing.main:main"

    def test_readme_points_at_project_file(self):
        with PYPROJECT.open("rb") as f:
            project = tomllib.load(f)["project"]
        readme = project.get("readme")
        if readme is not None:
            assert (PYPROJECT.parent / readme).is_file()
            assert readme.lower().startswith("readme")
