"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add package path to sys.path
packages_dir = Path(__file__).parent.parent / "packages"
sys.path.insert(0, str(packages_dir / "stylemesh"))

from stylemesh.cache import TemplateCache  # noqa: E402
from stylemesh.core.config import ENV_VAR, load_render_config  # noqa: E402
from stylemesh.core.registry import ShapeRegistry  # noqa: E402
from stylemesh.meshes import EdgeMeshFactory, NodeMeshFactory  # noqa: E402
from stylemesh.shapes import create_shape_registry  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and environment configs out of every test."""
    monkeypatch.delenv(ENV_VAR, raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path / "home")
    load_render_config(force_reload=True)
    yield
    load_render_config(force_reload=True)


@pytest.fixture
def cache():
    """Fresh, empty template cache."""
    return TemplateCache()


@pytest.fixture
def empty_registry():
    return ShapeRegistry("shape")


@pytest.fixture
def shape_registry():
    """Fresh registry preloaded with the built-in shapes."""
    return create_shape_registry()


@pytest.fixture
def node_factory(shape_registry):
    return NodeMeshFactory(registry=shape_registry)


@pytest.fixture
def edge_factory():
    return EdgeMeshFactory()


@pytest.fixture
def write_yaml(tmp_path):
    """Write a mapping to a YAML file in the temp directory and return its path."""
    import yaml

    def _write(name, data):
        path = tmp_path / name
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f)
        return path

    return _write
