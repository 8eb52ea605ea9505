from pathlib import Path

import pytest

from stylemesh.core.config import ENV_VAR, RenderConfig, load_render_config
from stylemesh.core.errors import StyleConfigError, StyleIOError
from stylemesh.core.utils import deep_merge_dicts, load_yaml_file


def test_package_defaults():
    """Defaults come from the packaged render.yaml."""
    config = load_render_config(force_reload=True)

    assert isinstance(config, RenderConfig)
    assert config.templates.hidden_position == (0.0, -10000.0, 0.0)
    assert config.materials.lit_emissive_scale == 0.2
    assert config.materials.default_name == "defaultMaterial"


def test_config_is_cached():
    assert load_render_config() is load_render_config()


def test_user_config_overrides_default(tmp_path):
    user_dir = Path.home() / ".stylemesh"
    user_dir.mkdir(parents=True)
    with open(user_dir / "config.yaml", "w") as f:
        f.write("materials:\n  lit_emissive_scale: 0.1\n")

    config = load_render_config(force_reload=True)
    assert config.materials.lit_emissive_scale == 0.1
    # untouched sections keep their defaults
    assert config.materials.default_name == "defaultMaterial"


def test_env_config_overrides_user(monkeypatch, write_yaml):
    path = write_yaml("env.yaml", {"materials": {"default_name": "fromEnv"}})
    monkeypatch.setenv(ENV_VAR, str(path))

    config = load_render_config(force_reload=True)
    assert config.materials.default_name == "fromEnv"


def test_broken_env_config_is_skipped(monkeypatch, tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("materials: [unclosed\n")
    monkeypatch.setenv(ENV_VAR, str(bad))

    config = load_render_config(force_reload=True)
    assert config.materials.default_name == "defaultMaterial"


def test_explicit_path_is_not_cached(write_yaml):
    path = write_yaml("explicit.yaml", {"templates": {"hidden_position": [0, -1, 0]}})

    explicit = load_render_config(config_path=path)
    assert explicit.templates.hidden_position == (0.0, -1.0, 0.0)
    assert load_render_config().templates.hidden_position == (0.0, -10000.0, 0.0)


def test_missing_explicit_path(tmp_path):
    with pytest.raises(StyleConfigError, match=r"\[502\]"):
        load_render_config(config_path=tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "data",
    [
        {"templates": {"instance_name_format": "instance-{index}"}},
        {"materials": {"lit_emissive_scale": 3}},
        {"unknown_section": {}},
    ],
)
def test_invalid_config(write_yaml, data):
    with pytest.raises(StyleConfigError, match=r"\[503\]"):
        load_render_config(config_path=write_yaml("invalid.yaml", data))


def test_load_yaml_file_errors(tmp_path):
    with pytest.raises(StyleIOError, match=r"\[100\]"):
        load_yaml_file(tmp_path / "missing.yaml")

    listing = tmp_path / "list.yaml"
    listing.write_text("- a\n- b\n")
    with pytest.raises(StyleConfigError, match=r"\[501\]"):
        load_yaml_file(listing)

    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert load_yaml_file(empty) == {}


def test_deep_merge():
    base = {"a": {"x": 1, "y": 2}, "b": 1}
    merged = deep_merge_dicts(base, {"a": {"y": 3}, "c": 4})

    assert merged == {"a": {"x": 1, "y": 3}, "b": 1, "c": 4}
    assert base == {"a": {"x": 1, "y": 2}, "b": 1}
