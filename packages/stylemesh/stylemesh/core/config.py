"""stylemesh: Render Configuration
--------------------------------

Pydantic models for render-wide settings and the loader that assembles them
from an override chain of YAML files.

Public API
----------
``RenderConfig`` : Root configuration model
``TemplateSettings``, ``MaterialSettings``, ``EdgeSettings`` : Nested sections
``load_render_config`` : Load (and cache) the merged configuration

Notes
-----
Search order (later overrides earlier):

1. Package default (``stylemesh/core/render.yaml``)
2. ``~/.stylemesh/config.yaml`` (user-specific)
3. ``STYLEMESH_CONFIG`` environment variable
4. Explicitly provided ``config_path``
"""

from __future__ import annotations

import importlib.resources as ilr
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import StyleConfigError, StyleMeshError, get_logger
from .utils import deep_merge_dicts, load_yaml_file

__all__ = [
    "RenderConfig",
    "TemplateSettings",
    "MaterialSettings",
    "EdgeSettings",
    "load_render_config",
]

logger = get_logger()

ENV_VAR = "STYLEMESH_CONFIG"

_RENDER_CONFIG_CACHE: RenderConfig | None = None


class TemplateSettings(BaseModel):
    """Placement and naming of cached master templates."""

    model_config = ConfigDict(extra="forbid")

    hidden_position: tuple[float, float, float] = Field(
        default=(0.0, -10000.0, 0.0),
        description="Where hidden templates are parked, far outside any graph.",
    )
    instance_name_format: str = Field(
        default="{key}-instance-{index}",
        description="Format for instance names; receives ``key`` and ``index``.",
    )

    @field_validator("instance_name_format")
    @classmethod
    def validate_name_format(cls, v: str) -> str:
        """Require the cache key placeholder so instance names stay traceable."""
        if "{key}" not in v:
            raise ValueError("instance_name_format must contain '{key}'")
        return v


class MaterialSettings(BaseModel):
    """Defaults applied by the material builder."""

    model_config = ConfigDict(extra="forbid")

    default_name: str = Field(default="defaultMaterial")
    lit_emissive_scale: float = Field(
        default=0.2,
        ge=0.0,
        le=1.0,
        description="Fraction of the diffuse color added as emissive in 3D mode "
        "so shadowed faces keep a minimum brightness.",
    )


class EdgeSettings(BaseModel):
    """Geometry of the shared unit edge segment."""

    model_config = ConfigDict(extra="forbid")

    unit_points: tuple[float, float, float, float, float, float] = Field(
        default=(0.0, 0.0, -0.5, 0.0, 0.0, 0.5),
        description="Start and end of the unit line that edge instances scale.",
    )


class RenderConfig(BaseModel):
    """Render-wide configuration parameters.

    Attributes
    ----------
    templates : TemplateSettings
        Hidden template placement and instance naming.
    materials : MaterialSettings
        Material naming and lit-mode emissive floor.
    edges : EdgeSettings
        Unit edge geometry.

    """

    model_config = ConfigDict(extra="forbid")

    templates: TemplateSettings = Field(default_factory=TemplateSettings)
    materials: MaterialSettings = Field(default_factory=MaterialSettings)
    edges: EdgeSettings = Field(default_factory=EdgeSettings)


def _merge_optional(config_dict: dict, path: Path, label: str) -> dict:
    if not path.exists():
        return config_dict
    try:
        return deep_merge_dicts(config_dict, load_yaml_file(path))
    except StyleMeshError as e:
        logger.warning(f"Failed to load {label} config {path}: {e}")
        return config_dict


def load_render_config(
    *, force_reload: bool = False, config_path: str | Path | None = None
) -> RenderConfig:
    """Load render configuration with override chain.

    Parameters
    ----------
    force_reload : bool
        If True, ignore cache and reload
    config_path : str or Path, optional
        Path to a specific config file overriding everything else. Unlike the
        implicit sources, a missing or broken explicit file is an error.

    Returns
    -------
    RenderConfig
        Loaded configuration

    Raises
    ------
    StyleConfigError
        - [502] Explicit config cannot be loaded.
        - [503] Merged configuration fails validation.

    """
    global _RENDER_CONFIG_CACHE

    if _RENDER_CONFIG_CACHE is not None and not force_reload and config_path is None:
        return _RENDER_CONFIG_CACHE

    # 1. Package default
    try:
        default_path = Path(str(ilr.files("stylemesh.core").joinpath("render.yaml")))
        config_dict = load_yaml_file(default_path)
    except StyleMeshError:
        logger.warning("Could not load default render.yaml from package")
        config_dict = {}

    # 2. User config
    config_dict = _merge_optional(
        config_dict, Path.home() / ".stylemesh" / "config.yaml", "user"
    )

    # 3. Environment variable
    env_path = os.environ.get(ENV_VAR)
    if env_path:
        config_dict = _merge_optional(config_dict, Path(env_path), "env")

    # 4. Explicit path
    if config_path:
        try:
            explicit_dict = load_yaml_file(Path(config_path))
        except StyleMeshError as e:
            raise StyleConfigError(
                f"[502] Failed to load explicit config {config_path}: {e}"
            ) from e
        config_dict = deep_merge_dicts(config_dict, explicit_dict)

    try:
        config = RenderConfig(**config_dict)
    except ValidationError as e:
        raise StyleConfigError(f"[503] Invalid render configuration: {e}") from e

    if config_path is None:
        _RENDER_CONFIG_CACHE = config
    return config
