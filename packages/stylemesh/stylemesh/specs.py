"""
stylemesh: Element option specs
-------------------------------
Pydantic models describing the options the element factories accept.

Behavior
- Accept plain mappings from the style layer (snake_case or the camelCase
  keys used by style sheets, e.g. ``styleId``/``is2D``/``colorType``) and
  normalize them before any template is built.
- Shape types are not checked against a fixed list; the registry is
  extensible, so unknown types are reported by the factory instead.
"""

from __future__ import annotations

__all__ = [
    "ColorObject",
    "ShapeSpec",
    "TextureSpec",
    "EffectSpec",
    "NodeMeshOptions",
    "NodeCreateOptions",
    "EdgeMeshOptions",
    "EdgeLineSpec",
    "EdgeStyleSpec",
    "ArrowHeadOptions",
    "validate_options",
]

from typing import Any, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.errors import StyleConfigError

M = TypeVar("M", bound=BaseModel)

_COMMON = ConfigDict(populate_by_name=True, extra="ignore")


class ColorObject(BaseModel):
    """
    Tagged color object.

    Parameters
    ----------
    colorType : str, optional
        ``"solid"``, ``"gradient"`` or ``"radial-gradient"``. Objects without
        a recognized tag validate but resolve to no color.
    value : str, optional
        Color string for solid colors.
    opacity : float, optional
        Explicit opacity in ``[0, 1]``.
    colors : list of str, optional
        Stops for gradient colors (kept, not resolved).
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    color_type: Optional[str] = Field(default=None, alias="colorType")
    value: Optional[str] = None
    opacity: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    colors: Optional[list[str]] = None


class ShapeSpec(BaseModel):
    """Shape type and optional explicit size."""

    model_config = _COMMON

    type: Optional[str] = None
    size: Optional[float] = Field(default=None, gt=0.0)


class TextureSpec(BaseModel):
    """Texture section; malformed color objects are kept as plain mappings."""

    model_config = _COMMON

    color: Union[str, ColorObject, dict[str, Any], None] = None


class EffectSpec(BaseModel):
    model_config = _COMMON

    wireframe: Optional[bool] = None


class NodeMeshOptions(BaseModel):
    """
    Per-node options that select the cache key.

    Parameters
    ----------
    style_id : str
        Identifier of the resolved style (alias ``styleId``).
    is_2d : bool
        Rendering mode (alias ``is2D``).
    size : float
        Default size, used when the shape does not carry one.

    Examples
    --------
    >>> NodeMeshOptions.model_validate({"styleId": "s", "is2D": True, "size": 1})
    """

    model_config = _COMMON

    style_id: str = Field(..., alias="styleId")
    is_2d: bool = Field(default=False, alias="is2D")
    size: float = Field(default=1.0, gt=0.0)

    @field_validator("style_id", mode="before")
    @classmethod
    def _coerce_style_id(cls, v):
        """Style ids are often integers in style sheets."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class NodeCreateOptions(BaseModel):
    """Shape, texture and effect sections of a node style."""

    model_config = _COMMON

    shape: Optional[ShapeSpec] = None
    texture: Optional[TextureSpec] = None
    effect: Optional[EffectSpec] = None


class EdgeMeshOptions(BaseModel):
    model_config = _COMMON

    style_id: str = Field(..., alias="styleId")
    width: float = Field(default=1.0, gt=0.0)
    color: str = "#FFFFFF"

    @field_validator("style_id", mode="before")
    @classmethod
    def _coerce_style_id(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class EdgeLineSpec(BaseModel):
    model_config = _COMMON

    type: str = "solid"
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)


class EdgeStyleSpec(BaseModel):
    model_config = _COMMON

    line: EdgeLineSpec = Field(default_factory=EdgeLineSpec)


class ArrowHeadOptions(BaseModel):
    """
    Arrowhead options.

    Parameters
    ----------
    type : str, optional
        Arrow type; None or ``"none"`` means no arrowhead.
    color : str
        Arrow color.
    size : float, default 1.0
        Size multiplier.
    opacity : float, default 1.0
        Opacity in ``[0, 1]``.
    """

    model_config = _COMMON

    type: Optional[str] = None
    color: str = "#FFFFFF"
    size: float = Field(default=1.0, gt=0.0)
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)


def validate_options(model: type[M], payload: Any, code: int, what: str) -> M:
    """
    Validate ``payload`` into ``model``, mapping failures to ``StyleConfigError``.

    Instances of ``model`` pass through untouched; None validates as an empty
    mapping; other pydantic models are re-validated from their dump.
    """
    if isinstance(payload, model):
        return payload
    if payload is None:
        payload = {}
    elif isinstance(payload, BaseModel):
        payload = payload.model_dump(by_alias=True, exclude_none=True)
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise StyleConfigError(f"[{code}] Invalid {what}: {e}") from e
