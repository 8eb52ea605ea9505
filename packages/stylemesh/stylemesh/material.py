"""stylemesh: Material Builder
----------------------------

Build the material descriptor attached to a master template.

Behavior
--------
- A resolved color lands on the emissive channel with lighting disabled in
  2D mode (flat color regardless of scene lights), and on the diffuse channel
  in 3D mode, with a small emissive floor so shadowed faces never go black.
- Wireframe defaults to False.
- Opacity is not part of the material; the element factories apply it as
  template visibility.
- The returned descriptor is frozen: any later assignment raises
  ``StyleMaterialError`` and leaves the value untouched, which keeps one
  descriptor safe to share across every instance of a template.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .color import NormalizedColor, resolve_color
from .core.config import RenderConfig, load_render_config
from .core.errors import StyleMaterialError

__all__ = [
    "MaterialDescriptor",
    "build_material",
]

LIT = "lit"
UNLIT = "unlit"


class MaterialDescriptor:
    """Lighting mode, colors and wireframe for one template.

    Parameters
    ----------
    name : str
        Material name.

    Attributes
    ----------
    diffuse_color : NormalizedColor or None
        Lit color; set in 3D mode.
    emissive_color : NormalizedColor or None
        Self-illumination; the visible color in 2D mode.
    disable_lighting : bool
        True for unlit (2D) materials.
    wireframe : bool
    """

    _FIELDS = ("name", "diffuse_color", "emissive_color", "disable_lighting", "wireframe")

    def __init__(self, name: str = "defaultMaterial") -> None:
        object.__setattr__(self, "_frozen", False)
        self.name = name
        self.diffuse_color: NormalizedColor | None = None
        self.emissive_color: NormalizedColor | None = None
        self.disable_lighting = False
        self.wireframe = False

    def __setattr__(self, attr: str, value: Any) -> None:
        if self._frozen:
            raise StyleMaterialError(
                f"[700] Material '{self.name}' is frozen; cannot set '{attr}'"
            )
        object.__setattr__(self, attr, value)

    def __delattr__(self, attr: str) -> None:
        if self._frozen:
            raise StyleMaterialError(
                f"[700] Material '{self.name}' is frozen; cannot delete '{attr}'"
            )
        object.__delattr__(self, attr)

    def freeze(self) -> MaterialDescriptor:
        """Make the descriptor immutable. Calling it again is a no-op."""
        object.__setattr__(self, "_frozen", True)
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def lighting_mode(self) -> str:
        return UNLIT if self.disable_lighting else LIT

    @property
    def primary_color(self) -> NormalizedColor | None:
        """The color the element reads as: emissive when unlit, diffuse when lit."""
        if self.disable_lighting:
            return self.emissive_color
        return self.diffuse_color

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in self._FIELDS:
            v = getattr(self, f)
            out[f] = v.to_hex() if isinstance(v, NormalizedColor) else v
        out["lighting_mode"] = self.lighting_mode
        return out

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "mutable"
        primary = self.primary_color.to_hex() if self.primary_color else None
        return (
            f"MaterialDescriptor(name={self.name!r}, mode={self.lighting_mode}, "
            f"color={primary}, wireframe={self.wireframe}, {state})"
        )


def _section(options: Any, name: str) -> Any:
    if options is None:
        return None
    if isinstance(options, Mapping):
        return options.get(name)
    return getattr(options, name, None)


def build_material(
    create_options: Any,
    is_2d: bool,
    *,
    config: RenderConfig | None = None,
) -> MaterialDescriptor:
    """Build and freeze the material for a template.

    Parameters
    ----------
    create_options : Mapping or NodeCreateOptions
        Create options; ``texture.color`` and ``effect.wireframe`` are read.
    is_2d : bool
        Rendering mode. Selects unlit/emissive (2D) or lit/diffuse (3D).
    config : RenderConfig, optional
        Render settings; the loaded default configuration when omitted.

    Returns
    -------
    MaterialDescriptor
        Frozen descriptor.

    Examples
    --------
    >>> mat = build_material({"texture": {"color": "#FF0000"}}, is_2d=True)
    >>> mat.lighting_mode, mat.emissive_color.to_hex()
    ('unlit', '#FF0000')
    """
    cfg = config or load_render_config()
    mat = MaterialDescriptor(cfg.materials.default_name)

    color = resolve_color(_section(_section(create_options, "texture"), "color"))
    if color is not None:
        if is_2d:
            mat.disable_lighting = True
            mat.emissive_color = color
        else:
            mat.diffuse_color = color
            mat.emissive_color = color.scale(cfg.materials.lit_emissive_scale)

    wireframe = _section(_section(create_options, "effect"), "wireframe")
    mat.wireframe = bool(wireframe) if wireframe is not None else False

    return mat.freeze()
