"""
stylemesh - Cached Templates for Styled Graph Elements
======================================================
Turn declarative node and edge styles into renderable geometry, building one
expensive master template per unique visual configuration and handing out
cheap, individually positioned instances of it.

Notes
-----
Nothing here is global: callers create a ``TemplateCache`` and the factories
(each owning its own ``ShapeRegistry``) and pass the cache explicitly.
"""

from .cache import TemplateCache
from .color import NormalizedColor, resolve_color
from .core.errors import (
    MissingShapeTypeError,
    StyleConfigError,
    StyleMaterialError,
    StyleMeshError,
    UnknownShapeError,
    configure_logging,
    get_logger,
)
from .core.registry import ShapeRegistry
from .material import MaterialDescriptor, build_material
from .meshes import EdgeMeshFactory, NodeMeshFactory
from .shapes import create_arrow_registry, create_shape_registry
from .sheet import StyleSheet, apply_style_sheet, load_style_sheet
from .template import Geometry, Instance, Template

__version__ = "0.3.0"

__all__ = [
    "TemplateCache",
    "ShapeRegistry",
    "NodeMeshFactory",
    "EdgeMeshFactory",
    "MaterialDescriptor",
    "build_material",
    "NormalizedColor",
    "resolve_color",
    "Geometry",
    "Template",
    "Instance",
    "create_shape_registry",
    "create_arrow_registry",
    "StyleSheet",
    "load_style_sheet",
    "apply_style_sheet",
    "StyleMeshError",
    "StyleConfigError",
    "StyleMaterialError",
    "MissingShapeTypeError",
    "UnknownShapeError",
    "get_logger",
    "configure_logging",
    "__version__",
]
