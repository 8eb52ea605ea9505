"""stylemesh: Core Subpackage
--------------------------
Errors and logging, the shape registry, and render configuration.

Public API
----------
- ShapeRegistry: Name-to-creator table for master templates
- RenderConfig, load_render_config: Render-wide settings
"""

from .config import RenderConfig, load_render_config
from .registry import ShapeRegistry

__all__ = [
    "RenderConfig",
    "ShapeRegistry",
    "load_render_config",
]
