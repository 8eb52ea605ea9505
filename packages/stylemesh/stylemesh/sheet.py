"""
stylemesh: Style sheets
-----------------------
Load a YAML style sheet listing node and edge styles and realize every
element through the factories, mainly to inspect template sharing.

Sheet format
------------
.. code-block:: yaml

    nodes:
      - style_id: person
        is_2d: false
        size: 1.0
        count: 250          # elements drawn with this style
        shape: {type: sphere}
        texture: {color: "#3366FF"}
    edges:
      - style_id: knows
        color: "#999999"
        count: 400
        arrow_head: {type: normal, color: "#999999"}
"""

from __future__ import annotations

__all__ = [
    "NodeEntry",
    "EdgeEntry",
    "StyleSheet",
    "load_style_sheet",
    "apply_style_sheet",
]

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .cache import TemplateCache
from .core.errors import StyleConfigError, get_logger
from .core.utils import load_yaml_file
from .meshes import EdgeMeshFactory, NodeMeshFactory
from .specs import (
    ArrowHeadOptions,
    EdgeLineSpec,
    EdgeMeshOptions,
    EffectSpec,
    NodeMeshOptions,
    ShapeSpec,
    TextureSpec,
)
from .template import Instance

logger = get_logger()


class NodeEntry(NodeMeshOptions):
    """One node style plus the number of nodes drawn with it."""

    count: int = Field(default=1, ge=0)
    shape: ShapeSpec | None = None
    texture: TextureSpec | None = None
    effect: EffectSpec | None = None


class EdgeEntry(EdgeMeshOptions):
    count: int = Field(default=1, ge=0)
    is_2d: bool = Field(default=False, alias="is2D")
    line: EdgeLineSpec = Field(default_factory=EdgeLineSpec)
    arrow_head: ArrowHeadOptions | None = Field(default=None, alias="arrowHead")


class StyleSheet(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    nodes: list[NodeEntry] = Field(default_factory=list)
    edges: list[EdgeEntry] = Field(default_factory=list)


def load_style_sheet(path: str | Path) -> StyleSheet:
    """Read and validate a style sheet.

    Raises
    ------
    StyleIOError
        - [100] File not found.
    StyleConfigError
        - [501] Unreadable YAML.
        - [534] Invalid style sheet content.
    """
    data = load_yaml_file(Path(path))
    try:
        return StyleSheet.model_validate(data)
    except ValidationError as e:
        raise StyleConfigError(f"[534] Invalid style sheet {path}: {e}") from e


def apply_style_sheet(
    sheet: StyleSheet,
    cache: TemplateCache,
    node_factory: NodeMeshFactory | None = None,
    edge_factory: EdgeMeshFactory | None = None,
) -> list[Instance]:
    """Create ``count`` instances for every node and edge entry.

    Edges with an arrowhead contribute one arrow instance per edge as well.
    Errors from the factories propagate unchanged.
    """
    node_factory = node_factory or NodeMeshFactory()
    edge_factory = edge_factory or EdgeMeshFactory()
    instances: list[Instance] = []

    for entry in sheet.nodes:
        create = entry.model_dump(include={"shape", "texture", "effect"}, exclude_none=True)
        for _ in range(entry.count):
            instances.append(node_factory.create(cache, entry, create))

    for entry in sheet.edges:
        style = {"line": entry.line}
        for _ in range(entry.count):
            instances.append(edge_factory.create(cache, entry, style))
            if entry.arrow_head is not None:
                arrow = edge_factory.create_arrow_head(
                    cache, entry.style_id, entry.arrow_head, is_2d=entry.is_2d
                )
                if arrow is not None:
                    instances.append(arrow)

    logger.debug(
        f"Applied style sheet: {len(sheet.nodes)} node styles, "
        f"{len(sheet.edges)} edge styles, {len(instances)} instances"
    )
    return instances
