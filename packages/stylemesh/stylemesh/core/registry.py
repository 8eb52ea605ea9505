"""stylemesh: Shape Registry
--------------------------

Name-to-creator tables used to build master templates from a shape-type
identifier and a size.

Behavior
--------
- A registry is an ordinary object; factories own one (or are given one) so
  tests and embedders can keep isolated tables. There is no process-wide
  instance.
- Registration inserts or overwrites. The last writer wins; overwriting is an
  extension point, not an error.
- Lookup never raises. A missing entry yields ``None`` and the caller decides
  how to report it.

Notes
-----
Built-in creators are loaded by ``stylemesh.shapes.register_builtin_shapes``.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from .errors import StyleRegistryError, get_logger

if TYPE_CHECKING:
    from ..template import Template

__all__ = [
    "ShapeCreator",
    "ShapeRegistry",
]

ShapeCreator = Callable[[float], "Template"]

logger = get_logger()


@dataclass
class _Entry:
    """Internal record holding a creator and its metadata."""

    creator: ShapeCreator
    meta: dict[str, Any] = field(default_factory=dict)


class ShapeRegistry:
    """Mutable mapping from shape-type name to creator function.

    Parameters
    ----------
    name : str, default "shape"
        Label used in log lines and listings (e.g. ``"shape"``, ``"arrow"``).

    Methods
    -------
    register(shape_type, creator, **meta) -> None
        Insert or overwrite the creator for ``shape_type``.
    lookup(shape_type) -> ShapeCreator | None
        Return the creator, or None when nothing is registered.
    decorator(shape_type, **meta) -> Callable
        Return a decorator that registers the decorated creator.
    list() -> dict[str, dict]
        Registered names with their metadata.

    Examples
    --------
    >>> reg = ShapeRegistry()
    >>> reg.register("dot", lambda size: make_dot(size))
    >>> reg.lookup("dot") is not None
    True
    >>> reg.lookup("missing") is None
    True
    """

    def __init__(self, name: str = "shape") -> None:
        self.name = name
        self._table: dict[str, _Entry] = {}

    @staticmethod
    def _key(shape_type: str) -> str:
        return str(shape_type).strip()

    # --------------------------- registration ---------------------------
    def register(self, shape_type: str, creator: ShapeCreator, **meta: Any) -> None:
        """Register a creator under ``shape_type``, replacing any previous one.

        Parameters
        ----------
        shape_type : str
            Shape identifier, e.g. ``"box"`` or ``"torus-knot"``.
        creator : Callable[[float], Template]
            Function building a fresh Template for a given size.
        **meta : Any
            Optional metadata stored with the entry (e.g. ``tags``).
            ``registered_at`` and ``builder_type`` are filled in automatically.

        Raises
        ------
        StyleRegistryError
            - [400] ``creator`` is not callable.
        """
        key = self._key(shape_type)
        if not callable(creator):
            raise StyleRegistryError(
                f"[400] Creator for {self.name} '{key}' must be callable, "
                f"got {type(creator).__name__}"
            )
        if key in self._table:
            logger.debug(f"Overwriting {self.name} creator '{key}'")
        full_meta = dict(meta)
        full_meta.setdefault("registered_at", datetime.now(UTC).isoformat())
        full_meta.setdefault("builder_type", "class" if isinstance(creator, type) else "function")
        self._table[key] = _Entry(creator=creator, meta=full_meta)

    def decorator(self, shape_type: str, **meta: Any):
        """Return a decorator that registers the creator on import."""

        def _wrap(creator: ShapeCreator) -> ShapeCreator:
            self.register(shape_type, creator, **meta)
            return creator

        return _wrap

    # --------------------------- lookup ---------------------------
    def lookup(self, shape_type: str) -> ShapeCreator | None:
        """Return the creator registered for ``shape_type`` or None."""
        entry = self._table.get(self._key(shape_type))
        return entry.creator if entry is not None else None

    # --------------------------- introspection ---------------------------
    def names(self) -> list[str]:
        return sorted(self._table)

    def list(self) -> dict[str, dict[str, Any]]:
        """Registered names mapped to a copy of their metadata."""
        return {name: dict(self._table[name].meta) for name in self.names()}

    def __contains__(self, shape_type: object) -> bool:
        return isinstance(shape_type, str) and self._key(shape_type) in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"ShapeRegistry(name={self.name!r}, entries={len(self._table)})"
