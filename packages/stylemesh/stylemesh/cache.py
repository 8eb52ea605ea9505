"""stylemesh: Template Cache
--------------------------

Key-to-template memoization with hit/miss accounting.

Behavior
--------
- ``get(key, builder)`` returns a fresh Instance every time. The builder runs
  only on the first request for a key; its Template is hidden, parked at the
  configured position, frozen and stored for the life of the cache.
- A builder that raises leaves the key unpopulated; the error reaches the
  caller unchanged and the next ``get`` for that key tries again.
- ``reset()`` zeroes the counters and keeps every Template. ``clear()`` is the
  explicit, caller-initiated full reset; nothing is ever evicted on its own.

Notes
-----
The cache is a plain object passed to the element factories. It is not
thread-safe; use it from the render-loop thread only.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from .core.config import RenderConfig, load_render_config
from .core.errors import get_logger
from .template import Instance, Template

__all__ = [
    "TemplateCache",
]

logger = get_logger()


class TemplateCache:
    """Memoize one master Template per cache key.

    Parameters
    ----------
    config : RenderConfig, optional
        Supplies the hidden position and instance name format. The loaded
        default configuration when omitted.

    Attributes
    ----------
    hits : int
        Requests served from an existing Template since the last reset.
    misses : int
        Requests that ran the builder since the last reset.

    Examples
    --------
    >>> cache = TemplateCache()
    >>> a = cache.get("node-style-1-3d", build_box)
    >>> b = cache.get("node-style-1-3d", build_box)
    >>> a.template is b.template, cache.hits, cache.misses
    (True, 1, 1)
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config or load_render_config()
        self._templates: dict[str, Template] = {}
        self._spawn_counter = 0
        self.hits = 0
        self.misses = 0

    def get(self, key: str, builder: Callable[[], Template]) -> Instance:
        """Return a new Instance of the Template stored under ``key``.

        Parameters
        ----------
        key : str
            Deterministic identifier of the visual configuration.
        builder : Callable[[], Template]
            Zero-argument function that constructs the Template on a miss. It
            must not read or write this cache.

        Returns
        -------
        Instance
            A new instance on every call, hit or miss.
        """
        template = self._templates.get(key)
        if template is not None:
            self.hits += 1
            return self._spawn(key, template)

        self.misses += 1
        logger.debug(f"Template cache miss: {key}")
        template = builder()
        template.hide(self._config.templates.hidden_position)
        template.freeze()
        self._templates[key] = template
        return self._spawn(key, template)

    def _spawn(self, key: str, template: Template) -> Instance:
        self._spawn_counter += 1
        name = self._config.templates.instance_name_format.format(
            key=key, index=self._spawn_counter
        )
        return template.spawn(name)

    def reset(self) -> None:
        """Zero the hit/miss counters. Stored Templates are kept."""
        self.hits = 0
        self.misses = 0

    def clear(self) -> None:
        """Drop every stored Template and zero the counters.

        Instances created earlier keep their Template alive but no longer
        share it with anything the cache hands out afterwards.
        """
        logger.debug(f"Clearing template cache ({len(self._templates)} templates)")
        self._templates.clear()
        self.reset()

    def size(self) -> int:
        return len(self._templates)

    def template_for(self, key: str) -> Template | None:
        """Read-only access to the Template stored under ``key``."""
        return self._templates.get(key)

    def keys(self) -> Iterator[str]:
        return iter(list(self._templates))

    def stats(self) -> dict[str, Any]:
        """Counters for diagnostics (e.g. a debug panel)."""
        total = self.hits + self.misses
        return {
            "hits": self.hits,
            "misses": self.misses,
            "size": self.size(),
            "instances": sum(t.instance_count for t in self._templates.values()),
            "hit_rate": (self.hits / total) if total else 0.0,
        }

    def __contains__(self, key: object) -> bool:
        return key in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f"TemplateCache(size={self.size()}, hits={self.hits}, misses={self.misses})"
