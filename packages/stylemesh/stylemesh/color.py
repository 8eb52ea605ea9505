"""stylemesh: Color Resolution
----------------------------

Turn style color specifications into a single displayable color.

Behavior
--------
- Strings are parsed as colors (``#RRGGBB``, ``#RRGGBBAA``, named colors).
  A leading doubled hash (``"##FFFFFF"``) is corrected to a single one first.
- Tagged objects (``{"colorType": "solid", "value": ..., "opacity": ...}``)
  resolve through their ``value``. Gradient tags have no single color and
  resolve to None.
- Anything unrecognized resolves to None, leaving the caller's default in
  place. Resolution never raises for well-typed input.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import matplotlib.colors as mcolors
from pydantic import BaseModel

__all__ = [
    "NormalizedColor",
    "color_spec_to_normalized_color",
    "resolve_color",
]

SOLID = "solid"


@dataclass(frozen=True)
class NormalizedColor:
    """RGB color with channels in ``[0, 1]`` and an optional opacity.

    ``opacity`` is None unless the color string or object carried one, so
    callers can tell "opaque by default" from "explicitly opaque".
    """

    r: float
    g: float
    b: float
    opacity: float | None = None

    def to_hex(self) -> str:
        """Return ``#RRGGBB`` in upper case."""
        return "#" + "".join(f"{round(c * 255):02X}" for c in (self.r, self.g, self.b))

    def to_rgb(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def scale(self, factor: float) -> NormalizedColor:
        """Return the RGB channels multiplied by ``factor`` (opacity dropped)."""
        return NormalizedColor(self.r * factor, self.g * factor, self.b * factor)


def color_spec_to_normalized_color(spec: str) -> NormalizedColor | None:
    """Parse a single color string.

    Parameters
    ----------
    spec : str
        Hex (``#RGB``, ``#RRGGBB``, ``#RRGGBBAA``) or named color.

    Returns
    -------
    NormalizedColor or None
        None when the string is not a color. An alpha channel is reported as
        ``opacity`` only when the string spells one out.

    Examples
    --------
    >>> color_spec_to_normalized_color("#FF0000").to_hex()
    '#FF0000'
    >>> color_spec_to_normalized_color("#FF000080").opacity
    0.5019607843137255
    >>> color_spec_to_normalized_color("not a color") is None
    True
    >>> color_spec_to_normalized_color("none") is None
    True
    """
    text = spec.strip()
    if not text.startswith("#"):
        # only CSS color names; matplotlib cycle refs, grey levels and "none" are not colors here
        text = text.lower()
        if text not in mcolors.CSS4_COLORS:
            return None
    try:
        r, g, b, a = mcolors.to_rgba(text)
    except ValueError:
        return None
    explicit_alpha = text.startswith("#") and len(text) in (5, 9)
    return NormalizedColor(r, g, b, a if explicit_alpha else None)


def _fix_double_hash(text: str) -> str:
    if text.startswith("##"):
        return text[1:]
    return text


def resolve_color(spec: Any) -> NormalizedColor | None:
    """Resolve a texture color specification to one color.

    Parameters
    ----------
    spec : str, Mapping, pydantic model, or None
        Color string or tagged color object (``colorType`` + ``value``).

    Returns
    -------
    NormalizedColor or None
        The resolved color; None when ``spec`` is absent, a gradient, or not
        recognized.
    """
    if spec is None:
        return None

    if isinstance(spec, str):
        return color_spec_to_normalized_color(_fix_double_hash(spec))

    if isinstance(spec, BaseModel):
        spec = spec.model_dump(by_alias=True, exclude_none=True)

    if not isinstance(spec, Mapping):
        return None

    color_type = spec.get("colorType", spec.get("color_type"))
    if color_type != SOLID:
        # gradients have no single displayable color here
        return None

    value = spec.get("value")
    if not isinstance(value, str) or not value:
        return None
    color = color_spec_to_normalized_color(_fix_double_hash(value))
    if color is None:
        return None

    opacity = spec.get("opacity")
    if isinstance(opacity, (int, float)) and not isinstance(opacity, bool):
        return NormalizedColor(color.r, color.g, color.b, float(opacity))
    return color
