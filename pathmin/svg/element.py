"""Owning-element access for scale side effects.

The optimizer only ever needs four things from the element that owns a path:
read an attribute, write an attribute, check for an attribute and step to the
parent. ``StyledElement`` is a plain in-memory node; ``LxmlElement`` wraps an
lxml node so document-level callers can hand over real tree nodes.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Protocol

from lxml import etree

from pathmin.utils.numbers import format_number, multiply_exact

logger = logging.getLogger(__name__)

_LEADING_NUMBER_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class PathElement(Protocol):
    def get(self, name: str) -> str | None: ...

    def set(self, name: str, value: str) -> None: ...

    def has(self, name: str) -> bool: ...

    @property
    def parent(self) -> PathElement | None: ...


@dataclass
class StyledElement:
    """In-memory element with an explicit parent chain."""

    attributes: dict[str, str] = field(default_factory=dict)
    parent: StyledElement | None = None

    def get(self, name: str) -> str | None:
        return self.attributes.get(name)

    def set(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def has(self, name: str) -> bool:
        return name in self.attributes

    @classmethod
    def from_chain(cls, attributes: dict[str, str], ancestors: list[dict[str, str]]) -> StyledElement:
        """Build an element whose ancestors are given nearest-first."""
        parent: StyledElement | None = None
        for attrs in reversed(ancestors):
            parent = cls(attributes=dict(attrs), parent=parent)
        return cls(attributes=dict(attributes), parent=parent)


class LxmlElement:
    """Adapter exposing an lxml node through the PathElement interface."""

    def __init__(self, node: etree._Element) -> None:
        self.node = node

    def get(self, name: str) -> str | None:
        return self.node.get(name)

    def set(self, name: str, value: str) -> None:
        self.node.set(name, value)

    def has(self, name: str) -> bool:
        return name in self.node.attrib

    @property
    def parent(self) -> LxmlElement | None:
        parent = self.node.getparent()
        if parent is None:
            return None
        return LxmlElement(parent)


@dataclass
class VisibilityProperties:
    fill: str = "black"
    stroke: str = "none"
    stroke_width: float = 1.0


def _parse_length(text: str, fallback: float) -> float:
    """Leading number of a length such as '2px'; fallback when there is none."""
    match = _LEADING_NUMBER_RE.match(text)
    if not match:
        logger.debug("Unparsable stroke-width %r, inheriting %s", text, fallback)
        return fallback
    return float(match.group(1))


def get_visibility_properties(element: PathElement) -> VisibilityProperties:
    """Resolve fill / stroke / stroke-width inherited down the parent chain.

    The nearest element that sets a property wins; empty values inherit.
    """
    chain: list[PathElement] = []
    node: PathElement | None = element
    while node is not None:
        chain.append(node)
        node = node.parent

    props = VisibilityProperties()
    for node in reversed(chain):
        props.fill = node.get("fill") or props.fill
        props.stroke = node.get("stroke") or props.stroke
        width = node.get("stroke-width")
        if width:
            props.stroke_width = _parse_length(width, props.stroke_width)
    return props


def scale_transform(scale: int) -> str:
    return f"scale({format_number(1 / scale)})"


def apply_scale_attributes(element: PathElement, scale: int) -> None:
    """Undo a coordinate rescale visually: add scale(1/scale), compensate stroke width."""
    existing = (element.get("transform") or "").strip()
    transform = scale_transform(scale)
    element.set("transform", f"{existing} {transform}" if existing else transform)

    props = get_visibility_properties(element)
    if props.stroke != "none" or element.has("stroke-width"):
        element.set("stroke-width", format_number(multiply_exact(props.stroke_width, scale)))
