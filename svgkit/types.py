"""Shared type definitions for the SVG rendering layer."""
from typing import NamedTuple

Point = tuple[float, float]

class BBox(NamedTuple):
    min_x: float; min_y: float
    max_x: float; max_y: float

class Element(NamedTuple):
    """One node of the output tree, handed to the serializer as-is."""
    name: str
    attrs: dict
    children: list["Element"] | None = None
    body: str | None = None
