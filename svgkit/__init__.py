"""Shared types, arc geometry, extents accumulation, and SVG serialization."""

from .types import Point, BBox, Element
from .geometry import (
    GeometryError, ArcParams,
    normalize_angle_pos, map_angle, arc_needs_swap, arc_svg_params,
)
from .extents import Extents
from .svg import SVG_NS, fmt_num, fmt_points, element, to_xml
