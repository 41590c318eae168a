"""Symbol record types, render options, and input errors."""
from typing import NamedTuple

from svgkit.types import Point
from libsym.constants import DEFAULT_SIZE, DEFAULT_UNIT, FIELD_FONT_SIZE

# ============================================================
# Error Types
# ============================================================
class SymbolError(ValueError):
    """Raised for symbol input the renderer cannot represent."""

class UnsupportedDrawError(SymbolError):
    """Unknown draw primitive variant."""

class UnsupportedOrientationError(SymbolError):
    """Pin orientation outside R/L/U/D."""

# ============================================================
# Draw Primitives
# ============================================================
class Square(NamedTuple):
    pos: Point; end: Point
    unit: int = 0; convert: int = 0

class Polyline(NamedTuple):
    points: list[Point]
    fill: str = "N"
    unit: int = 0; convert: int = 0

class Pin(NamedTuple):
    pos: Point; length: float; orientation: str
    name: str = "~"; number: str = ""
    name_text_size: float = 50; number_text_size: float = 50
    pin_type: str = "P"
    unit: int = 0; convert: int = 0

class Circle(NamedTuple):
    pos: Point; radius: float
    unit: int = 0; convert: int = 0

class Arc(NamedTuple):
    pos: Point; radius: float
    t1: float; t2: float
    start: Point; end: Point
    unit: int = 0; convert: int = 0

class Text(NamedTuple):
    pos: Point; text: str
    horizontal_justify: str = "C"; vertical_justify: str = "C"
    unit: int = 0; convert: int = 0

Draw = Square | Polyline | Pin | Circle | Arc | Text

# ============================================================
# Fields and Symbol
# ============================================================
class Field(NamedTuple):
    index: int; text: str; pos: Point
    size: float = FIELD_FONT_SIZE
    text_orientation: str = "H"
    horizontal_justify: str = "C"

class Symbol(NamedTuple):
    draw: list[Draw] | None = None
    fields: list[Field] | None = None
    draw_name: bool = True
    draw_nums: bool = True
    pin_name_offset: float = 40
    name: str = ""

# ============================================================
# Options
# ============================================================
class RenderOptions(NamedTuple):
    size: float = DEFAULT_SIZE
    unit: int = DEFAULT_UNIT
    debug_extents: bool = False
