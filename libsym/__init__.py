"""Schematic symbol records and their SVG rendering."""
import logging

from .types import (
    SymbolError, UnsupportedDrawError, UnsupportedOrientationError,
    Square, Polyline, Pin, Circle, Arc, Text, Draw, Field, Symbol, RenderOptions,
)
from .record import symbol_from_dict, draw_from_dict, field_from_dict, load_symbol
from .pins import PIN_LABEL_LAYOUTS, PinLabelLayout, PinGeometry, layout_pin, pin_end
from .render import (
    DrawContext, is_unit_selected, render_draw, render_field,
    symbol_to_elements, symbol_to_svg,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
