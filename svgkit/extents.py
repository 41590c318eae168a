"""Bounding-box accumulator and viewport transform."""
import math

from .geometry import GeometryError
from .svg import fmt_num
from .types import BBox

# Fraction of the canvas left blank on each side of the fitted drawing.
VIEWPORT_MARGIN = 0.05


def _is_coord(v) -> bool:
    """True for a finite int/float; bools, None, strings and NaN are not coordinates."""
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return False
    return math.isfinite(v)


class Extents:
    """Min/max of every coordinate seen so far, plus the highest unit index.

    One instance per conversion; it is never shared between calls.
    """

    def __init__(self):
        self.min_x = self.min_y = math.inf
        self.max_x = self.max_y = -math.inf
        self.max_unit = 0

    @property
    def empty(self) -> bool:
        return self.min_x > self.max_x

    def update(self, x, y) -> bool:
        """Fold (x, y) into the box. Non-numeric coordinates are skipped; returns False then."""
        if not (_is_coord(x) and _is_coord(y)):
            return False
        self.min_x = min(self.min_x, x); self.max_x = max(self.max_x, x)
        self.min_y = min(self.min_y, y); self.max_y = max(self.max_y, y)
        return True

    def update_max_unit(self, unit) -> None:
        if _is_coord(unit):
            self.max_unit = max(self.max_unit, unit)

    def bbox(self) -> BBox | None:
        if self.empty:
            return None
        return BBox(self.min_x, self.min_y, self.max_x, self.max_y)

    def fit(self, size: float) -> tuple[float, float, float]:
        """(scale, tx, ty) mapping the box center to the canvas center.

        The larger side of the box fills the canvas minus VIEWPORT_MARGIN on
        each side. An empty box maps identity; a zero-size box keeps scale 1.
        """
        if size <= 0:
            raise GeometryError(f"Canvas size must be positive: size={size}")
        if self.empty:
            return 1.0, 0.0, 0.0
        span = max(self.max_x - self.min_x, self.max_y - self.min_y)
        s = size * (1 - 2*VIEWPORT_MARGIN) / span if span > 0 else 1.0
        cx = (self.min_x + self.max_x) / 2; cy = (self.min_y + self.max_y) / 2
        return s, size/2 - s*cx, size/2 - s*cy

    def svg_transform(self, size: float) -> str:
        """SVG transform attribute fitting the accumulated box into a size x size canvas."""
        s, tx, ty = self.fit(size)
        return f"translate({fmt_num(tx)},{fmt_num(ty)}) scale({fmt_num(s)})"

    def __repr__(self):
        return (f"Extents(min=({self.min_x}, {self.min_y}), "
                f"max=({self.max_x}, {self.max_y}), max_unit={self.max_unit})")
