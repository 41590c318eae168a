"""Named rendering constants for symbol SVG output.

All lengths are in symbol units (mils in a KiCad library) unless noted.
"""

# Canvas / options defaults
DEFAULT_SIZE = 500                # output canvas width and height (px)
DEFAULT_UNIT = 1                  # unit drawn when none is requested

# Text
FONT_SIZE = 55                    # pin, text and caption font size
FIELD_FONT_SIZE = 55              # field font size when the field has none
FIELD_V_SHIFT = 30                # left shift of a vertical field's anchor
FIELD_ANCHORS = {"L": "start", "R": "end"}   # anything else -> middle

# Pins
PIN_TEXT_OFFSET = 6               # gap between pin line and its labels

# Strokes and fills
LINE_STYLE = "stroke: rgb(0,0,0); stroke-width: 2"
OUTLINE_STYLE = "fill-opacity: 0; stroke: rgb(0,0,0); stroke-width: 2;"
SOLID_FILL = "rgb(0,0,0)"
FILL_SHAPE = "SHAPE"              # polyline fill tag meaning solid interior

# Unit/convert selection
NORMAL_CONVERTS = (0, 1)          # de Morgan alternates are never drawn
ALL_UNITS = 0
