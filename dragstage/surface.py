"""Render surface interface and its cairo implementation."""

from typing import Protocol, Tuple, Union, runtime_checkable

RGB = Tuple[float, float, float]
Color = Union[str, RGB]

# Named colors used by the demo scene and the keyboard
NAMED_COLORS = {
    'black': (0.0, 0.0, 0.0),
    'white': (1.0, 1.0, 1.0),
    'red': (1.0, 0.0, 0.0),
    'green': (0.0, 0.502, 0.0),
    'blue': (0.0, 0.0, 1.0),
    'yellow': (1.0, 1.0, 0.0),
    'gray': (0.502, 0.502, 0.502),
    'grey': (0.502, 0.502, 0.502),
}

FALLBACK_COLOR: RGB = (1.0, 0.0, 0.0)  # #FF0000


def parse_color(value: Color) -> RGB:
    """Convert ``#RRGGBB``, ``#RGB``, a color name or an RGB tuple to floats.

    Anything unparseable falls back to red so drawing never fails.
    """
    if isinstance(value, tuple):
        return value
    if not value:
        return FALLBACK_COLOR

    name = value.strip().lower()
    if name in NAMED_COLORS:
        return NAMED_COLORS[name]

    color = name.lstrip('#')
    if len(color) == 3:
        color = ''.join(c * 2 for c in color)
    try:
        if len(color) != 6:
            raise ValueError(value)
        r = int(color[0:2], 16) / 255
        g = int(color[2:4], 16) / 255
        b = int(color[4:6], 16) / 255
    except ValueError:
        return FALLBACK_COLOR
    return (r, g, b)


@runtime_checkable
class RenderSurface(Protocol):
    """Drawing primitives the scene needs."""

    width: float
    height: float

    def clear(self, color: Color) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...

    def stroke_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...


class CairoSurface:
    """RenderSurface over a ``cairo.Context``."""

    LINE_WIDTH = 1.0

    def __init__(self, cr, width: float, height: float):
        self.cr = cr
        self.width = width
        self.height = height

    def clear(self, color: Color):
        cr = self.cr
        cr.save()
        cr.set_source_rgb(*parse_color(color))
        cr.paint()
        cr.restore()

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color):
        cr = self.cr
        cr.save()
        cr.set_source_rgb(*parse_color(color))
        cr.rectangle(x, y, w, h)
        cr.fill()
        cr.restore()

    def stroke_rect(self, x: float, y: float, w: float, h: float, color: Color):
        cr = self.cr
        cr.save()
        cr.set_source_rgb(*parse_color(color))
        cr.set_line_width(self.LINE_WIDTH)
        cr.rectangle(x, y, w, h)
        cr.stroke()
        cr.restore()
