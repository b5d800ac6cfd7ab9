import pytest

from dragstage.surface import FALLBACK_COLOR, CairoSurface, RenderSurface, parse_color


@pytest.mark.parametrize("value, expected", [
    ("#FF0000", (1.0, 0.0, 0.0)),
    ("#00b324", (0.0, 0xB3 / 255, 0x24 / 255)),
    ("#fff", (1.0, 1.0, 1.0)),
    ("blue", (0.0, 0.0, 1.0)),
    ("White", (1.0, 1.0, 1.0)),
    ((0.1, 0.2, 0.3), (0.1, 0.2, 0.3)),
])
def test_parse_color(value, expected):
    assert parse_color(value) == pytest.approx(expected)


@pytest.mark.parametrize("value", ["", "not-a-color", "#12345", "#zzzzzz"])
def test_parse_color_falls_back(value):
    assert parse_color(value) == FALLBACK_COLOR


class FakeContext:
    def __init__(self):
        self.ops = []

    def __getattr__(self, name):
        def record(*args):
            self.ops.append((name,) + args)
        return record


def test_cairo_surface_fill_rect():
    cr = FakeContext()
    surface = CairoSurface(cr, 800, 600)

    surface.fill_rect(1, 2, 3, 4, "#0000ff")

    assert cr.ops == [
        ("save",),
        ("set_source_rgb", 0.0, 0.0, 1.0),
        ("rectangle", 1, 2, 3, 4),
        ("fill",),
        ("restore",),
    ]


def test_cairo_surface_clear_and_stroke():
    cr = FakeContext()
    surface = CairoSurface(cr, 800, 600)

    surface.clear("black")
    surface.stroke_rect(0, 0, 10, 10, "white")

    names = [op[0] for op in cr.ops]
    assert names == ["save", "set_source_rgb", "paint", "restore",
                     "save", "set_source_rgb", "set_line_width", "rectangle",
                     "stroke", "restore"]


def test_surfaces_satisfy_protocol(surface):
    assert isinstance(CairoSurface(FakeContext(), 1, 1), RenderSurface)
    assert isinstance(surface, RenderSurface)
