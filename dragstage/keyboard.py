"""Static piano keyboard drawing, independent of the scene graph."""

from enum import Enum
from typing import List

from dragstage.surface import RenderSurface

PRESSED_COLOR = "#00B324"


class KeyKind(Enum):
    WHITE = "white"
    BLACK = "black"


class Key:
    """A single piano key."""

    def __init__(self, x: float, y: float, width: float, height: float, kind: KeyKind):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.kind = kind
        self.pressed = False

    def draw(self, surface: RenderSurface):
        if self.kind is KeyKind.WHITE:
            fill = PRESSED_COLOR if self.pressed else "white"
            surface.fill_rect(self.x, self.y, self.width, self.height, fill)
            surface.stroke_rect(self.x, self.y, self.width, self.height, "#000000")
        else:
            fill = PRESSED_COLOR if self.pressed else "black"
            surface.fill_rect(self.x, self.y, self.width, self.height, fill)


class Keyboard:
    """A row of octaves: white keys first, then the black keys over them."""

    WHITE_WIDTH = 16
    WHITE_HEIGHT = 60
    BLACK_HEIGHT = 40
    # One slot per gap between the 7 white keys; 0 marks the E-F gap
    BLACK_PATTERN = (1, 1, 0, 1, 1, 1)

    def __init__(self, x: float, y: float, octaves: int = 1):
        self.x = x
        self.y = y
        self.octaves = octaves
        self.keys: List[Key] = []
        self._generate_keys()

    def _generate_keys(self):
        dx = self.WHITE_WIDTH
        black_dx = dx / 4
        start_x = self.x

        for _ in range(self.octaves):
            black_start_x = start_x
            for _ in range(7):
                self.keys.append(Key(start_x, self.y, dx, self.WHITE_HEIGHT, KeyKind.WHITE))
                start_x += dx

            for has_black in self.BLACK_PATTERN:
                if has_black:
                    self.keys.append(Key(black_start_x + black_dx * 3, self.y,
                                         black_dx * 2, self.BLACK_HEIGHT, KeyKind.BLACK))
                black_start_x += dx

    @property
    def width(self) -> float:
        return self.octaves * 7 * self.WHITE_WIDTH

    def press_key(self, index: int):
        """Toggle the pressed state of a key."""
        key = self.keys[index]
        key.pressed = not key.pressed

    def draw(self, surface: RenderSurface):
        for key in self.keys:
            key.draw(surface)
