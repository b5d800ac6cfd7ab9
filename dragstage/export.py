"""Export the stage to an image file."""

from pathlib import Path
from typing import Optional, Union

import cairo

from dragstage.keyboard import Keyboard
from dragstage.scene import SceneGraph
from dragstage.surface import CairoSurface


def export_png(scene: SceneGraph, filepath: Union[str, Path],
               width: int = 800, height: int = 600,
               keyboard: Optional[Keyboard] = None) -> Path:
    """Render ``scene`` (and optionally a keyboard) to a PNG file."""
    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, int(width), int(height))
    cr = cairo.Context(surface)

    stage = CairoSurface(cr, width, height)
    scene.render(stage)
    if keyboard is not None:
        keyboard.draw(stage)

    surface.flush()
    surface.write_to_png(str(filepath))
    return Path(filepath)
