# textrain/rain/__init__.py
from .columns import Column, advance, column_count, initialize
from .controller import DocumentChosen, Intent, Mode, RainController, Resize
from .raster import DEFAULT_PALETTE, rasterize, rasterize_frame, render
from .scheduler import FRAME_INTERVAL, FrameScheduler, Tick

__all__ = [
    "Column",
    "advance",
    "column_count",
    "initialize",
    "DocumentChosen",
    "Intent",
    "Mode",
    "RainController",
    "Resize",
    "DEFAULT_PALETTE",
    "rasterize",
    "rasterize_frame",
    "render",
    "FRAME_INTERVAL",
    "FrameScheduler",
    "Tick",
]
