"""Document/window lifecycle: registry, close guard, placement, controller."""

from .close_guard import CloseGuard, CloseState
from .controller import IDocumentWindow, IFileCommands, WindowLifecycleController
from .placement import CascadePlacer, Rect
from .registry import WindowRegistry

__all__ = [
    "CloseGuard",
    "CloseState",
    "CascadePlacer",
    "Rect",
    "WindowRegistry",
    "IDocumentWindow",
    "IFileCommands",
    "WindowLifecycleController",
]
