from PyQt5 import QtWidgets

from .Bounds import Bounds
from .DataSource import DataSource, Sample
from .ChartOptions import ChartOptions, load_options
from .ViewTransform import ViewTransform
from .EventType import EventType, PointerDown, PointerMove, PointerUp, Wheel, Click
from .Interaction import InteractionController, ViewState, DragState, handle_event
from .canvas.Chart import Chart, create

__all__ = [
    "QtWidgets",
    "Bounds",
    "DataSource",
    "Sample",
    "ChartOptions",
    "load_options",
    "ViewTransform",
    "EventType",
    "PointerDown",
    "PointerMove",
    "PointerUp",
    "Wheel",
    "Click",
    "InteractionController",
    "ViewState",
    "DragState",
    "handle_event",
    "Chart",
    "create",
]
