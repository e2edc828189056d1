# EventType.py

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class EventType(Enum):
    POINTER_DOWN = "pointer_down"
    POINTER_MOVE = "pointer_move"
    POINTER_UP = "pointer_up"
    WHEEL = "wheel"
    CLICK = "click"


@dataclass(frozen=True)
class PointerDown:
    pos: Tuple[float, float]
    event_type = EventType.POINTER_DOWN


@dataclass(frozen=True)
class PointerMove:
    pos: Tuple[float, float]
    event_type = EventType.POINTER_MOVE


@dataclass(frozen=True)
class PointerUp:
    pos: Tuple[float, float]
    event_type = EventType.POINTER_UP


@dataclass(frozen=True)
class Wheel:
    delta_y: float
    event_type = EventType.WHEEL


@dataclass(frozen=True)
class Click:
    pos: Tuple[float, float]
    event_type = EventType.CLICK
