# Interaction.py

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional
import numpy as np

from SampleChart.ChartOptions import ChartOptions
from SampleChart.EventType import EventType
from SampleChart.Geometry import Point, distance, get_nearest, points_equal, scale_point, subtract_points
from SampleChart.ViewTransform import ViewTransform

REPAINT_EVENTS = (EventType.POINTER_MOVE, EventType.WHEEL, EventType.CLICK)


@dataclass(frozen=True)
class DragState:
    """Per-gesture pan state, in data space (default-window frame)."""
    start: Point = (0.0, 0.0)
    end: Point = (0.0, 0.0)
    offset: Point = (0.0, 0.0)
    dragging: bool = False
    # cleared by a zoom mid-drag until the next move recomputes the offset
    previewing: bool = True

    @property
    def moved(self) -> bool:
        return not points_equal(self.offset, (0.0, 0.0))


@dataclass(frozen=True)
class ViewState:
    transform: ViewTransform
    drag: DragState = field(default_factory=DragState)
    hovered: Optional[int] = None
    selected: Optional[int] = None

    def live_transform(self) -> ViewTransform:
        # an in-flight drag previews its offset without committing it
        if self.drag.dragging and self.drag.previewing:
            return self.transform.apply_pan(self.drag.offset)
        return self.transform


def find_hovered(transform: ViewTransform, points: Any, pos: Point, radius: float) -> Optional[int]:
    """Index of the sample drawn within `radius` pixels of `pos`, if any."""
    if len(points) == 0:
        return None
    pixels = transform.to_pixels(points)
    index = get_nearest(pos, pixels)
    if index is None:
        return None
    if distance(pixels[index], pos) < radius:
        return index
    return None


def select(state: ViewState, index: Optional[int]) -> ViewState:
    return replace(state, selected=index)


def handle_event(state: ViewState, event: Any, points: Any, options: ChartOptions) -> ViewState:
    """
    Gesture state machine: return the state that follows `event`.
    - PointerDown: begin a drag anchored at the pointer (data space).
    - PointerMove: update the drag preview, then recompute hover.
    - PointerUp: commit the drag offset; keep it for the following click.
      Ignored when no drag is in progress.
    - Wheel: step the zoom scale by the sign of the wheel delta, clamped.
      A drag in progress stops previewing until the next move.
    - Click: toggle selection of the hovered sample unless the gesture dragged.
    """
    et = event.event_type

    if et == EventType.POINTER_DOWN:
        start = state.transform.to_data(event.pos)
        return replace(state, drag=DragState(start=start, dragging=True))

    if et == EventType.POINTER_MOVE:
        drag = state.drag
        if drag.dragging:
            end = state.transform.to_data(event.pos)
            offset = scale_point(subtract_points(drag.start, end), state.transform.scale ** 2)
            drag = replace(drag, end=end, offset=offset, previewing=True)
        moved = replace(state, drag=drag)
        hovered = find_hovered(moved.live_transform(), points, event.pos, options.hit_radius)
        return replace(moved, hovered=hovered)

    if et == EventType.POINTER_UP:
        if not state.drag.dragging:
            return state
        return replace(
            state,
            transform=state.transform.apply_pan(state.drag.offset),
            drag=replace(state.drag, dragging=False),
        )

    if et == EventType.WHEEL:
        direction = float(np.sign(event.delta_y))
        transform = state.transform.apply_zoom(
            direction, options.zoom_step, options.min_scale, options.max_scale
        )
        drag = state.drag
        if drag.dragging:
            drag = replace(drag, previewing=False)
        return replace(state, transform=transform, drag=drag)

    if et == EventType.CLICK:
        if state.drag.moved:
            return state
        if state.hovered is None or state.hovered == state.selected:
            return select(state, None)
        return select(state, state.hovered)

    return state


class InteractionController:
    """
    Owns the current ViewState of one chart and feeds it events in arrival order.
    Side effects (selection callback, repaint request) happen here; the
    transitions themselves are the pure `handle_event`.
    """

    def __init__(
        self,
        points: Any,
        options: ChartOptions,
        on_select: Optional[Callable[[Optional[int]], None]] = None,
        on_repaint: Optional[Callable[[], None]] = None,
    ) -> None:
        self._points = np.asarray(points, dtype=float).reshape(-1, 2)
        self.options = options
        self.on_select = on_select
        self.on_repaint = on_repaint
        transform = ViewTransform.create(options.size, self._points, options.margin_ratio)
        self._state = ViewState(transform=transform)

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def transform(self) -> ViewTransform:
        return self._state.live_transform()

    @property
    def hovered(self) -> Optional[int]:
        return self._state.hovered

    @property
    def selected(self) -> Optional[int]:
        return self._state.selected

    def dispatch(self, event: Any) -> ViewState:
        previous = self._state
        self._state = handle_event(previous, event, self._points, self.options)

        if event.event_type == EventType.CLICK:
            if previous.drag.moved:
                return self._state
            if self.on_select is not None:
                self.on_select(self._state.selected)

        if event.event_type in REPAINT_EVENTS:
            self._request_repaint()
        return self._state

    def select(self, index: Optional[int]) -> None:
        self._state = select(self._state, index)
        self._request_repaint()

    def reset_view(self) -> None:
        self._state = replace(
            self._state,
            transform=self._state.transform.reset(),
            drag=DragState(),
        )
        self._request_repaint()

    def _request_repaint(self) -> None:
        if self.on_repaint is not None:
            self.on_repaint()
