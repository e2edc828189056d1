# canvas/Chart.py

from PyQt5 import QtWidgets, QtCore, QtGui
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QKeySequence
from PyQt5.QtWidgets import QShortcut
import pyqtgraph as pg
from typing import Any, Callable, Dict, Hashable, Iterable, Mapping, Optional, Sequence, Union

from SampleChart.ChartOptions import ChartOptions
from SampleChart.DataSource import DataSource, Sample
from SampleChart.EventType import Click, PointerDown, PointerMove, PointerUp, Wheel
from SampleChart.Geometry import format_number
from SampleChart.Interaction import InteractionController, ViewState
from SampleChart.graphics import Painter

OptionsLike = Union[ChartOptions, Mapping[str, Any], None]


class Chart(QtWidgets.QWidget):
    """
    Square scatter chart of labelled samples with pan (drag), zoom (wheel),
    hover highlighting and click selection.
    Qt input is translated into SampleChart.EventType events for the
    InteractionController; painting only reads the controller's state.
    """
    sample_selected = pyqtSignal(object)

    def __init__(
        self,
        samples: Any,
        options: OptionsLike = None,
        on_select: Optional[Callable[[Optional[Sample]], None]] = None,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.options: ChartOptions = _coerce_options(options)
        self.data_source: DataSource = samples if isinstance(samples, DataSource) else DataSource(samples)
        self.on_select = on_select

        self._icons: Dict[Hashable, Any] = self._resolve_icons()

        self.controller = InteractionController(
            self.data_source.get(),
            self.options,
            on_select=self._on_controller_select,
            on_repaint=self.update,
        )

        size = int(self.options.size)
        self.setFixedSize(size, size)
        self.setMouseTracking(True)
        self.setAttribute(QtCore.Qt.WA_OpaquePaintEvent)

        self._install_shortcuts()

        print(f"[Chart] Created with {self.data_source.size()} samples ({size}px, icon={self.options.icon})")

    # -----------------------
    # Public API
    # -----------------------
    @property
    def view_state(self) -> ViewState:
        return self.controller.state

    @property
    def hovered_sample(self) -> Optional[Sample]:
        return self._sample_at(self.controller.hovered)

    @property
    def selected_sample(self) -> Optional[Sample]:
        return self._sample_at(self.controller.selected)

    def select_sample(self, sample: Optional[Sample]) -> None:
        index = self.data_source.index_of(sample)
        if sample is not None and index is None:
            raise ValueError(f"{sample!r} is not a sample of this chart")
        self.controller.select(index)

    def reset_view(self) -> None:
        self.controller.reset_view()
        print("[Chart] View reset")

    # -----------------------
    # Qt input -> engine events
    # -----------------------
    def mousePressEvent(self, event: QtGui.QMouseEvent) -> None:
        if event.button() == QtCore.Qt.LeftButton:
            self.controller.dispatch(PointerDown(_pos(event)))
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QtGui.QMouseEvent) -> None:
        self.controller.dispatch(PointerMove(_pos(event)))
        event.accept()

    def mouseReleaseEvent(self, event: QtGui.QMouseEvent) -> None:
        if event.button() == QtCore.Qt.LeftButton:
            pos = _pos(event)
            self.controller.dispatch(PointerUp(pos))
            # Qt has no click event: a left release on the widget counts as one
            self.controller.dispatch(Click(pos))
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def wheelEvent(self, event: QtGui.QWheelEvent) -> None:
        # Qt reports wheel-up as positive; the engine expects scroll-down positive
        self.controller.dispatch(Wheel(-event.angleDelta().y()))
        event.accept()

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        print(f"[Chart] Closing ({self.data_source.size()} samples)")
        super().closeEvent(event)

    # -----------------------
    # Painting
    # -----------------------
    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        try:
            painter.setRenderHint(QtGui.QPainter.Antialiasing)
            painter.fillRect(self.rect(), pg.mkColor(self.options.background))

            state = self.controller.state
            painter.setOpacity(self.options.transparency)
            self._draw_samples(painter, range(self.data_source.size()))
            painter.setOpacity(1.0)

            if state.hovered is not None:
                self._emphasize_sample(painter, state.hovered, self.options.hover_color)
            if state.selected is not None:
                self._emphasize_sample(painter, state.selected, self.options.selection_color)

            self._draw_axes(painter)
        finally:
            painter.end()

    def _draw_samples(self, painter: QtGui.QPainter, indices: Iterable[int]) -> None:
        indices = list(indices)
        if not indices:
            return
        transform = self.controller.transform
        pixels = transform.to_pixels(self.data_source.get()[indices])
        opts = self.options
        for i, loc in zip(indices, pixels):
            sample = self.data_source[i]
            icon = self._icons[sample.label]
            if opts.icon == "image":
                Painter.draw_image(painter, icon, loc)
            elif opts.icon == "text":
                Painter.draw_text(painter, str(icon), loc, size=opts.text_size)
            else:
                Painter.draw_point(painter, loc, icon, size=opts.point_size)

    def _emphasize_sample(self, painter: QtGui.QPainter, index: int, color: Any) -> None:
        margin = self.options.margin
        loc = self.controller.transform.to_pixel(self.data_source[index].point)
        grd = Painter.emphasis_gradient(loc, margin, color)
        Painter.draw_point(painter, loc, grd, size=margin * 2)
        self._draw_samples(painter, [index])

    def _draw_axes(self, painter: QtGui.QPainter) -> None:
        opts = self.options
        margin = opts.margin
        size = self.width()
        pb = self.controller.transform.pixel_bounds
        left, right, top, bottom = pb.as_tuple()
        bg = pg.mkColor(opts.background)

        # samples panned into the margin are hidden behind the frame
        painter.fillRect(QtCore.QRectF(0, 0, size, margin), bg)
        painter.fillRect(QtCore.QRectF(0, 0, margin, size), bg)
        painter.fillRect(QtCore.QRectF(size - margin, 0, margin, size), bg)
        painter.fillRect(QtCore.QRectF(0, size - margin, size, margin), bg)

        x_label, y_label = opts.axes_labels
        Painter.draw_text(painter, x_label, (size / 2, bottom + margin / 2), size=margin * 0.6)

        painter.save()
        painter.translate(left - margin / 2, size / 2)
        painter.rotate(-90)
        Painter.draw_text(painter, y_label, (0, 0), size=margin * 0.6)
        painter.restore()

        Painter.draw_dashed_polyline(
            painter, [(left, top), (left, bottom), (right, bottom)], color=opts.axis_color
        )

        data_min, data_max = self.controller.transform.axis_extents()
        small = margin * 0.3

        Painter.draw_text(painter, format_number(data_min[0], 2), (left, bottom),
                          size=small, align="left", v_align="top")
        Painter.draw_text(painter, format_number(data_max[0], 2), (right, bottom),
                          size=small, align="right", v_align="top")

        painter.save()
        painter.translate(left, bottom)
        painter.rotate(-90)
        Painter.draw_text(painter, format_number(data_min[1], 2), (0, 0),
                          size=small, align="left", v_align="bottom")
        painter.restore()

        painter.save()
        painter.translate(left, top)
        painter.rotate(-90)
        Painter.draw_text(painter, format_number(data_max[1], 2), (0, 0),
                          size=small, align="right", v_align="bottom")
        painter.restore()

    # -----------------------
    # Internals
    # -----------------------
    def _resolve_icons(self) -> Dict[Hashable, Any]:
        """
        Look up the drawable for every label once.
        Raises KeyError naming any label (or style field) that is missing.
        """
        field = {"point": "color", "image": "image", "text": "text"}[self.options.icon]
        styles = self.options.styles
        labels = list(dict.fromkeys(self.data_source.labels()))

        missing = [label for label in labels if label not in styles]
        if missing:
            raise KeyError(f"No style entry for labels: {missing}")
        missing = [label for label in labels if field not in styles[label]]
        if missing:
            raise KeyError(f"Styles for labels {missing} have no '{field}' field")

        icons = {}
        for label in labels:
            value = styles[label][field]
            if field == "image" and isinstance(value, str):
                value = QtGui.QPixmap(value)
            icons[label] = value
        return icons

    def _install_shortcuts(self) -> None:
        sc_reset = QShortcut(QKeySequence("Ctrl+R"), self)
        sc_reset.activated.connect(self.reset_view)

    def _sample_at(self, index: Optional[int]) -> Optional[Sample]:
        return None if index is None else self.data_source[index]

    def _on_controller_select(self, index: Optional[int]) -> None:
        sample = self._sample_at(index)
        self.sample_selected.emit(sample)
        if self.on_select is not None:
            self.on_select(sample)


def _pos(event: QtGui.QMouseEvent) -> Sequence[float]:
    p = event.localPos()
    return (p.x(), p.y())


def _coerce_options(options: OptionsLike) -> ChartOptions:
    if options is None:
        return ChartOptions()
    if isinstance(options, ChartOptions):
        return options.validate()
    if isinstance(options, Mapping):
        return ChartOptions.from_dict(options).validate()
    raise TypeError(f"Chart options must be ChartOptions or a mapping, got {type(options).__name__}")


def create(
    container: Optional[QtWidgets.QWidget],
    samples: Any,
    options: OptionsLike = None,
    on_select: Optional[Callable[[Optional[Sample]], None]] = None,
) -> Chart:
    """
    Build a Chart and place it inside `container`: appended to the
    container's layout when it has one, otherwise just parented to it.
    """
    chart = Chart(samples, options, on_select=on_select)
    if container is not None:
        layout = container.layout()
        if layout is not None:
            layout.addWidget(chart)
        else:
            chart.setParent(container)
    return chart
