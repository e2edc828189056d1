# graphics/Painter.py

from PyQt5 import QtCore, QtGui
from typing import Any, Sequence, Tuple
import math
import pyqtgraph as pg

_H_ALIGN = ("left", "center", "right")
_V_ALIGN = ("top", "middle", "bottom")


def _finite(loc: Sequence[float]) -> bool:
    return math.isfinite(loc[0]) and math.isfinite(loc[1])


def emphasis_gradient(loc: Sequence[float], radius: float, color: Any) -> QtGui.QRadialGradient:
    """Halo brush: `color` at the centre fading to transparent white at `radius`."""
    grd = QtGui.QRadialGradient(QtCore.QPointF(loc[0], loc[1]), radius)
    grd.setColorAt(0, pg.mkColor(color))
    grd.setColorAt(1, QtGui.QColor(255, 255, 255, 0))
    return grd


def draw_point(painter: QtGui.QPainter, loc: Sequence[float], color: Any = "black", size: float = 8) -> None:
    if not _finite(loc):
        return
    if isinstance(color, QtGui.QGradient):
        brush = QtGui.QBrush(color)
    else:
        brush = pg.mkBrush(color)
    painter.save()
    painter.setPen(QtCore.Qt.NoPen)
    painter.setBrush(brush)
    painter.drawEllipse(QtCore.QPointF(loc[0], loc[1]), size / 2, size / 2)
    painter.restore()


def draw_image(painter: QtGui.QPainter, image: Any, loc: Sequence[float]) -> None:
    """Draw an image centred on `loc`."""
    if not _finite(loc):
        return
    w, h = image.width(), image.height()
    target = QtCore.QPointF(loc[0] - w / 2, loc[1] - h / 2)
    if isinstance(image, QtGui.QImage):
        painter.drawImage(target, image)
    else:
        painter.drawPixmap(target, image)


def text_origin(
    loc: Sequence[float], width: float, height: float, align: str = "center", v_align: str = "middle"
) -> Tuple[float, float]:
    """Top-left corner of a `width` x `height` text box anchored at `loc`."""
    if align not in _H_ALIGN or v_align not in _V_ALIGN:
        raise ValueError(f"unknown text alignment {align!r}/{v_align!r}")
    x = loc[0] - width * _H_ALIGN.index(align) / 2
    y = loc[1] - height * _V_ALIGN.index(v_align) / 2
    return x, y


def draw_text(
    painter: QtGui.QPainter,
    text: str,
    loc: Sequence[float],
    size: float = 20,
    align: str = "center",
    v_align: str = "middle",
    color: Any = "black",
) -> None:
    if not _finite(loc):
        return
    painter.save()
    font = painter.font()
    font.setPixelSize(max(1, int(round(size))))
    painter.setFont(font)
    painter.setPen(pg.mkPen(color))

    metrics = QtGui.QFontMetricsF(font)
    width = metrics.horizontalAdvance(text)
    height = metrics.height()
    x, y = text_origin(loc, width, height, align, v_align)
    painter.drawText(QtCore.QRectF(x, y, width, height), QtCore.Qt.AlignCenter, text)
    painter.restore()


def draw_dashed_polyline(
    painter: QtGui.QPainter,
    points: Sequence[Sequence[float]],
    dash: Tuple[float, float] = (5, 4),
    width: float = 2,
    color: Any = "lightgray",
) -> None:
    pen = pg.mkPen(color=color, width=width)
    # Qt dash lengths are in units of the pen width
    pen.setDashPattern([d / width for d in dash])
    painter.save()
    painter.setPen(pen)
    painter.setBrush(QtCore.Qt.NoBrush)
    painter.drawPolyline(QtGui.QPolygonF([QtCore.QPointF(p[0], p[1]) for p in points]))
    painter.restore()
