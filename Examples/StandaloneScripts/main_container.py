# main_container.py

import os
import sys
import numpy as np
from PyQt5 import QtWidgets

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from SampleChart import Sample, create


def make_samples(n=150, seed=2):
    rng = np.random.default_rng(seed)
    labels = ["car", "bike", "bus"]
    centers = {"car": (0.0, 0.0), "bike": (3.0, 1.0), "bus": (1.5, 4.0)}
    out = []
    for i in range(n):
        label = labels[i % len(labels)]
        point = rng.normal(loc=centers[label], scale=0.7)
        out.append(Sample(point=point, label=label))
    return out


def main():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])

    window = QtWidgets.QWidget()
    window.setWindowTitle("Samples")
    layout = QtWidgets.QVBoxLayout(window)
    status = QtWidgets.QLabel("Click a sample (drag to pan, wheel to zoom, Ctrl+R to reset)")
    layout.addWidget(status)

    options = {
        "size": 600,
        "axesLabels": ["width", "height"],
        "icon": "text",
        "styles": {
            "car": {"color": "gray", "text": "C"},
            "bike": {"color": "red", "text": "B"},
            "bus": {"color": "yellow", "text": "U"},
        },
        "transparency": 0.7,
    }

    def on_select(sample):
        status.setText("Nothing selected" if sample is None else f"{sample.label} at {sample.point}")

    create(window, make_samples(), options, on_select)
    window.show()

    app.exec()


if __name__ == "__main__":
    main()
