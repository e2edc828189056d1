# main_minimal.py

import os
import sys
import numpy as np
from PyQt5 import QtWidgets

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from SampleChart import Chart, Sample


# Two labelled clusters of random 2D points
rng = np.random.default_rng(42)
samples = [Sample(point=p, label="low") for p in rng.uniform(0, 1, size=(50, 2))]
samples += [Sample(point=p, label="high") for p in rng.uniform(1, 2, size=(50, 2))]

options = {
    "size": 500,
    "axesLabels": ["x", "y"],
    "styles": {"low": {"color": "royalblue"}, "high": {"color": "orange"}},
    "transparency": 0.8,
}

# Standard Qt application
app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])

chart = Chart(samples, options, on_select=lambda s: print(f"[main_minimal] Selected: {s}"))
chart.show()

# Run the event loop
app.exec()
