from setuptools import setup, find_packages

setup(
    name="SampleChart",
    version="0.1.0",
    author="SampleChart contributors",
    description="Interactive scatter chart of labelled samples with pan, zoom, hover and selection",
    packages=find_packages(include=["SampleChart", "SampleChart.*"]),
    install_requires=[
        "numpy>=1.24",
        "pyqtgraph>=0.13.3",
        "PyQt5>=5.15.10",
        "PyQt5-sip>=12.15.0",
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    python_requires=">=3.9",
)
