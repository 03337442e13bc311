"""Fast approximate math, software rasterization, small utilities and graph algorithms."""

__version__ = "0.1.0"