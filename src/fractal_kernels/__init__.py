"""Generative and simulation kernels for a mathematical visualization gallery."""

__version__ = "0.1.0"
