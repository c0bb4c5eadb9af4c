"""Classroom object-oriented banking exercises."""

__version__ = "0.1.0"
