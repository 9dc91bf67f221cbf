"""Tuples, transformation matrices and primitive shapes for ray tracing."""

__version__ = "0.1.0"