"""
Option price surface module.

The builder interface consumed by the option chain assembler and a
reference grid implementation.
"""
from .base import BaseSurfaceBuilder
from .grid import GridSurfaceBuilder

__all__ = ["BaseSurfaceBuilder", "GridSurfaceBuilder"]
