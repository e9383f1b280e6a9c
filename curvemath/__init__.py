"""Geometry for glyph outlines: vectors, cubic Béziers, piecewise paths, curve fitting and pattern-along-path."""

__version__ = "0.1.0"

__all__ = [
    "arclen",
    "bezier",
    "coordinate",
    "evaluate",
    "fit",
    "glif",
    "glyphbuilder",
    "interpolator",
    "pattern",
    "piecewise",
    "polar",
    "rect",
    "vector",
]