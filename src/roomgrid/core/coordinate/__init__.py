"""Coordinate primitives: lattice points and boxes."""

from roomgrid.core.coordinate.models import ORIGIN, UNIT, Coordinate, CoordinateBox

__all__ = [
    "Coordinate",
    "CoordinateBox",
    "ORIGIN",
    "UNIT",
]
