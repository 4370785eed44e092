"""Exception types raised by the geometry collaborators and the solvers."""

from __future__ import annotations


class GeometryError(ValueError):
    """Base class for errors caused by unusable geometric input."""


class InvalidGeometry(GeometryError):
    """Raised when a segment with ``start == end`` is asked for a direction."""


class NumericalDegeneracy(GeometryError, ArithmeticError):
    """
    Raised when a solver would divide by an exactly zero denominator.

    This only happens for zero-length direction vectors, which the solvers
    do not validate up front.
    """
