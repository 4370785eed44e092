"""
Closest points between 3D lines and segments.

All three public solvers share one kernel, :func:`closest_parameters`,
which minimizes the squared distance

    |w + s*u - t*v|^2,   w = origin1 - origin2

over the parameters ``s`` (input 1) and ``t`` (input 2). With

    a = u.u,  b = u.v,  c = v.v,  d = u.w,  e = v.w,  D = a*c - b*b

the unconstrained minimum is ``s = (b*e - c*d)/D``, ``t = (a*e - b*d)/D``.
Segment parameters are restricted to ``[0, 1]``; when the unconstrained
minimum falls outside that square the kernel fixes the offending parameter
on the boundary and re-solves for the other one. Quotients are carried as
numerator/denominator pairs until the very end so that boundary cases never
divide by a vanishing ``D``.

See http://geomalgorithms.com/a07-_distance.html for the derivation.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Tuple

from segdist.config import EPSILON
from segdist.geometry.errors import NumericalDegeneracy
from segdist.geometry.line import Line
from segdist.geometry.segment import Segment
from segdist.geometry.vector import Vector3, dot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DistanceResult:
    """
    Outcome of a closest-distance query.

    Attributes
    ----------
    distance : float
        Euclidean distance between the two closest points (always >= 0).
    param1 : float
        Parameter of the closest point on the first input.
    param2 : float
        Parameter of the closest point on the second input.
    point1, point2 : Vector3
        The closest points themselves.
    """

    distance: float
    param1: float
    param2: float
    point1: Vector3 = field(compare=False)
    point2: Vector3 = field(compare=False)

    def __iter__(self) -> Iterator[float]:
        return iter((self.distance, self.param1, self.param2))

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.distance, self.param1, self.param2)


def _divide(numerator: float, denominator: float, what: str) -> float:
    if denominator == 0.0:
        raise NumericalDegeneracy(
            f"Cannot resolve {what}: zero denominator (numerator={numerator!r}). "
            "At least one direction vector has zero length."
        )
    return numerator / denominator


def _snap_divide(numerator: float, denominator: float, what: str) -> float:
    if abs(numerator) < EPSILON:
        return 0.0
    return _divide(numerator, denominator, what)


def _rederive_first(numerator: float, a: float, s_den: float, clamp: bool):
    """
    Optimal (sN, sD) on input 1 once input 2 is pinned to one of its ends.

    ``numerator / a`` is the unconstrained optimum. A negative numerator pins
    input 1 at its origin (``sN = 0``) for lines and segments alike; when
    ``clamp`` is set the optimum is also capped at 1, keeping the current
    denominator ``s_den`` for the boundary values.

    For an infinite line the lower pin is a known limitation: if the closest
    point lies behind the line origin the reported distance overestimates
    the true minimum.
    """
    if numerator < 0.0:
        return 0.0, s_den
    if not clamp:
        return numerator, a
    if numerator > a:
        return s_den, s_den
    return numerator, a


def closest_parameters(origin1: Vector3, dir1: Vector3, origin2: Vector3, dir2: Vector3,
                       clamp_first: bool = False, clamp_second: bool = False) -> DistanceResult:
    """
    Closest points between ``origin1 + s*dir1`` and ``origin2 + t*dir2``.

    Parameters
    ----------
    origin1, dir1 : Vector3
        Base point and direction of the first input.
    origin2, dir2 : Vector3
        Base point and direction of the second input.
    clamp_first : bool, optional
        Restrict ``s`` to ``[0, 1]`` (the first input is a segment).
    clamp_second : bool, optional
        Restrict ``t`` to ``[0, 1]`` (the second input is a segment).

    Returns
    -------
    DistanceResult
        Distance, the two parameters and the two closest points.

    Raises
    ------
    NumericalDegeneracy
        If a zero-length direction forces a division by zero.
    """
    if clamp_first and not clamp_second:
        swapped = closest_parameters(origin2, dir2, origin1, dir1,
                                     clamp_first=False, clamp_second=True)
        return DistanceResult(swapped.distance, swapped.param2, swapped.param1,
                              swapped.point2, swapped.point1)

    u = dir1
    v = dir2
    w = origin1 - origin2

    a = dot(u, u)
    b = dot(u, v)
    c = dot(v, v)
    d = dot(u, w)
    e = dot(v, w)
    D = a * c - b * b

    if not clamp_second:
        # Two infinite lines: closed form, no boundaries to respect.
        if D < EPSILON:
            logger.debug("Near-parallel lines (D=%g); pinning first parameter at 0.", D)
            sc = 0.0
            # use the largest denominator
            tc = _divide(d, b, "line parameter") if b > c else _divide(e, c, "line parameter")
        else:
            sc = (b * e - c * d) / D
            tc = (a * e - b * d) / D
    else:
        # sc = s_num / s_den, tc = t_num / t_den; division deferred to the end
        if D < EPSILON:
            logger.debug("Near-parallel inputs (D=%g); pinning first parameter at 0.", D)
            s_num, s_den = 0.0, 1.0
            t_num, t_den = e, c
        else:
            s_num, s_den = b * e - c * d, D
            t_num, t_den = a * e - b * d, D
            if clamp_first:
                if s_num < 0.0:
                    # s=0 edge is visible
                    s_num = 0.0
                    t_num, t_den = e, c
                elif s_num > s_den:
                    # s=1 edge is visible
                    s_num = s_den
                    t_num, t_den = e + b, c

        if t_num < 0.0:
            logger.debug("Second parameter below 0; re-solving first parameter on t=0 edge.")
            t_num = 0.0
            s_num, s_den = _rederive_first(-d, a, s_den, clamp_first)
        elif t_num > t_den:
            logger.debug("Second parameter above 1; re-solving first parameter on t=1 edge.")
            t_num = t_den
            s_num, s_den = _rederive_first(-d + b, a, s_den, clamp_first)

        sc = _snap_divide(s_num, s_den, "first parameter")
        tc = _snap_divide(t_num, t_den, "second parameter")

    p1 = u * sc
    p2 = v * tc
    dp = w + (p1 - p2)
    return DistanceResult(
        distance=dp.length(),
        param1=sc,
        param2=tc,
        point1=origin1 + p1,
        point2=origin2 + p2,
    )


def line_to_line_distance(line1: Line, line2: Line) -> DistanceResult:
    """
    Distance between two infinite lines.

    Both parameters range over all reals. For (nearly) parallel lines the
    first parameter is pinned at 0 and the second is the projection of
    ``line1.origin`` onto ``line2``.

    Examples
    --------

    >>> from segdist import Line, line_to_line_distance
    >>> r = line_to_line_distance(Line((0, 0, 0), (1, 0, 1)), Line((0, 5, 2), (1, 0, 0)))
    >>> r.distance
    5.0
    """
    return closest_parameters(line1.origin, line1.direction, line2.origin, line2.direction)


def segment_to_segment_distance(segment1: Segment, segment2: Segment) -> DistanceResult:
    """
    Distance between two finite segments.

    Both returned parameters lie in ``[0, 1]``.
    """
    return closest_parameters(segment1.start, segment1.end - segment1.start,
                              segment2.start, segment2.end - segment2.start,
                              clamp_first=True, clamp_second=True)


def line_to_segment_distance(line: Line, segment: Segment) -> DistanceResult:
    """
    Distance between an infinite line and a finite segment.

    ``param1`` is unconstrained (on the line), ``param2`` lies in ``[0, 1]``
    (on the segment). When the segment is pinned at an end whose closest line
    point lies behind ``line.origin``, ``param1`` is pinned at 0 and the
    distance is measured from the line origin.

    >>> from segdist import Line, Segment, line_to_segment_distance
    >>> r = line_to_segment_distance(Line((0, 0, 0), (1, 0, 0)), Segment((-5, 1, 0), (-5, 2, 0)))
    >>> (r.param1, r.param2)
    (0.0, 0.0)
    """
    return closest_parameters(line.origin, line.direction,
                              segment.start, segment.end - segment.start,
                              clamp_first=False, clamp_second=True)


def closest_distance(first, second) -> DistanceResult:
    """
    Dispatch to the right solver for any pair of ``Line``/``Segment`` values.

    ``param1`` always refers to ``first`` and ``param2`` to ``second``.
    """
    if isinstance(first, Line) and isinstance(second, Line):
        return line_to_line_distance(first, second)
    if isinstance(first, Line) and isinstance(second, Segment):
        return line_to_segment_distance(first, second)
    if isinstance(first, Segment) and isinstance(second, Line):
        return closest_parameters(first.start, first.end - first.start,
                                  second.origin, second.direction,
                                  clamp_first=True, clamp_second=False)
    if isinstance(first, Segment) and isinstance(second, Segment):
        return segment_to_segment_distance(first, second)
    raise TypeError(
        f"Unsupported input types {type(first).__name__!r} and {type(second).__name__!r}; "
        "expected Line or Segment."
    )


# geomalgorithms.com naming
dist3D_Line_to_Line = line_to_line_distance
dist3D_Segment_to_Segment = segment_to_segment_distance
dist3D_Line_to_Segment = line_to_segment_distance
