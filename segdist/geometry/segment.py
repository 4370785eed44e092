"""
Finite 3D line segment.

A segment is the set ``start + s * (end - start)`` for ``s`` in ``[0, 1]``.
Only ``point_at`` and the unclamped query variants accept parameters outside
of that interval; they then describe the supporting line of the segment.

Every operation that needs the segment direction raises
:class:`~segdist.geometry.errors.InvalidGeometry` when ``start == end``.
"""
from __future__ import annotations

from segdist.geometry.errors import InvalidGeometry
from segdist.geometry.line import Line
from segdist.geometry.vector import Vector3, VectorLike, as_vector3


class Segment:
    """
    Line segment between two points.

    Parameters
    ----------
    start : Vector3 or array-like
        Point at parameter 0.
    end : Vector3 or array-like
        Point at parameter 1.

    Examples
    --------

    >>> from segdist.geometry.segment import Segment
    >>> seg = Segment((0, 0, 0), (2, 0, 0))
    >>> seg.point_at(0.5).as_tuple()
    (1.0, 0.0, 0.0)
    >>> seg.closest_parameter((5, 1, 0), clamp_to_segment=True)
    1.0
    """

    __slots__ = ("start", "end")

    def __init__(self, start: VectorLike, end: VectorLike):
        self.start = as_vector3(start)
        self.end = as_vector3(end)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------
    @property
    def is_valid(self) -> bool:
        return not self.start.equals(self.end)

    def _check_valid(self) -> None:
        if not self.is_valid:
            raise InvalidGeometry(
                f"Segment start and end coincide at {self.start.as_tuple()}; "
                "the segment has no direction."
            )

    @property
    def direction(self) -> Vector3:
        """Vector from ``start`` to ``end``."""
        self._check_valid()
        return self.end - self.start

    @property
    def unit_direction(self) -> Vector3:
        return self.direction.normalize_in_place()

    @property
    def length(self) -> float:
        """Distance between ``start`` and ``end`` (0 for an invalid segment)."""
        return self.start.distance(self.end)

    @length.setter
    def length(self, value: float) -> None:
        # Keeps start fixed; a negative length reverses the segment first.
        unit = self.unit_direction
        if value < 0:
            unit.negate_in_place()
        self.end = self.start + unit * abs(value)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------
    def point_at(self, param: float) -> Vector3:
        return self.start + self.direction * param

    def point_at_length(self, distance: float) -> Vector3:
        """Point at arc length ``distance`` from ``start`` (may be negative)."""
        return self.start + self.unit_direction * distance

    def closest_parameter(self, point: VectorLike, clamp_to_segment: bool = False) -> float:
        """
        Parameter of the orthogonal projection of ``point`` onto the segment.

        When ``clamp_to_segment`` is False the projection is onto the
        supporting line and may fall outside ``[0, 1]``.
        """
        direction = self.direction
        param = (as_vector3(point) - self.start).dot(direction) / direction.length_squared()
        if clamp_to_segment:
            param = 0.0 if param < 0.0 else (1.0 if param > 1.0 else param)
        return param

    def closest_point(self, point: VectorLike, clamp_to_segment: bool = False) -> Vector3:
        return self.point_at(self.closest_parameter(point, clamp_to_segment))

    def distance_to(self, point: VectorLike, clamp_to_segment: bool = False) -> float:
        point = as_vector3(point)
        return point.distance(self.closest_point(point, clamp_to_segment))

    # ------------------------------------------------------------------
    # Derived segments
    # ------------------------------------------------------------------
    def extend(self, start_delta: float, end_delta: float) -> 'Segment':
        """
        Return a new segment lengthened by ``start_delta`` before ``start``
        and ``end_delta`` past ``end``. Negative deltas shorten it.
        """
        unit = self.unit_direction
        return Segment(self.start - unit * start_delta, self.end + unit * end_delta)

    def flip(self) -> 'Segment':
        return Segment(self.end.clone(), self.start.clone())

    def clone(self) -> 'Segment':
        return Segment(self.start.clone(), self.end.clone())

    def to_line(self) -> Line:
        """Supporting line, parameterized so that it agrees with ``point_at``."""
        return Line(self.start.clone(), self.direction)

    def equals(self, other: 'Segment') -> bool:
        return (isinstance(other, Segment)
                and self.start.equals(other.start)
                and self.end.equals(other.end))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Segment(start={self.start!r}, end={self.end!r})"
