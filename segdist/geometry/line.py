from __future__ import annotations

from segdist.geometry.vector import Vector3, VectorLike, as_vector3


class Line:
    """
    Infinite line ``origin + t * direction`` for any real ``t``.

    Parameters
    ----------
    origin : Vector3 or array-like
        Point on the line reached at ``t = 0``.
    direction : Vector3 or array-like
        Direction vector. It does not need to be unit length; the parameter
        ``t`` is measured in multiples of ``direction``. A zero direction is
        accepted but makes every distance query degenerate.
    """

    __slots__ = ("origin", "direction")

    def __init__(self, origin: VectorLike, direction: VectorLike):
        self.origin = as_vector3(origin)
        self.direction = as_vector3(direction)

    @classmethod
    def from_points(cls, p0: VectorLike, p1: VectorLike) -> 'Line':
        """Line through ``p0`` (``t = 0``) and ``p1`` (``t = 1``)."""
        p0 = as_vector3(p0)
        return cls(p0, as_vector3(p1) - p0)

    def point_at(self, t: float) -> Vector3:
        return self.origin + self.direction * t

    def clone(self) -> 'Line':
        return Line(self.origin.clone(), self.direction.clone())

    def equals(self, other: 'Line') -> bool:
        return (isinstance(other, Line)
                and self.origin.equals(other.origin)
                and self.direction.equals(other.direction))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Line(origin={self.origin!r}, direction={self.direction!r})"
