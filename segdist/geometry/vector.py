"""
Minimal 3D vector value type used by the line/segment solvers.

``Vector3`` wraps a ``numpy.float64`` array of shape ``(3,)``. All arithmetic
returns new vectors or plain floats; ``negate_in_place`` and
``normalize_in_place`` are the only mutating operations and are meant for
call-local temporaries.

Examples
--------

>>> from segdist.geometry.vector import Vector3, dot
>>> u = Vector3(1.0, 0.0, 1.0)
>>> dot(u, u)
2.0
>>> (u * 2.0).as_tuple()
(2.0, 0.0, 2.0)
"""
from __future__ import annotations

from typing import Iterator, Tuple, Union

import numpy as np


class Vector3:
    """Ordered triple of doubles ``(x, y, z)``."""

    __slots__ = ("_data",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls, values) -> 'Vector3':
        """Build a vector from any array-like holding exactly three numbers."""
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.shape != (3,):
            raise ValueError(f"Expected 3 components, got shape {np.shape(values)}.")
        return cls(arr[0], arr[1], arr[2])

    @classmethod
    def zero(cls) -> 'Vector3':
        return cls(0.0, 0.0, 0.0)

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    def as_array(self) -> np.ndarray:
        """Return a copy of the components as a ``(3,)`` float array."""
        return self._data.copy()

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def clone(self) -> 'Vector3':
        return Vector3(*self._data)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def add(self, other: 'Vector3') -> 'Vector3':
        return Vector3(*(self._data + other._data))

    def subtract(self, other: 'Vector3') -> 'Vector3':
        return Vector3(*(self._data - other._data))

    def scale(self, factor: float) -> 'Vector3':
        return Vector3(*(self._data * float(factor)))

    def negate(self) -> 'Vector3':
        return Vector3(*(-self._data))

    def negate_in_place(self) -> 'Vector3':
        """Flip the sign of every component and return ``self``."""
        np.negative(self._data, out=self._data)
        return self

    def dot(self, other: 'Vector3') -> float:
        return float(np.dot(self._data, other._data))

    def cross(self, other: 'Vector3') -> 'Vector3':
        return Vector3(*np.cross(self._data, other._data))

    def length_squared(self) -> float:
        return float(np.dot(self._data, self._data))

    def length(self) -> float:
        return float(np.linalg.norm(self._data))

    def normalize(self) -> 'Vector3':
        """
        Return the unit vector with the same direction.

        A zero vector is returned unchanged since it has no direction.
        """
        return self.clone().normalize_in_place()

    def normalize_in_place(self) -> 'Vector3':
        norm = self.length()
        if norm == 0.0:
            return self
        self._data /= norm
        return self

    def distance(self, other: 'Vector3') -> float:
        return float(np.linalg.norm(self._data - other._data))

    def equals(self, other: 'Vector3') -> bool:
        """Exact component-wise equality."""
        if not isinstance(other, Vector3):
            return False
        return bool(np.array_equal(self._data, other._data))

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------
    def __add__(self, other: 'Vector3') -> 'Vector3':
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: 'Vector3') -> 'Vector3':
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor: Union[int, float]) -> 'Vector3':
        if isinstance(factor, Vector3):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def __neg__(self) -> 'Vector3':
        return self.negate()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.equals(other)

    # Mutable through negate_in_place/normalize_in_place, so not hashable.
    __hash__ = None

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    def __len__(self) -> int:
        return 3

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def __repr__(self) -> str:
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"


VectorLike = Union[Vector3, np.ndarray, Tuple[float, float, float], list]


def as_vector3(value: VectorLike) -> Vector3:
    """Return ``value`` if it already is a ``Vector3``, otherwise convert it."""
    if isinstance(value, Vector3):
        return value
    return Vector3.from_array(value)


def dot(a: Vector3, b: Vector3) -> float:
    return a.dot(b)


def add(a: Vector3, b: Vector3) -> Vector3:
    return a.add(b)


def subtract(a: Vector3, b: Vector3) -> Vector3:
    return a.subtract(b)


def scale(v: Vector3, factor: float) -> Vector3:
    return v.scale(factor)


def length(v: Vector3) -> float:
    return v.length()
