from segdist.geometry.errors import GeometryError, InvalidGeometry, NumericalDegeneracy
from segdist.geometry.line import Line
from segdist.geometry.segment import Segment
from segdist.geometry.vector import Vector3
