__version__ = "0.1.0"

import logging

from segdist.config import EPSILON
from segdist.geometry.errors import GeometryError, InvalidGeometry, NumericalDegeneracy
from segdist.geometry.line import Line
from segdist.geometry.segment import Segment
from segdist.geometry.vector import Vector3, add, dot, length, scale, subtract
from segdist.utils.spatial.distance import (
    DistanceResult,
    closest_distance,
    closest_parameters,
    dist3D_Line_to_Line,
    dist3D_Line_to_Segment,
    dist3D_Segment_to_Segment,
    line_to_line_distance,
    line_to_segment_distance,
    segment_to_segment_distance,
)

# Library default: stay silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EPSILON",
    "GeometryError",
    "InvalidGeometry",
    "NumericalDegeneracy",
    "Line",
    "Segment",
    "Vector3",
    "add",
    "dot",
    "length",
    "scale",
    "subtract",
    "DistanceResult",
    "closest_distance",
    "closest_parameters",
    "dist3D_Line_to_Line",
    "dist3D_Line_to_Segment",
    "dist3D_Segment_to_Segment",
    "line_to_line_distance",
    "line_to_segment_distance",
    "segment_to_segment_distance",
]
