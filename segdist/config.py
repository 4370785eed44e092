"""
Package-wide constants and environment switches.

The closest-point solvers use a single absolute tolerance, ``EPSILON``, both
for classifying two directions as (nearly) parallel and for snapping
near-zero parameter numerators to exactly zero. It is deliberately not
exposed as a parameter of the solvers.
"""
from __future__ import annotations

import os
from typing import Optional

# Absolute threshold on D = (u.u)(v.v) - (u.v)^2 and on parameter numerators.
# Not scale-normalized: very short or very long direction vectors can be
# misclassified as parallel / non-parallel.
EPSILON: float = 1e-6

LOG_LEVEL_ENV: str = "SEGDIST_LOG_LEVEL"


def env_log_level(default: Optional[str] = None) -> Optional[str]:
    """
    Return the log level requested through ``SEGDIST_LOG_LEVEL``.

    The value is upper-cased so that ``debug`` and ``DEBUG`` are accepted.
    ``default`` is returned when the variable is unset or blank.
    """
    val = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if not val:
        return default
    return val.upper()
