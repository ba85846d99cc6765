"""
Bounds Module - One-Dimensional Interval Bounds

Provides the closed Interval value type used for per-dimension bounds
and distance-bound pruning.
"""

from .interval import (
    Interval,
    DBL_MAX,
)

__all__ = [
    'Interval',
    'DBL_MAX',
]
