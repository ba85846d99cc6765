"""
rangekit - Interval Arithmetic for Bound Tracking

A closed, possibly-empty interval [lo, hi] over double precision reals
with hull (union), intersection, scalar scaling, exact equality and a
strict disjointness order (precedes / follows).

Empty intervals (lo > hi) are ordinary values: no operation validates
its input or raises.
"""

from .bounds.interval import (
    Interval,
    DBL_MAX,
)
from .core.canonical_json import (
    canonical_dumps,
    canonical_loads,
    canonical_hash,
)

__version__ = "0.1.0"

__all__ = [
    # Bounds
    "Interval",
    "DBL_MAX",
    # Persistence
    "canonical_dumps",
    "canonical_loads",
    "canonical_hash",
]
