"""
Interval Arithmetic on Closed Ranges

A closed interval [lo, hi] over double precision reals, used to track
per-dimension bounds and to answer pruning queries.

An inverted pair (lo > hi) is the empty interval. It is an ordinary
value: nothing here validates bounds or raises on them. Disjoint
intersections silently produce one, and it reports zero width, contains
no point, and is absorbed by union.

Value-returning operations leave their operands untouched. The
``*_update`` methods (and the augmented operators) replace the
receiver's bounds in place. Instances are not safe to mutate from
several threads at once.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterable, List, Sequence, Union
import numpy as np


# Sentinel magnitude for the empty interval and for entire()
DBL_MAX = float(np.finfo(np.float64).max)


@dataclass(eq=False)
class Interval:
    """
    A closed interval [lo, hi], empty when lo > hi.

    Equality is exact comparison of the stored bounds. Two empty
    intervals are equal only if their bounds are identical, so
    Interval(1, -1) != Interval.empty().

    precedes/follows form a partial order: overlapping or touching
    intervals are incomparable. Rich comparison operators are not
    defined, so sorting a list of intervals raises TypeError.
    """
    lo: float
    hi: float

    # Let numpy scalars on the left defer to __rmul__
    __array_ufunc__ = None

    @classmethod
    def empty(cls) -> 'Interval':
        """Create an empty interval that is absorbed by union."""
        return cls(DBL_MAX, -DBL_MAX)

    @classmethod
    def point(cls, x: float) -> 'Interval':
        """Create a point interval [x, x]."""
        return cls(x, x)

    @classmethod
    def entire(cls) -> 'Interval':
        """Create an interval containing every finite value."""
        return cls(-DBL_MAX, DBL_MAX)

    @classmethod
    def hull(cls, values: Union[np.ndarray, Iterable[float]]) -> 'Interval':
        """
        Smallest interval covering a sample of values.

        Args:
            values: 1-D array or sequence of observations

        Returns:
            Interval [min, max] of the sample, or empty() if there is none
        """
        if not isinstance(values, np.ndarray):
            values = list(values)
        arr = np.asarray(values, dtype=np.float64).ravel()
        if arr.size == 0:
            return cls.empty()
        return cls(float(arr.min()), float(arr.max()))

    def copy(self) -> 'Interval':
        return Interval(self.lo, self.hi)

    @property
    def is_empty(self) -> bool:
        return self.lo > self.hi

    @property
    def width(self) -> float:
        # Clamped so an empty interval never reports a negative width
        return max(0.0, self.hi - self.lo)

    @property
    def midpoint(self) -> float:
        """Center of the interval. Meaningless for an empty interval."""
        return (self.lo + self.hi) / 2.0

    def contains(self, x: float) -> bool:
        return self.lo <= x <= self.hi

    def __contains__(self, x: float) -> bool:
        return self.contains(x)

    # Hull (union)

    def union(self, other: 'Interval') -> 'Interval':
        """Convex hull of two intervals, spanning any gap between them."""
        return Interval(min(self.lo, other.lo), max(self.hi, other.hi))

    def union_update(self, other: 'Interval') -> None:
        """Expand this interval in place to the hull with other."""
        self.lo = min(self.lo, other.lo)
        self.hi = max(self.hi, other.hi)

    # Intersection

    def intersect(self, other: 'Interval') -> 'Interval':
        """Intersection of two intervals (empty if they are disjoint)."""
        return Interval(max(self.lo, other.lo), min(self.hi, other.hi))

    def intersect_update(self, other: 'Interval') -> None:
        """Shrink this interval in place to its intersection with other."""
        self.lo = max(self.lo, other.lo)
        self.hi = min(self.hi, other.hi)

    # Scaling

    def scale(self, factor: float) -> 'Interval':
        """
        Multiply both bounds by a scalar.

        The bounds are reordered after multiplication, so a negative
        factor mirrors the interval and zero collapses it to [0, 0].
        Infinite bounds follow IEEE rules: inf * 0 is nan, so only
        finite intervals (including empty() and entire()) collapse.
        """
        a = self.lo * factor
        b = self.hi * factor
        return Interval(min(a, b), max(a, b))

    def scale_update(self, factor: float) -> None:
        """Multiply both bounds by a scalar in place."""
        a = self.lo * factor
        b = self.hi * factor
        self.lo = min(a, b)
        self.hi = max(a, b)

    # Comparison

    def equals(self, other: 'Interval') -> bool:
        return self.lo == other.lo and self.hi == other.hi

    def not_equals(self, other: 'Interval') -> bool:
        return not self.equals(other)

    def precedes(self, other: 'Interval') -> bool:
        """
        True if this interval lies strictly below other.

        Overlapping or touching intervals neither precede nor follow each
        other. Not a sort key.
        """
        return self.hi < other.lo

    def follows(self, other: 'Interval') -> bool:
        """True if this interval lies strictly above other."""
        return self.lo > other.hi

    # Operator sugar

    def __or__(self, other: 'Interval') -> 'Interval':
        if not isinstance(other, Interval):
            return NotImplemented
        return self.union(other)

    def __ior__(self, other: 'Interval') -> 'Interval':
        if not isinstance(other, Interval):
            return NotImplemented
        self.union_update(other)
        return self

    def __and__(self, other: 'Interval') -> 'Interval':
        if not isinstance(other, Interval):
            return NotImplemented
        return self.intersect(other)

    def __iand__(self, other: 'Interval') -> 'Interval':
        if not isinstance(other, Interval):
            return NotImplemented
        self.intersect_update(other)
        return self

    def __mul__(self, factor: float) -> 'Interval':
        if not isinstance(factor, Real):
            return NotImplemented
        return self.scale(factor)

    def __rmul__(self, factor: float) -> 'Interval':
        return self.__mul__(factor)

    def __imul__(self, factor: float) -> 'Interval':
        if not isinstance(factor, Real):
            return NotImplemented
        self.scale_update(factor)
        return self

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.not_equals(other)

    # Mutable value: no hash
    __hash__ = None

    # Persistence

    def to_canonical(self) -> List[float]:
        """Ordered pair [lo, hi] with no further metadata."""
        # Adding 0.0 folds -0.0 into 0.0 so equal intervals serialize alike
        return [self.lo + 0.0, self.hi + 0.0]

    @classmethod
    def from_canonical(cls, pair: Sequence[float]) -> 'Interval':
        """
        Rebuild an interval from its canonical [lo, hi] pair.

        Accepts a list, a tuple or a numpy array of shape (2,).

        Raises:
            ValueError: if pair is not two real numbers
        """
        if isinstance(pair, np.ndarray):
            if pair.shape != (2,):
                raise ValueError(f"Invalid interval pair: {pair!r}")
            pair = pair.tolist()
        if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence) or len(pair) != 2:
            raise ValueError(f"Invalid interval pair: {pair!r}")
        lo, hi = pair
        if isinstance(lo, bool) or isinstance(hi, bool) or \
                not isinstance(lo, Real) or not isinstance(hi, Real):
            raise ValueError(f"Invalid interval pair: {pair!r}")
        return cls(float(lo), float(hi))

    def __repr__(self) -> str:
        return f"[{self.lo:.6g}, {self.hi:.6g}]"
