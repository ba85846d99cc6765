"""
Tests for Canonical JSON persistence of intervals
"""

import math

import numpy as np
import pytest
from rangekit.bounds.interval import Interval, DBL_MAX
from rangekit.core.canonical_json import canonical_dumps, canonical_loads, canonical_hash


class TestIntervalCanonical:
    """Test the ordered-pair representation."""

    def test_to_canonical(self):
        """Test an interval serializes as [lo, hi]."""
        assert Interval(1.5, 2.0).to_canonical() == [1.5, 2.0]

    def test_from_canonical(self):
        """Test rebuilding from a pair."""
        assert Interval.from_canonical([1.5, 2.0]) == Interval(1.5, 2.0)
        assert Interval.from_canonical((3, -3)) == Interval(3.0, -3.0)

    def test_from_canonical_array(self):
        """Test rebuilding from a numpy pair."""
        iv = Interval.from_canonical(np.array([1.0, 2.0]))
        assert iv == Interval(1.0, 2.0)
        assert type(iv.lo) is float

    def test_to_canonical_folds_negative_zero(self):
        """Test -0.0 bounds are written as 0.0."""
        pair = Interval(-5.0, -3.0).scale(0).to_canonical()
        assert pair == [0.0, 0.0]
        assert all(math.copysign(1.0, b) == 1.0 for b in pair)

    @pytest.mark.parametrize("pair", [
        [1.0],
        [1.0, 2.0, 3.0],
        "ab",
        None,
        [1.0, "x"],
        [True, 2.0],
        np.array([1.0, 2.0, 3.0]),
        np.array([[1.0, 2.0]]),
        np.array([True, False]),
    ])
    def test_from_canonical_rejects(self, pair):
        """Test malformed pairs raise ValueError."""
        with pytest.raises(ValueError):
            Interval.from_canonical(pair)


class TestCanonicalJson:
    """Test canonical JSON text and hashing."""

    def test_dumps_interval(self):
        """Test an interval is written through to_canonical()."""
        assert canonical_dumps(Interval(1.5, 2.0)) == "[1.5,2.0]"

    def test_dumps_sorted_keys(self):
        """Test dictionaries are written with sorted keys."""
        text = canonical_dumps({"y": Interval(0.0, 1.0), "x": Interval(-1.0, 0.0)})
        assert text == '{"x":[-1.0,0.0],"y":[0.0,1.0]}'

    def test_empty_roundtrip(self):
        """Test the sentinel empty interval survives a round trip."""
        text = canonical_dumps(Interval.empty())
        assert Interval.from_canonical(canonical_loads(text)) == Interval.empty()

    def test_infinite_roundtrip(self):
        """Test non-finite bounds use JSON's Infinity token."""
        iv = Interval(-math.inf, math.inf)
        text = canonical_dumps(iv)
        assert text == "[-Infinity,Infinity]"
        assert Interval.from_canonical(canonical_loads(text)) == iv

    def test_hash_deterministic(self):
        """Test equal intervals hash identically."""
        assert canonical_hash(Interval(0.0, DBL_MAX)) == canonical_hash(Interval(0.0, DBL_MAX))
        assert canonical_hash(Interval(0.0, 1.0)) != canonical_hash(Interval(0.0, 2.0))

    def test_hash_equal_after_zero_scale(self):
        """Test a zero-scaled interval hashes like [0, 0]."""
        collapsed = Interval(-5.0, -3.0).scale(0)
        assert collapsed == Interval(0.0, 0.0)
        assert canonical_dumps(collapsed) == "[0.0,0.0]"
        assert canonical_hash(collapsed) == canonical_hash(Interval(0.0, 0.0))

    def test_indent(self):
        """Test indented output still parses."""
        text = canonical_dumps({"b": Interval(1.0, 2.0)}, indent=2)
        assert canonical_loads(text) == {"b": [1.0, 2.0]}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
