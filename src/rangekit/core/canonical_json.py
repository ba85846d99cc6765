"""
Canonical JSON Serialization

Persisted bounds are written as deterministic JSON so that equal
intervals always produce the same text and the same digest. An Interval
becomes its [lo, hi] pair; non-finite bounds use JSON's Infinity and
NaN tokens.
"""

import json
import hashlib
from typing import Any


def canonical_dumps(obj: Any, indent: int = None) -> str:
    """
    Write intervals, or containers of them, as canonical JSON.

    Dictionary keys are sorted. Any object with a ``to_canonical()``
    method is written through it, so an Interval nested in a dict or
    list becomes a [lo, hi] pair.

    Args:
        obj: Interval, or a dict/list holding intervals
        indent: Indentation level (None for compact separators)
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(',', ':') if indent is None else None,
        indent=indent,
        default=_to_canonical
    )


def canonical_loads(text: str) -> Any:
    """Parse canonical JSON text; pass pairs to Interval.from_canonical."""
    return json.loads(text)


def canonical_hash(obj: Any) -> str:
    """SHA-256 hex digest of the canonical text, equal for equal intervals."""
    return hashlib.sha256(canonical_dumps(obj).encode()).hexdigest()


def _to_canonical(obj: Any) -> Any:
    if hasattr(obj, "to_canonical"):
        return obj.to_canonical()
    return str(obj)
