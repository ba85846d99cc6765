"""
Core Module - Persistence Helpers

Provides:
- Canonical JSON serialization and hashing
"""

from .canonical_json import canonical_dumps, canonical_loads, canonical_hash

__all__ = [
    'canonical_dumps',
    'canonical_loads',
    'canonical_hash',
]
