"""Deterministic input hashing.

Two parameter objects that differ only in key order hash identically, so the
hash can serve as a cache key for generation requests:

    generate_input_hash({"goals": ["hypertrophy"], "days": "4"})
    == generate_input_hash({"days": "4", "goals": ["hypertrophy"]})

Nothing in forma caches on it yet.
"""

import hashlib
import json
from collections.abc import Mapping
from typing import Any


def sort_keys(value: Any) -> Any:
    """Recursively rebuild mappings with their keys in sorted order.

    Sequences keep their element order; each element is canonicalized.
    Scalars (and None) are returned unchanged.
    """
    if value is None:
        return None
    if isinstance(value, Mapping):
        return {key: sort_keys(value[key]) for key in sorted(value, key=str)}
    if isinstance(value, (list, tuple)):
        return [sort_keys(item) for item in value]
    return value


def canonical_json(params: Any) -> str:
    """Compact JSON of ``params`` with every mapping's keys sorted."""
    return json.dumps(sort_keys(params), separators=(",", ":"), ensure_ascii=False)


def generate_input_hash(params: Any) -> str:
    """Hex SHA-256 of the canonical JSON form of ``params``."""
    return hashlib.sha256(canonical_json(params).encode("utf-8")).hexdigest()


def generate_input_hash_fallback(params: Any) -> str:
    """Non-cryptographic 32-bit hash (djb2, xor variant) of ``params``.

    For environments where SHA-256 is unavailable. Deterministic, but
    collisions are far more likely than with ``generate_input_hash``.
    """
    text = canonical_json(params)
    value = 5381
    for char in text:
        value = (((value << 5) + value) ^ ord(char)) & 0xFFFFFFFF
    return f"{value:08x}"
