"""Tests for deterministic input hashing."""

from forma.utils.hashing import (
    canonical_json,
    generate_input_hash,
    generate_input_hash_fallback,
    sort_keys,
)


class TestSortKeys:
    """Tests for recursive key canonicalization."""

    def test_nested_mappings_sorted(self):
        value = sort_keys({"b": {"z": 1, "a": 2}, "a": [{"y": 1, "x": 2}]})
        assert list(value) == ["a", "b"]
        assert list(value["b"]) == ["a", "z"]
        assert list(value["a"][0]) == ["x", "y"]

    def test_scalars_and_none_unchanged(self):
        assert sort_keys(None) is None
        assert sort_keys(5) == 5
        assert sort_keys("text") == "text"

    def test_canonical_json_is_compact(self):
        assert canonical_json({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'


class TestGenerateInputHash:
    """Tests for the SHA-256 input hash."""

    def test_key_order_does_not_matter(self):
        first = generate_input_hash({"goals": ["hypertrophy"], "days": "4"})
        second = generate_input_hash({"days": "4", "goals": ["hypertrophy"]})
        assert first == second

    def test_different_values_differ(self):
        assert generate_input_hash({"days": "4"}) != generate_input_hash({"days": "5"})

    def test_array_order_matters(self):
        first = generate_input_hash({"goals": ["strength", "hypertrophy"]})
        second = generate_input_hash({"goals": ["hypertrophy", "strength"]})
        assert first != second

    def test_hex_sha256_format(self):
        digest = generate_input_hash({"a": 1})
        assert len(digest) == 64
        int(digest, 16)


class TestFallbackHash:
    """Tests for the 32-bit fallback hash."""

    def test_format(self):
        digest = generate_input_hash_fallback({"a": 1})
        assert len(digest) == 8
        int(digest, 16)

    def test_key_order_does_not_matter(self):
        assert generate_input_hash_fallback({"x": 1, "y": [1, {"b": 2, "a": 1}]}) == (
            generate_input_hash_fallback({"y": [1, {"a": 1, "b": 2}], "x": 1})
        )

    def test_different_values_differ(self):
        assert generate_input_hash_fallback({"days": 4}) != generate_input_hash_fallback({"days": 5})
