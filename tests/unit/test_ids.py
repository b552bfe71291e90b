"""Unit tests for giveth_testkit/ids.py — random hex, addresses, tx hashes, numbers."""

from __future__ import annotations

import re

import pytest
from bson import ObjectId

from giveth_testkit.ids import (
    generate_hex_number,
    generate_random_ethereum_address,
    generate_random_mongo_id,
    generate_random_number,
    generate_random_transaction_hash,
)

HEX_RE = re.compile(r"^[0-9a-f]*$")


class TestGenerateHexNumber:
    @pytest.mark.parametrize("length", [0, 1, 16, 40, 62, 64, 257])
    def test_exact_length_and_charset(self, length):
        value = generate_hex_number(length)
        assert len(value) == length
        assert HEX_RE.match(value)

    def test_negative_length_is_empty(self):
        assert generate_hex_number(-3) == ""

    def test_calls_are_independent(self):
        assert len({generate_hex_number(32) for _ in range(20)}) == 20


class TestAddressesAndHashes:
    def test_ethereum_address_shape(self):
        for _ in range(50):
            assert re.fullmatch(r"0x[0-9a-f]{40}", generate_random_ethereum_address())

    def test_transaction_hash_is_62_hex_chars(self):
        """Kept one byte short of a 32-byte hash; tests downstream rely on it."""
        for _ in range(50):
            tx = generate_random_transaction_hash()
            assert re.fullmatch(r"0x[0-9a-f]{62}", tx)
            assert len(tx) == 64

    def test_mongo_id_is_fresh_object_id(self):
        first = generate_random_mongo_id()
        second = generate_random_mongo_id()
        assert isinstance(first, ObjectId)
        assert first != second


class TestGenerateRandomNumber:
    def test_stays_in_half_open_range(self):
        values = {generate_random_number(3, 7) for _ in range(500)}
        assert values <= {3, 4, 5, 6}
        assert 7 not in values

    def test_covers_range(self):
        values = {generate_random_number(0, 3) for _ in range(500)}
        assert values == {0, 1, 2}

    def test_negative_bounds(self):
        for _ in range(100):
            assert -5 <= generate_random_number(-5, -1) < -1

    def test_empty_range_returns_min(self):
        assert generate_random_number(5, 5) == 5

    def test_inverted_range_raises(self):
        with pytest.raises(ValueError, match="must be >="):
            generate_random_number(6, 5)
