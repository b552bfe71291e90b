"""Random identifiers for test data — hex strings, addresses, tx hashes, ObjectIds.

Values are random per call and carry no uniqueness guarantee beyond the odds
of colliding on 40+ hex characters. Nothing here is cryptographically secure;
use it for fixtures only.

Examples::

    from giveth_testkit.ids import generate_random_ethereum_address, generate_random_number

    generate_random_ethereum_address()  # '0x5c1e...'  (42 chars)
    generate_random_transaction_hash()  # '0x8b0a...'  (64 chars, see below)
    generate_random_number(1, 7)        # one of 1..6
"""

from __future__ import annotations

import random

from bson import ObjectId

HEX_DIGITS = "0123456789abcdef"

ADDRESS_HEX_LENGTH = 40
# 31 bytes, one short of a real 32-byte hash. The backend's tests were written
# against this length, so it is kept as-is.
TRANSACTION_HASH_HEX_LENGTH = 62


def generate_hex_number(length: int) -> str:
    """Random lowercase hex string of exactly ``length`` characters.

    Returns ``""`` for ``length <= 0``.
    """
    return "".join(random.choices(HEX_DIGITS, k=max(length, 0)))


def generate_random_ethereum_address() -> str:
    """``0x`` followed by 40 random hex characters (20 bytes)."""
    return f"0x{generate_hex_number(ADDRESS_HEX_LENGTH)}"


def generate_random_transaction_hash() -> str:
    """``0x`` followed by 62 random hex characters."""
    return f"0x{generate_hex_number(TRANSACTION_HASH_HEX_LENGTH)}"


def generate_random_mongo_id() -> ObjectId:
    """A fresh MongoDB ObjectId."""
    return ObjectId()


def generate_random_number(min_value: int, max_value: int) -> int:
    """Random integer in ``[min_value, max_value)``.

    Pass ``max_value + 1`` for an inclusive upper bound. An empty range
    (``min_value == max_value``) returns ``min_value``.

    Raises:
        ValueError: if ``max_value < min_value``.
    """
    if max_value < min_value:
        raise ValueError(f"max_value ({max_value}) must be >= min_value ({min_value})")
    if max_value == min_value:
        return min_value
    return random.randrange(min_value, max_value)
