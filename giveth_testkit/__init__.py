"""Helpers for the Giveth backend e2e test suite.

Tokens, database seeding, random test values and the sample-data table that
matches the seeded fixtures.
"""

from giveth_testkit.assertions import assert_not_throws_async, assert_throws_async
from giveth_testkit.auth import auth_headers, decode_jwt, get_jwt
from giveth_testkit.formatting import pad_with_zero
from giveth_testkit.ids import (
    generate_hex_number,
    generate_random_ethereum_address,
    generate_random_mongo_id,
    generate_random_number,
    generate_random_transaction_hash,
)
from giveth_testkit.sample_data import (
    SAMPLE_DATA,
    TEST_ADDRESS,
    CampaignStatus,
    DacStatus,
    DonationStatus,
    EventStatus,
    MilestoneStatus,
)
from giveth_testkit.seed import seed_data
from giveth_testkit.settings import Settings, get_settings

__all__ = [
    "get_jwt",
    "auth_headers",
    "decode_jwt",
    "seed_data",
    "SAMPLE_DATA",
    "TEST_ADDRESS",
    "MilestoneStatus",
    "DonationStatus",
    "EventStatus",
    "CampaignStatus",
    "DacStatus",
    "assert_throws_async",
    "assert_not_throws_async",
    "generate_hex_number",
    "generate_random_ethereum_address",
    "generate_random_transaction_hash",
    "generate_random_mongo_id",
    "generate_random_number",
    "pad_with_zero",
    "Settings",
    "get_settings",
]
