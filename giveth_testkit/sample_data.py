"""Sample data matching the shipped seed fixtures (``db_seed_data/giveth``).

The IDs and addresses below exist in the fixture snapshot restored by
``seed_data()``; keep the two in sync when either changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from giveth_testkit.ids import generate_random_ethereum_address, generate_random_transaction_hash

# Seeded admin user; also the default identity of get_jwt()
TEST_ADDRESS = "0x90F8bf6A479f320ead074411a4B0e7944Ea8c9C1"
SECOND_USER_ADDRESS = "0xFFcf8FDEE72ac11b5c542428B35EEF5769C409f0"
USER_GIVER_ID = 1

CAMPAIGN_ID = "5fd3412e3e403d0c0f9e4463"
MILESTONE_ID = "5fd3424c3e403d0c0f9e4487"
DAC_ID = "5fd339eaa5ffa2a6198ecd70"

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
ANY_TOKEN_ADDRESS = "0xFFfFfFffFFfffFFfFFfFFFFFffFFFffffFfFFFfF"


class MilestoneStatus(str, Enum):
    PROPOSED = "Proposed"
    REJECTED = "Rejected"
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    NEEDS_REVIEW = "NeedsReview"
    COMPLETED = "Completed"
    CANCELED = "Canceled"
    PAYING = "Paying"
    PAID = "Paid"
    FAILED = "Failed"
    ARCHIVED = "Archived"


class DonationStatus(str, Enum):
    PENDING = "Pending"
    PAYING = "Paying"
    PAID = "Paid"
    TO_APPROVE = "ToApprove"
    WAITING = "Waiting"
    COMMITTED = "Committed"
    CANCELED = "Canceled"
    REJECTED = "Rejected"
    FAILED = "Failed"


class EventStatus(str, Enum):
    # picked up by the ws subscription, fewer than requiredConfirmations so far
    PENDING = "Pending"
    # picked up by polling, has requiredConfirmations, ready to process
    WAITING = "Waiting"
    PROCESSING = "Processing"
    PROCESSED = "Processed"
    FAILED = "Failed"


class CampaignStatus(str, Enum):
    ACTIVE = "Active"
    PENDING = "Pending"
    CANCELED = "Canceled"
    FAILED = "Failed"


class DacStatus(str, Enum):
    ACTIVE = "Active"
    PENDING = "Pending"
    CANCELED = "Canceled"
    FAILED = "Failed"


def create_milestone_data() -> dict:
    """Request body for creating a BridgedMilestone under the seeded campaign."""
    return {
        "fullyFunded": False,
        "mined": True,
        "title": "test-milestone",
        "description": "<p>give money for god sake</p>",
        "image": "",
        "reviewerAddress": TEST_ADDRESS,
        "dacId": 0,
        "date": "2020-11-10T00:00:00.000Z",
        "recipientAddress": ZERO_ADDRESS,
        "pluginAddress": "0x0000000000000000000000000000000000000001",
        "campaignId": CAMPAIGN_ID,
        "status": MilestoneStatus.IN_PROGRESS.value,
        "items": [],
        "token": {
            "name": "ANY_TOKEN",
            "address": ANY_TOKEN_ADDRESS,
            "foreignAddress": ANY_TOKEN_ADDRESS,
            "symbol": "ANY_TOKEN",
            "decimals": "1",
        },
        "owner": {
            "address": TEST_ADDRESS,
            "createdAt": "2018-08-22T00:34:52.691Z",
            "updatedAt": "2020-10-22T00:16:39.775Z",
            "email": "test@giveth.io",
        },
        "type": "BridgedMilestone",
        "maxAmount": None,
        "txHash": "0x8b0abaa5f5d3cc87c3d52362ef147b8a0fd4ccb02757f5f48b6048aa2e9d86c0",
        "proofItems": [],
        "pendingRecipientAddress": TEST_ADDRESS,
        "peopleCount": 3,
    }


def create_campaign_data() -> dict:
    """Request body for creating a campaign owned and reviewed by TEST_ADDRESS."""
    return {
        "title": "Hello I;m new Campaign",
        "projectId": 10,
        "image": "This should be image :))",
        "mined": False,
        "reviewerAddress": TEST_ADDRESS,
        "ownerAddress": TEST_ADDRESS,
        "status": CampaignStatus.PENDING.value,
        "txHash": generate_random_transaction_hash(),
        "description": "test description for campaign",
    }


def create_dac_data() -> dict:
    """Request body for creating a DAC owned by TEST_ADDRESS."""
    return {
        "title": "test dac title",
        "description": "test dac description",
        "status": DacStatus.PENDING.value,
        "txHash": generate_random_transaction_hash(),
        "ownerAddress": TEST_ADDRESS,
    }


@dataclass(frozen=True)
class SampleData:
    """Read-only view of the seeded entities, keyed the way e2e tests use them.

    ``CREATE_*_DATA`` return a new dict on every access, so tests may mutate
    the body they get.
    """

    USER_ADDRESS: str = TEST_ADDRESS
    USER_GIVER_ID: int = USER_GIVER_ID
    SECOND_USER_ADDRESS: str = SECOND_USER_ADDRESS
    MILESTONE_ID: str = MILESTONE_ID
    CAMPAIGN_ID: str = CAMPAIGN_ID
    DAC_ID: str = DAC_ID
    # Not present in the fixtures
    FAKE_USER_ADDRESS: str = field(default_factory=generate_random_ethereum_address)

    MILESTONE_STATUSES: type[MilestoneStatus] = MilestoneStatus
    DonationStatus: type[DonationStatus] = DonationStatus
    EventStatus: type[EventStatus] = EventStatus
    CAMPAIGN_STATUSES: type[CampaignStatus] = CampaignStatus
    DacStatus: type[DacStatus] = DacStatus

    @property
    def CREATE_MILESTONE_DATA(self) -> dict:
        return create_milestone_data()

    @property
    def CREATE_CAMPAIGN_DATA(self) -> dict:
        return create_campaign_data()

    @property
    def CREATE_DAC_DATA(self) -> dict:
        return create_dac_data()


SAMPLE_DATA = SampleData()
