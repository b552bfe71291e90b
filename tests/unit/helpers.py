"""Shared helpers for unit tests — mock Mongo client, fixture snapshots."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock


def mock_mongo_client():
    """Mock AsyncMongoClient whose default database hands out mock collections.

    Returns ``(client, collections)``; ``collections`` fills in as the code
    under test indexes the database.
    """
    collections: dict[str, MagicMock] = {}

    def _collection(name):
        if name not in collections:
            coll = MagicMock()
            coll.drop = AsyncMock()
            coll.insert_many = AsyncMock(
                side_effect=lambda docs: MagicMock(inserted_ids=[d.get("_id") for d in docs])
            )
            coll.create_index = AsyncMock()
            collections[name] = coll
        return collections[name]

    db = MagicMock()
    db.name = "giveth-testkit"
    db.__getitem__.side_effect = _collection

    client = MagicMock()
    client.get_default_database.return_value = db
    client.close = AsyncMock()
    return client, collections


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))
    return path
