"""Restore the fixture snapshot into MongoDB.

The snapshot uses the layout written by ``mongodb-backup``::

    <root>/
        users/<id>.json            one document per file
        campaigns/<id>.bson
        .metadata/campaigns        JSON list of index specs (optional)

``.bson`` files hold raw BSON (one or more documents); ``.json`` files hold
MongoDB Extended JSON (a document or a list of documents), so ``ObjectId``
and date values round-trip. Top-level ``<collection>.bson`` files, as
written by ``mongodump``, are read as well; the ``<collection>.metadata.json``
next to each one supplies indexes and is not loaded as documents.

Usage::

    from giveth_testkit import seed_data

    result = await seed_data()            # {'users': 2, 'campaigns': 1, ...}
    result = await seed_data(settings, root="tests/data/minimal", drop=False)
"""

from __future__ import annotations

import logging
from pathlib import Path

from bson import decode_all, json_util
from pymongo import AsyncMongoClient

from giveth_testkit.settings import Settings, get_settings

logger = logging.getLogger(__name__)

SeedResult = dict[str, int]

METADATA_DIR = ".metadata"
DUMP_METADATA_SUFFIX = ".metadata.json"
DOCUMENT_SUFFIXES = (".bson", ".json")


def _read_documents(path: Path) -> list[dict]:
    """Decode every document stored in one fixture file."""
    if path.suffix == ".bson":
        return decode_all(path.read_bytes())
    data = json_util.loads(path.read_text())
    return data if isinstance(data, list) else [data]


def load_fixture_set(root: Path) -> dict[str, list[dict]]:
    """Read the snapshot at ``root`` into ``{collection: [documents]}``.

    Collections are returned in name order; documents in file-name order.
    """
    if not root.is_dir():
        raise FileNotFoundError(f"seed data directory not found: {root}")

    collections: dict[str, list[dict]] = {}
    for entry in sorted(root.iterdir()):
        if entry.name.startswith(".") or entry.name.endswith(DUMP_METADATA_SUFFIX):
            continue
        if entry.is_dir():
            docs = collections.setdefault(entry.name, [])
            for path in sorted(entry.iterdir()):
                if path.suffix in DOCUMENT_SUFFIXES:
                    docs.extend(_read_documents(path))
        elif entry.suffix in DOCUMENT_SUFFIXES:
            collections.setdefault(entry.stem, []).extend(_read_documents(entry))
    return collections


def load_index_specs(root: Path, collection: str) -> list[dict]:
    """Index specs saved next to the snapshot, minus the implicit ``_id_`` index.

    Reads ``.metadata/<collection>`` (a list of specs) or, for mongodump
    output, the ``indexes`` list of ``<collection>.metadata.json``.
    """
    specs: list[dict] = []
    backup_path = root / METADATA_DIR / collection
    if backup_path.is_file():
        specs.extend(json_util.loads(backup_path.read_text()))
    dump_path = root / f"{collection}{DUMP_METADATA_SUFFIX}"
    if dump_path.is_file():
        specs.extend(json_util.loads(dump_path.read_text()).get("indexes", []))
    return [s for s in specs if s.get("name") != "_id_"]


async def seed_data(
    settings: Settings | None = None,
    *,
    root: str | Path | None = None,
    drop: bool = True,
) -> SeedResult:
    """Restore the fixture snapshot into the database named by ``mongodb_url``.

    With ``drop=True`` every restored collection is dropped first, so seeding
    twice leaves the same state. Do not run two seeds against the same
    database concurrently.

    Returns the number of documents inserted per collection. Driver errors
    (unreachable server, duplicate keys with ``drop=False``, ...) propagate.
    """
    settings = settings or get_settings()
    root = Path(root or settings.seed_data_dir)
    fixtures = load_fixture_set(root)

    client = AsyncMongoClient(
        settings.mongodb_url,
        serverSelectionTimeoutMS=settings.mongodb_server_selection_timeout_ms,
    )
    try:
        db = client.get_default_database()
        result: SeedResult = {}
        for name, docs in fixtures.items():
            collection = db[name]
            if drop:
                await collection.drop()
            inserted = 0
            if docs:
                res = await collection.insert_many(docs)
                inserted = len(res.inserted_ids)
            for spec in load_index_specs(root, name):
                options = {k: v for k, v in spec.items() if k not in ("v", "key", "ns")}
                await collection.create_index(list(spec["key"].items()), **options)
            result[name] = inserted
            logger.info("Seeded %s: %d documents", name, inserted)
    finally:
        await client.close()

    logger.info("Seed complete: %d collections from %s into %s",
                len(result), root, db.name)
    return result
