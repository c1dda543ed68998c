"""
Canonical export records.

All models are plain dataclasses, independent of the output format.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from email.utils import format_datetime

logger = logging.getLogger(__name__)

NOTE_TEMPLATE = "exported from the Secret Service collection {collection}\n({timestamp})"


@dataclass(frozen=True)
class ItemSnapshot:
    """Values read from one unlocked item."""

    label: str
    secret: bytes
    created: datetime
    modified: datetime


@dataclass(frozen=True)
class ExportRecord:
    """One exported credential."""

    name: str
    secret_value: str
    created_at: datetime
    modified_at: datetime
    note_text: str = ""


@dataclass
class ExportDocument:
    """Ordered records of one collection plus the time the export ran."""

    collection: str
    generated_at: datetime
    records: list[ExportRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)


def format_note(collection_name: str, generated_at: datetime) -> str:
    """Provenance note attached to every record.

    The collection name is quoted with JSON escaping; the time is RFC 1123.
    """
    return NOTE_TEMPLATE.format(
        collection=json.dumps(collection_name, ensure_ascii=False),
        timestamp=format_datetime(generated_at, usegmt=generated_at.tzinfo is UTC),
    )


def build_record(
    snapshot: ItemSnapshot,
    collection_name: str,
    generated_at: datetime,
) -> ExportRecord | None:
    """Map a read item to an ExportRecord, or None if its secret is empty."""
    if len(snapshot.secret) == 0:
        logger.warning("skipped item with empty password: %s", snapshot.label)
        return None

    try:
        secret_value = snapshot.secret.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning(
            "item %s: password is not valid UTF-8, exported with replacement characters",
            snapshot.label,
        )
        secret_value = snapshot.secret.decode("utf-8", errors="replace")

    return ExportRecord(
        name=snapshot.label,
        secret_value=secret_value,
        created_at=snapshot.created,
        modified_at=snapshot.modified,
        note_text=format_note(collection_name, generated_at),
    )
