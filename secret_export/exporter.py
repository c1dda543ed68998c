"""
Export pipeline — collection → items → session → records → rendered document.

Usage:
    from secret_export.exporter import collect_document, write_document

    with connect() as service:
        document = collect_document(service, "Login")
    write_document(document, "csv", sys.stdout)

collect_document() never touches the output: if any item fails, nothing has
been written yet.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TextIO

from secret_export.enumerator import list_items, open_session, resolve_collection
from secret_export.formats import Exporter, get_exporter
from secret_export.reader import read_items
from secret_export.records import ExportDocument, build_record
from secret_export.service.base import SecretService

logger = logging.getLogger(__name__)


def collect_document(
    service: SecretService,
    collection_name: str,
    *,
    now: datetime | None = None,
) -> ExportDocument:
    """Read every item of ``collection_name`` into an ExportDocument.

    Args:
        service: Connected Secret Service client.
        collection_name: Exact label of the collection to export.
        now: Generation time stamped into each note (defaults to current UTC).

    Returns:
        The document, with empty-secret items left out.
    """
    collection = resolve_collection(service, collection_name)
    items = list_items(service, collection)
    session = open_session(service)

    document = ExportDocument(collection=collection_name, generated_at=now or datetime.now(UTC))
    skipped = 0
    for snapshot in read_items(items, session):
        record = build_record(snapshot, collection_name, document.generated_at)
        if record is None:
            skipped += 1
            continue
        document.records.append(record)

    logger.info("Exported %d item(s), skipped %d", len(document), skipped)
    return document


def write_document(document: ExportDocument, fmt: str | Exporter, sink: TextIO) -> None:
    """Render ``document`` onto ``sink`` with an exporter or a format name."""
    exporter = fmt if isinstance(fmt, Exporter) else get_exporter(fmt)
    logger.debug("Rendering %d record(s) as %s", len(document), exporter.name)
    exporter.render(document, sink)
