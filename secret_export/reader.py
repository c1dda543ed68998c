"""Per-item reads: unlock, label, secret, timestamps, in that order."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from secret_export.records import ItemSnapshot
from secret_export.service.base import SecretItem, SecretSession

logger = logging.getLogger(__name__)


def read_item(item: SecretItem, session: SecretSession) -> ItemSnapshot:
    """Unlock ``item`` and read everything the export needs from it.

    Unlocking may block on a keyring prompt until the user answers; there is
    no timeout here. Any failure propagates and ends the run.
    """
    item.unlock()
    label = item.read_label()
    secret = item.read_secret(session)
    created = item.read_created()
    modified = item.read_modified()
    logger.debug("Read item %r (%d byte secret)", label, len(secret))
    return ItemSnapshot(label=label, secret=secret, created=created, modified=modified)


def read_items(items: Iterable[SecretItem], session: SecretSession) -> Iterator[ItemSnapshot]:
    """Read ``items`` one after the other, preserving order."""
    for item in items:
        yield read_item(item, session)
