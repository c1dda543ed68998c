"""
Collection discovery and session setup.

Listing is advisory: a collection whose label cannot be read is logged and
skipped. Everything needed to export (items, session) is fatal on failure.
"""

from __future__ import annotations

import logging

from secret_export.errors import CollectionNotFound, MetadataError
from secret_export.service.base import (
    SecretCollection,
    SecretItem,
    SecretService,
    SecretSession,
)

logger = logging.getLogger(__name__)


def _labelled(service: SecretService) -> list[tuple[str, SecretCollection]]:
    """(label, collection) pairs in service order, unreadable labels skipped."""
    pairs = []
    for collection in service.get_all_collections():
        try:
            label = collection.read_label()
        except MetadataError as e:
            logger.warning("%s", e)
            continue
        pairs.append((label, collection))
    return pairs


def list_collections(service: SecretService) -> list[str]:
    """Labels of every collection with a non-empty label."""
    return [label for label, _ in _labelled(service) if label]


def resolve_collection(service: SecretService, name: str) -> SecretCollection:
    """Return the first collection labelled exactly ``name``."""
    for label, collection in _labelled(service):
        if label and label == name:
            logger.info("Resolved collection %r", name)
            return collection
    raise CollectionNotFound(name)


def list_items(service: SecretService, collection: SecretCollection) -> list[SecretItem]:
    items = service.get_all_items(collection)
    logger.info("Collection holds %d item(s)", len(items))
    return items


def open_session(service: SecretService) -> SecretSession:
    """Open the single retrieval session used for the whole run."""
    session = service.open_session()
    logger.debug("Retrieval session: %s", session.object_path)
    return session
