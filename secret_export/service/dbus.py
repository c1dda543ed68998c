"""
Secret Service client over the D-Bus session bus, backed by SecretStorage.

SecretStorage handles the transport and the encrypted session negotiation.
This module only adapts its objects to secret_export.service.base and maps
its exceptions onto secret_export.errors.

Usage:
    from secret_export.service.dbus import connect

    with connect() as service:
        for collection in service.get_all_collections():
            print(collection.read_label())
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

import secretstorage
from jeepney.wrappers import DBusErrorResponse
from secretstorage.exceptions import SecretStorageException
from secretstorage.util import open_session as _open_dbus_session

from secret_export.errors import (
    MetadataError,
    SecretRetrievalError,
    ServiceConnectionError,
    SessionError,
    UnlockError,
)
from secret_export.service.base import (
    SecretCollection,
    SecretItem,
    SecretService,
    SecretSession,
)

logger = logging.getLogger(__name__)

# Anything the bus round-trip can throw at us.
_BACKEND_ERRORS = (SecretStorageException, DBusErrorResponse, OSError)


def _to_datetime(timestamp: int) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=UTC)


class DBusSession(SecretSession):
    def __init__(self, raw):
        self.raw = raw

    @property
    def object_path(self) -> str:
        return self.raw.object_path


class DBusItem(SecretItem):
    """Adapter around secretstorage.Item."""

    def __init__(self, raw: secretstorage.Item):
        self.raw = raw

    @property
    def path(self) -> str:
        return self.raw.item_path

    def unlock(self) -> None:
        try:
            dismissed = self.raw.unlock()
        except _BACKEND_ERRORS as e:
            raise UnlockError(f"could not unlock item {self.path}: {e}") from e
        if dismissed:
            raise UnlockError(f"could not unlock item {self.path}: prompt dismissed")

    def read_label(self) -> str:
        try:
            return self.raw.get_label()
        except _BACKEND_ERRORS as e:
            raise MetadataError(f"could not read the label of {self.path}: {e}") from e

    def read_secret(self, session: SecretSession) -> bytes:
        # SecretStorage reads through whichever session is attached to the item.
        if isinstance(session, DBusSession):
            self.raw.session = session.raw
        try:
            return bytes(self.raw.get_secret())
        except _BACKEND_ERRORS as e:
            raise SecretRetrievalError(f"could not read the secret of {self.path}: {e}") from e

    def read_created(self) -> datetime:
        try:
            return _to_datetime(self.raw.get_created())
        except _BACKEND_ERRORS as e:
            raise MetadataError(f"could not read the creation time of {self.path}: {e}") from e

    def read_modified(self) -> datetime:
        try:
            return _to_datetime(self.raw.get_modified())
        except _BACKEND_ERRORS as e:
            raise MetadataError(
                f"could not read the modification time of {self.path}: {e}"
            ) from e


class DBusCollection(SecretCollection):
    """Adapter around secretstorage.Collection."""

    def __init__(self, raw: secretstorage.Collection):
        self.raw = raw

    @property
    def path(self) -> str:
        return self.raw.collection_path

    def read_label(self) -> str:
        try:
            return self.raw.get_label()
        except _BACKEND_ERRORS as e:
            raise MetadataError(f"could not read the label of {self.path}: {e}") from e


class DBusSecretService(SecretService):
    """SecretService over an open jeepney connection."""

    def __init__(self, connection):
        self.connection = connection

    def get_all_collections(self) -> list[SecretCollection]:
        try:
            return [DBusCollection(c) for c in secretstorage.get_all_collections(self.connection)]
        except _BACKEND_ERRORS as e:
            raise ServiceConnectionError(f"could not retrieve the collections: {e}") from e

    def get_all_items(self, collection: SecretCollection) -> list[SecretItem]:
        if not isinstance(collection, DBusCollection):
            raise TypeError(f"expected a DBusCollection, got {type(collection).__name__}")
        try:
            return [DBusItem(item) for item in collection.raw.get_all_items()]
        except _BACKEND_ERRORS as e:
            raise ServiceConnectionError(
                f"could not retrieve the items of {collection.path}: {e}"
            ) from e

    def open_session(self) -> SecretSession:
        try:
            raw = _open_dbus_session(self.connection)
        except _BACKEND_ERRORS as e:
            raise SessionError(f"could not open a Secret Service session: {e}") from e
        logger.debug("Opened Secret Service session %s", raw.object_path)
        return DBusSession(raw)

    def close(self) -> None:
        self.connection.close()


def connect() -> DBusSecretService:
    """Open the session bus and check that a Secret Service daemon answers."""
    try:
        connection = secretstorage.dbus_init()
    except _BACKEND_ERRORS as e:
        raise ServiceConnectionError(f"could not open D-Bus session: {e}") from e

    try:
        available = secretstorage.check_service_availability(connection)
    except _BACKEND_ERRORS as e:
        connection.close()
        raise ServiceConnectionError(
            f"could not create the client for the Secret Service: {e}"
        ) from e
    if not available:
        connection.close()
        raise ServiceConnectionError(
            "could not create the client for the Secret Service: service not available"
        )
    return DBusSecretService(connection)
