"""
Abstract view of a Secret Service keyring.

The export pipeline is written against these classes only. The D-Bus backed
implementation lives in secret_export.service.dbus; tests use in-memory fakes.
Implementations raise secret_export.errors exceptions, never backend ones.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class SecretSession(ABC):
    """Handle used to transfer secret values out of the service."""

    @property
    @abstractmethod
    def object_path(self) -> str:
        """Bus object path identifying the session."""


class SecretItem(ABC):
    """One stored secret."""

    @abstractmethod
    def unlock(self) -> None:
        """Unlock the item, blocking on any user prompt.

        Raises UnlockError if the service refuses or the prompt is dismissed.
        Unlocking an already unlocked item is a no-op.
        """

    @abstractmethod
    def read_label(self) -> str:
        """Raises MetadataError."""

    @abstractmethod
    def read_secret(self, session: SecretSession) -> bytes:
        """Raises SecretRetrievalError."""

    @abstractmethod
    def read_created(self) -> datetime:
        """Raises MetadataError."""

    @abstractmethod
    def read_modified(self) -> datetime:
        """Raises MetadataError."""


class SecretCollection(ABC):
    """A named container of items."""

    @abstractmethod
    def read_label(self) -> str:
        """Raises MetadataError."""


class SecretService(ABC):
    """Facade over the bus connection to the Secret Service daemon."""

    @abstractmethod
    def get_all_collections(self) -> list[SecretCollection]:
        """Raises ServiceConnectionError."""

    @abstractmethod
    def get_all_items(self, collection: SecretCollection) -> list[SecretItem]:
        """Raises ServiceConnectionError."""

    @abstractmethod
    def open_session(self) -> SecretSession:
        """Raises SessionError."""

    def close(self) -> None:
        """Release the underlying connection."""

    def __enter__(self) -> SecretService:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
