"""
Fatal export failures.

Every step after collection listing is all-or-nothing: the core raises one of
these and the CLI turns it into a single-line diagnostic and a non-zero exit.
"""

from __future__ import annotations


class ExportError(Exception):
    """Base class for failures that abort an export run."""


class ServiceConnectionError(ExportError):
    """The session bus or the Secret Service daemon is unreachable."""


class CollectionNotFound(ExportError):
    def __init__(self, name: str):
        super().__init__(f"collection not found: {name!r}")
        self.name = name


class SessionError(ExportError):
    """The secret retrieval session could not be negotiated."""


class UnlockError(ExportError):
    pass


class MetadataError(ExportError):
    pass


class SecretRetrievalError(ExportError):
    pass


class SerializationError(ExportError):
    """Writing the rendered document to the sink failed."""


class OutputIOError(ExportError):
    """The output file could not be created."""


class UnknownFormatError(ExportError):
    def __init__(self, name: str, available: list[str]):
        super().__init__(f"unknown format {name!r} (allowed: {', '.join(available)})")
        self.name = name
