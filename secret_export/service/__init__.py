"""
Secret Service access.

Public API:
    SecretService, SecretCollection, SecretItem, SecretSession   → interface
    secret_export.service.dbus.connect()                          → D-Bus client
"""

from __future__ import annotations

from secret_export.service.base import (
    SecretCollection,
    SecretItem,
    SecretService,
    SecretSession,
)

__all__ = ["SecretCollection", "SecretItem", "SecretService", "SecretSession"]
