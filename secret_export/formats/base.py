"""Common interface for document renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

from secret_export.records import ExportDocument


class Exporter(ABC):
    """Renders a whole ExportDocument onto a text sink in one go."""

    name: str = ""

    @abstractmethod
    def render(self, document: ExportDocument, sink: TextIO) -> None:
        """Write ``document`` to ``sink``.

        Raises:
            SerializationError: if writing to the sink fails. There is no
                partial-success mode.
        """
