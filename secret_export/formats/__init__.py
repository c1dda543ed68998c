"""
Output formats.

Public API:
    get_exporter(name)     → Exporter instance for "paw" or "csv"
    available_formats()    → registered format names
"""

from __future__ import annotations

from secret_export.errors import UnknownFormatError
from secret_export.formats.base import Exporter
from secret_export.formats.csv_exporter import CsvExporter
from secret_export.formats.paw_exporter import PawExporter

EXPORTERS: dict[str, type[Exporter]] = {
    PawExporter.name: PawExporter,
    CsvExporter.name: CsvExporter,
}


def available_formats() -> list[str]:
    return list(EXPORTERS)


def get_exporter(name: str) -> Exporter:
    try:
        return EXPORTERS[name]()
    except KeyError:
        raise UnknownFormatError(name, available_formats()) from None


__all__ = ["CsvExporter", "Exporter", "PawExporter", "available_formats", "get_exporter"]
