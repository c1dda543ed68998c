"""Flat CSV export: name,password,created,modified."""

from __future__ import annotations

import csv
from datetime import datetime
from typing import TextIO

from secret_export.errors import SerializationError
from secret_export.formats.base import Exporter
from secret_export.records import ExportDocument

HEADER = ["name", "password", "created", "modified"]


def format_timestamp(value: datetime) -> str:
    """ISO 8601, identical for every row."""
    return value.isoformat()


class CsvExporter(Exporter):
    name = "csv"

    def render(self, document: ExportDocument, sink: TextIO) -> None:
        writer = csv.writer(sink, lineterminator="\n")
        try:
            writer.writerow(HEADER)
            for record in document.records:
                writer.writerow(
                    [
                        record.name,
                        record.secret_value,
                        format_timestamp(record.created_at),
                        format_timestamp(record.modified_at),
                    ]
                )
            sink.flush()
        except (csv.Error, OSError, ValueError) as e:
            raise SerializationError(f"could not write the CSV export: {e}") from e
