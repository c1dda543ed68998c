"""
Paw JSON export.

Shape:
    {"login": [{"metadata": {"name", "type", "modified", "created"},
                "note": {"value"},
                "password": {"value"}}, ...]}

Empty leaf values are left out; the metadata/note/password containers are
always written.
"""

from __future__ import annotations

from datetime import datetime
from typing import TextIO

from pydantic import BaseModel

from secret_export.errors import SerializationError
from secret_export.formats.base import Exporter
from secret_export.records import ExportDocument, ExportRecord

# Paw item kind for logins
LOGIN_ITEM_TYPE = 8


class PawMetadata(BaseModel):
    name: str = ""
    type: int = 0
    modified: datetime | None = None
    created: datetime | None = None


class PawNote(BaseModel):
    value: str = ""


class PawPassword(BaseModel):
    value: str = ""


class PawLogin(BaseModel):
    metadata: PawMetadata
    note: PawNote
    password: PawPassword

    @classmethod
    def from_record(cls, record: ExportRecord) -> PawLogin:
        return cls(
            metadata=PawMetadata(
                name=record.name,
                type=LOGIN_ITEM_TYPE,
                modified=record.modified_at,
                created=record.created_at,
            ),
            note=PawNote(value=record.note_text),
            password=PawPassword(value=record.secret_value),
        )


class PawDocument(BaseModel):
    login: list[PawLogin]


def to_paw(document: ExportDocument) -> PawDocument:
    return PawDocument(login=[PawLogin.from_record(r) for r in document.records])


class PawExporter(Exporter):
    name = "paw"

    def render(self, document: ExportDocument, sink: TextIO) -> None:
        payload = to_paw(document).model_dump_json(exclude_defaults=True)
        try:
            sink.write(payload)
            sink.write("\n")
            sink.flush()
        except (OSError, ValueError) as e:
            raise SerializationError(f"could not write the Paw export: {e}") from e
