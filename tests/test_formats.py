"""Tests for secret_export.formats — Paw JSON and CSV renderers."""

import csv
import io
import json
from datetime import datetime

import pytest

from secret_export.errors import SerializationError, UnknownFormatError
from secret_export.formats import (
    CsvExporter,
    PawExporter,
    available_formats,
    get_exporter,
)
from secret_export.formats.paw_exporter import LOGIN_ITEM_TYPE, to_paw
from secret_export.records import ExportDocument, ExportRecord, format_note
from tests.fakes import CREATED, MODIFIED, NOW


def _record(name="github", secret="abc123", note="note"):
    return ExportRecord(
        name=name,
        secret_value=secret,
        created_at=CREATED,
        modified_at=MODIFIED,
        note_text=note,
    )


def _document(*records):
    return ExportDocument(collection="Personal", generated_at=NOW, records=list(records))


def _render(exporter, document) -> str:
    buf = io.StringIO()
    exporter.render(document, buf)
    return buf.getvalue()


class BrokenSink(io.StringIO):
    def write(self, s):
        raise OSError("disk full")


class TestRegistry:
    def test_available(self):
        assert available_formats() == ["paw", "csv"]

    def test_lookup(self):
        assert isinstance(get_exporter("paw"), PawExporter)
        assert isinstance(get_exporter("csv"), CsvExporter)

    def test_unknown(self):
        with pytest.raises(UnknownFormatError, match="paw, csv"):
            get_exporter("xml")


class TestPawExporter:
    def test_shape(self):
        out = _render(PawExporter(), _document(_record(note=format_note("Personal", NOW))))
        doc = json.loads(out)
        assert list(doc) == ["login"]
        entry = doc["login"][0]
        assert list(entry) == ["metadata", "note", "password"]
        assert entry["metadata"]["name"] == "github"
        assert entry["metadata"]["type"] == LOGIN_ITEM_TYPE == 8
        assert entry["password"] == {"value": "abc123"}
        assert entry["note"]["value"].startswith(
            'exported from the Secret Service collection "Personal"\n'
        )

    def test_metadata_key_order(self):
        entry = json.loads(_render(PawExporter(), _document(_record())))["login"][0]
        assert list(entry["metadata"]) == ["name", "type", "modified", "created"]

    def test_timestamps_rfc3339(self):
        entry = json.loads(_render(PawExporter(), _document(_record())))["login"][0]
        assert datetime.fromisoformat(entry["metadata"]["created"]) == CREATED
        assert datetime.fromisoformat(entry["metadata"]["modified"]) == MODIFIED

    def test_empty_values_omitted_containers_kept(self):
        entry = json.loads(_render(PawExporter(), _document(_record(name="", note=""))))[
            "login"
        ][0]
        assert "name" not in entry["metadata"]
        assert entry["note"] == {}
        assert entry["password"] == {"value": "abc123"}

    def test_empty_document(self):
        assert _render(PawExporter(), _document()) == '{"login":[]}\n'

    def test_single_line_with_newline(self):
        out = _render(PawExporter(), _document(_record(), _record("gitlab", "x")))
        assert out.endswith("\n")
        assert out.count("\n") == 1

    def test_non_ascii_written_raw(self):
        out = _render(PawExporter(), _document(_record(secret="pässwörd")))
        assert "pässwörd" in out

    def test_order_preserved(self):
        doc = to_paw(_document(_record("b"), _record("a"), _record("c")))
        assert [e.metadata.name for e in doc.login] == ["b", "a", "c"]

    def test_write_failure(self):
        with pytest.raises(SerializationError, match="disk full"):
            PawExporter().render(_document(_record()), BrokenSink())


class TestCsvExporter:
    def test_header_and_row(self):
        out = _render(CsvExporter(), _document(_record()))
        lines = out.splitlines()
        assert lines[0] == "name,password,created,modified"
        assert lines[1] == f"github,abc123,{CREATED.isoformat()},{MODIFIED.isoformat()}"

    def test_row_count(self):
        out = _render(CsvExporter(), _document(_record("a"), _record("b"), _record("c")))
        assert len(list(csv.reader(io.StringIO(out)))) == 4

    def test_header_only_when_empty(self):
        assert _render(CsvExporter(), _document()) == "name,password,created,modified\n"

    def test_quoting(self):
        out = _render(CsvExporter(), _document(_record("a,b", 'p"w\nx')))
        rows = list(csv.reader(io.StringIO(out)))
        assert rows[1][:2] == ["a,b", 'p"w\nx']

    def test_unix_line_endings(self):
        assert "\r\n" not in _render(CsvExporter(), _document(_record()))

    def test_write_failure(self):
        with pytest.raises(SerializationError, match="disk full"):
            CsvExporter().render(_document(_record()), BrokenSink())


class TestCrossFormat:
    def test_same_name_password_pairs(self):
        document = _document(_record("a", "1"), _record("b,2", "two words"), _record("c", "ü"))
        paw = json.loads(_render(PawExporter(), document))
        rows = list(csv.reader(io.StringIO(_render(CsvExporter(), document))))[1:]
        from_paw = {(e["metadata"]["name"], e["password"]["value"]) for e in paw["login"]}
        from_csv = {(r[0], r[1]) for r in rows}
        assert from_paw == from_csv == {("a", "1"), ("b,2", "two words"), ("c", "ü")}
