"""Tests for supplier snapshot loading and the catalog JSON dump."""
import json
from datetime import datetime, timezone

import pytest

from streamcatalog.catalog.assembler import CatalogAssembler
from streamcatalog.storage.snapshot import (
    SnapshotError,
    load_supplier_snapshot,
    load_supplier_snapshots,
    write_catalog,
)


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "tom-data.json").write_text(
        json.dumps({"events": {"2023-11-15": [{"match": "A - B"}]}}), encoding="utf-8"
    )
    (tmp_path / "sarah-data.json").write_text("{not json", encoding="utf-8")
    return tmp_path


class TestLoading:
    def test_load_existing(self, data_dir):
        payload = load_supplier_snapshot("tom", data_dir)
        assert payload == {"events": {"2023-11-15": [{"match": "A - B"}]}}

    def test_missing_file_is_none(self, data_dir):
        assert load_supplier_snapshot("wendy", data_dir) is None

    def test_invalid_json_raises(self, data_dir):
        with pytest.raises(SnapshotError):
            load_supplier_snapshot("sarah", data_dir)

    def test_load_all_keeps_order_and_tolerates_bad_files(self, data_dir):
        raw = load_supplier_snapshots(["tom", "sarah", "wendy"], data_dir)
        assert list(raw.keys()) == ["tom", "sarah", "wendy"]
        assert raw["sarah"] is None
        assert raw["wendy"] is None


class TestWriting:
    def test_write_catalog(self, tmp_path):
        catalog = CatalogAssembler().assemble(
            [], processed_at=datetime(2023, 11, 15, 12, 0, tzinfo=timezone.utc)
        )
        target = write_catalog(catalog, tmp_path / "out" / "master-data.json")

        written = json.loads(target.read_text(encoding="utf-8"))
        assert written["processedAt"] == "2023-11-15T12:00:00.000Z"
        assert written["summary"]["totalMatches"] == 0
        assert written["matches"] == []

    def test_write_failure_raises(self, tmp_path):
        blocker = tmp_path / "file.txt"
        blocker.write_text("x", encoding="utf-8")
        catalog = CatalogAssembler().assemble([])
        with pytest.raises(SnapshotError):
            write_catalog(catalog, blocker / "master-data.json")
