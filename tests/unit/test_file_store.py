"""File-backed store specifics: on-disk shape, registry and failure handling."""

import json

import pytest

from models import Site, Tenant
from storage import (
    FileStore,
    PersistenceError,
    TypeRegistry,
    UnregisteredKindError,
    is_kind,
    open_store,
)


def read(path):
    with open(path, encoding="utf-8") as handle:
        return json.load(handle)


class TestFormat:
    def test_buckets_by_kind(self, tmp_path):
        path = tmp_path / "store.json"
        store = FileStore(str(path))
        store.create(Tenant(name="Jane", contact="jane@example.com"))
        store.create(Site(number="A1"))
        store.create(Site(number="B2"))

        assert read(path) == {
            "Tenant": [{"name": "Jane", "contact": "jane@example.com"}],
            "Site": [
                {"number": "A1", "dwelling": "Cabin"},
                {"number": "B2", "dwelling": "Cabin"},
            ],
        }

    def test_reload_from_disk(self, tmp_path):
        path = str(tmp_path / "store.json")
        FileStore(path).create(Tenant(name="Jane"))
        assert FileStore(path).list() == [Tenant(name="Jane")]

    def test_indent(self, tmp_path):
        path = tmp_path / "store.json"
        FileStore(str(path), indent=True).create(Tenant(name="Jane"))
        assert "\n\t" in path.read_text(encoding="utf-8")

    def test_no_temp_files_left_behind(self, tmp_path):
        store = FileStore(str(tmp_path / "store.json"))
        store.create(Tenant(name="Jane"))
        store.delete(Tenant(name="Jane"))
        assert [p.name for p in tmp_path.iterdir()] == ["store.json"]


class TestReadFailures:
    def test_query_treats_unreadable_file_as_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")
        store = FileStore(str(path))
        assert store.query(is_kind(Tenant)) is None
        assert store.list() == []

    def test_save_surfaces_unreadable_file(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(PersistenceError):
            FileStore(str(path)).save(Tenant(name="Jane"))
        assert path.read_text(encoding="utf-8") == "{not json"

    def test_save_surfaces_unwritable_path(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(PersistenceError):
            FileStore(str(blocker / "store.json")).save(Tenant(name="Jane"))

    @pytest.mark.parametrize("bucket", [5, {"Jane": {"name": "Jane"}}, "Jane"])
    def test_non_array_bucket_is_a_read_failure(self, tmp_path, bucket):
        path = tmp_path / "store.json"
        content = json.dumps({"Tenant": bucket})
        path.write_text(content, encoding="utf-8")
        store = FileStore(str(path))

        assert store.query(is_kind(Tenant)) is None
        with pytest.raises(PersistenceError, match="bucket Tenant is not an array"):
            store.save(Tenant(name="Bob"))
        assert path.read_text(encoding="utf-8") == content

    def test_undecodable_records_are_skipped(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"Tenant": [{"contact": "x"}, {"name": "Jane"}]}), encoding="utf-8")
        assert FileStore(str(path)).list() == [Tenant(name="Jane")]


class TestRegistry:
    def test_unknown_buckets_survive_rewrite(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"Widget": [{"size": 3}]}), encoding="utf-8")
        FileStore(str(path)).create(Tenant(name="Jane"))
        assert read(path)["Widget"] == [{"size": 3}]

    def test_unregistered_kind_cannot_be_saved(self, tmp_path):
        store = FileStore(str(tmp_path / "store.json"), registry=TypeRegistry().register(Tenant))
        with pytest.raises(UnregisteredKindError):
            store.save(Site(number="A1"))

    def test_only_registered_buckets_are_read(self, tmp_path):
        path = str(tmp_path / "store.json")
        FileStore(path).create(Site(number="A1"))
        tenants_only = FileStore(path, registry=TypeRegistry()).register(Tenant)
        assert tenants_only.list() == []

    def test_descriptor_allocates_and_tests_kind(self):
        descriptor = TypeRegistry().register(Site).get("Site")
        assert descriptor.is_instance(descriptor.allocate({"number": "A1"}))
        assert descriptor.is_instance(descriptor.allocate())
        assert not descriptor.is_instance(Tenant(name="A1"))


class TestOpenStore:
    def test_backends(self, tmp_path):
        assert type(open_store("memory")).__name__ == "MemoryStore"
        store = open_store("file", path=str(tmp_path / "s.json"))
        assert isinstance(store, FileStore)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            open_store("cassette")
