"""Tests de la passerelle de persistance — SQLite temporaire, un document par site."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from site_builder.core import document as ops
from site_builder.database import DocumentStore
from site_builder.defaults import default_document
from site_builder.models import SiteDocumentDB


@pytest.fixture
def store(tmp_path):
    s = DocumentStore(f"sqlite:///{tmp_path / 'sub' / 'site.db'}", site_id="test-site")
    s.init()
    return s


def test_init_creates_sqlite_folder(tmp_path):
    s = DocumentStore(f"sqlite:///{tmp_path / 'a' / 'b' / 'site.db'}")
    s.init()
    assert (tmp_path / "a" / "b").is_dir()


def test_load_without_document_returns_none(store):
    assert store.load() is None


def test_save_then_load(store):
    doc = default_document()
    result = store.save(doc)
    assert result.success is True
    assert result.error is None
    assert store.load() == doc


def test_save_overwrites_previous_document(store):
    doc = default_document()
    store.save(doc)
    updated = ops.add_page(doc, "Nouvelle page", page_id="new").document
    assert store.save(updated).success
    loaded = store.load()
    assert [p.id for p in loaded.pages] == ["home", "new"]
    with store.session() as db:
        assert db.query(SiteDocumentDB).count() == 1


def test_sites_are_isolated(tmp_path):
    url = f"sqlite:///{tmp_path / 'site.db'}"
    a, b = DocumentStore(url, site_id="a"), DocumentStore(url, site_id="b")
    a.init()
    a.save(default_document())
    assert b.load() is None


def test_corrupt_payload_loads_as_none(store):
    with store.session() as db:
        db.add(SiteDocumentDB(site_id="test-site", payload='{"title": "x", "pages": []}'))
        db.commit()
    assert store.load() is None


def test_invalid_json_loads_as_none(store):
    with store.session() as db:
        db.add(SiteDocumentDB(site_id="test-site", payload="pas du json"))
        db.commit()
    assert store.load() is None


def test_save_failure_is_reported(tmp_path):
    s = DocumentStore(f"sqlite:///{tmp_path / 'no-tables.db'}")
    result = s.save(default_document())
    assert result.success is False
    assert result.error
