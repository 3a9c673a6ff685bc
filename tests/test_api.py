"""Tests HTTP — routes /api/site et /api/editor (TestClient, store SQLite temporaire)."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient

from site_builder.api.main import app
from site_builder.config import ADMIN_TOKEN
from site_builder.database import DocumentStore, get_store
from site_builder.defaults import DEFAULT_SITE


@pytest.fixture
def store(tmp_path):
    s = DocumentStore(f"sqlite:///{tmp_path / 'api.db'}")
    s.init()
    return s


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


ADMIN = {"token": ADMIN_TOKEN}


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


# ── /api/site ─────────────────────────────────────────────────────────────

class TestSite:
    def test_get_returns_default_document_when_empty(self, client):
        r = client.get("/api/site")
        assert r.status_code == 200
        body = r.json()
        assert body["title"] == DEFAULT_SITE["title"]
        assert body["pages"][0]["id"] == "home"

    def test_put_requires_admin(self, client):
        r = client.put("/api/site", json=DEFAULT_SITE)
        assert r.status_code == 403

    def test_put_then_get(self, client):
        payload = {**DEFAULT_SITE, "title": "Collège"}
        r = client.put("/api/site", params=ADMIN, json=payload)
        assert r.status_code == 200
        assert r.json() == {"success": True}
        assert client.get("/api/site").json()["title"] == "Collège"

    def test_put_accepts_cookie_token(self, client):
        client.cookies.set("admin_token", ADMIN_TOKEN)
        assert client.put("/api/site", json=DEFAULT_SITE).status_code == 200

    def test_put_then_get_keeps_null_fields(self, client):
        payload = {**DEFAULT_SITE, "pages": [{
            "id": "home", "name": "Accueil", "slug": "accueil",
            "sections": [{"id": "btn", "type": "button", "data": {"label": "Go", "url": None}}],
        }]}
        client.put("/api/site", params=ADMIN, json=payload)
        block = client.get("/api/site").json()["pages"][0]["sections"][0]
        assert block["data"]["url"] is None

    def test_put_rejects_empty_forest(self, client):
        r = client.put("/api/site", params=ADMIN, json={"title": "x", "pages": []})
        assert r.status_code == 422

    def test_pages_flattened_with_depth(self, client):
        payload = {**DEFAULT_SITE, "pages": [
            {"id": "a", "name": "A", "slug": "a", "isOpen": True, "subPages": [
                {"id": "b", "name": "B", "slug": "b"},
            ]},
            {"id": "c", "name": "C", "slug": "c"},
        ]}
        client.put("/api/site", params=ADMIN, json=payload)
        pages = client.get("/api/site/pages").json()["pages"]
        assert [(p["id"], p["depth"], p["isDirectory"]) for p in pages] == [
            ("a", 0, True), ("b", 1, False), ("c", 0, False),
        ]
        assert pages[0]["isOpen"] is True


# ── /api/editor ───────────────────────────────────────────────────────────

class TestEditor:
    def test_session_for_visitor(self, client):
        session = client.get("/api/editor/session").json()["session"]
        assert session["authenticated"] is False
        assert session["preview"] is True
        assert session["active_page_id"] == "home"

    def test_session_for_admin(self, client):
        session = client.get("/api/editor/session", params=ADMIN).json()["session"]
        assert session["authenticated"] is True

    def test_apply_add_page(self, client):
        session = client.get("/api/editor/session", params=ADMIN).json()["session"]
        r = client.post("/api/editor/apply", params=ADMIN, json={
            "session": session,
            "intent": {"op": "add_page", "name": "Vie scolaire"},
        })
        body = r.json()
        assert body["ok"] is True
        assert "reason" not in body
        names = [p["name"] for p in body["session"]["document"]["pages"]]
        assert names == ["Accueil", "Vie scolaire"]
        assert body["session"]["document"]["pages"][1]["slug"] == "vie-scolaire"

    def test_apply_ignores_forged_authentication(self, client):
        session = client.get("/api/editor/session").json()["session"]
        session["authenticated"] = True
        body = client.post("/api/editor/apply", json={
            "session": session,
            "intent": {"op": "add_block", "block_type": "hero"},
        }).json()
        assert body["ok"] is False
        assert body["reason"] == "INVARIANT_VIOLATION"
        assert body["session"]["authenticated"] is False

    def test_apply_reports_boundary(self, client):
        session = client.get("/api/editor/session", params=ADMIN).json()["session"]
        body = client.post("/api/editor/apply", params=ADMIN, json={
            "session": session,
            "intent": {"op": "move_block", "index": 0, "direction": "up"},
        }).json()
        assert body["ok"] is False
        assert body["reason"] == "BOUNDARY"

    def test_apply_unknown_op_is_rejected(self, client):
        session = client.get("/api/editor/session").json()["session"]
        r = client.post("/api/editor/apply", json={"session": session, "intent": {"op": "explode"}})
        assert r.status_code == 422

    def test_catalog(self, client):
        blocks = client.get("/api/editor/catalog").json()["blocks"]
        assert len(blocks) == 35
        hero = next(b for b in blocks if b["type"] == "hero")
        assert "bgImage" in hero["default"]
        assert hero["schema"]["type"] == "object"
