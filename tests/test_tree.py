"""Tests du moteur d'arbre des pages — recherche, mise à jour, suppression en cascade, déplacement."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from site_builder.core import tree
from site_builder.core.schemas import Page


# ── Helpers ───────────────────────────────────────────────────────────────

def P(page_id, *children, is_open=False):
    return Page(id=page_id, name=page_id.title(), slug=page_id, sub_pages=list(children), is_open=is_open)


def forest():
    """
    home
    about
      ├─ team
      │    └─ staff
      └─ history
    contact
    """
    return [
        P("home"),
        P("about", P("team", P("staff")), P("history")),
        P("contact"),
    ]


def ids_of(pages):
    return [p.id for p in pages]


# ── find / ancestors ──────────────────────────────────────────────────────

class TestFind:
    def test_find_root(self):
        assert tree.find_page(forest(), "contact").id == "contact"

    def test_find_deep(self):
        assert tree.find_page(forest(), "staff").name == "Staff"

    def test_find_absent(self):
        assert tree.find_page(forest(), "nope") is None
        assert tree.find_page([], "home") is None

    def test_find_returns_first_in_document_order(self):
        pages = [P("a", P("dup")), P("dup")]
        found = tree.find_page(pages, "dup")
        assert found is pages[0].sub_pages[0]

    def test_is_ancestor_of(self):
        about = forest()[1]
        assert tree.is_ancestor_of(about, "staff") is True
        assert tree.is_ancestor_of(about, "history") is True
        assert tree.is_ancestor_of(about, "about") is False
        assert tree.is_ancestor_of(about, "home") is False

    def test_ancestor_ids(self):
        assert tree.ancestor_ids(forest(), "staff") == ["about", "team"]
        assert tree.ancestor_ids(forest(), "home") == []
        assert tree.ancestor_ids(forest(), "nope") == []

    def test_iter_pages_document_order_with_depth(self):
        walked = [(p.id, d) for p, d in tree.iter_pages(forest())]
        assert walked == [
            ("home", 0), ("about", 0), ("team", 1), ("staff", 2), ("history", 1), ("contact", 0),
        ]


# ── update ────────────────────────────────────────────────────────────────

class TestUpdate:
    def test_update_deep_node(self):
        pages = forest()
        out = tree.update_page(pages, "staff", lambda p: p.model_copy(update={"name": "Personnel"}))
        assert tree.find_page(out, "staff").name == "Personnel"
        assert tree.find_page(pages, "staff").name == "Staff"

    def test_structural_sharing_off_path(self):
        pages = forest()
        out = tree.update_page(pages, "staff", lambda p: p.model_copy(update={"name": "X"}))
        assert out[0] is pages[0]
        assert out[2] is pages[2]
        assert out[1] is not pages[1]
        assert out[1].sub_pages[1] is pages[1].sub_pages[1]  # history

    def test_rebuilt_levels_are_tuples(self):
        out = tree.update_page(forest(), "staff", lambda p: p.model_copy(update={"name": "X"}))
        assert isinstance(out, tuple)
        assert isinstance(out[1].sub_pages, tuple)
        assert isinstance(out[1].sub_pages[0].sub_pages, tuple)

    def test_update_absent_returns_same_forest(self):
        pages = forest()
        assert tree.update_page(pages, "nope", lambda p: p) is pages

    def test_toggle_open(self):
        pages = forest()
        out = tree.toggle_open(pages, "team")
        assert tree.find_page(out, "team").is_open is True
        assert tree.find_page(tree.toggle_open(out, "team"), "team").is_open is False
        assert tree.find_page(out, "about").is_open is False


# ── delete ────────────────────────────────────────────────────────────────

class TestDelete:
    def test_cascade_delete(self):
        pages = [P("a", P("b", P("c")))]
        out = tree.delete_page(pages, "b")
        assert tree.find_page(out, "b") is None
        assert tree.find_page(out, "c") is None
        assert out[0].id == "a"
        assert out[0].sub_pages == ()

    def test_delete_root(self):
        out = tree.delete_page(forest(), "about")
        assert ids_of(out) == ["home", "contact"]
        assert tree.find_page(out, "team") is None

    def test_delete_absent_returns_same_forest(self):
        pages = forest()
        assert tree.delete_page(pages, "nope") is pages

    def test_delete_keeps_untouched_siblings(self):
        pages = forest()
        out = tree.delete_page(pages, "history")
        assert out[0] is pages[0]
        assert out[1].sub_pages[0] is pages[1].sub_pages[0]


# ── insert ────────────────────────────────────────────────────────────────

class TestInsert:
    def test_insert_child_scenario(self):
        pages = [Page(id="home", name="Home", slug="home", sections=[], sub_pages=[])]
        out = tree.insert_child(pages, "home", Page(id="about", name="About", slug="about", sections=[], sub_pages=[]))
        assert out[0].sub_pages[0].id == "about"
        assert out[0].is_open is True

    def test_insert_appends_last(self):
        out = tree.insert_child(forest(), "about", P("faq"))
        assert ids_of(out[1].sub_pages) == ["team", "history", "faq"]

    def test_insert_deep(self):
        out = tree.insert_child(forest(), "staff", P("intern"))
        assert tree.ancestor_ids(out, "intern") == ["about", "team", "staff"]
        assert tree.find_page(out, "staff").is_open is True

    def test_insert_unknown_parent_is_noop(self):
        pages = forest()
        assert tree.insert_child(pages, "nope", P("x")) is pages


# ── move ──────────────────────────────────────────────────────────────────

class TestMove:
    def test_reorder_roots(self):
        pages = [P("p1"), P("p2"), P("p3")]
        out, moved = tree.move_page(pages, "p2", "up")
        assert moved is True
        assert ids_of(out) == ["p2", "p1", "p3"]

    def test_first_up_is_noop(self):
        pages = [P("p1"), P("p2"), P("p3")]
        out, moved = tree.move_page(pages, "p1", "up")
        assert moved is False
        assert out is pages

    def test_last_down_is_noop(self):
        pages = [P("p1"), P("p2")]
        assert tree.move_page(pages, "p2", "down").moved is False

    def test_move_nested_sibling(self):
        pages = forest()
        out, moved = tree.move_page(pages, "history", "up")
        assert moved is True
        assert ids_of(out[1].sub_pages) == ["history", "team"]
        assert out[0] is pages[0]
        assert out[2] is pages[2]

    def test_move_deep_at_boundary(self):
        pages = forest()
        out, moved = tree.move_page(pages, "staff", "down")
        assert moved is False
        assert out is pages

    def test_move_absent(self):
        pages = forest()
        out, moved = tree.move_page(pages, "nope", "up")
        assert moved is False
        assert out is pages

    def test_first_match_wins_on_duplicate_ids(self):
        pages = [
            P("a", P("x"), P("dup")),
            P("b", P("y"), P("dup")),
        ]
        out, moved = tree.move_page(pages, "dup", "up")
        assert moved is True
        assert ids_of(out[0].sub_pages) == ["dup", "x"]
        assert ids_of(out[1].sub_pages) == ["y", "dup"]
