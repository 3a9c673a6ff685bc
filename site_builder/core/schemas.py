"""
Schémas Pydantic du document site_builder.
Structure récursive : Document → Page (→ sous-pages) → Block

Tous les enregistrements sont immuables (frozen) ; une mutation produit un
nouveau Document qui partage les sous-arbres non modifiés. Les collections
(sections, sous-pages, pages) sont des tuples.
"""
import json
from typing import Any, Dict, Literal, Tuple

from pydantic import Field

from ..blocks import Block, Record, new_id

FontToken = Literal["sans", "serif", "mono"]

DEFAULT_PRIMARY_COLOR = "#1e40af"
DEFAULT_SECONDARY_COLOR = "#fbbf24"


class Page(Record):
    """Page du site. Une page avec des sous-pages est un « répertoire » (navigation seule)."""
    id: str = Field(default_factory=new_id)
    name: str
    slug: str = ""
    sections: Tuple[Block, ...] = ()
    sub_pages: Tuple["Page", ...] = ()
    is_open: bool = False

    @property
    def is_directory(self) -> bool:
        return bool(self.sub_pages)


class Document(Record):
    """Site complet : titre, thème, forêt des pages racines (jamais vide)."""
    title: str = ""
    font: FontToken = "sans"
    primary_color: str = DEFAULT_PRIMARY_COLOR
    secondary_color: str = DEFAULT_SECONDARY_COLOR
    pages: Tuple[Page, ...] = Field(..., min_length=1)


# ── Forme sérialisée (JSON, clés camelCase) ──────────────────────────────────

def document_to_dict(document: Document) -> Dict[str, Any]:
    return document.model_dump(mode="json", by_alias=True)


def document_from_dict(data: Dict[str, Any]) -> Document:
    """Lève ValidationError si la structure est invalide (ex. `pages` vide)."""
    return Document.model_validate(data)


def document_to_json(document: Document) -> str:
    return json.dumps(document_to_dict(document), ensure_ascii=False)


def document_from_json(payload: str) -> Document:
    return Document.model_validate_json(payload)
