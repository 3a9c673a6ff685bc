"""
Document du site — lecture / sauvegarde.
GET /api/site        → document stocké (ou document initial)
PUT /api/site        → sauvegarde (admin) → {success, error?}
GET /api/site/pages  → arbre des pages aplati (navigation)
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from pydantic import ValidationError

from ...core import tree
from ...core.schemas import Document, document_from_dict, document_to_dict
from ...database import DocumentStore, get_store
from ...defaults import default_document
from ._auth import require_admin

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api/site", tags=["Site"])


def current_document(store: DocumentStore) -> Document:
    return store.load() or default_document()


@router.get("")
def get_site(store: DocumentStore = Depends(get_store)) -> Dict[str, Any]:
    return document_to_dict(current_document(store))


@router.put("")
def save_site(
    request: Request,
    payload: Dict[str, Any] = Body(...),
    store: DocumentStore = Depends(get_store),
) -> Dict[str, Any]:
    require_admin(request)
    try:
        document = document_from_dict(payload)
    except ValidationError as e:
        raise HTTPException(422, str(e))
    return store.save(document).model_dump(exclude_none=True)


@router.get("/pages")
def list_pages(store: DocumentStore = Depends(get_store)) -> Dict[str, Any]:
    """Pages en ordre du document, avec profondeur et drapeau « répertoire »."""
    document = current_document(store)
    return {"pages": [
        {
            "id": page.id,
            "name": page.name,
            "slug": page.slug,
            "depth": depth,
            "isDirectory": page.is_directory,
            "isOpen": page.is_open,
        }
        for page, depth in tree.iter_pages(document.pages)
    ]}
