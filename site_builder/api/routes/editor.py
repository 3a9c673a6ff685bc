"""
Éditeur — routage des intentions utilisateur vers l'agrégat Document.

GET  /api/editor/session  → session ouverte sur le document stocké
POST /api/editor/apply    → {session, intent} → {session, ok, reason?, message}
GET  /api/editor/catalog  → types de blocs + payload par défaut + JSON schema

Le serveur ne garde aucun état : la session voyage avec la requête. Le drapeau
`authenticated` est toujours recalculé depuis le jeton admin.
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from ...blocks import BLOCK_REGISTRY, default_data
from ...database import DocumentStore, get_store
from ...defaults import default_document
from ...editor import EditorSession, Intent, open_session
from ._auth import is_admin

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api/editor", tags=["Editor"])


# ── Schémas ────────────────────────────────────────────────────────────────────

class ApplyRequest(BaseModel):
    session: EditorSession
    intent: Intent


def _session_payload(session: EditorSession) -> Dict[str, Any]:
    return session.model_dump(mode="json", by_alias=True)


# ── Endpoints ──────────────────────────────────────────────────────────────────

@router.get("/session")
def get_session(request: Request, store: DocumentStore = Depends(get_store)) -> Dict[str, Any]:
    session = open_session(store.load(), default_document(), authenticated=is_admin(request))
    return {"session": _session_payload(session)}


@router.post("/apply")
def apply_intent(body: ApplyRequest, request: Request) -> Dict[str, Any]:
    session = body.session.with_auth(is_admin(request))
    result = session.apply(body.intent)
    response: Dict[str, Any] = {
        "session": _session_payload(result.session),
        "ok": result.ok,
        "message": result.message,
    }
    if result.reason is not None:
        response["reason"] = result.reason.value
    return response


@router.get("/catalog")
def catalog() -> Dict[str, Any]:
    """Catalogue des blocs avec leurs JSON schemas Pydantic."""
    return {"blocks": [
        {
            "type":    block_type,
            "default": default_data(block_type),
            "schema":  block_cls.model_json_schema(by_alias=True),
        }
        for block_type, block_cls in BLOCK_REGISTRY.items()
    ]}
