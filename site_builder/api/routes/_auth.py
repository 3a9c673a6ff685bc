"""Bascule authentifié / non authentifié — jeton admin (query `token` ou cookie `admin_token`)."""
from fastapi import HTTPException, Request

from ...config import ADMIN_TOKEN


def is_admin(request: Request) -> bool:
    token = (request.query_params.get("token")
             or request.cookies.get("admin_token", ""))
    return token == ADMIN_TOKEN


def require_admin(request: Request) -> None:
    if not is_admin(request):
        raise HTTPException(403, "Accès refusé")
