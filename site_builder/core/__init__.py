"""Core module pour site_builder : schémas, moteur de sections, moteur d'arbre, agrégat Document."""
from .schemas import (
    Page,
    Document,
    FontToken,
    document_to_dict,
    document_from_dict,
    document_to_json,
    document_from_json,
)
from .sections import Direction, MoveResult
from .document import EditFailure, EditResult

__all__ = [
    "Page",
    "Document",
    "FontToken",
    "document_to_dict",
    "document_from_dict",
    "document_to_json",
    "document_from_json",
    "Direction",
    "MoveResult",
    "EditFailure",
    "EditResult",
]
