"""
Agrégat Document — opérations d'édition adressées par page active.

Chaque opération résout la page via find_page, délègue au moteur de sections
ou d'arbre, et retourne un EditResult :
  - ok=True  → nouveau Document respectant les invariants
  - ok=False → Document d'entrée inchangé (même objet) + raison + message
Aucune opération ne lève pour une entrée bien typée.
"""
import logging
import re
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import PydanticSerializationError

from ..blocks import BaseBlock, HeroBlock, HeroData, create_block, is_known_block_type, new_id
from . import sections as section_list
from . import tree
from .schemas import Document, FontToken, Page
from .sections import Direction

log = logging.getLogger(__name__)


class EditFailure(str, Enum):
    NOT_FOUND           = "NOT_FOUND"
    INVARIANT_VIOLATION = "INVARIANT_VIOLATION"
    BOUNDARY            = "BOUNDARY"
    INVALID_PAYLOAD     = "INVALID_PAYLOAD"


class EditResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    document: Document
    ok: bool = True
    reason: Optional[EditFailure] = None
    message: str = ""
    page_id: Optional[str] = None
    block_id: Optional[str] = None


def _done(document: Document, **kwargs: Any) -> EditResult:
    return EditResult(document=document, **kwargs)


def _fail(document: Document, reason: EditFailure, message: str) -> EditResult:
    log.info("Édition refusée (%s) : %s", reason.value, message)
    return EditResult(document=document, ok=False, reason=reason, message=message)


def _with_pages(document: Document, pages: Sequence[Page]) -> Document:
    return document.model_copy(update={"pages": tuple(pages)})


def slugify(name: str) -> str:
    """Slug d'URL : minuscules, espaces → tirets."""
    return re.sub(r"\s+", "-", name.strip().lower())


# ── Blocs de la page active ──────────────────────────────────────────────────

def _edit_block(
    document: Document,
    page_id: str,
    block_id: str,
    edit: Callable[[Sequence[BaseBlock]], Sequence[BaseBlock]],
) -> EditResult:
    page = tree.find_page(document.pages, page_id)
    if page is None:
        return _fail(document, EditFailure.NOT_FOUND, f"Page introuvable : {page_id}")
    if section_list.find_block(page.sections, block_id) is None:
        return _fail(document, EditFailure.NOT_FOUND, f"Bloc introuvable : {block_id}")
    try:
        new_sections = edit(page.sections)
        # le bloc modifié doit rester sérialisable en JSON
        edited = section_list.find_block(new_sections, block_id)
        if edited is not None:
            edited.model_dump(mode="json")
    except (ValidationError, ValueError, PydanticSerializationError) as e:
        return _fail(document, EditFailure.INVALID_PAYLOAD, str(e))
    pages = tree.update_page(document.pages, page_id, lambda p: p.model_copy(update={"sections": tuple(new_sections)}))
    return _done(_with_pages(document, pages), page_id=page_id, block_id=block_id)


def add_block(document: Document, page_id: str, block_type: str, block_id: Optional[str] = None) -> EditResult:
    """
    Ajoute un bloc par défaut de type `block_type` en fin de page.
    Refusé sur une page répertoire ; un type inconnu est refusé à la création.
    """
    page = tree.find_page(document.pages, page_id)
    if page is None:
        return _fail(document, EditFailure.NOT_FOUND, f"Page introuvable : {page_id}")
    if page.is_directory:
        return _fail(
            document, EditFailure.INVARIANT_VIOLATION,
            f"La page « {page.name} » contient des sous-pages : ses sections ne sont pas modifiables",
        )
    if not is_known_block_type(block_type):
        return _fail(document, EditFailure.INVALID_PAYLOAD, f"Type de bloc inconnu : {block_type!r}")

    block = create_block(block_type, block_id=block_id)
    pages = tree.update_page(
        document.pages, page_id,
        lambda p: p.model_copy(update={"sections": section_list.append_block(p.sections, block)}),
    )
    return _done(_with_pages(document, pages), page_id=page_id, block_id=block.id)


def update_block_data(document: Document, page_id: str, block_id: str, data: Any) -> EditResult:
    return _edit_block(document, page_id, block_id, lambda s: section_list.update_block_data(s, block_id, data))


def update_block_width(document: Document, page_id: str, block_id: str, width: str) -> EditResult:
    return _edit_block(document, page_id, block_id, lambda s: section_list.update_block_width(s, block_id, width))


def update_block_padding(document: Document, page_id: str, block_id: str, padding: Optional[str]) -> EditResult:
    return _edit_block(document, page_id, block_id, lambda s: section_list.update_block_padding(s, block_id, padding))


def update_block_style(document: Document, page_id: str, block_id: str, style: Any) -> EditResult:
    return _edit_block(document, page_id, block_id, lambda s: section_list.update_block_style(s, block_id, style))


def delete_block(document: Document, page_id: str, block_id: str) -> EditResult:
    return _edit_block(document, page_id, block_id, lambda s: section_list.delete_block(s, block_id))


def move_block(document: Document, page_id: str, index: int, direction: Direction) -> EditResult:
    page = tree.find_page(document.pages, page_id)
    if page is None:
        return _fail(document, EditFailure.NOT_FOUND, f"Page introuvable : {page_id}")
    if not 0 <= index < len(page.sections):
        return _fail(document, EditFailure.NOT_FOUND, f"Aucun bloc à l'index {index}")

    new_sections, moved = section_list.move_block(page.sections, index, direction)
    if not moved:
        return _fail(document, EditFailure.BOUNDARY, f"Bloc {index} déjà en bordure ({direction})")
    pages = tree.update_page(document.pages, page_id, lambda p: p.model_copy(update={"sections": new_sections}))
    return _done(_with_pages(document, pages), page_id=page_id, block_id=page.sections[index].id)


# ── Pages ────────────────────────────────────────────────────────────────────

def new_page(name: str, page_id: Optional[str] = None) -> Page:
    """Page neuve : slug dérivé du nom, un bloc hero de bienvenue, ouverte."""
    hero = HeroBlock(data=HeroData(title=name, subtitle="Bienvenue"))
    return Page(
        id=page_id or new_id(),
        name=name,
        slug=slugify(name),
        sections=(hero,),
        sub_pages=(),
        is_open=True,
    )


def add_page(document: Document, name: str, parent_id: Optional[str] = None, page_id: Optional[str] = None) -> EditResult:
    """Ajoute une page en racine, ou en dernier enfant de `parent_id` (parent ouvert)."""
    if not name.strip():
        return _fail(document, EditFailure.INVALID_PAYLOAD, "Le nom de la page est vide")
    if parent_id is not None and not tree.contains_page(document.pages, parent_id):
        return _fail(document, EditFailure.NOT_FOUND, f"Page parente introuvable : {parent_id}")

    page = new_page(name.strip(), page_id=page_id)
    if parent_id is None:
        pages = (*document.pages, page)
    else:
        pages = tree.insert_child(document.pages, parent_id, page)
    return _done(_with_pages(document, pages), page_id=page.id)


def delete_page(document: Document, page_id: str) -> EditResult:
    """Supprime une page et ses sous-pages ; la dernière page racine ne peut pas être supprimée."""
    if not tree.contains_page(document.pages, page_id):
        return _fail(document, EditFailure.NOT_FOUND, f"Page introuvable : {page_id}")
    is_root = any(p.id == page_id for p in document.pages)
    if is_root and len(document.pages) == 1:
        return _fail(document, EditFailure.INVARIANT_VIOLATION, "La dernière page ne peut pas être supprimée")

    pages = tree.delete_page(document.pages, page_id)
    return _done(_with_pages(document, pages), page_id=page_id)


def move_page(document: Document, page_id: str, direction: Direction) -> EditResult:
    if not tree.contains_page(document.pages, page_id):
        return _fail(document, EditFailure.NOT_FOUND, f"Page introuvable : {page_id}")
    pages, moved = tree.move_page(document.pages, page_id, direction)
    if not moved:
        return _fail(document, EditFailure.BOUNDARY, f"Page {page_id} déjà en bordure ({direction})")
    return _done(_with_pages(document, pages), page_id=page_id)


def toggle_page_open(document: Document, page_id: str) -> EditResult:
    if not tree.contains_page(document.pages, page_id):
        return _fail(document, EditFailure.NOT_FOUND, f"Page introuvable : {page_id}")
    return _done(_with_pages(document, tree.toggle_open(document.pages, page_id)), page_id=page_id)


def rename_page(document: Document, page_id: str, name: str) -> EditResult:
    """Renomme une page et recalcule son slug."""
    if not name.strip():
        return _fail(document, EditFailure.INVALID_PAYLOAD, "Le nom de la page est vide")
    if not tree.contains_page(document.pages, page_id):
        return _fail(document, EditFailure.NOT_FOUND, f"Page introuvable : {page_id}")
    name = name.strip()
    pages = tree.update_page(
        document.pages, page_id,
        lambda p: p.model_copy(update={"name": name, "slug": slugify(name)}),
    )
    return _done(_with_pages(document, pages), page_id=page_id)


# ── Réglages du site ─────────────────────────────────────────────────────────

def update_settings(
    document: Document,
    title: Optional[str] = None,
    font: Optional[FontToken] = None,
    primary_color: Optional[str] = None,
    secondary_color: Optional[str] = None,
) -> EditResult:
    """Met à jour titre / police / couleurs ; les arguments None sont ignorés."""
    changes = {
        key: value
        for key, value in (
            ("title", title),
            ("font", font),
            ("primary_color", primary_color),
            ("secondary_color", secondary_color),
        )
        if value is not None
    }
    if not changes:
        return _done(document)
    try:
        updated = Document.model_validate({**document.model_dump(exclude={"pages"}), **changes, "pages": document.pages})
    except ValidationError as e:
        return _fail(document, EditFailure.INVALID_PAYLOAD, str(e))
    return _done(updated)
