"""
Session d'édition — état explicite de l'éditeur (page active, bloc sélectionné,
mode aperçu, authentification) + routage des intentions utilisateur vers
l'agrégat Document.

Flux :
  intention (JSON) → Intent (union discriminée par `op`)
    → EditorSession.apply()
    → core.document.<opération>
    → SessionResult (nouvelle session, ou session inchangée + raison)
"""
import logging
from typing import Annotated, Any, Callable, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .blocks import BlockPadding, BlockStyle, BlockWidth
from .core import document as ops
from .core import tree
from .core.document import EditFailure, EditResult
from .core.schemas import Document, FontToken, Page

log = logging.getLogger(__name__)


# ── Intentions ───────────────────────────────────────────────────────────────

class AddBlockIntent(BaseModel):
    op: Literal["add_block"] = "add_block"
    block_type: str


class UpdateBlockIntent(BaseModel):
    op: Literal["update_block"] = "update_block"
    block_id: str
    data: Dict[str, Any]


class UpdateBlockWidthIntent(BaseModel):
    op: Literal["update_block_width"] = "update_block_width"
    block_id: str
    width: BlockWidth


class UpdateBlockPaddingIntent(BaseModel):
    op: Literal["update_block_padding"] = "update_block_padding"
    block_id: str
    padding: Optional[BlockPadding] = None


class UpdateBlockStyleIntent(BaseModel):
    op: Literal["update_block_style"] = "update_block_style"
    block_id: str
    style: Optional[BlockStyle] = None


class DeleteBlockIntent(BaseModel):
    op: Literal["delete_block"] = "delete_block"
    block_id: str


class MoveBlockIntent(BaseModel):
    op: Literal["move_block"] = "move_block"
    index: int
    direction: Literal["up", "down"]


class AddPageIntent(BaseModel):
    op: Literal["add_page"] = "add_page"
    name: str
    parent_id: Optional[str] = None


class DeletePageIntent(BaseModel):
    op: Literal["delete_page"] = "delete_page"
    page_id: str


class MovePageIntent(BaseModel):
    op: Literal["move_page"] = "move_page"
    page_id: str
    direction: Literal["up", "down"]


class TogglePageIntent(BaseModel):
    op: Literal["toggle_page"] = "toggle_page"
    page_id: str


class RenamePageIntent(BaseModel):
    op: Literal["rename_page"] = "rename_page"
    page_id: str
    name: str


class UpdateSettingsIntent(BaseModel):
    op: Literal["update_settings"] = "update_settings"
    title: Optional[str] = None
    font: Optional[FontToken] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None


class SwitchPageIntent(BaseModel):
    op: Literal["switch_page"] = "switch_page"
    page_id: str


class SelectBlockIntent(BaseModel):
    op: Literal["select_block"] = "select_block"
    block_id: Optional[str] = None


class SetPreviewIntent(BaseModel):
    op: Literal["set_preview"] = "set_preview"
    preview: bool


Intent = Annotated[
    Union[
        AddBlockIntent,
        UpdateBlockIntent,
        UpdateBlockWidthIntent,
        UpdateBlockPaddingIntent,
        UpdateBlockStyleIntent,
        DeleteBlockIntent,
        MoveBlockIntent,
        AddPageIntent,
        DeletePageIntent,
        MovePageIntent,
        TogglePageIntent,
        RenamePageIntent,
        UpdateSettingsIntent,
        SwitchPageIntent,
        SelectBlockIntent,
        SetPreviewIntent,
    ],
    Field(discriminator="op"),
]

# Intentions autorisées sans authentification (navigation du visiteur)
_VISITOR_OPS = {"switch_page", "select_block", "set_preview"}


# ── Session ──────────────────────────────────────────────────────────────────

class SessionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    session: "EditorSession"
    ok: bool = True
    reason: Optional[EditFailure] = None
    message: str = ""


class EditorSession(BaseModel):
    """
    État de l'éditeur pour un rédacteur unique.
    Immuable : chaque intention retourne une nouvelle session.
    """
    model_config = ConfigDict(frozen=True)

    document: Document
    active_page_id: str
    selected_block_id: Optional[str] = None
    preview: bool = True
    authenticated: bool = False

    def active_page(self) -> Page:
        """Page active résolue ; première page racine si l'id ne résout plus."""
        return tree.find_page(self.document.pages, self.active_page_id) or self.document.pages[0]

    def with_auth(self, authenticated: bool) -> "EditorSession":
        """Déconnexion → retour forcé en mode aperçu."""
        preview = self.preview if authenticated else True
        return self.model_copy(update={"authenticated": authenticated, "preview": preview})

    def apply(self, intent: Any) -> SessionResult:
        if intent.op not in _VISITOR_OPS and not self.authenticated:
            return self._reject(EditFailure.INVARIANT_VIOLATION, "Connexion administrateur requise")
        return _HANDLERS[intent.op](self, intent)

    # ── helpers ──

    def _reject(self, reason: EditFailure, message: str) -> SessionResult:
        log.info("Intention refusée (%s) : %s", reason.value, message)
        return SessionResult(session=self, ok=False, reason=reason, message=message)

    def _accept(self, **changes: Any) -> SessionResult:
        return SessionResult(session=self.model_copy(update=changes))

    def _from_edit(self, result: EditResult, **changes: Any) -> SessionResult:
        """Reporte un EditResult ; la page active retombe sur la première racine si elle a disparu."""
        if not result.ok:
            return SessionResult(session=self, ok=False, reason=result.reason, message=result.message)
        updated = self.model_copy(update={"document": result.document, **changes})
        if not tree.contains_page(updated.document.pages, updated.active_page_id):
            updated = updated.model_copy(update={
                "active_page_id": updated.document.pages[0].id,
                "selected_block_id": None,
            })
        return SessionResult(session=updated)


# ── Handlers ─────────────────────────────────────────────────────────────────

def _add_block(s: EditorSession, i: AddBlockIntent) -> SessionResult:
    result = ops.add_block(s.document, s.active_page_id, i.block_type)
    return s._from_edit(result, selected_block_id=result.block_id)


def _update_block(s: EditorSession, i: UpdateBlockIntent) -> SessionResult:
    return s._from_edit(ops.update_block_data(s.document, s.active_page_id, i.block_id, i.data))


def _update_block_width(s: EditorSession, i: UpdateBlockWidthIntent) -> SessionResult:
    return s._from_edit(ops.update_block_width(s.document, s.active_page_id, i.block_id, i.width))


def _update_block_padding(s: EditorSession, i: UpdateBlockPaddingIntent) -> SessionResult:
    return s._from_edit(ops.update_block_padding(s.document, s.active_page_id, i.block_id, i.padding))


def _update_block_style(s: EditorSession, i: UpdateBlockStyleIntent) -> SessionResult:
    return s._from_edit(ops.update_block_style(s.document, s.active_page_id, i.block_id, i.style))


def _delete_block(s: EditorSession, i: DeleteBlockIntent) -> SessionResult:
    return s._from_edit(ops.delete_block(s.document, s.active_page_id, i.block_id), selected_block_id=None)


def _move_block(s: EditorSession, i: MoveBlockIntent) -> SessionResult:
    return s._from_edit(ops.move_block(s.document, s.active_page_id, i.index, i.direction))


def _add_page(s: EditorSession, i: AddPageIntent) -> SessionResult:
    result = ops.add_page(s.document, i.name, parent_id=i.parent_id)
    return s._from_edit(result, active_page_id=result.page_id or s.active_page_id, selected_block_id=None)


def _delete_page(s: EditorSession, i: DeletePageIntent) -> SessionResult:
    return s._from_edit(ops.delete_page(s.document, i.page_id))


def _move_page(s: EditorSession, i: MovePageIntent) -> SessionResult:
    return s._from_edit(ops.move_page(s.document, i.page_id, i.direction))


def _toggle_page(s: EditorSession, i: TogglePageIntent) -> SessionResult:
    return s._from_edit(ops.toggle_page_open(s.document, i.page_id))


def _rename_page(s: EditorSession, i: RenamePageIntent) -> SessionResult:
    return s._from_edit(ops.rename_page(s.document, i.page_id, i.name))


def _update_settings(s: EditorSession, i: UpdateSettingsIntent) -> SessionResult:
    return s._from_edit(ops.update_settings(
        s.document,
        title=i.title,
        font=i.font,
        primary_color=i.primary_color,
        secondary_color=i.secondary_color,
    ))


def _switch_page(s: EditorSession, i: SwitchPageIntent) -> SessionResult:
    if not tree.contains_page(s.document.pages, i.page_id):
        return s._reject(EditFailure.NOT_FOUND, f"Page introuvable : {i.page_id}")
    return s._accept(active_page_id=i.page_id, selected_block_id=None)


def _select_block(s: EditorSession, i: SelectBlockIntent) -> SessionResult:
    if i.block_id is not None and all(b.id != i.block_id for b in s.active_page().sections):
        return s._reject(EditFailure.NOT_FOUND, f"Bloc introuvable : {i.block_id}")
    return s._accept(selected_block_id=i.block_id)


def _set_preview(s: EditorSession, i: SetPreviewIntent) -> SessionResult:
    if not i.preview and not s.authenticated:
        return s._reject(EditFailure.INVARIANT_VIOLATION, "Le mode édition exige une connexion administrateur")
    return s._accept(preview=i.preview)


_HANDLERS: Dict[str, Callable[[EditorSession, Any], SessionResult]] = {
    "add_block":            _add_block,
    "update_block":         _update_block,
    "update_block_width":   _update_block_width,
    "update_block_padding": _update_block_padding,
    "update_block_style":   _update_block_style,
    "delete_block":         _delete_block,
    "move_block":           _move_block,
    "add_page":             _add_page,
    "delete_page":          _delete_page,
    "move_page":            _move_page,
    "toggle_page":          _toggle_page,
    "rename_page":          _rename_page,
    "update_settings":      _update_settings,
    "switch_page":          _switch_page,
    "select_block":         _select_block,
    "set_preview":          _set_preview,
}

SessionResult.model_rebuild()


# ── Ouverture ────────────────────────────────────────────────────────────────

def open_session(loaded: Optional[Document], fallback: Document, authenticated: bool = False) -> EditorSession:
    """
    Démarre une session depuis le document stocké (ou `fallback` si absent).
    Les couleurs vides du document stocké retombent sur celles de `fallback`.
    """
    document = fallback
    if loaded is not None:
        document = loaded.model_copy(update={
            "primary_color": loaded.primary_color or fallback.primary_color,
            "secondary_color": loaded.secondary_color or fallback.secondary_color,
        })
    return EditorSession(
        document=document,
        active_page_id=document.pages[0].id,
        preview=True,
        authenticated=authenticated,
    )
