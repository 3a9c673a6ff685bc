"""
site_builder v1.0 — modèle de document et moteur d'arbre d'un éditeur de site.

Usage (agrégat):
    >>> from site_builder import default_document, add_block, add_page
    >>> doc = default_document()
    >>> result = add_page(doc, "À propos", parent_id="home")
    >>> result = add_block(result.document, result.page_id, "gallery")
    >>> result.ok
    True

Usage (session d'éditeur):
    >>> from site_builder import open_session, AddPageIntent
    >>> session = open_session(None, default_document(), authenticated=True)
    >>> session.apply(AddPageIntent(name="Contact")).session.active_page().name
    'Contact'
"""

# ── Blocs ───────────────────────────────────────────────────────────────────
from .blocks import (
    BaseBlock, BlockData, BlockStyle, UnknownBlock,
    BLOCK_REGISTRY, Block, create_block, default_data, is_known_block_type,
)

# ── Document ────────────────────────────────────────────────────────────────
from .core.schemas import (
    Page, Document,
    document_to_dict, document_from_dict, document_to_json, document_from_json,
)
from .core.sections import MoveResult
from .core.document import (
    EditFailure, EditResult,
    add_block, update_block_data, update_block_width, update_block_padding, update_block_style,
    delete_block, move_block,
    add_page, delete_page, move_page, toggle_page_open, rename_page, update_settings,
)
from .defaults import default_document

# ── Session ─────────────────────────────────────────────────────────────────
from .editor import (
    EditorSession, SessionResult, Intent, open_session,
    AddBlockIntent, UpdateBlockIntent, DeleteBlockIntent, MoveBlockIntent,
    AddPageIntent, DeletePageIntent, MovePageIntent, TogglePageIntent, SwitchPageIntent,
)

# ── Persistance ─────────────────────────────────────────────────────────────
from .database import DocumentStore, SaveResult

__version__ = "1.0.0"

__all__ = [
    # Blocs
    "BaseBlock", "BlockData", "BlockStyle", "UnknownBlock",
    "BLOCK_REGISTRY", "Block", "create_block", "default_data", "is_known_block_type",
    # Document
    "Page", "Document",
    "document_to_dict", "document_from_dict", "document_to_json", "document_from_json",
    "MoveResult", "EditFailure", "EditResult",
    "add_block", "update_block_data", "update_block_width", "update_block_padding", "update_block_style",
    "delete_block", "move_block",
    "add_page", "delete_page", "move_page", "toggle_page_open", "rename_page", "update_settings",
    "default_document",
    # Session
    "EditorSession", "SessionResult", "Intent", "open_session",
    "AddBlockIntent", "UpdateBlockIntent", "DeleteBlockIntent", "MoveBlockIntent",
    "AddPageIntent", "DeletePageIntent", "MovePageIntent", "TogglePageIntent", "SwitchPageIntent",
    # Persistance
    "DocumentStore", "SaveResult",
]
