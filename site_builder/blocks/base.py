"""
Blocs de base pour site_builder.
Record (config commune camelCase + frozen) → BlockData (payload) → BaseBlock discriminé par `type`.
"""
import uuid
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


BlockWidth = Literal["w-full", "w-3/4", "w-2/3", "w-1/2", "w-1/3", "w-1/4"]
BlockPadding = Literal["py-0", "py-4", "py-8", "py-12", "py-16", "py-20", "py-24", "py-32"]

Alignment = Literal["left", "center", "right"]
FontSize = Literal["sm", "md", "lg", "xl"]


def new_id() -> str:
    return str(uuid.uuid4())


class Record(BaseModel):
    """Enregistrement immuable, sérialisé en camelCase (format JSON stocké)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class BlockStyle(Record):
    """Style personnalisé d'un bloc (fond, opacité, couleur du texte)."""
    background_color: Optional[str] = None
    background_image: Optional[str] = None
    background_opacity: Optional[int] = Field(default=None, ge=0, le=100)
    text_color: Optional[str] = None


class BlockData(Record):
    """Payload d'un bloc. Les clés inconnues d'un document stocké sont conservées."""
    model_config = ConfigDict(extra="allow")


class BaseBlock(Record):
    """Bloc de base (classe parente de toutes les variantes)."""
    id: str = Field(default_factory=new_id)
    type: str
    width: BlockWidth = "w-full"
    padding: Optional[BlockPadding] = None
    style: Optional[BlockStyle] = None

    def replace(self, **changes: Any) -> "BaseBlock":
        """
        Copie validée du bloc avec `changes` appliqués (data, width, padding, style).
        Lève ValidationError si un champ ne correspond pas au type du bloc.
        """
        if "id" in changes or "type" in changes:
            raise ValueError("id et type d'un bloc sont immuables")
        values = self.model_dump()
        values.update(changes)
        return type(self).model_validate(values)


UNKNOWN_BLOCK_TAG = "__unknown__"


class UnknownBlock(BaseBlock):
    """
    Bloc dont le `type` est absent du catalogue.
    Le payload est conservé tel quel ; la présentation affiche un bloc « non reconnu ».
    """
    data: Dict[str, Any] = {}
