"""
Liste de sections — opérations pures sur la séquence ordonnée des blocs d'une page.

Chaque opération retourne un nouveau tuple ; si l'id est introuvable, la séquence
d'entrée est retournée telle quelle (même objet). Aucune opération ne lève pour
un id ou un index inconnu. La validation d'un payload (ValidationError) est
laissée à l'appelant.
"""
from typing import Any, Literal, NamedTuple, Optional, Sequence, Tuple, TypeVar

from ..blocks import BaseBlock, BlockStyle

T = TypeVar("T")

Direction = Literal["up", "down"]

_STEP = {"up": -1, "down": 1}


class MoveResult(NamedTuple):
    """Résultat d'un déplacement : la séquence (inchangée si moved=False) + le drapeau."""
    items: Sequence[Any]
    moved: bool


def swap_neighbour(items: Sequence[T], index: int, direction: Direction) -> MoveResult:
    """Échange l'élément `index` avec son voisin ; no-op (moved=False) en bordure ou hors bornes."""
    target = index + _STEP[direction]
    if not (0 <= index < len(items)) or not (0 <= target < len(items)):
        return MoveResult(items, False)
    swapped = list(items)
    swapped[index], swapped[target] = swapped[target], swapped[index]
    return MoveResult(tuple(swapped), True)


def find_block(sections: Sequence[BaseBlock], block_id: str) -> Optional[BaseBlock]:
    for block in sections:
        if block.id == block_id:
            return block
    return None


def append_block(sections: Sequence[BaseBlock], block: BaseBlock) -> Tuple[BaseBlock, ...]:
    return (*sections, block)


def delete_block(sections: Sequence[BaseBlock], block_id: str) -> Sequence[BaseBlock]:
    if find_block(sections, block_id) is None:
        return sections
    return tuple(block for block in sections if block.id != block_id)


def move_block(sections: Sequence[BaseBlock], index: int, direction: Direction) -> MoveResult:
    return swap_neighbour(sections, index, direction)


def _replace_block(sections: Sequence[BaseBlock], block_id: str, **changes: Any) -> Sequence[BaseBlock]:
    for index, block in enumerate(sections):
        if block.id == block_id:
            rebuilt = list(sections)
            rebuilt[index] = block.replace(**changes)
            return tuple(rebuilt)
    return sections


def update_block_data(sections: Sequence[BaseBlock], block_id: str, data: Any) -> Sequence[BaseBlock]:
    """Remplace le payload du bloc `block_id` (validé contre la variante du bloc)."""
    return _replace_block(sections, block_id, data=data)


def update_block_width(sections: Sequence[BaseBlock], block_id: str, width: str) -> Sequence[BaseBlock]:
    return _replace_block(sections, block_id, width=width)


def update_block_padding(sections: Sequence[BaseBlock], block_id: str, padding: Optional[str]) -> Sequence[BaseBlock]:
    return _replace_block(sections, block_id, padding=padding)


def update_block_style(sections: Sequence[BaseBlock], block_id: str, style: Any) -> Sequence[BaseBlock]:
    """`style` : BlockStyle, dict (camelCase ou snake_case) ou None pour retirer le style."""
    if isinstance(style, dict):
        style = BlockStyle.model_validate(style)
    return _replace_block(sections, block_id, style=style)
