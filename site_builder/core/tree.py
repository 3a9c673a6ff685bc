"""
Arbre des pages — opérations récursives pures sur la forêt des pages.

Chaque mutation reconstruit uniquement le chemin racine → nœud ciblé
(copie des ancêtres via model_copy) ; les autres nœuds sont conservés par
référence. Si l'id est introuvable, la forêt d'entrée est retournée telle quelle.
"""
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from .schemas import Page
from .sections import Direction, MoveResult, swap_neighbour

PageTransform = Callable[[Page], Page]


def find_page(pages: Sequence[Page], page_id: str) -> Optional[Page]:
    """Recherche en profondeur, ordre du document (nœud avant enfants, frères de gauche à droite)."""
    for page in pages:
        if page.id == page_id:
            return page
        found = find_page(page.sub_pages, page_id)
        if found is not None:
            return found
    return None


def contains_page(pages: Sequence[Page], page_id: str) -> bool:
    return find_page(pages, page_id) is not None


def is_ancestor_of(page: Page, target_id: str) -> bool:
    """True si `target_id` est un descendant strict de `page` (surlignage du chemin actif)."""
    for sub in page.sub_pages:
        if sub.id == target_id or is_ancestor_of(sub, target_id):
            return True
    return False


def ancestor_ids(pages: Sequence[Page], page_id: str) -> List[str]:
    """Ids des ancêtres de `page_id`, de la racine au parent ; [] pour une racine ou un id inconnu."""
    for page in pages:
        if page.id == page_id:
            return []
        if is_ancestor_of(page, page_id):
            return [page.id] + ancestor_ids(page.sub_pages, page_id)
    return []


def iter_pages(pages: Sequence[Page], depth: int = 0) -> Iterator[Tuple[Page, int]]:
    """Parcourt la forêt en ordre du document → (page, profondeur)."""
    for page in pages:
        yield page, depth
        yield from iter_pages(page.sub_pages, depth + 1)


def update_page(pages: Sequence[Page], page_id: str, transform: PageTransform) -> Sequence[Page]:
    """Applique `transform` au nœud `page_id` et recopie ses ancêtres."""
    rebuilt = []
    changed = False
    for page in pages:
        if page.id == page_id:
            page = transform(page)
            changed = True
        elif page.sub_pages:
            children = update_page(page.sub_pages, page_id, transform)
            if children is not page.sub_pages:
                page = page.model_copy(update={"sub_pages": children})
                changed = True
        rebuilt.append(page)
    return tuple(rebuilt) if changed else pages


def delete_page(pages: Sequence[Page], page_id: str) -> Sequence[Page]:
    """Supprime le nœud `page_id` et tout son sous-arbre, à n'importe quelle profondeur."""
    rebuilt = []
    changed = False
    for page in pages:
        if page.id == page_id:
            changed = True
            continue
        if page.sub_pages:
            children = delete_page(page.sub_pages, page_id)
            if children is not page.sub_pages:
                page = page.model_copy(update={"sub_pages": children})
                changed = True
        rebuilt.append(page)
    return tuple(rebuilt) if changed else pages


def insert_child(pages: Sequence[Page], parent_id: str, new_page: Page) -> Sequence[Page]:
    """Ajoute `new_page` en dernier enfant de `parent_id` et ouvre le parent."""
    return update_page(
        pages,
        parent_id,
        lambda parent: parent.model_copy(update={
            "sub_pages": (*parent.sub_pages, new_page),
            "is_open": True,
        }),
    )


def move_page(pages: Sequence[Page], page_id: str, direction: Direction) -> MoveResult:
    """
    Échange la page avec son voisin dans sa liste de frères.

    Le niveau courant est cherché d'abord ; sinon on descend dans les sous-pages
    de gauche à droite et on s'arrête au premier déplacement réussi.
    """
    for index, page in enumerate(pages):
        if page.id == page_id:
            return swap_neighbour(pages, index, direction)

    for index, page in enumerate(pages):
        if not page.sub_pages:
            continue
        children, moved = move_page(page.sub_pages, page_id, direction)
        if moved:
            rebuilt = list(pages)
            rebuilt[index] = page.model_copy(update={"sub_pages": children})
            return MoveResult(tuple(rebuilt), True)
    return MoveResult(pages, False)


def toggle_open(pages: Sequence[Page], page_id: str) -> Sequence[Page]:
    return update_page(pages, page_id, lambda page: page.model_copy(update={"is_open": not page.is_open}))
