"""Blocs d'en-tête — hero, titre, barre de navigation, bouton."""
from typing import Literal, Optional

from .base import Alignment, BaseBlock, BlockData, FontSize


class HeroData(BlockData):
    title: str = "Nouveau titre"
    subtitle: str = "Sous-titre descriptif"
    bg_image: str = "https://picsum.photos/1920/1080"
    font_size: Optional[FontSize] = "md"
    overlay_opacity: Optional[float] = None
    height: Optional[int] = None


class HeroBlock(BaseBlock):
    type: Literal["hero"] = "hero"
    data: HeroData = HeroData()


class TitleData(BlockData):
    text: str = "Titre de section"
    alignment: Alignment = "center"
    font_size: Literal["sm", "md", "lg", "xl", "2xl"] = "lg"
    color: Optional[str] = None
    url: Optional[str] = None


class TitleBlock(BaseBlock):
    type: Literal["title"] = "title"
    data: TitleData = TitleData()


class NavbarData(BlockData):
    style: Literal["transparent", "light", "dark", "primary"] = "light"
    alignment: Alignment = "center"


class NavbarBlock(BaseBlock):
    type: Literal["navbar"] = "navbar"
    data: NavbarData = NavbarData()


class ButtonData(BlockData):
    label: str = "En savoir plus"
    link_type: Literal["external", "internal"] = "external"
    url: Optional[str] = "#"
    page_id: Optional[str] = None
    alignment: Alignment = "center"
    style: Literal["primary", "secondary", "outline"] = "primary"
    size: Literal["sm", "md", "lg"] = "md"


class ButtonBlock(BaseBlock):
    type: Literal["button"] = "button"
    data: ButtonData = ButtonData()
