"""Blocs liens & contact — liste de liens, téléchargements, appel à l'action, contact, pied de page."""
from typing import List, Literal, Optional

from .base import BaseBlock, BlockData, Record


class LinkListItem(Record):
    label: str
    url: str


class LinkListData(BlockData):
    title: str = "Liens utiles"
    links: List[LinkListItem] = [
        LinkListItem(label="Ministère de l'Éducation", url="https://www.education.gouv.fr"),
        LinkListItem(label="Espace parents", url="https://www.example.org/parents"),
    ]


class LinkListBlock(BaseBlock):
    type: Literal["linkList"] = "linkList"
    data: LinkListData = LinkListData()


class DownloadItem(Record):
    title: str
    url: str
    type: Literal["PDF", "DOC", "FORM"] = "PDF"


class DownloadsData(BlockData):
    title: str = "Téléchargements"
    items: List[DownloadItem] = [
        DownloadItem(title="Formulaire d'inscription", url="#", type="PDF"),
        DownloadItem(title="Emploi du temps", url="#", type="DOC"),
    ]


class DownloadsBlock(BaseBlock):
    type: Literal["downloads"] = "downloads"
    data: DownloadsData = DownloadsData()


class CtaData(BlockData):
    text: str = "Les inscriptions pour la rentrée sont ouvertes !"
    button_label: str = "S'inscrire"
    button_link: str = "#"
    bg_color: str = "#1e40af"


class CtaBlock(BaseBlock):
    type: Literal["cta"] = "cta"
    data: CtaData = CtaData()


class SocialLink(Record):
    icon: str
    url: str


class ContactData(BlockData):
    title: str = "Nous contacter"
    email: str = "contact@ecole.example.org"
    phone: str = "+33 1 23 45 67 89"
    address: str = "1 rue de l'École, 75000 Paris"
    map_url: str = ""
    social_links: Optional[List[SocialLink]] = None


class ContactBlock(BaseBlock):
    type: Literal["contact"] = "contact"
    data: ContactData = ContactData()


class FooterData(BlockData):
    copyright: str = "© 2024 Mon école. Tous droits réservés."


class FooterBlock(BaseBlock):
    type: Literal["footer"] = "footer"
    data: FooterData = FooterData()
