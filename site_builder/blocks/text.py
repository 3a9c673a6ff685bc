"""Blocs texte — article, historique, avis, bandeau défilant, témoignage, discours, définitions, FAQ."""
from typing import List, Literal, Optional

from .base import BaseBlock, BlockData, FontSize, Record


class ContentData(BlockData):
    title: str = "Titre"
    body: str = "Contenu du texte..."
    alignment: Literal["left", "right", "center"] = "left"
    font_size: Optional[FontSize] = "md"


class ContentBlock(BaseBlock):
    type: Literal["content"] = "content"
    data: ContentData = ContentData()


class HistoryData(BlockData):
    title: str = "Notre histoire"
    body: str = "Racontez ici l'histoire de l'établissement..."


class HistoryBlock(BaseBlock):
    type: Literal["history"] = "history"
    data: HistoryData = HistoryData()


class NoticeData(BlockData):
    title: str = "Attention"
    content: str = "Merci d'apporter une tenue de sport mercredi."
    color: Literal["yellow", "blue", "red", "green"] = "yellow"
    font_size: Optional[FontSize] = "md"


class NoticeBlock(BaseBlock):
    type: Literal["notice"] = "notice"
    data: NoticeData = NoticeData()


class TickerData(BlockData):
    label: str = "INFOS"
    text: str = "Les inscriptions pour la rentrée sont ouvertes."
    direction: Literal["left", "right"] = "left"
    speed: int = 20


class TickerBlock(BaseBlock):
    type: Literal["ticker"] = "ticker"
    data: TickerData = TickerData()


class TestimonialData(BlockData):
    quote: str = "Cette école a façonné la personne que je suis devenue."
    author: str = "Ancien élève"
    role: str = "Promotion 1998"


class TestimonialBlock(BaseBlock):
    type: Literal["testimonial"] = "testimonial"
    data: TestimonialData = TestimonialData()


class SpeechData(BlockData):
    title: str = "Mot du directeur"
    text: str = "Bienvenue sur le site de l'établissement..."
    image_url: str = "https://picsum.photos/400/500"
    author_name: str = "Le directeur"
    author_role: str = "Direction"
    font_size: Optional[FontSize] = "md"
    alignment: Optional[Literal["left", "center", "justify"]] = None
    image_size: Optional[Literal["small", "medium", "large", "full"]] = None


class SpeechBlock(BaseBlock):
    type: Literal["speech"] = "speech"
    data: SpeechData = SpeechData()


class DefinitionItem(Record):
    term: str
    definition: str


class DefinitionData(BlockData):
    title: str = "Signification du logo"
    image_url: str = "https://picsum.photos/300"
    items: List[DefinitionItem] = [
        DefinitionItem(term="Rouge", definition="Le courage"),
        DefinitionItem(term="Bleu", definition="L'unité"),
    ]


class DefinitionBlock(BaseBlock):
    type: Literal["definition"] = "definition"
    data: DefinitionData = DefinitionData()


class FaqItem(Record):
    question: str
    answer: str


class FaqData(BlockData):
    title: str = "Questions fréquentes"
    items: List[FaqItem] = [
        FaqItem(question="À quelle heure ouvre l'école ?", answer="L'école ouvre à 7h00 chaque jour de classe."),
    ]


class FaqBlock(BaseBlock):
    type: Literal["faq"] = "faq"
    data: FaqData = FaqData()
