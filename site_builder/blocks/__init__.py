"""
Blocs — catalogue des variantes + union `Block` discriminée par `type`.

Ajouter une variante : une classe `XxxBlock` + une entrée dans BLOCK_REGISTRY.
Un `type` absent du catalogue est chargé en UnknownBlock (payload conservé).
"""
from typing import Annotated, Any, Dict, Optional, Type, Union

from pydantic import Discriminator, Tag

from .base import (
    BaseBlock, BlockData, BlockStyle, BlockWidth, BlockPadding, Record,
    UnknownBlock, UNKNOWN_BLOCK_TAG, new_id,
)
from .hero import HeroBlock, HeroData, TitleBlock, TitleData, NavbarBlock, NavbarData, ButtonBlock, ButtonData
from .text import (
    ContentBlock, ContentData, HistoryBlock, HistoryData, NoticeBlock, NoticeData,
    TickerBlock, TickerData, TestimonialBlock, TestimonialData, SpeechBlock, SpeechData,
    DefinitionBlock, DefinitionData, DefinitionItem, FaqBlock, FaqData, FaqItem,
)
from .media import (
    ImageBlock, ImageData, GalleryBlock, GalleryData, VideoBlock, VideoData,
    AudioBlock, AudioData, DriveBlock, DriveData, HtmlBlock, HtmlData,
)
from .people import (
    OrgChartBlock, OrgChartData, OrgMember, StaffGridBlock, StaffGridData,
    StatsBlock, StatsData, StatItem, FeatureBlock, FeatureData, FeatureItem,
)
from .events import (
    NewsBlock, NewsData, NewsItem, CalendarBlock, CalendarData, CalendarEvent,
    CountdownBlock, CountdownData, TimeBlock, TimeData, VisitorBlock, VisitorData,
)
from .links import (
    LinkListBlock, LinkListData, LinkListItem, DownloadsBlock, DownloadsData, DownloadItem,
    CtaBlock, CtaData, ContactBlock, ContactData, SocialLink, FooterBlock, FooterData,
)
from .layout import DividerBlock, DividerData, SpacerBlock, SpacerData, TableBlock, TableData, TableRow


# ── Registry des variantes ──────────────────────────────────────────────────

BLOCK_REGISTRY: Dict[str, Type[BaseBlock]] = {
    "hero":        HeroBlock,
    "title":       TitleBlock,
    "navbar":      NavbarBlock,
    "button":      ButtonBlock,
    "content":     ContentBlock,
    "history":     HistoryBlock,
    "notice":      NoticeBlock,
    "ticker":      TickerBlock,
    "testimonial": TestimonialBlock,
    "speech":      SpeechBlock,
    "definition":  DefinitionBlock,
    "faq":         FaqBlock,
    "image":       ImageBlock,
    "gallery":     GalleryBlock,
    "video":       VideoBlock,
    "audio":       AudioBlock,
    "drive":       DriveBlock,
    "html":        HtmlBlock,
    "orgChart":    OrgChartBlock,
    "staffGrid":   StaffGridBlock,
    "stats":       StatsBlock,
    "feature":     FeatureBlock,
    "news":        NewsBlock,
    "calendar":    CalendarBlock,
    "countdown":   CountdownBlock,
    "time":        TimeBlock,
    "visitor":     VisitorBlock,
    "linkList":    LinkListBlock,
    "downloads":   DownloadsBlock,
    "cta":         CtaBlock,
    "contact":     ContactBlock,
    "footer":      FooterBlock,
    "divider":     DividerBlock,
    "spacer":      SpacerBlock,
    "table":       TableBlock,
}


def _block_tag(value: Any) -> str:
    """Discriminant : le `type` s'il est au catalogue, sinon le tag du bloc inconnu."""
    if isinstance(value, dict):
        block_type = value.get("type")
    else:
        block_type = getattr(value, "type", None)
    return block_type if block_type in BLOCK_REGISTRY else UNKNOWN_BLOCK_TAG


# Union discriminée construite depuis le registry, utilisable dans tout modèle Pydantic
Block = Annotated[
    Union[tuple(
        [Annotated[cls, Tag(tag)] for tag, cls in BLOCK_REGISTRY.items()]
        + [Annotated[UnknownBlock, Tag(UNKNOWN_BLOCK_TAG)]]
    )],
    Discriminator(_block_tag),
]


def is_known_block_type(block_type: str) -> bool:
    return block_type in BLOCK_REGISTRY


def create_block(block_type: str, block_id: Optional[str] = None) -> BaseBlock:
    """
    Crée un bloc neuf avec son payload par défaut.
    Type inconnu → UnknownBlock au payload vide (rendu « bloc non reconnu »).
    """
    block_id = block_id or new_id()
    block_cls = BLOCK_REGISTRY.get(block_type)
    if block_cls is None:
        return UnknownBlock(id=block_id, type=block_type)
    return block_cls(id=block_id)


def default_data(block_type: str) -> Dict[str, Any]:
    """Payload par défaut (forme JSON, clés camelCase) d'un type de bloc ; {} si inconnu."""
    block = create_block(block_type, block_id=UNKNOWN_BLOCK_TAG)
    if isinstance(block, UnknownBlock):
        return {}
    return block.data.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = [
    # Base
    "Record", "BaseBlock", "BlockData", "BlockStyle", "BlockWidth", "BlockPadding",
    "UnknownBlock", "UNKNOWN_BLOCK_TAG", "new_id",
    # Registry
    "BLOCK_REGISTRY", "Block", "is_known_block_type", "create_block", "default_data",
    # Variantes
    "HeroBlock", "HeroData", "TitleBlock", "TitleData", "NavbarBlock", "NavbarData",
    "ButtonBlock", "ButtonData",
    "ContentBlock", "ContentData", "HistoryBlock", "HistoryData", "NoticeBlock", "NoticeData",
    "TickerBlock", "TickerData", "TestimonialBlock", "TestimonialData", "SpeechBlock", "SpeechData",
    "DefinitionBlock", "DefinitionData", "DefinitionItem", "FaqBlock", "FaqData", "FaqItem",
    "ImageBlock", "ImageData", "GalleryBlock", "GalleryData", "VideoBlock", "VideoData",
    "AudioBlock", "AudioData", "DriveBlock", "DriveData", "HtmlBlock", "HtmlData",
    "OrgChartBlock", "OrgChartData", "OrgMember", "StaffGridBlock", "StaffGridData",
    "StatsBlock", "StatsData", "StatItem", "FeatureBlock", "FeatureData", "FeatureItem",
    "NewsBlock", "NewsData", "NewsItem", "CalendarBlock", "CalendarData", "CalendarEvent",
    "CountdownBlock", "CountdownData", "TimeBlock", "TimeData", "VisitorBlock", "VisitorData",
    "LinkListBlock", "LinkListData", "LinkListItem", "DownloadsBlock", "DownloadsData", "DownloadItem",
    "CtaBlock", "CtaData", "ContactBlock", "ContactData", "SocialLink", "FooterBlock", "FooterData",
    "DividerBlock", "DividerData", "SpacerBlock", "SpacerData", "TableBlock", "TableData", "TableRow",
]
