"""Blocs actualité & temps — actualités, calendrier, compte à rebours, horloge, compteur de visites."""
import calendar
from datetime import date
from typing import List, Literal, Optional

from pydantic import Field

from .base import Alignment, BaseBlock, BlockData, Record


class NewsItem(Record):
    id: str
    title: str
    date: str
    tag: str
    content: str
    link: Optional[str] = None


class NewsData(BlockData):
    title: str = "Actualités"
    items: List[NewsItem] = [
        NewsItem(
            id="1",
            title="Grande journée de nettoyage",
            date="2024-03-20",
            tag="VIE SCOLAIRE",
            content="Tous les parents sont invités à participer à cette journée.",
        ),
    ]


class NewsBlock(BaseBlock):
    type: Literal["news"] = "news"
    data: NewsData = NewsData()


class CalendarEvent(Record):
    date: str
    month: str
    title: str
    desc: str


class CalendarData(BlockData):
    title: str = "Calendrier scolaire"
    events: List[CalendarEvent] = [
        CalendarEvent(date="15", month="MARS", title="Réunion des parents", desc="Salle polyvalente, 8h00"),
        CalendarEvent(date="22", month="AVR", title="Journée sportive", desc="Terrain de sport"),
    ]


class CalendarBlock(BaseBlock):
    type: Literal["calendar"] = "calendar"
    data: CalendarData = CalendarData()


def _one_month_ahead() -> str:
    """Date ISO (AAAA-MM-JJ) un mois après aujourd'hui, jour borné à la fin du mois."""
    today = date.today()
    year = today.year + today.month // 12
    month = today.month % 12 + 1
    day = min(today.day, calendar.monthrange(year, month)[1])
    return date(year, month, day).isoformat()


class CountdownData(BlockData):
    title: str = "Avant la journée sportive"
    target_date: str = Field(default_factory=_one_month_ahead)


class CountdownBlock(BaseBlock):
    type: Literal["countdown"] = "countdown"
    data: CountdownData = Field(default_factory=CountdownData)


class TimeData(BlockData):
    format: Literal["12h", "24h"] = "12h"
    show_date: bool = True
    alignment: Alignment = "center"
    bg_color: str = "#1e40af"
    text_color: str = "#ffffff"


class TimeBlock(BaseBlock):
    type: Literal["time"] = "time"
    data: TimeData = TimeData()


class VisitorData(BlockData):
    label: str = "Nombre de visiteurs"
    count: int = 12405
    show_live_indicator: bool = True


class VisitorBlock(BaseBlock):
    type: Literal["visitor"] = "visitor"
    data: VisitorData = VisitorData()
