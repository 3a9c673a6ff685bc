"""Blocs de mise en page — séparateur, espaceur, tableau."""
from typing import List, Literal, Tuple

from .base import BaseBlock, BlockData, Record


class DividerData(BlockData):
    style: Literal["solid", "dashed", "dotted"] = "solid"
    color: str = "#e5e7eb"
    thickness: int = 2


class DividerBlock(BaseBlock):
    type: Literal["divider"] = "divider"
    data: DividerData = DividerData()


class SpacerData(BlockData):
    height: int = 50


class SpacerBlock(BaseBlock):
    type: Literal["spacer"] = "spacer"
    data: SpacerData = SpacerData()


class TableRow(Record):
    col1: str = ""
    col2: str = ""
    col3: str = ""


class TableData(BlockData):
    title: str = "Horaires du secrétariat"
    headers: Tuple[str, str, str] = ("Jour", "Ouverture", "Fermeture")
    rows: List[TableRow] = [
        TableRow(col1="Lundi - Jeudi", col2="8h00", col3="17h00"),
        TableRow(col1="Vendredi", col2="8h00", col3="12h15"),
    ]


class TableBlock(BaseBlock):
    type: Literal["table"] = "table"
    data: TableData = TableData()
