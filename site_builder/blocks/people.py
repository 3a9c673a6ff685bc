"""Blocs équipe & chiffres — organigramme, grille du personnel, statistiques, grille de liens/atouts."""
from typing import List, Literal, Optional

from .base import BaseBlock, BlockData, FontSize, Record


class OrgMember(Record):
    id: str
    name: str
    position: str
    image_url: str


class OrgChartData(BlockData):
    title: str = "Organigramme"
    members: List[OrgMember] = [
        OrgMember(id="1", name="Directeur", position="Directeur", image_url="https://picsum.photos/200"),
        OrgMember(id="2", name="Adjoint", position="Directeur adjoint", image_url="https://picsum.photos/201"),
    ]
    font_size: Optional[FontSize] = "md"


class OrgChartBlock(BaseBlock):
    type: Literal["orgChart"] = "orgChart"
    data: OrgChartData = OrgChartData()


class StaffGridData(BlockData):
    title: str = "Équipe de direction"
    members: List[OrgMember] = [
        OrgMember(id="1", name="M. Martin", position="Directeur", image_url="https://picsum.photos/150"),
        OrgMember(id="2", name="Mme Bernard", position="Vie scolaire", image_url="https://picsum.photos/151"),
    ]


class StaffGridBlock(BaseBlock):
    type: Literal["staffGrid"] = "staffGrid"
    data: StaffGridData = StaffGridData()


class StatItem(Record):
    id: str
    label: str
    value: str
    icon: str


class StatsData(BlockData):
    title: str = "L'école en chiffres"
    items: List[StatItem] = [
        StatItem(id="1", label="ÉLÈVES", value="850", icon="Users"),
        StatItem(id="2", label="ENSEIGNANTS", value="45", icon="Briefcase"),
        StatItem(id="3", label="PERSONNEL", value="12", icon="Settings"),
    ]


class StatsBlock(BaseBlock):
    type: Literal["stats"] = "stats"
    data: StatsData = StatsData()


class FeatureItem(Record):
    title: str
    description: str
    icon: str
    link: Optional[str] = None


class FeatureData(BlockData):
    title: str = "Nos atouts"
    features: List[FeatureItem] = [
        FeatureItem(title="Atout 1", description="Description", icon="Star"),
        FeatureItem(title="Atout 2", description="Description", icon="Heart"),
        FeatureItem(title="Atout 3", description="Description", icon="Shield"),
    ]
    font_size: Optional[FontSize] = "md"


class FeatureBlock(BaseBlock):
    type: Literal["feature"] = "feature"
    data: FeatureData = FeatureData()
