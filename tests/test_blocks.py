"""Tests blocs — catalogue, payloads par défaut, bloc inconnu, validation des payloads."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from pydantic import TypeAdapter, ValidationError

from site_builder.blocks import (
    BLOCK_REGISTRY, Block, BlockStyle, UnknownBlock,
    HeroBlock, HeroData, ContentBlock, TableBlock, CountdownBlock,
    create_block, default_data, is_known_block_type,
)

BLOCK_ADAPTER = TypeAdapter(Block)


# ── Catalogue ─────────────────────────────────────────────────────────────────

def test_registry_has_every_variant():
    assert len(BLOCK_REGISTRY) == 35
    for tag in ("hero", "orgChart", "staffGrid", "linkList", "button", "audio", "history"):
        assert tag in BLOCK_REGISTRY


def test_registry_tags_match_model_type():
    for tag, cls in BLOCK_REGISTRY.items():
        assert cls().type == tag


@pytest.mark.parametrize("block_type", sorted(BLOCK_REGISTRY))
def test_default_block_is_renderable(block_type):
    """Chaque payload par défaut est complet et se recharge sans erreur."""
    block = create_block(block_type)
    assert block.type == block_type
    assert block.width == "w-full"
    payload = block.model_dump(mode="json", by_alias=True)
    reloaded = BLOCK_ADAPTER.validate_python(payload)
    assert type(reloaded) is type(block)
    assert reloaded == block


def test_create_block_assigns_unique_ids():
    ids = {create_block("hero").id for _ in range(20)}
    assert len(ids) == 20


def test_create_block_explicit_id():
    assert create_block("content", block_id="c-1").id == "c-1"


def test_default_data_uses_camel_case_keys():
    data = default_data("hero")
    assert data["bgImage"].startswith("https://")
    assert "bg_image" not in data
    assert default_data("table")["headers"] == ["Jour", "Ouverture", "Fermeture"]


def test_default_data_is_independent_between_calls():
    first = default_data("gallery")
    first["images"].append("x")
    assert "x" not in default_data("gallery")["images"]


def test_countdown_default_target_is_in_the_future():
    from datetime import date
    target = date.fromisoformat(CountdownBlock().data.target_date)
    assert target > date.today()


# ── Bloc inconnu ──────────────────────────────────────────────────────────────

def test_unknown_type_parses_as_unknown_block():
    block = BLOCK_ADAPTER.validate_python({"id": "x", "type": "carousel", "data": {"slides": [1, 2]}})
    assert isinstance(block, UnknownBlock)
    assert block.type == "carousel"
    assert block.data == {"slides": [1, 2]}


def test_create_unknown_block_has_empty_payload():
    block = create_block("carousel")
    assert isinstance(block, UnknownBlock)
    assert block.data == {}
    assert default_data("carousel") == {}
    assert not is_known_block_type("carousel")


def test_known_type_parses_to_its_variant():
    block = BLOCK_ADAPTER.validate_python({
        "id": "h1", "type": "hero",
        "data": {"title": "T", "subtitle": "S", "bgImage": "/bg.jpg"},
    })
    assert isinstance(block, HeroBlock)
    assert block.data.bg_image == "/bg.jpg"


def test_known_type_with_mismatched_payload_is_rejected():
    with pytest.raises(ValidationError):
        BLOCK_ADAPTER.validate_python({"id": "t", "type": "table", "data": {"headers": "pas une liste"}})


def test_stored_extra_payload_keys_are_kept():
    """Les clés historiques (ex. buttonText) survivent à un aller-retour."""
    block = BLOCK_ADAPTER.validate_python({
        "id": "h1", "type": "hero",
        "data": {"title": "T", "subtitle": "S", "bgImage": "/bg.jpg", "buttonText": "Info"},
    })
    dumped = block.model_dump(mode="json", by_alias=True)
    assert dumped["data"]["buttonText"] == "Info"


# ── replace ───────────────────────────────────────────────────────────────────

def test_replace_data_validates_against_variant():
    block = ContentBlock(id="c")
    updated = block.replace(data={"title": "Nouveau", "body": "B", "alignment": "right"})
    assert updated.data.title == "Nouveau"
    assert updated.data.alignment == "right"
    assert block.data.title == "Titre"  # original intact


def test_replace_rejects_wrong_payload_shape():
    with pytest.raises(ValidationError):
        ContentBlock(id="c").replace(data={"alignment": "diagonal"})


def test_replace_rejects_data_of_another_variant():
    with pytest.raises(ValidationError):
        ContentBlock(id="c").replace(data=HeroData())


def test_replace_width_padding_style():
    block = TableBlock(id="t").replace(width="w-1/2", padding="py-8", style=BlockStyle(background_opacity=40))
    assert block.width == "w-1/2"
    assert block.padding == "py-8"
    assert block.style.background_opacity == 40


def test_replace_refuses_id_change():
    with pytest.raises(ValueError):
        ContentBlock(id="c").replace(id="d")


def test_style_opacity_bounds():
    with pytest.raises(ValidationError):
        BlockStyle(background_opacity=101)
    assert BlockStyle.model_validate({"backgroundOpacity": 0}).background_opacity == 0


def test_blocks_are_frozen():
    block = HeroBlock()
    with pytest.raises(ValidationError):
        block.width = "w-1/4"
