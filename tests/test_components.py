import pytest

from chainquest.components import (
    IdleProgress,
    MapTile,
    Quest,
    Rarity,
    SFTAsset,
    SFTAttributes,
    TileType,
)


def test_idle_progress_defaults_start_at_level_one():
    progress = IdleProgress()
    assert progress.level == 1
    assert progress.resources == 0.0
    assert progress.last_update == 0.0


def test_idle_progress_dict_round_trip():
    progress = IdleProgress(resources=42.5, experience=3.25, level=4, last_update=99.0)
    assert IdleProgress.from_dict(progress.to_dict()) == progress


def test_idle_progress_dict_keys():
    assert set(IdleProgress().to_dict()) == {"resources", "experience", "level", "last_update"}


def test_idle_progress_from_dict_missing_field():
    with pytest.raises(KeyError):
        IdleProgress.from_dict({"resources": 1.0})


def test_idle_progress_from_dict_negative_level():
    with pytest.raises(ValueError):
        IdleProgress.from_dict(
            {"resources": 0.0, "experience": 0.0, "level": -1, "last_update": 0.0}
        )


@pytest.mark.parametrize(
    "code, expected",
    [
        (0, TileType.EMPTY),
        (1, TileType.RESOURCE),
        (2, TileType.ENEMY),
        (3, TileType.QUEST),
        (4, TileType.EMPTY),
        (-5, TileType.EMPTY),
    ],
)
def test_tile_type_from_code(code, expected):
    assert TileType.from_code(code) is expected


def test_sft_attributes_round_trip():
    attrs = SFTAttributes(quest_id=7, map_seed=1337, rarity=Rarity.EPIC, power=12, metadata="m")
    assert SFTAttributes.from_dict(attrs.to_dict()) == attrs


def test_sft_attributes_rarity_uses_variant_name():
    attrs = SFTAttributes(quest_id=1, map_seed=2, rarity=Rarity.LEGENDARY, power=3, metadata="")
    assert attrs.to_dict()["rarity"] == "Legendary"


def test_sft_attributes_unknown_rarity():
    data = {"quest_id": 1, "map_seed": 2, "rarity": "Mythic", "power": 3, "metadata": ""}
    with pytest.raises(ValueError):
        SFTAttributes.from_dict(data)


def test_quest_and_asset_hold_their_parts():
    attrs = SFTAttributes(quest_id=5, map_seed=9, rarity=Rarity.RARE, power=1, metadata="x")
    quest = Quest(id=5, name="n", description="d", reward_sft=attrs)
    asset = SFTAsset(token_id="TOKEN-1", attributes=attrs)
    assert quest.reward_sft.quest_id == quest.id
    assert asset.staked is False
    assert Quest(id=1, name="a", description="b").reward_sft is None


def test_map_tile_fields():
    tile = MapTile(TileType.from_code(2), 3, 4)
    assert (tile.tile_type, tile.grid_x, tile.grid_y) == (TileType.ENEMY, 3, 4)