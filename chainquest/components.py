"""Plain data types describing players, map tiles, quests and SFT assets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


@dataclass
class IdleProgress:
    """A player's accumulated idle progress."""

    resources: float = 0.0
    experience: float = 0.0
    level: int = 1
    last_update: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "resources": self.resources,
            "experience": self.experience,
            "level": self.level,
            "last_update": self.last_update,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "IdleProgress":
        level = int(data["level"])
        if level < 0:
            raise ValueError(f"level must not be negative: {level}")
        return cls(
            resources=float(data["resources"]),
            experience=float(data["experience"]),
            level=level,
            last_update=float(data["last_update"]),
        )


@dataclass
class Position:
    """A point in world space."""

    x: float = 0.0
    y: float = 0.0


class TileType(Enum):
    """Kinds of map tile."""

    EMPTY = "Empty"
    RESOURCE = "Resource"
    ENEMY = "Enemy"
    QUEST = "Quest"
    PORTAL = "Portal"

    @classmethod
    def from_code(cls, code: int) -> "TileType":
        """Map a stored grid code to a tile; unknown codes are empty tiles."""
        return _TILE_CODES.get(code, cls.EMPTY)


_TILE_CODES = {
    0: TileType.EMPTY,
    1: TileType.RESOURCE,
    2: TileType.ENEMY,
    3: TileType.QUEST,
}


@dataclass
class MapTile:
    """A tile placed on the map grid."""

    tile_type: TileType
    grid_x: int
    grid_y: int


class Rarity(Enum):
    """Rarity levels for SFTs."""

    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    EPIC = "Epic"
    LEGENDARY = "Legendary"


@dataclass
class SFTAttributes:
    """Attributes attached to a generated SFT."""

    quest_id: int
    map_seed: int
    rarity: Rarity
    power: int
    metadata: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "quest_id": self.quest_id,
            "map_seed": self.map_seed,
            "rarity": self.rarity.value,
            "power": self.power,
            "metadata": self.metadata,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SFTAttributes":
        return cls(
            quest_id=int(data["quest_id"]),
            map_seed=int(data["map_seed"]),
            rarity=Rarity(data["rarity"]),
            power=int(data["power"]),
            metadata=str(data["metadata"]),
        )


@dataclass
class SFTAsset:
    """An SFT owned by the player."""

    token_id: str
    attributes: SFTAttributes
    staked: bool = False


@dataclass
class NetworkPlayer:
    """A remote player in a multiplayer session."""

    peer_id: int
    username: str
    connected: bool = False


@dataclass
class Quest:
    """A quest with its rewards."""

    id: int
    name: str
    description: str
    completed: bool = False
    reward_resources: float = 0.0
    reward_sft: Optional[SFTAttributes] = field(default=None)