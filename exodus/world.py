"""Data rows for map nodes, minions, shops and story events."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from exodus.core import GameplayTag


class NodeType(Enum):
    """What the player finds at a map node."""

    COMBAT = "Combat"
    ELITE = "Elite"
    BOSS = "Boss"
    SHOP = "Shop"
    STORY = "Story Event"
    REST = "Rest Site"


@dataclass
class EncounterNodeData:
    """A world-map node and the content it triggers."""

    node_id: str | None = None
    display_name: str = ""
    node_type: NodeType = NodeType.COMBAT
    payload_id: str | None = None
    node_tag: GameplayTag = field(default_factory=GameplayTag)


@dataclass
class MinionData:
    """An enemy or ally minion."""

    minion_id: str | None = None
    display_name: str = ""
    mesh: Any = None
    deck_id: str | None = None
    attack_pattern_id: str | None = None


class ShopItemType(Enum):
    """Kind of item a shop entry sells."""

    CARD = "Card"
    ARTIFACT = "Artifact"


@dataclass
class ShopItemData:
    """An item offered in a shop."""

    item_type: ShopItemType = ShopItemType.CARD
    item_id: str | None = None
    price: int = 0


@dataclass
class ShopData:
    """The items a shop offers."""

    shop_id: str | None = None
    items: list[ShopItemData] = field(default_factory=list)


@dataclass
class StoryChoice:
    """One option the player can pick in a story event."""

    choice_text: str = ""
    payload_id: str | None = None


@dataclass
class StoryEventData:
    """A story event with its intro text and choices."""

    event_id: str | None = None
    snippet_text: str = ""
    choices: list[StoryChoice] = field(default_factory=list)