"""Data rows for cards, attack patterns, decks and artifacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from exodus.core import GameplayTag


class CardType(Enum):
    """Classification of a card for rules and UI."""

    ATTACK = "Attack"
    SKILL = "Skill"
    POWER = "Power"
    CURSE = "Curse"
    STATUS = "Status"


class CardRarity(Enum):
    """Drop-rate bucket of a card."""

    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    EPIC = "Epic"
    LEGENDARY = "Legendary"


@dataclass
class CardVisualData:
    """Visual assets used when a card's effect spawns something."""

    sprite: Any = None
    flipbook: Any = None
    skeletal_mesh: Any = None
    idle_animation: Any = None
    attack_animation: Any = None
    defend_animation: Any = None
    walk_animation: Any = None
    retreat_animation: Any = None


@dataclass
class CardData:
    """Designer-tuned definition of a card."""

    card_id: str | None = None
    display_name: str = ""
    portrait: Any = None
    frame: Any = None
    frame_tint: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    card_visual_widget: type | None = None
    visual: CardVisualData = field(default_factory=CardVisualData)
    card_type: CardType = CardType.ATTACK
    rarity: CardRarity = CardRarity.COMMON
    energy_cost: int = 1
    base_damage: int = 0
    base_block: int = 0
    granted_status_effects: list[GameplayTag] = field(default_factory=list)
    starting_statuses: list[GameplayTag] = field(default_factory=list)
    repetitions: int = 1


@dataclass
class CardPatternData:
    """One weighted entry of an AI card-choice table."""

    card_id: str | None = None
    weight: int = 1
    repeat_limit: int = 0
    pattern_tag: GameplayTag = field(default_factory=GameplayTag)


@dataclass
class DeckData:
    """A starter or enemy deck listed by card IDs."""

    deck_id: str | None = None
    card_ids: list[str] = field(default_factory=list)


class ArtifactRarity(Enum):
    """Rarity of an artifact when rewards are rolled."""

    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    EPIC = "Epic"
    LEGENDARY = "Legendary"


@dataclass
class ArtifactData:
    """Designer-tuned definition of an artifact."""

    artifact_id: str | None = None
    display_name: str = ""
    description: str = ""
    icon: Any = None
    rarity: ArtifactRarity = ArtifactRarity.COMMON
    gold_value: int = 50
    gameplay_tag: GameplayTag = field(default_factory=GameplayTag)