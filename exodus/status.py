"""Status effects: their data rows, the component that tracks them, and helpers."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from exodus.cards import CardData
from exodus.core import Actor, Component, DataTable, GameplayTag

TICK_INTERVAL = 1.0


class StatusCategory(Enum):
    """Broad grouping used by UI colouring and balance rules."""

    BUFF = "Buff"
    DEBUFF = "Debuff"


class StatusStacking(Enum):
    """How a new application interacts with an existing effect of the same ID."""

    STACK = "Stack"
    """Adds its stacks on top of what is already there."""
    REFRESH = "Refresh"
    """Resets the remaining duration but keeps current stacks."""
    REPLACE = "Replace"
    """Wipes the old effect and starts fresh."""


@dataclass
class StatusEffectData:
    """Designer-tuned description of a status effect."""

    status_id: str | None = None
    display_name: str = ""
    icon: Any = None
    category: StatusCategory = StatusCategory.DEBUFF
    stacking: StatusStacking = StatusStacking.STACK
    base_duration: int = 1
    base_stacks: int = 1
    gameplay_tag: GameplayTag = field(default_factory=GameplayTag)


@dataclass
class ActiveStatusEffect:
    """A status effect currently applied to an actor."""

    status_id: str | None = None
    stacks: int = 0
    duration: int = 0


class StatusEffectComponent(Component):
    """Tracks the status effects active on an actor."""

    def __init__(
        self, status_data_table: DataTable[StatusEffectData] | None = None
    ) -> None:
        self.status_data_table = status_data_table
        self.active_effects: list[ActiveStatusEffect] = []
        self._accumulated_time = 0.0

    def find_effect(self, status_id: str) -> ActiveStatusEffect | None:
        """Return the active effect with ``status_id``, or None."""
        return next(
            (e for e in self.active_effects if e.status_id == status_id), None
        )

    def apply_status(
        self, data: StatusEffectData, stacks: int = 1, duration: int = 1
    ) -> None:
        """Apply ``data``; non-positive stacks or duration fall back to its base values."""
        if data.status_id is None:
            return
        stack_value = stacks if stacks > 0 else data.base_stacks
        duration_value = duration if duration > 0 else data.base_duration

        existing = self.find_effect(data.status_id)
        if existing is None:
            self.active_effects.append(
                ActiveStatusEffect(data.status_id, stack_value, duration_value)
            )
        elif data.stacking is StatusStacking.STACK:
            existing.stacks += stack_value
            existing.duration = max(existing.duration, duration_value)
        elif data.stacking is StatusStacking.REFRESH:
            existing.duration = duration_value
        elif data.stacking is StatusStacking.REPLACE:
            existing.stacks = stack_value
            existing.duration = duration_value

    def apply_status_by_tag(
        self, status_tag: GameplayTag, stacks: int = 0, duration: int = 0
    ) -> None:
        """Apply the first row of the status table whose tag equals ``status_tag``."""
        if self.status_data_table is None or not status_tag.is_valid():
            return
        row = next(
            (r for r in self.status_data_table.rows() if r.gameplay_tag == status_tag),
            None,
        )
        if row is not None:
            self.apply_status(row, stacks, duration)

    def tick(self, delta_time: float) -> None:
        """Advance time; once a second passes, count down and drop expired effects."""
        self._accumulated_time += delta_time
        if self._accumulated_time < TICK_INTERVAL:
            return
        self._accumulated_time = 0.0

        remaining = []
        for effect in self.active_effects:
            if effect.duration > 0:
                effect.duration -= 1
                if effect.duration <= 0:
                    continue
            remaining.append(effect)
        self.active_effects = remaining


def find_card_data(table: DataTable[CardData] | None, row_name: str | None) -> CardData:
    """Return a copy of the card row ``row_name``, or an empty card if it is missing."""
    if table is None:
        return CardData()
    row = table.find_row(row_name)
    return copy.deepcopy(row) if row is not None else CardData()


def apply_status_effect(
    target: Actor | None, status_data: StatusEffectData, stacks: int, duration: int
) -> None:
    """Apply a status effect to ``target`` if it has a status component."""
    if target is None:
        return
    component = target.find_component(StatusEffectComponent)
    if component is not None:
        component.apply_status(status_data, stacks, duration)