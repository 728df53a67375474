"""Weighted card choice for enemy AI."""

from __future__ import annotations

import random

from exodus.cards import CardPatternData
from exodus.core import Component, DataTable


class AttackPattern(Component):
    """Chooses the next card an enemy plays from a weighted pattern table."""

    def __init__(
        self,
        pattern_table: DataTable[CardPatternData] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.pattern_table = pattern_table
        self.rng = rng if rng is not None else random.Random()
        self._last_card: str | None = None
        self._repeat_count = 0

    def _is_allowed(self, row: CardPatternData) -> bool:
        return not (
            row.repeat_limit > 0
            and self._last_card == row.card_id
            and self._repeat_count >= row.repeat_limit
        )

    def pick_next_card(self) -> str | None:
        """Return the ID of the next card to play, or None if nothing can be chosen."""
        if self.pattern_table is None:
            return None
        candidates = [row for row in self.pattern_table.rows() if self._is_allowed(row)]
        if not candidates:
            return None

        total_weight = sum(max(1, row.weight) for row in candidates)
        roll = self.rng.randint(1, total_weight)
        for row in candidates:
            roll -= max(1, row.weight)
            if roll <= 0:
                if self._last_card == row.card_id:
                    self._repeat_count += 1
                else:
                    self._last_card = row.card_id
                    self._repeat_count = 1
                router = self.router
                if router is not None:
                    router.on_intent_selected.broadcast(row.card_id, row.pattern_tag)
                return row.card_id
        return None