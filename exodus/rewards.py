"""Random card and artifact rewards and look-ups in deck and pattern tables."""

from __future__ import annotations

import copy
import random
from collections.abc import Callable
from typing import TypeVar

from exodus.cards import ArtifactData, CardData, CardPatternData, DeckData
from exodus.core import DataTable, GameplayTag

T = TypeVar("T")


class RewardManager:
    """Hands out random cards and artifacts, optionally filtered by tag."""

    def __init__(
        self,
        card_table: DataTable[CardData] | None = None,
        artifact_table: DataTable[ArtifactData] | None = None,
        deck_table: DataTable[DeckData] | None = None,
        pattern_table: DataTable[CardPatternData] | None = None,
        seed: int | None = None,
    ) -> None:
        self.card_table = card_table
        self.artifact_table = artifact_table
        self.deck_table = deck_table
        self.pattern_table = pattern_table
        self.random_stream = random.Random(seed)

    def _draw(self, rows: list[T], count: int) -> list[T]:
        results: list[T] = []
        while rows and len(results) < count:
            index = self.random_stream.randint(0, len(rows) - 1)
            results.append(copy.deepcopy(rows.pop(index)))
        return results

    @staticmethod
    def _filtered(
        table: DataTable[T], keep: Callable[[T], bool] | None
    ) -> list[T]:
        rows = table.rows()
        return rows if keep is None else [row for row in rows if keep(row)]

    def get_random_cards(
        self, count: int, required_tag: GameplayTag | None = None
    ) -> list[CardData]:
        """Pick up to ``count`` distinct cards that grant or start with ``required_tag``."""
        if self.card_table is None:
            return []
        keep = None
        if required_tag is not None and required_tag.is_valid():
            def keep(row: CardData) -> bool:
                return (
                    required_tag in row.granted_status_effects
                    or required_tag in row.starting_statuses
                )
        return self._draw(self._filtered(self.card_table, keep), count)

    def get_random_artifacts(
        self, count: int, required_tag: GameplayTag | None = None
    ) -> list[ArtifactData]:
        """Pick up to ``count`` distinct artifacts whose tag matches ``required_tag``."""
        if self.artifact_table is None:
            return []
        keep = None
        if required_tag is not None and required_tag.is_valid():
            def keep(row: ArtifactData) -> bool:
                return row.gameplay_tag.matches_tag(required_tag)
        return self._draw(self._filtered(self.artifact_table, keep), count)

    def get_deck_card_ids(self, deck_id: str | None) -> list[str]:
        """Return the card IDs of deck ``deck_id``, or an empty list."""
        if self.deck_table is None or deck_id is None:
            return []
        row = self.deck_table.find_row(deck_id)
        return list(row.card_ids) if row is not None else []

    def get_patterns_by_tag(
        self, pattern_tag: GameplayTag | None = None
    ) -> list[CardPatternData]:
        """Return pattern rows matching ``pattern_tag``, or all rows if it is not valid."""
        if self.pattern_table is None:
            return []
        match_all = pattern_tag is None or not pattern_tag.is_valid()
        return [
            copy.deepcopy(row)
            for row in self.pattern_table.rows()
            if match_all or row.pattern_tag.matches_tag(pattern_tag)
        ]