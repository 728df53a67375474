"""Persistent state of a run and the subsystem that keeps it on disk."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from exodus.status import ActiveStatusEffect

SLOT_NAME = "RunState"
USER_INDEX = 0
DEFAULT_SAVE_DIR = Path("Saved") / "SaveGames"


def _names(values: Any) -> list[str | None]:
    if not isinstance(values, list):
        raise TypeError(f"expected a list of names, got {type(values).__name__}")
    return [None if value is None else str(value) for value in values]


def _name(value: Any) -> str | None:
    return None if value is None else str(value)


@dataclass
class MinionStatusArray:
    """The status effects active on one minion."""

    effects: list[ActiveStatusEffect] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MinionStatusArray:
        """Build an array from the form written by ``dataclasses.asdict``."""
        return cls(
            effects=[
                ActiveStatusEffect(
                    status_id=_name(effect.get("status_id")),
                    stacks=int(effect.get("stacks", 0)),
                    duration=int(effect.get("duration", 0)),
                )
                for effect in data.get("effects", [])
            ]
        )


@dataclass
class RunState:
    """Everything saved about a single run."""

    player_hp: int = 0
    gold: int = 0
    deck_card_ids: list[str | None] = field(default_factory=list)
    artifact_ids: list[str | None] = field(default_factory=list)
    visited_node_ids: list[str | None] = field(default_factory=list)
    rng_seed: int = 0
    current_deck_id: str | None = None
    owned_pattern_ids: list[str | None] = field(default_factory=list)
    minion_statuses: dict[str, MinionStatusArray] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible form of this state."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> RunState:
        """Build a state from the form returned by :meth:`to_dict`."""
        if not isinstance(data, dict):
            raise TypeError(f"expected a mapping, got {type(data).__name__}")
        statuses = data.get("minion_statuses", {})
        if not isinstance(statuses, dict):
            raise TypeError("minion_statuses must be a mapping")
        return cls(
            player_hp=int(data.get("player_hp", 0)),
            gold=int(data.get("gold", 0)),
            deck_card_ids=_names(data.get("deck_card_ids", [])),
            artifact_ids=_names(data.get("artifact_ids", [])),
            visited_node_ids=_names(data.get("visited_node_ids", [])),
            rng_seed=int(data.get("rng_seed", 0)),
            current_deck_id=_name(data.get("current_deck_id")),
            owned_pattern_ids=_names(data.get("owned_pattern_ids", [])),
            minion_statuses={
                str(key): MinionStatusArray.from_dict(value)
                for key, value in statuses.items()
            },
        )


class SaveSubsystem:
    """Reads and writes the run state in a single save slot.

    Other systems call the setters whenever player data changes so the run
    stays persisted.
    """

    def __init__(self, save_dir: str | os.PathLike[str] = DEFAULT_SAVE_DIR) -> None:
        self.save_dir = Path(save_dir)

    @property
    def slot_path(self) -> Path:
        """The file that holds the save slot."""
        return self.save_dir / f"{SLOT_NAME}_{USER_INDEX}.sav"

    def save_run_state(self, state: RunState | None) -> bool:
        """Write ``state`` to the slot; return False if nothing could be written."""
        if state is None:
            return False
        path = self.slot_path
        temp = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            temp.write_text(json.dumps(state.to_dict(), indent=2), encoding="utf-8")
            os.replace(temp, path)
        except OSError:
            return False
        return True

    def load_run_state(self) -> RunState | None:
        """Read the slot; return None if it is missing or does not hold a run state."""
        try:
            text = self.slot_path.read_text(encoding="utf-8")
        except OSError:
            return None
        try:
            return RunState.from_dict(json.loads(text))
        except (ValueError, TypeError, KeyError, AttributeError):
            return None

    def delete_save(self) -> None:
        """Remove the save slot if it exists."""
        self.slot_path.unlink(missing_ok=True)

    def _get_or_create_state(self) -> RunState:
        state = self.load_run_state()
        return state if state is not None else RunState()

    def set_player_hp(self, new_hp: int) -> None:
        """Store the player's current HP."""
        state = self._get_or_create_state()
        state.player_hp = new_hp
        self.save_run_state(state)

    def set_gold(self, new_gold: int) -> None:
        """Store the player's current gold."""
        state = self._get_or_create_state()
        state.gold = new_gold
        self.save_run_state(state)

    def set_deck_card_ids(self, new_ids: list[str | None]) -> None:
        """Replace the card IDs of the player's deck."""
        state = self._get_or_create_state()
        state.deck_card_ids = list(new_ids)
        self.save_run_state(state)

    def set_artifact_ids(self, new_ids: list[str | None]) -> None:
        """Replace the IDs of the player's artifacts."""
        state = self._get_or_create_state()
        state.artifact_ids = list(new_ids)
        self.save_run_state(state)

    def set_current_deck_id(self, deck_id: str | None) -> None:
        """Store the ID of the currently selected deck."""
        state = self._get_or_create_state()
        state.current_deck_id = deck_id
        self.save_run_state(state)

    def set_visited_node_ids(self, new_ids: list[str | None]) -> None:
        """Replace the IDs of visited map nodes."""
        state = self._get_or_create_state()
        state.visited_node_ids = list(new_ids)
        self.save_run_state(state)

    def set_rng_seed(self, seed: int) -> None:
        """Store the random number generator seed."""
        state = self._get_or_create_state()
        state.rng_seed = seed
        self.save_run_state(state)

    def set_owned_pattern_ids(self, new_ids: list[str | None]) -> None:
        """Replace the IDs of owned attack patterns."""
        state = self._get_or_create_state()
        state.owned_pattern_ids = list(new_ids)
        self.save_run_state(state)

    def set_minion_statuses(self, statuses: dict[str, MinionStatusArray]) -> None:
        """Replace the saved status effects of all minions."""
        state = self._get_or_create_state()
        state.minion_statuses = dict(statuses)
        self.save_run_state(state)