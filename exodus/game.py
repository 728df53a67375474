"""The game mode that owns the match's managers, and the HUD that follows its events."""

from __future__ import annotations

from typing import Any

from exodus.cards import CardData
from exodus.combat import CombatManager
from exodus.core import Actor, Event, EventRouter
from exodus.rewards import RewardManager


class GameMode(Actor):
    """Creates and keeps the event router, combat manager and reward manager.

    Each manager is created only when its class is configured.
    """

    def __init__(
        self,
        event_router_class: type[EventRouter] | None = None,
        combat_manager_class: type[CombatManager] | None = None,
        reward_manager_class: type[RewardManager] | None = None,
        name: str = "GameMode",
    ) -> None:
        super().__init__(name)
        self.event_router_class = event_router_class
        self.combat_manager_class = combat_manager_class
        self.reward_manager_class = reward_manager_class
        self.event_router: EventRouter | None = None
        self.combat_manager: CombatManager | None = None
        self.reward_manager: RewardManager | None = None

    def begin_play(self) -> None:
        """Create the configured managers; the combat manager starts play at once."""
        if self.event_router_class is not None:
            self.event_router = self.event_router_class()
            self.router = self.event_router

        if self.combat_manager_class is not None:
            self.combat_manager = self.combat_manager_class(router=self.event_router)
            self.combat_manager.begin_play()

        if self.reward_manager_class is not None:
            self.reward_manager = self.reward_manager_class()


class HUDWidget:
    """Root HUD widget that relays the router's gameplay events to the UI."""

    def __init__(self, router: EventRouter | None = None) -> None:
        self.router = router
        self.cached_router: EventRouter | None = None
        self.on_card_played = Event()
        self.on_damage_taken = Event()
        self.on_actor_died = Event()

    def construct(self) -> None:
        """Start listening to the router's events."""
        self.cached_router = self.router
        if self.cached_router is not None:
            self.cached_router.on_card_played.add(self._handle_card_played)
            self.cached_router.on_damage_taken.add(self._handle_damage_taken)
            self.cached_router.on_actor_died.add(self._handle_actor_died)

    def destruct(self) -> None:
        """Stop listening to the router's events."""
        if self.cached_router is not None:
            self.cached_router.on_card_played.remove(self._handle_card_played)
            self.cached_router.on_damage_taken.remove(self._handle_damage_taken)
            self.cached_router.on_actor_died.remove(self._handle_actor_died)
            self.cached_router = None

    def _handle_card_played(self, card_data: CardData) -> None:
        self.on_card_played.broadcast(card_data)

    def _handle_damage_taken(self, target: Any, amount: int) -> None:
        self.on_damage_taken.broadcast(target, amount)

    def _handle_actor_died(self, dead_actor: Any) -> None:
        self.on_actor_died.broadcast(dead_actor)


class GameHUD(Actor):
    """Creates the HUD widget and puts it on screen when play starts."""

    def __init__(
        self,
        hud_widget_class: type[HUDWidget] | None = None,
        name: str = "GameHUD",
        router: EventRouter | None = None,
    ) -> None:
        super().__init__(name, router)
        self.hud_widget_class = hud_widget_class
        self.hud_widget: HUDWidget | None = None
        self.viewport: list[Any] = []

    def begin_play(self) -> None:
        """Create the configured HUD widget and add it to the viewport."""
        if self.hud_widget_class is None:
            return
        self.hud_widget = self.hud_widget_class(self.router)
        self.viewport.append(self.hud_widget)
        self.hud_widget.construct()