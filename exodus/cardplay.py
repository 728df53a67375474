"""Card instances in play: their lifecycle events, visuals, zones and UI binding."""

from __future__ import annotations

from enum import Enum
from typing import Any

from exodus.cards import CardData, CardVisualData
from exodus.core import Actor, Component, Event, EventRouter
from exodus.status import StatusEffectComponent


class CardZone(Enum):
    """Zones a card can occupy during play."""

    DRAW_PILE = "DrawPile"
    HAND = "Hand"
    QUEUE = "Queue"
    GRAVE = "Grave"


class CardComponent(Component):
    """A single card instance and its lifecycle events."""

    def __init__(self, card_data: CardData | None = None) -> None:
        self.card_data = card_data if card_data is not None else CardData()
        self.on_draw = Event()
        self.on_play = Event()
        self.on_resolve = Event()
        self.on_discard = Event()

    def begin_play(self) -> None:
        """Apply the card's starting statuses to the owner's status component."""
        if self.owner is None:
            return
        status = self.owner.find_component(StatusEffectComponent)
        if status is None:
            return
        for tag in self.card_data.starting_statuses:
            status.apply_status_by_tag(tag, 0, 0)

    def trigger_draw(self) -> None:
        """Announce that the card was drawn."""
        self.on_draw.broadcast()

    def trigger_play(self) -> None:
        """Announce that the card was played."""
        self.on_play.broadcast()

    def trigger_resolve(self) -> None:
        """Announce that the card's effect resolved."""
        self.on_resolve.broadcast()

    def trigger_discard(self) -> None:
        """Announce that the card was discarded."""
        self.on_discard.broadcast()


class CardVisual(Component):
    """Shows a card's visual asset and plays its animations.

    The first asset present among skeletal mesh, flipbook and sprite is shown.
    A skeletal mesh plays animations (recorded in ``animation`` and ``looping``);
    a flipbook is swapped for the animation flipbook; a sprite does not animate.
    """

    def __init__(self, visual_data: CardVisualData | None = None) -> None:
        self.visual_data = visual_data if visual_data is not None else CardVisualData()
        self.skeletal_mesh: Any = None
        self.flipbook: Any = None
        self.sprite: Any = None
        self.animation: Any = None
        self.looping = False

    def begin_play(self) -> None:
        """Take the owner card's visual data, show its asset and start idling."""
        owner = self.owner
        if isinstance(owner, CardActor) and owner.card_component is not None:
            self.visual_data = owner.card_component.card_data.visual

        data = self.visual_data
        if data.skeletal_mesh is not None:
            self.skeletal_mesh = data.skeletal_mesh
        elif data.flipbook is not None:
            self.flipbook = data.flipbook
        elif data.sprite is not None:
            self.sprite = data.sprite

        self.play_idle()

    def _play_animation(self, animation: Any, loop: bool) -> None:
        if animation is None:
            return
        if self.skeletal_mesh is not None:
            self.animation = animation
            self.looping = loop
        elif self.flipbook is not None:
            self.flipbook = animation

    def play_idle(self) -> None:
        """Play the idle animation, looping."""
        self._play_animation(self.visual_data.idle_animation, True)

    def play_attack(self) -> None:
        """Play the attack animation once."""
        self._play_animation(self.visual_data.attack_animation, False)

    def play_defend(self) -> None:
        """Play the defend animation once."""
        self._play_animation(self.visual_data.defend_animation, False)

    def play_walk(self) -> None:
        """Play the walk animation, looping."""
        self._play_animation(self.visual_data.walk_animation, True)

    def play_retreat(self) -> None:
        """Play the retreat animation once."""
        self._play_animation(self.visual_data.retreat_animation, False)


class CardActor(Actor):
    """A card that moves between draw pile, hand, queue and grave."""

    def __init__(
        self,
        card_data: CardData | None = None,
        name: str = "",
        router: EventRouter | None = None,
    ) -> None:
        super().__init__(name, router)
        self.card_zone = CardZone.DRAW_PILE
        self.card_component: CardComponent | None = self.add_component(
            CardComponent(card_data)
        )
        self.card_visual: CardVisual | None = self.add_component(CardVisual())
        self._resolved_before_discard = False

        self.on_card_drawn = Event()
        self.on_card_played = Event()
        self.on_card_resolved = Event()
        self.on_card_discarded = Event()
        self.on_attack = Event()
        self.on_defend = Event()
        self.on_walk = Event()
        self.on_retreat = Event()

    def begin_play(self) -> None:
        """Start the components and listen to the card's lifecycle events."""
        for component in list(self.components):
            component.begin_play()
        if self.card_component is not None:
            self.card_component.on_draw.add(self._handle_draw)
            self.card_component.on_play.add(self._handle_play)
            self.card_component.on_resolve.add(self._handle_resolve)
            self.card_component.on_discard.add(self._handle_discard)

    def move_to_zone(self, new_zone: CardZone) -> None:
        """Move to ``new_zone`` and fire the lifecycle events of that move."""
        if self.card_zone == new_zone:
            return
        old_zone = self.card_zone
        self.card_zone = new_zone

        component = self.card_component
        if component is None:
            return

        if old_zone is CardZone.DRAW_PILE and new_zone is CardZone.HAND:
            component.trigger_draw()
        elif old_zone is CardZone.HAND and new_zone is CardZone.QUEUE:
            component.trigger_play()
            if self.router is not None:
                self.router.on_card_played.broadcast(component.card_data)

        if new_zone is CardZone.GRAVE:
            if old_zone is CardZone.QUEUE:
                component.trigger_resolve()
                self._resolved_before_discard = True
            component.trigger_discard()
            self._resolved_before_discard = False

    def _handle_draw(self) -> None:
        self.play_idle()
        self.on_card_drawn.broadcast()

    def _handle_play(self) -> None:
        self.play_attack()
        self.on_card_played.broadcast()

    def _handle_resolve(self) -> None:
        self.play_retreat()
        self.on_card_resolved.broadcast()

    def _handle_discard(self) -> None:
        if not self._resolved_before_discard:
            self.play_retreat()
        self.on_card_discarded.broadcast()

    def play_attack(self) -> None:
        """Play the attack animation and announce it."""
        if self.card_visual is not None:
            self.card_visual.play_attack()
        self.on_attack.broadcast()

    def play_defend(self) -> None:
        """Play the defend animation and announce it."""
        if self.card_visual is not None:
            self.card_visual.play_defend()
        self.on_defend.broadcast()

    def play_walk(self) -> None:
        """Play the walk animation and announce it."""
        if self.card_visual is not None:
            self.card_visual.play_walk()
        self.on_walk.broadcast()

    def play_retreat(self) -> None:
        """Play the retreat animation and announce it."""
        if self.card_visual is not None:
            self.card_visual.play_retreat()
        self.on_retreat.broadcast()

    def play_idle(self) -> None:
        """Play the idle animation."""
        if self.card_visual is not None:
            self.card_visual.play_idle()


class CardWidget:
    """UI element that shows a card and reacts to its lifecycle events."""

    def __init__(self) -> None:
        self.card_component: CardComponent | None = None
        self.on_card_drawn = Event()
        self.on_card_played = Event()
        self.on_card_resolved = Event()
        self.on_card_discarded = Event()

    def init_with_component(self, component: CardComponent | None) -> None:
        """Bind this widget to ``component`` so it follows the card's events."""
        if component is None:
            return
        self.card_component = component
        component.on_draw.add(self._handle_draw)
        component.on_play.add(self._handle_play)
        component.on_resolve.add(self._handle_resolve)
        component.on_discard.add(self._handle_discard)

    def _handle_draw(self) -> None:
        self.on_card_drawn.broadcast()

    def _handle_play(self) -> None:
        self.on_card_played.broadcast()

    def _handle_resolve(self) -> None:
        self.on_card_resolved.broadcast()

    def _handle_discard(self) -> None:
        self.on_card_discarded.broadcast()