"""Combat statistics and the turn flow between player and enemy."""

from __future__ import annotations

from exodus.core import Actor, Component, Event, EventRouter
from exodus.patterns import AttackPattern

TURN_ENERGY = 3


class CombatStats(Component):
    """Health, block and energy of an actor."""

    def __init__(self, health: int = 10, block: int = 0, energy: int = TURN_ENERGY) -> None:
        self.health = health
        self.block = block
        self.energy = energy
        self._is_dead = False

    @property
    def is_dead(self) -> bool:
        """True once health has dropped to zero or below."""
        return self._is_dead

    def apply_damage(self, amount: int) -> None:
        """Take damage, spending block first; announce damage and death."""
        if amount <= 0 or self._is_dead:
            return
        absorbed = min(self.block, amount)
        self.block -= absorbed
        remaining = amount - absorbed
        if remaining > 0:
            self.health -= remaining

        router = self.router
        if router is not None:
            router.on_damage_taken.broadcast(self.owner, amount)
        if self.health <= 0 and not self._is_dead:
            self._is_dead = True
            if router is not None:
                router.on_actor_died.broadcast(self.owner)

    def add_block(self, amount: int) -> None:
        """Increase block by ``amount``."""
        self.block += amount

    def add_energy(self, amount: int) -> None:
        """Increase energy by ``amount``."""
        self.energy += amount


class CombatManager(Actor):
    """Runs the alternation of player and enemy turns."""

    def __init__(
        self,
        name: str = "CombatManager",
        router: EventRouter | None = None,
        player_pawn: Actor | None = None,
        enemy_pawn: Actor | None = None,
    ) -> None:
        super().__init__(name, router)
        self.round = 1
        self.player_turn = True
        self.player_pawn = player_pawn
        self.enemy_pawn = enemy_pawn
        self.on_player_turn_started = Event()
        self.on_player_turn_ended = Event()
        self.on_enemy_turn_started = Event()
        self.on_enemy_turn_ended = Event()

    @staticmethod
    def _stats(pawn: Actor | None) -> CombatStats | None:
        return pawn.find_component(CombatStats) if pawn is not None else None

    def begin_play(self) -> None:
        """Start combat with the player's turn."""
        self.start_player_turn()

    def start_player_turn(self) -> None:
        """Give the player a fresh turn and energy."""
        self.player_turn = True
        stats = self._stats(self.player_pawn)
        if stats is not None:
            stats.energy = TURN_ENERGY
        self.on_player_turn_started.broadcast()

    def end_player_turn(self) -> None:
        """Finish the player's turn and hand over to the enemy."""
        self.on_player_turn_ended.broadcast()
        self.start_enemy_turn()

    def start_enemy_turn(self) -> None:
        """Give the enemy a fresh turn and energy and let it pick its intent."""
        self.player_turn = False
        stats = self._stats(self.enemy_pawn)
        if stats is not None:
            stats.energy = TURN_ENERGY
        if self.enemy_pawn is not None:
            pattern = self.enemy_pawn.find_component(AttackPattern)
            if pattern is not None:
                pattern.pick_next_card()
        self.on_enemy_turn_started.broadcast()

    def end_enemy_turn(self) -> None:
        """Finish the enemy's turn, advance the round and start the player's turn."""
        self.on_enemy_turn_ended.broadcast()
        self.round += 1
        self.start_player_turn()

    def active_pawn(self) -> Actor | None:
        """Return the pawn whose turn it is."""
        return self.player_pawn if self.player_turn else self.enemy_pawn