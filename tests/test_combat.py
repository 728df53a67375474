from exodus.cards import CardPatternData
from exodus.combat import TURN_ENERGY, CombatManager, CombatStats
from exodus.core import Actor, DataTable, EventRouter
from exodus.patterns import AttackPattern


def make_stats(router=None, **kwargs):
    actor = Actor("pawn", router)
    return actor, actor.add_component(CombatStats(**kwargs))


def test_defaults_match_source():
    stats = CombatStats()
    assert (stats.health, stats.block, stats.energy) == (10, 0, 3)


def test_damage_without_block_reduces_health():
    _, stats = make_stats(health=10)
    stats.apply_damage(4)
    assert stats.health == 10 - 4


def test_block_absorbs_first():
    _, stats = make_stats(health=10, block=5)
    stats.apply_damage(3)
    assert (stats.health, stats.block) == (10, 5 - 3)
    stats.apply_damage(6)
    assert stats.block == 0
    assert stats.health == 10 - (6 - (5 - 3))


def test_non_positive_damage_ignored():
    router = EventRouter()
    hits = []
    router.on_damage_taken.add(lambda t, a: hits.append(a))
    _, stats = make_stats(router, health=10, block=1)
    stats.apply_damage(0)
    stats.apply_damage(-3)
    assert (stats.health, stats.block, hits) == (10, 1, [])


def test_damage_and_death_broadcast_once():
    router = EventRouter()
    hits, deaths = [], []
    router.on_damage_taken.add(lambda t, a: hits.append((t, a)))
    router.on_actor_died.add(deaths.append)
    actor, stats = make_stats(router, health=5, block=2)
    stats.apply_damage(9)
    assert hits == [(actor, 9)]
    assert deaths == [actor]
    assert stats.is_dead
    stats.apply_damage(1)
    assert len(hits) == 1 and len(deaths) == 1


def test_add_block_and_energy():
    stats = CombatStats(block=1, energy=2)
    stats.add_block(4)
    stats.add_energy(3)
    assert (stats.block, stats.energy) == (1 + 4, 2 + 3)


def make_manager(router=None):
    player = Actor("player", router)
    player.add_component(CombatStats(energy=0))
    enemy = Actor("enemy", router)
    enemy.add_component(CombatStats(energy=0))
    return CombatManager(router=router, player_pawn=player, enemy_pawn=enemy)


def test_begin_play_starts_player_turn():
    manager = make_manager()
    started = []
    manager.on_player_turn_started.add(lambda: started.append(True))
    manager.begin_play()
    assert started == [True]
    assert manager.player_turn
    assert manager.active_pawn() is manager.player_pawn
    assert manager.player_pawn.find_component(CombatStats).energy == TURN_ENERGY


def test_turn_cycle_order_and_round():
    manager = make_manager()
    log = []
    manager.on_player_turn_started.add(lambda: log.append("ps"))
    manager.on_player_turn_ended.add(lambda: log.append("pe"))
    manager.on_enemy_turn_started.add(lambda: log.append("es"))
    manager.on_enemy_turn_ended.add(lambda: log.append("ee"))
    manager.end_player_turn()
    assert not manager.player_turn
    assert manager.active_pawn() is manager.enemy_pawn
    assert manager.enemy_pawn.find_component(CombatStats).energy == TURN_ENERGY
    manager.end_enemy_turn()
    assert log == ["pe", "es", "ee", "ps"]
    assert manager.round == 2
    assert manager.player_turn


def test_enemy_turn_picks_intent():
    router = EventRouter()
    intents = []
    router.on_intent_selected.add(lambda card, tag: intents.append(card))
    manager = make_manager(router)
    table = DataTable(CardPatternData)
    table.add_row("Bite", CardPatternData("Bite"))
    manager.enemy_pawn.add_component(AttackPattern(table))
    manager.start_enemy_turn()
    assert intents == ["Bite"]


def test_turns_without_pawns():
    manager = CombatManager()
    manager.end_player_turn()
    manager.end_enemy_turn()
    assert manager.round == 2
    assert manager.active_pawn() is None