import random

from exodus.cards import CardPatternData
from exodus.core import Actor, DataTable, EventRouter, GameplayTag
from exodus.patterns import AttackPattern


class FixedRoll:
    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def randint(self, low, high):
        self.calls.append((low, high))
        return self.values.pop(0)


def make_table(*rows):
    table = DataTable(CardPatternData)
    for row in rows:
        table.add_row(row.card_id, row)
    return table


def test_no_table_or_empty_table_gives_none():
    assert AttackPattern().pick_next_card() is None
    assert AttackPattern(DataTable(CardPatternData)).pick_next_card() is None


def test_roll_walks_weights_in_order():
    rows = (CardPatternData("A", weight=2), CardPatternData("B", weight=3))
    rng = FixedRoll(3, 2)
    pattern = AttackPattern(make_table(*rows), rng)
    assert pattern.pick_next_card() == "B"
    assert pattern.pick_next_card() == "A"
    assert rng.calls[0] == (1, sum(r.weight for r in rows))


def test_non_positive_weight_counts_as_one():
    rng = FixedRoll(2)
    pattern = AttackPattern(
        make_table(CardPatternData("A", weight=0), CardPatternData("B", weight=-4)), rng
    )
    assert pattern.pick_next_card() == "B"
    assert rng.calls == [(1, 2)]


def test_repeat_limit_excludes_card():
    table = make_table(CardPatternData("A", repeat_limit=1), CardPatternData("B"))
    rng = FixedRoll(1, 1)
    pattern = AttackPattern(table, rng)
    first = pattern.pick_next_card()
    second = pattern.pick_next_card()
    assert first == "A"
    assert second == "B"
    assert rng.calls == [(1, 2), (1, 1)]


def test_all_rows_excluded_gives_none():
    pattern = AttackPattern(make_table(CardPatternData("A", repeat_limit=2)))
    assert pattern.pick_next_card() == "A"
    assert pattern.pick_next_card() == "A"
    assert pattern.pick_next_card() is None
    assert pattern.pick_next_card() is None


def test_same_seed_same_sequence():
    rows = [CardPatternData(name, weight=w) for name, w in (("A", 1), ("B", 4), ("C", 2))]
    first = AttackPattern(make_table(*rows), random.Random(12345))
    second = AttackPattern(make_table(*rows), random.Random(12345))
    assert [first.pick_next_card() for _ in range(20)] == [
        second.pick_next_card() for _ in range(20)
    ]


def test_intent_broadcast_on_router():
    router = EventRouter()
    received = []
    router.on_intent_selected.add(lambda card, tag: received.append((card, tag)))
    tag = GameplayTag("Pattern.Aggressive")
    enemy = Actor("enemy", router)
    pattern = enemy.add_component(AttackPattern(make_table(CardPatternData("A", pattern_tag=tag))))
    assert pattern.pick_next_card() == "A"
    assert received == [("A", tag)]