# exodus

Rules and state for a turn-based deck-building game, as plain Python objects.
The package has no dependencies outside the standard library.

## What is in it

- `exodus.core`
  - `GameplayTag`: a dot-separated tag. `matches_tag` is true for the same tag or for a child of it.
  - `Event`: a multicast callback list with `add`, `remove` and `broadcast`.
  - `DataTable`: named rows kept in insertion order. It can be limited to one row type, and then a row of another type raises `TypeError`.
  - `EventRouter`: the shared events `on_card_played`, `on_damage_taken`, `on_actor_died` and `on_intent_selected`.
  - `Actor` and `Component`: an actor holds components, and `find_component` finds one by type.
- `exodus.cards`: the data rows `CardData`, `CardVisualData`, `CardPatternData`, `DeckData` and `ArtifactData`, with the enums `CardType`, `CardRarity` and `ArtifactRarity`.
- `exodus.world`: the data rows `EncounterNodeData`, `MinionData`, `ShopData`, `ShopItemData`, `StoryEventData` and `StoryChoice`, with the enums `NodeType` and `ShopItemType`.
- `exodus.status`
  - `StatusEffectComponent` applies status effects by the rules of `StatusStacking`:
    - `STACK` adds the new stacks and keeps the longer duration.
    - `REFRESH` resets the duration.
    - `REPLACE` resets both stacks and duration.
  - A stack count or duration of zero or less falls back to the base values of the row.
  - `tick(delta_time)` counts the durations down by one each time a second of accumulated time has passed. An effect is dropped when its duration reaches zero.
  - `find_card_data` and `apply_status_effect` are small helpers.
- `exodus.patterns`: `AttackPattern.pick_next_card` picks a card from a weighted `CardPatternData` table.
  - Each row counts with a weight of at least 1.
  - A row's `repeat_limit` stops the same card from being picked more often than that in a row.
  - The choice is broadcast on the router's `on_intent_selected`.
- `exodus.combat`
  - `CombatStats` holds health, block and energy. Damage is taken from block first. Damage and death are announced on the router.
  - `CombatManager` alternates player and enemy turns. It resets the energy of the pawn whose turn starts to 3 and counts rounds. At the start of the enemy's turn it lets the enemy's `AttackPattern` pick its intent.
- `exodus.cardplay`
  - `CardActor.move_to_zone` moves a card between the `CardZone`s `DRAW_PILE`, `HAND`, `QUEUE` and `GRAVE`. Through `CardComponent` it fires the draw, play, resolve and discard events that fit the move.
  - `CardVisual` records which asset is shown and which animation plays.
  - `CardWidget` relays a card's lifecycle events.
- `exodus.rewards`: `RewardManager`.
  - It draws distinct random cards and artifacts, optionally filtered by tag. A given `seed` gives the same picks.
  - It also reads a deck's card IDs and filters pattern rows by tag.
- `exodus.save`: `SaveSubsystem` keeps one `RunState` as JSON in `<save_dir>/RunState_0.sav`. The default `save_dir` is `Saved/SaveGames`.
  - `save_run_state` returns `False` when nothing could be written.
  - `load_run_state` returns `None` when the slot is missing or unreadable.
  - Each setter loads the state, or starts a new one, changes one field and saves.
- `exodus.nodemap`: `NodeMapWidget.handle_node_activated` does two things.
  - It opens a `ShopWidget` or `StoryEventWidget` for shop and story nodes. The widget goes into a `viewport` list, when the widget map has one.
  - It records the node as visited through its `SaveSubsystem`, when it has one.
- `exodus.game`
  - `GameMode.begin_play` creates the configured `EventRouter`, `CombatManager` and `RewardManager`. The combat manager starts the player's turn at once.
  - `GameHUD` creates a `HUDWidget`, which relays the router's card, damage and death events.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from exodus.core import DataTable
from exodus.cards import CardData
from exodus.rewards import RewardManager

table = DataTable(CardData)
for card_id in ("Strike", "Defend", "Bash"):
    table.add_row(card_id, CardData(card_id=card_id))

rewards = RewardManager(card_table=table, seed=12345)
picks = rewards.get_random_cards(2, None)
print([card.card_id for card in picks])
```

Passing `None` as the tag means that no filter is applied.

## What it does not do

- There is no command to run and no game loop. You call `begin_play`, `tick` and the turn methods yourself.
- Nothing is drawn on screen. Widgets are plain objects, a viewport is just a list, and `CardVisual` only records assets and animations.
- Playing a card does not resolve its effect. `base_damage`, `base_block`, `repetitions` and `granted_status_effects` are data only, and you apply them yourself with `CombatStats` and `StatusEffectComponent`.
- Shop purchases and story choices are only events on the widgets. Nothing in the package acts on them.