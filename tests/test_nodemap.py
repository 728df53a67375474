import pytest

from exodus.core import DataTable
from exodus.nodemap import NodeActor, NodeMapWidget, ShopWidget, StoryEventWidget
from exodus.save import RunState, SaveSubsystem
from exodus.world import (
    EncounterNodeData,
    NodeType,
    ShopData,
    ShopItemData,
    ShopItemType,
    StoryChoice,
    StoryEventData,
)


@pytest.fixture
def subsystem(tmp_path):
    return SaveSubsystem(tmp_path)


@pytest.fixture
def shop_table():
    table = DataTable(ShopData)
    table.add_row(
        "Shop1",
        ShopData("Shop1", [ShopItemData(ShopItemType.ARTIFACT, "Marbles", 30)]),
    )
    return table


@pytest.fixture
def story_table():
    table = DataTable(StoryEventData)
    table.add_row(
        "Story1",
        StoryEventData("Story1", "A stranger waits.", [StoryChoice("Talk", "Reward")]),
    )
    return table


def test_activation_saves_visited(subsystem):
    widget = NodeMapWidget(save_subsystem=subsystem)
    node = NodeActor(EncounterNodeData(node_id="TestNodeID", node_type=NodeType.COMBAT))

    widget.handle_node_activated(node)

    loaded = subsystem.load_run_state()
    assert loaded is not None
    assert "TestNodeID" in loaded.visited_node_ids

    subsystem.delete_save()
    assert subsystem.load_run_state() is None


def test_activation_adds_node_only_once(subsystem):
    widget = NodeMapWidget(save_subsystem=subsystem)
    node = NodeActor(EncounterNodeData(node_id="N1"))
    widget.handle_node_activated(node)
    widget.handle_node_activated(node)
    assert subsystem.load_run_state().visited_node_ids == ["N1"]


def test_activation_keeps_existing_state(subsystem):
    subsystem.save_run_state(RunState(gold=9, visited_node_ids=["N0"]))
    widget = NodeMapWidget(save_subsystem=subsystem)
    widget.handle_node_activated(NodeActor(EncounterNodeData(node_id="N1")))
    loaded = subsystem.load_run_state()
    assert loaded.gold == 9
    assert loaded.visited_node_ids == ["N0", "N1"]


def test_none_node_does_nothing(subsystem):
    viewport = []
    widget = NodeMapWidget(save_subsystem=subsystem, viewport=viewport)
    widget.handle_node_activated(None)
    assert subsystem.load_run_state() is None
    assert viewport == []


def test_shop_node_opens_shop_widget(subsystem, shop_table):
    viewport = []
    widget = NodeMapWidget(
        shop_data_table=shop_table, save_subsystem=subsystem, viewport=viewport
    )
    node = NodeActor(
        EncounterNodeData(node_id="N1", node_type=NodeType.SHOP, payload_id="Shop1")
    )
    widget.handle_node_activated(node)

    assert len(viewport) == 1
    opened = viewport[0]
    assert isinstance(opened, ShopWidget)
    assert opened.shop_data == shop_table.find_row("Shop1")
    assert subsystem.load_run_state().visited_node_ids == ["N1"]


def test_story_node_opens_story_widget(story_table):
    viewport = []
    widget = NodeMapWidget(story_event_table=story_table, viewport=viewport)
    node = NodeActor(
        EncounterNodeData(node_id="N2", node_type=NodeType.STORY, payload_id="Story1")
    )
    widget.handle_node_activated(node)

    assert len(viewport) == 1
    assert isinstance(viewport[0], StoryEventWidget)
    assert viewport[0].event_data.snippet_text == "A stranger waits."


def test_custom_widget_class_is_used(shop_table):
    class FancyShop(ShopWidget):
        pass

    viewport = []
    widget = NodeMapWidget(
        shop_data_table=shop_table, shop_widget_class=FancyShop, viewport=viewport
    )
    widget.handle_node_activated(
        NodeActor(EncounterNodeData(node_type=NodeType.SHOP, payload_id="Shop1"))
    )
    assert [type(w) for w in viewport] == [FancyShop]


@pytest.mark.parametrize(
    "node_data",
    [
        EncounterNodeData(node_type=NodeType.SHOP, payload_id=None),
        EncounterNodeData(node_type=NodeType.SHOP, payload_id="Missing"),
        EncounterNodeData(node_type=NodeType.COMBAT, payload_id="Shop1"),
        EncounterNodeData(node_type=NodeType.STORY, payload_id="Shop1"),
    ],
)
def test_no_widget_without_matching_row(shop_table, node_data):
    viewport = []
    widget = NodeMapWidget(shop_data_table=shop_table, viewport=viewport)
    widget.handle_node_activated(NodeActor(node_data))
    assert viewport == []


def test_no_viewport_still_records_visit(subsystem, shop_table):
    widget = NodeMapWidget(shop_data_table=shop_table, save_subsystem=subsystem)
    widget.handle_node_activated(
        NodeActor(
            EncounterNodeData(node_id="N3", node_type=NodeType.SHOP, payload_id="Shop1")
        )
    )
    assert subsystem.load_run_state().visited_node_ids == ["N3"]


def test_shop_widget_copies_data():
    data = ShopData("S", [ShopItemData(price=10)])
    shop = ShopWidget()
    shop.init_with_data(data)
    data.items.clear()
    assert len(shop.shop_data.items) == 1


def test_init_with_nodes_stores_copy():
    nodes = [NodeActor(name="a"), NodeActor(name="b")]
    widget = NodeMapWidget()
    widget.init_with_nodes(nodes)
    nodes.clear()
    assert [n.name for n in widget.map_nodes] == ["a", "b"]


def test_get_neighbours_returns_copy():
    a, b, c = NodeActor(name="a"), NodeActor(name="b"), NodeActor(name="c")
    a.neighbours = [b, c]
    neighbours = a.get_neighbours()
    neighbours.pop()
    assert a.get_neighbours() == [b, c]