"""World-map nodes and the widgets opened when a node is activated."""

from __future__ import annotations

import copy
from typing import Any

from exodus.core import Actor, DataTable, Event, EventRouter
from exodus.save import RunState, SaveSubsystem
from exodus.world import (
    EncounterNodeData,
    NodeType,
    ShopData,
    StoryEventData,
)


class NodeActor(Actor):
    """A node on the world map with the encounter it holds."""

    def __init__(
        self,
        node_data: EncounterNodeData | None = None,
        name: str = "",
        router: EventRouter | None = None,
    ) -> None:
        super().__init__(name, router)
        self.node_data = node_data if node_data is not None else EncounterNodeData()
        self.neighbours: list[NodeActor] = []

    def get_neighbours(self) -> list[NodeActor]:
        """Return the nodes reachable from this one."""
        return list(self.neighbours)


class _Widget:
    def add_to_viewport(self, viewport: list[Any]) -> None:
        if self not in viewport:
            viewport.append(self)


class ShopWidget(_Widget):
    """Shows a shop's items and announces purchases."""

    def __init__(self) -> None:
        self.shop_data = ShopData()
        self.on_item_purchased = Event()

    def init_with_data(self, data: ShopData) -> None:
        """Show the shop described by ``data``."""
        self.shop_data = copy.deepcopy(data)


class StoryEventWidget(_Widget):
    """Presents a story event and announces the chosen option."""

    def __init__(self) -> None:
        self.event_data = StoryEventData()
        self.on_choice_selected = Event()

    def init_with_data(self, data: StoryEventData) -> None:
        """Present the story event described by ``data``."""
        self.event_data = copy.deepcopy(data)


class NodeMapWidget:
    """Shows the map nodes and reacts when the player activates one.

    ``viewport`` is the list of open widgets; without one no widget is opened.
    Without a ``save_subsystem`` visits are not recorded.
    """

    def __init__(
        self,
        shop_data_table: DataTable[ShopData] | None = None,
        story_event_table: DataTable[StoryEventData] | None = None,
        shop_widget_class: type[ShopWidget] | None = None,
        story_event_widget_class: type[StoryEventWidget] | None = None,
        save_subsystem: SaveSubsystem | None = None,
        viewport: list[Any] | None = None,
    ) -> None:
        self.shop_data_table = shop_data_table
        self.story_event_table = story_event_table
        self.shop_widget_class = shop_widget_class
        self.story_event_widget_class = story_event_widget_class
        self.save_subsystem = save_subsystem
        self.viewport = viewport
        self.map_nodes: list[NodeActor] = []
        self.on_node_selected = Event()

    def init_with_nodes(self, nodes: list[NodeActor]) -> None:
        """Set the nodes available on the map."""
        self.map_nodes = list(nodes)

    def _open_node_content(self, data: EncounterNodeData, viewport: list[Any]) -> None:
        if data.payload_id is None:
            return
        if data.node_type is NodeType.SHOP and self.shop_data_table is not None:
            shop = self.shop_data_table.find_row(data.payload_id)
            if shop is not None:
                shop_widget = (self.shop_widget_class or ShopWidget)()
                shop_widget.init_with_data(shop)
                shop_widget.add_to_viewport(viewport)
        elif data.node_type is NodeType.STORY and self.story_event_table is not None:
            story = self.story_event_table.find_row(data.payload_id)
            if story is not None:
                story_widget = (self.story_event_widget_class or StoryEventWidget)()
                story_widget.init_with_data(story)
                story_widget.add_to_viewport(viewport)

    def handle_node_activated(self, node: NodeActor | None) -> None:
        """Open the node's shop or story event and record the node as visited."""
        if node is None:
            return
        if self.viewport is not None:
            self._open_node_content(node.node_data, self.viewport)

        if self.save_subsystem is not None:
            state = self.save_subsystem.load_run_state()
            if state is None:
                state = RunState()
            node_id = node.node_data.node_id
            if node_id not in state.visited_node_ids:
                state.visited_node_ids.append(node_id)
            self.save_subsystem.save_run_state(state)