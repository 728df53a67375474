"""Engine-level building blocks: tags, events, data tables, actors and components."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")
C = TypeVar("C", bound="Component")


@dataclass(frozen=True)
class GameplayTag:
    """A hierarchical, dot-separated tag such as ``Status.Debuff.Bleed``."""

    name: str = ""

    def is_valid(self) -> bool:
        """Return True when the tag names something."""
        return bool(self.name)

    def matches_tag(self, other: GameplayTag) -> bool:
        """Return True if this tag equals ``other`` or is a child of it."""
        if not self.is_valid() or not other.is_valid():
            return False
        return self.name == other.name or self.name.startswith(other.name + ".")

    def __str__(self) -> str:
        return self.name


class Event:
    """A multicast event: handlers are called in the order they were added."""

    def __init__(self) -> None:
        self._handlers: list[Callable[..., Any]] = []

    def add(self, handler: Callable[..., Any]) -> None:
        """Bind a handler; binding the same handler twice has no effect."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def remove(self, handler: Callable[..., Any]) -> None:
        """Unbind a handler if it is bound."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def broadcast(self, *args: Any) -> None:
        """Call every bound handler with ``args``."""
        for handler in list(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, handler: object) -> bool:
        return handler in self._handlers


class DataTable(Generic[T]):
    """Named rows kept in insertion order, optionally restricted to one row type."""

    def __init__(self, row_type: type[T] | None = None) -> None:
        self.row_type = row_type
        self._rows: dict[str, T] = {}

    def add_row(self, name: str, row: T) -> None:
        """Add a row, replacing any row already stored under ``name``."""
        if self.row_type is not None and not isinstance(row, self.row_type):
            raise TypeError(
                f"row {name!r} is {type(row).__name__}, expected {self.row_type.__name__}"
            )
        self._rows[name] = row

    def find_row(self, name: str | None) -> T | None:
        """Return the row stored under ``name``, or None."""
        if name is None:
            return None
        return self._rows.get(name)

    def row_names(self) -> list[str]:
        """Return the row names in insertion order."""
        return list(self._rows)

    def rows(self) -> list[T]:
        """Return the rows in insertion order."""
        return list(self._rows.values())

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[T]:
        return iter(self._rows.values())


@dataclass(eq=False)
class EventRouter:
    """Global gameplay events shared by all systems of a match."""

    on_card_played: Event = field(default_factory=Event)
    on_damage_taken: Event = field(default_factory=Event)
    on_actor_died: Event = field(default_factory=Event)
    on_intent_selected: Event = field(default_factory=Event)


class Component:
    """A piece of behaviour attached to an actor."""

    owner: Actor | None = None
    has_begun_play: bool = False

    @property
    def router(self) -> EventRouter | None:
        """The event router of the owning actor's match, if any."""
        return self.owner.router if self.owner is not None else None

    def begin_play(self) -> None:
        """Hook called when play starts; marks the component as started."""
        self.has_begun_play = True


class Actor:
    """An object in the game world that owns components."""

    def __init__(self, name: str = "", router: EventRouter | None = None) -> None:
        self.name = name
        self.router = router
        self.components: list[Component] = []

    def add_component(self, component: C) -> C:
        """Attach ``component`` to this actor and return it."""
        component.owner = self
        self.components.append(component)
        return component

    def find_component(self, component_type: type[C]) -> C | None:
        """Return the first attached component of ``component_type``, or None."""
        return next(
            (c for c in self.components if isinstance(c, component_type)), None
        )