"""
The boundary between the library and the host GUI.

The host owns the element tree, persists per-element tags and fires events. The library only needs the small surface
described by the protocols below; `nion.tagui.TestUI` is an in-memory implementation of it.
"""
from __future__ import annotations

# standard libraries
import dataclasses
import enum
import typing

# third party libraries
# None

# local libraries
# None


class EventType(enum.Enum):
    # gui events; the dispatcher subscribes to every one of these.
    on_gui_checked_state_changed = 1
    on_gui_click = 2
    on_gui_closed = 3
    on_gui_confirmed = 4
    on_gui_elem_changed = 5
    on_gui_location_changed = 6
    on_gui_opened = 7
    on_gui_selected_tab_changed = 8
    on_gui_selection_state_changed = 9
    on_gui_switch_state_changed = 10
    on_gui_text_changed = 11
    on_gui_value_changed = 12
    # internal events; never routed through element tags.
    on_init = 100
    on_load = 101
    on_configuration_changed = 102
    on_tick = 103

    @property
    def is_gui_event(self) -> bool:
        return self.name.startswith("on_gui_")

    @classmethod
    def gui_events(cls) -> typing.Sequence[EventType]:
        return [event_type for event_type in cls if event_type.is_gui_event]

    @classmethod
    def from_key(cls, key: typing.Union[EventType, str]) -> EventType:
        """Return the event type for an event type or its name. Raise KeyError if the name is unknown."""
        if isinstance(key, EventType):
            return key
        return cls[key]


@dataclasses.dataclass
class GuiEvent:
    name: EventType
    element: typing.Optional[ElementLike] = None
    tick: int = 0
    data: typing.Dict[str, typing.Any] = dataclasses.field(default_factory=dict)


HandlerFn = typing.Callable[[GuiEvent], typing.Any]
HandlerWrapperFn = typing.Callable[[GuiEvent, HandlerFn], typing.Any]


class ElementLike(typing.Protocol):
    name: typing.Optional[str]
    drag_target: typing.Optional[ElementLike]

    @property
    def tags(self) -> typing.Dict[str, typing.Any]: ...

    @tags.setter
    def tags(self, value: typing.Mapping[str, typing.Any]) -> None: ...

    @property
    def style(self) -> typing.Any: ...

    def add(self, properties: typing.Mapping[str, typing.Any]) -> ElementLike: ...

    def add_tab(self, tab: ElementLike, content: ElementLike) -> None: ...


class EventListenerLike(typing.Protocol):
    def close(self) -> None: ...


class HostLike(typing.Protocol):
    def on_event(self, event_type: EventType, fn: typing.Callable[[GuiEvent], typing.Any]) -> EventListenerLike: ...
