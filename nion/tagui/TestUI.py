"""
An in-memory host for tests and examples.

Behaves like a retained-mode gui host: elements are created from property bags, tags are captured by value and must be
json compatible, tags are handed out as snapshots and only replaced by assigning the whole map, and the whole tree can
be written out and read back to simulate a restart.
"""
from __future__ import annotations

# standard libraries
import copy
import json
import typing

# third party libraries
# None

# local libraries
from nion.tagui import Host
from nion.utils import Event
from nion.utils import Geometry
from nion.utils import Observable

ELEMENT_TYPES = {
    "button", "sprite-button", "checkbox", "flow", "frame", "label", "line", "progressbar", "table", "textfield",
    "radiobutton", "sprite", "scroll-pane", "drop-down", "list-box", "text-box", "slider", "empty-widget",
    "tabbed-pane", "tab", "switch",
}

ELEMENT_PROPERTY_DEFAULTS: typing.Mapping[str, typing.Any] = {
    "caption": None,
    "tooltip": None,
    "enabled": True,
    "visible": True,
    "ignored_by_interaction": False,
    "direction": None,
    "text": None,
    "state": None,
    "value": None,
    "items": None,
    "selected_index": None,
    "sprite": None,
    "column_count": None,
}


def copy_tags(tags: typing.Optional[typing.Mapping[str, typing.Any]]) -> typing.Dict[str, typing.Any]:
    # a json round trip both copies and rejects anything the host could not persist, functions in particular.
    return typing.cast(typing.Dict[str, typing.Any], json.loads(json.dumps(dict(tags or dict()))))


class Style:

    def __init__(self, name: typing.Optional[str] = None) -> None:
        self.name = name

    def write_dict(self) -> typing.Dict[str, typing.Any]:
        return copy.deepcopy(vars(self))

    def read_dict(self, properties: typing.Mapping[str, typing.Any]) -> None:
        for k, v in properties.items():
            setattr(self, k, v)


class Element(Observable.Observable):

    def __init__(self, ui: UserInterface, parent: typing.Optional[Element], properties: typing.Mapping[str, typing.Any]) -> None:
        super().__init__()
        element_type = properties.get("type")
        if element_type not in ELEMENT_TYPES:
            raise ValueError(f"Unknown element type {element_type}")
        unknown_keys = set(properties.keys()) - set(ELEMENT_PROPERTY_DEFAULTS.keys()) - {"type", "name", "tags", "style"}
        if unknown_keys:
            raise ValueError(f"Unknown element properties {sorted(unknown_keys)}")
        self.__ui = ui
        self.__tags = copy_tags(properties.get("tags"))
        self.__drag_target: typing.Optional[Element] = None
        self.__location: typing.Optional[Geometry.IntPoint] = None
        self.type = typing.cast(str, element_type)
        self.name: typing.Optional[str] = properties.get("name")
        self.parent = parent
        self.children: typing.List[Element] = list()
        self.tabs: typing.List[typing.Tuple[Element, Element]] = list()
        self.style = Style(properties.get("style"))
        for k, default_value in ELEMENT_PROPERTY_DEFAULTS.items():
            setattr(self, k, copy.deepcopy(properties.get(k, default_value)))

    def __repr__(self) -> str:
        return f"<{self.type} {self.name}>"

    @property
    def ui(self) -> UserInterface:
        return self.__ui

    @property
    def index(self) -> int:
        return self.parent.children.index(self) if self.parent else 0

    @property
    def tags(self) -> typing.Dict[str, typing.Any]:
        return copy.deepcopy(self.__tags)

    @tags.setter
    def tags(self, value: typing.Mapping[str, typing.Any]) -> None:
        self.__tags = copy_tags(value)
        self.notify_property_changed("tags")

    @property
    def drag_target(self) -> typing.Optional[Element]:
        return self.__drag_target

    @drag_target.setter
    def drag_target(self, value: typing.Optional[Element]) -> None:
        if value is not None and (not isinstance(value, Element) or value.ui is not self.__ui):
            raise ValueError("Drag target must be an element of the same user interface.")
        self.__drag_target = value

    @property
    def location(self) -> typing.Optional[Geometry.IntPoint]:
        return self.__location

    @location.setter
    def location(self, value: typing.Optional[typing.Union[Geometry.IntPoint, typing.Tuple[int, int]]]) -> None:
        if value is not None and not isinstance(value, Geometry.IntPoint):
            value = Geometry.IntPoint(y=value[0], x=value[1])
        self.__location = value
        self.notify_property_changed("location")

    def add(self, properties: typing.Mapping[str, typing.Any]) -> Element:
        element = Element(self.__ui, self, properties)
        self.children.append(element)
        return element

    def add_tab(self, tab: Host.ElementLike, content: Host.ElementLike) -> None:
        if self.type != "tabbed-pane":
            raise ValueError("Tabs can only be added to a tabbed-pane.")
        if not isinstance(tab, Element) or tab.type != "tab":
            raise ValueError("Tab must be an element of type tab.")
        if tab not in self.children or content not in self.children:
            raise ValueError("Tab and content must be children of the tabbed-pane.")
        self.tabs.append((tab, typing.cast(Element, content)))

    def write_dict(self) -> typing.Dict[str, typing.Any]:
        d: typing.Dict[str, typing.Any] = {"type": self.type}
        if self.name:
            d["name"] = self.name
        properties = dict()
        for k, default_value in ELEMENT_PROPERTY_DEFAULTS.items():
            value = getattr(self, k)
            if value != default_value:
                properties[k] = copy.deepcopy(value)
        if properties:
            d["properties"] = properties
        if self.__tags:
            d["tags"] = copy.deepcopy(self.__tags)
        d["style"] = self.style.write_dict()
        if self.__location is not None:
            d["location"] = [self.__location.y, self.__location.x]
        if self.children:
            d["children"] = [child.write_dict() for child in self.children]
        if self.tabs:
            d["tabs"] = [[tab.index, content.index] for tab, content in self.tabs]
        return d

    def read_dict(self, d: typing.Mapping[str, typing.Any]) -> None:
        self.style.read_dict(d.get("style", dict()))
        location = d.get("location")
        if location is not None:
            self.location = (location[0], location[1])
        for child_d in d.get("children", list()):
            properties = dict(child_d.get("properties", dict()))
            properties["type"] = child_d["type"]
            properties["name"] = child_d.get("name")
            properties["tags"] = child_d.get("tags")
            self.add(properties).read_dict(child_d)
        for tab_index, content_index in d.get("tabs", list()):
            self.add_tab(self.children[tab_index], self.children[content_index])


class UserInterface:
    """An in-memory host with a single root flow.

    Event subscriptions are `nion.utils.Event` listeners; callers must hold on to the returned listener for the
    subscription to stay active.
    """

    def __init__(self) -> None:
        self.root = Element(self, None, {"type": "flow", "name": "root"})
        self.tick = 0
        self.__events: typing.Dict[Host.EventType, Event.Event] = {event_type: Event.Event() for event_type in Host.EventType}

    def on_event(self, event_type: Host.EventType, fn: typing.Callable[[Host.GuiEvent], typing.Any]) -> Event.EventListener:
        return self.__events[event_type].listen(fn)

    def fire_event(self, event_type: Host.EventType, element: typing.Optional[Element] = None, **data: typing.Any) -> Host.GuiEvent:
        event = Host.GuiEvent(event_type, element, self.tick, dict(data))
        self.__events[event_type].fire(event)
        return event

    def find_element(self, name: str) -> typing.Optional[Element]:
        """Return the first element with the given name, searching depth first from the root."""
        elements = [self.root]
        while elements:
            element = elements.pop(0)
            if element.name == name:
                return element
            elements[0:0] = element.children
        return None

    def write_dict(self) -> typing.Dict[str, typing.Any]:
        return {"tick": self.tick, "root": self.root.write_dict()}

    def write_json(self) -> str:
        return json.dumps(self.write_dict())

    @classmethod
    def from_dict(cls, d: typing.Mapping[str, typing.Any]) -> UserInterface:
        ui = cls()
        ui.tick = d.get("tick", 0)
        root_d = d.get("root", dict())
        ui.root.tags = root_d.get("tags", dict())
        ui.root.read_dict(root_d)
        return ui

    @classmethod
    def from_json(cls, s: str) -> UserInterface:
        return cls.from_dict(json.loads(s))
