"""
Helpers for writing element definitions.
"""
from __future__ import annotations

# standard libraries
import typing

# third party libraries
# None

# local libraries
from nion.tagui import Builder
from nion.tagui import Host

HandlersDescription = typing.Union[str, Host.HandlerFn, typing.Mapping[typing.Union[Host.EventType, str], typing.Union[str, Host.HandlerFn]]]


def create_element(args: typing.Mapping[str, typing.Any], *children: Builder.Definition,
                   children_list: typing.Optional[typing.Sequence[Builder.Definition]] = None,
                   handlers: typing.Optional[HandlersDescription] = None,
                   elem_mods: typing.Optional[typing.Mapping[str, typing.Any]] = None,
                   style_mods: typing.Optional[typing.Mapping[str, typing.Any]] = None,
                   drag_target: typing.Optional[str] = None) -> typing.Dict[typing.Any, typing.Any]:
    """Create a leaf definition.

    Children passed as positional arguments are stored under integer keys; `children_list` is stored as `children`.
    Passing both is reported by the builder, not here.

    Args:
        args: the property bag passed to the host when creating the element
        children: child definitions

    Keyword Args:
        children_list: child definitions, as an alternative to positional children
        handlers: a handler (function or registered name) or a mapping of event type to handler
        elem_mods: element properties to set after creation
        style_mods: style properties to set after creation
        drag_target: name of a previously built element to use as the drag target

    Returns:
        a leaf definition
    """
    d: typing.Dict[typing.Any, typing.Any] = {"args": args}
    for index, child in enumerate(children):
        d[index] = child
    if children_list is not None:
        d["children"] = children_list
    if handlers is not None:
        d["handlers"] = handlers
    if elem_mods:
        d["elem_mods"] = elem_mods
    if style_mods:
        d["style_mods"] = style_mods
    if drag_target:
        d["drag_target"] = drag_target
    return d


def create_tab_pair(tab: Builder.Definitions, content: Builder.Definitions) -> typing.Dict[str, typing.Any]:
    return {"tab": tab, "content": content}
