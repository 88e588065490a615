"""
Helpers for reading and writing persisted element tags.

Hosts hand out tags as a snapshot and only notice a change when the whole map is assigned back, so every write here is
a read-modify-write of the complete map.
"""
from __future__ import annotations

# standard libraries
import typing

# third party libraries
# None

# local libraries
from nion.tagui import Host

DEFAULT_NAMESPACE = "tagui"

HandlerTags = typing.Union[str, typing.Dict[str, str]]


def make_reserved_key(namespace: str = DEFAULT_NAMESPACE) -> str:
    """Return the tags key reserved for handler bindings of the given namespace."""
    return f"__{namespace}__/handlers"


def set_tags(element: Host.ElementLike, tags: typing.Mapping[str, typing.Any]) -> None:
    """Merge `tags` into the tags of `element`, leaving other keys untouched."""
    element_tags = element.tags
    for k, v in tags.items():
        element_tags[k] = v
    element.tags = element_tags


def get_handler_tags(element: Host.ElementLike, reserved_key: str) -> typing.Optional[HandlerTags]:
    return element.tags.get(reserved_key)
