"""
Build live element trees from declarative definitions.

A leaf definition is a mapping with an `args` property bag and optional `children`, `elem_mods`, `style_mods`,
`drag_target` and `handlers` entries. Children may instead be given positionally under the integer keys 0, 1, 2...
A tab-pair definition is a mapping with `tab` and `content` definitions. A list or tuple of definitions builds siblings.

Handler functions are never written to tags. The builder stores their registered names under the reserved key so
that the binding survives the host persisting the tags.
"""
from __future__ import annotations

# standard libraries
import pprint
import typing

# third party libraries
# None

# local libraries
from nion.tagui import Handlers
from nion.tagui import Host
from nion.tagui import Tags

Definition = typing.Mapping[typing.Any, typing.Any]
Definitions = typing.Union[Definition, typing.Sequence[Definition]]
ElementTable = typing.Dict[str, Host.ElementLike]


class DefinitionError(Exception):
    def __init__(self, message: str, definition: typing.Any) -> None:
        super().__init__(message + "\n" + pprint.pformat(definition, depth=2, sort_dicts=False))
        self.definition = definition


class ConflictingChildrenError(DefinitionError):
    pass


class ReservedKeyCollisionError(DefinitionError):
    pass


class UnresolvedDragTargetError(DefinitionError):
    pass


class InvalidDefinitionError(DefinitionError):
    pass


class DuplicateElementNameError(DefinitionError):
    pass


def add(parent: Host.ElementLike, defs: Definitions, elems: typing.Optional[ElementTable] = None, *,
        registry: Handlers.HandlerRegistry, reserved_key: typing.Optional[str] = None,
        strict_names: bool = False) -> typing.Tuple[ElementTable, typing.Optional[Host.ElementLike]]:
    """Add the elements described by `defs` to `parent`.

    Args:
        parent: the element to add to
        defs: one definition or a sequence of sibling definitions
        elems: the table to add named elements to; a new table is made if None

    Keyword Args:
        registry: the handler registry used to convert handler functions to names
        reserved_key: the tags key reserved for handler bindings
        strict_names: whether a repeated element name is an error rather than replacing the earlier entry

    Returns:
        the table of named elements and the single element added to `parent`, or None if `defs` described more than
        one definition.
    """
    elems = elems if elems is not None else dict()
    reserved_key = reserved_key or Tags.make_reserved_key()
    defs_list = to_list(defs)
    single = len(defs_list) == 1
    element: typing.Optional[Host.ElementLike] = None
    for d in defs_list:
        if not isinstance(d, typing.Mapping):
            raise InvalidDefinitionError("Invalid GUI element definition:", d)
        if "args" in d:
            new_element = add_element(parent, d, elems, registry, reserved_key, strict_names)
            element = new_element if single else None
        elif d.get("tab") is not None and d.get("content") is not None:
            add_tab_pair(parent, d, elems, registry, reserved_key, strict_names)
        else:
            raise InvalidDefinitionError("Invalid GUI element definition:", d)
    return elems, element


def to_list(defs: Definitions) -> typing.Sequence[Definition]:
    if isinstance(defs, typing.Mapping):
        return [defs]
    if isinstance(defs, (list, tuple)):
        return defs
    raise InvalidDefinitionError("Invalid GUI element definition:", defs)


def get_children(d: Definition) -> typing.Optional[Definitions]:
    positional_children: typing.List[Definition] = list()
    while len(positional_children) in d:
        positional_children.append(d[len(positional_children)])
    children = d.get("children")
    if positional_children:
        if children is not None:
            raise ConflictingChildrenError("Cannot define children positionally and in 'children' simultaneously.", d)
        return positional_children
    return children


def make_handler_tags(d: Definition, registry: Handlers.HandlerRegistry) -> Tags.HandlerTags:
    handlers = d["handlers"]
    if isinstance(handlers, typing.Mapping):
        handler_tags: typing.Dict[str, str] = dict()
        for event_key, handler in handlers.items():
            try:
                event_type = Host.EventType.from_key(event_key)
            except KeyError:
                raise InvalidDefinitionError(f"Unknown event type \"{event_key}\" in handlers.", d)
            handler_tags[event_type.name] = registry.resolve_name(handler)
        return handler_tags
    return registry.resolve_name(handlers)


def add_element(parent: Host.ElementLike, d: Definition, elems: ElementTable, registry: Handlers.HandlerRegistry,
                reserved_key: str, strict_names: bool) -> Host.ElementLike:
    args = d["args"]
    children = get_children(d)
    tags = args.get("tags")
    if tags and reserved_key in tags:
        raise ReservedKeyCollisionError(f"Tag index \"{reserved_key}\" is reserved for GUI library.", d)
    if d.get("handlers") is not None:
        # the host captures its own copy of the tags; the caller's args are never touched.
        element_tags = dict(tags or dict())
        element_tags[reserved_key] = make_handler_tags(d, registry)
        args = dict(args)
        args["tags"] = element_tags
    name = args.get("name")
    if strict_names and name and name in elems:
        raise DuplicateElementNameError(f"Element name \"{name}\" is already in use.", d)
    element = parent.add(args)
    if name:
        elems[name] = element
    for k, v in (d.get("elem_mods") or dict()).items():
        setattr(element, k, v)
    style_mods = d.get("style_mods")
    if style_mods:
        style = element.style
        for k, v in style_mods.items():
            setattr(style, k, v)
    drag_target_name = d.get("drag_target")
    if drag_target_name:
        drag_target = elems.get(drag_target_name)
        if drag_target is None:
            raise UnresolvedDragTargetError(f"Drag target \"{drag_target_name}\" does not exist.", d)
        element.drag_target = drag_target
    if children:
        add(element, children, elems, registry=registry, reserved_key=reserved_key, strict_names=strict_names)
    return element


def add_tab_pair(parent: Host.ElementLike, d: Definition, elems: ElementTable, registry: Handlers.HandlerRegistry,
                 reserved_key: str, strict_names: bool) -> None:
    _, tab = add(parent, d["tab"], elems, registry=registry, reserved_key=reserved_key, strict_names=strict_names)
    _, content = add(parent, d["content"], elems, registry=registry, reserved_key=reserved_key, strict_names=strict_names)
    if tab is None or content is None:
        raise InvalidDefinitionError("Tab and content must each define a single element.", d)
    parent.add_tab(tab, content)
