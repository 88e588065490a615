"""
A gui library instance for one namespace.

Typical use::

    gui = Library.GuiLibrary("my_mod")
    gui.add_handlers({"close_clicked": close_clicked}, wrapper=Handlers.log_exceptions)
    gui.install(ui)
    elems, frame = gui.add(ui.root, {"args": {"type": "frame", "name": "main"}, "children": [...]})
"""
from __future__ import annotations

# standard libraries
import typing

# third party libraries
# None

# local libraries
from nion.tagui import Builder
from nion.tagui import Declarative
from nion.tagui import Dispatcher
from nion.tagui import Handlers
from nion.tagui import Host
from nion.tagui import Tags


class GuiLibrary:

    def __init__(self, namespace: str = Tags.DEFAULT_NAMESPACE, *, strict_names: bool = False) -> None:
        self.namespace = namespace
        self.strict_names = strict_names
        self.reserved_key = Tags.make_reserved_key(namespace)
        self.registry = Handlers.HandlerRegistry()
        self.dispatcher = Dispatcher.EventDispatcher(self.registry, self.reserved_key)

    def add(self, parent: Host.ElementLike, defs: Builder.Definitions,
            elems: typing.Optional[Builder.ElementTable] = None) -> typing.Tuple[Builder.ElementTable, typing.Optional[Host.ElementLike]]:
        return Builder.add(parent, defs, elems, registry=self.registry, reserved_key=self.reserved_key,
                           strict_names=self.strict_names)

    def add_handlers(self, handlers: typing.Mapping[str, Host.HandlerFn],
                     wrapper: typing.Optional[Host.HandlerWrapperFn] = None) -> None:
        self.registry.register(handlers, wrapper)

    def set_tags(self, element: Host.ElementLike, tags: typing.Mapping[str, typing.Any]) -> None:
        Tags.set_tags(element, tags)

    def set_handlers(self, element: Host.ElementLike, handlers: typing.Optional[Declarative.HandlersDescription]) -> None:
        """Replace the handler binding of an existing element. Passing None removes the binding."""
        if handlers is None:
            element_tags = element.tags
            element_tags.pop(self.reserved_key, None)
            element.tags = element_tags
        else:
            Tags.set_tags(element, {self.reserved_key: Builder.make_handler_tags({"handlers": handlers}, self.registry)})

    def install(self, ui: Host.HostLike) -> None:
        self.dispatcher.install(ui)

    def uninstall(self, ui: Host.HostLike) -> None:
        self.dispatcher.uninstall(ui)

    def dispatch(self, event: Host.GuiEvent) -> bool:
        return self.dispatcher.dispatch(event)
