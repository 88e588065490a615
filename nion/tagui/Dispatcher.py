"""
The single event handler installed in the host for gui events.
"""
from __future__ import annotations

# standard libraries
import logging
import typing

# third party libraries
# None

# local libraries
from nion.tagui import Handlers
from nion.tagui import Host
from nion.tagui import Tags


class EventDispatcher:
    """Route gui events to registered handlers using the binding stored in the source element's tags.

    An element restored from persisted state may name a handler that is no longer registered. That is expected and the
    event is reported as not handled.
    """

    def __init__(self, registry: Handlers.HandlerRegistry, reserved_key: typing.Optional[str] = None) -> None:
        self.__registry = registry
        self.__reserved_key = reserved_key or Tags.make_reserved_key()
        self.__listeners: typing.Dict[Host.HostLike, typing.List[Host.EventListenerLike]] = dict()

    @property
    def reserved_key(self) -> str:
        return self.__reserved_key

    def dispatch(self, event: Host.GuiEvent) -> bool:
        """Call the handler bound to the event's element. Return whether a handler was called."""
        element = event.element
        if element is None:
            return False
        handler_tags = Tags.get_handler_tags(element, self.__reserved_key)
        if not handler_tags:
            return False
        if isinstance(handler_tags, typing.Mapping):
            handler_name = handler_tags.get(event.name.name)
            if not handler_name:
                return False
        else:
            handler_name = handler_tags
        if not isinstance(handler_name, str):
            logging.debug("Invalid handler binding %s", handler_name)
            return False
        handler = self.__registry.function_of(handler_name)
        if handler is None:
            logging.debug("No handler registered for %s", handler_name)
            return False
        handler(event)
        return True

    def is_installed(self, ui: Host.HostLike) -> bool:
        return ui in self.__listeners

    def install(self, ui: Host.HostLike) -> None:
        """Subscribe to every gui event type of the host. Installing more than once has no effect."""
        if self.is_installed(ui):
            return
        self.__listeners[ui] = [ui.on_event(event_type, self.dispatch) for event_type in Host.EventType.gui_events()]
        logging.debug("Installed event dispatcher for %s", self.__reserved_key)

    def uninstall(self, ui: Host.HostLike) -> None:
        for listener in self.__listeners.pop(ui, list()):
            listener.close()
