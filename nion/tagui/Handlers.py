"""
Handler registry.

Tags cannot hold functions, so each handler is registered under a stable name. Elements store the name; the
dispatcher looks the function back up when an event arrives.
"""
from __future__ import annotations

# standard libraries
import logging
import typing

# third party libraries
# None

# local libraries
from nion.tagui import Host


class HandlerRegistrationError(Exception):
    pass


class DuplicateNameError(HandlerRegistrationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Attempt to register handler function with duplicate name \"{name}\".")
        self.name = name


class DuplicateFunctionError(HandlerRegistrationError):
    def __init__(self, name: str, existing_name: str) -> None:
        super().__init__(f"Attempt to register duplicate handler function \"{name}\" (already registered as \"{existing_name}\").")
        self.name = name
        self.existing_name = existing_name


class UnregisteredHandlerError(LookupError):
    def __init__(self, handler: typing.Any) -> None:
        super().__init__(f"Handler {handler!r} has not been registered.")
        self.handler = handler


def log_exceptions(event: Host.GuiEvent, handler: Host.HandlerFn) -> None:
    """A registration wrapper which logs handler exceptions rather than letting them reach the host."""
    try:
        handler(event)
    except Exception as e:
        logging.exception("Handler Error: %s", e)


HandlerKey = typing.Tuple[int, typing.Optional[int]]


def make_handler_key(handler: typing.Callable[..., typing.Any]) -> HandlerKey:
    """Return a key identifying the handler by identity.

    A bound method is identified by its object and function, since each attribute access makes a new method object.
    """
    handler_self = getattr(handler, "__self__", None)
    handler_func = getattr(handler, "__func__", None)
    if handler_self is not None and handler_func is not None:
        return id(handler_self), id(handler_func)
    return id(handler), None


class HandlerRegistry:
    """Bidirectional map between handler names and handler functions.

    The registry is filled during start up and only read afterwards. A name may only be registered once and a function
    may only be registered under one name.

    Functions are looked up by identity, so callables need not be hashable and distinct callables that compare equal
    get distinct names. Bound methods of the same object and function resolve to the same name.
    """

    def __init__(self) -> None:
        self.__handler_fns: typing.Dict[str, Host.HandlerFn] = dict()
        # the handler is kept in the value so the ids in the key stay valid
        self.__handler_names: typing.Dict[HandlerKey, typing.Tuple[typing.Callable[..., typing.Any], str]] = dict()

    def __contains__(self, name: object) -> bool:
        return name in self.__handler_fns

    def __len__(self) -> int:
        return len(self.__handler_fns)

    @property
    def names(self) -> typing.Tuple[str, ...]:
        return tuple(sorted(self.__handler_fns.keys()))

    def register(self, handlers: typing.Mapping[str, Host.HandlerFn], wrapper: typing.Optional[Host.HandlerWrapperFn] = None) -> None:
        """Register handlers by name.

        If `wrapper` is given, dispatch calls `wrapper(event, handler)` instead of `handler(event)` for each handler in
        this batch.

        Raises DuplicateNameError or DuplicateFunctionError; in that case nothing in the batch is registered.
        """
        batch: typing.Dict[HandlerKey, typing.Tuple[Host.HandlerFn, str]] = dict()
        for name, handler in handlers.items():
            if not callable(handler):
                logging.debug("Skipping non-callable handler entry %s", name)
                continue
            if name in self.__handler_fns:
                raise DuplicateNameError(name)
            handler_key = make_handler_key(handler)
            existing = self.__handler_names.get(handler_key, batch.get(handler_key))
            if existing is not None:
                raise DuplicateFunctionError(name, existing[1])
            batch[handler_key] = (handler, name)
        for handler_key, (handler, name) in batch.items():
            self.__handler_names[handler_key] = (handler, name)
            self.__handler_fns[name] = self.__make_handler_fn(handler, wrapper)
            logging.debug("Registered handler %s", name)

    def name_of(self, handler: typing.Callable[..., typing.Any]) -> typing.Optional[str]:
        existing = self.__handler_names.get(make_handler_key(handler))
        return existing[1] if existing is not None else None

    def function_of(self, name: str) -> typing.Optional[Host.HandlerFn]:
        return self.__handler_fns.get(name)

    def resolve_name(self, handler: typing.Union[str, Host.HandlerFn]) -> str:
        """Return the persisted name for a handler function or handler name."""
        if isinstance(handler, str):
            return handler
        name = self.name_of(handler)
        if name is None:
            raise UnregisteredHandlerError(handler)
        return name

    @staticmethod
    def __make_handler_fn(handler: Host.HandlerFn, wrapper: typing.Optional[Host.HandlerWrapperFn]) -> Host.HandlerFn:
        if wrapper is None:
            return handler

        def wrapped_handler(event: Host.GuiEvent) -> typing.Any:
            return wrapper(event, handler)

        return wrapped_handler
