# reconui/base.py

import logging
import threading
import weakref
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Set

from .style import Style
from .writer import Writer

if TYPE_CHECKING:
    from .container import Container
    from .events import Event, EventType

logger = logging.getLogger(__name__)

EventHandler = Callable[["Event"], None]


class IDGenerator:
    """
    Hands out process-unique, monotonically increasing component ids.

    Ids are never reused, so an id seen in a request can only ever refer to
    the component it was issued for.
    """

    def __init__(self):
        self._count = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            self._count += 1
            return self._count


_id_generator = IDGenerator()


def next_component_id() -> int:
    return _id_generator.next_id()


class Component:
    """
    The base class of every node of the component tree.

    A component has an immutable id, HTML attributes, a style bag, enabled and
    visible flags, event handlers keyed by event type, and the set of event
    types on which the client has to send the component's value along.

    :param value_provider_js: Client-side expression that yields the component
        value when an event it synchronizes on fires (e.g. `this.checked`).
    """

    def __init__(self, value_provider_js: str = ""):
        self._id = next_component_id()
        self._parent_ref: Optional[weakref.ref] = None
        self._attrs: Dict[str, str] = {}
        self._style = Style()
        self._handlers: Dict["EventType", List[EventHandler]] = {}
        self._sync_on: Set["EventType"] = set()
        self.value_provider_js = value_provider_js
        self.enabled = True
        self.visible = True

    @property
    def id(self) -> int:
        return self._id

    @property
    def parent(self) -> Optional["Container"]:
        """The owning container, if any. A non-owning reference."""
        return self._parent_ref() if self._parent_ref is not None else None

    def _set_parent(self, parent: Optional["Container"]) -> None:
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    # --- Attributes and style ---

    @property
    def style(self) -> Style:
        return self._style

    def attr(self, name: str) -> str:
        """Returns the value of an HTML attribute, "" if not set."""
        return self._attrs.get(name, "")

    def set_attr(self, name: str, value: str) -> None:
        """Sets an HTML attribute. An empty value removes it."""
        if value:
            self._attrs[name] = value
        else:
            self._attrs.pop(name, None)

    def int_attr(self, name: str) -> int:
        """Returns an attribute parsed as int, -1 if missing or not a number."""
        try:
            return int(self._attrs.get(name, ""))
        except ValueError:
            return -1

    # --- Events ---

    def add_sync_on(self, *event_types: "EventType") -> None:
        """Makes the client send the component value along with events of these types."""
        self._sync_on.update(event_types)

    def remove_sync_on(self, *event_types: "EventType") -> None:
        self._sync_on.difference_update(event_types)

    def sync_on(self, event_type: "EventType") -> bool:
        return event_type in self._sync_on

    def add_event_handler(self, handler: EventHandler, *event_types: "EventType") -> None:
        """Registers a handler for each of the given event types."""
        for etype in event_types:
            handlers = self._handlers.setdefault(etype, [])
            if handler not in handlers:
                handlers.append(handler)

    def remove_event_handler(self, handler: EventHandler, event_type: "EventType") -> bool:
        handlers = self._handlers.get(event_type)
        if not handlers or handler not in handlers:
            return False
        handlers.remove(handler)
        if not handlers:
            del self._handlers[event_type]
        return True

    def handlers_count(self, event_type: "EventType") -> int:
        return len(self._handlers.get(event_type, ()))

    def preprocess_event(self, event: "Event") -> None:
        """
        Folds the value carried by an interaction into the component state.

        Called before the handlers run, so handlers see the updated state.
        Components without a client-side value have nothing to do here.
        """

    def dispatch_event(self, event: "Event") -> None:
        """Calls the handlers registered for the event's type, in registration order."""
        for handler in list(self._handlers.get(event.type, ())):
            handler(event)

    # --- Tree ---

    def find_by_id(self, id: int) -> Optional["Component"]:
        return self if self._id == id else None

    def renders_child(self, child: "Component") -> bool:
        """Whether the markup of an owned component is part of this component's render."""
        return True

    # --- Rendering ---

    def render(self, w: Writer) -> None:
        raise NotImplementedError(f"{self.__class__.__name__} must implement render()")

    def _render_attrs_and_style(self, w: Writer) -> None:
        w.write_attr("id", self._id)
        for name, value in self._attrs.items():
            w.write_attr(name, value)
        self._style.render(w, hidden=not self.visible)

    def _render_enabled(self, w: Writer) -> None:
        if not self.enabled:
            w.write(' disabled="disabled"')

    def _render_event_handlers(self, w: Writer) -> None:
        """
        Writes one handler attribute per event type that is either handled or
        synchronized on. The client calls back with the event type code, the
        component id and, when synchronizing, the value.
        """
        event_types = set(self._handlers) | self._sync_on
        for etype in sorted(event_types, key=lambda e: e.value):
            if etype in self._sync_on and self.value_provider_js:
                script = f"se(event,{etype.value},{self._id},{self.value_provider_js})"
            else:
                script = f"se(event,{etype.value},{self._id})"
            w.write_attr(etype.attr_name, script)

    def __repr__(self):
        return f"{self.__class__.__name__}(id={self._id})"
