# reconui/events.py

"""
Inbound interactions and the event objects handed to handlers.

An interaction is what the client sends after the user touched a component:
the component id, the event type and, for components that synchronize their
value, the value itself. The transport turns a request into an `Interaction`;
the session turns an `Interaction` into an `Event` and runs it through the
target component.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional, Sequence

from .reconciler import DirtySet

if TYPE_CHECKING:
    from .base import Component

logger = logging.getLogger(__name__)

# Well-known request parameter names.
PARAM_COMP_ID = "cid"
PARAM_EVENT_TYPE = "etype"
PARAM_COMP_VALUE = "cval"


class EventType(Enum):
    """Event types a component can handle or synchronize on. Values are the wire codes."""
    CLICK = 0
    DBL_CLICK = 1
    MOUSE_DOWN = 2
    MOUSE_MOVE = 3
    MOUSE_OVER = 4
    MOUSE_OUT = 5
    MOUSE_UP = 6
    KEY_DOWN = 7
    KEY_UP = 8
    KEY_PRESS = 9
    BLUR = 10
    CHANGE = 11
    FOCUS = 12

    @property
    def attr_name(self) -> str:
        """The HTML event handler attribute, e.g. `onclick`."""
        return _ATTR_NAMES[self]


_ATTR_NAMES = {
    EventType.CLICK: "onclick",
    EventType.DBL_CLICK: "ondblclick",
    EventType.MOUSE_DOWN: "onmousedown",
    EventType.MOUSE_MOVE: "onmousemove",
    EventType.MOUSE_OVER: "onmouseover",
    EventType.MOUSE_OUT: "onmouseout",
    EventType.MOUSE_UP: "onmouseup",
    EventType.KEY_DOWN: "onkeydown",
    EventType.KEY_UP: "onkeyup",
    EventType.KEY_PRESS: "onkeypress",
    EventType.BLUR: "onblur",
    EventType.CHANGE: "onchange",
    EventType.FOCUS: "onfocus",
}

_TRUE_STRINGS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_STRINGS = {"0", "f", "F", "FALSE", "false", "False"}


def parse_bool(text: str) -> Optional[bool]:
    """
    Parses a boolean the way the client reports it.

    Returns None for anything that is not one of the accepted spellings, so
    callers can leave their state untouched instead of failing.
    """
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    return None


class InteractionError(ValueError):
    """Raised when a raw request cannot be turned into an Interaction."""


@dataclass
class Interaction:
    """
    One inbound interaction.

    :param component_id: Id of the component the event originated from.
    :param event_type: The type of the event.
    :param form: Multi-value request parameters. The component value, if the
        client sent one, is under `PARAM_COMP_VALUE`.
    """
    component_id: int
    event_type: EventType
    form: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def create(cls, component_id: int, event_type: EventType, value: Optional[str] = None) -> "Interaction":
        """Shorthand for building an interaction with an optional single value."""
        form = {} if value is None else {PARAM_COMP_VALUE: [value]}
        return cls(component_id, event_type, form)

    @classmethod
    def from_form(cls, form: Mapping[str, Sequence[str]]) -> "Interaction":
        """
        Parses raw request parameters.

        Single values are accepted in place of lists, so both a parsed query
        string and a flat JSON object work.
        """
        normalized: Dict[str, List[str]] = {}
        for name, values in form.items():
            if isinstance(values, (list, tuple)):
                normalized[name] = [str(v) for v in values]
            else:
                normalized[name] = [str(values)]

        def first(name: str) -> str:
            values = normalized.get(name)
            if not values:
                raise InteractionError(f"missing parameter '{name}'")
            return values[0]

        raw_id = first(PARAM_COMP_ID)
        try:
            component_id = int(raw_id)
        except ValueError as e:
            raise InteractionError(f"invalid component id: {raw_id!r}") from e

        raw_type = first(PARAM_EVENT_TYPE)
        try:
            event_type = EventType(int(raw_type))
        except ValueError as e:
            raise InteractionError(f"invalid event type: {raw_type!r}") from e

        return cls(component_id, event_type, normalized)

    def has_value(self) -> bool:
        """True if the value parameter is present, even if it is the empty string."""
        return len(self.form.get(PARAM_COMP_VALUE, ())) > 0

    def value(self) -> str:
        """The first value of the value parameter, or "" if absent."""
        values = self.form.get(PARAM_COMP_VALUE)
        return values[0] if values else ""


class Event:
    """
    The event object passed to handlers.

    Handlers mark whatever they changed as dirty; the session re-renders the
    dirty components once every handler has returned.

    :param type: The event type.
    :param src: The component the event originated from.
    :param interaction: The inbound interaction, if the event came from a client.
    :param dirty: The dirty set of the running dispatch.
    """

    def __init__(self, type: EventType, src: "Component",
                 interaction: Optional[Interaction] = None,
                 dirty: Optional[DirtySet] = None):
        self.type = type
        self.src = src
        self.interaction = interaction if interaction is not None else Interaction(src.id, type)
        self.dirty = dirty if dirty is not None else DirtySet()

    def mark_dirty(self, *components: "Component") -> None:
        """Marks components as needing a re-render. Marking twice is harmless."""
        self.dirty.add(*components)

    def __repr__(self):
        return f"Event(type={self.type.name}, src={self.src!r})"
