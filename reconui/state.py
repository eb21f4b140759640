# reconui/state.py

"""
Components carrying a boolean state: check boxes, radio buttons and switch buttons.

Radio buttons coordinate through a `RadioGroup`: at most one member of a group
is selected at any time, and selecting a member deselects the previous one.
The switch button is a composite of two buttons whose styling always follows
the switch's own state.
"""

import logging
from typing import Optional, Protocol, runtime_checkable

from .base import Component, next_component_id
from .events import Event, EventType, parse_bool
from .widgets import Button
from .writer import Writer

logger = logging.getLogger(__name__)


@runtime_checkable
class Stateful(Protocol):
    """Anything with a boolean state that can be read and set."""

    @property
    def state(self) -> bool: ...

    def set_state(self, state: bool) -> None: ...


class RadioGroup:
    """
    Groups radio buttons so that only one of them is selected.

    The group does not own its buttons; buttons refer to the group, the group
    only remembers the current and the previous selection.

    :param name: The group name, also used as the `name` of the rendered inputs.
    """

    def __init__(self, name: str):
        self._name = name
        self._selected: Optional["RadioButton"] = None
        self._prev_selected: Optional["RadioButton"] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def selected(self) -> Optional["RadioButton"]:
        return self._selected

    @property
    def prev_selected(self) -> Optional["RadioButton"]:
        """The button that was selected before the current selection."""
        return self._prev_selected

    def _set_selected(self, selected: Optional["RadioButton"]) -> None:
        self._prev_selected = self._selected
        self._selected = selected

    def __repr__(self):
        return f"RadioGroup({self._name!r}, selected={self._selected!r})"


class StateButton(Button):
    """
    A button with a boolean state, rendered as an input with a label.

    The client reports the new `checked` value on click, so the value is
    synchronized on EventType.CLICK.

    :param text: Label text.
    :param input_type: "checkbox" or "radio".
    :param group: The radio group of the button, if any.
    """

    def __init__(self, text: str, input_type: str, group: Optional[RadioGroup] = None):
        super().__init__(text, "this.checked")
        self.style.remove_class("rcu-Button")
        self._state = False
        self._input_type = input_type
        self._group = group
        # The input tag needs its own id so the label can point at it.
        self._input_id = next_component_id()
        self.add_sync_on(EventType.CLICK)

    @property
    def state(self) -> bool:
        return self._state

    @property
    def group(self) -> Optional[RadioGroup]:
        return self._group

    def set_state(self, state: bool) -> None:
        """
        Sets the state. For grouped buttons the group is kept consistent:
        selecting this button deselects the group's current selection.
        """
        if self._state == state:
            return

        group = self._group
        if group is not None:
            selected = group.selected
            if selected is None:
                if state:
                    group._set_selected(self)
            elif state:
                if selected is not self:
                    selected._set_state_prop(False)
                    group._set_selected(self)
            else:
                # Our state goes from True to False, so we were the selection.
                group._set_selected(None)

        logger.debug("%r state: %s -> %s", self, self._state, state)
        self._state = state

    def _set_state_prop(self, state: bool) -> None:
        """Sets the state without touching the group. Only the group protocol uses this."""
        self._state = state

    def preprocess_event(self, event: Event) -> None:
        value = event.interaction.value()
        if not value:
            return
        state = parse_bool(value)
        if state is None:
            logger.debug("Ignoring non-boolean value %r for %r", value, self)
            return
        # set_state, not the attribute, so radio groups are managed.
        self.set_state(state)

    def render(self, w: Writer) -> None:
        w.write("<span")
        self._render_attrs_and_style(w)
        w.write(">")

        w.write('<input type="', self._input_type, '"')
        w.write_attr("id", self._input_id)
        if self._group is not None:
            w.write_attr("name", self._group.name)
        if self._state:
            w.write(' checked="checked"')
        self._render_enabled(w)
        self._render_event_handlers(w)
        w.write(">")

        w.write("<label")
        w.write_attr("for", self._input_id)
        w.write(">")
        w.write_escaped(self.text)
        w.write("</label></span>")


class CheckBox(StateButton):
    """
    A check box: a button with a selected and a deselected state.

    Suggested event type to handle changes: EventType.CLICK

    Default style class: "rcu-CheckBox"
    """

    def __init__(self, text: str = ""):
        super().__init__(text, "checkbox")
        self.style.add_class("rcu-CheckBox")


class RadioButton(StateButton):
    """
    A radio button. Within its group only one radio button can be selected.

    Suggested event type to handle changes: EventType.CLICK

    Default style class: "rcu-RadioButton"
    """

    def __init__(self, text: str, group: RadioGroup):
        super().__init__(text, "radio", group)
        self.style.add_class("rcu-RadioButton")


class SwitchButton(Component):
    """
    A button that can be switched ON and OFF.

    It is made of two buttons, one per side. They are only a visual surface:
    the state is the switch's own, and the sides' style classes are derived
    from it on every change. The client reports the intended new state (from
    which side was clicked), so the server only has to parse and apply it.

    Suggested event type to handle changes: EventType.CLICK

    Default style classes: "rcu-SwitchButton", "rcu-SwitchButton-On-Active",
    "rcu-SwitchButton-On-Inactive", "rcu-SwitchButton-Off-Active",
    "rcu-SwitchButton-Off-Inactive"

    :param on_text: Text of the ON side.
    :param off_text: Text of the OFF side.
    """

    ON_ACTIVE = "rcu-SwitchButton-On-Active"
    ON_INACTIVE = "rcu-SwitchButton-On-Inactive"
    OFF_ACTIVE = "rcu-SwitchButton-Off-Active"
    OFF_INACTIVE = "rcu-SwitchButton-Off-Inactive"

    def __init__(self, on_text: str = "ON", off_text: str = "OFF"):
        self._on_button = Button(on_text)
        self._off_button = Button(off_text)
        super().__init__(
            f"getAndUpdateSwitchBtnValue(event,'{self._on_button.id}','{self._off_button.id}')"
        )
        self._on_button._set_parent(self)
        self._off_button._set_parent(self)
        self._state = False
        self._apply_state_style()

        self.add_sync_on(EventType.CLICK)
        self.set_attr("cellspacing", "0")
        self.set_attr("cellpadding", "0")
        self.style.add_class("rcu-SwitchButton")

    @property
    def on_button(self) -> Button:
        return self._on_button

    @property
    def off_button(self) -> Button:
        return self._off_button

    @property
    def enabled(self) -> bool:
        return self._on_button.enabled

    @enabled.setter
    def enabled(self, enabled: bool):
        self._on_button.enabled = enabled
        self._off_button.enabled = enabled

    @property
    def state(self) -> bool:
        return self._state

    def set_state(self, state: bool) -> None:
        if self._state == state:
            return
        logger.debug("%r state: %s -> %s", self, self._state, state)
        self._state = state
        self._apply_state_style()

    def _apply_state_style(self) -> None:
        if self._state:
            self._on_button.style.set_class(self.ON_ACTIVE)
            self._off_button.style.set_class(self.OFF_INACTIVE)
        else:
            self._on_button.style.set_class(self.ON_INACTIVE)
            self._off_button.style.set_class(self.OFF_ACTIVE)

    @property
    def on_text(self) -> str:
        return self._on_button.text

    @property
    def off_text(self) -> str:
        return self._off_button.text

    def set_on_off(self, on_text: str, off_text: str) -> None:
        self._on_button.text = on_text
        self._off_button.text = off_text

    def preprocess_event(self, event: Event) -> None:
        value = event.interaction.value()
        if not value:
            return
        state = parse_bool(value)
        if state is None:
            logger.debug("Ignoring non-boolean value %r for %r", value, self)
            return
        # The client already restyled both sides, no need to mark the switch dirty.
        self.set_state(state)

    def render(self, w: Writer) -> None:
        w.write("<table")
        self._render_attrs_and_style(w)
        self._render_event_handlers(w)
        w.write("><tr>")
        w.write('<td width="50%">')
        self._on_button.render(w)
        w.write('</td><td width="50%">')
        self._off_button.render(w)
        w.write("</td></tr></table>")
