# reconui/widgets.py

"""
Leaf widgets: labels, buttons and text boxes.

These are thin wrappers around a single HTML element. The stateful button
family (check boxes, radio buttons, switch buttons) lives in `state.py`, the
tab panel in `tabpanel.py`.
"""

import logging

from .base import Component
from .events import Event, EventType
from .writer import Writer

logger = logging.getLogger(__name__)


class Label(Component):
    """
    Displays a piece of text.

    Default style class: "rcu-Label"
    """

    def __init__(self, text: str = ""):
        super().__init__()
        self.text = text
        self.style.add_class("rcu-Label")

    def render(self, w: Writer) -> None:
        w.write("<span")
        self._render_attrs_and_style(w)
        self._render_event_handlers(w)
        w.write(">")
        w.write_escaped(self.text)
        w.write("</span>")


class Button(Component):
    """
    A clickable button with a text.

    Suggested event type to handle actions: EventType.CLICK

    Default style class: "rcu-Button"
    """

    def __init__(self, text: str = "", value_provider_js: str = ""):
        super().__init__(value_provider_js)
        self.text = text
        self.style.add_class("rcu-Button")

    def render(self, w: Writer) -> None:
        w.write('<button type="button"')
        self._render_attrs_and_style(w)
        self._render_enabled(w)
        self._render_event_handlers(w)
        w.write(">")
        w.write_escaped(self.text)
        w.write("</button>")


class TextBox(Component):
    """
    A text input: a single-line input box, or a text area when `rows > 1`.

    The value is synchronized with the server on EventType.CHANGE. Add other
    event types with `add_sync_on()` (e.g. EventType.KEY_UP to synchronize
    while typing).

    Default style class: "rcu-TextBox"

    :param text: The initial text.
    """

    style_class = "rcu-TextBox"
    is_password = False

    def __init__(self, text: str = ""):
        super().__init__("encodeURIComponent(this.value)")
        self.text = text
        self.rows = 1
        self.cols = 20
        self.style.add_class(self.style_class)
        self.add_sync_on(EventType.CHANGE)

    @property
    def read_only(self) -> bool:
        return bool(self.attr("readonly"))

    @read_only.setter
    def read_only(self, read_only: bool):
        self.set_attr("readonly", "readonly" if read_only else "")

    @property
    def max_length(self) -> int:
        """Maximum number of characters, -1 if unlimited."""
        return self.int_attr("maxlength")

    @max_length.setter
    def max_length(self, max_length: int):
        self.set_attr("maxlength", str(max_length) if max_length >= 0 else "")

    def preprocess_event(self, event: Event) -> None:
        # The empty string is a valid value: only an absent parameter means "no update".
        if event.interaction.has_value():
            self.text = event.interaction.value()

    def render(self, w: Writer) -> None:
        if self.rows <= 1 or self.is_password:
            self._render_input(w)
        else:
            self._render_text_area(w)

    def _render_input(self, w: Writer) -> None:
        w.write('<input type="', "password" if self.is_password else "text", '"')
        w.write_attr("size", self.cols)
        self._render_attrs_and_style(w)
        self._render_enabled(w)
        self._render_event_handlers(w)
        w.write_attr("value", self.text)
        w.write("/>")

    def _render_text_area(self, w: Writer) -> None:
        w.write("<textarea")
        self._render_attrs_and_style(w)
        self._render_enabled(w)
        self._render_event_handlers(w)
        w.write_attr("rows", self.rows)
        w.write_attr("cols", self.cols)
        # A newline right after <textarea> is dropped by browsers, keep the text's own.
        w.write(">\n")
        w.write_escaped(self.text)
        w.write("</textarea>")


class PasswordBox(TextBox):
    """
    A text box for password input. Always renders as a single-line input.

    Default style class: "rcu-PasswordBox"
    """

    style_class = "rcu-PasswordBox"
    is_password = True
