# reconui_cli/showcase.py

"""
A small component tree exercising every stateful widget of the toolkit.

Used by the `render` and `dispatch` commands. Components that interactions
may target are registered under a name, so event files can refer to them
without knowing their ids.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from reconui import (
    CheckBox,
    Component,
    Config,
    EventType,
    Label,
    Layout,
    Panel,
    PasswordBox,
    RadioButton,
    RadioGroup,
    Session,
    SwitchButton,
    TabBarPlacement,
    TabPanel,
    TextBox,
)


@dataclass
class Showcase:
    session: Session
    components: Dict[str, Component] = field(default_factory=dict)
    groups: Dict[str, RadioGroup] = field(default_factory=dict)

    def component(self, name: str) -> Optional[Component]:
        return self.components.get(name)


def _placement_from_config(config: Config) -> TabBarPlacement:
    name = str(config.get_nested("widgets.tab_bar_placement", "top")).upper()
    try:
        return TabBarPlacement[name]
    except KeyError:
        return TabBarPlacement.TOP


def build_showcase(config: Config) -> Showcase:
    """Builds the showcase tree and wires its handlers."""
    root = Panel(Layout.VERTICAL)
    status = Label("Ready.")
    tabs = TabPanel(_placement_from_config(config))
    root.add(Label("reconui showcase"))
    root.add(tabs)
    root.add(status)

    # --- Options tab ---
    options = Panel(Layout.VERTICAL)
    subscribe = CheckBox("Subscribe to the newsletter")
    color = RadioGroup("color")
    red = RadioButton("Red", color)
    green = RadioButton("Green", color)
    blue = RadioButton("Blue", color)
    dark_mode = SwitchButton(
        config.get_nested("widgets.switch_on_text", "ON"),
        config.get_nested("widgets.switch_off_text", "OFF"),
    )
    for c in (subscribe, red, green, blue, dark_mode):
        options.add(c)

    def on_subscribe(e):
        status.text = "Subscribed." if subscribe.state else "Unsubscribed."
        e.mark_dirty(status)

    def on_color(e):
        selected = color.selected
        status.text = f"Color: {selected.text}." if selected is not None else "No color."
        e.mark_dirty(status)

    def on_dark_mode(e):
        status.text = f"Dark mode: {dark_mode.on_text if dark_mode.state else dark_mode.off_text}."
        e.mark_dirty(status)

    subscribe.add_event_handler(on_subscribe, EventType.CLICK)
    for radio in (red, green, blue):
        radio.add_event_handler(on_color, EventType.CLICK)
    dark_mode.add_event_handler(on_dark_mode, EventType.CLICK)

    # --- Profile tab ---
    profile = Panel(Layout.VERTICAL)
    name = TextBox()
    password = PasswordBox()
    greeting = Label("")
    for c in (Label("Name:"), name, Label("Password:"), password, greeting):
        profile.add(c)

    def on_name(e):
        greeting.text = f"Hello, {name.text}!" if name.text else ""
        e.mark_dirty(greeting)

    name.add_event_handler(on_name, EventType.CHANGE)

    # --- About tab ---
    about = Label("Server-side components, rendered on demand.")

    tabs.add_string("Options", options)
    tabs.add_string("Profile", profile)
    tabs.add_string("About", about)

    components = {
        "tabs": tabs,
        "status": status,
        "subscribe": subscribe,
        "red": red,
        "green": green,
        "blue": blue,
        "dark_mode": dark_mode,
        "name": name,
        "password": password,
        "greeting": greeting,
    }
    for i, selector in enumerate(tabs.tab_bar.children()):
        components[f"tab{i}"] = selector

    return Showcase(Session(root), components, {"color": color})
