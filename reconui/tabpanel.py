# reconui/tabpanel.py

import logging
import weakref
from enum import Enum
from typing import Dict, Optional

from .base import Component, EventHandler
from .container import Layout, Panel
from .events import Event, EventType
from .style import CellFmt, HAlign, VAlign
from .widgets import Label
from .writer import Writer

logger = logging.getLogger(__name__)


class TabBarPlacement(Enum):
    """Where the tab bar goes relative to the content of a TabPanel."""
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


# Layout and alignment of the tab bar for each placement.
_PLACEMENT_LAYOUTS = {
    TabBarPlacement.TOP: (Layout.HORIZONTAL, HAlign.LEFT, VAlign.BOTTOM),
    TabBarPlacement.BOTTOM: (Layout.HORIZONTAL, HAlign.LEFT, VAlign.TOP),
    TabBarPlacement.LEFT: (Layout.VERTICAL, HAlign.RIGHT, VAlign.TOP),
    TabBarPlacement.RIGHT: (Layout.VERTICAL, HAlign.LEFT, VAlign.TOP),
}


class TabBar(Panel):
    """
    The bar of selector components of a TabPanel, one per tab.

    Removing a selector through the tab bar removes the whole tab (selector and
    content) through the owning TabPanel.

    Default style classes: "rcu-TabBar", "rcu-TabBar-Top", "rcu-TabBar-Bottom",
    "rcu-TabBar-Left", "rcu-TabBar-Right", "rcu-TabBar-NotSelected",
    "rcu-TabBar-Selected"
    """

    def __init__(self):
        super().__init__(Layout.HORIZONTAL)
        self._owner_ref: Optional[weakref.ref] = None

    @property
    def owner(self) -> Optional["TabPanel"]:
        return self._owner_ref() if self._owner_ref is not None else None

    def remove(self, child: Component) -> bool:
        idx = self.index_of(child)
        if idx < 0:
            return False
        owner = self.owner
        if owner is not None:
            return owner.remove(owner.child_at(idx))
        return super().remove(child)


class TabPanel(Panel):
    """
    A panel with multiple content components of which only one is visible at a
    time. The visible one is chosen by clicking its selector in the tab bar.

    Content components and selectors are index-aligned: the selector at index
    i of the tab bar belongs to the content at index i of the panel.

    Usually only the placement needs to be set; it also sets reasonable
    layout and alignment defaults for the tab bar. Cell formatting of the tab
    bar region is available through `tab_bar_fmt`, of individual content
    components through `cell_fmt()`.

    Default style classes: "rcu-TabPanel", "rcu-TabPanel-Content"

    :param placement: Where to put the tab bar. Defaults to the top.
    """

    SELECTED = "rcu-TabBar-Selected"
    NOT_SELECTED = "rcu-TabBar-NotSelected"

    def __init__(self, placement: TabBarPlacement = TabBarPlacement.TOP):
        super().__init__()
        self._tab_bar = TabBar()
        self._tab_bar._set_parent(self)
        self._tab_bar._owner_ref = weakref.ref(self)
        self._tab_bar.style.add_class("rcu-TabBar")
        self._tab_bar_fmt = CellFmt(HAlign.LEFT, VAlign.TOP)
        self._placement: Optional[TabBarPlacement] = None
        self._selected = -1
        self._tab_handlers: Dict[int, EventHandler] = {}
        self.set_placement(placement)
        self.style.add_class("rcu-TabPanel")

    @property
    def tab_bar(self) -> TabBar:
        return self._tab_bar

    @property
    def tab_bar_fmt(self) -> CellFmt:
        """The cell formatter of the tab bar region."""
        return self._tab_bar_fmt

    @property
    def placement(self) -> TabBarPlacement:
        return self._placement

    def set_placement(self, placement: TabBarPlacement) -> None:
        style = self._tab_bar.style
        if self._placement is not None:
            style.remove_class(f"rcu-TabBar-{self._placement.name.capitalize()}")
        self._placement = placement

        layout, halign, valign = _PLACEMENT_LAYOUTS[placement]
        self._tab_bar.layout = layout
        self._tab_bar.set_align(halign, valign)
        style.add_class(f"rcu-TabBar-{placement.name.capitalize()}")

    @property
    def selected(self) -> int:
        """The index of the selected tab, -1 if none is selected."""
        return self._selected

    def add(self, selector: Component, content: Component) -> bool:
        """
        Adds a tab: a selector to the tab bar and its content to the panel.
        The first tab added gets selected.

        :return: False (and nothing changes) if either component already has an
            owner, if both are the same component, or if either is this panel,
            its tab bar or one of their ancestors.
        """
        if (selector is content or not self._tab_bar.can_adopt(selector)
                or not self.can_adopt(content)):
            logger.debug("Refusing to add tab (%r, %r)", selector, content)
            return False

        self._tab_bar.add(selector)
        if not super().add(content):
            Panel.remove(self._tab_bar, selector)
            return False
        selector.style.add_class(self.NOT_SELECTED)
        self.cell_fmt(content).style.add_class("rcu-TabPanel-Content")

        if self.children_count() == 1:
            self.set_selected(0)

        def on_selector_click(e: Event) -> None:
            idx = self.index_of(content)
            if idx >= 0:
                self.set_selected(idx)
                e.mark_dirty(self)

        self._tab_handlers[selector.id] = on_selector_click
        selector.add_event_handler(on_selector_click, EventType.CLICK)

        self._check_invariants()
        return True

    def add_string(self, text: str, content: Component) -> bool:
        """Shorthand for `add(Label(text), content)`."""
        return self.add(Label(text), content)

    def insert(self, child: Component, idx: int) -> bool:
        # Tabs come in pairs, a lone component cannot be inserted.
        logger.warning("TabPanel.insert() is not supported, use add()")
        return False

    def set_selected(self, idx: int) -> None:
        """
        Selects the tab at the given index. A negative index deselects every
        tab; an index past the last tab is ignored.
        """
        if idx >= self.children_count():
            return

        if self._selected >= 0:
            style = self._tab_bar.child_at(self._selected).style
            style.remove_class(self.SELECTED)
            style.add_class(self.NOT_SELECTED)

        self._selected = idx if idx >= 0 else -1

        if self._selected >= 0:
            style = self._tab_bar.child_at(self._selected).style
            style.remove_class(self.NOT_SELECTED)
            style.add_class(self.SELECTED)

        logger.debug("%r selected tab: %d", self, self._selected)

    def remove(self, child: Component) -> bool:
        """
        Removes a tab given either its content or its selector.

        Removing a tab before the selection keeps the same tab selected.
        Removing the selected tab selects the tab taking its place, or the new
        last tab, or nothing if no tab is left.
        """
        idx = self.index_of(child)
        if idx < 0:
            idx = self._tab_bar.index_of(child)
            if idx < 0:
                return False
            return self.remove(self.child_at(idx))

        selector = self._tab_bar.child_at(idx)
        Panel.remove(self._tab_bar, selector)
        handler = self._tab_handlers.pop(selector.id, None)
        if handler is not None:
            selector.remove_event_handler(handler, EventType.CLICK)
        super().remove(child)

        if idx < self._selected:
            self._selected -= 1
        elif idx == self._selected:
            # The selected selector is gone, nothing to restyle.
            self._selected = -1
            if idx < self.children_count():
                self.set_selected(idx)
            elif idx > 0:
                self.set_selected(idx - 1)

        self._check_invariants()
        return True

    def clear(self) -> None:
        for selector in self._tab_bar.children():
            handler = self._tab_handlers.pop(selector.id, None)
            if handler is not None:
                selector.remove_event_handler(handler, EventType.CLICK)
        Panel.clear(self._tab_bar)
        super().clear()
        self._selected = -1
        self._check_invariants()

    def find_by_id(self, id: int) -> Optional[Component]:
        found = super().find_by_id(id)
        if found is not None:
            return found
        return self._tab_bar.find_by_id(id)

    def renders_child(self, child: Component) -> bool:
        # Only the selected content is emitted.
        if child is self._tab_bar:
            return True
        idx = self.index_of(child)
        return idx >= 0 and idx == self._selected

    def _check_invariants(self) -> None:
        assert self.children_count() == self._tab_bar.children_count(), \
            "tab bar and content out of alignment"
        assert -1 <= self._selected < self.children_count(), \
            f"selected index {self._selected} out of range"

    def render(self, w: Writer) -> None:
        w.write("<table")
        self._render_attrs_and_style(w)
        self._render_event_handlers(w)
        w.write(">")

        placement = self._placement
        if placement is TabBarPlacement.TOP:
            self._render_tab_bar_row(w)
            w.write("<tr>")
            self._render_content(w)
            w.write("</tr>")
        elif placement is TabBarPlacement.BOTTOM:
            w.write("<tr>")
            self._render_content(w)
            w.write("</tr>")
            self._render_tab_bar_row(w)
        elif placement is TabBarPlacement.LEFT:
            w.write("<tr>")
            self._render_tab_bar_cell(w)
            self._render_content(w)
            w.write("</tr>")
        else:
            w.write("<tr>")
            self._render_content(w)
            self._render_tab_bar_cell(w)
            w.write("</tr>")

        w.write("</table>")

    def _render_tab_bar_row(self, w: Writer) -> None:
        self._tab_bar_fmt.render("tr", w)
        w.write("<td>")
        self._tab_bar.render(w)
        w.write("</td></tr>")

    def _render_tab_bar_cell(self, w: Writer) -> None:
        self._tab_bar_fmt.render("td", w)
        self._tab_bar.render(w)
        w.write("</td>")

    def _render_content(self, w: Writer) -> None:
        """Renders only the selected content. Unselected content is not emitted at all."""
        if self._selected >= 0:
            self._render_cell(self.child_at(self._selected), w)
        else:
            w.write("<td></td>")
