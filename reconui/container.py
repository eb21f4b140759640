# reconui/container.py

import logging
from enum import Enum
from typing import Dict, List, Optional

from .base import Component
from .style import CellFmt, HAlign, VAlign
from .writer import Writer

logger = logging.getLogger(__name__)


class Container(Component):
    """
    A component owning an ordered sequence of child components.

    Render order is sequence order. A child has at most one owner: adding a
    component that already belongs to a container is refused, it has to be
    removed from its owner first.
    """

    def __init__(self, value_provider_js: str = ""):
        super().__init__(value_provider_js)
        self._children: List[Component] = []

    def add(self, child: Component) -> bool:
        """
        Appends a child and takes ownership of it.

        :return: False (and nothing changes) if the child already has an owner,
            or if adding it would make a container its own descendant.
        """
        if not self.can_adopt(child):
            logger.debug("Refusing to add %r to %r", child, self)
            return False
        self._children.append(child)
        child._set_parent(self)
        return True

    def can_adopt(self, child: Component) -> bool:
        """
        Whether the child may be added: it must have no owner and must not be
        this container or one of its ancestors.
        """
        if child.parent is not None:
            return False
        node = self
        while node is not None:
            if node is child:
                return False
            node = node.parent
        return True

    def remove(self, child: Component) -> bool:
        """
        Detaches a child, found by identity.

        The child's own state is left alone; only the ownership is released.

        :return: whether the child was found.
        """
        idx = self.index_of(child)
        if idx < 0:
            return False
        del self._children[idx]
        child._set_parent(None)
        return True

    def clear(self) -> None:
        for child in self._children:
            child._set_parent(None)
        self._children = []

    def child_at(self, idx: int) -> Optional[Component]:
        """The child at the given index, None if out of range."""
        if 0 <= idx < len(self._children):
            return self._children[idx]
        return None

    def index_of(self, child: Component) -> int:
        """The index of a child by identity, -1 if it is not a child."""
        for i, c in enumerate(self._children):
            if c is child:
                return i
        return -1

    def children_count(self) -> int:
        return len(self._children)

    def children(self) -> List[Component]:
        return list(self._children)

    def find_by_id(self, id: int) -> Optional[Component]:
        """Depth-first search over this container and everything it owns."""
        if self.id == id:
            return self
        for child in self._children:
            found = child.find_by_id(id)
            if found is not None:
                return found
        return None

    def render(self, w: Writer) -> None:
        w.write("<span")
        self._render_attrs_and_style(w)
        self._render_event_handlers(w)
        w.write(">")
        for child in self._children:
            child.render(w)
        w.write("</span>")


class Layout(Enum):
    """How a panel lays out its children."""
    NATURAL = "natural"        # inline, in document flow
    HORIZONTAL = "horizontal"  # one table row
    VERTICAL = "vertical"      # one table row per child


class Panel(Container):
    """
    A container with a layout, panel-level alignment and per-child cell formatting.

    :param layout: The initial layout. Defaults to vertical.
    """

    def __init__(self, layout: Layout = Layout.VERTICAL):
        super().__init__()
        self.layout = layout
        self.halign = HAlign.DEFAULT
        self.valign = VAlign.DEFAULT
        self._cell_fmts: Dict[int, CellFmt] = {}
        self.set_attr("cellspacing", "0")
        self.set_attr("cellpadding", "0")

    def set_align(self, halign: HAlign, valign: VAlign) -> None:
        """Sets the default alignment of every cell."""
        self.halign = halign
        self.valign = valign

    def insert(self, child: Component, idx: int) -> bool:
        """
        Inserts a child at the given index, clamped to [0, children_count()].

        :return: False if the child cannot be adopted, see `can_adopt()`.
        """
        if not self.can_adopt(child):
            return False
        idx = max(0, min(idx, len(self._children)))
        self._children.insert(idx, child)
        child._set_parent(self)
        return True

    def remove(self, child: Component) -> bool:
        if not super().remove(child):
            return False
        self._cell_fmts.pop(child.id, None)
        return True

    def clear(self) -> None:
        super().clear()
        self._cell_fmts.clear()

    def cell_fmt(self, child: Component) -> CellFmt:
        """The cell formatter of a child, created on first access."""
        fmt = self._cell_fmts.get(child.id)
        if fmt is None:
            fmt = self._cell_fmts[child.id] = CellFmt()
        return fmt

    def render(self, w: Writer) -> None:
        if self.layout is Layout.NATURAL:
            super().render(w)
            return

        w.write("<table")
        self._render_attrs_and_style(w)
        self._render_event_handlers(w)
        w.write(">")
        if self.layout is Layout.HORIZONTAL:
            w.write("<tr>")
            for child in self._children:
                self._render_cell(child, w)
            w.write("</tr>")
        else:
            for child in self._children:
                w.write("<tr>")
                self._render_cell(child, w)
                w.write("</tr>")
        w.write("</table>")

    def _render_attrs_and_style(self, w: Writer) -> None:
        # cellspacing/cellpadding only make sense on table layouts
        if self.layout is Layout.NATURAL:
            w.write_attr("id", self.id)
            for name, value in self._attrs.items():
                if name not in ("cellspacing", "cellpadding"):
                    w.write_attr(name, value)
            self.style.render(w, hidden=not self.visible)
        else:
            super()._render_attrs_and_style(w)

    def _render_cell(self, child: Component, w: Writer) -> None:
        """Renders a child wrapped in a <td> carrying its cell formatting."""
        fmt = self._cell_fmts.get(child.id)
        if fmt is None:
            fmt = CellFmt()
        fmt.render("td", w, self.halign, self.valign)
        child.render(w)
        w.write("</td>")
