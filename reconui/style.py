# reconui/style.py

from enum import Enum
from typing import Dict, List, Optional

from .writer import Writer


class HAlign(Enum):
    """Horizontal alignment of a cell. DEFAULT renders no attribute at all."""
    DEFAULT = ""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VAlign(Enum):
    """Vertical alignment of a cell. DEFAULT renders no attribute at all."""
    DEFAULT = ""
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class Style:
    """
    The CSS class and inline style bag of a component.

    Classes keep their insertion order so the rendered `class` attribute is
    stable between renders. Inline properties are plain name/value pairs.
    """

    def __init__(self):
        self._classes: List[str] = []
        self._props: Dict[str, str] = {}

    # --- CSS classes ---

    @property
    def classes(self) -> List[str]:
        return list(self._classes)

    def has_class(self, name: str) -> bool:
        return name in self._classes

    def add_class(self, name: str) -> "Style":
        if name and name not in self._classes:
            self._classes.append(name)
        return self

    def remove_class(self, name: str) -> "Style":
        if name in self._classes:
            self._classes.remove(name)
        return self

    def set_class(self, name: str) -> "Style":
        """Replaces every class with the given one."""
        self._classes = [name] if name else []
        return self

    # --- Inline style properties ---

    def get(self, name: str) -> str:
        return self._props.get(name, "")

    def set(self, name: str, value: str) -> "Style":
        """Sets an inline property. An empty value removes it."""
        if value:
            self._props[name] = value
        else:
            self._props.pop(name, None)
        return self

    def remove(self, name: str) -> "Style":
        self._props.pop(name, None)
        return self

    def set_width(self, width: str) -> "Style":
        return self.set("width", width)

    def set_height(self, height: str) -> "Style":
        return self.set("height", height)

    def set_display(self, display: str) -> "Style":
        return self.set("display", display)

    def render(self, w: Writer, hidden: bool = False) -> None:
        """Writes the class and style attributes. `hidden` forces display:none without storing it."""
        if self._classes:
            w.write_attr("class", " ".join(self._classes))
        props = dict(self._props, display="none") if hidden else self._props
        if props:
            w.write_attr("style", ";".join(f"{k}:{v}" for k, v in props.items()))

    def __repr__(self):
        return f"Style(classes={self._classes!r}, props={self._props!r})"


class CellFmt:
    """
    Formatting of a single layout cell (a `<td>` or `<tr>` wrapping a child).

    :param halign: Horizontal alignment of the cell content.
    :param valign: Vertical alignment of the cell content.
    """

    def __init__(self, halign: HAlign = HAlign.DEFAULT, valign: VAlign = VAlign.DEFAULT):
        self.halign = halign
        self.valign = valign
        self.attrs: Dict[str, str] = {}
        self.style = Style()

    def set_align(self, halign: HAlign, valign: VAlign) -> None:
        self.halign = halign
        self.valign = valign

    def set_attr(self, name: str, value: str) -> None:
        if value:
            self.attrs[name] = value
        else:
            self.attrs.pop(name, None)

    def render(self, tag: str, w: Writer,
               default_halign: HAlign = HAlign.DEFAULT,
               default_valign: VAlign = VAlign.DEFAULT) -> None:
        """
        Opens the cell tag (without closing it) with alignment, attributes and style.
        Alignments left at DEFAULT fall back to the given defaults.
        """
        halign = self.halign if self.halign is not HAlign.DEFAULT else default_halign
        valign = self.valign if self.valign is not VAlign.DEFAULT else default_valign
        w.write("<", tag)
        if halign is not HAlign.DEFAULT:
            w.write_attr("align", halign.value)
        if valign is not VAlign.DEFAULT:
            w.write_attr("valign", valign.value)
        for name, value in self.attrs.items():
            w.write_attr(name, value)
        self.style.render(w)
        w.write(">")
