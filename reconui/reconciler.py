# =============================================================================
# RECONUI RECONCILER - Dirty tracking and partial re-rendering
# =============================================================================
"""
Decides what has to be re-rendered after an interaction and renders it.

Handlers and state changes mark components dirty. Once a dispatch is over,
the reconciler reduces the dirty set to its roots (a dirty component inside a
dirty ancestor is covered by the ancestor's render) and renders every root as
a full subtree. Each rendered subtree becomes a REPLACE patch addressed by the
component's HTML id, which the client swaps in place.

Re-rendering a whole subtree is always correct. Narrower updates are an
optimization a transport may add on top of the patches, never a requirement.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Literal, Optional

from .writer import Writer

if TYPE_CHECKING:
    from .base import Component

logger = logging.getLogger(__name__)

PatchAction = Literal["REPLACE"]


class DirtySet:
    """
    The components that need a re-render, in marking order.

    Marking is idempotent. Membership is by identity, not equality.
    """

    def __init__(self):
        self._components: Dict[int, "Component"] = {}

    def add(self, *components: "Component") -> None:
        for component in components:
            if component is not None and component.id not in self._components:
                self._components[component.id] = component

    def clear(self) -> None:
        self._components.clear()

    def __contains__(self, component: "Component") -> bool:
        return component.id in self._components

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self):
        return iter(list(self._components.values()))

    def roots(self) -> List["Component"]:
        """
        Returns the minimal list of components whose renders cover every dirty
        component: those that have no dirty ancestor.
        """
        result = []
        for component in self._components.values():
            ancestor = component.parent
            covered = False
            while ancestor is not None:
                if ancestor.id in self._components:
                    covered = True
                    break
                ancestor = ancestor.parent
            if not covered:
                result.append(component)
        return result


def is_rendered(component: "Component", root: "Component") -> bool:
    """Whether the component's markup is part of the render of `root`."""
    node = component
    parent = node.parent
    while parent is not None:
        if not parent.renders_child(node):
            return False
        node, parent = parent, parent.parent
    return node is root


@dataclass
class Patch:
    """A single DOM update instruction."""
    action: PatchAction
    html_id: str
    data: Dict[str, Any]


@dataclass
class ReconciliationResult:
    """The outcome of one dispatch: the patches to apply, in order."""
    patches: List[Patch] = field(default_factory=list)

    @property
    def html_ids(self) -> List[str]:
        return [p.html_id for p in self.patches]

    def __bool__(self):
        return bool(self.patches)


class Reconciler:
    """Renders components and turns dirty sets into patches."""

    def render(self, component: "Component") -> str:
        """Renders the full subtree of a component to markup."""
        w = Writer()
        component.render(w)
        return w.getvalue()

    def reconcile(self, dirty: DirtySet, root: Optional["Component"] = None) -> ReconciliationResult:
        """
        Renders every dirty root to a REPLACE patch.

        :param root: The root of the rendered tree. When given, dirty roots whose
            markup is not part of its render (detached components, content of
            unselected tabs) are skipped, as the client has no element to replace.
        """
        result = ReconciliationResult()
        for component in dirty.roots():
            if root is not None and not is_rendered(component, root):
                logger.debug("Skipping %r: not part of the rendered tree", component)
                continue
            result.patches.append(
                Patch(action="REPLACE", html_id=str(component.id), data={"html": self.render(component)})
            )
        logger.debug("Reconciled %d dirty component(s) into %d patch(es)", len(dirty), len(result.patches))
        return result
