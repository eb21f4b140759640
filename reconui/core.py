# reconui/core.py

import logging
import time
from typing import Mapping, Optional, Sequence

from .base import Component
from .events import Event, Interaction
from .reconciler import DirtySet, Reconciler, ReconciliationResult

logger = logging.getLogger(__name__)


class Session:
    """
    Owns one component tree and runs interactions against it.

    Every interaction is processed to completion as one unit of work: locate
    the target, fold the inbound value into its state, run its handlers,
    re-render what the handlers marked dirty. Nothing here locks; the caller
    must not run two interactions against the same session at once. Separate
    sessions share no mutable state and can be used from separate threads.

    :param root: The root of the component tree.
    """

    def __init__(self, root: Component, reconciler: Optional[Reconciler] = None):
        self.root = root
        self.reconciler = reconciler or Reconciler()

    def find_by_id(self, id: int) -> Optional[Component]:
        return self.root.find_by_id(id)

    def render(self) -> str:
        """Renders the whole tree."""
        return self.reconciler.render(self.root)

    def dispatch(self, interaction: Interaction) -> ReconciliationResult:
        """
        Runs an interaction and returns the patches for the components that
        need a re-render. An interaction aimed at an unknown component is
        dropped with a warning and yields no patches.
        """
        start_time = time.time()
        target = self.find_by_id(interaction.component_id)
        if target is None:
            logger.warning("Dropping %s event for unknown component id %d",
                           interaction.event_type.name, interaction.component_id)
            return ReconciliationResult()

        dirty = DirtySet()
        event = Event(interaction.event_type, target, interaction, dirty)

        # State first, so handlers see the value the client sent.
        target.preprocess_event(event)
        target.dispatch_event(event)

        result = self.reconciler.reconcile(dirty, self.root)
        logger.debug("Dispatched %r to %r in %.4fs, %d patch(es)",
                     event, target, time.time() - start_time, len(result.patches))
        return result

    def dispatch_form(self, form: Mapping[str, Sequence[str]]) -> ReconciliationResult:
        """
        Parses raw request parameters and dispatches them.

        :raises InteractionError: if the parameters do not describe an interaction.
        """
        return self.dispatch(Interaction.from_form(form))
