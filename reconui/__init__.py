# reconui/__init__.py

"""
reconui: a server-side widget toolkit.

Application state lives on the server as a tree of stateful components. The
toolkit renders the tree to HTML, folds client interactions back into
component state, runs event handlers and re-renders only what they marked
dirty.
"""

import logging

# --- Core ---
from .core import Session
from .config import Config, get_config, configure_logging
from .reconciler import DirtySet, Patch, Reconciler, ReconciliationResult
from .writer import Writer

# --- Components ---
from .base import Component
from .container import Container, Layout, Panel
from .widgets import Button, Label, PasswordBox, TextBox
from .state import CheckBox, RadioButton, RadioGroup, StateButton, Stateful, SwitchButton
from .tabpanel import TabBar, TabBarPlacement, TabPanel

# --- Events and styling ---
from .events import (
    PARAM_COMP_ID,
    PARAM_COMP_VALUE,
    PARAM_EVENT_TYPE,
    Event,
    EventType,
    Interaction,
    InteractionError,
    parse_bool,
)
from .style import CellFmt, HAlign, Style, VAlign

__all__ = [
    # --- Core ---
    'Session', 'Config', 'get_config', 'configure_logging',
    'DirtySet', 'Patch', 'Reconciler', 'ReconciliationResult', 'Writer',
    # --- Components ---
    'Component', 'Container', 'Layout', 'Panel',
    'Button', 'Label', 'PasswordBox', 'TextBox',
    'CheckBox', 'RadioButton', 'RadioGroup', 'StateButton', 'Stateful', 'SwitchButton',
    'TabBar', 'TabBarPlacement', 'TabPanel',
    # --- Events and styling ---
    'PARAM_COMP_ID', 'PARAM_COMP_VALUE', 'PARAM_EVENT_TYPE',
    'Event', 'EventType', 'Interaction', 'InteractionError', 'parse_bool',
    'CellFmt', 'HAlign', 'Style', 'VAlign',
]

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
