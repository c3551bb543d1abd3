"""
Dashboard widgets for admin pages.

This package provides re-exports for all widget classes so callers can
import from ``unified_ui.widgets`` directly.
"""

# Icons
from .icons import Icon, GlyphIcon, ICONS

# Layout
from .layout import PageContainer, PageHeader, StatsGrid, ControlsBar

# Cards
from .cards import StatCard

# Badges
from .badges import StatusBadge

# Avatar
from .avatar import Avatar, ContactInfo

# Feedback
from .feedback import EmptyState, Loading

# Tables
from .tables import (
    TableRow,
    DecoratedRow,
    decorate_row,
    decorate_rows,
    TableContainer,
    DataTable,
)

# Buttons
from .buttons import Button, ActionButtons, FormButtons

# Forms
from .forms import (
    Option,
    FormField,
    Input,
    Select,
    RangeValue,
    DateRangePicker,
    TimeRangePicker,
)

# Overlays
from .notification import Notification
from .expandable import CollapsiblePanel
from .modal import Modal

__all__ = [
    # Icons
    "Icon",
    "GlyphIcon",
    "ICONS",
    # Layout
    "PageContainer",
    "PageHeader",
    "StatsGrid",
    "ControlsBar",
    # Cards
    "StatCard",
    # Badges
    "StatusBadge",
    # Avatar
    "Avatar",
    "ContactInfo",
    # Feedback
    "EmptyState",
    "Loading",
    # Tables
    "TableRow",
    "DecoratedRow",
    "decorate_row",
    "decorate_rows",
    "TableContainer",
    "DataTable",
    # Buttons
    "Button",
    "ActionButtons",
    "FormButtons",
    # Forms
    "Option",
    "FormField",
    "Input",
    "Select",
    "RangeValue",
    "DateRangePicker",
    "TimeRangePicker",
    # Overlays
    "Notification",
    "CollapsiblePanel",
    "Modal",
]
