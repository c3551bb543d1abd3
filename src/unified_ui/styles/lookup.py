"""
Shared variant and size lookup.

Every component that maps a category name (size, status, color variant,
notification kind) to concrete styling goes through resolve(). Lookups are
case-insensitive and never fail: unknown or missing keys return the table's
designated default entry.
"""

from typing import Any, Mapping, Optional, TypeVar

from .colors import COLORS

T = TypeVar("T")

DEFAULT_SIZE = "md"

STATUS_STYLES = {
    "success": (COLORS["status_success_bg"], COLORS["status_success"]),
    "error": (COLORS["status_error_bg"], COLORS["status_error"]),
    "warning": (COLORS["status_warning_bg"], COLORS["status_warning"]),
    "info": (COLORS["status_info_bg"], COLORS["status_info"]),
    "neutral": (COLORS["status_neutral_bg"], COLORS["status_neutral"]),
}

# Variant name -> STATUS_STYLES category
STATUS_CATEGORIES = {
    "active": "success",
    "success": "success",
    "completed": "success",
    "inactive": "error",
    "error": "error",
    "cancelled": "error",
    "pending": "warning",
    "warning": "warning",
    "in progress": "info",
    "in-progress": "info",
    "info": "info",
}

# Submit colors for FormButtons
BUTTON_VARIANTS = {
    "primary": COLORS["primary"],
    "success": COLORS["success"],
    "danger": COLORS["danger"],
    "warning": COLORS["warning"],
    "info": COLORS["info"],
}

# Colors for the standalone Button
BASIC_BUTTON_VARIANTS = {
    "primary": COLORS["primary"],
    "secondary": COLORS["button_secondary"],
    "success": COLORS["success"],
    "danger": COLORS["danger"],
}

# Notification kind -> (background, foreground, icon name)
NOTIFICATION_STYLES = {
    "success": (*STATUS_STYLES["success"], "check"),
    "error": (*STATUS_STYLES["error"], "close"),
    "warning": (*STATUS_STYLES["warning"], "exclamation"),
    "info": (*STATUS_STYLES["info"], "exclamation"),
}

# Notification position -> (vertical edge, horizontal edge)
NOTIFICATION_POSITIONS = {
    "top-left": ("top", "left"),
    "top-right": ("top", "right"),
    "bottom-left": ("bottom", "left"),
    "bottom-right": ("bottom", "right"),
}


def _normalize(key: Any) -> Optional[str]:
    if not isinstance(key, str):
        return None
    return key.strip().lower()


def resolve(table: Mapping[str, T], key: Any, default: str = DEFAULT_SIZE) -> T:
    """Resolve a category key against a lookup table.

    Args:
        table: Lookup table; must contain ``default``.
        key: Category name (any case). None or unknown values fall back.
        default: Key of the fallback entry.

    Returns:
        The matching entry, or ``table[default]``.
    """
    normalized = _normalize(key)
    if normalized is not None and normalized in table:
        return table[normalized]
    return table[default]


def status_category(variant: Optional[str]) -> str:
    """Map a status variant string to its color category name."""
    normalized = _normalize(variant)
    if normalized is None:
        return "neutral"
    return STATUS_CATEGORIES.get(normalized, "neutral")


def status_colors(variant: Optional[str]) -> tuple[str, str]:
    """Get the (background, foreground) pair for a status variant."""
    return STATUS_STYLES[status_category(variant)]


def variant_color(variant: Optional[str], table: Mapping[str, str] = BUTTON_VARIANTS) -> str:
    """Get a button color for a variant, defaulting to primary."""
    return resolve(table, variant, default="primary")
