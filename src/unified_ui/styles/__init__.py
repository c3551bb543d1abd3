"""
Design tokens for the unified admin UI.

This package provides:
- THEME: Immutable theme tokens (colors, spacing, radius)
- COLORS: Flattened palette including status and surface colors
- SPACING, RADIUS, FONTS, UI: Dimension constants
- *_SIZES, MODAL_WIDTHS: Size lookup tables
- resolve, status_colors, variant_color: Shared lookup helpers
- get_stylesheet, install_global_styles: Global QSS bootstrap
"""

from .colors import THEME, COLORS, PRIMARY_GRADIENT
from .dimensions import (
    SPACING,
    RADIUS,
    FONTS,
    UI,
    ACTION_BUTTON_SIZES,
    BADGE_SIZES,
    AVATAR_SIZES,
    CONTACT_SIZES,
    LOADING_SIZES,
    MODAL_WIDTHS,
    MODAL_MAX_WIDTH_RATIO,
    MODAL_MAX_HEIGHT_RATIO,
)
from .lookup import (
    resolve,
    status_category,
    status_colors,
    variant_color,
    STATUS_STYLES,
    BUTTON_VARIANTS,
    BASIC_BUTTON_VARIANTS,
    NOTIFICATION_STYLES,
    NOTIFICATION_POSITIONS,
)
from .stylesheet import get_stylesheet, install_global_styles

__all__ = [
    # Tokens
    "THEME",
    "COLORS",
    "PRIMARY_GRADIENT",
    # Dimensions
    "SPACING",
    "RADIUS",
    "FONTS",
    "UI",
    # Size tables
    "ACTION_BUTTON_SIZES",
    "BADGE_SIZES",
    "AVATAR_SIZES",
    "CONTACT_SIZES",
    "LOADING_SIZES",
    "MODAL_WIDTHS",
    "MODAL_MAX_WIDTH_RATIO",
    "MODAL_MAX_HEIGHT_RATIO",
    # Lookup
    "resolve",
    "status_category",
    "status_colors",
    "variant_color",
    "STATUS_STYLES",
    "BUTTON_VARIANTS",
    "BASIC_BUTTON_VARIANTS",
    "NOTIFICATION_STYLES",
    "NOTIFICATION_POSITIONS",
    # Stylesheet
    "get_stylesheet",
    "install_global_styles",
]
