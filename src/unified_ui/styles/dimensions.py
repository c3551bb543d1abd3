"""
Component dimensions - Spacing, typography and size lookup tables.

Every size table has the same three keys (sm, md, lg); the modal adds xl.
Lookups go through styles.lookup.resolve so unknown sizes fall back to md.
"""

from .colors import THEME

# ============================================================
# SPACING SYSTEM (8px base)
# ============================================================

SPACING = {
    "xs": 4,
    "sm": THEME["spacing"]["small"],
    "md": THEME["spacing"]["medium"],
    "lg": THEME["spacing"]["large"],
}

# ============================================================
# BORDER RADIUS
# ============================================================

RADIUS = {
    "sm": THEME["radius"]["small"],
    "md": THEME["radius"]["medium"],
    "lg": THEME["radius"]["large"],
    "input": 6,
    "pill": 20,
}

# ============================================================
# TYPOGRAPHY
# ============================================================

FONTS = {
    "family": "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif",
    # Sizes
    "size_xs": 12,
    "size_sm": 14,
    "size_md": 16,
    "size_lg": 18,
    "size_xl": 20,
    "size_2xl": 24,
    "size_3xl": 28,
    # Weights
    "weight_normal": 400,
    "weight_medium": 500,
    "weight_semibold": 600,
    "weight_bold": 700,
}

# ============================================================
# SIZE LOOKUP TABLES
# ============================================================

ACTION_BUTTON_SIZES = {
    "sm": {"padding": 4, "icon_size": 14},
    "md": {"padding": 6, "icon_size": 16},
    "lg": {"padding": 8, "icon_size": 18},
}

BADGE_SIZES = {
    "sm": {"padding_v": 2, "padding_h": 8, "font_size": 10},
    "md": {"padding_v": 4, "padding_h": 12, "font_size": 12},
    "lg": {"padding_v": 6, "padding_h": 16, "font_size": 14},
}

AVATAR_SIZES = {
    "sm": {"diameter": 32, "font_size": 12},
    "md": {"diameter": 40, "font_size": 14},
    "lg": {"diameter": 48, "font_size": 16},
}

CONTACT_SIZES = {
    "sm": {"font_size": 12, "icon_size": 12},
    "md": {"font_size": 14, "icon_size": 14},
    "lg": {"font_size": 16, "icon_size": 16},
}

LOADING_SIZES = {
    "sm": {"diameter": 16, "border_width": 2},
    "md": {"diameter": 24, "border_width": 3},
    "lg": {"diameter": 32, "border_width": 4},
}

MODAL_WIDTHS = {
    "sm": 400,
    "md": 500,
    "lg": 600,
    "xl": 800,
}

# Fractions of the overlay the modal panel may occupy
MODAL_MAX_WIDTH_RATIO = 0.9
MODAL_MAX_HEIGHT_RATIO = 0.8

# ============================================================
# UI CONSTANTS
# ============================================================

UI = {
    # Notification
    "notification_margin": 24,
    # Tables
    "row_height": 48,
    "header_height": 52,
    "table_min_width": 600,
    # Stat cards
    "stat_icon_box": 48,
    "stat_icon_size": 24,
    "stats_grid_min_width": 250,
    # Forms
    "textarea_min_height": 80,
    # Empty state
    "empty_icon_size": 48,
    "empty_max_width": 400,
    # Spinner
    "spinner_step_ms": 50,
    "spinner_step_deg": 30,
}
