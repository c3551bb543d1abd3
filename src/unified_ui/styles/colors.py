"""
Theme tokens and color palette - Light admin theme.

Design Philosophy:
- One immutable token table shared by every component
- Semantic pairs (background, foreground) for status and feedback colors
- Neutral grays for borders, muted text and surfaces
"""

from types import MappingProxyType

THEME = MappingProxyType(
    {
        "colors": MappingProxyType(
            {
                "primary": "#667eea",
                "secondary": "#764ba2",
                "success": "#10B981",
                "danger": "#EF4444",
                "warning": "#F59E0B",
                "info": "#3B82F6",
                "light": "#F3F4F6",
                "dark": "#1F2937",
            }
        ),
        "spacing": MappingProxyType(
            {
                "small": 8,
                "medium": 16,
                "large": 24,
            }
        ),
        "radius": MappingProxyType(
            {
                "small": 4,
                "medium": 8,
                "large": 12,
            }
        ),
    }
)

COLORS = {
    # Theme colors (flattened for f-string use)
    **THEME["colors"],
    # Surfaces
    "bg_page": "#F9FAFB",
    "bg_surface": "#FFFFFF",
    "bg_panel_header": "#f8fafc",
    "bg_overlay": "rgba(0, 0, 0, 0.5)",
    # Text hierarchy
    "text_primary": "#1F2937",
    "text_secondary": "#374151",
    "text_muted": "#6B7280",
    "text_subtle": "#9CA3AF",
    "text_inverse": "#FFFFFF",
    # Borders
    "border_default": "#E5E7EB",
    "border_input": "#D1D5DB",
    "border_panel": "#e2e8f0",
    # Shadows
    "shadow_sm": "rgba(0, 0, 0, 0.1)",
    # Tables
    "row_alternate": "#F9FAFB",
    "row_default": "#FFFFFF",
    "row_hover": "#F3F4F6",
    "table_header_bg": "#F9FAFB",
    # Status pairs (light background, dark text)
    "status_success_bg": "#D1FAE5",
    "status_success": "#065F46",
    "status_error_bg": "#FEE2E2",
    "status_error": "#991B1B",
    "status_warning_bg": "#FEF3C7",
    "status_warning": "#92400E",
    "status_info_bg": "#DBEAFE",
    "status_info": "#1E40AF",
    "status_neutral_bg": "#F3F4F6",
    "status_neutral": "#374151",
    # Action buttons
    "action_view_bg": "#EBF8FF",
    "action_view": "#3B82F6",
    "action_edit_bg": "#F3F4F6",
    "action_edit": "#6B7280",
    "action_delete_bg": "#FEE2E2",
    "action_delete": "#EF4444",
    # Neutral button
    "button_secondary": "#6B7280",
}

PRIMARY_GRADIENT = (
    "qlineargradient(x1:0, y1:0, x2:1, y2:1, "
    f"stop:0 {COLORS['primary']}, stop:1 {COLORS['secondary']})"
)
