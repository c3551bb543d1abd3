"""
Global QSS stylesheet and its one-time bootstrap.

get_stylesheet() returns the shared rules (tooltips, scrollbars, focus rings).
install_global_styles() appends them to the application stylesheet exactly
once; repeated calls find the marker and leave the stylesheet untouched.
"""

from typing import Optional

from PyQt6.QtWidgets import QApplication

from ..utils.logger import get_logger
from .colors import COLORS
from .dimensions import SPACING, RADIUS, FONTS

logger = get_logger("styles")

STYLE_MARKER = "/* unified-ui:global-styles */"
STYLE_END_MARKER = "/* unified-ui:global-styles:end */"


def get_stylesheet() -> str:
    """Get the shared QSS block for all unified-ui widgets."""
    return f"""
{STYLE_MARKER}

QWidget {{
    font-family: {FONTS["family"]};
    font-size: {FONTS["size_sm"]}px;
    color: {COLORS["text_primary"]};
}}

QToolTip {{
    background-color: {COLORS["dark"]};
    color: {COLORS["text_inverse"]};
    border: none;
    border-radius: {RADIUS["sm"]}px;
    padding: {SPACING["xs"]}px {SPACING["sm"]}px;
}}

QLineEdit:focus, QPlainTextEdit:focus, QComboBox:focus,
QDateEdit:focus, QTimeEdit:focus {{
    border: 1px solid {COLORS["primary"]};
}}

QScrollBar:vertical, QScrollBar:horizontal {{
    background-color: transparent;
    width: 8px;
    height: 8px;
    margin: 0;
}}

QScrollBar::handle:vertical, QScrollBar::handle:horizontal {{
    background-color: {COLORS["border_input"]};
    border-radius: 4px;
}}

QScrollBar::add-line, QScrollBar::sub-line {{
    width: 0px;
    height: 0px;
}}

{STYLE_END_MARKER}
"""


def install_global_styles(app: Optional[QApplication] = None) -> bool:
    """Append the shared stylesheet to the application once.

    Args:
        app: Target application. Defaults to QApplication.instance().

    Returns:
        True if the block was injected, False if it was already present
        or no application exists.
    """
    if app is None:
        instance = QApplication.instance()
        app = instance if isinstance(instance, QApplication) else None
    if app is None:
        logger.warning("install_global_styles called without a QApplication")
        return False

    current = app.styleSheet()
    if STYLE_MARKER in current:
        logger.debug("Global styles already installed")
        return False

    app.setStyleSheet(current + get_stylesheet())
    logger.debug("Global styles installed")
    return True
