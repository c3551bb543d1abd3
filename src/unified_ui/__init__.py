"""
Unified UI - PyQt6 component library for admin dashboards.

Subpackages:
- styles: design tokens, size tables and the global stylesheet
- widgets: layout, display, form and overlay widgets
- utils: logging and persisted settings
"""

from .errors import UIContractError, MissingCallbackError

__version__ = "0.1.0"

__all__ = ["UIContractError", "MissingCallbackError", "__version__"]
