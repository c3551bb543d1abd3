"""
Contract-violation errors.

Widgets never fail on construction or on unknown enumerated values. The only
error they raise is a required handler missing at the moment the user
interaction that needs it actually fires.
"""

from typing import Any, Callable, Optional

from .utils.logger import get_logger

logger = get_logger("errors")


class UIContractError(Exception):
    """A caller broke a widget's usage contract."""


class MissingCallbackError(UIContractError):
    """An interaction fired but its required handler was never supplied."""

    def __init__(self, component: str, callback: str):
        self.component = component
        self.callback = callback
        super().__init__(f"{component}: '{callback}' is required for this interaction")


def require_callback(
    callback: Optional[Callable[..., Any]],
    component: str,
    name: str,
) -> Callable[..., Any]:
    """Return ``callback`` or raise MissingCallbackError if it is None."""
    if callback is None:
        logger.error("%s fired '%s' without a handler", component, name)
        raise MissingCallbackError(component, name)
    return callback
