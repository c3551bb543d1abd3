"""
Auto-dismissing notification (toast).

State machine:

    visible --(timer fires | dismiss())--> dismissed

While visible and ``duration_ms`` is truthy, the notification owns exactly one
single-shot timer. Leaving the visible state, changing the duration and
dispose() all stop that timer first, so ``on_close`` runs at most once and
never after dispose().
"""

from typing import Callable, Optional

from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QWidget
from PyQt6.QtCore import QEvent, QObject, Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QCloseEvent

from ..styles import (
    FONTS,
    NOTIFICATION_POSITIONS,
    NOTIFICATION_STYLES,
    RADIUS,
    SPACING,
    UI,
    resolve,
)
from ..utils.logger import get_logger
from ..utils.settings import get_settings
from .icons import ICONS

logger = get_logger("notification")

VISIBLE = "visible"
DISMISSED = "dismissed"


class Notification(QFrame):
    """Toast message pinned to a corner of its parent.

    Args:
        message: Text to show.
        kind: success, error, warning or info (unknown -> info).
        on_close: Called once when the notification is dismissed.
        duration_ms: Auto-dismiss delay; 0 disables it. None uses the
            configured default (5000).
        position: top-left, top-right, bottom-left or bottom-right
            (unknown -> bottom-right). None uses the configured default.
    """

    closed = pyqtSignal()

    def __init__(
        self,
        message: str,
        kind: str = "info",
        on_close: Optional[Callable[[], None]] = None,
        duration_ms: Optional[int] = None,
        position: Optional[str] = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        settings = get_settings()
        self.setObjectName("notification")

        self._message = message
        self._on_close = on_close
        self._duration_ms = (
            settings.notification_duration_ms if duration_ms is None else duration_ms
        )
        self._placement = resolve(
            NOTIFICATION_POSITIONS,
            position or settings.notification_position,
            default="bottom-right",
        )
        self._background, self._foreground, icon_key = resolve(
            NOTIFICATION_STYLES, kind, default="info"
        )
        self._state = VISIBLE
        self._disposed = False
        self._timer: Optional[QTimer] = None

        self._setup_ui(ICONS[icon_key])

        if parent is not None:
            parent.installEventFilter(self)

        self._arm_timer()

    def _setup_ui(self, icon) -> None:
        self.setStyleSheet(f"""
            QFrame#notification {{
                background-color: {self._background};
                color: {self._foreground};
                border-radius: {RADIUS["md"]}px;
            }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(
            SPACING["lg"], SPACING["md"], SPACING["lg"], SPACING["md"]
        )
        layout.setSpacing(SPACING["sm"])

        layout.addWidget(icon.render(20, self._foreground))

        self._message_label = QLabel(self._message)
        self._message_label.setWordWrap(True)
        self._message_label.setStyleSheet(f"""
            color: {self._foreground};
            font-size: {FONTS["size_sm"]}px;
            background: transparent;
        """)
        layout.addWidget(self._message_label, 1)

        self._close_button: Optional[QPushButton] = None
        if self._on_close is not None:
            self._close_button = QPushButton(ICONS["close"].glyph)
            self._close_button.setAccessibleName("Close notification")
            self._close_button.setToolTip("Close notification")
            self._close_button.setCursor(Qt.CursorShape.PointingHandCursor)
            self._close_button.setStyleSheet(f"""
                QPushButton {{
                    background: none;
                    border: none;
                    color: {self._foreground};
                    font-size: 16px;
                    margin-left: {SPACING["sm"]}px;
                }}
            """)
            self._close_button.clicked.connect(self.dismiss)
            layout.addWidget(self._close_button)

    # ------------------------------------------------------------
    # State
    # ------------------------------------------------------------

    def state(self) -> str:
        return self._state

    def is_dismissed(self) -> bool:
        return self._state == DISMISSED

    def is_disposed(self) -> bool:
        return self._disposed

    def duration_ms(self) -> int:
        return self._duration_ms

    def colors(self) -> tuple[str, str]:
        return self._background, self._foreground

    def placement(self) -> tuple[str, str]:
        """(vertical, horizontal) edges, e.g. ("bottom", "right")."""
        return self._placement

    def close_button(self) -> Optional[QPushButton]:
        return self._close_button

    # ------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------

    def timer_active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def remaining_ms(self) -> int:
        """Time left before auto-dismiss, or -1 when no timer is pending."""
        if not self.timer_active():
            return -1
        return self._timer.remainingTime()

    def _arm_timer(self) -> None:
        if self._disposed or self._state != VISIBLE or not self._duration_ms:
            return
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.setTimerType(Qt.TimerType.PreciseTimer)
        timer.timeout.connect(self._on_timeout)
        timer.start(self._duration_ms)
        self._timer = timer
        logger.debug("Timer armed for %d ms", self._duration_ms, extra={"widget": self._message})

    def _cancel_timer(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.timeout.disconnect(self._on_timeout)
        self._timer.deleteLater()
        self._timer = None

    def set_duration_ms(self, duration_ms: int) -> None:
        """Change the delay; a pending timer is cancelled and re-armed."""
        if duration_ms == self._duration_ms:
            return
        self._duration_ms = duration_ms
        self._cancel_timer()
        self._arm_timer()

    def _on_timeout(self) -> None:
        self._cancel_timer()
        self._dismiss("timeout")

    # ------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------

    def dismiss(self) -> None:
        """Close now (close button); a pending timer never fires afterwards."""
        self._dismiss("closed")

    def _dismiss(self, reason: str) -> None:
        if self._disposed or self._state == DISMISSED:
            return
        self._cancel_timer()
        self._state = DISMISSED
        self.hide()
        logger.debug("Dismissed (%s)", reason, extra={"widget": self._message})
        if self._on_close is not None:
            self._on_close()
        self.closed.emit()

    def dispose(self) -> None:
        """Tear down: cancel any pending timer; on_close will never run."""
        if self._disposed:
            return
        self._cancel_timer()
        self._disposed = True
        parent = self.parentWidget()
        if parent is not None:
            parent.removeEventFilter(self)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.dispose()
        super().closeEvent(event)

    # ------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------

    def reposition(self) -> None:
        """Pin to the configured corner of the parent widget."""
        parent = self.parentWidget()
        if parent is None:
            return
        self.adjustSize()
        margin = UI["notification_margin"]
        vertical, horizontal = self._placement
        x = margin if horizontal == "left" else parent.width() - self.width() - margin
        y = margin if vertical == "top" else parent.height() - self.height() - margin
        self.move(max(x, 0), max(y, 0))
        self.raise_()

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self.reposition()

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if watched is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self.reposition()
        return super().eventFilter(watched, event)
