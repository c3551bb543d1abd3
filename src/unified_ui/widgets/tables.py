"""
Table widgets for data display.

Row styling is a pure decoration pass: decorate_row() takes a row's own
presentation attributes plus its position and returns a new merged mapping.
Caller-supplied attributes win over injected ones, and caller data is never
mutated. DataTable applies the result and tracks real hover state through
mouse events.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, NamedTuple, Optional, Sequence, Union

from PyQt6.QtWidgets import (
    QFrame,
    QHeaderView,
    QScrollArea,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)
from PyQt6.QtCore import QEvent, Qt
from PyQt6.QtGui import QBrush, QColor

from ..styles import COLORS, FONTS, RADIUS, UI
from ..utils.logger import get_logger
from ..utils.settings import get_settings

logger = get_logger("tables")

Cell = Union[str, QWidget]

HOVER_TRANSITION = "background 0.2s"


@dataclass(frozen=True)
class TableRow:
    """One table row: its cells and its own presentation attributes."""

    cells: tuple[Cell, ...]
    style: Mapping[str, str] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return len(self.cells) > 0


class DecoratedRow(NamedTuple):
    index: int
    row: TableRow
    style: dict[str, str]


def decorate_row(
    style: Mapping[str, str],
    index: int,
    striped: bool = True,
    hover: bool = True,
) -> dict[str, str]:
    """Merge positional presentation attributes into a row style.

    Even rows get the alternate shade when striping is on. With hover on,
    the row also carries the shade to show while the pointer is over it.

    Returns:
        A new mapping; keys present in ``style`` override injected keys.
    """
    injected = {
        "background": (
            COLORS["row_alternate"] if striped and index % 2 == 0 else COLORS["row_default"]
        ),
        "transition": HOVER_TRANSITION if hover else "none",
    }
    if hover:
        injected["hover_background"] = COLORS["row_hover"]
    return {**injected, **style}


def _as_row(row: Any) -> Optional[TableRow]:
    if row is None:
        return None
    if isinstance(row, TableRow):
        return row if row else None
    # A bare string is one cell, not one cell per character
    cells = (row,) if isinstance(row, str) else tuple(row)
    return TableRow(cells) if cells else None


def decorate_rows(
    rows: Iterable[Any],
    striped: bool = True,
    hover: bool = True,
) -> list[DecoratedRow]:
    """Run the decoration pass over a row sequence.

    Rows may be TableRow instances or plain cell sequences. None and empty
    rows are skipped but still occupy their position, so striping follows
    the caller's sequence.
    """
    decorated = []
    for index, raw in enumerate(rows):
        row = _as_row(raw)
        if row is None:
            continue
        decorated.append(DecoratedRow(index, row, decorate_row(row.style, index, striped, hover)))
    return decorated


class TableContainer(QFrame):
    """Rounded, bordered frame that scrolls its table horizontally."""

    def __init__(self, widget: Optional[QWidget] = None, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("table-container")
        self.setStyleSheet(f"""
            QFrame#table-container {{
                background-color: {COLORS["bg_surface"]};
                border: 1px solid {COLORS["border_default"]};
                border-radius: {RADIUS["lg"]}px;
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._scroll.setFrameShape(QFrame.Shape.NoFrame)
        self._scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self._scroll.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        layout.addWidget(self._scroll)

        if widget is not None:
            self.set_widget(widget)

    def set_widget(self, widget: QWidget) -> None:
        self._scroll.setWidget(widget)

    def widget(self) -> Optional[QWidget]:
        return self._scroll.widget()


class DataTable(QTableWidget):
    """Read-only table with striped rows and pointer-tracked hover."""

    ROW_HEIGHT = UI["row_height"]
    HEADER_HEIGHT = UI["header_height"]

    def __init__(
        self,
        headers: Sequence[str],
        rows: Iterable[Any] = (),
        striped: Optional[bool] = None,
        hover: Optional[bool] = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        settings = get_settings()
        self._headers = list(headers)
        self._striped = settings.table_striped if striped is None else striped
        self._hover = settings.table_hover if hover is None else hover
        self._row_styles: list[dict[str, str]] = []
        self._next_index = 0
        self._hovered_row: Optional[int] = None

        self.setColumnCount(len(self._headers))
        self.setHorizontalHeaderLabels(self._headers)

        # Striping is applied per row by the decoration pass
        self.setAlternatingRowColors(False)
        self.setShowGrid(False)
        self.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self.setSelectionMode(QTableWidget.SelectionMode.NoSelection)
        self.setMinimumWidth(UI["table_min_width"])
        self.setMouseTracking(True)
        self.cellEntered.connect(self._on_cell_entered)

        self.setStyleSheet(f"""
            QTableWidget {{
                background-color: {COLORS["bg_surface"]};
                border: none;
                color: {COLORS["text_secondary"]};
            }}
            QTableWidget::item {{
                padding: 16px;
                border-bottom: 1px solid {COLORS["border_default"]};
            }}
            QHeaderView::section {{
                background-color: {COLORS["table_header_bg"]};
                color: {COLORS["text_secondary"]};
                font-weight: {FONTS["weight_semibold"]};
                padding: 16px;
                border: none;
                border-bottom: 1px solid {COLORS["border_default"]};
            }}
        """)

        v_header = self.verticalHeader()
        if v_header is not None:
            v_header.setVisible(False)
            v_header.setDefaultSectionSize(self.ROW_HEIGHT)

        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        header = self.horizontalHeader()
        if header:
            header.setStretchLastSection(True)
            header.setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
            header.setDefaultAlignment(
                Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter
            )
            header.setFixedHeight(self.HEADER_HEIGHT)

        self.set_rows(rows)

    # ------------------------------------------------------------
    # Data
    # ------------------------------------------------------------

    def headers(self) -> list[str]:
        return list(self._headers)

    def set_rows(self, rows: Iterable[Any]) -> None:
        """Replace all rows, re-running the decoration pass from index 0."""
        self.clear_data()
        rows = list(rows)
        for decorated in decorate_rows(rows, self._striped, self._hover):
            self._insert(decorated.row, decorated.style)
        self._next_index = len(rows)
        self._update_height()

    def add_row(self, row: Any) -> None:
        """Append one row, decorated for its position after existing rows."""
        index = self._next_index
        self._next_index += 1
        table_row = _as_row(row)
        if table_row is None:
            return
        self._insert(table_row, decorate_row(table_row.style, index, self._striped, self._hover))
        self._update_height()

    def clear_data(self) -> None:
        self.setRowCount(0)
        self._row_styles.clear()
        self._next_index = 0
        self._hovered_row = None
        self._update_height()

    def row_style(self, row: int) -> dict[str, str]:
        """Decorated presentation attributes of a rendered row."""
        return dict(self._row_styles[row])

    def _insert(self, row: TableRow, style: dict[str, str]) -> None:
        cells = self._fit_cells(row.cells)
        position = self.rowCount()
        self.insertRow(position)

        for col, cell in enumerate(cells):
            item = QTableWidgetItem("" if isinstance(cell, QWidget) else str(cell))
            item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsEditable)
            item.setForeground(QColor(COLORS["text_secondary"]))
            self.setItem(position, col, item)
            if isinstance(cell, QWidget):
                self.setCellWidget(position, col, cell)

        self._row_styles.append(style)
        self._paint_row(position, style.get("background"))

    def _fit_cells(self, cells: tuple[Cell, ...]) -> list[Cell]:
        columns = len(self._headers)
        if len(cells) > columns:
            logger.warning(
                "Row has %d cells for %d headers; extra cells dropped",
                len(cells),
                columns,
            )
            return list(cells[:columns])
        return list(cells) + [""] * (columns - len(cells))

    def _paint_row(self, row: int, color: Optional[str]) -> None:
        if not color:
            return
        qcolor = QColor(color)
        if not qcolor.isValid():
            logger.debug("Ignoring invalid row background %r", color)
            return
        brush = QBrush(qcolor)
        for col in range(self.columnCount()):
            item = self.item(row, col)
            if item is not None:
                item.setBackground(brush)

    # ------------------------------------------------------------
    # Hover
    # ------------------------------------------------------------

    def hovered_row(self) -> Optional[int]:
        return self._hovered_row

    def _on_cell_entered(self, row: int, _column: int) -> None:
        if row == self._hovered_row:
            return
        self._clear_hover()
        style = self._row_styles[row] if 0 <= row < len(self._row_styles) else None
        if style is None or "hover_background" not in style:
            return
        self._hovered_row = row
        self._paint_row(row, style["hover_background"])

    def _clear_hover(self) -> None:
        if self._hovered_row is None:
            return
        row = self._hovered_row
        self._hovered_row = None
        if row < len(self._row_styles):
            self._paint_row(row, self._row_styles[row].get("background"))

    def viewportEvent(self, event: QEvent) -> bool:
        if event.type() == QEvent.Type.Leave:
            self._clear_hover()
        return super().viewportEvent(event)

    def _update_height(self) -> None:
        header = self.horizontalHeader()
        header_height = header.height() if header else self.HEADER_HEIGHT
        self.setFixedHeight(header_height + self.rowCount() * self.ROW_HEIGHT + 2)
