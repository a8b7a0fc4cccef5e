"""
Qt table model for one page of artworks with a checkbox column.

The model only knows the visible page. Every checkbox edit is reported
as the full list of ids now checked on the page (checkedChanged), which
the selection controller reconciles against the global selection.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Set

from PySide6.QtCore import QAbstractTableModel, QModelIndex, Qt, Signal

from artwork_browser.core.models import Artwork

CHECK_COLUMN = 0

# (field, header, sortable)
DATA_COLUMNS = (
    ("title", "Title", True),
    ("place_of_origin", "Place of Origin", True),
    ("artist_display", "Artist", True),
    ("inscriptions", "Inscriptions", False),
    ("date_start", "Start Date", True),
    ("date_end", "End Date", True),
)

HEADER_ALL_CHECKED = "☑"
HEADER_NOT_ALL_CHECKED = "☐"


def _is_checked(value) -> bool:
    if isinstance(value, Qt.CheckState):
        return value == Qt.CheckState.Checked
    return int(value) == Qt.CheckState.Checked.value


class ArtworkTableModel(QAbstractTableModel):
    """Rows for the visible page; column 0 is the selection checkbox."""

    # Full list of ids checked on the visible page, in page order
    checkedChanged = Signal(list)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._rows: List[Artwork] = []
        self._page_order: List[int] = []
        self._checked: Set[int] = set()

    # -- Page data ------------------------------------------------------------

    def set_page(self, records: Sequence[Artwork], checked_ids: Iterable[int] = ()) -> None:
        """Replace all rows. Does not emit checkedChanged."""
        self.beginResetModel()
        self._rows = list(records)
        self._page_order = [record.id for record in self._rows]
        self._checked = set(checked_ids) & set(self._page_order)
        self.endResetModel()
        self.headerDataChanged.emit(Qt.Orientation.Horizontal, CHECK_COLUMN, CHECK_COLUMN)

    def set_checked_ids(self, checked_ids: Iterable[int]) -> None:
        """Sync checkboxes from the controller. Does not emit checkedChanged."""
        new_checked = set(checked_ids) & set(self._page_order)
        if new_checked == self._checked:
            return
        self._checked = new_checked
        if self._rows:
            self.dataChanged.emit(
                self.index(0, CHECK_COLUMN),
                self.index(len(self._rows) - 1, CHECK_COLUMN),
                [Qt.ItemDataRole.CheckStateRole],
            )
        self.headerDataChanged.emit(Qt.Orientation.Horizontal, CHECK_COLUMN, CHECK_COLUMN)

    def checked_ids(self) -> List[int]:
        """Checked ids in page (API) order, regardless of display sorting."""
        return [rid for rid in self._page_order if rid in self._checked]

    def record_at(self, row: int) -> Optional[Artwork]:
        if 0 <= row < len(self._rows):
            return self._rows[row]
        return None

    def all_checked(self) -> bool:
        return bool(self._page_order) and len(self._checked) == len(self._page_order)

    def toggle_all(self) -> None:
        """Check every row, or uncheck every row if all are already checked."""
        if not self._page_order:
            return
        if self.all_checked():
            self._checked = set()
        else:
            self._checked = set(self._page_order)
        self.dataChanged.emit(
            self.index(0, CHECK_COLUMN),
            self.index(len(self._rows) - 1, CHECK_COLUMN),
            [Qt.ItemDataRole.CheckStateRole],
        )
        self.headerDataChanged.emit(Qt.Orientation.Horizontal, CHECK_COLUMN, CHECK_COLUMN)
        self.checkedChanged.emit(self.checked_ids())

    # -- QAbstractTableModel ----------------------------------------------------

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: N802
        return 0 if parent.isValid() else len(self._rows)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: N802
        return 0 if parent.isValid() else 1 + len(DATA_COLUMNS)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):
        if not index.isValid():
            return None
        record = self._rows[index.row()]

        if role == Qt.ItemDataRole.UserRole:
            return record.id

        if index.column() == CHECK_COLUMN:
            if role == Qt.ItemDataRole.CheckStateRole:
                return Qt.CheckState.Checked if record.id in self._checked else Qt.CheckState.Unchecked
            return None

        field_name = DATA_COLUMNS[index.column() - 1][0]
        if role in (Qt.ItemDataRole.DisplayRole, Qt.ItemDataRole.ToolTipRole):
            return record.display(field_name)
        return None

    def setData(self, index: QModelIndex, value, role: int = Qt.ItemDataRole.EditRole) -> bool:  # noqa: N802
        if not index.isValid() or index.column() != CHECK_COLUMN:
            return False
        if role != Qt.ItemDataRole.CheckStateRole:
            return False

        record_id = self._rows[index.row()].id
        if _is_checked(value):
            self._checked.add(record_id)
        else:
            self._checked.discard(record_id)

        self.dataChanged.emit(index, index, [Qt.ItemDataRole.CheckStateRole])
        self.headerDataChanged.emit(Qt.Orientation.Horizontal, CHECK_COLUMN, CHECK_COLUMN)
        self.checkedChanged.emit(self.checked_ids())
        return True

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        base = Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable
        if index.column() == CHECK_COLUMN:
            return base | Qt.ItemFlag.ItemIsUserCheckable
        return base

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.ItemDataRole.DisplayRole):  # noqa: N802
        if orientation != Qt.Orientation.Horizontal:
            return None
        if role == Qt.ItemDataRole.DisplayRole:
            if section == CHECK_COLUMN:
                return HEADER_ALL_CHECKED if self.all_checked() else HEADER_NOT_ALL_CHECKED
            if 0 < section <= len(DATA_COLUMNS):
                return DATA_COLUMNS[section - 1][1]
        if role == Qt.ItemDataRole.ToolTipRole and section == CHECK_COLUMN:
            return "Select or clear every row on this page"
        return None

    def is_sortable(self, column: int) -> bool:
        return 0 < column <= len(DATA_COLUMNS) and DATA_COLUMNS[column - 1][2]

    def sort(self, column: int, order: Qt.SortOrder = Qt.SortOrder.AscendingOrder) -> None:
        """Sort the visible rows. Page order used for selection is unchanged."""
        if not self.is_sortable(column):
            return
        field_name = DATA_COLUMNS[column - 1][0]

        def sort_key(record: Artwork):
            value = getattr(record, field_name)
            if isinstance(value, str):
                value = value.casefold() or None
            # Missing values always sort last
            return (value is None, value if value is not None else 0)

        self.layoutAboutToBeChanged.emit()
        present = [r for r in self._rows if sort_key(r)[0] is False]
        missing = [r for r in self._rows if sort_key(r)[0] is True]
        present.sort(key=sort_key, reverse=order == Qt.SortOrder.DescendingOrder)
        self._rows = present + missing
        self.layoutChanged.emit()
