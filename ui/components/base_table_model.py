# ui/components/base_table_model.py

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from PyQt5.QtCore import QAbstractTableModel, Qt, QModelIndex

# A column is (key, header) or (key, header, formatter)
Column = Union[Tuple[str, str], Tuple[str, str, Callable[[Any], str]]]


class BaseTableModel(QAbstractTableModel):
    """
    Base reusable table model with:
    - items storage (API dicts)
    - column configuration
    - optional per-column value formatters
    """

    def __init__(self, items: Optional[List[Dict[str, Any]]] = None,
                 columns: Optional[Sequence[Column]] = None):
        super().__init__()
        self._items = list(items or [])
        self._columns = list(columns or [])

    def rowCount(self, parent=QModelIndex()):
        return len(self._items)

    def columnCount(self, parent=QModelIndex()):
        return len(self._columns)

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole:
            return None

        if orientation == Qt.Horizontal:
            return self._columns[section][1]

        return section + 1

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None

        if role != Qt.DisplayRole:
            return None

        item = self._items[index.row()]
        column = self._columns[index.column()]
        value = self.value(item, column[0])
        if len(column) > 2:
            return column[2](value)
        if isinstance(value, bool):
            return "Yes" if value else "No"
        if isinstance(value, (list, tuple)):
            return ", ".join(str(v) for v in value)
        return "" if value is None else str(value)

    @staticmethod
    def value(item: Dict[str, Any], key: str) -> Any:
        """Read a column value; dotted keys reach into nested dicts."""
        value: Any = item
        for part in key.split("."):
            if not isinstance(value, dict):
                return None
            value = value.get(part)
        return value

    def set_items(self, items: List[Dict[str, Any]]):
        self.beginResetModel()
        self._items = list(items or [])
        self.endResetModel()

    def set_columns(self, columns: Sequence[Column]):
        self.beginResetModel()
        self._columns = list(columns)
        self.endResetModel()

    def get_item(self, row: int):
        """Return the underlying item at `row` or None if out of range."""
        if row is None:
            return None
        if 0 <= int(row) < len(self._items):
            return self._items[int(row)]
        return None
