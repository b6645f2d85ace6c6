"""
Selects and the "conocimientos previos" grid of the design tab.

Grid columns are fundamental concepts and rows are performances. Every cell
checkbox carries the value "<performance>|<concept>" (both local names);
consumers of submitted selections split on SELECTION_DELIMITER to recover
the pair.
"""

import html
from typing import Iterable, List, Optional, Set, Tuple

from .domain import DesignOption

SELECTION_DELIMITER = "|"
SELECTION_FIELD = "conocimiento_previo"
SELECT_PLACEHOLDER = "Seleccionar..."
NO_DATA_OPTION = "No se encontraron datos"
NOT_ENOUGH_DATA_MESSAGE = "No hay datos suficientes para generar la tabla."
SELECT_ALL_TITLE = "Seleccionar todo"


def encode_selection(row_value: str, column_value: str) -> str:
    return f"{row_value}{SELECTION_DELIMITER}{column_value}"


def decode_selection(encoded: str) -> Tuple[str, str]:
    """Split an encoded cell value into (row local name, column local name).

    Raises:
        ValueError: If the value does not contain the delimiter
    """
    row_value, delimiter, column_value = encoded.partition(SELECTION_DELIMITER)
    if not delimiter:
        raise ValueError(f"Invalid selection value: {encoded!r}")
    return row_value, column_value


class GridSelection:
    """Checked cells of the grid, with per-column "select all" behaviour."""

    def __init__(self, conceptos: List[DesignOption], desempenos: List[DesignOption]):
        self.columns = [c.value for c in conceptos]
        self.rows = [d.value for d in desempenos]
        self.checked: Set[str] = set()

    def column_values(self, col_index: int) -> List[str]:
        column = self.columns[col_index]
        return [encode_selection(row, column) for row in self.rows]

    def toggle_cell(self, encoded: str, checked: bool) -> None:
        row_value, column_value = decode_selection(encoded)
        if row_value not in self.rows or column_value not in self.columns:
            raise ValueError(f"Unknown grid cell: {encoded!r}")
        if checked:
            self.checked.add(encoded)
        else:
            self.checked.discard(encoded)

    def toggle_column(self, col_index: int, checked: bool) -> None:
        """Check or uncheck every cell of a column."""
        for encoded in self.column_values(col_index):
            if checked:
                self.checked.add(encoded)
            else:
                self.checked.discard(encoded)

    def is_column_complete(self, col_index: int) -> bool:
        values = self.column_values(col_index)
        return bool(values) and all(v in self.checked for v in values)

    def is_checked(self, encoded: str) -> bool:
        return encoded in self.checked

    def selected_values(self) -> List[str]:
        """Checked values in grid order (row by row)."""
        return [
            encode_selection(row, column)
            for row in self.rows
            for column in self.columns
            if encode_selection(row, column) in self.checked
        ]

    def selected_pairs(self) -> List[Tuple[str, str]]:
        return [decode_selection(v) for v in self.selected_values()]


def render_select(select_id: str, options: Iterable[DesignOption]) -> str:
    """A <select> listing the options, disabled when there are none."""
    options = list(options)
    parts = [f'<option value="">{SELECT_PLACEHOLDER}</option>']
    disabled = ""
    if not options:
        parts.append(f"<option>{NO_DATA_OPTION}</option>")
        disabled = " disabled"
    else:
        for option in options:
            parts.append(
                f'<option value="{html.escape(option.value, quote=True)}">{html.escape(option.label)}</option>'
            )
    return f'<select id="{html.escape(select_id, quote=True)}"{disabled}>' + "".join(parts) + "</select>"


def render_grid(conceptos: List[DesignOption], desempenos: List[DesignOption],
                selection: Optional[GridSelection] = None) -> str:
    """The knowledge grid: concepts as columns, performances as rows."""
    if not conceptos or not desempenos:
        return f"<p>{NOT_ENOUGH_DATA_MESSAGE}</p>"

    parts = ['<table class="design-grid"><thead><tr><th></th>']
    for index, concepto in enumerate(conceptos):
        all_checked = " checked" if selection is not None and selection.is_column_complete(index) else ""
        parts.append(
            '<th><div class="header-content"><div class="header-label-container">'
            f'<div class="header-label">{html.escape(concepto.label)}</div>'
            f'<div title="{html.escape(concepto.description, quote=True)}" class="info-icon">ℹ️</div>'
            '</div>'
            f'<input type="checkbox" class="select-all-col" data-col="{index}" title="{SELECT_ALL_TITLE}"{all_checked}>'
            '</div></th>'
        )
    parts.append("</tr></thead><tbody>")

    for desempeno in desempenos:
        parts.append(f"<tr><th>{html.escape(desempeno.label)}</th>")
        for index, concepto in enumerate(conceptos):
            value = encode_selection(desempeno.value, concepto.value)
            checked = " checked" if selection is not None and selection.is_checked(value) else ""
            parts.append(
                f'<td><input type="checkbox" name="{SELECTION_FIELD}" '
                f'value="{html.escape(value, quote=True)}" data-col="{index}"{checked}></td>'
            )
        parts.append("</tr>")

    parts.append("</tbody></table>")
    return "".join(parts)
