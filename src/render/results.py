"""
Rendering of query result sets for human consumption.

Each row becomes a block titled "Ejemplo N" holding one label/value pair per
header. Named resources are shown as links labelled with their local name;
every other value is HTML-escaped.
"""

import html
from typing import List, Optional

from pydantic import BaseModel, Field

from query.domain import BoundValue, QueryOutcome, ResultSet

NO_RESULTS_MESSAGE = "No se encontraron resultados."
RUNNING_MESSAGE = "Ejecutando consulta..."
QUERY_ERROR_PREFIX = "Error en la consulta: "
ROW_TITLE = "Ejemplo {index}"


class RenderedCell(BaseModel):
    """One label/value pair of a rendered row."""

    label: str = Field(..., description="Header name without the '?' marker")
    text: str = Field("", description="Plain display text, empty for unbound values")
    html: str = Field("", description="Display markup, empty for unbound values")


class RenderedRow(BaseModel):
    """A rendered result row."""

    index: int = Field(..., description="1-based sequential example number")
    title: str = Field(..., description="Row heading")
    cells: List[RenderedCell] = Field(default_factory=list, description="Cells in header order")


class RenderedResults(BaseModel):
    """Display-ready structure for a whole result set."""

    headers: List[str] = Field(default_factory=list, description="Headers in display order")
    rows: List[RenderedRow] = Field(default_factory=list, description="Rendered rows")
    placeholder: Optional[str] = Field(None, description="Informational message shown instead of rows")

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def to_html(self) -> str:
        """Markup for the results container."""
        if self.placeholder is not None:
            return render_status(self.placeholder)

        parts = []
        for row in self.rows:
            parts.append('<div class="result-row">')
            parts.append(f'<h3 class="row-header">{html.escape(row.title)}</h3>')
            for cell in row.cells:
                parts.append('<div class="data-pair">')
                parts.append(f'<span class="data-label">{html.escape(cell.label)}:</span>')
                parts.append(f'<div class="data-value">{cell.html}</div>')
                parts.append('</div>')
            parts.append('</div>')
        return "".join(parts)

    def to_text(self) -> str:
        """Plain-text rendering for terminals."""
        if self.placeholder is not None:
            return self.placeholder

        lines = []
        for row in self.rows:
            lines.append(row.title)
            for cell in row.cells:
                lines.append(f"  {cell.label}: {cell.text}")
        return "\n".join(lines)


def derive_headers(result_set: ResultSet) -> List[str]:
    """Declared output variables, else the first row's keys in first-seen order."""
    if result_set.variables:
        return list(result_set.variables)
    return result_set.first_row_keys()


def format_value(value: Optional[BoundValue]) -> str:
    """Display markup for a bound value; unbound values render as nothing.

    Literals go through html.escape, so an apostrophe becomes `&#x27;` (the
    browser UI of the published explorer writes `&#039;`; both decode alike).
    """
    if value is None:
        return ""
    if value.is_named_resource:
        target = html.escape(value.value, quote=True)
        return f'<a href="{target}" title="{target}" target="_blank">{html.escape(value.local_name)}</a>'
    return html.escape(value.value, quote=True)


def display_text(value: Optional[BoundValue]) -> str:
    if value is None:
        return ""
    if value.is_named_resource:
        return value.local_name
    return value.value


def render_status(message: str) -> str:
    return f'<div class="status">{html.escape(message)}</div>'


def render_error(message: str) -> str:
    return f'<div class="error">{html.escape(QUERY_ERROR_PREFIX + message)}</div>'


class ResultRenderer:
    """Turns result sets into display-ready row blocks."""

    def __init__(self, no_results_message: str = NO_RESULTS_MESSAGE):
        self.no_results_message = no_results_message

    def render(self, result_set: ResultSet) -> RenderedResults:
        if not result_set:
            return RenderedResults(headers=derive_headers(result_set), placeholder=self.no_results_message)

        headers = derive_headers(result_set)
        rows = []
        for index, row in enumerate(result_set.rows, start=1):
            cells = []
            for header in headers:
                value = row.get(header)
                cells.append(RenderedCell(
                    label=header.replace("?", ""),
                    text=display_text(value),
                    html=format_value(value),
                ))
            rows.append(RenderedRow(index=index, title=ROW_TITLE.format(index=index), cells=cells))

        return RenderedResults(headers=headers, rows=rows)

    def render_html(self, result_set: ResultSet) -> str:
        return self.render(result_set).to_html()


def render_outcome(outcome: QueryOutcome, renderer: Optional[ResultRenderer] = None) -> str:
    """Markup for the results area: the rendered rows, or the inline error block."""
    if not outcome.succeeded:
        return render_error(outcome.error or "")
    renderer = renderer if renderer is not None else ResultRenderer()
    return renderer.render_html(outcome.result)
