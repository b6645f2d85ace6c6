"""
Design tab service: loads option lists from the ontology and renders the tab.
"""

import logging
from typing import Dict, List, Optional

from query.domain import QueryError, local_name
from query.executor import QueryableStore, QueryExecutor

from .domain import DesignData, DesignOption
from .grid import GridSelection, render_grid, render_select
from .queries import CONCEPTO, DESEMPENO, NIVEL, QUERIES

logger = logging.getLogger(__name__)


class DesignService:
    """Populates the design tab from fixed, modifier-free queries."""

    def __init__(self, store: QueryableStore, queries: Optional[Dict[str, str]] = None):
        """Initialize the design service.

        Args:
            store: Read-only store holding the loaded ontology
            queries: Optional query per option list key. If None, uses QUERIES.
        """
        self.executor = QueryExecutor(store)
        self.queries = queries if queries is not None else QUERIES

    async def fetch_options(self, query_key: str) -> List[DesignOption]:
        """Run the query registered under `query_key` and map rows to options.

        Rows without a label or an instance are skipped. An unknown key, a blank
        query or a failing query yields an empty list.
        """
        query_text = self.queries.get(query_key)
        if not query_text or not query_text.strip():
            return []

        try:
            result_set = await self.executor.execute(query_text)
        except QueryError as e:
            logger.error("Error loading %s: %s", query_key, e)
            return []

        options = []
        for row in result_set.rows:
            label = row.get("Label")
            instance = row.get("Instance")
            if label is None or instance is None:
                continue
            description = row.get("Description")
            options.append(DesignOption(
                label=label.value,
                value=local_name(instance.value),
                description=description.value if description is not None else "",
            ))
        return options

    async def load_all(self) -> DesignData:
        """Fetch the three option lists.

        The queries are awaited one after another: executions against the
        shared store never overlap.
        """
        conceptos = await self.fetch_options(CONCEPTO)
        desempenos = await self.fetch_options(DESEMPENO)
        niveles = await self.fetch_options(NIVEL)
        return DesignData(conceptos=conceptos, desempenos=desempenos, niveles=niveles)

    def new_selection(self, data: DesignData) -> GridSelection:
        return GridSelection(data.conceptos, data.desempenos)

    def render_page(self, data: DesignData, selection: Optional[GridSelection] = None) -> str:
        """Markup for the three selects and the knowledge grid."""
        return "".join([
            render_select("select-concepto", data.conceptos),
            render_select("select-desempeno", data.desempenos),
            render_select("select-nivel", data.niveles),
            '<div id="knowledge-grid-container">',
            render_grid(data.conceptos, data.desempenos, selection),
            "</div>",
        ])
