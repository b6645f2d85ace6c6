"""
High-level ontology service providing the public interface for loading the ontology.

This is the only public interface into the ontology module. It owns the load
lifecycle (pending, loaded, failed), the user-facing status text and the
store shared by every component that issues queries.
"""

import logging
from typing import Callable, List, Optional

from .datasource import OntologyDataSource
from .domain import LoadStatus, OntologyLoadError, OntologyNotLoadedError, OntologyStats
from .store import OntologyStore

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Cargando ontología..."
LOADED_MESSAGE = "Ontología cargada correctamente."
LOAD_FAILED_MESSAGE = "Error al cargar la ontología."


class OntologyService:
    """Loads the ontology once and hands out the read-only store."""

    def __init__(self, datasource: OntologyDataSource):
        """Initialize the ontology service.

        Args:
            datasource: Source of the serialized ontology document
        """
        self.datasource = datasource
        self.status = LoadStatus.PENDING
        self.status_message = LOADING_MESSAGE
        self.error: Optional[str] = None
        self._store: Optional[OntologyStore] = None
        self._loaded_listeners: List[Callable[[OntologyStore], None]] = []

    @property
    def is_loaded(self) -> bool:
        return self.status == LoadStatus.LOADED

    @property
    def store(self) -> OntologyStore:
        """The loaded store.

        Raises:
            OntologyNotLoadedError: If the ontology has not been loaded successfully
        """
        if self._store is None:
            raise OntologyNotLoadedError(f"Ontology is not loaded (status: {self.status.value})")
        return self._store

    def load(self) -> OntologyStore:
        """Fetch and parse the ontology document.

        Raises:
            OntologyLoadError: If fetching or parsing fails; querying stays disabled
        """
        try:
            document = self.datasource.fetch()
            store = OntologyStore.from_document(document)
        except OntologyLoadError as e:
            logger.error("Error fetching ontology: %s", e)
            self.status = LoadStatus.FAILED
            self.status_message = LOAD_FAILED_MESSAGE
            self.error = str(e)
            raise

        self._store = store
        self.status = LoadStatus.LOADED
        self.status_message = LOADED_MESSAGE
        self.error = None
        logger.info("Ontology loaded: %d triples", len(store))

        listeners, self._loaded_listeners = self._loaded_listeners, []
        for listener in listeners:
            listener(store)
        return store

    def add_loaded_listener(self, listener: Callable[[OntologyStore], None]) -> None:
        """Call `listener` with the store once the ontology is loaded.

        If the ontology is already loaded the listener is called immediately;
        otherwise it is called once, after the next successful load.
        """
        if self._store is not None:
            listener(self._store)
        else:
            self._loaded_listeners.append(listener)

    def get_stats(self) -> OntologyStats:
        return self.store.stats()
