"""
Environment configuration for the ontology explorer.

Values are read from the process environment, after loading an optional
`.env` file from the working directory.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


DEFAULT_ONTOLOGY_URL = "https://raw.githubusercontent.com/afernandezortuzar/ProgrEvalOWL/main/ProgrEval-Ontology.owl"
DEFAULT_MEDIA_TYPE = "application/rdf+xml"
DEFAULT_PREFIX = "progreval"
DEFAULT_NAMESPACE = "urn:protege:ontology:progreval#"


class ExplorerConfig(BaseModel):
    """Runtime settings for loading the ontology and querying it."""

    ontology_url: str = Field(default=DEFAULT_ONTOLOGY_URL, description="Location of the ontology document")
    media_type: str = Field(default=DEFAULT_MEDIA_TYPE, description="RDF serialization of the ontology document")
    ontology_prefix: str = Field(default=DEFAULT_PREFIX, description="Prefix name injected for the domain ontology")
    ontology_namespace: str = Field(default=DEFAULT_NAMESPACE, description="Namespace bound to the domain prefix")
    fetch_timeout: float = Field(default=30.0, description="HTTP timeout in seconds for the ontology fetch")
    log_level: str = Field(default="WARNING", description="Logging level for the command line")


def load_config(env_file: Optional[str] = None) -> ExplorerConfig:
    """Build the configuration from environment variables (and `.env`)."""
    load_dotenv(env_file)

    return ExplorerConfig(
        ontology_url=os.getenv("ONTOLOGY_URL", DEFAULT_ONTOLOGY_URL),
        media_type=os.getenv("ONTOLOGY_MEDIA_TYPE", DEFAULT_MEDIA_TYPE),
        ontology_prefix=os.getenv("ONTOLOGY_PREFIX", DEFAULT_PREFIX),
        ontology_namespace=os.getenv("ONTOLOGY_NAMESPACE", DEFAULT_NAMESPACE),
        fetch_timeout=float(os.getenv("ONTOLOGY_FETCH_TIMEOUT", "30")),
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
    )
