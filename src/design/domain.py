"""
Domain models for the design tab.
"""

from typing import List

from pydantic import BaseModel, Field


class DesignOption(BaseModel):
    """An ontology instance offered as a choice in the design tab."""

    label: str = Field(..., description="Human-readable label (rdfs:label)")
    value: str = Field(..., description="Local name of the instance IRI")
    description: str = Field("", description="Description (dc:description), empty if absent")


class DesignData(BaseModel):
    """Option lists backing the three selects and the knowledge grid."""

    conceptos: List[DesignOption] = Field(default_factory=list, description="Fundamental concepts (grid columns)")
    desempenos: List[DesignOption] = Field(default_factory=list, description="Performances (grid rows)")
    niveles: List[DesignOption] = Field(default_factory=list, description="Target audiences")
