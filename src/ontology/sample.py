"""
Small bundled ProgrEval ontology excerpt.

Used for offline exploration from the command line (`--sample`) and as the
fixture of the test modules.
"""

from .domain import OntologyDocument
from .store import OntologyStore

SAMPLE_LOCATOR = "urn:protege:ontology:progreval"
SAMPLE_MEDIA_TYPE = "text/turtle"

SAMPLE_ONTOLOGY_TTL = '''
@prefix rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix owl: <http://www.w3.org/2002/07/owl#> .
@prefix dc: <http://purl.org/dc/elements/1.1/> .
@prefix progreval: <urn:protege:ontology:progreval#> .

progreval:Concepto-Fundamental a owl:Class ;
    rdfs:label "Concepto fundamental" .

<urn:protege:ontology:progreval#Desempeño> a owl:Class ;
    rdfs:label "Desempeño" .

progreval:Publico-Objetivo a owl:Class ;
    rdfs:label "Público objetivo" .

progreval:requiere a owl:ObjectProperty ;
    rdfs:domain progreval:Concepto-Fundamental ;
    rdfs:range progreval:Concepto-Fundamental .

progreval:nivelDificultad a owl:DatatypeProperty .

progreval:Variables a owl:NamedIndividual, progreval:Concepto-Fundamental ;
    rdfs:label "Variables" ;
    dc:description "Almacenan valores con nombre" ;
    progreval:nivelDificultad "1" .

progreval:Condicionales a owl:NamedIndividual, progreval:Concepto-Fundamental ;
    rdfs:label "Condicionales" ;
    dc:description "Eligen entre \\"caminos\\" si x < y & z" ;
    progreval:requiere progreval:Variables .

progreval:Bucles a owl:NamedIndividual, progreval:Concepto-Fundamental ;
    rdfs:label "Bucles" ;
    progreval:requiere progreval:Condicionales .

progreval:Identificar a owl:NamedIndividual, <urn:protege:ontology:progreval#Desempeño> ;
    rdfs:label "Identificar" ;
    dc:description "Reconoce el concepto en un programa" .

progreval:Aplicar a owl:NamedIndividual, <urn:protege:ontology:progreval#Desempeño> ;
    rdfs:label "Aplicar" .

progreval:Principiante a owl:NamedIndividual, progreval:Publico-Objetivo ;
    rdfs:label "Principiante" .

progreval:Avanzado a owl:NamedIndividual, progreval:Publico-Objetivo ;
    rdfs:label "Avanzado" .
'''


def sample_document() -> OntologyDocument:
    return OntologyDocument(text=SAMPLE_ONTOLOGY_TTL, source_locator=SAMPLE_LOCATOR, media_type=SAMPLE_MEDIA_TYPE)


def build_sample_store() -> OntologyStore:
    """Parse the bundled excerpt into a fresh store."""
    return OntologyStore.from_document(sample_document())
