"""
Fixed queries populating the design tab.

Each query returns one row per instance with its label, the instance IRI and
an optional description.
"""

_PROLOGUE = """PREFIX rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#>
PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>
PREFIX dc: <http://purl.org/dc/elements/1.1/>
PREFIX progreval: <urn:protege:ontology:progreval#>
"""


def _instances_of(class_name: str) -> str:
    return _PROLOGUE + f"""
SELECT ?Label ?Instance ?Description
WHERE {{
    ?Instance a progreval:{class_name} .
    ?Instance rdfs:label ?Label .
    OPTIONAL {{ ?Instance dc:description ?Description . }}
}}"""


CONCEPTO = "concepto"
DESEMPENO = "desempeno"
NIVEL = "nivel"

QUERIES = {
    CONCEPTO: _instances_of("Concepto-Fundamental"),
    DESEMPENO: _instances_of("Desempeño"),
    NIVEL: _instances_of("Publico-Objetivo"),
}
