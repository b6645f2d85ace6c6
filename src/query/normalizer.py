"""
Query text normalization applied before a query is handed to the evaluator.

Comment lines are removed and, when the query declares no prefixes, the
fixed prefix block of the domain is prepended.
"""

import re

from config import DEFAULT_NAMESPACE, DEFAULT_PREFIX

# A line with its terminator (\r\n, \n or \r), or a trailing unterminated line
_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\n|\r)|[^\r\n]+$")
_PREFIX_RE = re.compile(r"PREFIX", re.IGNORECASE)


def build_prefix_block(prefix: str = DEFAULT_PREFIX, namespace: str = DEFAULT_NAMESPACE) -> str:
    """Prefix declarations injected into queries that declare none."""
    return (
        "PREFIX rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#>\n"
        "PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>\n"
        f"PREFIX {prefix}: <{namespace}>\n"
    )


DEFAULT_PREFIX_BLOCK = build_prefix_block()


def strip_comment_lines(text: str) -> str:
    """Remove every line whose first non-whitespace character is '#'."""
    lines = _LINE_RE.findall(text)
    return "".join(line for line in lines if not line.lstrip().startswith("#"))


def has_prefix_declaration(text: str) -> bool:
    return _PREFIX_RE.search(text) is not None


def normalize_query(text: str, prefix_block: str = DEFAULT_PREFIX_BLOCK) -> str:
    """Strip comment lines and inject the default prefixes when none are declared.

    The prefix check runs on the comment-free text, so a commented-out
    PREFIX line does not count as a declaration.
    """
    normalized = strip_comment_lines(text)
    if not has_prefix_declaration(normalized):
        normalized = prefix_block + normalized
    return normalized
