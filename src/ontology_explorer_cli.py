#!/usr/bin/env python3
"""
Command-line explorer for the ProgrEval ontology.

Loads the ontology (from its URL, a local file or the bundled sample), runs
SPARQL SELECT queries against it and prints the rendered results. Results and
the design tab can also be written as HTML fragments.

Usage:
    cd src
    python ontology_explorer_cli.py                       # interactive mode
    python ontology_explorer_cli.py --query "SELECT ..."  # single query
    python ontology_explorer_cli.py --sample --design design.html

Interactive commands:
    <query lines> + empty line   - Run the query
    stats                        - Show ontology statistics
    help                         - Show this help message
    exit / quit                  - Exit the CLI

Queries without PREFIX declarations get rdf:, rdfs: and progreval: injected.
LIMIT n and ORDER BY RAND() are applied after evaluation.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from config import ExplorerConfig, load_config
from design import DesignService
from ontology import OntologyService
from ontology.datasource import FileOntologyDataSource, HttpOntologyDataSource, OntologyDataSource
from ontology.domain import OntologyLoadError
from ontology.sample import sample_document
from ontology.store import OntologyStore
from query import QueryService
from query.domain import QueryOutcome
from query.normalizer import build_prefix_block
from render.results import RUNNING_MESSAGE, ResultRenderer, render_outcome

HTML_PAGE = """<!DOCTYPE html>
<html lang="es">
<head><meta charset="utf-8"><title>{title}</title></head>
<body>
<div id="status">{status}</div>
<div id="results">{body}</div>
</body>
</html>
"""


class _SampleDataSource(OntologyDataSource):
    def fetch(self):
        return sample_document()


def build_datasource(args: argparse.Namespace, config: ExplorerConfig) -> OntologyDataSource:
    media_type = args.format or config.media_type
    if args.sample:
        return _SampleDataSource()
    if args.file:
        return FileOntologyDataSource(args.file, media_type=media_type)
    return HttpOntologyDataSource(args.url or config.ontology_url, media_type=media_type,
                                  timeout=config.fetch_timeout)


def write_html(path: str, body: str, status: str, title: str = "ProgrEval") -> None:
    Path(path).write_text(HTML_PAGE.format(title=title, status=status, body=body), encoding="utf-8")
    print(f"Wrote {path}")


def design_exporter(path: str, ontology_service: OntologyService) -> Callable[[OntologyStore], None]:
    """Loaded-ontology listener writing the design tab to `path`."""
    def export(store: OntologyStore) -> None:
        design_service = DesignService(store)
        data = asyncio.run(design_service.load_all())
        write_html(path, design_service.render_page(data), ontology_service.status_message,
                   title="ProgrEval - Diseño")
    return export


def print_outcome(renderer: ResultRenderer, outcome: QueryOutcome, as_json: bool = False) -> None:
    if not outcome.succeeded:
        print(f"Error en la consulta: {outcome.error}")
        return

    if as_json:
        rows = [
            {name: value.model_dump(mode="json") for name, value in row.bindings.items()}
            for row in outcome.result.rows
        ]
        print(json.dumps({"variables": outcome.result.variables, "rows": rows}, ensure_ascii=False, indent=2))
        return

    print(renderer.render(outcome.result).to_text())
    print("-" * 40)
    print(f"{len(outcome.result)} row(s) in {outcome.execution_time_ms:.1f} ms")


def read_query() -> Optional[str]:
    """Read query lines until an empty line; None on exit commands."""
    lines: List[str] = []
    prompt = "sparql> "
    while True:
        line = input(prompt)
        if not lines and line.strip().lower() in ("exit", "quit"):
            return None
        if not line.strip():
            if lines:
                return "\n".join(lines)
            continue
        if not lines and line.strip().lower() in ("stats", "help"):
            return line.strip().lower()
        lines.append(line)
        prompt = "   ...> "


def interactive_query(service: QueryService, renderer: ResultRenderer, ontology_service: OntologyService) -> None:
    print("Enter a SPARQL query, finish it with an empty line.")
    print("Commands: stats, help, exit")
    print()

    while True:
        try:
            text = read_query()
            if text is None:
                break
            if text == "help":
                print(__doc__)
                continue
            if text == "stats":
                stats = ontology_service.get_stats()
                for key, value in vars(stats).items():
                    print(f"  {key}: {value}")
                continue

            print(RUNNING_MESSAGE)
            outcome = asyncio.run(service.run(text))
            print_outcome(renderer, outcome)

        except (KeyboardInterrupt, EOFError):
            print("\nExiting...")
            break


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Query the ProgrEval ontology with SPARQL",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode against the published ontology
  python ontology_explorer_cli.py

  # Five random concepts from a local copy
  python ontology_explorer_cli.py --file ProgrEval-Ontology.owl \\
      --query "SELECT ?c WHERE { ?c a progreval:Concepto-Fundamental } ORDER BY RAND() LIMIT 5"

  # Design tab of the bundled sample as HTML
  python ontology_explorer_cli.py --sample --design design.html
        """)

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--url", help="Ontology URL (default: ONTOLOGY_URL or the ProgrEval ontology)")
    source.add_argument("--file", help="Local ontology file")
    source.add_argument("--sample", action="store_true", help="Use the bundled sample ontology")
    parser.add_argument("--format", help="Media type of the ontology document (default: ONTOLOGY_MEDIA_TYPE)")
    parser.add_argument("--query", "-q", help="SPARQL query (if not provided, starts interactive mode)")
    parser.add_argument("--query-file", help="File containing the SPARQL query")
    parser.add_argument("--html", help="Write the rendered results to this HTML file")
    parser.add_argument("--design", help="Write the design tab to this HTML file")
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    config = load_config()

    logging.basicConfig(level=logging.DEBUG if args.verbose else config.log_level,
                        format="%(levelname)s: %(message)s")

    ontology_service = OntologyService(build_datasource(args, config))
    if args.design:
        ontology_service.add_loaded_listener(design_exporter(args.design, ontology_service))

    print(ontology_service.status_message)
    try:
        ontology_service.load()
    except OntologyLoadError as e:
        print(ontology_service.status_message)
        print(f"ERROR: {e}")
        return 1
    print(ontology_service.status_message)

    store = ontology_service.store
    service = QueryService(store, prefix_block=build_prefix_block(config.ontology_prefix, config.ontology_namespace))
    renderer = ResultRenderer()

    query_text = args.query
    if args.query_file:
        query_text = Path(args.query_file).read_text(encoding="utf-8")

    if query_text:
        outcome = asyncio.run(service.run(query_text))
        print_outcome(renderer, outcome, as_json=args.json)
        if args.html:
            write_html(args.html, render_outcome(outcome, renderer), ontology_service.status_message)
        return 0 if outcome.succeeded else 1

    if not args.design:
        interactive_query(service, renderer, ontology_service)
    return 0


if __name__ == "__main__":
    sys.exit(main())
