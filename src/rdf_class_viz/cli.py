"""
Command-line entry point

Usage:
    rdf-class-viz <ontology_file1> <ontology_file2> ... <graph_filename>

Writes the class graph as DOT to output.dot and prints D2 to stdout.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core.edge_filters import EdgeFilter, PredicateContainsFilter, ScriptEdgeFilter
from .exceptions import RDFClassVizError
from .schemas.visualizer_schema import (
    DEFAULT_COLOR_RULES,
    DEFAULT_NAMESPACES,
    ColorRule,
    VisualizerConfig,
)
from .visualizer import Visualizer

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rdf-class-viz",
        description="Extract a colored class-relationship diagram from an RDF/OWL data graph"
    )
    parser.add_argument('files', nargs='+', metavar='FILE',
                        help='Ontology files followed by the data graph file (last)')
    parser.add_argument('--format', default='turtle', dest='rdf_format',
                        help='RDF syntax of all input files (default: turtle)')
    parser.add_argument('--dot-output', default='output.dot',
                        help='DOT output file (default: output.dot)')
    parser.add_argument('--d2-output', default=None,
                        help='Write D2 to this file instead of stdout')
    parser.add_argument('--html-output', default=None,
                        help='Also write an interactive HTML view')
    parser.add_argument('--color', action='append', default=None, metavar='IRI=COLOR',
                        help='Color rule, first match wins; replaces the default Brick rules')
    parser.add_argument('--no-color', action='store_true',
                        help='Skip ancestry coloring, every class stays white')
    parser.add_argument('--prefix', action='append', default=[], metavar='NAME=IRI',
                        help='Extra namespace abbreviation for labels')

    filters = parser.add_mutually_exclusive_group()
    filters.add_argument('--filter-script', default=None, metavar='PATH',
                         help='Python script defining filter(from_, to, edge) -> bool')
    filters.add_argument('--predicate-contains', default=None, metavar='TEXT',
                         help='Only keep relationships whose predicate contains TEXT')

    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='More logging (-v info, -vv debug)')
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.files) < 2:
        parser.error("at least one ontology file and one graph file are required")
    return args


def build_config(args: argparse.Namespace) -> VisualizerConfig:
    namespaces = DEFAULT_NAMESPACES
    for spec in args.prefix:
        name, sep, iri = spec.partition('=')
        if not sep or not name or not iri:
            raise RDFClassVizError(f"Prefix must look like NAME=IRI, got {spec!r}")
        namespaces = namespaces.with_prefix(name, iri)

    return VisualizerConfig(
        colorize=not args.no_color,
        namespaces=namespaces,
        dot_output=args.dot_output,
        d2_output=args.d2_output,
        html_output=args.html_output
    )


def build_filter(args: argparse.Namespace) -> Optional[EdgeFilter]:
    if args.filter_script:
        return ScriptEdgeFilter.from_file(args.filter_script)
    if args.predicate_contains:
        return PredicateContainsFilter(args.predicate_contains)
    return None


def run(args: argparse.Namespace) -> str:
    color_rules = [ColorRule.parse(spec) for spec in args.color] if args.color else list(DEFAULT_COLOR_RULES)

    visualizer = Visualizer(
        edge_filter=build_filter(args),
        color_rules=color_rules,
        config=build_config(args)
    )

    *ontology_files, graph_file = args.files
    for ontology_file in ontology_files:
        visualizer.add_ontology(ontology_file, args.rdf_format)

    return visualizer.create_graph(graph_file, args.rdf_format)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    try:
        d2_text = run(args)
    except (RDFClassVizError, OSError) as e:
        logger.error(f"Failed to build class graph: {e}")
        return 1

    if not args.d2_output:
        sys.stdout.write(d2_text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
