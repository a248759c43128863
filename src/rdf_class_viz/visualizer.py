"""
Class Relationship Visualizer

Loads ontologies and a data graph into one store, extracts the relationships
between the declared classes of related instances, and renders them as D2,
Graphviz DOT and (optionally) interactive HTML.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import networkx as nx
from rdflib.query import ResultRow

from .core.class_graph_builder import ClassGraphBuilder
from .core.color_resolver import ColorResolver
from .core.edge_filters import FilterFn, make_edge_filter
from .exceptions import QueryExecutionError
from .materialization.rdf_loader import RDFLoader, RDFSource
from .schemas.visualizer_schema import ColorRules, VisualizerConfig, VisualizerQueries
from .visualization.d2_writer import graph_to_d2lang
from .visualization.dot_writer import graph_to_dot
from .visualization.pyvis_explorer import PyvisClassExplorer

logger = logging.getLogger(__name__)


class Visualizer:
    """
    Builds a colored class-relationship graph from RDF data
    One instance owns one store and one graph; repeated create_graph calls accumulate
    """

    def __init__(self,
                 edge_filter: Optional[FilterFn] = None,
                 color_rules: Optional[ColorRules] = None,
                 config: Optional[VisualizerConfig] = None):
        self.config = config or VisualizerConfig()
        self.loader = RDFLoader()

        color_resolver = None
        if self.config.colorize:
            color_resolver = ColorResolver(self.store, color_rules, self.config.default_color)

        self.builder = ClassGraphBuilder(
            edge_filter=make_edge_filter(edge_filter),
            color_resolver=color_resolver,
            namespaces=self.config.namespaces,
            default_color=self.config.default_color
        )

    @property
    def store(self):
        return self.loader.store

    @property
    def graph(self) -> nx.DiGraph:
        return self.builder.graph

    @property
    def colors(self) -> Dict[str, str]:
        return self.builder.colors

    def add_ontology(self, content: RDFSource, rdf_format: str = "turtle") -> int:
        """Load an ontology file (path or open file) into the store"""
        return self.loader.load(content, rdf_format)

    def add_ontology_text(self, data: str, rdf_format: str = "turtle") -> int:
        return self.loader.load_text(data, rdf_format)

    def relationship_rows(self) -> List[ResultRow]:
        """Run the class relationship SELECT against the store and read every row"""
        try:
            return list(self.store.query(VisualizerQueries.get_relationship_query()))
        except Exception as e:
            logger.error(f"Relationship query failed: {e}")
            raise QueryExecutionError(f"Relationship query failed: {e}") from e

    def build_graph(self) -> nx.DiGraph:
        """Build the class graph from whatever is currently loaded"""
        return self.builder.build(self.relationship_rows())

    def create_graph(self, data_graph: Optional[RDFSource] = None, rdf_format: str = "turtle") -> str:
        """
        Load the data graph, build the class graph and write the configured outputs
        Returns the D2 text
        """
        if data_graph is not None:
            self.loader.load(data_graph, rdf_format)

        self.build_graph()

        d2_text = self.graph_to_d2lang()
        rendered = self.render_outputs(d2_text)
        self.write_outputs(rendered)
        return d2_text

    def render_outputs(self, d2_text: str) -> List[Tuple[Path, str]]:
        """(path, text) for every configured output, rendered before anything touches disk"""
        rendered: List[Tuple[Path, str]] = []
        if self.config.dot_output:
            rendered.append((Path(self.config.dot_output), self.graph_to_dot()))
        if self.config.html_output:
            explorer = PyvisClassExplorer(default_color=self.config.default_color)
            rendered.append((Path(self.config.html_output), explorer.render_html(self.graph, self.colors)))
        if self.config.d2_output:
            rendered.append((Path(self.config.d2_output), d2_text))
        return rendered

    def write_outputs(self, rendered: List[Tuple[Path, str]]):
        """Write every output or none of them; files written before a failure are removed"""
        written: List[Path] = []
        try:
            for path, text in rendered:
                path.write_text(text, encoding="utf-8")
                written.append(path)
                logger.info(f"Wrote {path}")
        except OSError as e:
            logger.error(f"Failed to write outputs: {e}")
            for path in written:
                path.unlink()
            raise

    def graph_to_d2lang(self) -> str:
        return graph_to_d2lang(self.graph, self.colors)

    def graph_to_dot(self) -> str:
        return graph_to_dot(self.graph)
