"""
Class Graph Builder

Turns relationship query rows into a deduplicated, labeled directed graph
of classes. Row iteration (filtering, labeling, coloring) is kept separate
from graph mutation, which happens once all rows have been consumed.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

import networkx as nx

from .color_resolver import ColorResolver
from .edge_filters import EdgeFilter, make_edge_filter
from .term_rewriter import NamespaceTable, rewrite_term
from ..schemas.visualizer_schema import DEFAULT_COLOR, DEFAULT_NAMESPACES

logger = logging.getLogger(__name__)

PendingEdge = Tuple[str, str, str]


def ordered_edges(graph: nx.DiGraph) -> List[Tuple[int, int, str]]:
    """(source, target, label) in first-insertion order rather than grouped by source"""
    edges = sorted(graph.edges(data=True), key=lambda edge: edge[2].get("index", 0))
    return [(source, target, data.get("label")) for source, target, data in edges]


class ClassGraphBuilder:
    """
    Builds a class-relationship graph from (from, p, to) rows.

    Nodes are integer ids carrying a `label` attribute, one per distinct label;
    edges carry the predicate label. A repeated (from, to) pair keeps a single
    edge labeled by the last row seen.
    """

    def __init__(self,
                 edge_filter: Optional[EdgeFilter] = None,
                 color_resolver: Optional[ColorResolver] = None,
                 namespaces: NamespaceTable = DEFAULT_NAMESPACES,
                 default_color: str = DEFAULT_COLOR):
        self.edge_filter = make_edge_filter(edge_filter)
        self.color_resolver = color_resolver
        self.namespaces = namespaces
        self.default_color = default_color

        self.graph = nx.DiGraph()
        self.nodes: Dict[str, int] = {}
        self.colors: Dict[str, str] = {}

    @property
    def colorize(self) -> bool:
        return self.color_resolver is not None

    def build(self, rows: Iterable[Any]) -> nx.DiGraph:
        """Consume all rows, then insert the surviving edges into the graph"""
        pending = self.collect_edges(rows)
        self.insert_edges(pending)

        logger.info(
            f"Class graph has {self.graph.number_of_nodes()} nodes and "
            f"{self.graph.number_of_edges()} edges"
        )
        return self.graph

    def collect_edges(self, rows: Iterable[Any]) -> List[PendingEdge]:
        """Filter, label and color each row; no graph mutation happens here"""
        pending: List[PendingEdge] = []
        skipped = 0

        for row in rows:
            from_term, p_term, to_term = row["from"], row["p"], row["to"]

            if not self.edge_filter.decide(from_term.n3(), to_term.n3(), p_term.n3()):
                skipped += 1
                continue

            from_label = rewrite_term(from_term, self.namespaces)
            self._cache_color(from_label, from_term)

            to_label = rewrite_term(to_term, self.namespaces)
            self._cache_color(to_label, to_term)

            edge_label = rewrite_term(p_term, self.namespaces)
            pending.append((from_label, to_label, edge_label))

        logger.info(f"Collected {len(pending)} relationships ({skipped} filtered out)")
        return pending

    def insert_edges(self, pending: Iterable[PendingEdge]):
        for from_label, to_label, edge_label in pending:
            from_idx = self._node_for(from_label)
            to_idx = self._node_for(to_label)
            if self.graph.has_edge(from_idx, to_idx):
                # One edge per ordered pair; a later row overwrites the label but keeps the position
                self.graph.edges[from_idx, to_idx]["label"] = edge_label
            else:
                self.graph.add_edge(from_idx, to_idx, label=edge_label, index=self.graph.number_of_edges())

    def color_for(self, label: str) -> str:
        """Resolved color for a label, default when uncolored or unknown"""
        return self.colors.get(label, self.default_color)

    def node_label(self, node_id: int) -> str:
        return self.graph.nodes[node_id]["label"]

    def _node_for(self, label: str) -> int:
        """Look up or create the node for a label"""
        node_id = self.nodes.get(label)
        if node_id is None:
            node_id = len(self.nodes)
            self.graph.add_node(node_id, label=label)
            self.nodes[label] = node_id
        return node_id

    def _cache_color(self, label: str, term):
        if not self.colorize or label in self.colors:
            return
        self.colors[label] = self.color_resolver.resolve(term)
