"""Graphviz DOT export of a class graph (labels only, no colors)."""

import logging
from pathlib import Path
from typing import Union

import networkx as nx
from graphviz import Digraph

from ..core.class_graph_builder import ordered_edges

logger = logging.getLogger(__name__)


def graph_to_digraph(graph: nx.DiGraph) -> Digraph:
    dot = Digraph(comment="Class relationships")

    for node_id, label in graph.nodes(data="label"):
        dot.node(str(node_id), label=label)

    for source, target, label in ordered_edges(graph):
        dot.edge(str(source), str(target), label=label)

    return dot


def graph_to_dot(graph: nx.DiGraph) -> str:
    return graph_to_digraph(graph).source


def write_dot(graph: nx.DiGraph, output_path: Union[str, Path]) -> str:
    """Write DOT source to a file and return it"""
    source = graph_to_dot(graph)
    Path(output_path).write_text(source, encoding="utf-8")
    logger.info(f"Wrote DOT graph to {output_path}")
    return source
