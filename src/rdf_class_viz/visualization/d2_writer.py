"""
D2 Diagram Export

Renders a class graph as D2 source: one `from -> to: predicate` line per
edge followed by one `label.style.fill` line per colored class.
"""

import logging
from pathlib import Path
from typing import List, Mapping, Optional, Union

import networkx as nx

from ..core.class_graph_builder import ordered_edges

logger = logging.getLogger(__name__)


def graph_to_d2lang(graph: nx.DiGraph, colors: Optional[Mapping[str, str]] = None) -> str:
    """Render the graph (and optional label -> color fills) as D2 text"""
    lines: List[str] = []

    for source, target, label in ordered_edges(graph):
        lines.append(f"{graph.nodes[source]['label']} -> {graph.nodes[target]['label']}: {label}")

    for node_label, color in (colors or {}).items():
        lines.append(f'{node_label}.style.fill: "{color}"')

    return "".join(f"{line}\n" for line in lines)


def write_d2(graph: nx.DiGraph, output_path: Union[str, Path],
             colors: Optional[Mapping[str, str]] = None) -> str:
    """Write D2 text to a file and return it"""
    text = graph_to_d2lang(graph, colors)
    Path(output_path).write_text(text, encoding="utf-8")
    logger.info(f"Wrote D2 diagram to {output_path}")
    return text
