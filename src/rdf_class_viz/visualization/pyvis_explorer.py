"""
Interactive Class Graph Explorer using Pyvis
Renders the extracted class graph as a standalone HTML page, nodes filled
with their resolved ancestry colors
"""

import html
import logging
from collections import Counter
from pathlib import Path
from typing import Mapping, Optional

import networkx as nx
from pyvis.network import Network

from ..core.class_graph_builder import ordered_edges
from ..schemas.visualizer_schema import DEFAULT_COLOR

logger = logging.getLogger(__name__)


class PyvisClassExplorer:
    """Interactive HTML visualization of a class-relationship graph"""

    EDGE_COLOR = '#bdc3c7'

    PHYSICS_OPTIONS = """
    {
      "physics": {
        "barnesHut": {
          "gravitationalConstant": -30000,
          "centralGravity": 0.3,
          "springLength": 200,
          "springConstant": 0.05,
          "damping": 0.1,
          "avoidOverlap": 0.2
        },
        "solver": "barnesHut",
        "stabilization": {
          "enabled": true,
          "iterations": 500
        }
      },
      "interaction": {
        "hover": true,
        "navigationButtons": true
      },
      "edges": {
        "font": {
          "size": 12,
          "align": "middle"
        },
        "arrows": {
          "to": {
            "enabled": true,
            "scaleFactor": 0.5
          }
        }
      }
    }
    """

    def __init__(self, height: str = "900px", width: str = "100%",
                 default_color: str = DEFAULT_COLOR):
        self.height = height
        self.width = width
        self.default_color = default_color

    def build_network(self, graph: nx.DiGraph,
                      colors: Optional[Mapping[str, str]] = None) -> Network:
        colors = colors or {}

        net = Network(
            height=self.height,
            width=self.width,
            bgcolor='#ffffff',
            font_color='#000000',
            notebook=False,
            directed=True,
            cdn_resources='remote'
        )
        net.set_options(self.PHYSICS_OPTIONS)

        for node_id, label in graph.nodes(data="label"):
            net.add_node(
                node_id,
                label=label,
                title=f"{label} ({graph.in_degree(node_id)} in, {graph.out_degree(node_id)} out)",
                color=colors.get(label, self.default_color),
                shape='box'
            )

        for source, target, label in ordered_edges(graph):
            net.add_edge(
                source,
                target,
                label=label,
                title=f"{graph.nodes[source]['label']} → {label} → {graph.nodes[target]['label']}",
                color=self.EDGE_COLOR
            )

        return net

    def render_html(self, graph: nx.DiGraph,
                    colors: Optional[Mapping[str, str]] = None) -> str:
        """Standalone HTML page for the graph, legend included; nothing is written"""
        net = self.build_network(graph, colors)
        logger.info(f"Interactive graph: {len(net.nodes)} nodes, {len(net.edges)} edges")

        html_content = net.generate_html()

        legend_html = self._create_legend_html(colors or {})
        if legend_html:
            html_content = html_content.replace('</body>', f'{legend_html}</body>')
        return html_content

    def create_interactive_graph(self, graph: nx.DiGraph,
                                 colors: Optional[Mapping[str, str]] = None,
                                 output_file: str = "class_graph.html") -> str:
        """Write the graph to an HTML file and return its absolute path"""
        html_content = self.render_html(graph, colors)

        output_path = Path(output_file)
        output_path.write_text(html_content, encoding='utf-8')

        logger.info(f"Visualization saved to: {output_path.absolute()}")
        return str(output_path.absolute())

    def _create_legend_html(self, colors: Mapping[str, str]) -> str:
        """Legend listing each fill color and how many classes use it"""
        if not colors:
            return ""

        entries = "".join(
            f'<div><span style="display:inline-block; width:15px; height:15px; '
            f'background:{html.escape(color)}; border:1px solid #7f8c8d; margin-right:5px;"></span>'
            f'{html.escape(color)} ({count})</div>'
            for color, count in Counter(colors.values()).most_common()
        )
        return f"""
        <div style="position: fixed; top: 10px; right: 10px; background: white; padding: 15px; border-radius: 8px; box-shadow: 0 2px 10px rgba(0,0,0,0.2); font-family: Arial; font-size: 12px; z-index: 1000;">
            <h3 style="margin-top: 0; color: #2c3e50;">Class colors</h3>
            {entries}
        </div>
        """
