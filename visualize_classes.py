"""
Visualize Class Relationships
Build a colored class diagram for a Brick model from a Python filter
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent / "src"))

import logging
from rdf_class_viz import Visualizer
from rdf_class_viz.schemas.visualizer_schema import VisualizerConfig

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def keep_brick_relationships(from_: str, to: str, edge: str) -> bool:
    """Only relationships expressed with Brick predicates"""
    return "brickschema.org" in edge


def main():
    if len(sys.argv) < 3:
        print(f"Usage: {sys.argv[0]} <ontology_file1> <ontology_file2> ... <graph_filename>", file=sys.stderr)
        sys.exit(1)

    *ontology_files, graph_file = sys.argv[1:]

    visualizer = Visualizer(
        edge_filter=keep_brick_relationships,
        config=VisualizerConfig(d2_output="output.d2", html_output="output.html")
    )

    for ontology_file in ontology_files:
        visualizer.add_ontology(ontology_file)

    visualizer.create_graph(graph_file)

    print(f"📊 {visualizer.graph.number_of_nodes()} classes, {visualizer.graph.number_of_edges()} relationships")
    print("📁 Files: output.d2, output.dot, output.html")


if __name__ == "__main__":
    main()
