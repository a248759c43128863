"""
RDF Class Visualizer

Extracts class-to-class relationship graphs from RDF/OWL knowledge graphs for:
- Ontology-aware node coloring via subclass ancestry
- D2 diagram generation
- Graphviz DOT export
- Interactive HTML exploration
"""

__version__ = "0.1.0"

from .visualizer import Visualizer

__all__ = ["Visualizer", "__version__"]
