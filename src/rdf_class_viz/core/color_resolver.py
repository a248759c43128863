"""
Ancestry-based Class Coloring

Resolves a fill color for a class by asking the store whether the class is
(transitively) a subclass or equivalent class of each configured rule class.
"""

import logging
from typing import List, Optional

from rdflib import Graph, URIRef
from rdflib.term import Node

from ..exceptions import QueryExecutionError
from ..schemas.visualizer_schema import (
    DEFAULT_COLOR,
    ColorRule,
    ColorRules,
    VisualizerQueries,
    normalize_color_rules,
)

logger = logging.getLogger(__name__)


class ColorResolver:
    """
    Maps class terms to colors using ordered ancestry rules.
    The first rule whose class is an ancestor (or the class itself) wins.
    """

    def __init__(self, store: Graph, rules: Optional[ColorRules] = None,
                 default_color: str = DEFAULT_COLOR):
        self.store = store
        self.rules: List[ColorRule] = normalize_color_rules(rules)
        self.default_color = default_color

    def resolve(self, term: Node) -> str:
        """Return the color of the first matching rule, or the default color"""
        if not isinstance(term, URIRef):
            logger.debug(f"Non-IRI class {term!r} gets default color")
            return self.default_color

        for rule in self.rules:
            if self.is_descendant(term, rule.class_iri):
                logger.debug(f"{term} matches {rule.class_iri} -> {rule.color}")
                return rule.color

        return self.default_color

    def is_descendant(self, term: URIRef, class_iri: str) -> bool:
        """Reflexive-transitive subClassOf/equivalentClass check"""
        query = VisualizerQueries.get_ancestry_query(term.n3(), class_iri)
        try:
            result = self.store.query(query)
        except Exception as e:
            logger.error(f"Ancestry query failed for {term} / {class_iri}: {e}")
            raise QueryExecutionError(f"Ancestry query failed for {term}: {e}") from e

        return bool(result.askAnswer)
