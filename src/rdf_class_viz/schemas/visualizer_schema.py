"""
Class Visualizer Schema

Defines the configuration, color rules and SPARQL query patterns used to
extract and color class-relationship graphs.
"""

import re
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from ..core.term_rewriter import NamespaceTable
from ..exceptions import ColorRuleError

BRICK = "https://brickschema.org/schema/Brick#"
RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
OWL_NS = "http://www.w3.org/2002/07/owl#"

DEFAULT_NAMESPACES = NamespaceTable((
    ("brick", BRICK),
    ("rdf", RDF_NS),
    ("owl", OWL_NS),
))

DEFAULT_COLOR = "#ffffff"

_IRI_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
_IRI_FORBIDDEN = re.compile(r'[\s<>"{}|\\^`]')


def validate_class_iri(iri: str) -> bool:
    """Validate that a string can be embedded as an absolute IRI in a query"""
    return bool(iri) and bool(_IRI_SCHEME.match(iri)) and not _IRI_FORBIDDEN.search(iri)


@dataclass(frozen=True)
class ColorRule:
    """Fill color for a class and everything below it in the hierarchy"""
    class_iri: str
    color: str

    def __post_init__(self):
        if not validate_class_iri(self.class_iri):
            raise ColorRuleError(f"Invalid class IRI in color rule: {self.class_iri!r}")

    @classmethod
    def parse(cls, spec: str) -> "ColorRule":
        """Parse an `IRI=COLOR` string"""
        class_iri, sep, color = spec.rpartition("=")
        if not sep or not class_iri or not color:
            raise ColorRuleError(f"Color rule must look like IRI=COLOR, got {spec!r}")
        return cls(class_iri.strip(), color.strip())


ColorRules = Union[Sequence[ColorRule], Sequence[Tuple[str, str]], Mapping[str, str]]


DEFAULT_COLOR_RULES: Tuple[ColorRule, ...] = (
    ColorRule(f"{BRICK}Location", "LightCoral"),
    ColorRule(f"{BRICK}Point", "Gold"),
    ColorRule(f"{BRICK}Equipment", "#32BF84"),
)


@dataclass
class VisualizerConfig:
    """Configuration for graph extraction and output"""
    colorize: bool = True
    default_color: str = DEFAULT_COLOR
    namespaces: NamespaceTable = field(default_factory=lambda: DEFAULT_NAMESPACES)
    dot_output: Optional[str] = "output.dot"
    d2_output: Optional[str] = None
    html_output: Optional[str] = None


class VisualizerQueries:
    """SPARQL patterns run against the loaded store"""

    @staticmethod
    def get_relationship_query() -> str:
        """Instance-level relationships between declared classes"""
        return """
            PREFIX rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#>
            PREFIX owl: <http://www.w3.org/2002/07/owl#>
            SELECT ?from ?p ?to WHERE {
                ?x rdf:type ?from .
                ?x ?p ?y .
                ?y rdf:type ?to .
                ?from a owl:Class .
                ?to a owl:Class .
            }
        """

    @staticmethod
    def get_ancestry_query(term_n3: str, class_iri: str) -> str:
        """Is the term the class itself, or below it via subClassOf/equivalentClass?"""
        return f"""
            PREFIX owl: <http://www.w3.org/2002/07/owl#>
            PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>
            ASK {{
                {term_n3} (rdfs:subClassOf|owl:equivalentClass)* <{class_iri}>
            }}
        """


def normalize_color_rules(rules: Optional[ColorRules]) -> List[ColorRule]:
    """Turn a mapping, a list of pairs or a list of ColorRule into an ordered rule list"""
    if rules is None:
        return list(DEFAULT_COLOR_RULES)
    if isinstance(rules, Mapping):
        rules = list(rules.items())

    normalized = []
    for rule in rules:
        if isinstance(rule, ColorRule):
            normalized.append(rule)
        else:
            class_iri, color = rule
            normalized.append(ColorRule(class_iri, color))
    return normalized
