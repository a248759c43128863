"""
Term rewriting for display labels

Turns RDF terms into short labels by substituting known namespace IRIs
with `prefix_` and trimming N-Triples delimiters.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

from rdflib.term import Node

# Characters stripped from both ends of a rendered term
TERM_DELIMITERS = '<>"'


@dataclass(frozen=True)
class NamespaceTable:
    """Immutable, ordered prefix -> namespace IRI table"""
    entries: Tuple[Tuple[str, str], ...] = ()

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def with_prefix(self, prefix: str, namespace: str) -> "NamespaceTable":
        """Return a copy binding `prefix` to `namespace`, dropping earlier bindings of either"""
        kept = tuple((p, ns) for p, ns in self.entries if p != prefix and ns != namespace)
        return NamespaceTable(kept + ((prefix, namespace),))

    def longest_first(self) -> Tuple[Tuple[str, str], ...]:
        """Entries ordered so a namespace is replaced before any namespace it extends"""
        return tuple(sorted(self.entries, key=lambda entry: len(entry[1]), reverse=True))


def rewrite_text(text: str, namespaces: NamespaceTable) -> str:
    """Rewrite already rendered term text into a label"""
    # Plain substring replacement, an unrelated IRI containing a namespace is rewritten too
    for prefix, namespace in namespaces.longest_first():
        text = text.replace(namespace, f"{prefix}_")
    return text.strip(TERM_DELIMITERS)


def rewrite_term(term: Node, namespaces: NamespaceTable) -> str:
    """Rewrite an RDF term (IRI, literal or blank node) into a display label"""
    return rewrite_text(term.n3(), namespaces)
