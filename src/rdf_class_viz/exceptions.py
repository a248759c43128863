"""Errors raised while loading, querying, filtering and coloring."""


class RDFClassVizError(Exception):
    """Base class for all visualizer errors"""


class OntologyLoadError(RDFClassVizError):
    """An ontology or data graph file could not be read or parsed"""


class QueryExecutionError(RDFClassVizError):
    """A SPARQL SELECT or ASK query failed against the store"""


class ColorRuleError(RDFClassVizError):
    """A color rule is malformed"""


class FilterScriptError(RDFClassVizError):
    """A scripted edge filter is missing, raised, or returned a non-boolean"""
