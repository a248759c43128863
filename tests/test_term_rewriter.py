from rdflib import BNode, Literal, URIRef

from rdf_class_viz.core.term_rewriter import NamespaceTable, rewrite_term, rewrite_text
from rdf_class_viz.schemas.visualizer_schema import DEFAULT_NAMESPACES


def test_rewrite_known_namespaces():
    assert rewrite_term(URIRef("https://brickschema.org/schema/Brick#Point"), DEFAULT_NAMESPACES) == "brick_Point"
    assert rewrite_term(URIRef("http://www.w3.org/2002/07/owl#Thing"), DEFAULT_NAMESPACES) == "owl_Thing"
    assert rewrite_term(URIRef("http://www.w3.org/1999/02/22-rdf-syntax-ns#type"), DEFAULT_NAMESPACES) == "rdf_type"


def test_unknown_namespace_only_trimmed():
    assert rewrite_term(URIRef("http://example.org/onto#Pump"), DEFAULT_NAMESPACES) == "http://example.org/onto#Pump"


def test_literal_quotes_are_trimmed():
    assert rewrite_term(Literal("hello"), DEFAULT_NAMESPACES) == "hello"


def test_blank_node_passes_through():
    node = BNode("b0")
    assert rewrite_term(node, DEFAULT_NAMESPACES) == "_:b0"


def test_rewrite_is_deterministic():
    term = URIRef("https://brickschema.org/schema/Brick#Air_Handling_Unit")
    assert rewrite_term(term, DEFAULT_NAMESPACES) == rewrite_term(term, DEFAULT_NAMESPACES)


def test_substring_replacement_is_not_iri_aware():
    text = "<http://example.org/alias?of=https://brickschema.org/schema/Brick#Point>"
    assert rewrite_text(text, DEFAULT_NAMESPACES) == "http://example.org/alias?of=brick_Point"


def test_namespace_table_with_prefix_extends_and_replaces():
    table = NamespaceTable((("ex", "http://example.org/a#"),))
    extended = table.with_prefix("bldg", "http://example.org/building#")
    assert len(extended) == 2
    assert rewrite_term(URIRef("http://example.org/building#AHU1"), extended) == "bldg_AHU1"

    replaced = extended.with_prefix("ex", "http://example.org/b#")
    assert ("ex", "http://example.org/b#") in list(replaced)
    assert ("ex", "http://example.org/a#") not in list(replaced)
    # the source table is untouched
    assert len(table) == 1


def test_more_specific_namespace_wins():
    table = NamespaceTable((
        ("ex", "http://example.org/"),
        ("bldg", "http://example.org/building#"),
    ))
    assert rewrite_term(URIRef("http://example.org/building#AHU1"), table) == "bldg_AHU1"
    assert rewrite_term(URIRef("http://example.org/Site"), table) == "ex_Site"


def test_rebinding_a_namespace_drops_old_prefix():
    table = DEFAULT_NAMESPACES.with_prefix("b", "https://brickschema.org/schema/Brick#")
    assert "brick" not in [prefix for prefix, _ in table]
    assert rewrite_term(URIRef("https://brickschema.org/schema/Brick#Point"), table) == "b_Point"
