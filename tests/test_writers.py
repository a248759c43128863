import networkx as nx

from rdf_class_viz.visualization.d2_writer import graph_to_d2lang, write_d2
from rdf_class_viz.visualization.dot_writer import graph_to_dot, write_dot
from rdf_class_viz.visualization.pyvis_explorer import PyvisClassExplorer


def sample_graph():
    graph = nx.DiGraph()
    graph.add_node(0, label="brick_Point")
    graph.add_node(1, label="brick_Equipment")
    graph.add_node(2, label="http://example.org/onto#Room")
    graph.add_edge(0, 1, label="brick_feeds")
    graph.add_edge(1, 2, label="brick_hasLocation")
    return graph


def test_d2_edges_then_fills():
    text = graph_to_d2lang(sample_graph(), {"brick_Point": "Gold", "brick_Equipment": "#32BF84"})
    assert text.splitlines() == [
        "brick_Point -> brick_Equipment: brick_feeds",
        "brick_Equipment -> http://example.org/onto#Room: brick_hasLocation",
        'brick_Point.style.fill: "Gold"',
        'brick_Equipment.style.fill: "#32BF84"',
    ]


def test_d2_without_colors_has_no_fill_lines():
    text = graph_to_d2lang(sample_graph())
    assert "style.fill" not in text
    assert text.endswith("\n")


def test_d2_empty_graph():
    assert graph_to_d2lang(nx.DiGraph()) == ""


def test_write_d2(tmp_path):
    path = tmp_path / "out.d2"
    text = write_d2(sample_graph(), path, {"brick_Point": "Gold"})
    assert path.read_text(encoding="utf-8") == text


def test_dot_contains_nodes_and_edges():
    source = graph_to_dot(sample_graph())
    assert "digraph {" in source
    assert "0 -> 1" in source
    assert "1 -> 2" in source
    assert "brick_feeds" in source
    assert '"http://example.org/onto#Room"' in source
    assert "fill" not in source


def test_write_dot(tmp_path):
    path = tmp_path / "output.dot"
    source = write_dot(sample_graph(), path)
    assert path.read_text(encoding="utf-8") == source


def test_pyvis_html(tmp_path):
    output = tmp_path / "graph.html"
    explorer = PyvisClassExplorer()
    result = explorer.create_interactive_graph(
        sample_graph(), {"brick_Point": "Gold"}, output_file=str(output)
    )

    html = output.read_text(encoding="utf-8")
    assert result == str(output.absolute())
    assert "brick_Point" in html
    assert "Class colors" in html


def test_pyvis_nodes_use_resolved_or_default_color():
    net = PyvisClassExplorer(default_color="#ffffff").build_network(sample_graph(), {"brick_Point": "Gold"})
    colors = {node["label"]: node["color"] for node in net.nodes}
    assert colors["brick_Point"] == "Gold"
    assert colors["brick_Equipment"] == "#ffffff"
    assert len(net.edges) == 2


def interleaved_graph():
    # Edges added as A->B, C->D, A->E; networkx adjacency would group A's edges together
    graph = nx.DiGraph()
    for node_id, label in enumerate(["A", "B", "C", "D", "E"]):
        graph.add_node(node_id, label=label)
    graph.add_edge(0, 1, label="p", index=0)
    graph.add_edge(2, 3, label="q", index=1)
    graph.add_edge(0, 4, label="r", index=2)
    return graph


def test_d2_edges_follow_insertion_order():
    assert graph_to_d2lang(interleaved_graph()).splitlines() == ["A -> B: p", "C -> D: q", "A -> E: r"]


def test_dot_edges_follow_insertion_order():
    source = graph_to_dot(interleaved_graph())
    assert source.index("0 -> 1") < source.index("2 -> 3") < source.index("0 -> 4")


def test_pyvis_render_html_writes_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    html = PyvisClassExplorer().render_html(sample_graph(), {"brick_Point": "Gold"})

    assert "brick_Point" in html
    assert "Class colors" in html
    assert list(tmp_path.iterdir()) == []
