"""Tests for the TGF codec."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from tgfgraph.cli.demo import build_sample_graph
from tgfgraph.codec import dump, dumps, load, loads
from tgfgraph.config import CodecConfig
from tgfgraph.graph import Graph, GraphFormatError, UnresolvedEdgeError


def _vertex_set(graph: Graph) -> set:
    return {(str(v.id), None if v.value is None else str(v.value)) for v in graph}


def _edge_set(graph: Graph) -> set:
    edges = set()
    seen = set()
    for handle, vertex in graph.vertices():
        for half in vertex.edges:
            if half.key in seen:
                continue
            seen.add(half.key)
            neighbor = graph.vertex(half.neighbor)
            pair = frozenset((str(vertex.id), str(neighbor.id)))
            label = None if half.label is None else str(half.label)
            edges.add((pair, label))
    return edges


def test_dumps_layout() -> None:
    graph = Graph()
    v1 = graph.add_vertex(1, "vertex 1")
    v2 = graph.add_vertex(2)
    graph.add_edge("edge between v1 and v2", v1, v2)

    assert dumps(graph) == "1 vertex 1\n2 \n#\n1 2 edge between v1 and v2\n"


def test_dumps_writes_each_edge_once() -> None:
    graph, _ = build_sample_graph()

    text = dumps(graph)
    edge_lines = text.split("#\n", 1)[1].splitlines()

    assert len(edge_lines) == 7
    assert "3 3 edge 4" in edge_lines
    assert edge_lines[0] == "1 2 edge 1"


def test_dumps_keeps_parallel_edges() -> None:
    graph = Graph()
    a = graph.add_vertex("a")
    b = graph.add_vertex("b")
    graph.add_edge("x", a, b)
    graph.add_edge("y", b, a)

    assert dumps(graph).endswith("#\na b x\na b y\n")


def test_dumps_with_dangling_edge_raises() -> None:
    graph = Graph()
    a = graph.add_vertex("a")
    b = graph.add_vertex("b")
    graph.add_edge(None, a, b)
    graph.delete_vertex(b)

    with pytest.raises(UnresolvedEdgeError):
        dumps(graph)

    graph.prune_dangling_edges()
    assert dumps(graph) == "a \n#\n"


def test_round_trip_sample_graph() -> None:
    graph, _ = build_sample_graph()

    restored = loads(dumps(graph))

    assert _vertex_set(restored) == _vertex_set(graph)
    assert _edge_set(restored) == _edge_set(graph)
    assert restored.edge_count() == graph.edge_count()


def test_round_trip_through_file(tmp_path: Path) -> None:
    graph, _ = build_sample_graph()
    path = tmp_path / "test_graph.tgf"

    graph.write(path)
    restored = Graph.read(path)

    assert _vertex_set(restored) == _vertex_set(graph)
    assert _edge_set(restored) == _edge_set(graph)
    assert [p.name for p in tmp_path.iterdir()] == ["test_graph.tgf"]


def test_value_with_spaces_is_normalized() -> None:
    graph = Graph()
    v1 = graph.add_vertex("1", "vertex   with  gaps")
    v2 = graph.add_vertex("2")
    graph.add_edge("edge between v1 and v2", v1, v2)

    restored = loads(dumps(graph))

    values = [v.value for v in restored]
    assert values == ["vertex with gaps", None]
    assert restored.edges(restored.find("1"))[0].label == "edge between v1 and v2"


def test_loads_reads_strings_and_optional_fields() -> None:
    graph = loads("a first value\nb\n\n#\na b\nb b self loop\n")

    a = graph.find("a")
    b = graph.find("b")
    assert graph.vertex(a).value == "first value"
    assert graph.vertex(b).value is None
    assert graph.edges(a)[0].label is None
    assert graph.degree(b) == 3
    assert graph.edges(b)[1].label == "self loop"


def test_loads_duplicate_ids_bind_edges_to_last() -> None:
    graph = loads("x one\nx two\ny\n#\nx y\n")

    first, second, y = graph.handles()
    assert graph.degree(first) == 0
    assert graph.degree(second) == 1
    assert graph.degree(y) == 1


def test_loads_ignores_rest_of_separator_line() -> None:
    graph = loads("a\nb\n# trailing comment\na b label\n")

    assert graph.edge_count() == 1


def test_loads_without_separator_raises() -> None:
    with pytest.raises(GraphFormatError):
        loads("a\nb\n")


def test_loads_unknown_vertex_raises_with_line_number() -> None:
    with pytest.raises(GraphFormatError) as excinfo:
        loads("a\nb\n#\na b\na c oops\n")

    assert excinfo.value.lineno == 5
    assert "c does not exist" in str(excinfo.value)


def test_loads_short_edge_line_raises() -> None:
    with pytest.raises(GraphFormatError):
        loads("a\n#\na\n")


def test_custom_separator() -> None:
    config = CodecConfig(separator="%")
    graph = Graph()
    a = graph.add_vertex("a", "has # inside")
    graph.add_edge(None, a, a)

    text = dumps(graph, config)
    restored = loads(text, config)

    assert text.splitlines()[1] == "%"
    assert restored.vertex(restored.find("a")).value == "has # inside"


def test_dump_failure_keeps_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "graph.tgf"
    path.write_text("old\n#\n", encoding="utf-8")
    graph = Graph()
    a = graph.add_vertex("a")
    b = graph.add_vertex("b")
    graph.add_edge(None, a, b)
    graph.delete_vertex(b)

    with pytest.raises(UnresolvedEdgeError):
        dump(graph, path)

    assert path.read_text(encoding="utf-8") == "old\n#\n"


def test_dump_without_atomic_write(tmp_path: Path) -> None:
    path = tmp_path / "plain.tgf"
    graph, _ = build_sample_graph()

    dump(graph, path, CodecConfig(atomic_write=False))

    assert path.read_text(encoding="utf-8") == dumps(graph)


def test_load_missing_file_raises_oserror(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load(tmp_path / "missing.tgf")


def test_round_trip_independent_of_insertion_order() -> None:
    first = Graph()
    a = first.add_vertex("a", "alpha")
    b = first.add_vertex("b")
    c = first.add_vertex("c", "gamma")
    first.add_edge("ab", a, b)
    first.add_edge("bc", b, c)
    first.add_edge(None, c, a)
    first.add_edge("loop", b, b)

    second = Graph()
    c = second.add_vertex("c", "gamma")
    b = second.add_vertex("b")
    a = second.add_vertex("a", "alpha")
    second.add_edge("loop", b, b)
    second.add_edge(None, a, c)
    second.add_edge("bc", c, b)
    second.add_edge("ab", b, a)

    restored_first = loads(dumps(first))
    restored_second = loads(dumps(second))

    assert _vertex_set(restored_first) == _vertex_set(restored_second) == _vertex_set(first)
    assert _edge_set(restored_first) == _edge_set(restored_second) == _edge_set(first)


def test_form_feed_in_value_does_not_split_vertex() -> None:
    graph = Graph()
    graph.add_vertex("a", "x\x0cy")
    graph.add_vertex("b", "p q")

    restored = loads(dumps(graph))

    assert [(v.id, v.value) for v in restored] == [("a", "x y"), ("b", "p q")]


@pytest.mark.parametrize("value", ["line\u2028sep", "unit\x1csep", "next\x85line", "tab\x0bvert"])
def test_unicode_line_boundaries_stay_in_value(value: str) -> None:
    graph = Graph()
    a = graph.add_vertex("a", value)
    b = graph.add_vertex("b")
    graph.add_edge(value, a, b)

    restored = loads(dumps(graph))

    assert [(v.id, v.value) for v in restored] == [("a", value), ("b", None)]
    assert restored.edges(restored.find("a"))[0].label == value


def test_loads_accepts_crlf_line_endings() -> None:
    graph = loads("a first\r\nb\r\n#\r\na b label\r\n")

    a = graph.find("a")
    assert graph.vertex(a).value == "first"
    assert graph.vertex(graph.find("b")).value is None
    assert graph.edges(a)[0].label == "label"


def test_load_undecodable_file_raises_format_error(tmp_path: Path) -> None:
    path = tmp_path / "binary.tgf"
    path.write_bytes(b"a \xff\xfe\n#\n")

    with pytest.raises(GraphFormatError) as excinfo:
        load(path)

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_dump_keeps_existing_file_mode(tmp_path: Path) -> None:
    path = tmp_path / "graph.tgf"
    path.write_text("old\n#\n", encoding="utf-8")
    path.chmod(0o644)
    graph, _ = build_sample_graph()

    dump(graph, path)

    assert path.stat().st_mode & 0o777 == 0o644
    assert path.read_text(encoding="utf-8") == dumps(graph)


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_dump_new_file_mode_matches_plain_write(tmp_path: Path) -> None:
    graph, _ = build_sample_graph()
    atomic = tmp_path / "atomic.tgf"
    plain = tmp_path / "plain.tgf"

    dump(graph, atomic)
    dump(graph, plain, CodecConfig(atomic_write=False))

    assert atomic.stat().st_mode & 0o777 == plain.stat().st_mode & 0o777


@pytest.mark.parametrize(
    "vertex_id, value, label",
    [
        ("a", "has # inside", None),
        ("a", "two\nlines", None),
        ("a", "carriage\rreturn", None),
        ("a", None, "two\nlines"),
        ("a b", None, None),
        ("", None, None),
        ("#", None, None),
    ],
)
def test_dumps_refuses_fields_that_cannot_be_read_back(vertex_id, value, label) -> None:
    graph = Graph()
    v = graph.add_vertex(vertex_id, value)
    graph.add_edge(label, v, v)

    with pytest.raises(GraphFormatError):
        dumps(graph)


def test_dump_refused_field_keeps_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "graph.tgf"
    path.write_text("old\n#\n", encoding="utf-8")
    graph = Graph()
    graph.add_vertex("a", "broken\nvalue")

    with pytest.raises(GraphFormatError):
        dump(graph, path)

    assert path.read_text(encoding="utf-8") == "old\n#\n"
    assert [p.name for p in tmp_path.iterdir()] == ["graph.tgf"]


def test_separator_inside_edge_label_reads_back() -> None:
    graph = Graph()
    a = graph.add_vertex("a")
    b = graph.add_vertex("b")
    graph.add_edge("issue #4", a, b)

    restored = loads(dumps(graph))

    assert restored.edges(restored.find("a"))[0].label == "issue #4"
