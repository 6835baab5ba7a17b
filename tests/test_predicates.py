"""Tests for graphclass.properties module."""
import logging
import types
from itertools import combinations

import networkx as nx

import graphclass.properties.predicates as predicates_mod
from graphclass.model.adjacency import build_graph
from graphclass.properties.predicates import (
    GraphProperties,
    TRIANGLE_WITH_EDGE,
    TRIANGLE_WITH_ISOLATED_VERTEX,
    classify,
    excluded_shape,
    is_acyclic,
    is_numbered_tree,
    is_subcyclic,
    is_subcyclic_exception,
    recompute,
)

TRIANGLE = [("A", "B"), ("B", "C"), ("C", "A")]
STAR = [("X", "A"), ("X", "B"), ("X", "C")]


# --- small fixed graphs ---

def test_single_edge_all_true():
    props, diags = classify(build_graph([("A", "B")]))
    assert props == GraphProperties(True, True, True, True)
    assert diags == []


def test_single_vertex_is_tree():
    props, diags = classify(build_graph([], isolated=["A"]))
    assert props.is_tree
    assert props.is_numbered_tree
    assert diags == []


def test_triangle():
    props, diags = classify(build_graph(TRIANGLE))
    assert props.is_acyclic is False
    assert props.is_tree is False
    # all pairs are adjacent, so no chord can be probed
    assert props.is_subcyclic is True
    assert props.is_numbered_tree is False
    assert len(diags) == 1
    assert "Found cycle" in diags[0]
    for v in "ABC":
        assert v in diags[0]


def test_star_probes_every_missing_pair(caplog):
    g = build_graph(STAR)
    with caplog.at_level(logging.DEBUG, logger="graphclass.properties.predicates"):
        props, diags = classify(g)
    chords = [r.getMessage() for r in caplog.records if r.getMessage().startswith("chord")]
    assert chords == [
        "chord A-B -> 1 cycle(s)",
        "chord A-C -> 1 cycle(s)",
        "chord B-C -> 1 cycle(s)",
    ]
    assert props == GraphProperties(True, True, True, True)
    assert diags == []


def test_triangle_with_pendant_is_excluded():
    g = build_graph(TRIANGLE + [("C", "D")])
    assert excluded_shape(g) == TRIANGLE_WITH_EDGE
    assert is_subcyclic_exception(g) is False
    props, diags = classify(g)
    assert props.is_subcyclic is False
    assert props.is_tree is False
    assert props.is_numbered_tree is False  # 4 edges, 4 vertices
    assert len(diags) == 2
    assert "Found cycle" in diags[0]
    assert TRIANGLE_WITH_EDGE in diags[1]


def test_triangle_with_isolated_vertex_reaches_edge_count_branch():
    g = build_graph(TRIANGLE, isolated=["D"])
    assert excluded_shape(g) == TRIANGLE_WITH_ISOLATED_VERTEX
    props, diags = classify(g)
    assert props.is_acyclic is False
    assert props.is_subcyclic is False
    assert props.is_tree is False
    # 3 edges == 4 vertices - 1
    assert props.is_numbered_tree is True
    assert TRIANGLE_WITH_ISOLATED_VERTEX in diags[1]


def test_plain_triangle_is_not_excluded():
    assert excluded_shape(build_graph(TRIANGLE)) is None
    assert is_subcyclic_exception(build_graph(TRIANGLE)) is True


def test_two_disjoint_edges_reuse_cycle_counter(monkeypatch):
    g = build_graph([("A", "B"), ("C", "D")])
    with g.temporary_edge("A", "C"):
        expected = predicates_mod.simple_cycles(g).count
    assert expected == 0

    seen = []
    real = predicates_mod.simple_cycles

    def recording(graph):
        rec = real(graph)
        seen.append((graph.edge_count(), rec.count))
        return rec

    monkeypatch.setattr(predicates_mod, "simple_cycles", recording)
    props, diags = classify(g)
    # acyclicity on the original graph, then the A-C probe with one extra edge
    assert seen == [(2, 0), (3, expected)]
    assert props.is_acyclic is True
    assert props.is_subcyclic is False
    assert props.is_tree is False
    assert props.is_numbered_tree is False
    assert diags == ["Subcyclicity violated at vertices A-C"]


def test_square_fails_both():
    g = build_graph([("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")])
    props, diags = classify(g)
    assert props == GraphProperties(False, False, False, False)
    assert len(diags) == 2
    assert diags[1] == "Subcyclicity violated at vertices A-C"


# --- decision table ---

def test_numbered_tree_table():
    one_short = build_graph([("A", "B"), ("B", "C")])
    not_short = build_graph(TRIANGLE)
    assert is_numbered_tree(not_short, True, True) is True
    assert is_numbered_tree(not_short, True, False) is False
    assert is_numbered_tree(one_short, False, True) is False
    assert is_numbered_tree(one_short, False, False) is True
    assert is_numbered_tree(not_short, False, False) is False


# --- emit sink ---

def test_predicates_emit_one_line_each():
    lines = []
    g = build_graph(TRIANGLE + [("C", "D")])
    assert is_acyclic(g, lines.append) is False
    assert is_subcyclic(g, lines.append) is False
    assert len(lines) == 2


def test_predicates_default_sink_is_silent():
    g = build_graph([("A", "B"), ("C", "D")])
    assert is_acyclic(g) is True
    assert is_subcyclic(g) is False


# --- invariants ---

def test_classify_is_idempotent_and_restores_graph():
    for edges in ([("A", "B"), ("C", "D")], STAR, TRIANGLE + [("C", "D")]):
        g = build_graph(edges)
        before = g.snapshot()
        first = classify(g)
        assert g.snapshot() == before
        second = classify(g)
        assert g.snapshot() == before
        assert first == second
        assert recompute(g) == first[0]


def _all_graphs_on(labels):
    pairs = list(combinations(labels, 2))
    for mask in range(1 << len(pairs)):
        edges = [p for i, p in enumerate(pairs) if mask >> i & 1]
        yield build_graph(edges, isolated=labels)


def test_tree_is_acyclic_and_subcyclic_exhaustive():
    for g in _all_graphs_on(["A", "B", "C", "D"]):
        props, _ = classify(g)
        assert props.is_tree == (props.is_acyclic and props.is_subcyclic)


def test_acyclic_matches_networkx_forest():
    for g in _all_graphs_on(["A", "B", "C", "D"]):
        assert is_acyclic(g) == nx.is_forest(g.to_networkx())


def test_tree_matches_networkx_tree():
    for g in _all_graphs_on(["A", "B", "C", "D"]):
        assert recompute(g).is_tree == nx.is_tree(g.to_networkx())


def test_predicates_submodule_not_shadowed():
    import graphclass.properties as properties

    assert isinstance(properties.predicates, types.ModuleType)
    assert properties.predicates.simple_cycles is predicates_mod.simple_cycles
    assert callable(properties.classify)
