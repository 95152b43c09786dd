"""Tests for the adjacency-text and graph6 loaders."""
import networkx as nx
import pytest

from p4sparse.io.adjtext import (
    AdjListFormatError,
    parse_node_line,
    read_adjlist_text,
    load_adjlist_file,
)
from p4sparse.io.graph6 import g6_to_adjlist, g6_to_nx, nx_to_adjlist, adjlist_to_nx


# --- parse_node_line ---

def test_parse_basic():
    assert parse_node_line("0 = 1 2") == (0, [1, 2])


def test_parse_free_whitespace():
    assert parse_node_line("  5=  1   2 \n") == (5, [1, 2])


def test_parse_no_neighbours():
    assert parse_node_line("3 =") == (3, [])
    assert parse_node_line("3") == (3, [])


def test_parse_weighted_skips_weights():
    assert parse_node_line("0 = 1 10 2 20", weighted=True) == (0, [1, 2])


def test_parse_weighted_trailing_neighbour_kept():
    assert parse_node_line("0 = 1 10 2", weighted=True) == (0, [1, 2])


@pytest.mark.parametrize("line", ["x = 1", "0 = 1 a", "-1 = 2", "= 1 2", "0 = 1 = 2", "0 = -3"])
def test_parse_malformed(line):
    with pytest.raises(AdjListFormatError):
        parse_node_line(line)


def test_format_error_is_value_error():
    assert issubclass(AdjListFormatError, ValueError)


# --- read_adjlist_text ---

def test_read_pads_to_referenced_ids():
    adj, vertices = read_adjlist_text(["0 = 1", "1 = 0 4", "", "2 ="])
    assert adj == [[1], [0, 4], [], [], []]
    assert vertices == [0, 1, 2]


def test_read_out_of_order_ids():
    adj, vertices = read_adjlist_text(["2 = 0", "0 = 2"])
    assert adj == [[2], [], [0]]
    assert vertices == [2, 0]


def test_read_repeated_id_replaces():
    adj, vertices = read_adjlist_text(["0 = 1", "1 = 0", "0 = 1 2"])
    assert adj[0] == [1, 2]
    assert vertices == [0, 1]


def test_read_error_reports_line_number():
    with pytest.raises(AdjListFormatError) as exc_info:
        read_adjlist_text(["0 = 1", "oops = 2"])
    assert exc_info.value.lineno == 2
    assert "line 2" in str(exc_info.value)


def test_load_file(tmp_path):
    p = tmp_path / "g.txt"
    p.write_text("0 = 1 5 2 7\n1 = 0 5\n2 = 0 7\n", encoding="utf-8")
    adj, vertices = load_adjlist_file(p, weighted=True)
    assert adj == [[1, 2], [0], [0]]
    assert vertices == [0, 1, 2]


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_adjlist_file(tmp_path / "nope.txt")


# --- graph6 / networkx ---

def test_g6_roundtrip_path():
    g6 = nx.to_graph6_bytes(nx.path_graph(5), header=False).decode("ascii").strip()
    assert g6_to_adjlist(g6) == [[1], [0, 2], [1, 3], [2, 4], [3]]


def test_g6_header_stripped():
    g6 = nx.to_graph6_bytes(nx.cycle_graph(4)).decode("ascii")
    assert g6.startswith(">>graph6<<")
    assert g6_to_nx(g6).number_of_edges() == 4


def test_nx_to_adjlist_relabels_sorted():
    G = nx.Graph([("b", "c"), ("a", "b")])
    adj, mapping = nx_to_adjlist(G)
    assert mapping == {"a": 0, "b": 1, "c": 2}
    assert adj == [[1], [0, 2], [1]]


def test_nx_to_adjlist_drops_self_loops():
    G = nx.Graph([(0, 0), (0, 1)])
    adj, _ = nx_to_adjlist(G)
    assert adj == [[1], [0]]


def test_nx_to_adjlist_rejects_directed():
    with pytest.raises(ValueError):
        nx_to_adjlist(nx.DiGraph([(0, 1)]))
    with pytest.raises(ValueError):
        nx_to_adjlist(nx.MultiGraph([(0, 1), (0, 1)]))


def test_adjlist_to_nx_one_sided_edge():
    G = adjlist_to_nx([[1], [], []])
    assert sorted(G.nodes()) == [0, 1, 2]
    assert list(G.edges()) == [(0, 1)]
