"""Cross-checks of the adjacency-list core against NetworkX isomorphism tests."""
from itertools import combinations

import networkx as nx

from p4sparse.io.graph6 import nx_to_adjlist
from p4sparse.p4.classify import count_induced_p4s_in_5, is_induced_p4
from p4sparse.p4.reference import (
    count_induced_p4s_in_5_nx,
    is_induced_p4_nx,
    is_p4_sparse_nx,
)
from p4sparse.p4.sparse import is_p4_sparse


def test_reference_canonical_cases():
    assert is_p4_sparse_nx(nx.path_graph(5)) is False
    assert is_p4_sparse_nx(nx.complete_graph(5)) is True
    assert count_induced_p4s_in_5_nx(nx.cycle_graph(5), range(5)) == 5


def test_classifier_matches_reference_on_random_graphs():
    for seed in range(10):
        G = nx.gnp_random_graph(7, 0.45, seed=seed)
        adj, _ = nx_to_adjlist(G)
        for four in combinations(range(7), 4):
            assert is_induced_p4(four, adj) == is_induced_p4_nx(G, four)
        for five in combinations(range(7), 5):
            assert count_induced_p4s_in_5(five, adj) == count_induced_p4s_in_5_nx(G, five)


def test_sparse_matches_reference_on_random_graphs():
    for seed in range(20):
        G = nx.gnp_random_graph(8, 0.3 + 0.02 * seed, seed=seed)
        adj, _ = nx_to_adjlist(G)
        assert is_p4_sparse(adj) == is_p4_sparse_nx(G)


def test_cographs_are_sparse():
    # cographs contain no induced P4 at all
    for seed in range(5):
        G = nx.random_cograph(3, seed=seed)
        adj, _ = nx_to_adjlist(G)
        assert is_p4_sparse(adj) is True
