import networkx as nx
import numpy as np
import pytest
import scipy.sparse as sp

from bisectlab.errors import InvalidArgument
from bisectlab.utils.graph import (
    as_adjacency,
    as_coordinates,
    check_labeling,
    component_labels,
    induced_subgraph,
    labels_to_parts,
    laplacian,
)
from bisectlab.utils.ordering import split_by_order


def test_as_adjacency_drops_self_loops():
    A = np.array(
        [
            [3, 1, 0],
            [1, 0, 2],
            [0, 2, 5],
        ],
        dtype=float,
    )
    got = as_adjacency(A)
    assert sp.issparse(got)
    assert np.all(got.diagonal() == 0)
    assert got[1, 2] == 2.0
    assert got.nnz == 4


def test_as_adjacency_from_networkx_uses_weights():
    G = nx.Graph()
    G.add_edge(0, 1, weight=2.5)
    G.add_edge(1, 2)
    A = as_adjacency(G)
    assert A.shape == (3, 3)
    assert A[0, 1] == 2.5
    assert A[2, 1] == 1.0


@pytest.mark.parametrize(
    "bad",
    [
        np.array([[0, 1], [0, 0]], dtype=float),
        np.array([[0, -1], [-1, 0]], dtype=float),
        np.zeros((2, 3)),
    ],
)
def test_as_adjacency_rejects_malformed_input(bad):
    with pytest.raises(InvalidArgument):
        as_adjacency(bad)


def test_as_adjacency_rejects_directed_graph():
    with pytest.raises(InvalidArgument):
        as_adjacency(nx.DiGraph([(0, 1)]))


def test_as_coordinates_shapes():
    assert as_coordinates([0.0, 1.0, 2.0], 3).shape == (3, 1)
    with pytest.raises(InvalidArgument):
        as_coordinates(np.zeros((4, 2)), 3)
    with pytest.raises(InvalidArgument):
        as_coordinates(np.array([[0.0], [np.nan]]), 2)


def test_laplacian_rows_sum_to_zero():
    A = as_adjacency(nx.cycle_graph(5))
    L = laplacian(A)
    assert np.allclose(np.asarray(L.sum(axis=1)).ravel(), 0.0)
    assert np.allclose(L.diagonal(), 2.0)


def test_induced_subgraph_and_components():
    A = as_adjacency(nx.path_graph(6))
    sub = induced_subgraph(A, np.array([0, 1, 3, 4]))
    assert sub.shape == (4, 4)
    n_components, comp = component_labels(sub)
    assert n_components == 2
    assert comp[0] == comp[1]
    assert comp[2] == comp[3]
    assert comp[0] != comp[2]


def test_labels_to_parts_and_check_labeling():
    labels = np.array([1, 0, 1, 2])
    parts = labels_to_parts(labels)
    assert [p.tolist() for p in parts] == [[1], [0, 2], [3]]
    assert check_labeling(labels, 4, 3).dtype == np.int64
    with pytest.raises(InvalidArgument):
        check_labeling(labels, 4, 2)


def test_split_by_order_breaks_ties_by_index():
    subset = np.array([2, 5, 7, 9])
    values = np.zeros(4)
    split = split_by_order(values, subset, 1)
    assert split.left.tolist() == [2]
    assert split.right.tolist() == [5, 7, 9]
    perturbed = split_by_order(values, subset, 1, perturb=True)
    assert perturbed.left.tolist() == [9]
