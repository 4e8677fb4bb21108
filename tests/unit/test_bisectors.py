import numpy as np
import pytest

from bisectlab.algorithms.geometric import coordinate_bisect, dominant_axis, inertial_axis, inertial_bisect
from bisectlab.algorithms.spectral import canonical_sign, fiedler_vector, spectral_bisect
from bisectlab.case_studies import build_bridged_cliques, build_path_graph, disjoint_union
from bisectlab.errors import DisconnectedSubgraph, InvalidArgument
from bisectlab.utils.graph import as_adjacency


def _all(n):
    return np.arange(n, dtype=np.int64)


def test_coordinate_bisect_uses_widest_axis():
    coords = np.array(
        [
            [0.0, 9.0],
            [1.0, 0.0],
            [0.5, 3.0],
            [0.2, 6.0],
        ]
    )
    assert dominant_axis(coords) == 1
    split = coordinate_bisect(None, coords, _all(4), 2)
    assert split.left.tolist() == [1, 2]
    assert split.right.tolist() == [0, 3]


def test_coordinate_bisect_ties_follow_vertex_index():
    coords = np.zeros((6, 2))
    split = coordinate_bisect(None, coords, _all(6), 3)
    assert split.left.tolist() == [0, 1, 2]
    retried = coordinate_bisect(None, coords, _all(6), 3, perturb=True)
    assert retried.left.tolist() == [3, 4, 5]


def test_coordinate_bisect_respects_subset_indices():
    coords = np.arange(10, dtype=float).reshape(-1, 1)
    subset = np.array([1, 4, 6, 9])
    split = coordinate_bisect(None, coords, subset, 1)
    assert split.left.tolist() == [1]
    assert split.right.tolist() == [4, 6, 9]


def test_geometric_bisectors_require_coordinates():
    with pytest.raises(InvalidArgument):
        coordinate_bisect(None, None, _all(4), 2)
    with pytest.raises(InvalidArgument):
        inertial_bisect(None, None, _all(4), 2)


def test_inertial_axis_follows_diagonal_line():
    t = np.linspace(-1.0, 1.0, 11)
    points = np.column_stack([t, t])
    axis = inertial_axis(points)
    assert np.allclose(axis, [np.sqrt(0.5), np.sqrt(0.5)])


def test_inertial_bisect_splits_along_elongation():
    t =np.array([3.0, -2.0, 0.5, 1.0, -1.5, 2.5])
    coords = np.column_stack([t, t + 0.01 * np.array([1, -1, 1, -1, 1, -1])])
    split = inertial_bisect(None, coords, _all(6), 3)
    assert split.left.tolist() == [1, 2, 4]
    assert split.right.tolist() == [0, 3, 5]


def test_collinear_points_give_identical_geometric_splits():
    rng = np.random.default_rng(7)
    x = rng.permutation(20).astype(float)
    coords = np.column_stack([x, np.zeros(20)])
    for n1 in (1, 7, 10, 19):
        a = coordinate_bisect(None, coords, _all(20), n1)
        b = inertial_bisect(None, coords, _all(20), n1)
        assert a.left.tolist() == b.left.tolist()
        assert a.right.tolist() == b.right.tolist()


def test_canonical_sign_makes_first_entry_negative():
    assert canonical_sign(np.array([0.5, -1.0])).tolist() == [-0.5, 1.0]
    assert canonical_sign(np.array([0.0, -2.0, 1.0])).tolist() == [0.0, -2.0, 1.0]


def test_fiedler_vector_of_path_is_monotone():
    A, _ = build_path_graph(10)
    connectivity, fiedler = fiedler_vector(A)
    assert connectivity == pytest.approx(2 - 2 * np.cos(np.pi / 10), rel=1e-6)
    assert np.all(np.diff(fiedler) > 0)


@pytest.mark.parametrize("n", list(range(3, 61)))
def test_fiedler_value_of_path_matches_closed_form(n):
    A, _ = build_path_graph(n)
    connectivity, fiedler = fiedler_vector(A)
    assert connectivity == pytest.approx(2 - 2 * np.cos(np.pi / n), rel=1e-6)
    assert np.all(np.diff(fiedler) > 0)


def test_spectral_bisect_cuts_path_in_the_middle():
    A, _ = build_path_graph(8)
    split = spectral_bisect(A, None, _all(8), 4)
    assert split.left.tolist() == [0, 1, 2, 3]
    assert split.right.tolist() == [4, 5, 6, 7]
    assert split.path == "fiedler"


def test_spectral_bisect_isolates_bridge_between_cliques():
    A = build_bridged_cliques(5)
    split = spectral_bisect(A, None, _all(10), 5)
    assert split.left.tolist() == [0, 1, 2, 3, 4]
    assert split.right.tolist() == [5, 6, 7, 8, 9]


def test_spectral_bisect_two_vertices():
    A = as_adjacency(np.array([[0, 1], [1, 0]], dtype=float))
    split = spectral_bisect(A, None, _all(2), 1)
    assert split.sizes == (1, 1)


def test_spectral_bisect_falls_back_to_components():
    small, _ = build_path_graph(3)
    large, _ = build_path_graph(5)
    A = disjoint_union(small, large)
    with pytest.warns(DisconnectedSubgraph):
        split = spectral_bisect(A, None, _all(8), 4)
    assert split.path == "components"
    assert split.left.tolist() == [0, 1, 2]
    assert split.right.tolist() == [3, 4, 5, 6, 7]


def test_component_fallback_tops_up_when_labels_need_room():
    path, _ = build_path_graph(6)
    single = np.zeros((1, 1))
    A = as_adjacency(disjoint_union(path, single))
    with pytest.warns(DisconnectedSubgraph):
        split = spectral_bisect(A, None, _all(7), 4, labels_needed=(2, 2))
    assert split.path == "components+fiedler"
    assert split.left.tolist() == [0, 1, 2, 6]
    assert split.right.tolist() == [3, 4, 5]


def test_component_fallback_keeps_components_whole_over_balance():
    path, _ = build_path_graph(90)
    A = as_adjacency(disjoint_union(path, np.zeros((10, 10))))
    with pytest.warns(DisconnectedSubgraph):
        split = spectral_bisect(A, None, _all(100), 50)
    assert split.path == "components"
    assert split.left.tolist() == list(range(90, 100))
    assert split.sizes == (10, 90)


def test_edgeless_subset_splits_exactly():
    A = as_adjacency(np.zeros((9, 9)))
    with pytest.warns(DisconnectedSubgraph):
        split = spectral_bisect(A, None, _all(9), 4)
    assert split.sizes == (4, 5)
    assert split.left.tolist() == [0, 1, 2, 3]
