import numpy as np
import pytest
import scipy.io
import scipy.sparse as sp

from bisectlab import run_benchmark
from bisectlab.case_studies import (
    build_bridged_cliques,
    build_grid_mesh,
    build_path_graph,
    disjoint_union,
    load_mat_graph,
)
from bisectlab.errors import InvalidArgument


def _assert_metric_payload(payload, *, expect_agreement=False):
    expected_keys = {"edge_cut", "normalized_cut", "ratio_cut", "balance", "time", "part_sizes"}
    if expect_agreement:
        expected_keys |= {"NMI", "ARI"}
    assert set(payload.keys()) == expected_keys
    assert payload["edge_cut"] >= 0.0
    assert payload["normalized_cut"] >= 0.0
    assert payload["ratio_cut"] >= 0.0
    assert payload["balance"] >= 1.0
    assert payload["time"] >= 0.0


def test_grid_mesh_shape_and_coordinates():
    A, coords = build_grid_mesh(4, 3)
    assert A.shape == (12, 12)
    assert A.nnz == 2 * (3 * 3 + 4 * 2)
    assert coords.shape == (12, 2)
    assert coords[5].tolist() == [1.0, 2.0]
    assert A[5, 2] == 1.0


def test_bridged_cliques_structure():
    A = build_bridged_cliques(4, bridge_weight=2.0)
    assert A.shape == (8, 8)
    assert A[3, 4] == A[4, 3] == 2.0
    assert A[0, 4] == 0.0


def test_disjoint_union_is_block_diagonal():
    A, _ = build_path_graph(3)
    B = build_bridged_cliques(3)
    U = disjoint_union(A, B)
    assert U.shape == (9, 9)
    assert U[:3, 3:].nnz == 0


def test_load_mat_graph_suitesparse_layout(tmp_path):
    A, coords = build_grid_mesh(3, 3)
    path = tmp_path / "mesh.mat"
    scipy.io.savemat(str(path), {"Problem": {"A": A, "aux": {"coord": coords}}})
    got_A, got_coords = load_mat_graph(path)
    assert sp.issparse(got_A)
    assert np.allclose(got_A.toarray(), A.toarray())
    assert np.allclose(got_coords, coords)


def test_load_mat_graph_symmetrises_flat_layout(tmp_path):
    A = sp.csr_matrix(np.array([[0, 2.0], [0, 0]]))
    path = tmp_path / "swiss.mat"
    scipy.io.savemat(str(path), {"CH_adj": A, "CH_coords": np.array([[0.0, 0.0], [1.0, 0.0]])})
    got_A, _ = load_mat_graph(path)
    assert np.allclose(got_A.toarray(), [[0, 1.0], [1.0, 0]])


def test_load_mat_graph_rejects_unknown_layout(tmp_path):
    path = tmp_path / "other.mat"
    scipy.io.savemat(str(path), {"M": np.eye(2)})
    with pytest.raises(InvalidArgument):
        load_mat_graph(path)


def test_run_benchmark_reports_each_method():
    A, coords = build_grid_mesh(6, 6)
    results = run_benchmark(A, coords, k=2, methods=["coordinate", "inertial", "spectral"])
    assert set(results) == {"coordinate", "inertial", "spectral"}
    for payload in results.values():
        _assert_metric_payload(payload, expect_agreement=True)
    assert results["spectral"]["NMI"] == pytest.approx(1.0)
    assert results["coordinate"]["edge_cut"] == 6.0
    assert results["coordinate"]["part_sizes"] == [18, 18]


def test_run_benchmark_skips_geometric_methods_without_coordinates():
    A, _ = build_path_graph(10)
    results = run_benchmark(A, None, k=2, methods=["coordinate", "spectral"], reference=None)
    assert set(results) == {"spectral"}
    _assert_metric_payload(results["spectral"])
    assert results["spectral"]["edge_cut"] == 1.0


def test_draw_partition_writes_image(tmp_path):
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    from bisectlab.visualization import draw_partition

    A, coords = build_grid_mesh(5, 5)
    labels = (coords[:, 0] > 2).astype(int)
    out = tmp_path / "grid.png"
    fig = draw_partition(A, coords, labels, file_name=out, title="grid")
    assert out.exists()
    assert fig is not None
