"""Synthetic graphs with known partition structure."""

import networkx as nx
import numpy as np
import scipy.sparse as sp


def build_grid_mesh(nx_points, ny_points, spacing=1.0, angle=0.0):
    """Build a 2D grid mesh with 4-neighbour connectivity.

    Args:
        nx_points: Number of grid points along x.
        ny_points: Number of grid points along y.
        spacing: Distance between neighbouring points.
        angle: Rotation of the grid in radians, for meshes that are not
            aligned with the coordinate axes.

    Returns:
        Tuple of ``(adjacency, coords)`` with vertex ``i * ny_points + j`` at
        grid position ``(i, j)``.
    """
    G = nx.grid_2d_graph(nx_points, ny_points)
    order = sorted(G.nodes())
    A = nx.to_scipy_sparse_array(G, nodelist=order, dtype=float, format="csr")
    coords = np.array(order, dtype=float) * spacing
    if angle:
        c, s = np.cos(angle), np.sin(angle)
        coords = coords @ np.array([[c, s], [-s, c]])
    return sp.csr_matrix(A), coords


def build_path_graph(n, weight=1.0):
    """Path on ``n`` vertices with uniform edge weight, plus 1D coordinates ``0..n-1``."""
    G = nx.path_graph(n)
    A = nx.to_scipy_sparse_array(G, nodelist=range(n), dtype=float, format="csr") * weight
    coords = np.arange(n, dtype=float).reshape(-1, 1)
    return sp.csr_matrix(A), coords


def build_bridged_cliques(clique_size, bridge_weight=1.0):
    """Two cliques of ``clique_size`` vertices joined by a single bridge edge.

    The bridge connects vertex ``clique_size - 1`` to vertex ``clique_size``.
    """
    G = nx.barbell_graph(clique_size, 0)
    n = G.number_of_nodes()
    A = nx.to_scipy_sparse_array(G, nodelist=range(n), dtype=float, format="lil")
    A[clique_size - 1, clique_size] = bridge_weight
    A[clique_size, clique_size - 1] = bridge_weight
    return sp.csr_matrix(A)


def disjoint_union(*adjacencies):
    """Block-diagonal adjacency of several graphs; vertex indices follow argument order."""
    return sp.block_diag([sp.csr_matrix(A, dtype=float) for A in adjacencies], format="csr")
