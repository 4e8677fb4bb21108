"""Graph builders and loaders used by examples and tests."""

from bisectlab.case_studies.meshes import (
    build_bridged_cliques,
    build_grid_mesh,
    build_path_graph,
    disjoint_union,
)
from bisectlab.case_studies.suitesparse import load_mat_graph

__all__ = [
    "build_bridged_cliques",
    "build_grid_mesh",
    "build_path_graph",
    "disjoint_union",
    "load_mat_graph",
]
