"""Graph and partition utility exports used across bisectlab."""

from bisectlab.utils.graph import (
    as_adjacency,
    as_coordinates,
    check_labeling,
    component_labels,
    induced_subgraph,
    labels_to_parts,
    laplacian,
    membership_matrix,
)
from bisectlab.utils.ordering import split_by_order

__all__ = [
    "as_adjacency",
    "as_coordinates",
    "check_labeling",
    "component_labels",
    "induced_subgraph",
    "labels_to_parts",
    "laplacian",
    "membership_matrix",
    "split_by_order",
]
