import numpy as np

from bisectlab import BinarySplit, PartitionConfig, quality, run_partition
from bisectlab.case_studies import build_grid_mesh


def by_vertex_index(A, coords, subset, n1, *, perturb=False, **kwargs):
    # Baseline that ignores both geometry and edges.
    order = subset[::-1] if perturb else subset
    return BinarySplit(left=np.sort(order[:n1]), right=np.sort(order[n1:]), path="index")


def main():
    A, coords = build_grid_mesh(12, 12)
    cfg = PartitionConfig(verbosity=1)
    result = run_partition(A, coords, k=6, config=cfg, bisector=by_vertex_index)
    print("splits:", result.metadata["n_splits"])
    print("quality:", quality(A, result.labels))


if __name__ == "__main__":
    main()
