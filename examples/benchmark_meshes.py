import sys

import numpy as np

from bisectlab import partition, run_benchmark
from bisectlab.case_studies import build_grid_mesh, load_mat_graph
from bisectlab.visualization import draw_partition


def main(paths):
    if paths:
        meshes = {path: load_mat_graph(path) for path in paths}
    else:
        meshes = {"rotated_grid": build_grid_mesh(30, 10, angle=np.pi / 6)}

    for name, (A, coords) in meshes.items():
        print(f"{name}: {A.shape[0]} nodes, {A.nnz // 2} edges")
        results = run_benchmark(A, coords, k=4)
        for method, payload in results.items():
            print(
                f"  {method:<10} EC={payload['edge_cut']:.0f} NC={payload['normalized_cut']:.3f} "
                f"RC={payload['ratio_cut']:.4f} Bal={payload['balance']:.3f}"
            )
        for method in ("coordinate", "inertial", "spectral"):
            labels = partition(A, coords, 4, strategy=method)
            draw_partition(A, coords, labels, file_name=f"{name}_{method}.png", title=method)


if __name__ == "__main__":
    main(sys.argv[1:])
