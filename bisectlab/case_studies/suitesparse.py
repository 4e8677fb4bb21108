"""Loader for SuiteSparse-style ``.mat`` mesh files."""

from __future__ import annotations

import numpy as np
import scipy.io
import scipy.sparse as sp

from bisectlab.errors import InvalidArgument


def _field(struct, name):
    try:
        return getattr(struct, name)
    except AttributeError as exc:
        raise InvalidArgument(f"Missing field '{name}' in .mat structure.") from exc


def load_mat_graph(file_path):
    """Read an adjacency matrix and vertex coordinates from a ``.mat`` file.

    Two layouts are recognised: the SuiteSparse collection layout
    (``Problem.A`` and ``Problem.aux.coord``) and the flat ``CH_adj`` /
    ``CH_coords`` layout of the Swiss graph. The adjacency is symmetrised as
    ``(A + A.T) / 2``.

    Returns:
        Tuple of ``(adjacency, coords)``.
    """
    data = scipy.io.loadmat(file_path, squeeze_me=True, struct_as_record=False)
    if "CH_adj" in data:
        A = data["CH_adj"]
        coords = data["CH_coords"]
    elif "Problem" in data:
        problem = data["Problem"]
        A = _field(problem, "A")
        coords = _field(_field(problem, "aux"), "coord")
    else:
        raise InvalidArgument(f"{file_path} has neither a 'Problem' struct nor 'CH_adj'.")

    A = sp.csr_matrix(A, dtype=float)
    A = ((A + A.T) / 2).tocsr()
    return A, np.asarray(coords, dtype=float)
