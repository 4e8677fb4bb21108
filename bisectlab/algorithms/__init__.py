"""Public bisection strategies and the registry the driver selects from."""

from bisectlab.algorithms.geometric import coordinate_bisect, inertial_bisect
from bisectlab.algorithms.multiway import part_metis
from bisectlab.algorithms.spectral import fiedler_vector, spectral_bisect

BISECTORS = {
    "coordinate": coordinate_bisect,
    "inertial": inertial_bisect,
    "spectral": spectral_bisect,
}
GEOMETRIC_STRATEGIES = frozenset({"coordinate", "inertial"})

__all__ = [
    "BISECTORS",
    "GEOMETRIC_STRATEGIES",
    "coordinate_bisect",
    "fiedler_vector",
    "inertial_bisect",
    "part_metis",
    "spectral_bisect",
]
