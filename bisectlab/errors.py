"""Exception and warning types raised by bisectlab."""

from __future__ import annotations


class BisectLabError(Exception):
    """Base class for all bisectlab errors."""


class InvalidArgument(BisectLabError, ValueError):
    """Malformed ``k``, missing coordinates or mismatched dimensions."""


class InsufficientVertices(BisectLabError, ValueError):
    """A vertex subset has fewer vertices than the labels it must carry."""

    def __init__(self, size: int, n_labels: int) -> None:
        super().__init__(f"Cannot spread {n_labels} labels over a subset of {size} vertices.")
        self.size = size
        self.n_labels = n_labels


class DegenerateSplit(BisectLabError):
    """A bisector returned an empty half for a subset of two or more vertices."""


class PartitioningFailed(BisectLabError, RuntimeError):
    """A subset could not be bisected, even after retrying the tie-break."""

    def __init__(self, size: int, strategy: str) -> None:
        super().__init__(
            f"Strategy '{strategy}' produced a degenerate split of a {size}-vertex subset twice."
        )
        self.size = size
        self.strategy = strategy


class EigenConvergenceFailure(BisectLabError, RuntimeError):
    """The sparse eigensolver did not converge within its iteration budget."""


class DisconnectedSubgraph(UserWarning):
    """Informational: a spectral split fell back to connected-component boundaries."""


class ImbalanceWarning(UserWarning):
    """The final labeling exceeds the configured ``max_imbalance``."""
