"""High-level partitioning orchestrator."""

from __future__ import annotations

import warnings
from dataclasses import asdict, fields
from typing import Any

import numpy as np

from bisectlab.algorithms import BISECTORS, GEOMETRIC_STRATEGIES
from bisectlab.algorithms.multiway import part_metis
from bisectlab.config import PartitionConfig
from bisectlab.errors import ImbalanceWarning, InvalidArgument
from bisectlab.evaluation.metrics import partition_balance
from bisectlab.recursion.driver import recursive_bisection
from bisectlab.types import BisectorFn, PartitionResult
from bisectlab.utils.graph import as_adjacency, as_coordinates, check_labeling

STRATEGIES = tuple(BISECTORS) + ("metis",)


class RecursiveBisection:
    """High-level driver that wires configuration to a bisection strategy."""

    def __init__(self, config: PartitionConfig | None = None, bisector: BisectorFn | None = None) -> None:
        self.config = config or PartitionConfig()
        self.bisector = bisector

    def run(self, graph: Any, coords: Any = None, k: int = 2, **overrides: Any) -> PartitionResult:
        """Partition ``graph`` into ``k`` parts and return labels with per-split records."""
        unknown = sorted(set(overrides) - {field.name for field in fields(PartitionConfig)})
        if unknown:
            raise InvalidArgument(f"Unknown option(s) {unknown}; expected PartitionConfig fields.")
        cfg = asdict(self.config)
        cfg.update(overrides)
        strategy = cfg.pop("strategy")
        verbosity = int(cfg.pop("verbosity", 0))
        max_imbalance = cfg.pop("max_imbalance")
        metis_mode = cfg.pop("metis_mode")
        retry_degenerate = cfg.pop("retry_degenerate")

        bisector = self.bisector
        if bisector is not None:
            strategy = getattr(bisector, "__name__", "custom")
        elif strategy not in STRATEGIES:
            raise InvalidArgument(f"Unknown strategy '{strategy}'; expected one of {STRATEGIES}.")

        A = as_adjacency(graph)
        n = A.shape[0]
        if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or k < 1:
            raise InvalidArgument(f"k must be a positive integer, got {k!r}.")
        k = int(k)
        if k > n:
            raise InvalidArgument(f"Cannot split {n} vertices into k={k} nonempty parts.")

        if coords is not None:
            coords = as_coordinates(coords, n)
        elif bisector is None and strategy in GEOMETRIC_STRATEGIES:
            raise InvalidArgument(f"The '{strategy}' strategy requires vertex coordinates.")

        records = []
        if k == 1:
            labels = np.zeros(n, dtype=np.int64)
        elif bisector is None and strategy == "metis":
            labels = part_metis(A, k, mode=metis_mode, seed=cfg["seed"])
        else:
            labels, records = recursive_bisection(
                A,
                coords,
                k,
                bisector or BISECTORS[strategy],
                strategy=strategy,
                retry_degenerate=retry_degenerate,
                verbose=-1 if verbosity <= 0 else verbosity,
                **cfg,
            )
        labels = check_labeling(labels, n, k)

        balance = partition_balance(labels, k)
        if max_imbalance is not None and balance > max_imbalance:
            warnings.warn(
                f"Partition balance {balance:.3f} exceeds max_imbalance={max_imbalance}.",
                ImbalanceWarning,
                stacklevel=2,
            )
        return PartitionResult(
            labels=labels,
            records=records,
            metadata={
                "strategy": strategy,
                "k": k,
                "n_splits": len(records),
                "n_component_splits": sum(r.path.startswith("components") for r in records),
                "n_retries": sum(r.perturbed for r in records),
                "balance": balance,
            },
        )


def run_partition(
    graph: Any,
    coords: Any = None,
    k: int = 2,
    strategy: str | None = None,
    config: PartitionConfig | None = None,
    bisector: BisectorFn | None = None,
    **kwargs: Any,
) -> PartitionResult:
    """Convenience wrapper returning the full :class:`PartitionResult`."""
    if strategy is not None:
        kwargs["strategy"] = strategy
    orchestrator = RecursiveBisection(config=config, bisector=bisector)
    return orchestrator.run(graph, coords, k, **kwargs)


def partition(
    graph: Any,
    coords: Any = None,
    k: int = 2,
    strategy: str | None = None,
    config: PartitionConfig | None = None,
    **kwargs: Any,
) -> np.ndarray:
    """Partition ``graph`` into ``k`` labelled parts with the chosen strategy.

    Args:
        graph: Symmetric nonnegative adjacency (dense, sparse or networkx).
        coords: ``(n, d)`` vertex coordinates; required for ``"coordinate"``
            and ``"inertial"``, ignored by ``"spectral"`` and ``"metis"``.
        k: Number of parts, ``1 <= k <= n``.
        strategy: ``"coordinate"``, ``"inertial"``, ``"spectral"`` or
            ``"metis"``. Defaults to ``config.strategy``.
        config: Optional :class:`PartitionConfig`; ``kwargs`` override its fields.

    Returns:
        Label vector of length ``n`` with values in ``[0, k)``.
    """
    return run_partition(graph, coords, k, strategy=strategy, config=config, **kwargs).labels
