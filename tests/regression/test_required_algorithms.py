import bisectlab
from bisectlab.algorithms import BISECTORS, GEOMETRIC_STRATEGIES
from bisectlab.orchestrator import STRATEGIES


def test_strategy_registry_is_closed():
    assert set(BISECTORS) == {"coordinate", "inertial", "spectral"}
    assert GEOMETRIC_STRATEGIES == {"coordinate", "inertial"}
    assert STRATEGIES == ("coordinate", "inertial", "spectral", "metis")


def test_public_entry_points():
    for name in ["partition", "run_partition", "quality", "run_benchmark", "PartitionConfig"]:
        assert name in bisectlab.__all__
        assert callable(getattr(bisectlab, name))
