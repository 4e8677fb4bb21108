"""Visualization helpers for partitioned graphs."""

from bisectlab.visualization.graphs import draw_partition

__all__ = ["draw_partition"]
