"""Recursive bisection driver exports."""

from bisectlab.recursion.driver import label_split, recursive_bisection, target_sizes

__all__ = ["label_split", "recursive_bisection", "target_sizes"]
