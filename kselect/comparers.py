from __future__ import annotations
from .types import *


def natural_order(a: Any, b: Any) -> int:
    """ascending order using the elements' own < and >"""
    if a < b: return -1
    if a > b: return 1
    return 0


def reverse_order(a: Any, b: Any) -> int:
    """descending order using the elements' own < and >"""
    return natural_order(b, a)


def reversed_comparer(comparer: Comparer[T]) -> Comparer[T]:
    """invert any comparer"""
    def compare_reversed(a: T, b: T) -> int:
        return comparer(b, a)
    return compare_reversed


def by_key(key_selector: KeySelector[T, K], descending: bool = False) -> Comparer[T]:
    """
    builds a comparer that orders elements by a projected key.
    two elements with equal keys are comparer-equal, so kmin/kmax will treat
    them as one distinct value.
    """
    def compare_keys(a: T, b: T) -> int:
        k1, k2 = key_selector(a), key_selector(b)
        if k1 < k2: return 1 if descending else -1
        if k1 > k2: return -1 if descending else 1
        return 0
    return compare_keys


def then_by(primary: Comparer[T], *secondaries: Comparer[T]) -> Comparer[T]:
    """lexicographic composition: the first comparer to return non-zero decides."""
    chain = (primary,) + secondaries

    def compare_chained(a: T, b: T) -> int:
        for comparer in chain:
            result = comparer(a, b)
            if result != 0: return result
        return 0
    return compare_chained
