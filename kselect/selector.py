"""
order-statistic selection over unordered collections.

every function takes the collection first and the comparer last, reads the
collection exactly once into a private list, and never mutates it. the caller
must not mutate the collection while a call is in progress; nothing here
guards against that.

min, max and range intentionally shadow the builtins inside this module.
"""
from __future__ import annotations
import logging
import numbers
from functools import cmp_to_key

import numpy as np

from .types import *
from .comparers import natural_order, reverse_order
from .errors import (
    InvalidArgumentError,
    EmptyCollectionError,
    NoSuchRankError,
    EmptyRangeError,
    NoQualifyingValueError,
)

logger = logging.getLogger(__name__)

__all__ = ["min", "max", "kmin", "kmax", "range", "ceiling", "floor"]


# --- shared validation ---

def _require(collection: Optional[Iterable[T]], comparer: Optional[Comparer[T]]) -> None:
    """reject absent arguments before anything looks at the data"""
    if collection is None: raise InvalidArgumentError("collection must not be None")
    if comparer is None: raise InvalidArgumentError("comparer must not be None")
    if not callable(comparer): raise InvalidArgumentError("comparer must be callable")


def _materialize(collection: Iterable[T], operation: str) -> List[T]:
    """snapshot the collection into a list, failing on empty input"""
    try:
        iterator = iter(collection)
    except TypeError as e:
        raise InvalidArgumentError(f"collection must be iterable, got {type(collection).__name__}") from e
    data = list(iterator)
    if not data: raise EmptyCollectionError(f"cannot find {operation} of empty sequence")
    return data


def _require_rank(k: Any) -> int:
    # bool is an int subclass but never a meaningful rank
    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise InvalidArgumentError(f"k must be an integer, got {type(k).__name__}")
    return int(k)


def _extreme(data: List[T], comparer: Comparer[T], sign: int) -> T:
    """linear scan for the best element; sign -1 for min, 1 for max. ties keep the earlier one"""
    best = data[0]
    for value in data:
        if comparer(value, best) * sign > 0:
            best = value
    return best


# --- min / max ---

def min(collection: Iterable[T], comparer: Comparer[T]) -> T:
    """smallest element under comparer; ties keep the first encountered"""
    _require(collection, comparer)
    return _extreme(_materialize(collection, "minimum"), comparer, -1)


def max(collection: Iterable[T], comparer: Comparer[T]) -> T:
    """largest element under comparer; ties keep the first encountered"""
    _require(collection, comparer)
    return _extreme(_materialize(collection, "maximum"), comparer, 1)


# --- kmin / kmax ---

def _try_numpy_distinct(data: List[T], comparer: Comparer[T]) -> Optional[List[T]]:
    """
    ascending distinct values via numpy.unique when the comparer is one of ours
    and the data is homogeneous ints or nan-free floats. returns None otherwise.
    """
    if comparer is not natural_order and comparer is not reverse_order:
        return None
    first_type = type(data[0])
    if first_type not in (int, float) or not all(type(x) is first_type for x in data):
        return None
    try:
        arr = np.asarray(data)
    except (OverflowError, TypeError, ValueError):
        return None
    # ints past int64 land in uint64 or object arrays
    if arr.dtype.kind not in 'if': return None
    if arr.dtype.kind == 'f' and np.isnan(arr).any(): return None
    distinct = np.unique(arr)
    if comparer is reverse_order:
        distinct = distinct[::-1]
    return distinct.tolist()


def _kth_distinct(data: List[T], k: int, comparer: Comparer[T], descending: bool) -> T:
    if k < 1 or k > len(data):
        raise NoSuchRankError(f"no rank {k} in a sequence of {len(data)} elements")

    distinct = _try_numpy_distinct(data, comparer)
    if distinct is not None:
        logger.debug("rank %d selected with numpy over %d elements", k, len(data))
        if descending: distinct = distinct[::-1]
        if k > len(distinct):
            raise NoSuchRankError(f"no rank {k}: only {len(distinct)} distinct values")
        return distinct[k - 1]

    # sorted() is stable for reverse=True too, so equal values keep input order
    ordered = sorted(data, key=cmp_to_key(comparer), reverse=descending)
    if k == 1: return ordered[0]

    rank = 1
    for previous, current in zip(ordered, ordered[1:]):
        if comparer(previous, current) != 0:
            rank += 1
            if rank == k: return current
    raise NoSuchRankError(f"no rank {k}: only {rank} distinct values")


def kmin(collection: Iterable[T], k: int, comparer: Comparer[T]) -> T:
    """
    k-th smallest distinct value (1-based). equal elements share a rank, so
    kmin([5, 5, 3, 3, 1], 2, natural_order) is 3.
    """
    _require(collection, comparer)
    k = _require_rank(k)
    return _kth_distinct(_materialize(collection, "k-th minimum"), k, comparer, descending=False)


def kmax(collection: Iterable[T], k: int, comparer: Comparer[T]) -> T:
    """k-th largest distinct value (1-based). equal elements share a rank."""
    _require(collection, comparer)
    k = _require_rank(k)
    return _kth_distinct(_materialize(collection, "k-th maximum"), k, comparer, descending=True)


# --- range ---

def range(collection: Iterable[T], low: T, high: T, comparer: Comparer[T]) -> List[T]:
    """
    new list of every element with low <= e <= high, duplicates included.
    low and high need not be members of the collection.
    """
    _require(collection, comparer)
    data = _materialize(collection, "range")
    result = [value for value in data if comparer(value, low) >= 0 and comparer(value, high) <= 0]
    if not result: raise EmptyRangeError("no elements fall within the given range")
    return result


# --- ceiling / floor ---

def ceiling(collection: Iterable[T], key: T, comparer: Comparer[T]) -> T:
    """smallest element >= key"""
    _require(collection, comparer)
    data = _materialize(collection, "ceiling")
    candidate = _extreme(data, comparer, 1)
    if comparer(key, candidate) > 0:
        raise NoQualifyingValueError("key is greater than every element")
    for value in data:
        if comparer(value, key) >= 0 and comparer(value, candidate) < 0:
            candidate = value
    return candidate


def floor(collection: Iterable[T], key: T, comparer: Comparer[T]) -> T:
    """largest element <= key"""
    _require(collection, comparer)
    data = _materialize(collection, "floor")
    candidate = _extreme(data, comparer, -1)
    if comparer(key, candidate) < 0:
        raise NoQualifyingValueError("key is less than every element")
    for value in data:
        if comparer(value, key) <= 0 and comparer(value, candidate) > 0:
            candidate = value
    return candidate
