from __future__ import annotations
import numpy as np
from .types import *
from . import selector
from .comparers import natural_order
from .errors import InvalidArgumentError


class Selection(Generic[T]):
    """
    binds one snapshot of a collection to one comparer so several queries can
    be asked without repeating arguments. results are never cached: every
    method runs the full selector function again.
    """

    def __init__(self, collection: Iterable[T], comparer: Comparer[T] = natural_order):
        if collection is None:
            raise InvalidArgumentError("collection must not be None")
        self._data: List[T] = list(collection)
        self._comparer = comparer

    @property
    def comparer(self) -> Comparer[T]:
        return self._comparer

    def by(self, comparer: Comparer[T]) -> 'Selection[T]':
        """same snapshot, different order"""
        return Selection(self._data, comparer)

    # --- queries ---

    def min(self) -> T:
        return selector.min(self._data, self._comparer)

    def max(self) -> T:
        return selector.max(self._data, self._comparer)

    def kmin(self, k: int) -> T:
        return selector.kmin(self._data, k, self._comparer)

    def kmax(self, k: int) -> T:
        return selector.kmax(self._data, k, self._comparer)

    def range(self, low: T, high: T) -> List[T]:
        return selector.range(self._data, low, high, self._comparer)

    def ceiling(self, key: T) -> T:
        return selector.ceiling(self._data, key, self._comparer)

    def floor(self, key: T) -> T:
        return selector.floor(self._data, key, self._comparer)

    # --- terminal conversions ---

    def to_list(self) -> List[T]:
        """copy of the snapshot"""
        return list(self._data)

    def to_array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Selection(count={len(self._data)}, comparer={getattr(self._comparer, '__name__', self._comparer)!r})"


def from_iterable(collection: Iterable[T], comparer: Comparer[T] = natural_order) -> Selection[T]:
    """create a selection from any iterable"""
    return Selection(collection, comparer)


# --- aliases ---
S = from_iterable
