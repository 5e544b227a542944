from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, List
)

T = TypeVar('T')
K = TypeVar('K')

Comparer = Callable[[T, T], int]
KeySelector = Callable[[T], K]
