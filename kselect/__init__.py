r"""
'    __    _____      __          __
'   / /__ / ___/___  / /__  _____/ /_
'  / //_/ \__ \/ _ \/ / _ \/ ___/ __/
' / ,<   ___/ /  __/ /  __/ /__/ /_
'/_/|_| /____/\___/_/\___/\___/\__/
"""

# expose the selector module; min, max and range live there to avoid shadowing builtins
from . import selector
from .selector import kmin, kmax, ceiling, floor

# expose the fluent facade and its factory
from .selection import Selection, from_iterable, S

# expose the ready-made comparers
from .comparers import (
    natural_order,
    reverse_order,
    reversed_comparer,
    by_key,
    then_by
)

# expose the error taxonomy
from .errors import (
    SelectionError,
    InvalidArgumentError,
    NotFoundError,
    EmptyCollectionError,
    NoSuchRankError,
    EmptyRangeError,
    NoQualifyingValueError
)

# define what `import *` does
__all__ = [
    "selector",
    "kmin",
    "kmax",
    "ceiling",
    "floor",
    "Selection",
    "from_iterable",
    "S",
    "natural_order",
    "reverse_order",
    "reversed_comparer",
    "by_key",
    "then_by",
    "SelectionError",
    "InvalidArgumentError",
    "NotFoundError",
    "EmptyCollectionError",
    "NoSuchRankError",
    "EmptyRangeError",
    "NoQualifyingValueError"
]
