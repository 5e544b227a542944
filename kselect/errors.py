"""exception hierarchy for kselect.

every error derives from SelectionError. the two families mirror the two ways
a query can fail: the call itself is malformed (InvalidArgumentError), or the
call is fine but the data holds no answer (NotFoundError and its subclasses).
"""


class SelectionError(Exception):
    """base class for all kselect errors."""


class InvalidArgumentError(SelectionError, ValueError):
    """absent collection, absent or non-callable comparer, or a malformed rank."""


class NotFoundError(SelectionError, LookupError):
    """the query is well-formed but the collection has no answer for it."""


class EmptyCollectionError(NotFoundError):
    """the collection has no elements."""


class NoSuchRankError(NotFoundError):
    """k is below 1 or above the number of distinct values present."""


class EmptyRangeError(NotFoundError):
    """no element lies within the requested [low, high] interval."""


class NoQualifyingValueError(NotFoundError):
    """no element is at or above (ceiling) / at or below (floor) the key."""
