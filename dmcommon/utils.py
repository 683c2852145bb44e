from enum import Enum
from typing import Any, Iterable


class StringComparison(Enum):
    ORDINAL = 1
    ORDINAL_IGNORE_CASE = 2


def index_of(source: Iterable[Any], value: Any) -> int:
    """
    Find the index of the first element equal to value.

    Args:
        source: Any iterable
        value: The value to look for

    Returns:
        The zero-based index of the value, or -1 if it is not found
    """
    # str and bytes .index() search substrings, so only lists and tuples take this path.
    if isinstance(source, (list, tuple)):
        try:
            return source.index(value)
        except ValueError:
            return -1

    for i, element in enumerate(source):
        if element == value:
            return i
    return -1


def contains(
    source: Iterable[str],
    value: str,
    comparison: StringComparison = StringComparison.ORDINAL,
) -> bool:
    """Check whether a collection of strings holds value, using the given comparison."""
    if comparison is StringComparison.ORDINAL_IGNORE_CASE:
        if value is None:
            return any(item is None for item in source)
        folded = value.casefold()
        return any(item is not None and item.casefold() == folded for item in source)

    return any(item == value for item in source)
