from collections.abc import Hashable
from typing import TypeVar

from sortedcontainers import SortedSet

from collection_literals.utils import check_homogeneous, report_duplicate


T = TypeVar("T", bound=Hashable)


def make_set(*elements: T) -> set[T]:
    """Build a `set` holding the distinct `elements`.

    Equivalent to starting from an empty set and adding each element in
    turn, so repeated elements collapse into one. With no arguments an empty
    set is returned.

    Examples
    --------

        >>> make_set("foo", "bar") == {"foo", "bar"}
        True

    """
    check_homogeneous(elements)

    result: set[T] = set()
    for element in elements:
        if element in result:
            report_duplicate(element)
        result.add(element)
    return result


def make_ordered_set(*elements: T) -> SortedSet:
    """Build a `SortedSet` holding the distinct `elements`.

    Iterating over the result yields the elements in ascending order,
    whatever order they were given in. Elements must be hashable and
    comparable with each other.
    """
    check_homogeneous(elements)

    result = SortedSet()
    for element in elements:
        if element in result:
            report_duplicate(element)
        result.add(element)
    return result
