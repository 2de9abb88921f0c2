import logging
from collections.abc import Hashable, Iterable
from typing import Any, TypeVar

from collection_literals.utils import check_homogeneous, report_duplicate


_logger = logging.getLogger("collection_literals.maps")

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def _build_map(pairs: Iterable[tuple[K, V]]) -> dict[K, V]:
    result: dict[K, V] = {}
    for key, value in pairs:
        if key in result:
            # _build_map adds a frame between the caller and report_duplicate
            report_duplicate(key, what="key", stacklevel=4)
            _logger.debug(f"Overwriting {result[key]!r} with {value!r} for key {key!r}")
        result[key] = value
    return result


def make_map(*keys_and_values: Any) -> dict:
    """Build a `dict` from alternating keys and values.

    ``make_map(k1, v1, k2, v2)`` is equivalent to inserting ``k1: v1`` and
    then ``k2: v2`` into an empty dict. When a key is repeated, the value of
    its last occurrence is kept. With no arguments an empty dict is
    returned.

    Raises
    ------
    ValueError
        If an odd number of arguments is given, since the last key would
        have no value.

    """
    if len(keys_and_values) % 2 != 0:
        raise ValueError(
            "make_map expects alternating keys and values, "
            f"but got an odd number of arguments ({len(keys_and_values)})"
        )
    keys = keys_and_values[::2]
    values = keys_and_values[1::2]
    check_homogeneous(keys, what="key")
    check_homogeneous(values, what="value")
    return _build_map(zip(keys, values, strict=True))


def make_map_from_pairs(*pairs: tuple[K, V]) -> dict[K, V]:
    """Build a `dict` from ``(key, value)`` tuples.

    Same as `make_map`, with each key given next to its value.
    """
    for position, pair in enumerate(pairs):
        if not isinstance(pair, tuple) or len(pair) != 2:
            raise TypeError(
                f"make_map_from_pairs expects (key, value) tuples, "
                f"but argument {position} is {pair!r}"
            )
    check_homogeneous((key for key, _ in pairs), what="key")
    check_homogeneous((value for _, value in pairs), what="value")
    return _build_map(pairs)
