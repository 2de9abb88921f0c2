import logging
from collections.abc import Iterable
from warnings import warn

from collection_literals.configdefaults import config


_logger = logging.getLogger("collection_literals.utils")


class DuplicateElementWarning(UserWarning):
    """
    Emitted when a set element or map key is given more than once to a constructor
    """


class ElementTypeWarning(UserWarning):
    """
    Emitted when the elements given to a constructor do not share a single type
    """


def check_homogeneous(values: Iterable, what: str = "element") -> type | None:
    """Check that all `values` share one type, up to subclassing.

    The common type is the collected type that every other collected type
    subclasses, so ``(True, 1)`` and ``(1, True)`` both share `int`, whatever
    the argument order. When no such type exists the mismatch is handled
    according to ``config.check_element_types``.

    Returns the common type, or ``None`` when there are no values, the check
    is disabled, or a mismatch was only warned about.
    """
    mode = config.check_element_types
    if mode == "off":
        return None

    types = {type(value) for value in values}
    if not types:
        return None
    common = next(
        (t for t in types if all(issubclass(other, t) for other in types)), None
    )
    if common is None:
        names = ", ".join(sorted(t.__name__ for t in types))
        msg = f"All {what}s must share a single type, but got {what}s of unrelated types {names}"
        if mode == "raise":
            raise TypeError(msg)
        warn(msg, ElementTypeWarning, stacklevel=3)
    return common


def report_duplicate(value, what: str = "element", stacklevel: int = 3) -> None:
    """Log, and warn if configured, that `value` was given more than once.

    `stacklevel` is passed to `warn` and must point at the constructor's caller.
    """
    _logger.debug(f"Duplicate {what} {value!r} collapsed")
    if config.on_duplicate == "warn":
        warn(
            f"Duplicate {what} {value!r}; only one occurrence is kept",
            DuplicateElementWarning,
            stacklevel=stacklevel,
        )
