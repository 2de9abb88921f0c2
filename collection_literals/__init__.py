"""
collection_literals builds pre-populated containers from inline elements.

    >>> from collection_literals import make_map, make_ordered_set, make_set
    >>> make_set("foo", "bar") == {"foo", "bar"}
    True
    >>> list(make_ordered_set(3, 1, 2))
    [1, 2, 3]
    >>> make_map("foo", 0, "bar", 0)
    {'foo': 0, 'bar': 0}

"""

__docformat__ = "restructuredtext en"

import logging


collection_literals_logger = logging.getLogger("collection_literals")
logging_default_handler = logging.StreamHandler()
logging_default_formatter = logging.Formatter(
    fmt="%(levelname)s (%(name)s): %(message)s"
)
logging_default_handler.setFormatter(logging_default_formatter)
collection_literals_logger.setLevel(logging.WARNING)

if not collection_literals_logger.hasHandlers():
    collection_literals_logger.addHandler(logging_default_handler)


from collection_literals.configdefaults import config
from collection_literals.maps import make_map, make_map_from_pairs
from collection_literals.sets import make_ordered_set, make_set
from collection_literals.utils import DuplicateElementWarning, ElementTypeWarning


__all__ = [
    "DuplicateElementWarning",
    "ElementTypeWarning",
    "config",
    "make_map",
    "make_map_from_pairs",
    "make_ordered_set",
    "make_set",
]
