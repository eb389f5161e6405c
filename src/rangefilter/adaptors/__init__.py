"""Adaptor registry for queryable collections."""

from loguru import logger

from rangefilter.adaptors.base import QueryableAdaptor, compare_to_bound
from rangefilter.adaptors.dataframe import DataFrameAdaptor
from rangefilter.adaptors.dataset import DatasetAdaptor
from rangefilter.adaptors.records import RecordsAdaptor

# Checked in order; the first adaptor which supports a queryable wins.
ADAPTORS: list[type[QueryableAdaptor]] = [
    DatasetAdaptor,
    DataFrameAdaptor,
    RecordsAdaptor,
]


def register_adaptor(adaptor: type[QueryableAdaptor]) -> type[QueryableAdaptor]:
    """Register a custom adaptor ahead of the built-in ones.

    Can be used as a class decorator.
    """
    if adaptor in ADAPTORS:
        ADAPTORS.remove(adaptor)
    ADAPTORS.insert(0, adaptor)
    logger.debug(f"Registered queryable adaptor {adaptor.__name__}")
    return adaptor


def resolve_adaptor(queryable: object) -> type[QueryableAdaptor]:
    """Return the adaptor able to constrain `queryable`.

    Raises:
        TypeError: If no registered adaptor supports the queryable's type.
    """
    for adaptor in ADAPTORS:
        if adaptor.supports(queryable):
            return adaptor

    msg = f"No queryable adaptor registered for type {type(queryable).__name__}"
    raise TypeError(msg)


__all__ = [
    "ADAPTORS",
    "DataFrameAdaptor",
    "DatasetAdaptor",
    "QueryableAdaptor",
    "RecordsAdaptor",
    "compare_to_bound",
    "register_adaptor",
    "resolve_adaptor",
]
