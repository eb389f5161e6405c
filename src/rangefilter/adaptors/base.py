"""Abstract base class for queryable adaptors."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TypeVar

from rangefilter.value import Number, to_number

Q = TypeVar("Q")


def compare_to_bound(value: object, bound: Number, op: Callable[[object, object], bool]) -> bool:
    """Compare a row value against a bound.

    Numeric strings are compared by their numeric value. Nulls, NaN and non-numeric values are a miss.
    """
    number = to_number(value)
    if number is None:
        return False
    return bool(op(number, bound))


class QueryableAdaptor(ABC):
    """Abstract base class for an adaptor to a queryable collection.

    An adaptor knows how to apply a single inclusive bound to one kind of queryable,
    so that filters can stay independent of the host's query abstraction.
    Adaptors never mutate the queryable they are given; they return a new one.
    Rows whose column is missing or null never satisfy a bound.
    """

    @classmethod
    @abstractmethod
    def supports(cls, queryable: object) -> bool:
        """Check if this adaptor can constrain `queryable`."""

    @staticmethod
    @abstractmethod
    def where_min(queryable: Q, column: str, bound: Number) -> Q:
        """Keep only rows where `column >= bound`.

        Args:
            queryable (Q): The collection to constrain.
            column (str): The column or field to compare.
            bound (Number): The inclusive lower bound.
        """

    @staticmethod
    @abstractmethod
    def where_max(queryable: Q, column: str, bound: Number) -> Q:
        """Keep only rows where `column <= bound`.

        Args:
            queryable (Q): The collection to constrain.
            column (str): The column or field to compare.
            bound (Number): The inclusive upper bound.
        """
