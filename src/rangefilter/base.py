"""Abstract base class for dashboard filters and the host supplied filter context."""

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from rangefilter.value import FilterValue

Q = TypeVar("Q")


def slugify(name: str) -> str:
    """Derive a stable filter key from a display name, e.g. "Unit Price" -> "unit-price"."""
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


@dataclass
class FilterContext:
    """Metadata the host supplies for a filter.

    The host owns these fields; a filter only merges them into its serialized form.
    """

    name: str
    column: str
    key: str | None = None
    options: Mapping[str, object] = field(default_factory=dict)
    extra: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Fill in the key from the display name if it was not given."""
        if not self.key:
            self.key = slugify(self.name)

    def base_fields(self) -> dict[str, Any]:
        """Return the host's base serialization fields."""
        return {
            "class": self.key,
            "name": self.name,
            "column": self.column,
            "options": [{"label": label, "value": value} for label, value in self.options.items()],
            **self.extra,
        }


class FilterCapability(ABC):
    """Abstract base class for a filter consumed by a `FilterHost`.

    A filter translates its current value into a constraint on a queryable collection
    and describes itself to the frontend. It holds no state beyond a single request.
    """

    def __init__(self, context: FilterContext) -> None:
        """Constructor for the filter.

        Args:
            context (FilterContext): Host supplied metadata, including the column to constrain.
        """
        self.context = context
        self._value: FilterValue | None = None
        self._value_set = False

    @property
    def key(self) -> str:
        """The key identifying this filter in request state."""
        return self.context.key

    @property
    def column(self) -> str:
        """The column or field constrained by this filter."""
        return self.context.column

    @property
    def current_value(self) -> FilterValue | None:
        """The value most recently set on this filter, or None if never set."""
        return self._value

    @current_value.setter
    def current_value(self, value: FilterValue | None) -> None:
        self._value = value
        self._value_set = True

    @property
    def has_value(self) -> bool:
        """Whether a value was ever set on this filter."""
        return self._value_set

    @abstractmethod
    def identifier(self) -> str:
        """Return the name of the frontend widget which renders this filter."""

    @abstractmethod
    def serialize(self) -> dict[str, Any]:
        """Return the JSON compatible description of the filter sent to the frontend."""

    @abstractmethod
    def default_value(self) -> FilterValue:
        """Return the value used when the operator has not made a selection."""

    @abstractmethod
    def apply(self, queryable: Q, value: object) -> Q:
        """Constrain `queryable` according to `value`.

        Args:
            queryable (Q): The host's query or collection.
            value (object): The filter value, either a `FilterValue` or raw request data.

        Returns:
            Q: The constrained queryable.
        """
