"""The range filter: constrain a listing by a minimum and maximum value."""

from typing import Any

from loguru import logger

from rangefilter.adaptors import resolve_adaptor
from rangefilter.base import FilterCapability, FilterContext, Q
from rangefilter.value import FilterValue


class RangeFilter(FilterCapability):
    """Filter which keeps rows whose column lies within an inclusive `[min, max]` range.

    Either bound may be left open. An inverted range (`min > max`) is not rejected;
    both bounds are applied together and so nothing matches.
    """

    component = "range-filter"

    def __init__(self, context: FilterContext, value: object = None) -> None:
        """Constructor for the range filter.

        Args:
            context (FilterContext): Host supplied metadata, including the column to constrain.
            value (object, optional): An initial current value, either a `FilterValue`
                or raw request data. If None, the filter is left unset.
        """
        super().__init__(context)
        if value is not None:
            self.current_value = FilterValue.parse(value)

    def identifier(self) -> str:
        """Return the name of the frontend widget which renders this filter."""
        return self.component

    def serialize(self) -> dict[str, Any]:
        """Return the host's base fields merged with the component and the current value.

        `currentValue` is None when no value was ever set, which is distinct from the default.
        """
        current = self.current_value
        return {
            **self.context.base_fields(),
            "component": self.identifier(),
            "currentValue": current.to_dict() if current is not None else None,
        }

    def default_value(self) -> FilterValue:
        """Return the unbounded range, i.e. the filter is inactive by default."""
        return FilterValue(min=None, max=None)

    def apply(self, queryable: Q, value: object) -> Q:
        """Constrain `queryable` to rows whose column lies within `value`.

        Args:
            queryable (Q): The host's query or collection.
            value (object): A `FilterValue` or raw request data. Malformed data is treated as unbounded.

        Returns:
            Q: `queryable` itself if the range is inactive, otherwise a new constrained queryable.
        """
        value = FilterValue.parse(value)
        if value is None or not value.is_active():
            return queryable

        adaptor = resolve_adaptor(queryable)
        logger.debug(f"Applying range filter '{self.key}' on {self.column}: [{value.min}, {value.max}]")

        if value.min is not None:
            queryable = adaptor.where_min(queryable, self.column, value.min)
        if value.max is not None:
            queryable = adaptor.where_max(queryable, self.column, value.max)

        return queryable
