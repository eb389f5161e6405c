"""Adaptor for pandas data frames."""

import operator
from collections.abc import Callable

import pandas as pd

from rangefilter.adaptors.base import QueryableAdaptor, compare_to_bound
from rangefilter.value import Number


class DataFrameAdaptor(QueryableAdaptor):
    """Adaptor for a pandas `DataFrame`."""

    @classmethod
    def supports(cls, queryable: object) -> bool:
        """Check if `queryable` is a pandas data frame."""
        return isinstance(queryable, pd.DataFrame)

    @staticmethod
    def _mask(
        queryable: pd.DataFrame,
        column: str,
        bound: Number,
        op: Callable[[object, object], bool],
    ) -> pd.Series:
        # Same row rule as the other adaptors, so object columns holding numeric strings match alike.
        return queryable[column].map(lambda value: compare_to_bound(value, bound, op)).astype(bool)

    @staticmethod
    def where_min(queryable: pd.DataFrame, column: str, bound: Number) -> pd.DataFrame:
        """Keep only rows where `column >= bound`."""
        if column not in queryable.columns:
            return queryable.iloc[0:0].copy()
        return queryable[DataFrameAdaptor._mask(queryable, column, bound, operator.ge)].copy()

    @staticmethod
    def where_max(queryable: pd.DataFrame, column: str, bound: Number) -> pd.DataFrame:
        """Keep only rows where `column <= bound`."""
        if column not in queryable.columns:
            return queryable.iloc[0:0].copy()
        return queryable[DataFrameAdaptor._mask(queryable, column, bound, operator.le)].copy()
