"""Adaptor for HuggingFace datasets."""

import operator

from datasets import Dataset as HuggingFaceDataset

from rangefilter.adaptors.base import QueryableAdaptor, compare_to_bound
from rangefilter.value import Number


class DatasetAdaptor(QueryableAdaptor):
    """Adaptor for a HuggingFace `datasets.Dataset`.

    Bounds are applied with `Dataset.filter`, which returns a new dataset backed by an indices mapping.
    """

    @classmethod
    def supports(cls, queryable: object) -> bool:
        """Check if `queryable` is a HuggingFace dataset."""
        return isinstance(queryable, HuggingFaceDataset)

    @staticmethod
    def where_min(queryable: HuggingFaceDataset, column: str, bound: Number) -> HuggingFaceDataset:
        """Keep only rows where `column >= bound`."""
        if column not in queryable.column_names:
            return queryable.select([])

        return queryable.filter(
            lambda value: compare_to_bound(value, bound, operator.ge),
            input_columns=column,
            desc=f"{column} >= {bound}",
        )

    @staticmethod
    def where_max(queryable: HuggingFaceDataset, column: str, bound: Number) -> HuggingFaceDataset:
        """Keep only rows where `column <= bound`."""
        if column not in queryable.column_names:
            return queryable.select([])

        return queryable.filter(
            lambda value: compare_to_bound(value, bound, operator.le),
            input_columns=column,
            desc=f"{column} <= {bound}",
        )
