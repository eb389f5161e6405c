"""Tests for the range filter across the supported queryables."""

import json

import pandas as pd
import pytest
from datasets import Dataset as HuggingFaceDataset

from rangefilter.base import FilterContext
from rangefilter.range_filter import RangeFilter
from rangefilter.value import FilterValue

PRICES = [1, 5, 10, 15]


def _records():
    return [{"id": i, "price": price} for i, price in enumerate(PRICES)]


def _dataset():
    return HuggingFaceDataset.from_dict({"id": list(range(len(PRICES))), "price": PRICES})


def _dataframe():
    return pd.DataFrame({"id": list(range(len(PRICES))), "price": PRICES})


def _prices(queryable) -> list:
    """Extract the `price` column from any supported queryable."""
    if isinstance(queryable, pd.DataFrame):
        return queryable["price"].tolist()
    if isinstance(queryable, HuggingFaceDataset):
        return list(queryable["price"])
    return [row["price"] for row in queryable]


@pytest.fixture(name="range_filter")
def range_filter_fixture():
    return RangeFilter(FilterContext(name="Price", column="price"))


@pytest.fixture(name="queryable", params=["records", "dataset", "dataframe"])
def queryable_fixture(request):
    """The same data set as each of the supported queryable types."""
    builders = {"records": _records, "dataset": _dataset, "dataframe": _dataframe}
    return builders[request.param]()


def test_identifier(range_filter):
    assert range_filter.identifier() == "range-filter"


def test_default_value(range_filter):
    assert range_filter.default_value() == FilterValue(min=None, max=None)

    # The default does not depend on the current value.
    range_filter.current_value = FilterValue(1, 2)
    assert range_filter.default_value() == FilterValue(min=None, max=None)


def test_serialize_unset(range_filter):
    serialized = range_filter.serialize()

    assert serialized["currentValue"] is None
    assert serialized["component"] == "range-filter"
    assert serialized["name"] == "Price"
    assert serialized["class"] == "price"
    assert serialized["column"] == "price"
    assert serialized["options"] == []
    assert not range_filter.has_value


def test_serialize_set_value(range_filter):
    range_filter.current_value = FilterValue(min=5, max=None)
    assert range_filter.serialize()["currentValue"] == {"min": 5, "max": None}

    range_filter.current_value = FilterValue(min=None, max=None)
    assert range_filter.serialize()["currentValue"] == {"min": None, "max": None}
    assert range_filter.has_value


def test_serialize_does_not_mutate(range_filter):
    range_filter.current_value = FilterValue(3, 4)
    first = range_filter.serialize()
    second = range_filter.serialize()

    assert first == second
    assert range_filter.current_value == FilterValue(3, 4)


def test_serialize_merges_host_fields():
    context = FilterContext(
        name="Unit Price",
        column="unit_price",
        options={"step": 0.5},
        extra={"resource": "products"},
    )
    serialized = RangeFilter(context, value={"min": "1", "max": "2"}).serialize()

    assert serialized == {
        "class": "unit-price",
        "name": "Unit Price",
        "column": "unit_price",
        "options": [{"label": "step", "value": 0.5}],
        "resource": "products",
        "component": "range-filter",
        "currentValue": {"min": 1, "max": 2},
    }


def test_serialize_is_json_compatible(range_filter):
    range_filter.current_value = FilterValue(1.5, None)
    assert json.loads(json.dumps(range_filter.serialize())) == range_filter.serialize()


@pytest.mark.parametrize("value", [None, FilterValue(), {"min": None, "max": None}, "garbage"])
def test_apply_inactive_returns_queryable_unchanged(range_filter, queryable, value):
    assert range_filter.apply(queryable, value) is queryable


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (FilterValue(min=5), [5, 10, 15]),
        (FilterValue(max=10), [1, 5, 10]),
        (FilterValue(min=5, max=10), [5, 10]),
        (FilterValue(min=10, max=10), [10]),
        (FilterValue(min=10, max=5), []),
        (FilterValue(min=100), []),
        (FilterValue(min=2.5, max=12.5), [5, 10]),
        ({"min": "5", "max": "10"}, [5, 10]),
    ],
)
def test_apply(range_filter, queryable, value, expected):
    assert _prices(range_filter.apply(queryable, value)) == expected


def test_apply_does_not_mutate_input(range_filter, queryable):
    range_filter.apply(queryable, FilterValue(min=5, max=10))
    assert _prices(queryable) == PRICES


def test_apply_excludes_nulls():
    range_filter = RangeFilter(FilterContext(name="Price", column="price"))
    records = [{"price": 1}, {"price": None}, {}, {"price": 7}]

    assert range_filter.apply(records, FilterValue(min=0)) == [{"price": 1}, {"price": 7}]

    dataset = HuggingFaceDataset.from_dict({"price": [1, None, 7]})
    assert list(range_filter.apply(dataset, FilterValue(max=10))["price"]) == [1, 7]

    frame = pd.DataFrame({"price": [1.0, None, 7.0]})
    assert range_filter.apply(frame, FilterValue(max=10))["price"].tolist() == [1.0, 7.0]


def test_apply_missing_column_matches_nothing(queryable):
    range_filter = RangeFilter(FilterContext(name="Weight", column="weight"))
    assert _prices(range_filter.apply(queryable, FilterValue(min=0))) == []


def test_apply_malformed_filter_value_is_unbounded(range_filter, queryable, caplog):
    assert range_filter.apply(queryable, FilterValue(min="abc")) is queryable
    assert "Ignoring non-numeric range bound" in caplog.text

    # A numeric string bound is coerced rather than emptying the result.
    assert _prices(range_filter.apply(queryable, FilterValue(min="5"))) == [5, 10, 15]


@pytest.mark.parametrize(
    "build",
    [
        lambda rows: rows,
        lambda rows: HuggingFaceDataset.from_list(rows),
        lambda rows: pd.DataFrame(rows),
    ],
    ids=["records", "dataset", "dataframe"],
)
def test_apply_string_column_matches_alike(range_filter, build):
    rows = [{"price": p} for p in ["1", "5", "abc", None, "10.5"]]

    assert _prices(range_filter.apply(build(rows), FilterValue(min=5))) == ["5", "10.5"]
    assert _prices(range_filter.apply(build(rows), FilterValue(max=5))) == ["1", "5"]


@pytest.mark.parametrize("build", [lambda rows: rows, pd.DataFrame], ids=["records", "dataframe"])
def test_apply_mixed_type_column_matches_alike(range_filter, build):
    rows = [{"price": 1}, {"price": "5"}, {"price": "x"}, {"price": 10.0}, {"price": float("nan")}]

    assert _prices(range_filter.apply(build(rows), FilterValue(min=2))) == ["5", 10.0]


def test_apply_unsupported_queryable(range_filter):
    with pytest.raises(TypeError):
        range_filter.apply(42, FilterValue(min=0))
