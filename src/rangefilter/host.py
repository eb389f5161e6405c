"""Host adapter which wires filters to request state and a queryable."""

import base64
import binascii
import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from loguru import logger

from rangefilter.base import FilterCapability, FilterContext, Q
from rangefilter.configuration import Config, load_config
from rangefilter.range_filter import RangeFilter
from rangefilter.utils import get_table
from rangefilter.value import FilterValue


def decode_filter_state(encoded: str | bytes | None) -> dict[str, object]:
    """Decode the filter state request parameter.

    The parameter is base64 encoded JSON of a list of `{"class": key, "value": raw}` records.
    Plain JSON is accepted too. Undecodable input is logged and yields no values.

    Args:
        encoded (str | bytes | None): The raw request parameter.

    Returns:
        dict[str, object]: The raw value of each filter, keyed by filter key.
    """
    if not encoded:
        return {}

    if isinstance(encoded, bytes):
        encoded = encoded.decode("utf-8", errors="replace")

    text = encoded.strip()
    if not text.startswith(("[", "{")):
        try:
            text = base64.b64decode(text, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            logger.warning(f"Discarding filter state which is not valid base64: {encoded!r}")
            return {}

    try:
        entries = json.loads(text)
    except json.JSONDecodeError:
        logger.warning(f"Discarding filter state which is not valid JSON: {text!r}")
        return {}

    if isinstance(entries, Mapping):
        entries = [entries]

    if not isinstance(entries, list):
        logger.warning(f"Discarding filter state of unsupported shape: {entries!r}")
        return {}

    state: dict[str, object] = {}
    for entry in entries:
        if not isinstance(entry, Mapping) or "class" not in entry:
            logger.warning(f"Skipping malformed filter state entry: {entry!r}")
            continue
        state[str(entry["class"])] = entry.get("value")

    return state


def encode_filter_state(values: Mapping[str, object]) -> str:
    """Encode filter values keyed by filter key into the filter state request parameter."""
    entries = []
    for key, value in values.items():
        if isinstance(value, FilterValue):
            value = value.to_dict()
        entries.append({"class": key, "value": value})

    return base64.b64encode(json.dumps(entries).encode("utf-8")).decode("ascii")


class FilterHost:
    """The set of filters offered on a listing, for a single request.

    The host supplies each filter's context, populates current values from the request,
    and hands its queryable to the filters in declaration order.
    """

    def __init__(self, filters: Iterable[FilterCapability]) -> None:
        """Constructor for the host.

        Args:
            filters (Iterable[FilterCapability]): The filters, in display order.

        Raises:
            ValueError: If two filters share the same key.
        """
        self.filters: dict[str, FilterCapability] = {}
        for f in filters:
            if f.key in self.filters:
                msg = f"Duplicate filter key: {f.key}"
                raise ValueError(msg)
            self.filters[f.key] = f

    @classmethod
    def from_config(cls, config: Config | dict | Path) -> "FilterHost":
        """Build a host with one range filter per configured filter.

        Args:
            config (Config | dict | Path): The configuration, its raw dict form, or a YAML file path.
        """
        if isinstance(config, Path):
            config = load_config(config)
        elif isinstance(config, dict):
            config = Config(**config)

        return cls(
            RangeFilter(
                FilterContext(
                    name=filter_cfg.name,
                    column=filter_cfg.column,
                    key=filter_cfg.resolved_key,
                    options=filter_cfg.options,
                ),
            )
            for filter_cfg in config.filters
        )

    def __getitem__(self, key: str) -> FilterCapability:
        """Return the filter registered under `key`."""
        return self.filters[key]

    def load_request(self, state: str | bytes | Mapping[str, object] | None) -> None:
        """Set the current value of each filter mentioned in the request.

        Args:
            state (str | bytes | Mapping[str, object] | None): The encoded filter state parameter,
                or already decoded raw values keyed by filter key.
        """
        if state is None or isinstance(state, (str, bytes)):
            state = decode_filter_state(state)

        for key, raw in state.items():
            f = self.filters.get(key)
            if f is None:
                logger.debug(f"Ignoring value for unknown filter '{key}'")
                continue
            f.current_value = FilterValue.parse(raw)

        logger.debug(f"Filter state:\n{self.describe()}")

    def serialize(self) -> list[dict[str, Any]]:
        """Return the serialized form of every filter, in declaration order."""
        return [f.serialize() for f in self.filters.values()]

    def apply(self, queryable: Q) -> Q:
        """Apply every filter which has a current value to `queryable`."""
        for f in self.filters.values():
            if f.current_value is None:
                continue
            queryable = f.apply(queryable, f.current_value)
        return queryable

    def describe(self) -> str:
        """Return a table of each filter's key, column and current value."""
        rows = []
        for f in self.filters.values():
            value = f.current_value
            rows.append(
                {
                    "key": f.key,
                    "column": f.column,
                    "component": f.identifier(),
                    "min": value.min if value is not None else None,
                    "max": value.max if value is not None else None,
                    "set": f.has_value,
                },
            )
        return get_table(rows)
