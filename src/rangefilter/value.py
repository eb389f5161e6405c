"""The min/max value pair held by a range filter."""

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np
from loguru import logger

Number = int | float


@dataclass(frozen=True)
class FilterValue:
    """A range selection. A bound set to `None` leaves that side unbounded.

    Bounds are coerced on construction; a bound which is not a finite number is logged
    and left unbounded.
    """

    min: Number | None = None
    max: Number | None = None

    def __post_init__(self) -> None:
        """Coerce both bounds to numbers."""
        object.__setattr__(self, "min", _coerce_bound(self.min))
        object.__setattr__(self, "max", _coerce_bound(self.max))

    def is_active(self) -> bool:
        """Check if at least one bound is set."""
        return self.min is not None or self.max is not None

    def to_dict(self) -> dict[str, Number | None]:
        """Return the JSON compatible form sent to the frontend."""
        return {"min": self.min, "max": self.max}

    @classmethod
    def parse(cls, raw: object) -> "FilterValue | None":
        """Coerce raw request data into a `FilterValue`.

        Accepts a `FilterValue`, a mapping with `min`/`max` keys, a `(min, max)` pair,
        or a JSON string encoding either of the latter two.
        Malformed input never raises: it is logged and treated as absent or unbounded.

        Args:
            raw (object): The value as supplied by the host.

        Returns:
            FilterValue | None: The parsed value, or None if no value was supplied.
        """
        if raw is None:
            return None

        if isinstance(raw, FilterValue):
            return raw

        if isinstance(raw, str):
            if not raw.strip():
                return None

            try:
                raw = json.loads(raw)
            except json.JSONDecodeError:
                logger.warning(f"Discarding range filter value which is not valid JSON: {raw!r}")
                return None

            if raw is None:
                return None

        if isinstance(raw, Mapping):
            return cls(min=raw.get("min"), max=raw.get("max"))

        if isinstance(raw, (list, tuple)) and len(raw) == 2:  # noqa: PLR2004
            return cls(min=raw[0], max=raw[1])

        logger.warning(f"Discarding range filter value of unsupported shape: {raw!r}")
        return None


def to_number(value: object) -> Number | None:
    """Convert a scalar to an int or float, or None if it is missing or not numeric.

    Numeric strings are converted, e.g. "5" -> 5 and "2.5" -> 2.5. Nothing is logged.
    """
    if value is None:
        return None

    if isinstance(value, np.generic):
        value = value.item()

    if isinstance(value, bool):
        return int(value)

    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            try:
                return float(text)
            except ValueError:
                return None

    if isinstance(value, (int, float)):
        return value

    return None


def _coerce_bound(bound: object) -> Number | None:
    """Convert a single bound to a finite number, or None if it is missing or malformed."""
    if bound is None or (isinstance(bound, str) and not bound.strip()):
        return None

    # bool is a subclass of int but is never a meaningful bound.
    if isinstance(bound, (bool, np.bool_)):
        logger.warning(f"Ignoring boolean range bound: {bound!r}")
        return None

    number = to_number(bound)
    if number is None:
        logger.warning(f"Ignoring non-numeric range bound of type {type(bound).__name__}: {bound!r}")
        return None

    if isinstance(number, float) and not math.isfinite(number):
        logger.warning(f"Ignoring non-finite range bound: {bound!r}")
        return None

    return number
