"""Range filter for dashboard listings."""

from importlib.metadata import version

__version__ = version("rangefilter")

from rangefilter.base import FilterCapability, FilterContext
from rangefilter.configuration import Config, FilterConfig, load_config
from rangefilter.host import FilterHost, decode_filter_state, encode_filter_state
from rangefilter.range_filter import RangeFilter
from rangefilter.value import FilterValue

__all__ = [
    "Config",
    "FilterCapability",
    "FilterConfig",
    "FilterContext",
    "FilterHost",
    "FilterValue",
    "RangeFilter",
    "decode_filter_state",
    "encode_filter_state",
    "load_config",
]
