"""Configuration models for filters declared in a YAML file."""

from pathlib import Path
from typing import Literal

import yaml
from loguru import logger
from pydantic import BaseModel, Field, model_validator

from rangefilter.base import slugify


class FilterConfig(BaseModel):
    """Declaration of a single filter."""

    name: str
    column: str
    key: str | None = None
    component: Literal["range-filter"] = "range-filter"
    options: dict[str, object] = Field(default_factory=dict)

    @property
    def resolved_key(self) -> str:
        """The key used in request state, derived from the name if not given."""
        return self.key or slugify(self.name)


class Config(BaseModel):
    """Top level configuration: the filters offered on a listing."""

    filters: list[FilterConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_keys(self) -> "Config":
        seen: set[str] = set()
        for filter_cfg in self.filters:
            key = filter_cfg.resolved_key
            if key in seen:
                msg = f"Duplicate filter key: {key}"
                raise ValueError(msg)
            seen.add(key)
        return self


def load_config(config_file: Path) -> Config:
    """Load and validate the filter configuration in `config_file`.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the file content is not a valid configuration.
    """
    logger.info(f"Loading config: {config_file}")

    with Path(config_file).open("r") as f:
        cfg = yaml.safe_load(f) or {}

    return Config.model_validate(cfg)
