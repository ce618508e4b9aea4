"""Run configuration resolved from the environment and explicit overrides.

Precedence (highest first): explicit keyword overrides (CLI options), process
environment (optionally populated from ``.env`` by the CLI), built-in
defaults.

Environment variables:

- ``SALES_STATISTICS_INPUT``: path of the sales log.
- ``SALES_STATISTICS_OUTPUT``: path of the report file.
- ``SALES_STATISTICS_DELIMITER``: single-character field delimiter.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import ConfigurationError

DEFAULT_INPUT_PATH = Path("./Data/sales_data.txt")
DEFAULT_OUTPUT_PATH = Path("./Data/monthly_statistics_output.txt")

_ENV_VARS = {
    "input_path": "SALES_STATISTICS_INPUT",
    "output_path": "SALES_STATISTICS_OUTPUT",
    "delimiter": "SALES_STATISTICS_DELIMITER",
}


class ReportSettings(BaseModel):
    """Validated settings for one report run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    input_path: Path = DEFAULT_INPUT_PATH
    output_path: Path = DEFAULT_OUTPUT_PATH
    delimiter: str = ","

    @field_validator("input_path", "output_path", mode="before")
    @classmethod
    def _path_non_empty(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("path must be non-empty")
        return v

    @field_validator("delimiter")
    @classmethod
    def _single_character(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("delimiter must be exactly one character")
        if v in "-\r\n":
            raise ValueError(f"delimiter {v!r} clashes with the line/date format")
        return v


def load_settings(**overrides: Any) -> ReportSettings:
    """Build :class:`ReportSettings` from env vars and non-``None`` overrides.

    Raises :class:`ConfigurationError` on invalid values or unknown keys.
    """

    unknown = sorted(set(overrides) - set(_ENV_VARS))
    if unknown:
        raise ConfigurationError("unknown setting(s): " + ", ".join(unknown))

    values: dict[str, Any] = {}
    for key, env_name in _ENV_VARS.items():
        env_val = os.getenv(env_name)
        if env_val:
            values[key] = env_val
        override = overrides.get(key)
        if override is not None:
            values[key] = override

    try:
        return ReportSettings(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(f"invalid settings: {problems}") from e


__all__ = [
    "DEFAULT_INPUT_PATH",
    "DEFAULT_OUTPUT_PATH",
    "ReportSettings",
    "load_settings",
]
