"""Configuration loading and validation for the chain driver."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path

from perfectfour.constants import DEFAULT_MAX_ITERATIONS

logger = logging.getLogger(__name__)


@dataclass
class ChainConfig:
    """Driver settings with defaults suitable for every supported input."""

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    show_summary: bool = True

    def __post_init__(self) -> None:
        """Reject guards that could never let a chain finish."""
        if isinstance(self.max_iterations, bool) or not isinstance(self.max_iterations, int):
            raise ValueError(f"max_iterations must be an integer, got {self.max_iterations!r}")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")


def load_config(config_path: Path | None = None) -> ChainConfig:
    """Load driver configuration from JSON, merging with defaults.

    Unknown keys are ignored so one file can be shared with other tools.

    Args:
        config_path: Path to a JSON object, or ``None`` for defaults only.

    Returns:
        ChainConfig with values from file merged over defaults.

    Raises:
        FileNotFoundError: If *config_path* is given but does not exist.
        ValueError: If the file is not a JSON object or holds invalid values.
    """
    if config_path is None:
        return ChainConfig()

    with open(config_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: expected a JSON object, got {type(data).__name__}")

    field_names = {f.name for f in fields(ChainConfig)}
    kwargs = {k: v for k, v in data.items() if k in field_names}
    ignored = sorted(set(data) - field_names)
    if ignored:
        logger.debug("Ignoring unknown config keys in %s: %s", config_path, ", ".join(ignored))

    logger.debug("Loaded config from %s: %s", config_path, kwargs)
    return ChainConfig(**kwargs)
