"""Run configuration loading."""

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from repo_discovery.core.exceptions import ConfigurationError
from repo_discovery.core.models import RunConfig

logger = structlog.get_logger(__name__)


def load_run_config(
    path: str | Path | None = None,
    defaults: dict[str, Any] | None = None,
    **overrides: Any,
) -> RunConfig:
    """Load a run configuration from a JSON file and apply overrides.

    ``defaults`` fill keys the file does not set. Overrides use snake_case field names; ``None``
    values are ignored so unset CLI options never clobber file values.

    Raises:
        ConfigurationError: If the file cannot be read or fails validation.
    """
    data: dict[str, Any] = dict(defaults or {})
    if path is not None:
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Cannot read configuration file: {path}",
                details={"path": str(path), "error": str(e)},
            ) from e
        if not isinstance(raw, dict):
            raise ConfigurationError(
                "Configuration file must contain a JSON object",
                details={"path": str(path)},
            )
        data.update(raw)
        logger.debug("Loaded configuration file", path=str(path))

    try:
        config = RunConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid configuration",
            details={"errors": e.errors(include_url=False)},
        ) from e

    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return config

    try:
        return RunConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid configuration override",
            details={"errors": e.errors(include_url=False)},
        ) from e
