"""Load settings from an optional YAML file plus explicit overrides."""

from pathlib import Path
from typing import Any, Dict, Optional

import structlog
import yaml
from pydantic import ValidationError

from src.errors import ConfigurationError

from .settings import Settings

logger = structlog.get_logger(__name__)


def _read_config_file(config_file: Path) -> Dict[str, Any]:
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read config file {config_file}: {e}", config_key="config_file", previous_error=e
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config file {config_file}: {e}", config_key="config_file", previous_error=e
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {config_file} must contain a mapping", config_key="config_file"
        )
    return data


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> Settings:
    """Build validated settings.

    Values from ``config_file`` are applied first, then every override that is
    not ``None``.

    Raises:
        ConfigurationError: if the file cannot be read or validation fails.
    """
    data: Dict[str, Any] = {}
    if config_file is not None:
        data.update(_read_config_file(Path(config_file)))
        logger.debug("Config file read", file=str(config_file), keys=sorted(data))

    data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        settings = Settings(**data)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        key = ".".join(str(p) for p in first.get("loc", ())) or None
        raise ConfigurationError(f"Invalid configuration: {e}", config_key=key, previous_error=e) from e

    return settings
