"""Build settings from the environment plus command line overrides."""

from typing import Any

import pydantic
import structlog

from locale_validator.errors import ConfigurationError

from .settings import Settings

logger = structlog.get_logger(__name__)


def load_config(**overrides: Any) -> Settings:
    """Load settings, letting non-None overrides win over the environment.

    Raises:
        ConfigurationError: If a value fails validation
    """
    values = {key: value for key, value in overrides.items() if value is not None}

    try:
        settings = Settings(**values)
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        config_key = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ConfigurationError(
            f"Invalid configuration for {config_key}: {first.get('msg')}",
            config_key=config_key,
            previous_error=e,
        ) from e

    logger.debug(
        "Configuration loaded",
        workspace=str(settings.workspace_dir),
        main_language=settings.main_language,
        pattern=settings.locale_pattern,
        annotations=settings.use_annotations,
    )
    return settings
