"""Load declared states from a TOML config file.

    states = ["idle", "running", { token = "shutdown" }, "done"]
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from .exceptions import ConfigError
from .models import ChannelConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path) -> ChannelConfig:
    """Read and validate a channel config file.

    Raises ConfigError if the file is missing, is not valid TOML, or does
    not match the `ChannelConfig` schema.
    """
    config_file = Path(path)
    if not config_file.is_file():
        raise ConfigError(config_file, "file not found")

    try:
        with open(config_file, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError) as e:
        raise ConfigError(config_file, str(e)) from e

    try:
        config = ChannelConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(config_file, str(e)) from e

    logger.debug("Loaded %d states from %s", len(config.states), config_file)
    return config
