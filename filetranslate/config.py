#!/usr/bin/env python3
"""
Configuration for the translation pipeline.

Values come from environment variables, optionally loaded from a .env file,
and can be overridden by explicit keyword arguments (the CLI options).

Recognized variables:
    TRANSLATE_API_KEY          API key sent as "Authorization: Api-Key <key>"
    TRANSLATE_ENDPOINT         Translation endpoint URL
    TRANSLATE_TARGET_LANGUAGE  Target language code (default: en)
    TRANSLATE_INPUT_PATH       Input text file (default: input.txt)
    TRANSLATE_OUTPUT_PATH      Output text file (default: output.txt)
    TRANSLATE_TIMEOUT          Request timeout in seconds; "none" or 0 disables it
"""

import os
import math
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import dotenv

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://translate.api.cloud.yandex.net/translate/v2/translate"
DEFAULT_TARGET_LANGUAGE = "en"
DEFAULT_INPUT_PATH = Path("input.txt")
DEFAULT_OUTPUT_PATH = Path("output.txt")
DEFAULT_TIMEOUT = 60.0

ENV_PREFIX = "TRANSLATE_"


@dataclass
class PipelineConfig:
    """Configuration for a single translation run"""
    endpoint: str = DEFAULT_ENDPOINT
    api_key: Optional[str] = None
    target_language: str = DEFAULT_TARGET_LANGUAGE
    input_path: Path = DEFAULT_INPUT_PATH
    output_path: Path = DEFAULT_OUTPUT_PATH
    timeout: Optional[float] = DEFAULT_TIMEOUT

    def masked_api_key(self) -> str:
        """Return the API key with only its edges visible."""
        if not self.api_key:
            return "(not set)"
        if len(self.api_key) <= 10:
            return "*" * len(self.api_key)
        return f"{self.api_key[:5]}...{self.api_key[-5:]}"


def parse_timeout(value: Union[str, float, int, None]) -> Optional[float]:
    """
    Parse a timeout setting.

    Args:
        value: Seconds as a number or string; None, "none" or 0 mean no timeout

    Returns:
        Timeout in seconds or None

    Raises:
        ConfigError: If the value is not a non-negative number
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value or value.lower() in ('none', 'off'):
            return None
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid timeout: {value!r}")
    if not math.isfinite(seconds) or seconds < 0:
        raise ConfigError(f"Timeout must be a non-negative number: {value!r}")
    return seconds or None


def load_env_file(env_file: Optional[Union[str, Path]] = None) -> bool:
    """
    Load variables from a .env file without overriding the environment.

    An explicit env_file must exist. Without one, a .env in the current
    directory is loaded if present.
    """
    if env_file is not None:
        dotenv_path = Path(env_file)
        if not dotenv_path.is_file():
            raise ConfigError(f".env file not found at {dotenv_path}")
    else:
        dotenv_path = Path.cwd() / '.env'
        if not dotenv_path.is_file():
            return False

    loaded = dotenv.load_dotenv(dotenv_path)
    if loaded:
        logger.debug(f"Loaded environment from {dotenv_path}")
    else:
        logger.warning(f"No variables loaded from {dotenv_path}")
    return loaded


def load_config(env_file: Optional[Union[str, Path]] = None, **overrides) -> PipelineConfig:
    """
    Build a PipelineConfig from the environment.

    Args:
        env_file: Optional .env file to load first
        **overrides: Field values that take precedence over the environment;
            None values are ignored

    Returns:
        PipelineConfig
    """
    load_env_file(env_file)

    config = PipelineConfig(
        endpoint=os.getenv(f'{ENV_PREFIX}ENDPOINT') or DEFAULT_ENDPOINT,
        api_key=os.getenv(f'{ENV_PREFIX}API_KEY') or None,
        target_language=os.getenv(f'{ENV_PREFIX}TARGET_LANGUAGE') or DEFAULT_TARGET_LANGUAGE,
        input_path=Path(os.getenv(f'{ENV_PREFIX}INPUT_PATH') or DEFAULT_INPUT_PATH),
        output_path=Path(os.getenv(f'{ENV_PREFIX}OUTPUT_PATH') or DEFAULT_OUTPUT_PATH),
        timeout=parse_timeout(os.getenv(f'{ENV_PREFIX}TIMEOUT', DEFAULT_TIMEOUT)),
    )

    for name, value in overrides.items():
        if value is None:
            continue
        if not hasattr(config, name):
            raise ConfigError(f"Unknown configuration option: {name}")
        if name in ('input_path', 'output_path'):
            value = Path(value)
        elif name == 'timeout':
            value = parse_timeout(value)
        setattr(config, name, value)

    return config
