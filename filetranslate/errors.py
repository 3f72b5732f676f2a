"""
Error types for the translation pipeline.

Every failure category carries its own process exit code so the CLI can
report it without inspecting messages.
"""

from pathlib import Path
from typing import Optional, Union


class TranslationPipelineError(Exception):
    """Base class for all pipeline failures."""

    exit_code = 1


class FileOpenError(TranslationPipelineError):
    """Input file could not be opened or decoded."""

    exit_code = 1

    def __init__(self, message: str, path: Union[str, Path, None] = None):
        super().__init__(message)
        self.path = path


class EmptyInputError(FileOpenError):
    """Input file was readable but contained no text."""


class ConfigError(TranslationPipelineError):
    """Configuration is missing or invalid."""

    exit_code = 2


class NetworkError(TranslationPipelineError):
    """Transport failure or non-success HTTP status from the translation API."""

    exit_code = 3

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(TranslationPipelineError):
    """Response body was not JSON or did not have the expected shape."""

    exit_code = 4


class FileWriteError(TranslationPipelineError):
    """Translated text could not be written to the output file."""

    exit_code = 5

    def __init__(self, message: str, path: Union[str, Path, None] = None,
                 translated_text: Optional[str] = None):
        super().__init__(message)
        self.path = path
        self.translated_text = translated_text


class MalformedRequestError(TranslationPipelineError):
    """Request body could not be serialized."""

    exit_code = 6
