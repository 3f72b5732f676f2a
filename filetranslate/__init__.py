"""
filetranslate - Translate a text file through the Yandex Cloud Translate API.
"""

from .config import (
    PipelineConfig,
    load_config,
)

from .errors import (
    TranslationPipelineError,
    FileOpenError,
    EmptyInputError,
    ConfigError,
    NetworkError,
    ParseError,
    FileWriteError,
    MalformedRequestError
)

from .file_io import (
    read_text,
    write_text
)

from .translate import (
    YandexTranslator,
    build_request_body,
    extract_translation,
    translate_text
)

from .stages import (
    count_words,
    compose,
    logging_stage,
    word_count_stage,
    persistence_stage
)

from .pipeline import (
    TranslationPipeline,
    PipelineResult,
    run_pipeline
)

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "PipelineConfig",
    "load_config",
    # Errors
    "TranslationPipelineError",
    "FileOpenError",
    "EmptyInputError",
    "ConfigError",
    "NetworkError",
    "ParseError",
    "FileWriteError",
    "MalformedRequestError",
    # File helpers
    "read_text",
    "write_text",
    # Translation
    "YandexTranslator",
    "build_request_body",
    "extract_translation",
    "translate_text",
    # Stages
    "count_words",
    "compose",
    "logging_stage",
    "word_count_stage",
    "persistence_stage",
    # Pipeline
    "TranslationPipeline",
    "PipelineResult",
    "run_pipeline"
]
