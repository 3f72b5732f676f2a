#!/usr/bin/env python3
"""
Pipeline orchestration for a single read → translate → save run.
Assembles the stage chain around the translator and runs it once.
"""

import logging
from dataclasses import dataclass, replace
from functools import partial
from pathlib import Path
from typing import List, Optional

import click

from .config import DEFAULT_TARGET_LANGUAGE, PipelineConfig
from .errors import ConfigError, FileWriteError, TranslationPipelineError
from .file_io import read_text
from .stages import (
    Echo, Processor, Stage, compose, logging_stage, persistence_stage, word_count_stage
)
from .translate import YandexTranslator

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Outcome of one pipeline run"""
    input_path: Path
    output_path: Path
    translated_text: Optional[str] = None
    saved: bool = False
    error: Optional[TranslationPipelineError] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        return 0 if self.error is None else self.error.exit_code


class TranslationPipeline:
    """Builds and runs the stage chain for one input file"""

    def __init__(self,
                 config: Optional[PipelineConfig] = None,
                 translator: Optional[Processor] = None,
                 echo: Echo = click.echo):
        """
        Args:
            config: Run configuration; the pipeline keeps a normalized copy
            translator: text -> text callable used instead of a YandexTranslator
            echo: Sink for operator-facing progress lines
        """
        self.config = self._validate_config(config or PipelineConfig())
        self.echo = echo
        self.translator = translator

    def _validate_config(self, config: PipelineConfig) -> PipelineConfig:
        """Return a copy of config with recoverable values fixed."""
        target_language = config.target_language
        if not target_language or not target_language.strip():
            logger.warning(f"Empty target language, using '{DEFAULT_TARGET_LANGUAGE}'")
            target_language = DEFAULT_TARGET_LANGUAGE

        config = replace(
            config,
            input_path=Path(config.input_path),
            output_path=Path(config.output_path),
            target_language=target_language,
        )
        logger.debug(f"Pipeline config validated: input={config.input_path}, "
                     f"output={config.output_path}, target={config.target_language}")
        return config

    def _check_credentials(self):
        """Raise ConfigError if the translation API cannot be called."""
        if not self.config.api_key:
            raise ConfigError("API key is not configured (set TRANSLATE_API_KEY or pass --api-key)")
        if not self.config.endpoint:
            raise ConfigError("Translation endpoint is not configured")

    def stages(self) -> List[Stage]:
        """Stages from outermost to innermost."""
        return [
            partial(logging_stage, echo=self.echo),
            partial(word_count_stage, echo=self.echo),
            persistence_stage(self.config.output_path, echo=self.echo),
        ]

    def build_chain(self) -> Processor:
        """Wrap the translator: Logging → WordCount → Persistence → translator."""
        if self.translator is None:
            self._check_credentials()
            self.translator = YandexTranslator.from_config(self.config).translate
        return compose(self.translator, self.stages())

    def run(self) -> PipelineResult:
        """
        Read the input file and push it through the chain once.

        Returns:
            PipelineResult; errors are captured on the result, not raised
        """
        result = PipelineResult(
            input_path=self.config.input_path,
            output_path=self.config.output_path,
        )

        try:
            text = read_text(self.config.input_path)
            chain = self.build_chain()
            result.translated_text = chain(text)
            result.saved = True
        except FileWriteError as e:
            result.translated_text = e.translated_text
            result.error = e
        except TranslationPipelineError as e:
            result.error = e

        if result.error is not None:
            logger.error(f"Pipeline failed ({type(result.error).__name__}): {result.error}")
        else:
            logger.info(f"Pipeline complete: {self.config.input_path} → {self.config.output_path}")
        return result


def run_pipeline(config: Optional[PipelineConfig] = None, **kwargs) -> PipelineResult:
    """Run the translation pipeline once with the given configuration."""
    return TranslationPipeline(config, **kwargs).run()
