#!/usr/bin/env python3
"""
Composable processing stages.

A processor is any ``text -> text`` callable. A stage takes a processor and
returns a new one that adds a side effect before or after delegating to it:

    chain = compose(translator.translate, [
        logging_stage,
        word_count_stage,
        persistence_stage("output.txt"),
    ])
    chain(text)

The first stage in the list is the outermost, so pre-delegation effects run
in list order and post-delegation effects run in reverse.
"""

import logging
from functools import wraps
from pathlib import Path
from typing import Callable, Iterable, Union

import click

from .file_io import write_text

logger = logging.getLogger(__name__)

Processor = Callable[[str], str]
Stage = Callable[[Processor], Processor]
Echo = Callable[[str], None]


def count_words(text: str) -> int:
    """
    Count words separated by any run of whitespace.

    Args:
        text: Text to scan

    Returns:
        Number of words (0 for empty or whitespace-only text)
    """
    count = 0
    in_word = False
    for char in text:
        if char.isspace():
            in_word = False
        elif not in_word:
            in_word = True
            count += 1
    return count


def logging_stage(inner: Processor, echo: Echo = click.echo) -> Processor:
    """Announce the translation, then delegate."""
    @wraps(inner)
    def process(text: str) -> str:
        echo("Translating text...")
        logger.info(f"Starting translation of {len(text)} characters")
        return inner(text)
    return process


def word_count_stage(inner: Processor, echo: Echo = click.echo) -> Processor:
    """Report the input word count, then delegate."""
    @wraps(inner)
    def process(text: str) -> str:
        words = count_words(text)
        echo(f"Word count: {words}")
        logger.info(f"Input word count: {words}")
        return inner(text)
    return process


def persistence_stage(output_path: Union[str, Path], echo: Echo = click.echo) -> Stage:
    """
    Build a stage that saves the inner result to output_path.

    The file is overwritten. A write failure raises FileWriteError carrying
    the translated text.
    """
    output_path = Path(output_path)

    def stage(inner: Processor) -> Processor:
        @wraps(inner)
        def process(text: str) -> str:
            translated = inner(text)
            write_text(output_path, translated)
            echo(f"Translation saved to: {output_path}")
            logger.info(f"Saved translation to {output_path}")
            return translated
        return process

    return stage


def compose(processor: Processor, stages: Iterable[Stage]) -> Processor:
    """
    Wrap processor in stages, first stage outermost.

    Args:
        processor: Innermost text -> text callable
        stages: Stages ordered from outermost to innermost

    Returns:
        The wrapped processor
    """
    for stage in reversed(list(stages)):
        processor = stage(processor)
    return processor
