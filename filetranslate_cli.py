#!/usr/bin/env python3
"""
filetranslate CLI - translate a text file through the Yandex Cloud Translate API.
Reads the input file, reports its word count, translates it and saves the result.
"""

import logging
import sys
from typing import Optional

import click

from filetranslate import __version__
from filetranslate.config import PipelineConfig, load_config
from filetranslate.errors import (
    ConfigError, EmptyInputError, FileOpenError, FileWriteError, MalformedRequestError,
    NetworkError, ParseError, TranslationPipelineError
)
from filetranslate.file_io import read_text
from filetranslate.log_config import setup_logger
from filetranslate.pipeline import TranslationPipeline
from filetranslate.stages import count_words
from filetranslate.translate import build_request_body

logger = logging.getLogger('filetranslate')

ERROR_LABELS = {
    EmptyInputError: "Input file is empty",
    FileOpenError: "Could not read input",
    ConfigError: "Configuration error",
    NetworkError: "Network error",
    ParseError: "Unexpected response",
    FileWriteError: "Could not save translation",
    MalformedRequestError: "Could not build request",
}


def _configure_logging(verbose: int, log_file: Optional[str]) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    setup_logger('filetranslate', log_file=log_file, level=level)


def _fail(error: TranslationPipelineError) -> None:
    """Report an error to the operator and exit with its code."""
    label = next(
        (text for kind, text in ERROR_LABELS.items() if isinstance(error, kind)),
        "Error",
    )
    click.echo(f"✗ {label}: {error}", err=True)
    sys.exit(error.exit_code)


def _load(env_file: Optional[str], **overrides) -> PipelineConfig:
    try:
        return load_config(env_file, **overrides)
    except ConfigError as e:
        _fail(e)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name='filetranslate')
@click.pass_context
def cli(ctx):
    """filetranslate - translate a text file and save the result.

    Without a command, runs `translate` with settings from the environment.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(translate)


@cli.command()
@click.option('--input', '-i', 'input_path', type=click.Path(dir_okay=False),
              help='Input text file (default: input.txt)')
@click.option('--output', '-o', 'output_path', type=click.Path(dir_okay=False),
              help='Output file for the translation (default: output.txt)')
@click.option('--target-language', '-t', help='Target language code (default: en)')
@click.option('--endpoint', help='Translation API endpoint URL')
@click.option('--api-key', help='API key (default: $TRANSLATE_API_KEY)')
@click.option('--timeout',
              help='Request timeout in seconds (default: 60, where earlier releases waited '
                   'without limit; "none" restores the unbounded wait)')
@click.option('--env-file', type=click.Path(exists=True, dir_okay=False),
              help='Load environment variables from this file')
@click.option('--dry-run', is_flag=True, help='Print the request body without sending it')
@click.option('--verbose', '-v', count=True, help='Log progress (-vv for debug output)')
@click.option('--log-file', type=click.Path(dir_okay=False), help='Also write logs to this file')
def translate(input_path: Optional[str], output_path: Optional[str], target_language: Optional[str],
              endpoint: Optional[str], api_key: Optional[str], timeout: Optional[str],
              env_file: Optional[str], dry_run: bool, verbose: int, log_file: Optional[str]):
    """Translate the input file and save the result.

    Exit codes: 1 unreadable or empty input, 2 configuration, 3 network,
    4 unexpected response, 5 output not written, 6 request not serializable.
    """
    _configure_logging(verbose, log_file)

    config = _load(
        env_file,
        input_path=input_path,
        output_path=output_path,
        target_language=target_language,
        endpoint=endpoint,
        api_key=api_key,
        timeout=timeout,
    )

    if dry_run:
        try:
            text = read_text(config.input_path)
            body = build_request_body(text, config.target_language)
        except TranslationPipelineError as e:
            _fail(e)
        click.echo(f"POST {config.endpoint}")
        click.echo(body.decode('utf-8'))
        return

    result = TranslationPipeline(config).run()

    if result.translated_text is not None:
        click.echo(f"Translation result: {result.translated_text}")
    if not result.success:
        _fail(result.error)


@cli.command('count-words')
@click.argument('path', type=click.Path(dir_okay=False))
def count_words_command(path: str):
    """Count the words in a text file without translating it."""
    try:
        text = read_text(path)
    except EmptyInputError:
        text = ''
    except FileOpenError as e:
        _fail(e)
    click.echo(f"Word count: {count_words(text)}")


@cli.command()
@click.option('--env-file', type=click.Path(exists=True, dir_okay=False),
              help='Load environment variables from this file')
def config(env_file: Optional[str]):
    """Show the effective configuration."""
    settings = _load(env_file)

    click.echo("filetranslate configuration:")
    click.echo(f"  Endpoint: {settings.endpoint}")
    click.echo(f"  Target language: {settings.target_language}")
    click.echo(f"  Input file: {settings.input_path}")
    click.echo(f"  Output file: {settings.output_path}")
    timeout = f"{settings.timeout:g}s" if settings.timeout else "none"
    click.echo(f"  Timeout: {timeout}")

    status = "✓ Configured" if settings.api_key else "✗ Missing"
    click.echo(f"\nAPI key: {status} {settings.masked_api_key() if settings.api_key else ''}".rstrip())


if __name__ == '__main__':
    cli()
