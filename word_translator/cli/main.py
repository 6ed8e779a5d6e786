"""
CLI interface for the word translator.

Provides command-line access to translate, chat and usage statistics.
"""

import os
import sys
from dataclasses import replace
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from word_translator.config.loader import (
    TranslatorConfig,
    default_config,
    load_translator_config,
)
from word_translator.core.chat import ChatSession
from word_translator.core.document import MemorySelection
from word_translator.core.errors import MissingApiKeyError, TranslatorError
from word_translator.core.languages import LANGUAGE_MAP
from word_translator.core.translator import SelectionTranslator, TranslationSettings
from word_translator.core.usage import UsageTracker
from word_translator.sdk.openai_client import TranslationClient
from word_translator.storage.models import UsageStats
from word_translator.storage.repository import get_repository

app = typer.Typer()
console = Console()

EXIT_CODE_PASS = 0
EXIT_CODE_FAIL = 1

API_KEY_ENV = "OPENAI_API_KEY"


def _load_config(config_path: Optional[str]) -> TranslatorConfig:
    if config_path:
        return load_translator_config(config_path)
    return default_config()


def _with_overrides(settings: TranslatorConfig, **overrides) -> TranslatorConfig:
    """Apply command line options on top of the config, validated the same way."""
    return replace(settings, **{k: v for k, v in overrides.items() if v is not None})


def _resolve_api_key(repository) -> str:
    """Saved key first, then the OPENAI_API_KEY environment variable."""
    api_key = repository.load_api_key() or os.getenv(API_KEY_ENV)
    if not api_key:
        raise MissingApiKeyError()
    return api_key


def _display_usage_stats(stats: UsageStats, model: str) -> None:
    table = Table(title="Usage Statistics")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Translations", f"{stats.total_translations:,}")
    table.add_row("Words", f"{stats.total_words:,}")
    table.add_row("Input tokens", f"{stats.total_input_tokens:,}")
    table.add_row("Output tokens", f"{stats.total_output_tokens:,}")
    table.add_row("Estimated cost", f"${stats.total_cost:.4f}")
    table.add_row("Current model", model)
    console.print(table)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Word translator CLI."""
    if ctx.invoked_subcommand is None:
        console.print("Word Translator - Use --help to see available commands")


@app.command()
def init(config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to YAML config")):
    """Initialize the local settings database."""
    try:
        settings = _load_config(config)
        get_repository(settings.db_path)
        console.print("[green]✓[/] Database initialized successfully")
        sys.exit(EXIT_CODE_PASS)
    except Exception as e:
        console.print(f"[red]Error initializing database:[/] {str(e)}")
        sys.exit(EXIT_CODE_FAIL)


@app.command("save-key")
def save_key(
    api_key: str = typer.Argument(..., help="OpenAI API key (starts with sk-)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to YAML config")
):
    """Save the OpenAI API key."""
    try:
        settings = _load_config(config)
        get_repository(settings.db_path).save_api_key(api_key)
        console.print("[green]✓[/] API Key saved successfully")
        sys.exit(EXIT_CODE_PASS)
    except ValueError as e:
        console.print(f"[red]✗[/] {str(e)}")
        sys.exit(EXIT_CODE_FAIL)


@app.command()
def translate(
    text: Optional[str] = typer.Argument(None, help="Text to translate; read from stdin when omitted"),
    source: Optional[str] = typer.Option(None, "--source", "-s", help="Source language code or 'auto'"),
    target: Optional[str] = typer.Option(None, "--target", "-t", help="Target language code"),
    domain: Optional[str] = typer.Option(None, "--domain", "-d", help="Translation domain"),
    style: Optional[str] = typer.Option(None, "--style", help="strict, human or balanced"),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Chat model identifier"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to YAML config")
):
    """
    Translate text, keeping paragraph breaks.

    Paragraphs are separated by blank lines and translated in a single request.
    """
    try:
        settings = _with_overrides(
            _load_config(config),
            model=model,
            source_language=source,
            target_language=target,
            domain=domain,
            style=style
        )
        repository = get_repository(settings.db_path)

        if text is None:
            text = sys.stdin.read()

        translator = SelectionTranslator(
            client=TranslationClient(
                _resolve_api_key(repository),
                settings.model,
                max_tokens=settings.max_tokens
            ),
            tracker=UsageTracker(repository),
            settings=TranslationSettings(
                source_language=settings.source_language,
                target_language=settings.target_language,
                domain=settings.domain,
                style=settings.style
            )
        )

        console.print("⏳ Translating...", style="dim")
        selection = MemorySelection.from_text(text)
        result = translator.translate_selection(selection)

        console.print(selection.text, markup=False)
        detected = f" (Detected: {result.detected_language})" if result.detected_language else ""
        console.print(f"[green]✓[/] Translation completed!{detected}")
        sys.exit(EXIT_CODE_PASS)

    except (TranslatorError, ValueError, FileNotFoundError) as e:
        console.print(f"[red]✗ Error:[/] {escape(str(e))}")
        sys.exit(EXIT_CODE_FAIL)


@app.command()
def chat(
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Chat model identifier"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to YAML config")
):
    """
    Chat with the model about translations.

    Type /clear to clear the conversation and /quit to exit.
    """
    try:
        settings = _with_overrides(_load_config(config), model=model)
        repository = get_repository(settings.db_path)
        session = ChatSession(
            TranslationClient(
                _resolve_api_key(repository),
                settings.model,
                max_tokens=settings.max_tokens
            )
        )
    except (TranslatorError, ValueError, FileNotFoundError) as e:
        console.print(f"[red]✗ Error:[/] {escape(str(e))}")
        sys.exit(EXIT_CODE_FAIL)

    while True:
        try:
            message = console.input("[bold]You:[/] ")
        except EOFError:
            break

        message = message.strip()
        if not message:
            continue
        if message == "/quit":
            break
        if message == "/clear":
            session.clear()
            console.print("[dim]Chat cleared[/]")
            continue

        try:
            with console.status("Typing..."):
                reply = session.send(message)
        except TranslatorError as e:
            console.print(f"[red]✗ {escape(str(e))}[/]")
            continue

        console.print(f"[bold cyan]Assistant:[/] {escape(reply)}")

    sys.exit(EXIT_CODE_PASS)


@app.command()
def stats(config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to YAML config")):
    """Show usage statistics."""
    try:
        settings = _load_config(config)
        repository = get_repository(settings.db_path)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[red]✗ Error:[/] {escape(str(e))}")
        sys.exit(EXIT_CODE_FAIL)

    _display_usage_stats(repository.load_usage_stats(), settings.model)


@app.command("reset-stats")
def reset_stats(config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to YAML config")):
    """Reset all usage statistics."""
    try:
        settings = _load_config(config)
        tracker = UsageTracker(get_repository(settings.db_path))
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[red]✗ Error:[/] {escape(str(e))}")
        sys.exit(EXIT_CODE_FAIL)

    confirmed = tracker.reset(
        lambda: typer.confirm("Are you sure you want to reset all usage statistics?")
    )
    if confirmed:
        console.print("[green]✓[/] Statistics reset successfully")
    else:
        console.print("[dim]Statistics unchanged[/]")


@app.command()
def languages():
    """List supported language codes."""
    table = Table(title="Languages")
    table.add_column("Code")
    table.add_column("Language")
    for code, name in LANGUAGE_MAP.items():
        table.add_row(code, name)
    console.print(table)


if __name__ == "__main__":
    app()
