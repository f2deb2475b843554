"""Command-line interface."""

import asyncio
import json
import sys
from enum import Enum
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console

from snippet_reviewer import __version__
from snippet_reviewer.client.gemini import GeminiClient
from snippet_reviewer.config import settings
from snippet_reviewer.errors import ConfigurationError
from snippet_reviewer.models.result import ReviewResult
from snippet_reviewer.models.schema import RESPONSE_SCHEMA
from snippet_reviewer.render.serializers import to_json, to_yaml
from snippet_reviewer.render.surface import ConsoleSurface
from snippet_reviewer.samples import EXAMPLE_CODE, EXAMPLE_LANGUAGE, EXTENSION_LANGUAGES
from snippet_reviewer.session import ReviewSession
from snippet_reviewer.ui.state import UIState
from snippet_reviewer.utils.logging import setup_logging, logger

app = typer.Typer(help="Snippet Reviewer - structured AI code review for code snippets")
console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    rich = "rich"
    json = "json"
    yaml = "yaml"


def guess_language(path: Optional[Path]) -> Optional[str]:
    """Guess the language from a file extension."""
    if path is None:
        return None
    return EXTENSION_LANGUAGES.get(path.suffix.lower())


def _read_code(path: Optional[Path]) -> str:
    if path is None or str(path) == "-":
        return sys.stdin.read()
    if not path.exists():
        err_console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Cannot read {path}: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def review(
    path: Optional[Path] = typer.Argument(
        None,
        help="File to review (reads stdin when omitted or '-')",
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Language of the snippet (guessed from the file extension by default)",
    ),
    example: bool = typer.Option(
        False,
        "--example",
        help="Review the bundled example snippet",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.rich,
        "--format",
        "-f",
        help="Output format",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
):
    """Review a code snippet."""
    setup_logging(verbose or settings.verbose, level=settings.log_level, force=True)

    if example:
        code, language = EXAMPLE_CODE, language or EXAMPLE_LANGUAGE
    else:
        code = _read_code(path)
        language = language or guess_language(path) or settings.default_language

    if not code.strip():
        # Nothing to review
        return

    logger.debug(f"Reviewing {len(code)} characters of {language}")

    # Keep stdout clean for machine-readable output
    surface_console = console if output_format == OutputFormat.rich else err_console

    try:
        result, error = asyncio.run(_run_review(code, language, surface_console))
    except ConfigurationError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    # No result without an error means an empty model response, already reported on the surface
    if error is not None or result is None:
        raise typer.Exit(1)

    if output_format == OutputFormat.json:
        console.print_json(to_json(result))
    elif output_format == OutputFormat.yaml:
        console.print(to_yaml(result), end="", markup=False, highlight=False, soft_wrap=True)


async def _run_review(code: str, language: str, surface_console: Console):
    """Async review implementation."""
    async with GeminiClient() as client:
        session = ReviewSession(
            client,
            ConsoleSurface(surface_console),
            UIState(err_console),
        )
        result: Optional[ReviewResult] = await session.submit(code, language)
        return result, session.last_error


@app.command()
def example():
    """Print the bundled example snippet."""
    console.print(EXAMPLE_CODE, end="", markup=False, highlight=False, soft_wrap=True)


@app.command()
def schema():
    """Show the response schema sent to the model."""
    console.print_json(json.dumps(RESPONSE_SCHEMA))


@app.command()
def version():
    """Show version information."""
    console.print(f"Snippet Reviewer v{__version__}")


if __name__ == "__main__":
    app()
