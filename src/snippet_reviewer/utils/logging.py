"""Logging configuration."""

import logging
from typing import Union
from rich.logging import RichHandler
from rich.console import Console

console = Console(stderr=True)


def setup_logging(
    verbose: bool = False,
    level: Union[str, int] = logging.INFO,
    force: bool = False,
) -> logging.Logger:
    """Configure logging with Rich handler.

    Args:
        verbose: Enable verbose logging (overrides level with DEBUG)
        level: Log level name or number
        force: Replace handlers already installed on the root logger

    Returns:
        Configured logger
    """
    if verbose:
        level = logging.DEBUG
    elif isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    # Configure root logger
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                tracebacks_show_locals=verbose,
            )
        ],
        force=force,
    )

    # httpx logs full request URLs, which carry the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    # Return logger for this package
    logger = logging.getLogger("snippet_reviewer")
    logger.setLevel(level)

    return logger


# Package-level logger
logger = setup_logging()
