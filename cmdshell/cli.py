"""Command-line entry point for cmdshell."""

import logging
import os
import sys
from typing import Optional

import click

from cmdshell import __version__
from cmdshell.context import CommandContext
from cmdshell.control_flow import ExitShell
from cmdshell.exceptions import ShellIOError
from cmdshell.shell import DEFAULT_PROMPT, Shell

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])
LOG_FORMAT = "[%(levelname)s %(name)s:%(lineno)d] %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def configure_logging(log_level: str) -> None:
    """Send log records to stderr; CMDSHELL_DEBUG forces DEBUG."""
    if os.getenv("CMDSHELL_DEBUG"):
        log_level = "DEBUG"
    logging.basicConfig(level=getattr(logging, log_level), format=LOG_FORMAT, stream=sys.stderr)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="cmdshell")
@click.option(
    "-c",
    "--command",
    "command_line",
    default=None,
    help="Run a single command line and exit with its status.",
)
@click.option(
    "--prompt",
    default=DEFAULT_PROMPT,
    show_default=True,
    envvar="CMDSHELL_PROMPT",
    help="Prompt written before each line is read.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="CMDSHELL_LOG_LEVEL",
    help="Verbosity of diagnostic logging on stderr.",
)
def cli(command_line: Optional[str], prompt: str, log_level: str) -> None:
    """Interactive command interpreter with a few builtins and PATH lookup."""
    configure_logging(log_level.upper())

    context = CommandContext.from_environ()
    logger.debug("starting with %r", context)

    shell = Shell(context=context, prompt=prompt)

    try:
        if command_line is not None:
            try:
                response = shell.execute(command_line)
            except ExitShell as e:
                sys.exit(e.exit_code)
            sys.exit(response.exit_code)

        sys.exit(shell.run())
    except ShellIOError as e:
        click.echo(f"cmdshell: {e}", err=True)
        sys.exit(e.exit_code)


def main() -> None:
    """CLI entry point used by the `cmdshell` console script."""
    cli()
