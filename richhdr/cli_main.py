#!/usr/bin/env python3
"""
richhdr CLI - Command Line Interface

This module provides the Click-based CLI entry point for richhdr.
Command execution logic lives in the command classes under cli.commands.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

import sys
from dataclasses import dataclass, replace
from typing import Any

import click

from .cli.commands import AnalyzeCommand, CommandContext, VersionCommand
from .cli.display import console, display_validation_errors, print_banner
from .cli.validators import validate_inputs
from .config import Config
from .utils.error_handler import classify_and_log


@dataclass
class CLIArgs:
    filenames: tuple[str, ...]
    output_json: bool
    output: str | None
    aggregate: bool
    verbose: bool
    quiet: bool
    no_banner: bool
    config: str | None
    version: bool


def main(**kwargs: Any) -> None:
    """
    richhdr - decode the Rich header of PE files.
    """
    args = CLIArgs(**kwargs)
    try:
        run_cli(args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Analysis interrupted by user[/yellow]")
        sys.exit(1)
    except Exception as e:
        handle_main_error(e, args.verbose)


def handle_main_error(e: Exception, verbose: bool) -> None:
    """
    Report an unexpected error and exit.

    Args:
        e: Exception that occurred
        verbose: Print the traceback as well
    """
    classify_and_log(e, {"phase": "cli"})
    console.print(f"[red]Error: {str(e)}[/red]")
    if verbose:
        console.print_exception()
    sys.exit(1)


@click.command()
@click.argument("filenames", nargs=-1, type=click.Path())
@click.option("-j", "--json", "output_json", is_flag=True, help="Output results in JSON format")
@click.option("-o", "--output", help="Write results to this file instead of stdout")
@click.option("-a", "--aggregate", is_flag=True, help="Sum object counts per tool id")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--quiet", is_flag=True, help="Only report errors")
@click.option("--no-banner", is_flag=True, help="Do not print the banner")
@click.option("--config", help="Custom config file path")
@click.option("--version", is_flag=True, help="Show version information and exit")
def cli(**kwargs: Any) -> None:
    """Decode the Rich header of one or more PE FILENAMES."""
    main(**kwargs)


def run_cli(args: CLIArgs) -> None:
    """Primary CLI workflow separated for clarity and testability."""
    if args.version:
        sys.exit(VersionCommand(_build_context(Config(), False, False)).execute({}))

    validation_errors = validate_inputs(args.filenames, args.output, args.config)
    if validation_errors:
        display_validation_errors(validation_errors)
        sys.exit(1)

    try:
        config = Config(args.config)
    except (ValueError, TypeError) as e:
        classify_and_log(e, {"phase": "configuration", "config": args.config})
        console.print(f"[red]Configuration error: {e}[/red]")
        sys.exit(1)

    context = _build_context(config, args.verbose, args.quiet)

    show_banner = config.typed_config.output.show_banner and not args.no_banner
    if show_banner and not args.output_json and not args.quiet:
        print_banner(context.console)

    _dispatch_command(context, replace(args, config=None))


def _build_context(config: Config, verbose: bool, quiet: bool) -> CommandContext:
    """Construct a CommandContext with logging configured."""
    return CommandContext.create(config=config, verbose=verbose, quiet=quiet)


def _dispatch_command(context: CommandContext, args: CLIArgs) -> None:
    command = AnalyzeCommand(context)
    exit_code = command.execute(
        {
            "filenames": args.filenames,
            "config": args.config,
            "output_json": args.output_json,
            "output": args.output,
            "aggregate": args.aggregate,
            "verbose": args.verbose,
        }
    )
    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
