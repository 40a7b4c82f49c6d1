"""Main CLI application."""

from __future__ import annotations

import errno
from typing import TYPE_CHECKING, Annotated

import click
import structlog
import typer
from typer.core import TyperCommand

from best import __version__
from best.cli.formatters import print_error, print_match, print_usage
from best.infrastructure.config import (
    OperatingMode,
    Options,
    OptionsError,
    WalkWithoutTypeError,
    build_query,
    load_global_config,
)
from best.infrastructure.logging import configure_logging
from best.modules.candidates import CandidateSourceError, iter_directory, iter_lines
from best.modules.selection import select_best

if TYPE_CHECKING:
    from collections.abc import Iterator

EXIT_NO_RESULT = 1
EXIT_INVALID_ARGUMENT = errno.EINVAL

logger = structlog.get_logger()


class BestCommand(TyperCommand):
    """Command that reports command line mistakes with EINVAL."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.NoSuchOption as e:
            error = click.NoSuchOption(
                e.option_name,
                message=f"Invalid option: {e.option_name.lstrip('-')}",
                ctx=ctx,
            )
            error.exit_code = EXIT_INVALID_ARGUMENT
            raise error from e
        except click.UsageError as e:
            e.exit_code = EXIT_INVALID_ARGUMENT
            raise


app = typer.Typer(
    name="best",
    help="Print the candidate closest to the query by edit distance.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"best {__version__}")
        raise typer.Exit()


def _candidates(options: Options) -> Iterator[tuple[str, str]]:
    """Pick the candidate source for the run."""
    if options.mode is OperatingMode.STDIN:
        # Undecodable bytes become U+FFFD instead of aborting the scan
        return iter_lines(click.get_text_stream("stdin", errors="replace"))
    return iter_directory(
        include_files=options.include_files,
        include_directories=options.include_directories,
        recursive=options.walk_subdirectories,
        full_path=options.print_full_path,
    )


@app.command(cls=BestCommand)
def main(
    query: Annotated[
        list[str] | None,
        typer.Argument(help="Text to match; several words are joined by spaces."),
    ] = None,
    files: Annotated[
        bool,
        typer.Option("--files", "-f", help="Match files in the current directory"),
    ] = False,
    directories: Annotated[
        bool,
        typer.Option("--directories", "-d", help="Match directories"),
    ] = False,
    walk: Annotated[
        bool,
        typer.Option("--walk", "-w", help="Descend into subdirectories"),
    ] = False,
    full_path: Annotated[
        bool,
        typer.Option("--full-path", "-p", help="Print the absolute path"),
    ] = False,
    error_if_none: Annotated[
        bool,
        typer.Option("--error-if-none", "-e", help="Exit 1 if nothing matched"),
    ] = False,
    case_sensitive: Annotated[
        bool,
        typer.Option("--case-sensitive", "-c", help="Compare without folding case"),
    ] = False,
    replace_dots: Annotated[
        bool,
        typer.Option("--replace-dots", "-r", help="Treat dots as spaces"),
    ] = False,
    strip: Annotated[
        bool,
        typer.Option("--strip", "-s", help="Ignore surrounding whitespace"),
    ] = False,
    ignore_mismatches: Annotated[
        bool,
        typer.Option(
            "--ignore-mismatches", "-i", help="Skip candidates lacking the query"
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug output."),
    ] = False,
    version: Annotated[  # noqa: ARG001 - handled by callback
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """Print the candidate closest to QUERY.

    Candidates are read from stdin, one per line, unless -f, -d or -w
    select entries of the current directory instead.

    \b
    Examples:
        ls | best readme                 # Closest line of input
        best -f -r -s setup py           # Closest file, dots as spaces
        best -fdw -p config              # Closest entry anywhere below, absolute
        best -ei main < names.txt        # Only lines containing "main"
    """
    configure_logging(debug=verbose)
    config = load_global_config()

    command_line = Options(
        include_files=files,
        include_directories=directories,
        walk_subdirectories=walk,
        print_full_path=full_path,
        fail_if_no_result=error_if_none,
        case_sensitive=case_sensitive,
        replace_dots=replace_dots,
        strip_whitespace=strip,
        require_substring=ignore_mismatches,
    )

    try:
        options = command_line.merged(config.default_options).validate()
        normalization = options.normalization(config.delimiter)
        normalized_query = build_query(query, normalization)
    except WalkWithoutTypeError as e:
        print_error(str(e))
        raise typer.Exit(EXIT_INVALID_ARGUMENT) from e
    except OptionsError as e:
        print_error(str(e))
        print_usage()
        raise typer.Exit(EXIT_INVALID_ARGUMENT) from e

    logger.debug("options_resolved", mode=options.mode.value, query=normalized_query)

    try:
        best = select_best(
            _candidates(options),
            normalized_query,
            normalization,
            require_substring=options.require_substring,
        )
    except CandidateSourceError as e:
        print_error(str(e))
        raise typer.Exit(EXIT_NO_RESULT) from e

    if best is not None:
        print_match(best.value)
    elif options.fail_if_no_result:
        raise typer.Exit(EXIT_NO_RESULT)
