#!/usr/bin/env python3
"""
bytary.cli.cli

Typer-based CLI for converting byte streams between text encodings.

Examples
--------
Hex-dump a file, two bytes per group, 32 digits per line:

    bytary convert hex --input data.bin --space 2 --wrap 32

Decode hex text from stdin back to raw bytes:

    printf '1b34' | bytary convert bytes hex > out.bin

Show which route a conversion takes:

    bytary route bytes hex
"""

from __future__ import annotations

import logging
import traceback

import typer

from bytary.errors import BytaryError

app = typer.Typer(
    name="bytary",
    help="Convert binary data between bytes, bin, hex and oct text encodings.",
    no_args_is_help=True,
)

CONVERTER_MODULE_HELP = (
    "Converter module import path or file path adding extra edges (repeatable)."
)


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False, "--debug", help="Show full tracebacks on error and debug logging."
    ),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    to: str = typer.Argument("bytes", help="Output format."),
    from_: str = typer.Argument("bytes", metavar="FROM", help="Input format."),
    space_interval: int = typer.Option(
        0, "--space", "-s", min=0, help="Insert a space every N output bytes (0: never)."
    ),
    wrap_interval: int = typer.Option(
        0, "--wrap", "-w", min=0, help="Break the line every N output bytes (0: never)."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Print the conversion route to stderr."
    ),
    input_file: typer.FileBinaryRead = typer.Option(
        "-", "--input", "-i", help="Input file ('-' for stdin)."
    ),
    output_file: typer.FileBinaryWrite = typer.Option(
        "-", "--output", "-o", help="Output file ('-' for stdout)."
    ),
    converter_module: list[str] | None = typer.Option(
        None, "--converter-module", help=CONVERTER_MODULE_HELP
    ),
) -> None:
    """Convert data read from the input into another format.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    to : str, default="bytes"
        Output format name.
    from_ : str, default="bytes"
        Input format name.
    space_interval : int, default=0
        Output bytes between inserted spaces.
    wrap_interval : int, default=0
        Output bytes between inserted newlines.
    verbose : bool, default=False
        Whether to echo the route and formatting to stderr.

    Notes
    -----
    - Indirect conversions buffer each intermediate stage in memory.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from bytary.application.use_cases import (
            build_conversion_options,
            execute_plan,
            parse_request,
            plan_conversion,
        )
        from bytary.graph.registry import create_default_registry

        options = build_conversion_options(
            space_interval=space_interval,
            wrap_interval=wrap_interval,
            converter_modules=converter_module,
        )
        source, target = parse_request(from_, to, options)
        registry = create_default_registry(options.converter_modules)
        plan = plan_conversion(source, target, registry)

        if verbose:
            typer.echo(f"Operation: {plan.describe()}", err=True)
            typer.echo(f"Formatting: {options.formatting.describe()}", err=True)

        execute_plan(plan, input_file, output_file, options.formatting)
    except BytaryError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))


@app.command("formats")
def formats_cmd(
    ctx: typer.Context,
    converter_module: list[str] | None = typer.Option(
        None, "--converter-module", help=CONVERTER_MODULE_HELP
    ),
) -> None:
    """List formats convertible both ways with raw bytes."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from bytary.application.use_cases import list_convertible_formats
        from bytary.graph.registry import create_default_registry

        registry = create_default_registry(converter_module)
        names = ", ".join(str(fmt) for fmt in list_convertible_formats(registry))
        typer.echo(f"Available formats: {names}")
    except BytaryError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))


@app.command("route")
def route_cmd(
    ctx: typer.Context,
    from_: str = typer.Argument(..., metavar="FROM", help="Input format."),
    to: str = typer.Argument(..., help="Output format."),
    converter_module: list[str] | None = typer.Option(
        None, "--converter-module", help=CONVERTER_MODULE_HELP
    ),
) -> None:
    """Show the chain of direct conversions used between two formats."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from bytary.application.use_cases import (
            build_conversion_options,
            parse_request,
            plan_conversion,
        )
        from bytary.graph.registry import create_default_registry

        options = build_conversion_options(converter_modules=converter_module)
        source, target = parse_request(from_, to, options)
        registry = create_default_registry(options.converter_modules)
        typer.echo(plan_conversion(source, target, registry).describe())
    except BytaryError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))


if __name__ == "__main__":
    app()
