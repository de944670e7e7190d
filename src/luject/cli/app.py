"""Typer application: luject [options] libraries."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from luject import LujectContext, __version__

app = typer.Typer(
    name="luject",
    help="Statically inject dynamic libraries into the given program.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Shared state for the running command
_ctx = LujectContext()


def get_context() -> LujectContext:
    return _ctx


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"luject {__version__}")
        raise typer.Exit()


@app.command(
    epilog="Examples: luject -i app.apk -p libtest liba.so | luject -i app.apk -p 'libtest_*' liba.so",
)
def main(
    ctx: typer.Context,
    libraries: Optional[list[Path]] = typer.Argument(None, help="Dynamic libraries to inject"),
    input: Optional[Path] = typer.Option(None, "--input", "-i", help="Set the input program path"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Set the output program path"),
    pattern: Optional[str] = typer.Option(
        None, "--pattern", "-p", help="Inject only into libraries matching this pattern (apk only)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    config: Optional[str] = typer.Option(None, "--config", "-C", help="Path to luject.yaml"),
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=_version_callback, is_eager=True
    ),
) -> None:
    """Statically inject dynamic libraries into the given program."""
    from luject.config.loader import load_config
    from luject.errors import LujectError
    from luject.injection.models import InjectionRequest
    from luject.utils.formatters import print_error, print_output_path, print_success
    from luject.utils.logging import setup_cli_logging

    if input is None or not libraries:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    _ctx.reset()
    try:
        _ctx.config = load_config(config)
    except LujectError as exc:
        print_error(str(exc))
        raise typer.Exit(1)
    setup_cli_logging(_ctx.config.logging, verbose=verbose)

    request = InjectionRequest.create(
        input,
        libraries,
        output_path=output,
        pattern=pattern,
        verbose=verbose,
    )
    try:
        output_path = _ctx.ensure_dispatcher().inject(request)
    except LujectError as exc:
        print_error(str(exc))
        raise typer.Exit(1)

    print_success("inject ok!")
    print_output_path(str(output_path))
