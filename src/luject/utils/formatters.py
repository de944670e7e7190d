"""Rich output formatters for CLI display."""

from __future__ import annotations

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def print_step(msg: str, verbose_detail: str | None = None) -> None:
    console.print(msg, highlight=False)
    if verbose_detail:
        console.print(f"  [dim]-> {verbose_detail}[/dim]", highlight=False)


def print_stage(msg: str) -> None:
    console.print(f"[magenta]{msg}[/magenta]", highlight=False)


def print_success(msg: str) -> None:
    console.print(f"[bold green]{msg}[/bold green]")


def print_output_path(path: str) -> None:
    console.print(f"[yellow]  ->[/yellow] [bold]{path}[/bold]", highlight=False)


def print_error(msg: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {msg}")


def print_warning(msg: str) -> None:
    err_console.print(f"[bold yellow]Warning:[/bold yellow] {msg}")
