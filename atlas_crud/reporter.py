from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from atlas_crud.domain.models import RunReport


def print_report(report: RunReport, console: Optional[Console] = None) -> None:
    """
    Render a run report as a rich table, one row per step in execution order.
    """
    console = console or Console()

    if report.error:
        console.print(f"[bold red]Run failed:[/bold red] {report.error_type}: {report.error}")

    if not report.results:
        console.print("[yellow]No steps were executed.[/yellow]")
        return

    connection = "closed" if report.closed else "open" if report.connected else "never opened"
    table = Table(
        title=f"MongoDB Atlas CRUD Demo\n[dim]{report.database}.{report.collection}[/dim]",
        box=box.ROUNDED,
        caption=f"Connection: {connection}",
    )

    table.add_column("Step", style="cyan", no_wrap=True)
    table.add_column("Status", justify="center")
    table.add_column("Result", overflow="fold")
    table.add_column("Duration (ms)", justify="right", style="green")

    for result in report.results:
        status = "[bold green]ok[/bold green]" if result.ok else "[bold red]failed[/bold red]"
        detail = result.message if result.ok else f"{result.error_type}: {result.error}"
        table.add_row(
            result.operation,
            status,
            detail,
            f"{result.duration_seconds * 1000:.1f}",
        )

    console.print(table)


__all__ = ["print_report"]
