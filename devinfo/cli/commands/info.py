import json

import typer
from rich.console import Console
from rich.table import Table

from devinfo.runtime.device import default_device_info

console = Console()


def info(
    as_json: bool = typer.Option(False, "--json", help="Print the snapshot as JSON."),
):
    """
    Show OS, hardware and memory information for this device.
    """
    snapshot = default_device_info().snapshot()

    if as_json:
        typer.echo(json.dumps(snapshot.to_dict(), indent=2))
        return

    table = Table(title="Device Information")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")

    for field, value in snapshot.to_dict().items():
        if field == "total_ram_megabytes":
            value = f"{value} MB" if value else "unknown"
        table.add_row(field, str(value))
    console.print(table)


def cpu():
    """
    Print the number of logical CPU cores.
    """
    typer.echo(default_device_info().cpu_core_count())


def ram():
    """
    Print total RAM in megabytes (0 when it cannot be determined).
    """
    typer.echo(default_device_info().total_ram_megabytes())
