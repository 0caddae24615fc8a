"""
Terminal output for redpill commands
"""
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm
from rich.table import Table

from .. import __version__
from .process.base import PortListing, ProcessRecord
from .utils import truncate

console = Console()

def show_version() -> None:
    """Print the version banner"""
    console.print(f"[bold red]redpill[/bold red] v{__version__}")

def show_error(message: str) -> None:
    """Print an error message"""
    console.print(f"[bold red]✗ {escape(message)}")

def show_process_info(port: int, proc: ProcessRecord) -> None:
    """Print details of a process holding a port"""
    console.print(f"\n[bold]Port {port}[/bold] is in use by:")
    console.print(f"  [cyan]Process:[/cyan] {escape(proc.name)}")
    console.print(f"  [cyan]PID:[/cyan]     {proc.pid}")
    console.print(f"  [cyan]User:[/cyan]    {escape(proc.user)}")
    console.print(f"  [cyan]Command:[/cyan] {escape(proc.command)}", highlight=False)

def show_port_free(port: int) -> None:
    console.print(f"[bold green]✓ Port {port} is free")

def show_kill_success(port: int, pid: int) -> None:
    console.print(f"[bold green]✓ Killed process {pid} on port {port}")

def show_kill_failed(pid: int) -> None:
    console.print(f"[bold red]✗ Failed to kill process {pid}")
    console.print("  [dim]Try again with sudo if the process belongs to another user")

def show_skipped() -> None:
    console.print("[yellow]Skipped")

def confirm(message: str) -> bool:
    """Ask a yes/no question, defaulting to no"""
    return Confirm.ask(f"[yellow]{message}", default=False, console=console)

def show_freeing_summary(freed: int, total: int) -> None:
    """Print the outcome of freeing a set of ports"""
    if total == 0:
        console.print("[yellow]No processes found on the specified ports")
        return
    color = "green" if freed == total else "yellow"
    console.print(f"\n[bold {color}]Freed {freed}/{total} process{'es' if total != 1 else ''}")

def show_list_empty() -> None:
    console.print("[yellow]No listening ports found")

def show_listing(entries: List[PortListing], command_width: int = 50) -> None:
    """
    Print a table of listening ports

    Args:
        entries: Listings to show, already sorted
        command_width: Maximum command length before truncation
    """
    table = Table(title="redpill - listening ports")
    table.add_column("PORT", style="cyan", justify="right")
    table.add_column("PID", style="magenta", justify="right")
    table.add_column("NAME", style="green")
    table.add_column("USER", style="yellow")
    table.add_column("COMMAND", style="dim", no_wrap=True)

    for entry in entries:
        proc = entry.process
        table.add_row(
            str(entry.port),
            str(proc.pid),
            escape(proc.name),
            escape(proc.user),
            escape(truncate(proc.command, command_width))
        )

    console.print(table)
    count = len(entries)
    console.print(f"\n  {count} port{'s' if count != 1 else ''} in use\n")
