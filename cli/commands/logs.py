# CLI commands for viewing and managing tool-call logs
import json
from datetime import datetime
import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from agentfs.config import get_settings
from agentfs.utils.tool_logger import get_tool_logger

app = typer.Typer(help="Inspect tool-call logs")
console = Console()

def _logger(ctx: typer.Context):
    settings = ctx.obj or get_settings()
    return get_tool_logger(settings.log_dir)

@app.command()
def stats(ctx: typer.Context):
    """Show logging statistics"""
    stats = _logger(ctx).get_stats()

    table = Table(title="Tool Call Statistics", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Total Logs", str(stats["total_logs"]))
    table.add_row("Total Errors", str(stats["errors"]))
    table.add_row("Success Rate", f"{((stats['total_logs'] - stats['errors']) / max(stats['total_logs'], 1) * 100):.1f}%")

    console.print(table)

    if stats["by_tool"]:
        tool_table = Table(title="By Tool", show_header=True)
        tool_table.add_column("Tool", style="cyan")
        tool_table.add_column("Total", style="white")
        tool_table.add_column("Success", style="green")
        tool_table.add_column("Errors", style="red")

        for tool, data in stats["by_tool"].items():
            tool_table.add_row(tool, str(data["total"]), str(data["success"]), str(data["errors"]))

        console.print("\n")
        console.print(tool_table)

@app.command()
def recent(
    ctx: typer.Context,
    tool: str = typer.Option(None, "--tool", "-t", help="Filter by tool"),
    limit: int = typer.Option(10, "--limit", "-n", help="Number of logs to show"),
    errors_only: bool = typer.Option(False, "--errors", "-e", help="Show only errors"),
    full: bool = typer.Option(False, "--full", help="Show the complete log entries"),
):
    """Show recent log entries"""
    logger = _logger(ctx)
    if errors_only:
        logs = logger.get_error_logs(tool=tool, limit=limit)
    else:
        logs = logger.get_recent_logs(tool=tool, limit=limit)

    if not logs:
        console.print("[yellow]No logs found[/yellow]")
        return

    for log in logs:
        status = log.get("status", "unknown")
        timestamp = log.get("timestamp", "Unknown")
        try:
            timestamp = datetime.fromisoformat(timestamp).strftime("%Y-%m-%d %H:%M:%S")
        except ValueError:
            pass

        status_color = "green" if status == "success" else "red"
        header = f"[{status_color}]{status.upper()}[/{status_color}] | {log.get('tool', 'unknown')} | {timestamp}"

        if full:
            body = Syntax(json.dumps(log, indent=2), "json")
        else:
            args = log.get("input", {}).get("args", {})
            output = log.get("output", {})
            summary = output.get("error") or (output.get("result") or {}).get("message") \
                or (output.get("result") or {}).get("filepath", "")
            body = Text.assemble(
                ("args: ", "dim"), json.dumps(args)[:100], "\n",
                ("result: ", "dim"), str(summary)[:100],
            )

        console.print(Panel(
            body,
            title=header,
            subtitle=f"[dim]{log.get('_filename', 'unknown')}[/dim]",
            border_style="blue" if status == "success" else "red",
        ))

@app.command()
def clear(
    ctx: typer.Context,
    tool: str = typer.Option(None, "--tool", "-t", help="Clear logs for a specific tool"),
    older_than: int = typer.Option(None, "--older-than", "-o", help="Only clear logs older than N hours"),
    confirm: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Clear log files"""
    target = f"logs for tool '{tool}'" if tool else "all logs"
    if older_than:
        target += f" older than {older_than} hours"

    if not confirm:
        confirm = typer.confirm(f"Delete {target}?")

    if not confirm:
        console.print("[yellow]Cancelled[/yellow]")
        return

    deleted = _logger(ctx).clear_logs(tool=tool, older_than_hours=older_than)
    console.print(f"[green]Deleted {deleted} log files[/green]")
