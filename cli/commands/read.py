import json
import typer
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.text import Text

from agentfs.tools.read_file import read_file, ReadFileError
from agentfs.tools.schema import DEFAULT_READ_LIMIT

app = typer.Typer(help="Read files with line numbers")
console = Console(highlight=False)

@app.command()
def file(
    path: str = typer.Argument(..., help="File to read (absolute, or relative to the current directory)"),
    offset: int = typer.Option(0, "--offset", "-o", min=0, help="Zero-based line to start from"),
    limit: int = typer.Option(DEFAULT_READ_LIMIT, "--limit", "-n", min=1, help="Maximum lines to show"),
    preview: bool = typer.Option(False, "--preview", "-p", help="Show the first-lines preview instead of the window"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw tool result as JSON"),
):
    """Show a line-numbered window of a file"""
    try:
        result = read_file(path, offset=offset, limit=limit)
    except ReadFileError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.to_wire(), indent=2))
    elif result.is_error:
        console.print(Panel(Text(result.content), title="Read failed", border_style="red"))
    else:
        meta = result.metadata
        body = meta.preview if preview else result.content
        typer.echo(body)
        console.print(
            f"[dim]{escape(result.filepath)} | lines {meta.start_line}-{meta.end_line} of {meta.total_lines}[/dim]",
            soft_wrap=True,
        )

    if result.is_error:
        raise typer.Exit(1)
