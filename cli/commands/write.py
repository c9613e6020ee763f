import sys
import json
from pathlib import Path
import typer
from rich.console import Console
from rich.markup import escape

from agentfs.tools.write_file import write_file

app = typer.Typer(help="Write files, stripping stray line-number prefixes")
console = Console(highlight=False)

@app.command()
def file(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="File to write"),
    content: str = typer.Option(None, "--content", help="Text to write (defaults to stdin)"),
    from_file: Path = typer.Option(
        None, "--from-file", "-f", exists=True, file_okay=True, dir_okay=False,
        help="Take the text to write from this file"
    ),
    cwd: Path = typer.Option(None, "--cwd", help="Directory relative paths resolve against"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw tool result as JSON"),
):
    """Write text to a file, creating or replacing it"""
    settings = ctx.obj

    if content is not None and from_file is not None:
        console.print("[red]Error:[/red] use either --content or --from-file, not both")
        raise typer.Exit(2)
    # Raw bytes in, so \r\n reaches the file untouched
    try:
        if from_file is not None:
            content = from_file.read_bytes().decode("utf-8")
        elif content is None:
            content = sys.stdin.buffer.read().decode("utf-8")
    except UnicodeDecodeError as e:
        console.print(f"[red]Error:[/red] input is not valid UTF-8: {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    working_directory = cwd
    if working_directory is None and settings is not None:
        working_directory = settings.working_directory

    result = write_file(path, content, working_directory=working_directory)

    if as_json:
        typer.echo(json.dumps(result.to_wire(), indent=2))
    elif result.is_error:
        console.print(f"[red]Error:[/red] {escape(result.message)}", soft_wrap=True)
    else:
        console.print(f":white_check_mark: {escape(result.message)}", soft_wrap=True)

    if result.is_error:
        raise typer.Exit(1)
