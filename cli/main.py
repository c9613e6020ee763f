from pathlib import Path
import typer
from rich.console import Console
from agentfs.config import get_settings

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console(highlight=False)

@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    config: Path = typer.Option(
        None, "--config", "-c", exists=True, file_okay=True, dir_okay=False,
        help="Path to .agentfs.yml (overrides env)"
    ),
):
    """
    :file_folder: [bold cyan]agentfs[/bold cyan] - file tools for coding agents
    """
    if verbose:
        console.print(":gear: verbose mode on")
    ctx.obj = get_settings(config_path=config)
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())

# Sub-commands imported lazily to cut startup time
from importlib import import_module

for _cmd in ("read", "write", "tools", "logs"):
    mod = import_module(f"cli.commands.{_cmd}")
    app.add_typer(mod.app, name=_cmd)
