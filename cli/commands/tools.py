import json
import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from agentfs.tools.core import invoke_tool
from agentfs.tools.permissions import ACL
from agentfs.tools.registry import TOOL_REGISTRY, get_tool_specs, output_schema, tool_spec

app = typer.Typer(help="Inspect and call the registered tools")
console = Console()

@app.command("list")
def list_tools(ctx: typer.Context):
    """List registered tools and whether the ACL allows them"""
    acl = ACL(ctx.obj)
    table = Table(title="Registered Tools", show_header=True)
    table.add_column("Tool", style="cyan")
    table.add_column("Allowed", style="green")
    table.add_column("Description", style="white")

    for name, info in sorted(TOOL_REGISTRY.items()):
        allowed = "yes" if acl.is_allowed(name) else "[red]no[/red]"
        table.add_row(name, allowed, info.description)

    console.print(table)

@app.command()
def spec(
    name: str = typer.Argument(None, help="Tool name (omit for all tools)"),
    output: bool = typer.Option(False, "--output", help="Show the result schema instead of the input spec"),
):
    """Print the function spec handed to the model"""
    if name is not None and name not in TOOL_REGISTRY:
        console.print(f"[red]Unknown tool: {name}[/red]")
        raise typer.Exit(1)

    if output:
        names = [name] if name else sorted(TOOL_REGISTRY)
        data = {n: output_schema(n) for n in names}
    else:
        data = tool_spec(name) if name else get_tool_specs()
    console.print(Syntax(json.dumps(data, indent=2), "json"))

@app.command()
def call(
    ctx: typer.Context,
    request: str = typer.Argument(..., help='JSON request, e.g. \'{"name": "read_file", "args": {"filepath": "setup.py"}}\''),
):
    """Dispatch a JSON tool request and print the JSON response"""
    response = invoke_tool(request, settings=ctx.obj)
    typer.echo(response)
    data = json.loads(response)
    if "error" in data or data.get("isError"):
        raise typer.Exit(1)
