"""
Tool registry: the static table of file tools exposed to the orchestrator.

Each entry pairs a tool name with its callable and the pydantic models that
describe its arguments and result, so the declared schemas and the runtime
validation can never drift apart.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Type

from pydantic import BaseModel

from agentfs.tools.read_file import read_file
from agentfs.tools.schema import ReadFileArgs, ReadResult, WriteFileArgs, WriteResult
from agentfs.tools.write_file import write_file


@dataclass(frozen=True)
class ToolInfo:
    name: str
    description: str
    args_model: Type[BaseModel]
    result_model: Type[BaseModel]
    func: Callable[..., BaseModel]


READ_FILE = ToolInfo(
    name="read_file",
    description="Read file contents from the local filesystem with optional line offset and limit",
    args_model=ReadFileArgs,
    result_model=ReadResult,
    func=read_file,
)

WRITE_FILE = ToolInfo(
    name="write_file",
    description="Write content to a file in the local filesystem",
    args_model=WriteFileArgs,
    result_model=WriteResult,
    func=write_file,
)

TOOL_REGISTRY: Dict[str, ToolInfo] = {
    READ_FILE.name: READ_FILE,
    WRITE_FILE.name: WRITE_FILE,
}


def get_tool(name: str) -> ToolInfo:
    """
    Look up a registered tool.

    Raises:
        KeyError: If no tool is registered under `name`
    """
    if name not in TOOL_REGISTRY:
        raise KeyError(f"Unknown tool: '{name}'. Valid tools: {list(TOOL_REGISTRY.keys())}")
    return TOOL_REGISTRY[name]


def get_all_tools() -> List[str]:
    return sorted(TOOL_REGISTRY.keys())


def tool_spec(name: str) -> Dict[str, Any]:
    """
    OpenAI-compatible function description for one tool, with the argument
    schema generated from its args model.
    """
    info = get_tool(name)
    parameters = info.args_model.model_json_schema(by_alias=True)
    parameters.pop("title", None)
    for prop in parameters.get("properties", {}).values():
        prop.pop("title", None)
    parameters["additionalProperties"] = False
    return {
        "type": "function",
        "function": {
            "name": info.name,
            "description": info.description,
            "parameters": parameters,
        },
    }


def output_schema(name: str) -> Dict[str, Any]:
    """JSON schema of the result a tool returns (camelCase field names)."""
    return get_tool(name).result_model.model_json_schema(by_alias=True, mode="serialization")


def get_tool_specs() -> List[Dict[str, Any]]:
    return [tool_spec(name) for name in get_all_tools()]
