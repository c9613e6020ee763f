# agentfs/tools/__init__.py

from .schema import ToolRequest, ReadFileArgs, ReadMetadata, ReadResult, WriteFileArgs, WriteResult
from .read_file import ReadFileError
from .write_file import strip_line_numbers
from .registry import TOOL_REGISTRY, get_tool, get_tool_specs, tool_spec, output_schema
from .core import invoke_tool, run_tool

__all__ = [
    "ToolRequest",
    "ReadFileArgs",
    "ReadMetadata",
    "ReadResult",
    "WriteFileArgs",
    "WriteResult",
    "ReadFileError",
    "strip_line_numbers",
    "TOOL_REGISTRY",
    "get_tool",
    "get_tool_specs",
    "tool_spec",
    "output_schema",
    "invoke_tool",
    "run_tool",
]
