# agentfs/tools/core.py

import sys
import json
from typing import Any, Dict, Optional

from pydantic import ValidationError

from agentfs.config import Settings, get_settings
from .permissions import ACL
from .read_file import ReadFileError
from .registry import get_tool
from .schema import ToolRequest
from agentfs.utils.tool_logger import get_tool_logger


def _log_call(settings: Settings, name: str, args: Dict[str, Any],
              result: Optional[Dict[str, Any]] = None, error: Optional[str] = None) -> None:
    if not settings.log_tool_calls:
        return
    try:
        get_tool_logger(settings.log_dir).log_call(name, args, result=result, error=error)
    except OSError as e:
        print(f"[agentfs] could not log '{name}' call: {e}", file=sys.stderr)


def run_tool(name: str, args: Dict[str, Any], settings: Settings | None = None) -> Dict[str, Any]:
    """
    Validate `args` and run the named tool in-process.

    Returns the wire-shaped result (camelCase keys, unset fields omitted).

    Raises:
        KeyError: unknown tool
        PermissionError: tool not allowed by the ACL
        pydantic.ValidationError: arguments do not match the tool's schema
        ReadFileError: read_file hit an unexpected I/O failure
    """
    settings = settings or get_settings()
    info = get_tool(name)

    if not ACL(settings).is_allowed(name):
        raise PermissionError(f"Permission denied for tool '{name}'")

    try:
        parsed = info.args_model.model_validate(args)
        kwargs = parsed.model_dump()
        if name == "write_file" and kwargs.get("working_directory") is None and settings.working_directory:
            kwargs["working_directory"] = str(settings.working_directory)
        result = info.func(**kwargs).to_wire()
    except (ValidationError, ReadFileError) as e:
        _log_call(settings, name, args, error=str(e))
        raise

    _log_call(settings, name, args, result=result)
    return result


def invoke_tool(request_json: str, settings: Settings | None = None) -> str:
    """
    Entrypoint for calling a tool. Takes a JSON string, returns a JSON string.

    Request: { "name": "read_file", "args": {...} }
    Response: the tool's result, or { "tool": ..., "error": "..." } when the
    call could not produce one.
    Steps:
      1. Parse & validate JSON -> ToolRequest
      2. ACL check and argument validation
      3. Run the tool
      4. Return JSON response
    """
    # 1. Parse & validate
    payload = None
    try:
        payload = json.loads(request_json)
        tool_req = ToolRequest.model_validate(payload)
    except (ValueError, TypeError) as e:
        name = payload.get("name") if isinstance(payload, dict) else None
        return json.dumps({"tool": name, "error": f"Invalid request: {e}"})

    # 2-3. Permission, validation, execution
    try:
        result = run_tool(tool_req.name, tool_req.args, settings=settings)
    except KeyError:
        err = f"Unknown tool: '{tool_req.name}'"
    except PermissionError as e:
        err = str(e)
    except ValidationError as e:
        err = f"Invalid arguments for '{tool_req.name}': {e}"
    except ReadFileError as e:
        err = str(e)
    else:
        # 4. Return JSON
        return json.dumps(result)

    return json.dumps({"tool": tool_req.name, "error": err})
