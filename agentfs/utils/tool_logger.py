"""
Tool call logger - saves each dispatched call and its result as a separate JSON file.
"""

import json
import hashlib
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from agentfs.utils.fs import ensure_dir


class ToolCallLogger:
    """
    Logger for tool calls. Each call lands in ``<log_dir>/<tool>/`` as
    ``<timestamp>_<status>_<hash>.json``.
    """

    def __init__(self, log_dir: Union[str, Path] = "tool_logs"):
        self.log_dir = Path(log_dir)

    def _get_tool_dir(self, tool: str) -> Path:
        """Get or create directory for a specific tool."""
        tool_dir = self.log_dir / tool
        ensure_dir(tool_dir)
        return tool_dir

    def _iter_tool_dirs(self, tool: Optional[str] = None) -> List[Path]:
        if tool:
            tool_dir = self.log_dir / tool
            return [tool_dir] if tool_dir.is_dir() else []
        if not self.log_dir.exists():
            return []
        return [d for d in self.log_dir.iterdir() if d.is_dir()]

    def log_call(
        self,
        tool: str,
        args: Dict[str, Any],
        result: Optional[Dict[str, Any]] = None,
        error: Optional[str] = None,
    ) -> str:
        """
        Log a single tool call.

        Args:
            tool: Tool name (read_file, write_file)
            args: Arguments the tool was called with
            result: Wire-shaped result, if the tool returned one
            error: Error message if the call failed before producing a result

        Returns:
            Path to the log file
        """
        timestamp = datetime.now()
        timestamp_str = timestamp.strftime("%Y%m%d_%H%M%S_%f")

        content_hash = hashlib.md5(
            json.dumps(args, sort_keys=True, default=str).encode()
        ).hexdigest()[:6]

        # Structured failures (isError) count as errors too
        failed = error is not None or bool(result and result.get("isError"))
        status = "error" if failed else "success"
        filename = f"{timestamp_str}_{status}_{content_hash}.json"
        filepath = self._get_tool_dir(tool) / filename

        log_data = {
            "timestamp": timestamp.isoformat(),
            "tool": tool,
            "status": status,
            "input": {"args": args},
            "output": {"result": result, "error": error},
            "stats": {
                "input_chars": len(json.dumps(args, default=str)),
                "output_chars": len(json.dumps(result)) if result else 0,
            },
        }

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(log_data, f, indent=2, default=str)

        return str(filepath)

    def _load(self, log_file: Path) -> Dict[str, Any]:
        with open(log_file, "r", encoding="utf-8") as f:
            log_data = json.load(f)
        log_data["_filename"] = log_file.name
        log_data["_tool"] = log_file.parent.name
        return log_data

    def get_recent_logs(self, tool: Optional[str] = None, limit: int = 10) -> List[Dict[str, Any]]:
        """
        Get recent log entries, most recent first.

        Args:
            tool: Tool name (or None for all tools)
            limit: Maximum number of logs to return
        """
        log_files = [f for d in self._iter_tool_dirs(tool) for f in d.glob("*.json")]
        # Filenames start with the timestamp, so name order is time order
        log_files.sort(key=lambda x: x.name, reverse=True)
        return [self._load(f) for f in log_files[:limit]]

    def get_error_logs(self, tool: Optional[str] = None, limit: int = 20) -> List[Dict[str, Any]]:
        """Get recent error logs, most recent first."""
        error_files = [f for d in self._iter_tool_dirs(tool) for f in d.glob("*_error_*.json")]
        error_files.sort(key=lambda x: x.name, reverse=True)
        return [self._load(f) for f in error_files[:limit]]

    def clear_logs(self, tool: Optional[str] = None, older_than_hours: Optional[int] = None) -> int:
        """
        Delete log files.

        Args:
            tool: Tool name (or None for all tools)
            older_than_hours: Only delete logs older than this many hours (or None for all)

        Returns:
            Number of files deleted
        """
        cutoff_time = None
        if older_than_hours:
            cutoff_time = datetime.now().timestamp() - (older_than_hours * 3600)

        deleted_count = 0
        for tool_dir in self._iter_tool_dirs(tool):
            for log_file in tool_dir.glob("*.json"):
                if cutoff_time is None or log_file.stat().st_mtime < cutoff_time:
                    log_file.unlink()
                    deleted_count += 1
        return deleted_count

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about logged tool calls."""
        stats: Dict[str, Any] = {
            "total_logs": 0,
            "by_tool": {},
            "errors": 0,
        }

        for tool_dir in self._iter_tool_dirs():
            log_files = list(tool_dir.glob("*.json"))
            error_files = list(tool_dir.glob("*_error_*.json"))

            stats["by_tool"][tool_dir.name] = {
                "total": len(log_files),
                "errors": len(error_files),
                "success": len(log_files) - len(error_files),
            }
            stats["total_logs"] += len(log_files)
            stats["errors"] += len(error_files)

        return stats


# Global logger instances, one per log directory
_loggers: Dict[Path, ToolCallLogger] = {}

def get_tool_logger(log_dir: Union[str, Path] = "tool_logs") -> ToolCallLogger:
    """Get the shared tool-call logger for `log_dir`."""
    key = Path(log_dir)
    if key not in _loggers:
        _loggers[key] = ToolCallLogger(key)
    return _loggers[key]
