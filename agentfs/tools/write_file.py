# agentfs/tools/write_file.py

import os
import re
from pathlib import Path
from typing import Optional, Union

from agentfs.tools.schema import WriteResult
from agentfs.utils.fs import resolve_path

# "<digits>| " as rendered by read_file, or "<digits>→ " from other viewers
LINE_NUMBER_PREFIX = re.compile(r"^\s*[0-9]+[|→]\s(.*)$", re.DOTALL)


def strip_line_numbers(content: str) -> str:
    """
    Remove read_file style line-number prefixes from `content`.

    Nothing changes unless at least one line carries a prefix. Once one does,
    every prefixed line is stripped and the rest are kept as they are.
    """
    lines = content.split("\n")

    # Pass 1: detect
    if not any(LINE_NUMBER_PREFIX.match(line) for line in lines):
        return content

    # Pass 2: transform
    cleaned = []
    for line in lines:
        match = LINE_NUMBER_PREFIX.match(line)
        cleaned.append(match.group(1) if match else line)
    return "\n".join(cleaned)


def write_file(
    filepath: str,
    content: str,
    working_directory: Optional[Union[str, Path]] = None,
) -> WriteResult:
    """
    Write `content` to `filepath`, replacing the file if it exists.

    Relative paths resolve against `working_directory`, or the current
    directory when none is given. Failures are reported in the result
    with ``is_error=True``; this function does not raise for I/O errors.
    """
    resolved = filepath
    try:
        resolved = resolve_path(filepath, working_directory)
        existed = os.path.exists(resolved)

        # Encode up front so an unencodable string never truncates the old file
        data = strip_line_numbers(content).encode("utf-8")

        with open(resolved, "wb") as fh:
            fh.write(data)
    except (OSError, ValueError) as e:
        return WriteResult(
            message=f"Failed to write file '{filepath}': {e}",
            filepath=resolved,
            existed=False,
            is_error=True,
        )

    action = "updated" if existed else "created"
    return WriteResult(
        message=f"File {action} successfully: '{resolved}'",
        filepath=resolved,
        existed=existed,
    )
