# agentfs/tools/read_file.py

import os
from typing import List

from agentfs.tools.schema import DEFAULT_READ_LIMIT, ReadMetadata, ReadResult
from agentfs.utils.fs import resolve_path

PREVIEW_LINES = 15
NEARBY_FILES_LIMIT = 10

BINARY_EXTENSIONS = frozenset({
    # images
    ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".svg", ".ico", ".webp",
    # documents
    ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx",
    # archives
    ".zip", ".rar", ".7z", ".tar", ".gz", ".bz2",
    # audio / video
    ".mp3", ".mp4", ".avi", ".mov", ".wav", ".flac",
    # executables and libraries
    ".exe", ".dll", ".so", ".dylib", ".app", ".bin",
    # data stores
    ".dat", ".db", ".sqlite", ".sqlite3",
})


class ReadFileError(RuntimeError):
    """Raised when a file passed the existence and binary checks but still could not be read."""


def is_binary_file(filepath: str) -> bool:
    ext = os.path.splitext(filepath)[1].lower()
    return ext in BINARY_EXTENSIONS


def format_lines(lines: List[str], first_number: int, width: int) -> List[str]:
    """Render `lines` as `<zero-padded number>| <text>`, numbering from `first_number`."""
    return [
        f"{str(first_number + i).zfill(width)}| {line}"
        for i, line in enumerate(lines)
    ]


def _padding(count: int) -> int:
    return max(2, len(str(count)))


def _not_found(resolved: str) -> ReadResult:
    parent = os.path.dirname(resolved)
    try:
        nearby = sorted(os.listdir(parent))[:NEARBY_FILES_LIMIT]
    except OSError:
        nearby = []

    if nearby:
        listing = "\n".join(f"  - {name}" for name in nearby)
        content = (
            f"File not found: '{resolved}'\n\n"
            f"Files in parent directory ({parent}):\n{listing}"
        )
    else:
        content = (
            f"File not found: '{resolved}'\n\n"
            f"Parent directory ({parent}) is empty or inaccessible."
        )
    return ReadResult(content=content, filepath=resolved, is_error=True)


def _preview(lines: List[str]) -> str:
    head = lines[:PREVIEW_LINES]
    preview = "\n".join(format_lines(head, 1, _padding(len(head))))
    if len(lines) > PREVIEW_LINES:
        preview += f"\n... ({len(lines) - PREVIEW_LINES} more lines)"
    return preview


def _load_lines(resolved: str) -> List[str]:
    # newline="" keeps \r\n intact; only \n splits lines
    with open(resolved, "r", encoding="utf-8", newline="") as fh:
        return fh.read().split("\n")


def read_file(filepath: str, offset: int = 0, limit: int = DEFAULT_READ_LIMIT) -> ReadResult:
    """
    Return a line-numbered window of a text file.

    Args:
        filepath: Absolute path, or a path relative to the current directory
        offset: Zero-based index of the first line to return
        limit: Maximum number of lines to return

    Returns:
        ReadResult. Missing files and binary files come back with
        ``is_error=True`` and an explanation in ``content``; otherwise
        ``content`` holds the window (plus a footer when more lines follow)
        and ``metadata`` carries the preview and 1-based line bounds.

    Raises:
        ReadFileError: the file exists and is not binary, yet reading it
            failed (permissions, a directory, undecodable bytes, ...)
    """
    try:
        resolved = resolve_path(filepath)

        if not os.path.exists(resolved):
            return _not_found(resolved)

        if is_binary_file(resolved):
            ext = os.path.splitext(resolved)[1]
            return ReadResult(
                content=(
                    f"Cannot read binary file: '{resolved}'\n\n"
                    f"This appears to be a binary file ({ext}). "
                    "Binary files are not supported by this tool."
                ),
                filepath=resolved,
                is_error=True,
            )

        lines = _load_lines(resolved)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise ReadFileError(f"Failed to read file '{filepath}': {e}") from e

    total = len(lines)
    start = max(0, offset)
    end = min(total, start + max(0, limit))

    selected = lines[start:end]
    content = "\n".join(format_lines(selected, start + 1, _padding(total)))

    if end < total:
        content += (
            f"\n\n--- End of current view ---\n"
            f"This file has {total - end} more lines (total: {total} lines).\n"
            f"Use offset: {end} to continue reading from line {end + 1}."
        )

    return ReadResult(
        content=content,
        filepath=resolved,
        metadata=ReadMetadata(
            preview=_preview(lines),
            total_lines=total,
            start_line=start + 1,
            end_line=end,
        ),
    )
