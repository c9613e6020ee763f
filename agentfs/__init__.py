# agentfs - file access tools for coding agents

from agentfs.tools.read_file import read_file, ReadFileError
from agentfs.tools.write_file import write_file, strip_line_numbers

__version__ = "0.1.0"

__all__ = [
    "read_file",
    "ReadFileError",
    "write_file",
    "strip_line_numbers",
]
