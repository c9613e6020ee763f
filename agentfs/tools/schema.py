# agentfs/tools/schema.py

import re
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, StrictStr

DEFAULT_READ_LIMIT = 2000


class ToolRequest(BaseModel):
    """
    Represents a fully-validated request to invoke a tool.
    """
    name: StrictStr = Field(..., description="Tool name, must match registered tool.")
    args: Dict[StrictStr, Any] = Field(
        default_factory=dict, description="Arguments to the tool (key: value)."
    )

    @field_validator("name")
    def name_must_be_safe(cls, v: str) -> str:
        # Only allow [a-zA-Z0-9_-]
        if not re.fullmatch(r"[a-zA-Z0-9_-]+", v):
            raise ValueError("Tool name contains invalid characters")
        return v


class WireModel(BaseModel):
    """
    Base for tool arguments and results. Python code uses the snake_case field
    names; the orchestrator sees the camelCase aliases.
    """
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


# --- read_file ---------------------------------------------------------------

class ReadFileArgs(WireModel):
    filepath: StrictStr = Field(
        ..., description="The absolute or relative path to the file to read"
    )
    offset: int = Field(
        0, ge=0, description="The line number to start reading from (0-based, defaults to 0)"
    )
    limit: int = Field(
        DEFAULT_READ_LIMIT,
        gt=0,
        description=f"The maximum number of lines to read (defaults to {DEFAULT_READ_LIMIT})",
    )


class ReadMetadata(WireModel):
    preview: str
    total_lines: int = Field(..., alias="totalLines")
    start_line: int = Field(..., alias="startLine")  # 1-based
    end_line: int = Field(..., alias="endLine")  # 1-based, inclusive


class ReadResult(WireModel):
    content: str
    filepath: str
    is_error: Optional[bool] = Field(None, alias="isError")
    metadata: Optional[ReadMetadata] = None


# --- write_file --------------------------------------------------------------

class WriteFileArgs(WireModel):
    filepath: StrictStr = Field(
        ..., description="The absolute or relative path to the file to write"
    )
    content: StrictStr = Field(
        ...,
        description=(
            "The content to write to the file. Do NOT include line numbers or "
            "prefixes - provide only the raw file content."
        ),
    )
    working_directory: Optional[StrictStr] = Field(
        None,
        alias="workingDirectory",
        description="Directory that relative paths resolve against (defaults to the current directory)",
    )


class WriteResult(WireModel):
    message: str
    filepath: str
    existed: bool
    is_error: Optional[bool] = Field(None, alias="isError")
