import os
from pathlib import Path
from typing import Optional, Union

def ensure_dir(p: Path):
    p.mkdir(parents=True, exist_ok=True)

def resolve_path(filepath: str, base: Optional[Union[str, Path]] = None) -> str:
    """
    Absolute paths come back untouched. Relative ones are joined to `base`
    (or the process CWD) and normalised; symlinks are left alone.
    """
    if os.path.isabs(filepath):
        return filepath
    return os.path.normpath(os.path.join(base or os.getcwd(), filepath))
