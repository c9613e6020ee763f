# agentfs/tools/permissions.py

from typing import Set
from agentfs.config import get_settings, Settings

class ACL:
    """
    Loads the 'tools_allowed' list from .agentfs.yml (via Settings).
    Offers a method to check if a given tool name is allowed.
    """
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self._allowed: Set[str] = set()
        self._load_acl()

    def _load_acl(self):
        self._allowed = set(str(x) for x in self.settings.tools_allowed)

    def is_allowed(self, tool_name: str) -> bool:
        return tool_name in self._allowed

    def allowed(self) -> Set[str]:
        return set(self._allowed)
