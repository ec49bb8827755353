"""
Installer state carried across setup steps.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class InstallState:
    """
    Transient state of one installer run.

    Attributes:
        translations: langcode -> translation file path ("en" has none)
        parameters: Query parameters forwarded to the next step
        interactive: Whether a person is answering the installer forms
        completed_tasks: Names of tasks finished in this request
    """
    translations: Dict[str, str] = field(default_factory=dict)
    parameters: Dict[str, str] = field(default_factory=dict)
    interactive: bool = True
    completed_tasks: List[str] = field(default_factory=list)

    @classmethod
    def from_parameters(
        cls,
        parameters: Optional[Dict[str, str]] = None,
        interactive: bool = True,
    ) -> "InstallState":
        """Create a state for a request carrying the given parameters."""
        return cls(parameters=dict(parameters or {}), interactive=interactive)

    @property
    def langcode(self) -> Optional[str]:
        return self.parameters.get("langcode") or None

    def to_dict(self) -> dict:
        return {
            "parameters": dict(self.parameters),
            "translations": sorted(self.translations),
            "interactive": self.interactive,
            "completedTasks": list(self.completed_tasks),
        }
