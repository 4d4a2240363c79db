"""Model package for toolwrapper."""

from toolwrapper.models.resolved_command import ResolvedCommand
from toolwrapper.models.target_entry import TargetEntry

__all__ = [
    "ResolvedCommand",
    "TargetEntry",
]
