"""Collapsible CI log groups for GitHub Actions and Azure Pipelines.

    import ci_group

    with ci_group.open("Build"):
        build()  # the group closes even if this raises
"""

from ci_group import commands
from ci_group.dialect import Dialect, detect, sanitize
from ci_group.group import Group, open, release, run_in_group

__all__ = [
    "Dialect",
    "Group",
    "commands",
    "detect",
    "open",
    "release",
    "run_in_group",
    "sanitize",
]
