"""
Scaffold pipeline: the executor and its error taxonomy.
"""

from .errors import (
    DirectoryCreateFailed,
    FileWriteFailed,
    RemoteFetchFailed,
    ScaffoldError,
    UnknownTemplate,
    VcsInitFailed,
)
from .executor import ProjectContext, ScaffoldExecutor, ScaffoldReport

__all__ = [
    "DirectoryCreateFailed",
    "FileWriteFailed",
    "RemoteFetchFailed",
    "ScaffoldError",
    "UnknownTemplate",
    "VcsInitFailed",
    "ProjectContext",
    "ScaffoldExecutor",
    "ScaffoldReport",
]
