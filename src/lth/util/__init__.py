"""
Shared helpers for filesystem writes and operator prompts.
"""

from .filesystem import FilesystemBuilder
from .prompt import ConsolePrompt, is_affirmative

__all__ = [
    "FilesystemBuilder",
    "ConsolePrompt",
    "is_affirmative",
]
