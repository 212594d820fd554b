"""
Version-control helpers.
"""

from .git import DEFAULT_COMMIT_MESSAGE, GitInitializer, VcsError, resolve_signature

__all__ = ["DEFAULT_COMMIT_MESSAGE", "GitInitializer", "VcsError", "resolve_signature"]
