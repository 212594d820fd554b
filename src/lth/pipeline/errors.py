"""
Error taxonomy raised by the scaffold executor.

Every error is fatal to the current run; the front end decides how to report
it and which exit code to use.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ScaffoldError(RuntimeError):
    """Base class for failures that abort a scaffold run."""


class UnknownTemplate(ScaffoldError):
    def __init__(self, identifier: str) -> None:
        super().__init__(f"Invalid template name: {identifier!r}")
        self.identifier = identifier


class DirectoryCreateFailed(ScaffoldError):
    def __init__(self, path: Path | str, cause: object) -> None:
        super().__init__(f"Failed to create directory {path}: {cause}")
        self.path = Path(path)
        self.cause = cause


class RemoteFetchFailed(ScaffoldError):
    def __init__(self, url: str, cause: object) -> None:
        super().__init__(f"Failed to download {url}: {cause}")
        self.url = url
        self.cause = cause


class FileWriteFailed(ScaffoldError):
    def __init__(self, path: Path | str, cause: object) -> None:
        super().__init__(f"Failed to write file {path}: {cause}")
        self.path = Path(path)
        self.cause = cause


class VcsInitFailed(ScaffoldError):
    def __init__(self, cause: object, path: Optional[Path] = None) -> None:
        where = f" at {path}" if path is not None else ""
        super().__init__(f"Failed to initialize the git repository{where}: {cause}")
        self.path = path
        self.cause = cause
