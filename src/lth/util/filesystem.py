"""
Filesystem helpers used to build the project tree.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

Content = Union[str, bytes]


def _default_mode() -> int:
    """Permissions a plain open() would give a new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _atomic_write_bytes(target: Path, payload: bytes) -> None:
    """Write bytes atomically by staging a temp file and renaming."""
    fd, tmp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_path, _default_mode())
        os.replace(tmp_path, target)
    finally:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass


class FilesystemBuilder:
    """
    Create directories and files beneath a project root.

    Neither operation creates missing parents; OS errors propagate unchanged.
    """

    def create_directory(self, root: Path | str, relative_name: str) -> Path:
        """
        Create `root/relative_name`.

        Raises:
            FileExistsError: If the target already exists.
            FileNotFoundError: If the parent directory is missing.
        """
        target = Path(root) / relative_name
        target.mkdir()
        logger.info("Created directory %s", target)
        return target

    def write_file(self, root: Path | str, relative_name: str, content: Content) -> Path:
        """
        Write `content` to `root/relative_name`, replacing any existing file.

        Text is encoded as UTF-8 byte-for-byte (no newline translation).
        """
        target = Path(root) / relative_name
        payload = content.encode("utf-8") if isinstance(content, str) else bytes(content)
        _atomic_write_bytes(target, payload)
        logger.info("Created file %s (%d bytes)", target, len(payload))
        return target
