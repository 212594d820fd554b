from __future__ import annotations

import os
from pathlib import Path

import pytest

from lth.util import FilesystemBuilder
from lth.util import filesystem as filesystem_module


def test_create_directory_under_root(tmp_path: Path) -> None:
    created = FilesystemBuilder().create_directory(tmp_path, "images")

    assert created == tmp_path / "images"
    assert created.is_dir()


def test_create_directory_fails_when_target_exists(tmp_path: Path) -> None:
    (tmp_path / "notes").mkdir()

    with pytest.raises(FileExistsError):
        FilesystemBuilder().create_directory(tmp_path, "notes")


def test_create_directory_does_not_create_parents(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        FilesystemBuilder().create_directory(tmp_path, "missing/child")

    assert not (tmp_path / "missing").exists()


def test_write_text_is_byte_exact(tmp_path: Path) -> None:
    content = "line one\r\nline two\n\\begin{equation} \u2211 \\end{equation}\n"

    target = FilesystemBuilder().write_file(tmp_path, "main.tex", content)

    assert target == tmp_path / "main.tex"
    assert target.read_bytes() == content.encode("utf-8")


def test_write_bytes_verbatim(tmp_path: Path) -> None:
    payload = bytes(range(256))

    FilesystemBuilder().write_file(tmp_path, "logo.png", payload)

    assert (tmp_path / "logo.png").read_bytes() == payload


def test_write_truncates_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "macros.tex"
    target.write_text("a much longer previous body\n", encoding="utf-8")

    FilesystemBuilder().write_file(tmp_path, "macros.tex", "short")

    assert target.read_text(encoding="utf-8") == "short"


def test_write_empty_file(tmp_path: Path) -> None:
    FilesystemBuilder().write_file(tmp_path, ".gitkeep", "")

    assert (tmp_path / ".gitkeep").read_bytes() == b""


def test_write_requires_existing_parent(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        FilesystemBuilder().write_file(tmp_path, "lib/preamble.tex", "")

    assert not (tmp_path / "lib").exists()


def _leftovers(directory: Path) -> list:
    return [path.name for path in directory.iterdir() if path.name.endswith(".tmp")]


def test_write_replaces_target_through_staged_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "main.tex"
    target.write_text("old\n", encoding="utf-8")
    # Hold a handle so the old inode cannot be reused by the new file.
    with open(target, "rb") as old_handle:
        old_inode = os.fstat(old_handle.fileno()).st_ino
        replaced = []
        real_replace = os.replace

        def recording_replace(src, dst):
            replaced.append((Path(src).name, Path(dst)))
            real_replace(src, dst)

        monkeypatch.setattr(filesystem_module.os, "replace", recording_replace)

        FilesystemBuilder().write_file(tmp_path, "main.tex", "new\n")

        assert old_handle.read() == b"old\n"

    assert target.read_text(encoding="utf-8") == "new\n"
    assert target.stat().st_ino != old_inode
    assert len(replaced) == 1
    staged_name, destination = replaced[0]
    assert staged_name.startswith(".main.tex.") and staged_name.endswith(".tmp")
    assert destination == target
    assert _leftovers(tmp_path) == []


def test_failed_write_keeps_previous_content(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "main.tex"
    target.write_text("previous\n", encoding="utf-8")

    def failing_replace(_src, _dst):
        raise OSError("disk full")

    monkeypatch.setattr(filesystem_module.os, "replace", failing_replace)

    with pytest.raises(OSError, match="disk full"):
        FilesystemBuilder().write_file(tmp_path, "main.tex", "replacement\n")

    assert target.read_text(encoding="utf-8") == "previous\n"
    assert _leftovers(tmp_path) == []


def test_written_file_uses_umask_permissions(tmp_path: Path) -> None:
    umask = os.umask(0o022)
    try:
        target = FilesystemBuilder().write_file(tmp_path, "main.tex", "x")
    finally:
        os.umask(umask)

    assert target.stat().st_mode & 0o777 == 0o644
