from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Union

import pytest
from typer.testing import CliRunner

from lth.api import FetchError
from lth.pipeline import ScaffoldExecutor
from lth.templates import (
    ConditionalReadme,
    FetchBinaryAsset,
    TemplateRegistry,
    WriteRemoteFile,
    default_registry,
)
from lth.util import FilesystemBuilder, is_affirmative
from lth.vcs import GitInitializer

Payload = Union[str, bytes]
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\xff\xfe"


class FakeFetcher:
    """Serve canned payloads; unknown URLs answer 404."""

    def __init__(self, responses: Optional[Dict[str, Payload]] = None, failures: Optional[Dict[str, int]] = None) -> None:
        self.responses = dict(responses or {})
        self.failures = dict(failures or {})
        self.requested: List[str] = []

    def _lookup(self, url: str) -> Payload:
        self.requested.append(url)
        if url in self.failures:
            raise FetchError(url, status=self.failures[url])
        if url not in self.responses:
            raise FetchError(url, status=404)
        return self.responses[url]

    def fetch_text(self, url: str) -> str:
        value = self._lookup(url)
        return value.decode("utf-8") if isinstance(value, bytes) else value

    def fetch_bytes(self, url: str) -> bytes:
        value = self._lookup(url)
        return value.encode("utf-8") if isinstance(value, str) else value


class ScriptedPrompt:
    """Answer the folder-name prompt and then the yes/no prompts in order."""

    def __init__(self, folder_name: str, answers: Iterable[str] = ()) -> None:
        self.folder_name = folder_name
        self.answers = list(answers)
        self.questions: List[str] = []

    def ask_text(self, message: str) -> str:
        self.questions.append(message)
        return self.folder_name

    def ask_yes_no(self, prompt_text: str, default_yes: bool = True) -> bool:
        self.questions.append(prompt_text)
        answer = self.answers.pop(0) if self.answers else ""
        return is_affirmative(answer, default_yes)


class RecordingInitializer:
    def __init__(self) -> None:
        self.roots: List[Path] = []

    def initialize(self, root: Path) -> str:
        self.roots.append(Path(root))
        return "0" * 40


def remote_payloads(identifier: str, registry: Optional[TemplateRegistry] = None) -> Dict[str, Payload]:
    """Canned content for every URL a template downloads."""
    definition = (registry or default_registry()).lookup(identifier)
    assert definition is not None
    payloads: Dict[str, Payload] = {}
    for step in definition.steps:
        if isinstance(step, WriteRemoteFile):
            payloads[step.source_url] = f"% {step.relative_name}\n\\section{{Ünïcode}}\n"
        elif isinstance(step, FetchBinaryAsset):
            payloads[step.source_url] = PNG_BYTES
        elif isinstance(step, ConditionalReadme) and step.source_url:
            payloads[step.source_url] = f"# {identifier}\n"
    return payloads


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def git_identity(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test Author")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "author@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test Author")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "author@example.com")


@pytest.fixture
def make_executor() -> Callable[..., ScaffoldExecutor]:
    def factory(
        fetcher: FakeFetcher,
        prompt: ScriptedPrompt,
        *,
        registry: Optional[TemplateRegistry] = None,
        initializer=None,
    ) -> ScaffoldExecutor:
        return ScaffoldExecutor(
            registry=registry or default_registry(),
            fetcher=fetcher,
            builder=FilesystemBuilder(),
            prompt=prompt,
            initializer=initializer or GitInitializer(),
        )

    return factory
