"""
Scaffold executor: turns a template definition into a project tree.

The executor creates the operator-named project root, then walks the
template's steps in order. Every failure aborts the run immediately and
nothing already written is rolled back.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Union

from ..api import FetchError
from ..templates import (
    ConditionalGitInit,
    ConditionalReadme,
    CreateDirectory,
    FetchBinaryAsset,
    ScaffoldStep,
    TemplateDefinition,
    TemplateRegistry,
    WriteLiteralFile,
    WriteRemoteFile,
)
from ..vcs import VcsError
from .errors import DirectoryCreateFailed, FileWriteFailed, RemoteFetchFailed, UnknownTemplate, VcsInitFailed

logger = logging.getLogger(__name__)

FOLDER_NAME_PROMPT = "Enter the name of the new folder"
GITIGNORE_NAME = ".gitignore"


class Fetcher(Protocol):
    def fetch_text(self, url: str) -> str: ...

    def fetch_bytes(self, url: str) -> bytes: ...


class Builder(Protocol):
    def create_directory(self, root: Path, relative_name: str) -> Path: ...

    def write_file(self, root: Path, relative_name: str, content: Union[str, bytes]) -> Path: ...


class Prompt(Protocol):
    def ask_text(self, message: str) -> str: ...

    def ask_yes_no(self, prompt_text: str, default_yes: bool = True) -> bool: ...


class Initializer(Protocol):
    def initialize(self, root: Path) -> str: ...


@dataclass
class ProjectContext:
    """The project root of one run; owned by a single executor invocation."""
    root: Path


@dataclass
class ScaffoldReport:
    """
    Stores what a successful run produced.

    Attributes:
        template: Identifier of the template that ran.
        root: The project root created for the run.
        directories_created: Directories created by pipeline steps.
        files_written: Files written (including README and .gitignore).
        readme_written: True if the README step was accepted.
        git_commit: Sha of the initial commit, when a repository was created.
    """
    template: str
    root: Path
    directories_created: List[Path] = field(default_factory=list)
    files_written: List[Path] = field(default_factory=list)
    readme_written: bool = False
    git_commit: Optional[str] = None

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Template", self.template)
        yield ("Root", str(self.root))
        yield ("Directories created", str(len(self.directories_created)))
        yield ("Files written", str(len(self.files_written)))
        yield ("README", "yes" if self.readme_written else "no")
        yield ("Git commit", self.git_commit[:7] if self.git_commit else "no")


def _validate_folder_name(name: str) -> None:
    if not name:
        raise ValueError("folder name must not be empty")
    separators = {"/", os.sep, os.altsep} - {None}
    if name in (".", "..") or any(sep in name for sep in separators):
        raise ValueError(f"{name!r} is not a single directory name")


class ScaffoldExecutor:
    """
    Run template pipelines against injected collaborators.

    Args:
        registry: Templates available to `run`.
        fetcher: Downloads remote text and binary resources.
        builder: Creates directories and writes files.
        prompt: Asks the operator for the folder name and confirmations.
        initializer: Creates the git repository.
    """

    def __init__(
        self,
        registry: TemplateRegistry,
        fetcher: Fetcher,
        builder: Builder,
        prompt: Prompt,
        initializer: Initializer,
    ) -> None:
        self.registry = registry
        self.fetcher = fetcher
        self.builder = builder
        self.prompt = prompt
        self.initializer = initializer

    def run(self, identifier: str, destination: Path | str) -> ScaffoldReport:
        """
        Scaffold a new project from template `identifier` inside `destination`.

        `destination` must be an existing directory; the caller checks this.

        Returns:
            A ScaffoldReport describing what was created.

        Raises:
            UnknownTemplate: If no template matches `identifier`.
            DirectoryCreateFailed: If the project root or a directory step fails.
            RemoteFetchFailed: If a download fails.
            FileWriteFailed: If a file cannot be written.
            VcsInitFailed: If the git repository cannot be created.
        """
        definition = self.registry.lookup(identifier)
        if definition is None:
            logger.warning("Unknown template %r", identifier)
            raise UnknownTemplate(identifier)

        context = self._create_project_root(Path(destination))
        report = ScaffoldReport(template=definition.identifier, root=context.root)
        logger.info("Creating %s project at %s", definition.identifier, context.root)
        self._execute_steps(definition, context, report)
        logger.info("Created the new project at %s", context.root)
        return report

    def _create_project_root(self, destination: Path) -> ProjectContext:
        name = self.prompt.ask_text(FOLDER_NAME_PROMPT)
        target = destination / name
        try:
            _validate_folder_name(name)
            root = self.builder.create_directory(destination, name)
        except (OSError, ValueError) as exc:
            logger.warning("Cannot create project root %s: %s", target, exc)
            raise DirectoryCreateFailed(target, exc) from exc
        return ProjectContext(root=Path(root))

    def _execute_steps(self, definition: TemplateDefinition, context: ProjectContext, report: ScaffoldReport) -> None:
        total = len(definition.steps)
        for index, step in enumerate(definition.steps, start=1):
            logger.debug("Step %d/%d: %s", index, total, step)
            self._execute_step(step, context, report)

    def _execute_step(self, step: ScaffoldStep, context: ProjectContext, report: ScaffoldReport) -> None:
        if isinstance(step, CreateDirectory):
            report.directories_created.append(self._create_directory(context, step.relative_name))
        elif isinstance(step, WriteLiteralFile):
            report.files_written.append(self._write(context, step.relative_name, step.content))
        elif isinstance(step, WriteRemoteFile):
            content = self._fetch(step.source_url, binary=False)
            report.files_written.append(self._write(context, step.relative_name, content))
        elif isinstance(step, FetchBinaryAsset):
            content = self._fetch(step.source_url, binary=True)
            report.files_written.append(self._write(context, step.relative_name, content))
        elif isinstance(step, ConditionalReadme):
            self._readme(step, context, report)
        elif isinstance(step, ConditionalGitInit):
            self._git_init(step, context, report)
        else:
            raise TypeError(f"Unsupported scaffold step {step!r}")

    def _create_directory(self, context: ProjectContext, relative_name: str) -> Path:
        try:
            return self.builder.create_directory(context.root, relative_name)
        except OSError as exc:
            target = context.root / relative_name
            logger.warning("Cannot create directory %s: %s", target, exc)
            raise DirectoryCreateFailed(target, exc) from exc

    def _write(self, context: ProjectContext, relative_name: str, content: Union[str, bytes]) -> Path:
        try:
            return self.builder.write_file(context.root, relative_name, content)
        except OSError as exc:
            target = context.root / relative_name
            logger.warning("Cannot write %s: %s", target, exc)
            raise FileWriteFailed(target, exc) from exc

    def _fetch(self, url: str, *, binary: bool) -> Union[str, bytes]:
        try:
            if binary:
                return self.fetcher.fetch_bytes(url)
            return self.fetcher.fetch_text(url)
        except FetchError as exc:
            raise RemoteFetchFailed(url, exc) from exc

    def _readme(self, step: ConditionalReadme, context: ProjectContext, report: ScaffoldReport) -> None:
        if not self.prompt.ask_yes_no(step.prompt_text, step.default_yes):
            logger.info("Skipping %s", step.relative_name)
            return
        if step.is_remote:
            content = self._fetch(step.source_url, binary=False)
        else:
            content = step.content
        report.files_written.append(self._write(context, step.relative_name, content))
        report.readme_written = True

    def _git_init(self, step: ConditionalGitInit, context: ProjectContext, report: ScaffoldReport) -> None:
        if not self.prompt.ask_yes_no(step.prompt_text, step.default_yes):
            logger.info("Skipping git repository initialization")
            return
        if step.gitignore is not None:
            report.files_written.append(self._write(context, GITIGNORE_NAME, step.gitignore))
        try:
            report.git_commit = self.initializer.initialize(context.root)
        except VcsError as exc:
            logger.warning("Git initialization failed at %s: %s", context.root, exc)
            raise VcsInitFailed(exc, context.root) from exc
