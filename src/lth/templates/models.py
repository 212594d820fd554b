"""
Declarative scaffold steps and template definitions.

A template is data: an identifier, a description, and an ordered tuple of
steps that the executor interprets one after another.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Optional, Tuple, Union


class TemplateError(ValueError):
    """Raised when a template definition is malformed."""


@dataclass(frozen=True)
class CreateDirectory:
    relative_name: str


@dataclass(frozen=True)
class WriteLiteralFile:
    relative_name: str
    content: str


@dataclass(frozen=True)
class WriteRemoteFile:
    """Text file whose content is downloaded when the step runs."""
    relative_name: str
    source_url: str


@dataclass(frozen=True)
class FetchBinaryAsset:
    """Like WriteRemoteFile, but the payload is kept as opaque bytes."""
    relative_name: str
    source_url: str


@dataclass(frozen=True)
class ConditionalGitInit:
    """
    Ask the operator whether to initialize a git repository.

    Attributes:
        prompt_text: Question shown to the operator.
        default_yes: Answer assumed when the operator just presses enter.
        gitignore: Optional `.gitignore` content written right before the
            repository is created (only when the operator agrees).
    """
    prompt_text: str = "Do you want to initialize a git repository? (Y/n)"
    default_yes: bool = True
    gitignore: Optional[str] = None


@dataclass(frozen=True)
class ConditionalReadme:
    """
    Ask the operator whether to add a README.

    Exactly one of `content` (literal source) or `source_url` (remote source)
    must be set.
    """
    prompt_text: str = "Do you want to create a README.md file? (Y/n)"
    default_yes: bool = True
    content: Optional[str] = None
    source_url: Optional[str] = None
    relative_name: str = "README.md"

    def __post_init__(self) -> None:
        if (self.content is None) == (self.source_url is None):
            raise TemplateError("ConditionalReadme needs exactly one of 'content' or 'source_url'")

    @property
    def is_remote(self) -> bool:
        return self.source_url is not None


ScaffoldStep = Union[
    CreateDirectory,
    WriteLiteralFile,
    WriteRemoteFile,
    FetchBinaryAsset,
    ConditionalGitInit,
    ConditionalReadme,
]

CONTENT_STEPS = (CreateDirectory, WriteLiteralFile, WriteRemoteFile, FetchBinaryAsset)
CONDITIONAL_STEPS = (ConditionalGitInit, ConditionalReadme)


@dataclass(frozen=True)
class TemplateDefinition:
    """
    A named scaffold pipeline.

    Attributes:
        identifier: Unique, case-sensitive key used on the command line.
        description: One-line description shown in listings.
        steps: Ordered steps executed after the project root exists.
    """
    identifier: str
    description: str
    steps: Tuple[ScaffoldStep, ...]

    def validate(self) -> None:
        """
        Check the ordering rules the executor relies on.

        Raises:
            TemplateError: If the pipeline is empty, writes into a directory
                that no earlier step creates, escapes the project root, or
                declares a content step after a conditional step.
        """
        if not self.identifier:
            raise TemplateError("Template identifier must not be empty")
        if not self.steps:
            raise TemplateError(f"Template {self.identifier!r} has no steps")

        created: set[PurePosixPath] = set()
        seen_conditional = False
        for index, step in enumerate(self.steps, start=1):
            if isinstance(step, CONDITIONAL_STEPS):
                seen_conditional = True
                if isinstance(step, ConditionalReadme):
                    self._check_relative(step.relative_name, created, index)
                continue
            if not isinstance(step, CONTENT_STEPS):
                raise TemplateError(f"{self.identifier}: step {index} has unsupported type {type(step).__name__}")
            if seen_conditional:
                raise TemplateError(
                    f"{self.identifier}: step {index} ({type(step).__name__}) follows a conditional step"
                )
            target = self._check_relative(step.relative_name, created, index)
            if isinstance(step, CreateDirectory):
                created.add(target)

    def _check_relative(self, name: str, created: set[PurePosixPath], index: int) -> PurePosixPath:
        path = PurePosixPath(name)
        if not name or path.is_absolute() or ".." in path.parts or path == PurePosixPath("."):
            raise TemplateError(f"{self.identifier}: step {index} has invalid path {name!r}")
        parent = path.parent
        if parent != PurePosixPath(".") and parent not in created:
            raise TemplateError(
                f"{self.identifier}: step {index} writes {name!r} before {parent.as_posix()!r} is created"
            )
        return path
