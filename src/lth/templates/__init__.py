"""
Template definitions, the step data model, and the registry.
"""

from .models import (
    ConditionalGitInit,
    ConditionalReadme,
    CreateDirectory,
    FetchBinaryAsset,
    ScaffoldStep,
    TemplateDefinition,
    TemplateError,
    WriteLiteralFile,
    WriteRemoteFile,
)
from .registry import TemplateRegistry, default_registry

__all__ = [
    "ConditionalGitInit",
    "ConditionalReadme",
    "CreateDirectory",
    "FetchBinaryAsset",
    "ScaffoldStep",
    "TemplateDefinition",
    "TemplateError",
    "WriteLiteralFile",
    "WriteRemoteFile",
    "TemplateRegistry",
    "default_registry",
]
