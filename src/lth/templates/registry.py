"""
Template registry: exact-match lookup over a fixed set of definitions.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .catalog import BUILTIN_TEMPLATES
from .models import TemplateDefinition, TemplateError

logger = logging.getLogger(__name__)


class TemplateRegistry:
    """
    Read-only mapping from template identifier to its definition.

    Definitions are validated once, when the registry is built. Iteration
    follows registration order.
    """

    def __init__(self, definitions: Iterable[TemplateDefinition]) -> None:
        self._templates: Dict[str, TemplateDefinition] = {}
        for definition in definitions:
            if definition.identifier in self._templates:
                raise TemplateError(f"Duplicate template identifier {definition.identifier!r}")
            definition.validate()
            self._templates[definition.identifier] = definition
        logger.debug("Registered %d templates", len(self._templates))

    def lookup(self, identifier: str) -> Optional[TemplateDefinition]:
        """Return the definition registered under `identifier`, or None."""
        return self._templates.get(identifier)

    def all(self) -> List[Tuple[str, str]]:
        return [(definition.identifier, definition.description) for definition in self._templates.values()]

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._templates

    def __iter__(self) -> Iterator[TemplateDefinition]:
        return iter(self._templates.values())

    def __len__(self) -> int:
        return len(self._templates)


@lru_cache(maxsize=1)
def default_registry() -> TemplateRegistry:
    """
    Build the registry for the built-in catalog exactly once.
    """
    return TemplateRegistry(BUILTIN_TEMPLATES)
