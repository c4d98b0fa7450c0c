"""Resolver boundary.

``parse`` hands the raw specification to a resolver and only ever sees its
result. ``DocumentLoader`` is the built-in resolver: it loads YAML or JSON and
reports what it notices, but it does not dereference ``$ref`` pointers.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

import yaml

logger = logging.getLogger(__name__)


@dataclass
class ResolveResult:
    """A resolved document, or ``None`` when nothing usable was produced."""

    schema: dict[str, Any] | None
    errors: list[str] = field(default_factory=list)


class Resolver(Protocol):
    async def resolve(self, specification: Any) -> ResolveResult: ...


class DocumentLoader:
    """Load a document from a mapping, YAML/JSON text or a file path."""

    async def resolve(self, specification: Any) -> ResolveResult:
        document = self.load(specification)
        if document is None:
            return ResolveResult(schema=None, errors=["Document is not a YAML or JSON mapping"])
        return ResolveResult(schema=document, errors=self.diagnose(document))

    def load(self, specification: Any) -> dict[str, Any] | None:
        if isinstance(specification, Mapping):
            return dict(specification)

        if isinstance(specification, Path):
            text = specification.read_text(encoding="utf-8")
        elif isinstance(specification, bytes):
            text = specification.decode("utf-8")
        elif isinstance(specification, str):
            text = specification
        else:
            return None

        # JSON is valid YAML, so one loader covers both
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            logger.debug("Could not load document: %s", e)
            return None
        return data if isinstance(data, dict) else None

    def diagnose(self, document: Mapping[str, Any]) -> list[str]:
        """Non-fatal issues: a missing version marker and leftover ``$ref`` pointers."""
        errors = []
        if "openapi" not in document and "swagger" not in document:
            errors.append("Document has no 'openapi' or 'swagger' version field")
        for location, ref in _find_refs(document, "#"):
            errors.append(f"Unresolved $ref '{ref}' at {location}")
        return errors


def _find_refs(node: Any, location: str) -> list[tuple[str, str]]:
    found = []
    if isinstance(node, Mapping):
        ref = node.get("$ref")
        if isinstance(ref, str):
            found.append((location, ref))
        for key, value in node.items():
            if key == "$ref":
                continue
            token = str(key).replace("~", "~0").replace("/", "~1")
            found.extend(_find_refs(value, f"{location}/{token}"))
    elif isinstance(node, list):
        for index, value in enumerate(node):
            found.extend(_find_refs(value, f"{location}/{index}"))
    return found
