"""Document shapes for the supported OpenAPI versions.

A resolved document is read through exactly one shape model, chosen by its
version marker, and each shape has its own conversion into the
version-independent ``SourceDocument`` the normalizer works on.
"""

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from .base import TagObject

logger = logging.getLogger(__name__)

class SpecVersion(str, Enum):
    SWAGGER_2 = "2.0"
    OPENAPI_3_0 = "3.0"
    OPENAPI_3_1 = "3.1"


class _DocumentShape(BaseModel):
    model_config = ConfigDict(extra="allow")

    tags: list[TagObject] | None = None
    # extension keys such as ``x-internal: true`` may hold non-mapping values
    paths: dict[str, Any] | None = None
    webhooks: dict[str, Any] | None = None


class SwaggerDocument(_DocumentShape):
    """Swagger 2.0 document."""

    swagger: Any  # "2.0", or a float when left unquoted in YAML


class OpenApiDocument(_DocumentShape):
    """OpenAPI 3.0.x document."""

    openapi: Any


class OpenApi31Document(_DocumentShape):
    """OpenAPI 3.1 document, also used when the version is missing or unknown."""

    openapi: Any = None


class SourceDocument(BaseModel):
    """Version-independent view of the fields the normalizer reads.

    Path items and webhooks are usually mappings; anything else is carried as is.
    """

    version: SpecVersion
    tags: list[TagObject] = []
    paths: dict[str, Any] = {}
    webhooks: dict[str, Any] = {}


def detect_version(document: Mapping[str, Any]) -> SpecVersion:
    """Pick the document shape from its version marker."""
    if "swagger" in document:
        return SpecVersion.SWAGGER_2
    version = str(document.get("openapi") or "")
    if version.startswith("3.0"):
        return SpecVersion.OPENAPI_3_0
    return SpecVersion.OPENAPI_3_1


def _mapping_of_items(items: Mapping[str, Any] | None) -> dict[str, Any]:
    # a route or webhook declared with no body behaves like an empty one
    return {key: {} if item is None else item for key, item in (items or {}).items()}


def _from_swagger(doc: SwaggerDocument) -> SourceDocument:
    return SourceDocument(
        version=SpecVersion.SWAGGER_2,
        tags=doc.tags or [],
        paths=_mapping_of_items(doc.paths),
        webhooks=_mapping_of_items(doc.webhooks),
    )


def _from_openapi(doc: OpenApiDocument) -> SourceDocument:
    return SourceDocument(
        version=SpecVersion.OPENAPI_3_0,
        tags=doc.tags or [],
        paths=_mapping_of_items(doc.paths),
        webhooks=_mapping_of_items(doc.webhooks),
    )


def _from_openapi31(doc: OpenApi31Document) -> SourceDocument:
    return SourceDocument(
        version=SpecVersion.OPENAPI_3_1,
        tags=doc.tags or [],
        paths=_mapping_of_items(doc.paths),
        webhooks=_mapping_of_items(doc.webhooks),
    )


_SHAPES: dict[SpecVersion, tuple[type[_DocumentShape], Callable[[Any], SourceDocument]]] = {
    SpecVersion.SWAGGER_2: (SwaggerDocument, _from_swagger),
    SpecVersion.OPENAPI_3_0: (OpenApiDocument, _from_openapi),
    SpecVersion.OPENAPI_3_1: (OpenApi31Document, _from_openapi31),
}


def to_source(document: "Mapping[str, Any] | SourceDocument") -> SourceDocument:
    """Read a resolved document through its version's shape."""
    if isinstance(document, SourceDocument):
        return document

    version = detect_version(document)
    shape, convert = _SHAPES[version]
    logger.debug("Reading document as OpenAPI %s", version.value)
    return convert(shape.model_validate(dict(document)))
