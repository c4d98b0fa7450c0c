"""Path/operation normalizer.

Walks every route and HTTP method of a document, reshapes each operation into
a ``TransformedOperation`` and files it under its tags.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from oas_view.errors import MissingDefaultTagError
from oas_view.parser.base import OperationObject, TransformedOperation
from oas_view.parser.shapes import SourceDocument, to_source

from .tags import DEFAULT_TAG_NAME, TagRegistry

logger = logging.getLogger(__name__)


class RequestMethod(str, Enum):
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"
    PATCH = "PATCH"
    TRACE = "TRACE"
    CONNECT = "CONNECT"


def parse_request_method(key: Any) -> RequestMethod | None:
    """Match a path-item key against the known HTTP methods, case-insensitively."""
    try:
        return RequestMethod(str(key).upper())
    except ValueError:
        return None


def init_paths(document: "Mapping[str, Any] | SourceDocument") -> dict[str, Any]:
    """The document's paths, or an empty mapping."""
    return to_source(document).paths


def transform_operation(
    http_verb: str,
    path: str,
    operation: Any,
    path_parameters: list[Any] | None = None,
) -> TransformedOperation:
    """Promote the display fields of one operation.

    ``operationId`` falls back to the route, and so does ``name`` when there is
    no summary. The original operation is kept whole under ``information``;
    a value that is not a mapping is read as an empty operation.
    """
    original = dict(operation) if isinstance(operation, Mapping) else {}
    parsed = OperationObject.model_validate(original)
    return TransformedOperation(
        http_verb=http_verb,
        path=path,
        operation_id=parsed.operation_id or path,
        name=parsed.summary or path or "",
        description=parsed.description or "",
        information=original,
        path_parameters=path_parameters,
    )


def transform_paths(
    document: "Mapping[str, Any] | SourceDocument", registry: TagRegistry
) -> dict[str, Any]:
    """Normalize every operation and group it into ``registry``.

    Returns the paths mapping with each recognized method entry replaced by its
    ``TransformedOperation``; other path-item keys, and entries that are not
    path items at all (e.g. ``x-internal: true``), are kept as they are.
    Untagged operations go to the default tag, which must already be present.
    """
    paths: dict[str, Any] = {}
    count = 0

    for path, path_item in init_paths(document).items():
        if not isinstance(path_item, Mapping):
            paths[path] = path_item
            continue

        normalized = dict(path_item)
        path_parameters = path_item.get("parameters")

        for key, operation in path_item.items():
            if parse_request_method(key) is None:
                continue

            transformed = transform_operation(key, path, operation, path_parameters)
            normalized[key] = transformed
            count += 1

            tags = transformed.information.get("tags")
            if not tags:
                if DEFAULT_TAG_NAME not in registry:
                    raise MissingDefaultTagError(DEFAULT_TAG_NAME)
                registry.add_operation(DEFAULT_TAG_NAME, transformed)
                continue
            # a name listed twice is filed twice
            for tag_name in tags:
                registry.add_operation(tag_name, transformed)

        paths[path] = normalized

    logger.debug("Normalized %d operations across %d paths", count, len(paths))
    return paths
