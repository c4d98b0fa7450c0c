"""Webhook normalizer.

Webhooks get the same per-method reshaping as paths but are never grouped
into tags.
"""

from collections.abc import Mapping
from typing import Any

from oas_view.parser.base import TransformedOperation
from oas_view.parser.shapes import SourceDocument, to_source

from .paths import transform_operation


def transform_webhooks(
    document: "Mapping[str, Any] | SourceDocument",
) -> dict[str, dict[str, TransformedOperation]]:
    source = to_source(document)
    webhooks: dict[str, dict[str, TransformedOperation]] = {}

    for name, methods in source.webhooks.items():
        # extension values such as ``x-internal: true`` hold no methods
        if not isinstance(methods, Mapping):
            continue

        # path parameters only exist if a route happens to share the webhook's name
        route = source.paths.get(name)
        path_parameters = route.get("parameters") if isinstance(route, Mapping) else None
        # every key counts as a method here, ``parameters`` and ``summary`` included
        webhooks[name] = {
            http_verb: transform_operation(http_verb, name, operation, path_parameters)
            for http_verb, operation in methods.items()
        }

    return webhooks
