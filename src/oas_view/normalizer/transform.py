"""Transform a resolved OpenAPI document into the rendering view."""

import logging
from collections.abc import Mapping
from typing import Any

from oas_view.parser.base import Spec
from oas_view.parser.shapes import to_source

from .paths import transform_paths
from .tags import TagRegistry, init_tags
from .webhooks import transform_webhooks

logger = logging.getLogger(__name__)


def transform_result(document: Mapping[str, Any]) -> Spec:
    """Group operations by tag and reshape paths and webhooks.

    Every other top-level field of ``document`` is passed through unchanged.
    Tags that end up without operations are left out.
    """
    source = to_source(document)

    registry = TagRegistry(init_tags(source))
    paths = transform_paths(source, registry)
    webhooks = transform_webhooks(source)
    tags = registry.used_tags()

    logger.debug(
        "Built view with %d of %d tags and %d webhooks", len(tags), len(registry), len(webhooks)
    )
    return Spec.model_validate(
        {**document, "webhooks": webhooks, "tags": tags, "paths": paths}
    )
