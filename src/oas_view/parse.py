"""Entry point: resolve a specification and build its rendering view."""

import copy
import logging
from typing import Any

from oas_view.errors import ResolutionFailure
from oas_view.normalizer.transform import transform_result
from oas_view.parser.base import Spec
from oas_view.parser.loader import DocumentLoader, Resolver

logger = logging.getLogger(__name__)


async def parse(specification: Any, resolver: Resolver | None = None) -> Spec:
    """Parse and transform an OpenAPI specification for rendering.

    Raises ResolutionFailure if the resolver produces no document. Resolver
    warnings are logged and the transform goes ahead with what was returned.
    """
    resolver = resolver or DocumentLoader()
    result = await resolver.resolve(specification)

    if result.schema is None:
        raise ResolutionFailure()

    if result.errors:
        logger.warning(
            "OpenAPI resolver reported %d issue(s):\n%s",
            len(result.errors),
            "\n".join(f"  - {error}" for error in result.errors),
        )

    # the resolver's document is only loaned to us
    return transform_result(copy.deepcopy(result.schema))
