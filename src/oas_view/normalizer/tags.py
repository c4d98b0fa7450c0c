"""Tag initializer: builds the ordered tag list operations are grouped into."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from oas_view.parser.base import Tag, TransformedOperation
from oas_view.parser.shapes import SourceDocument, to_source

logger = logging.getLogger(__name__)

DEFAULT_TAG_NAME = "default"


class TagRegistry:
    """Tags by name, kept in insertion order."""

    def __init__(self, tags: Iterable[Tag] = ()):
        self._tags: dict[str, Tag] = {}
        for tag in tags:
            if tag.name in self._tags:
                logger.debug("Ignoring duplicate declaration of tag %r", tag.name)
                continue
            self._tags[tag.name] = tag

    def __contains__(self, name: str) -> bool:
        return name in self._tags

    def __len__(self) -> int:
        return len(self._tags)

    def get(self, name: str) -> Tag | None:
        return self._tags.get(name)

    def ensure(self, name: str) -> Tag:
        """Return the tag called ``name``, appending an empty one if it is new."""
        tag = self._tags.get(name)
        if tag is None:
            tag = Tag(name=name, description="", operations=[])
            self._tags[name] = tag
        return tag

    def add_operation(self, name: str, operation: TransformedOperation) -> None:
        self.ensure(name).operations.append(operation.model_copy(deep=True))

    def tags(self) -> list[Tag]:
        return list(self._tags.values())

    def used_tags(self) -> list[Tag]:
        """Tags holding at least one operation."""
        return [tag for tag in self._tags.values() if tag.operations]


def init_tags(document: "Mapping[str, Any] | SourceDocument") -> list[Tag]:
    """Declared tags in document order, plus the ``default`` tag if undeclared."""
    source = to_source(document)
    registry = TagRegistry(
        Tag(name=declared.name, description=declared.description, operations=[])
        for declared in source.tags
    )
    registry.ensure(DEFAULT_TAG_NAME)
    return registry.tags()
