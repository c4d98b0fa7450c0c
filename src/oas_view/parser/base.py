"""Data models for the normalized OpenAPI view.

Input models describe the few fields of a resolved document the normalizer
reads. Output models are what renderers consume; they serialize with the
OpenAPI camelCase names.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SkipValidation, field_validator


class TagObject(BaseModel):
    """A tag declaration from the document's top-level ``tags`` list."""

    name: str
    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class OperationObject(BaseModel):
    """The parts of an operation the normalizer promotes to named fields."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    operation_id: str | None = Field(default=None, alias="operationId")
    summary: str | None = None
    description: str | None = None
    tags: list[str] | None = None


class TransformedOperation(BaseModel):
    """A single operation reshaped for rendering."""

    model_config = ConfigDict(populate_by_name=True)

    http_verb: str = Field(alias="httpVerb")  # as written in the document, e.g. "get"
    path: str  # route, or webhook name
    operation_id: str = Field(alias="operationId")
    name: str
    description: str
    information: dict[str, Any]  # the original operation object
    # the path item's own list, not a copy
    path_parameters: SkipValidation[list[Any] | None] = Field(default=None, alias="pathParameters")


class Tag(BaseModel):
    """A named bucket of operations."""

    name: str
    description: str = ""
    operations: list[TransformedOperation] = []


class Spec(BaseModel):
    """The normalized document.

    Top-level fields other than ``tags``, ``paths`` and ``webhooks`` are kept
    as extra attributes, unchanged.
    """

    model_config = ConfigDict(extra="allow")

    tags: list[Tag]
    paths: dict[str, Any]  # path items hold TransformedOperation under method keys
    webhooks: dict[str, dict[str, TransformedOperation]]

    def to_dict(self) -> dict[str, Any]:
        """Dump to plain JSON-compatible data with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
