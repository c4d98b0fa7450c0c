"""Exceptions raised by oas-view."""

FAILED_TO_PARSE_MESSAGE = "Failed to parse the OpenAPI file."


class OasViewError(Exception):
    """Base class for all oas-view errors."""


class ResolutionFailure(OasViewError):
    """The resolver returned no usable document."""

    def __init__(self, message: str = FAILED_TO_PARSE_MESSAGE):
        super().__init__(message)


class MissingDefaultTagError(OasViewError):
    """An untagged operation was found but the tag list has no default bucket."""

    def __init__(self, tag_name: str):
        self.tag_name = tag_name
        super().__init__(f"Tag list has no '{tag_name}' tag for untagged operations")
