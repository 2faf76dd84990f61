"""Custom exception hierarchy for box formatting."""

from typing import Any


class PrettyBoxError(Exception):
    """Base exception for all box formatting errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class MetadataError(PrettyBoxError):
    """Metadata generation errors."""

    pass


class MetadataSourceRequiredError(MetadataError):
    """A metadata kind needs a source object but none was supplied."""

    def __init__(self, kind: str):
        super().__init__(
            code="METADATA_SOURCE_REQUIRED",
            message=f"Metadata kind '{kind}' requires a source object",
            details={"kind": kind},
        )


class InvalidContentError(PrettyBoxError):
    """Content is neither a sequence of lines nor a line-producing object."""

    def __init__(self, content_type: str):
        super().__init__(
            code="INVALID_CONTENT",
            message=f"Cannot format content of type '{content_type}': "
            "expected a sequence of strings or an object with to_lines()",
            details={"content_type": content_type},
        )
