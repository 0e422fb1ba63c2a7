"""Base schema configuration and the error envelope for API models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from enslookup.core.exceptions import EnsLookupError


def to_camel_case(string: str) -> str:
    """Convert snake_case to camelCase."""
    head, *rest = string.split("_")
    return head + "".join(word.capitalize() for word in rest)


class APIBaseSchema(BaseModel):
    """
    Base schema for all API models.

    Fields are exposed under camelCase aliases (``ensName``, ``rpcUrl``,
    ``normalizedName``) and may also be populated by their Python names or
    read from domain objects such as ``ResolvedName``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel_case,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorDetail(APIBaseSchema):
    """Machine-readable code plus a message suitable for direct display."""

    code: str
    message: str
    details: dict[str, Any] | None = None


class APIError(APIBaseSchema):
    """Error envelope returned by every failing endpoint: ``{"error": {...}}``."""

    error: ErrorDetail

    @classmethod
    def from_exception(cls, exc: EnsLookupError) -> APIError:
        """Build the envelope from a domain error, keeping its stable code."""
        return cls(
            error=ErrorDetail(
                code=exc.code,
                message=exc.message,
                details=exc.details or None,
            )
        )

    def to_content(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
