"""Custom exception hierarchy for enslookup."""

from __future__ import annotations

from typing import Any, ClassVar


class EnsLookupError(Exception):
    """Base exception for all enslookup errors."""

    code: ClassVar[str] = "enslookup_error"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidNameError(EnsLookupError):
    """Name failed normalization."""

    code: ClassVar[str] = "invalid_name"

    def __init__(
        self,
        message: str,
        name: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.name = name


class NoProvidersConfiguredError(EnsLookupError):
    """Resolution was requested with an empty provider list."""

    code: ClassVar[str] = "no_providers_configured"


class ResolutionError(EnsLookupError):
    """Failed to resolve a name."""

    code: ClassVar[str] = "resolution_error"


class ProviderUnavailableError(ResolutionError):
    """RPC provider could not be reached or returned an unusable response."""

    code: ClassVar[str] = "provider_unavailable"

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.provider = provider
        self.status_code = status_code


class NameNotFoundError(ResolutionError):
    """Registry has no resolver for the node."""

    code: ClassVar[str] = "name_not_found"

    def __init__(
        self,
        message: str,
        provider: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.provider = provider


class NoAddressSetError(ResolutionError):
    """Resolver exists but holds no address record."""

    code: ClassVar[str] = "no_address_set"

    def __init__(
        self,
        message: str,
        provider: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.provider = provider


class AllProvidersExhaustedError(ResolutionError):
    """Every configured provider failed."""

    code: ClassVar[str] = "all_providers_exhausted"

    def __init__(
        self,
        last_error: ResolutionError,
        errors: list[ResolutionError] | None = None,
    ) -> None:
        self.last_error = last_error
        self.errors = errors if errors is not None else [last_error]
        super().__init__(
            last_error.message,
            details={
                "providers_tried": len(self.errors),
                "last_error_code": last_error.code,
            },
        )
