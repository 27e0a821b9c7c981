"""Custom exceptions for floe-assets.

This module defines the exception hierarchy:
- FloeAssetError (base)
- ConfigurationMissingError
  - AssetManagerMissingError
  - FilterManagerMissingError
- LookupFailedError
  - AssetNotFoundError
  - FilterNotFoundError
- InvalidInputError
"""

from __future__ import annotations


class FloeAssetError(Exception):
    """Base exception for all floe asset operations.

    Attributes:
        message: Human-readable error description.
        details: Optional additional context about the error.

    Example:
        >>> try:
        ...     factory.create_asset(["@missing"])
        ... except FloeAssetError as e:
        ...     print(f"Asset error: {e}")
    """

    def __init__(self, message: str, *, details: dict[str, str] | None = None) -> None:
        """Initialize FloeAssetError.

        Args:
            message: Human-readable error description.
            details: Optional additional context about the error.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation with details if present."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ConfigurationMissingError(FloeAssetError):
    """A collaborator required by the call was never configured."""


class AssetManagerMissingError(ConfigurationMissingError):
    """An asset reference was used but the factory has no asset manager.

    Example:
        >>> factory = AssetFactory("/site")
        >>> factory.create_asset(["@jquery"])
        Traceback (most recent call last):
        AssetManagerMissingError: There is no asset manager (reference=jquery)
    """

    def __init__(self, reference: str | None = None) -> None:
        """Initialize AssetManagerMissingError.

        Args:
            reference: The reference name that could not be resolved.
        """
        details = {"reference": reference} if reference else {}
        super().__init__("There is no asset manager", details=details)
        self.reference = reference


class FilterManagerMissingError(ConfigurationMissingError):
    """A filter name was used but the factory has no filter manager."""

    def __init__(self, filter_name: str | None = None) -> None:
        """Initialize FilterManagerMissingError.

        Args:
            filter_name: The filter name that could not be resolved.
        """
        details = {"filter": filter_name} if filter_name else {}
        super().__init__("There is no filter manager", details=details)
        self.filter_name = filter_name


class LookupFailedError(FloeAssetError):
    """A name was not registered in its manager."""


class AssetNotFoundError(LookupFailedError):
    """No asset is registered under the requested name.

    Example:
        >>> try:
        ...     manager.get("jquery")
        ... except AssetNotFoundError as e:
        ...     print(f"Asset not found: {e.name}")
    """

    def __init__(self, name: str, message: str | None = None) -> None:
        """Initialize AssetNotFoundError.

        Args:
            name: The asset name that was not found.
            message: Optional custom error message.
        """
        msg = message or f"There is no asset by the name: {name}"
        super().__init__(msg, details={"name": name})
        self.name = name


class FilterNotFoundError(LookupFailedError):
    """No filter is registered under the requested name."""

    def __init__(self, name: str, message: str | None = None) -> None:
        """Initialize FilterNotFoundError.

        Args:
            name: The filter name that was not found.
            message: Optional custom error message.
        """
        msg = message or f"There is no filter by the name: {name}"
        super().__init__(msg, details={"name": name})
        self.name = name


class InvalidInputError(FloeAssetError):
    """An input descriptor or filter name cannot be interpreted.

    Raised when:
    - An input string is empty
    - A reference input carries no name (a bare "@")
    - A filter name is empty, or is only the debug sentinel ("?")
    """

    def __init__(self, message: str, *, value: str | None = None) -> None:
        """Initialize InvalidInputError.

        Args:
            message: Human-readable error description.
            value: The offending input value.
        """
        details = {"value": repr(value)} if value is not None else {}
        super().__init__(message, details=details)
        self.value = value
