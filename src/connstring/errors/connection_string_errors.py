# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection String Error Classes.

Error Hierarchy:
    ConnectionStringError (base)
    ├── ConnectionStringTypeError (also a TypeError)
    └── ConnectionStringFormatError (also a ValueError)

All errors:
    - Support proper error chaining with `raise ... from e`
    - Accept ModelConnectionStringErrorContext for bundled context parameters
    - Keep any extra keyword context on ``context_data``
    - Never carry passwords or the full raw input in their message
"""

from __future__ import annotations

from uuid import UUID

from connstring.enums import EnumConnectionStringOperation
from connstring.errors.model_connection_string_error_context import (
    ModelConnectionStringErrorContext,
)


class ConnectionStringError(Exception):
    """Base error class for the connection string engine.

    Example:
        >>> context = ModelConnectionStringErrorContext.with_correlation(
        ...     operation=EnumConnectionStringOperation.PARSE,
        ... )
        >>> raise ConnectionStringError("Parse failed", context=context)
    """

    def __init__(
        self,
        message: str,
        context: ModelConnectionStringErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize ConnectionStringError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled error context (operation, correlation_id)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context
        self.context_data: dict[str, object] = dict(extra_context)

    @property
    def operation(self) -> EnumConnectionStringOperation | None:
        return self.context.operation if self.context is not None else None

    @property
    def correlation_id(self) -> UUID | None:
        return self.context.correlation_id if self.context is not None else None


class ConnectionStringTypeError(ConnectionStringError, TypeError):
    """Raised when a call argument has the wrong structure.

    Used for a non-string connection string, or defaults that are neither a
    record nor a mapping. Raised before any parsing work is done.

    Example:
        >>> raise ConnectionStringTypeError(
        ...     "Invalid 'defaults' parameter!",
        ...     parameter="defaults",
        ... )
    """

    @property
    def parameter(self) -> str | None:
        value = self.context_data.get("parameter")
        return value if isinstance(value, str) else None


class ConnectionStringFormatError(ConnectionStringError, ValueError):
    """Raised when the input violates a hard grammar rule.

    Hard rules are: no whitespace inside the string, and every host port is a
    clean integer in 1..65535. Everything else the grammar does not recognise
    is dropped silently instead.

    Example:
        >>> raise ConnectionStringFormatError(
        ...     "Invalid URL character at position 1",
        ...     position=1,
        ... )
    """

    @property
    def position(self) -> int | None:
        value = self.context_data.get("position")
        return value if isinstance(value, int) else None

    @property
    def fragment(self) -> str | None:
        value = self.context_data.get("fragment")
        return value if isinstance(value, str) else None


__all__ = [
    "ConnectionStringError",
    "ConnectionStringFormatError",
    "ConnectionStringTypeError",
]
