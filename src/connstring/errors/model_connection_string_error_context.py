# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection String Error Context Model.

This module defines the model bundling the structured fields shared by all
connection string errors, keeping error __init__ signatures short while
staying strongly typed.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from connstring.enums import EnumConnectionStringOperation


class ModelConnectionStringErrorContext(BaseModel):
    """Structured context attached to connection string errors.

    Attributes:
        operation: Public operation that failed (parse, apply_defaults)
        correlation_id: Correlation ID for tracing a failure through logs

    Example:
        >>> context = ModelConnectionStringErrorContext.with_correlation(
        ...     operation=EnumConnectionStringOperation.PARSE,
        ... )
        >>> raise ConnectionStringFormatError("Invalid port: 0", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: EnumConnectionStringOperation | None = Field(
        default=None,
        description="Operation being performed (parse, apply_defaults)",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID for tracing the failure through logs",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: object,
    ) -> ModelConnectionStringErrorContext:
        """Create a context, generating a correlation ID when none is given.

        Args:
            correlation_id: Existing correlation ID to propagate, or None.
            **kwargs: Remaining context fields.

        Returns:
            A context whose correlation_id is never None.
        """
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelConnectionStringErrorContext"]
