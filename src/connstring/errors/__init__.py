# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection String Errors Module.

Exports:
    ModelConnectionStringErrorContext: Bundled error context model
    ConnectionStringError: Base error class
    ConnectionStringTypeError: Structurally invalid call arguments
    ConnectionStringFormatError: Hard grammar violations (whitespace, port)

Correlation ID Assignment:
    Errors raised by the parser carry a context built with
    ``ModelConnectionStringErrorContext.with_correlation()``, so every
    failure has a UUID4 correlation ID that also appears in the DEBUG log
    record emitted just before the raise.

    Example::

        from connstring import parse_connection_string
        from connstring.errors import ConnectionStringFormatError

        try:
            parse_connection_string("host:0")
        except ConnectionStringFormatError as e:
            print(e.fragment, e.correlation_id)
"""

from connstring.errors.connection_string_errors import (
    ConnectionStringError,
    ConnectionStringFormatError,
    ConnectionStringTypeError,
)
from connstring.errors.model_connection_string_error_context import (
    ModelConnectionStringErrorContext,
)

__all__: list[str] = [
    "ConnectionStringError",
    "ConnectionStringFormatError",
    "ConnectionStringTypeError",
    "ModelConnectionStringErrorContext",
]
