# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Text helpers shared by the parser, the defaulter and the builder.

Percent-encoding follows JavaScript's ``encodeURIComponent`` /
``decodeURIComponent`` pair, which is what connection strings in the wild are
usually produced with: only ASCII letters, digits and ``- _ . ! ~ * ' ( )``
are left unescaped.
"""

from __future__ import annotations

from urllib.parse import quote, unquote

from connstring.errors import (
    ConnectionStringFormatError,
    ModelConnectionStringErrorContext,
)

# quote() always keeps letters, digits and "_.-~"; add the rest of the
# encodeURIComponent unreserved set.
_COMPONENT_SAFE = "!*'()"


def trim(text: str) -> str:
    """Strip leading and trailing whitespace."""
    return text.strip()


def is_text(value: object) -> bool:
    """Return True for a string holding at least one non-whitespace character."""
    return isinstance(value, str) and bool(value.strip())


def encode_component(text: str) -> str:
    """Percent-encode a single connection string component.

    Example:
        >>> encode_component("p@ss word")
        'p%40ss%20word'
    """
    return quote(text, safe=_COMPONENT_SAFE)


def decode_component(
    text: str,
    *,
    parameter: str,
    context: ModelConnectionStringErrorContext | None = None,
) -> str:
    """Percent-decode a single connection string component.

    Args:
        text: Encoded component as found in the input.
        parameter: Name of the field being decoded, reported on failure.
        context: Error context of the running operation.

    Returns:
        The decoded text. Stray ``%`` signs that do not start a valid escape
        are kept as they are.

    Raises:
        ConnectionStringFormatError: If the escapes decode to invalid UTF-8.
            The component itself is not echoed since it may be a password.
    """
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError as e:
        raise ConnectionStringFormatError(
            f"Invalid percent-encoded sequence in {parameter}",
            context=context,
            parameter=parameter,
        ) from e


__all__: list[str] = [
    "decode_component",
    "encode_component",
    "is_text",
    "trim",
]
