# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection string engine.

This package holds the operations on ModelConnectionString records:
    - util_connection_string_parser: raw string -> record
    - util_connection_string_defaults: fill a record's gaps from defaults
    - util_connection_string_builder: record -> raw string
    - util_connection_string_sanitization: password-masked strings for output
    - util_text: trimming, blank checks and percent-encoding helpers
"""

from connstring.utils.util_connection_string_builder import build_connection_string
from connstring.utils.util_connection_string_defaults import apply_defaults
from connstring.utils.util_connection_string_parser import (
    MAX_PORT,
    parse_connection_string,
)
from connstring.utils.util_connection_string_sanitization import (
    INVALID_PLACEHOLDER,
    PASSWORD_MASK,
    sanitize_connection_string,
)
from connstring.utils.util_text import (
    decode_component,
    encode_component,
    is_text,
    trim,
)

__all__: list[str] = [
    "INVALID_PLACEHOLDER",
    "MAX_PORT",
    "PASSWORD_MASK",
    "apply_defaults",
    "build_connection_string",
    "decode_component",
    "encode_component",
    "is_text",
    "parse_connection_string",
    "sanitize_connection_string",
    "trim",
]
