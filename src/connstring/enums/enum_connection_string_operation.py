# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection String Operation Enumeration.

Identifies the public operation that raised an error. Used for error context
and structured log fields.
"""

from enum import Enum


class EnumConnectionStringOperation(str, Enum):
    """Public operations of the connection string engine.

    Attributes:
        PARSE: Tokenizing a raw string into a record
        APPLY_DEFAULTS: Merging a defaults object into a record
    """

    PARSE = "parse"
    APPLY_DEFAULTS = "apply_defaults"


__all__ = ["EnumConnectionStringOperation"]
