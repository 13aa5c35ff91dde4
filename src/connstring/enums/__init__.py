# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection string enumerations.

Exports:
    EnumConnectionStringOperation: Public operation identifiers for error context
    EnumHostKind: Host name classification (IPV4, IPV6, DOMAIN, UNKNOWN)
"""

from connstring.enums.enum_connection_string_operation import (
    EnumConnectionStringOperation,
)
from connstring.enums.enum_host_kind import EnumHostKind

__all__: list[str] = [
    "EnumConnectionStringOperation",
    "EnumHostKind",
]
