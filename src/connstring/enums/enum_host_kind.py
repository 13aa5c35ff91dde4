# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Host Kind Enumeration.

Classifies the name of a parsed host entry so callers can tell IP literals
from DNS names without re-parsing the address themselves.
"""

from enum import Enum


class EnumHostKind(str, Enum):
    """Kinds of host names found in a connection string.

    Attributes:
        IPV4: Dotted-quad IPv4 literal (``127.0.0.1``)
        IPV6: Bracketed IPv6 literal (``[::1]``)
        DOMAIN: Anything else that has a name (``db.example.com``)
        UNKNOWN: Port-only entry with no name at all
    """

    IPV4 = "ipv4"
    IPV6 = "ipv6"
    DOMAIN = "domain"
    UNKNOWN = "unknown"


__all__ = ["EnumHostKind"]
