# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Type aliases for the argument shapes the connection string API accepts.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from connstring.types.type_connection_string import ModelConnectionString
    from connstring.types.type_host_entry import ModelHostEntry

# Defaults may be another record or a plain mapping with the same keys
type DefaultsLike = ModelConnectionString | Mapping[str, object]

# Default host entries may be models or {"name": ..., "port": ...} mappings
type HostLike = ModelHostEntry | Mapping[str, object]

__all__ = [
    "DefaultsLike",
    "HostLike",
]
