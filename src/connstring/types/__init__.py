# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Types module for connstring."""

from connstring.types.type_connection_string import ModelConnectionString
from connstring.types.type_connstring_aliases import DefaultsLike, HostLike
from connstring.types.type_host_entry import ModelHostEntry

__all__: list[str] = [
    "DefaultsLike",
    "HostLike",
    "ModelConnectionString",
    "ModelHostEntry",
]
