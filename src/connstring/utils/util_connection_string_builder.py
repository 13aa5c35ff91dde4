# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection string serializer.

Writes a ModelConnectionString back out in parse order:
protocol, credentials, hosts, segments, parameters. Every component except
host names is percent-encoded; host names are written verbatim (IPv6
literals already carry their brackets).

The output is not guaranteed to match the original input byte for byte, but
parsing it again yields the same record.
"""

from __future__ import annotations

import json

from connstring.types import ModelConnectionString
from connstring.utils.util_text import encode_component


def build_connection_string(record: ModelConnectionString) -> str:
    """Serialize ``record`` into a connection string.

    Empty or absent fields contribute nothing. Non-string parameter values
    (numbers, booleans, lists, objects merged in from defaults) are written
    as compact JSON before being percent-encoded.

    Example:
        >>> cs = ModelConnectionString(user="bob", password="p@ss", segments=["db"])
        >>> build_connection_string(cs)
        'bob:p%40ss@/db'
    """
    parts: list[str] = []

    if record.protocol:
        parts.append(encode_component(record.protocol) + "://")

    if record.user:
        parts.append(encode_component(record.user))
        if record.password:
            parts.append(":" + encode_component(record.password))
        parts.append("@")
    elif record.password:
        parts.append(":" + encode_component(record.password) + "@")

    if record.hosts:
        parts.append(",".join(host.to_string() for host in record.hosts))

    for segment in record.segments or ():
        parts.append("/" + encode_component(segment))

    if record.params:
        pairs = [
            encode_component(key) + "=" + encode_component(_param_text(value))
            for key, value in record.params.items()
        ]
        parts.append("?" + "&".join(pairs))

    return "".join(parts)


def _param_text(value: object) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


__all__: list[str] = [
    "build_connection_string",
]
