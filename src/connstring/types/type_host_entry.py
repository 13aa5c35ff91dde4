# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Host entry model for parsed connection strings.

A connection string may list several hosts separated by commas
(``host1,host2:5432``). Each one becomes a ModelHostEntry holding an optional
name and an optional port, with at least one of the two present.

Example:
    >>> from connstring.types import ModelHostEntry
    >>> ModelHostEntry(name="db.example.com", port=5432).kind
    <EnumHostKind.DOMAIN: 'domain'>
    >>> ModelHostEntry(name="[::1]").kind
    <EnumHostKind.IPV6: 'ipv6'>
"""

from __future__ import annotations

import ipaddress

from pydantic import BaseModel, ConfigDict, Field, model_validator

from connstring.enums import EnumHostKind

__all__ = ["ModelHostEntry"]


class ModelHostEntry(BaseModel):
    """One host of a (possibly multi-host) connection string.

    Attributes:
        name: Host name or IP literal as written. IPv6 literals keep their
            square brackets so they can be written back verbatim.
        port: Port number (1-65535). None if not specified.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = Field(
        default=None,
        description="Host name or IP literal; IPv6 literals keep their brackets.",
    )
    port: int | None = Field(
        default=None,
        ge=1,
        le=65535,
        description="Port number (valid range: 1-65535).",
    )

    @model_validator(mode="after")
    def _require_name_or_port(self) -> ModelHostEntry:
        if self.name is None and self.port is None:
            raise ValueError("host entry needs a name, a port, or both")
        return self

    @property
    def kind(self) -> EnumHostKind:
        """Classify the host name (IPv4, IPv6, domain or unknown)."""
        if not self.name:
            return EnumHostKind.UNKNOWN
        if self.name.startswith("[") and self.name.endswith("]"):
            return EnumHostKind.IPV6
        try:
            address = ipaddress.ip_address(self.name)
        except ValueError:
            return EnumHostKind.DOMAIN
        return EnumHostKind.IPV4 if address.version == 4 else EnumHostKind.IPV6

    def to_string(self) -> str:
        """Render as ``name[:port]``, the form used between commas."""
        text = self.name or ""
        if self.port:
            text += f":{self.port}"
        return text

    def __str__(self) -> str:
        return self.to_string()
