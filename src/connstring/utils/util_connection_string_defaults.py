# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Defaults merging for connection string records.

Defaults fill gaps, they never override explicit values. A field counts as
explicit when it is present on the record (not None), even if it holds an
empty string.

Merge policy per field:
    - protocol, user, password: copied (trimmed) when absent on the record
      and the default is a non-blank string
    - segments: copied (blank entries removed) only when the record has none
    - hosts: merged entry by entry; a default host is appended unless an
      entry with the same name AND port already exists
    - params: merged key by key; existing keys keep their values

Example:
    >>> from connstring import parse_connection_string
    >>> cs = parse_connection_string("bob@db1:5432")
    >>> cs = apply_defaults(cs, {"user": "alice", "protocol": "postgres"})
    >>> cs.user, cs.protocol
    ('bob', 'postgres')
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from uuid import UUID

from pydantic import ValidationError

from connstring.enums import EnumConnectionStringOperation
from connstring.errors import (
    ConnectionStringTypeError,
    ModelConnectionStringErrorContext,
)
from connstring.types import (
    DefaultsLike,
    HostLike,
    ModelConnectionString,
    ModelHostEntry,
)
from connstring.utils.util_text import is_text, trim

logger = logging.getLogger(__name__)


def apply_defaults(
    record: ModelConnectionString,
    defaults: DefaultsLike,
    *,
    correlation_id: UUID | None = None,
) -> ModelConnectionString:
    """Fill the absent fields of ``record`` from ``defaults``, in place.

    Args:
        record: The record to extend. Modified in place.
        defaults: Another record, or a mapping using the record's field names.
            Host entries in a mapping may themselves be mappings with
            ``name``/``port`` keys.
        correlation_id: Optional correlation ID for error context.

    Returns:
        The same ``record`` instance.

    Raises:
        ConnectionStringTypeError: If ``defaults`` is missing, is neither a
            record nor a mapping, or holds values the record cannot accept
            (for example a default port outside 1..65535).
    """
    context = ModelConnectionStringErrorContext.with_correlation(
        correlation_id=correlation_id,
        operation=EnumConnectionStringOperation.APPLY_DEFAULTS,
    )

    if defaults is None or not isinstance(
        defaults, (ModelConnectionString, Mapping)
    ):
        raise ConnectionStringTypeError(
            "Invalid 'defaults' parameter!",
            context=context,
            parameter="defaults",
        )

    # Merge into a copy so a rejected default leaves the record untouched
    merged = record.model_copy(deep=True)
    try:
        _merge_scalar(merged, defaults, "protocol")
        _merge_hosts(merged, _get(defaults, "hosts"))
        _merge_scalar(merged, defaults, "user")
        _merge_scalar(merged, defaults, "password")
        _merge_segments(merged, _get(defaults, "segments"))
        _merge_params(merged, _get(defaults, "params"))
    except ValidationError as e:
        raise ConnectionStringTypeError(
            f"Invalid 'defaults' parameter: {e.error_count()} invalid value(s) "
            f"in {', '.join(_error_fields(e))}",
            context=context,
            parameter="defaults",
        ) from e

    for field in ModelConnectionString.model_fields:
        if getattr(merged, field) != getattr(record, field):
            setattr(record, field, getattr(merged, field))
    logger.debug(
        "Applied connection string defaults",
        extra={
            "correlation_id": str(context.correlation_id),
            "host_count": len(record.hosts or ()),
            "param_count": len(record.params or ()),
        },
    )
    return record


def _get(source: DefaultsLike | HostLike, key: str) -> object:
    if isinstance(source, Mapping):
        return source.get(key)
    return getattr(source, key, None)


def _error_fields(error: ValidationError) -> list[str]:
    # Field names only, never input values (they may be passwords)
    return sorted({str(item["loc"][0]) for item in error.errors() if item["loc"]})


def _merge_scalar(
    record: ModelConnectionString, defaults: DefaultsLike, field: str
) -> None:
    value = _get(defaults, field)
    if getattr(record, field) is None and is_text(value):
        setattr(record, field, trim(value))  # type: ignore[arg-type]


def _merge_hosts(record: ModelConnectionString, default_hosts: object) -> None:
    if not isinstance(default_hosts, Sequence) or isinstance(default_hosts, str):
        return

    hosts = list(record.hosts) if record.hosts is not None else []
    added = False
    for default_host in default_hosts:
        name = _get(default_host, "name")
        port = _get(default_host, "port")
        if not name and not port:
            continue
        # Compare the validated entry so "5432" and 5432 are the same port
        entry = ModelHostEntry.model_validate(
            {"name": name or None, "port": port or None}
        )
        # Exact (name, port) pair; hosts added earlier in this loop count too
        if any(host.name == entry.name and host.port == entry.port for host in hosts):
            continue
        hosts.append(entry)
        added = True

    if added:
        record.hosts = hosts


def _merge_segments(record: ModelConnectionString, default_segments: object) -> None:
    if record.segments is not None:
        return
    if not isinstance(default_segments, Sequence) or isinstance(default_segments, str):
        return
    segments = [segment for segment in default_segments if is_text(segment)]
    if segments:
        record.segments = segments


def _merge_params(record: ModelConnectionString, default_params: object) -> None:
    if not isinstance(default_params, Mapping) or not default_params:
        return
    params = dict(record.params) if record.params is not None else {}
    for key, value in default_params.items():
        if key not in params:
            params[key] = value
    record.params = params


__all__: list[str] = [
    "apply_defaults",
]
