# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration model for the connstring CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

__all__: list[str] = [
    "ENV_DEFAULTS",
    "ENV_LOG_LEVEL",
    "ModelConnstringConfig",
]

ENV_DEFAULTS: Final[str] = "CONNSTRING_DEFAULTS"
ENV_LOG_LEVEL: Final[str] = "CONNSTRING_LOG_LEVEL"

_DEFAULT_LOG_LEVEL: Final[str] = "WARNING"


@dataclass(frozen=True)
class ModelConnstringConfig:
    """Configuration for the connstring CLI.

    Attributes:
        defaults: Connection string whose parsed record fills the gaps of
            every parsed value. Empty means no defaults.
        log_level: Name of the logging level configured at startup.
    """

    defaults: str = ""
    log_level: str = _DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> ModelConnstringConfig:
        """Create config from environment variables.

        Reads CONNSTRING_DEFAULTS and CONNSTRING_LOG_LEVEL. Unset variables
        fall back to no defaults and WARNING respectively.

        Returns:
            ModelConnstringConfig populated from environment.
        """
        return cls(
            defaults=os.environ.get(ENV_DEFAULTS, "").strip(),
            log_level=os.environ.get(ENV_LOG_LEVEL, _DEFAULT_LOG_LEVEL).strip().upper()
            or _DEFAULT_LOG_LEVEL,
        )
