# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""connstring command line interface."""

from connstring.cli.commands import cli
from connstring.cli.model_connstring_config import ModelConnstringConfig

__all__: list[str] = [
    "ModelConnstringConfig",
    "cli",
]
