#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Process-wide access to the bytemask runtime configuration."""

from __future__ import annotations

from bytemask.config.runtime import BytemaskRuntimeConfig

_config: BytemaskRuntimeConfig | None = None


def get_config() -> BytemaskRuntimeConfig:
    """Return the active configuration, loading it from the environment on first use."""
    global _config
    if _config is None:
        _config = BytemaskRuntimeConfig.from_env()
    return _config


def set_config(config: BytemaskRuntimeConfig) -> None:
    """Replace the active configuration."""
    global _config
    _config = config


def reset_config() -> None:
    """Drop the active configuration so the next get_config() reloads it."""
    global _config
    _config = None


# 🎭📦🔚
