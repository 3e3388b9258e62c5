#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Bytemask configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from bytemask.config.manager import (
    get_config,
    reset_config,
    set_config,
)
from bytemask.config.runtime import BytemaskRuntimeConfig

__all__ = [
    "BytemaskRuntimeConfig",
    "get_config",
    "reset_config",
    "set_config",
]

# 🎭📦🔚
