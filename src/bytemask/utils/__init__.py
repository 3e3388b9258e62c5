#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Byte-level helpers."""

from __future__ import annotations

from bytemask.utils.xor import (
    mask_bytes,
    unmask_bytes,
    validate_key,
)

__all__ = [
    "mask_bytes",
    "unmask_bytes",
    "validate_key",
]

# 🎭📦🔚
