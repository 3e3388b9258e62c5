#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Single-byte XOR primitives over raw bytes."""

from __future__ import annotations

from typing import Any

from bytemask.config.defaults import MASK_KEY_MAX, MASK_KEY_MIN
from bytemask.exceptions import MaskKeyError


def validate_key(key: Any) -> int:
    """Return ``key`` if it is a single byte value, raise MaskKeyError otherwise."""
    # bool is an int subclass but never a meaningful key
    if isinstance(key, bool) or not isinstance(key, int):
        raise MaskKeyError(key)
    if not MASK_KEY_MIN <= key <= MASK_KEY_MAX:
        raise MaskKeyError(key)
    return key


def mask_bytes(data: bytes, key: int) -> bytes:
    """
    XOR every byte of data with a single key byte.

    Args:
        data: Bytes to mask
        key: Mask key (0-255)

    Returns:
        Masked bytes, same length as data
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"mask_bytes expects bytes-like input, got {type(data).__name__}")
    validate_key(key)
    if key == 0:
        return bytes(data)
    return bytes(b ^ key for b in bytes(data))


def unmask_bytes(data: bytes, key: int) -> bytes:
    """
    Reverse mask_bytes.

    Since XOR is symmetric, this is the same as masking.
    """
    return mask_bytes(data, key)  # XOR is its own inverse


# 🎭📦🔚
