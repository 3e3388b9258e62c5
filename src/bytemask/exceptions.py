#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for bytemask."""

from __future__ import annotations

from typing import Any

from provide.foundation.errors import FoundationError


class BytemaskError(FoundationError):
    """Base exception for all bytemask errors."""

    pass


class MaskKeyError(BytemaskError):
    """Raised when a mask key is not a single byte value."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(
            f"Mask key must be an int in 0..255, got {key!r}",
            code="BYTEMASK_INVALID_KEY",
            key=repr(key),
        )


class UnsupportedEncodingError(BytemaskError, ValueError):
    """Raised when an encoding cannot be used for reversible masking."""

    def __init__(self, encoding: str, reason: str) -> None:
        self.encoding = encoding
        self.reason = reason
        super().__init__(
            f"Unsupported text encoding: {encoding} ({reason})",
            code="BYTEMASK_UNSUPPORTED_ENCODING",
            encoding=encoding,
        )


class _CodecError(BytemaskError):
    """Shared shape of encode and decode failures."""

    action = "process"

    def __init__(self, key: int, encoding: str, start: int, end: int, reason: str) -> None:
        self.key = key
        self.encoding = encoding
        self.start = start
        self.end = end
        self.reason = reason
        super().__init__(
            f"Cannot {self.action} masked text as {encoding} (key={key}) "
            f"at bytes {start}..{end}: {reason}",
            key=key,
            encoding=encoding,
            start=start,
            end=end,
        )


class DecodeError(_CodecError):
    """Raised when masked bytes are not valid text under the encoding."""

    action = "decode"

    def _default_code(self) -> str:
        return "BYTEMASK_DECODE_ERROR"


class EncodeError(_CodecError):
    """Raised when input text cannot be represented in the encoding."""

    action = "encode"

    def _default_code(self) -> str:
        return "BYTEMASK_ENCODE_ERROR"


# 🎭📦🔚
