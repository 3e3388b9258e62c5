#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Bytemask runtime configuration."""

from __future__ import annotations

import codecs

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from bytemask.config.defaults import (
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    NON_BIJECTIVE_ENCODINGS,
    VALID_LOG_LEVELS,
)
from bytemask.exceptions import UnsupportedEncodingError

# Byte-order-neutral alternatives for the signature codecs
_ENCODING_HINTS = {
    "utf-16": "utf-16-le or utf-16-be",
    "utf-32": "utf-32-le or utf-32-be",
    "utf-8-sig": "utf-8",
}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_encoding(value: str) -> str:
    """Validate a codec name for masking and return its canonical form.

    The codec must turn str into bytes and decode every byte sequence it accepts
    back to text that re-encodes to the same bytes.
    """
    try:
        info = codecs.lookup(value.strip())
    except LookupError as e:
        raise UnsupportedEncodingError(value, "unknown codec") from e
    if not getattr(info, "_is_text_encoding", True):
        raise UnsupportedEncodingError(value, "not a text encoding")
    if info.name in NON_BIJECTIVE_ENCODINGS:
        reason = "decoding masked bytes does not restore them"
        if info.name in _ENCODING_HINTS:
            reason = f"{reason}; use {_ENCODING_HINTS[info.name]}"
        raise UnsupportedEncodingError(value, reason)
    return info.name


@define
class BytemaskRuntimeConfig(RuntimeConfig):
    """Bytemask runtime configuration."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="BYTEMASK_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for bytemask (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    encoding: str = field(
        default=DEFAULT_ENCODING,
        env_var="BYTEMASK_ENCODING",
        converter=parse_encoding,
        metadata={"help": "Text encoding used when no encoding is passed explicitly"},
    )


# 🎭📦🔚
