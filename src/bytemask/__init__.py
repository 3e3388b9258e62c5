#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Reversible single-byte XOR masking for text."""

from __future__ import annotations

from provide.foundation.utils import get_version

from bytemask.config import BytemaskRuntimeConfig, get_config, reset_config, set_config
from bytemask.exceptions import (
    BytemaskError,
    DecodeError,
    EncodeError,
    MaskKeyError,
    UnsupportedEncodingError,
)
from bytemask.mask import apply, is_reversible
from bytemask.telemetry import setup_logging
from bytemask.utils import mask_bytes, unmask_bytes, validate_key

__version__ = get_version("bytemask", caller_file=__file__)

__all__ = [
    "BytemaskError",
    "BytemaskRuntimeConfig",
    "DecodeError",
    "EncodeError",
    "MaskKeyError",
    "UnsupportedEncodingError",
    "__version__",
    "apply",
    "get_config",
    "is_reversible",
    "mask_bytes",
    "reset_config",
    "set_config",
    "setup_logging",
    "unmask_bytes",
    "validate_key",
]

# 🎭📦🔚
