#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for bytemask configuration."""

from __future__ import annotations

# =================================
# Mask key range
# =================================
MASK_KEY_MIN = 0
MASK_KEY_MAX = 0xFF

# =================================
# Text encoding defaults
# =================================
DEFAULT_ENCODING = "utf-8"

# Canonical codec names rejected for masking: decoding masked bytes and
# re-encoding does not reproduce them (BOMs, signatures, escapes).
NON_BIJECTIVE_ENCODINGS = frozenset(
    {
        "utf-16",
        "utf-32",
        "utf-8-sig",
        "utf-7",
        "unicode-escape",
        "raw-unicode-escape",
        "idna",
        "punycode",
    }
)

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

SERVICE_NAME = "bytemask"

# 🎭📦🔚
