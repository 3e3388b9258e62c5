#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the bytemask exception hierarchy."""

from __future__ import annotations

from provide.foundation.errors import FoundationError
import pytest

from bytemask.exceptions import (
    BytemaskError,
    DecodeError,
    EncodeError,
    MaskKeyError,
    UnsupportedEncodingError,
)


@pytest.mark.parametrize("exc_type", [DecodeError, EncodeError, MaskKeyError, UnsupportedEncodingError])
def test_hierarchy(exc_type: type[Exception]) -> None:
    assert issubclass(exc_type, BytemaskError)
    assert issubclass(exc_type, FoundationError)


def test_decode_error_message() -> None:
    err = DecodeError(0x40, "utf-8", 0, 1, "invalid start byte")
    assert "Cannot decode masked text as utf-8 (key=64) at bytes 0..1: invalid start byte" in str(err)
    assert (err.key, err.encoding, err.start, err.end) == (0x40, "utf-8", 0, 1)
    assert err.reason == "invalid start byte"


def test_encode_error_message() -> None:
    err = EncodeError(1, "ascii", 2, 3, "ordinal not in range(128)")
    assert "Cannot encode" in str(err)


def test_unsupported_encoding_error_is_value_error() -> None:
    err = UnsupportedEncodingError("utf-16", "use utf-16-le or utf-16-be")
    assert isinstance(err, ValueError)
    assert err.encoding == "utf-16"
    assert "Unsupported text encoding: utf-16 (use utf-16-le or utf-16-be)" in str(err)


def test_mask_key_error_keeps_key() -> None:
    err = MaskKeyError(300)
    assert err.key == 300
    assert "300" in str(err)


# 🎭📦🔚
