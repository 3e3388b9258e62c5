#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Reversible single-byte XOR masking of text.

The text is encoded, every byte is XORed with the key and the result is decoded
again in the same encoding. Masking is an obfuscation step only and offers no
confidentiality.
"""

from __future__ import annotations

from provide.foundation import logger

from bytemask.config import get_config
from bytemask.config.runtime import parse_encoding
from bytemask.exceptions import DecodeError, EncodeError
from bytemask.utils.xor import mask_bytes, validate_key


def _resolve_encoding(encoding: str | None) -> str:
    if encoding is None:
        return get_config().encoding
    return parse_encoding(encoding)


def apply(text: str, key: int, encoding: str | None = None) -> str:
    """
    Mask text with a single-byte XOR key.

    Applying the same key to the result restores the original text, provided
    both applications decode.

    Args:
        text: Text to mask
        key: Mask key (0-255)
        encoding: Codec used to encode and decode (defaults to configured encoding)

    Returns:
        Masked text

    Raises:
        MaskKeyError: If key is not a byte value
        UnsupportedEncodingError: If encoding is unknown, not a text codec, or
            cannot restore masked bytes (BOM and escape codecs)
        EncodeError: If text cannot be encoded
        DecodeError: If the masked bytes are not valid text in the encoding
    """
    if not isinstance(text, str):
        raise TypeError(f"apply expects str input, got {type(text).__name__}")
    validate_key(key)
    encoding = _resolve_encoding(encoding)

    try:
        raw = text.encode(encoding)
    except UnicodeEncodeError as e:
        logger.debug("Text not encodable", key=key, encoding=encoding, start=e.start, end=e.end)
        raise EncodeError(key, encoding, e.start, e.end, e.reason) from e

    masked = mask_bytes(raw, key)

    try:
        result = masked.decode(encoding)
    except UnicodeDecodeError as e:
        logger.debug(
            "Masked bytes not decodable",
            key=key,
            encoding=encoding,
            size=len(masked),
            start=e.start,
            end=e.end,
        )
        raise DecodeError(key, encoding, e.start, e.end, e.reason) from e

    logger.trace("Masked text", key=key, encoding=encoding, size=len(masked))
    return result


def is_reversible(text: str, key: int, encoding: str | None = None) -> bool:
    """Check whether text survives a mask/unmask round trip with this key."""
    try:
        return apply(apply(text, key, encoding), key, encoding) == text
    except DecodeError:
        return False


# 🎭📦🔚
