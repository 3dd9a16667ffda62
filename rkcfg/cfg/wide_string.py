#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Conversion between text and fixed-width UTF-16LE buffers.

Names and image paths of the configuration items are stored as fixed arrays of
16-bit code units terminated by a NUL code unit.
"""

from typing import Optional

from rkcfg.exceptions import RKCfgLengthError

CHAR16_SIZE = 2
CHAR16_ENCODING = "utf-16-le"


def to_char16(text: str, max_len: int) -> bytes:
    """Encode text into a NUL padded buffer of ``max_len`` 16-bit code units.

    :param text: Text to encode.
    :param max_len: Capacity of the buffer in code units, terminator included.
    :raises RKCfgLengthError: The text together with the terminator does not fit.
    :return: Buffer of exactly ``max_len * 2`` bytes.
    """
    encoded = text.encode(CHAR16_ENCODING, errors="surrogatepass")
    if len(encoded) // CHAR16_SIZE >= max_len:
        raise RKCfgLengthError(
            f"Text '{text}' has {len(encoded) // CHAR16_SIZE} characters, "
            f"the field holds at most {max_len - 1}"
        )
    return encoded.ljust(max_len * CHAR16_SIZE, b"\x00")


def from_char16(buffer: bytes, max_len: Optional[int] = None) -> str:
    """Decode a 16-bit code unit buffer up to the first terminator.

    :param buffer: UTF-16LE buffer.
    :param max_len: Maximal number of code units to decode, whole buffer by default.
    :return: Decoded text, lone surrogates are kept.
    """
    units = len(buffer) // CHAR16_SIZE
    if max_len is not None:
        units = min(units, max_len)
    for index in range(units):
        offset = index * CHAR16_SIZE
        if buffer[offset : offset + CHAR16_SIZE] == b"\x00\x00":
            units = index
            break
    return buffer[: units * CHAR16_SIZE].decode(CHAR16_ENCODING, errors="surrogatepass")
