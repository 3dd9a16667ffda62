#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Test of the fixed-width UTF-16LE text buffers."""

import pytest

from rkcfg.cfg.wide_string import from_char16, to_char16
from rkcfg.exceptions import RKCfgLengthError


@pytest.mark.parametrize(
    "text,max_len,expected",
    [
        ("", 4, bytes(8)),
        ("ab", 4, b"a\x00b\x00\x00\x00\x00\x00"),
        ("abc", 4, b"a\x00b\x00c\x00\x00\x00"),
        ("č", 2, b"\x0d\x01\x00\x00"),
    ],
)
def test_to_char16(text: str, max_len: int, expected: bytes) -> None:
    """Test encoding of text into the NUL padded buffer."""
    assert to_char16(text, max_len) == expected


@pytest.mark.parametrize("text,max_len", [("abcd", 4), ("abcde", 4), ("a", 1), ("\U0001f600", 2)])
def test_to_char16_overflow(text: str, max_len: int) -> None:
    """Text must leave room for the terminator, it is never truncated."""
    with pytest.raises(RKCfgLengthError):
        to_char16(text, max_len)


@pytest.mark.parametrize(
    "buffer,max_len,expected",
    [
        (bytes(8), None, ""),
        (b"a\x00b\x00\x00\x00c\x00", None, "ab"),
        (b"a\x00b\x00c\x00d\x00", None, "abcd"),
        (b"a\x00b\x00c\x00d\x00", 2, "ab"),
        (b"\x0d\x01\x00\x00", 2, "č"),
    ],
)
def test_from_char16(buffer: bytes, max_len: int, expected: str) -> None:
    """Test decoding stops at the terminator or at the maximal length."""
    assert from_char16(buffer, max_len) == expected


def test_char16_non_ascii() -> None:
    """Characters outside ASCII survive the encoding."""
    text = "oddíl_č1"
    assert from_char16(to_char16(text, 40)) == text


@pytest.mark.parametrize(
    "buffer,expected",
    [
        (b"\x00\xd8a\x00", "\ud800a"),
        (b"a\x00\x00\xdc\x00\x00", "a\udc00"),
        (b"=\xd8\x00\xde\x00\x00", "\U0001f600"),
    ],
)
def test_from_char16_surrogates(buffer: bytes, expected: str) -> None:
    """Lone surrogates are decoded as they are stored."""
    assert from_char16(buffer) == expected


@pytest.mark.parametrize("text", ["\ud800", "x\udc00y", "\udc00\ud800"])
def test_char16_lone_surrogates(text: str) -> None:
    """Text with lone surrogates reads back unchanged."""
    assert from_char16(to_char16(text, 4)) == text
