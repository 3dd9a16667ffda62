#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Test of the mtdparts command line parser."""

import pytest

from rkcfg.cfg.error_codes import RKConvertParamErrorCode
from rkcfg.cfg.exceptions import RKConvertParamError
from rkcfg.cfg.mtdparts import MtdPartition, find_mtdparts, parse_mtdpart, parse_mtdparts


@pytest.mark.parametrize(
    "token,expected",
    [
        ("0x00002000@0x00004000(uboot)", MtdPartition("uboot", 0x4000, 0x2000, False)),
        ("-@0x0123a000(userdisk:grow)", MtdPartition("userdisk", 0x0123A000, None, True)),
        ("-@0x0123a000(userdisk)", MtdPartition("userdisk", 0x0123A000, None, True)),
        ("0x2000@0x4000(boot)", MtdPartition("boot", 0x4000, 0x2000, False)),
        ("8192@16384(misc)", MtdPartition("misc", 16384, 8192, False)),
        ("0x2000@0x4000()", MtdPartition("", 0x4000, 0x2000, False)),
        # address is capped to 10 characters
        ("0x2000@0x000040001(boot)", MtdPartition("boot", 0x4000, 0x2000, False)),
    ],
)
def test_parse_mtdpart(token: str, expected: MtdPartition) -> None:
    """Test parsing of valid partition descriptors."""
    assert parse_mtdpart(token) == expected


@pytest.mark.parametrize(
    "token",
    [
        "0x00002000 0x00004000(uboot)",
        "0x00002000@0x00004000 uboot)",
        "0x00002000(uboot)@0x00004000",
        "0x00002000@0x00004000(uboot",
        "0x00002000@(uboot)",
        "@0x00004000(uboot)",
        "0xZZ@0x00004000(uboot)",
        "0x2000@4294967296(uboot)",
        "",
    ],
)
def test_parse_mtdpart_invalid(token: str) -> None:
    """Malformed descriptors are reported as illegal format."""
    with pytest.raises(RKConvertParamError) as exc:
        parse_mtdpart(token)
    assert exc.value.code == RKConvertParamErrorCode.ILLEGAL_MTD_PART_FORMAT


def test_parse_mtdparts() -> None:
    """Test parsing of the whole command line."""
    parts = parse_mtdparts(
        "mtdparts=rk29xxnand:0x00002000@0x00004000(uboot),-@0x0123a000(userdisk:grow)"
    )
    assert [part.name for part in parts] == ["uboot", "userdisk"]
    assert [part.address for part in parts] == [0x4000, 0x0123A000]
    assert [part.grow for part in parts] == [False, True]


def test_parse_mtdparts_trailing_comma() -> None:
    """Trailing comma does not produce an empty partition."""
    parts = parse_mtdparts("mtdparts=rk29xxnand:0x2000@0x4000(uboot),")
    assert len(parts) == 1


def test_parse_mtdparts_missing_device() -> None:
    """Command line without the device separator is rejected."""
    with pytest.raises(RKConvertParamError) as exc:
        parse_mtdparts("mtdparts=0x2000@0x4000(uboot)")
    assert exc.value.code == RKConvertParamErrorCode.ILLEGAL_MTD_PART_FORMAT


def test_parse_mtdparts_malformed_part() -> None:
    """The first malformed descriptor stops the parsing."""
    with pytest.raises(RKConvertParamError):
        parse_mtdparts("mtdparts=rk29xxnand:0x2000@0x4000(uboot),0x2000-0x6000(trust)")


@pytest.mark.parametrize(
    "lines,expected",
    [
        (["CMDLINE: mtdparts=rk:0x1@0x2(a)\n"], "mtdparts=rk:0x1@0x2(a)"),
        (["mtdparts=rk:0x1@0x2(a)\r\n"], "mtdparts=rk:0x1@0x2(a)"),
        (
            ["FIRMWARE_VER: 8.1\n", "CMDLINE: console=ttyFIQ0\n", "mtdparts=rk:0x1@0x2(b)"],
            "mtdparts=rk:0x1@0x2(b)",
        ),
        (["CMDLINE: console=ttyFIQ0 mtdparts=rk:0x1@0x2(a)\n"], None),
        (["FIRMWARE_VER: 8.1\n"], None),
        ([], None),
    ],
)
def test_find_mtdparts(lines: list, expected: str) -> None:
    """The prefix is stripped from a line and the same line is tested for mtdparts."""
    assert find_mtdparts(lines) == expected
