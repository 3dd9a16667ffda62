#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Parser of the kernel ``mtdparts=`` partition table command line.

The command line has the form ``mtdparts=<device>:<part>,<part>,...`` where
each part is ``<size>@<address>(<name>)``. A size of ``-`` marks the partition
that grows up to the end of the device, its name may carry a ``:grow`` suffix.

Example::

    mtdparts=rk29xxnand:0x00002000@0x00004000(uboot),-@0x0123a000(userdisk:grow)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from rkcfg.cfg.error_codes import RKConvertParamErrorCode
from rkcfg.cfg.exceptions import RKConvertParamError
from rkcfg.utils.misc import to_uint32

logger = logging.getLogger(__name__)

MTDPARTS_PREFIX = "mtdparts="
GROW_SIZE = "-"
GROW_SUFFIX = ":grow"
# "0x" + 8 hex digits
MAX_ADDRESS_LEN = 10


@dataclass
class MtdPartition:
    """One partition of the mtdparts command line.

    The size is not stored in the configuration file, it is kept for completeness.
    """

    name: str
    address: int
    size: Optional[int] = None
    grow: bool = False


def _illegal_format(desc: str) -> RKConvertParamError:
    return RKConvertParamError(RKConvertParamErrorCode.ILLEGAL_MTD_PART_FORMAT, desc)


def parse_mtdpart(token: str) -> MtdPartition:
    """Parse single partition descriptor.

    :param token: Descriptor in form ``<size-or-dash>@<address>(<name>[:grow])``.
    :raises RKConvertParamError: The descriptor is malformed.
    :return: Parsed partition.
    """
    logger.debug(f"mtdpart: {token}")
    at_mark_pos = token.find("@")
    left_mark_pos = token.find("(")
    if at_mark_pos < 0 or left_mark_pos < 0 or at_mark_pos > left_mark_pos:
        raise _illegal_format(f"Misplaced '@' or '(' in '{token}'")
    right_mark_pos = token.find(")", left_mark_pos)
    if right_mark_pos < 0:
        raise _illegal_format(f"Missing ')' in '{token}'")

    name = token[left_mark_pos + 1 : right_mark_pos]
    size_str = token[:at_mark_pos]
    address_str = token[at_mark_pos + 1 : left_mark_pos][:MAX_ADDRESS_LEN]

    address = to_uint32(address_str)
    if address is None:
        raise _illegal_format(f"Invalid address '{address_str}' in '{token}'")

    size = None
    grow = size_str == GROW_SIZE
    if grow:
        # extend to maximum position
        name = name.removesuffix(GROW_SUFFIX)
    else:
        size = to_uint32(size_str)
        if size is None:
            raise _illegal_format(f"Invalid size '{size_str}' in '{token}'")

    return MtdPartition(name=name, address=address, size=size, grow=grow)


def parse_mtdparts(mtdparts: str) -> list[MtdPartition]:
    """Parse the whole mtdparts command line.

    :param mtdparts: Line starting with ``mtdparts=``.
    :raises RKConvertParamError: The device separator is missing or any part is malformed.
    :return: Partitions in the order of the command line.
    """
    colon_pos = mtdparts.find(":")
    if colon_pos < 0:
        raise _illegal_format(f"Missing device name separator ':' in '{mtdparts}'")
    tokens = mtdparts[colon_pos + 1 :].split(",")
    # a trailing comma does not start a new partition
    if tokens and not tokens[-1]:
        tokens.pop()
    return [parse_mtdpart(token) for token in tokens]


def find_mtdparts(lines: list[str], cmdline_prefix: str = "CMDLINE: ") -> Optional[str]:
    """Find the mtdparts command line in a boot log.

    The ``CMDLINE: `` prefix is stripped from a line before the line is tested.

    :param lines: Lines of the log.
    :param cmdline_prefix: Optional prefix of the kernel command line.
    :return: The first line starting with ``mtdparts=``, None if there is none.
    """
    for line in lines:
        line = line.rstrip("\r\n")
        line = line.removeprefix(cmdline_prefix)
        if line.startswith(MTDPARTS_PREFIX):
            logger.debug(f"mtdparts: {line}")
            return line
    return None
