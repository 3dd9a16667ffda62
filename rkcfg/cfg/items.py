#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Fixed-layout records of the RKCfg binary file.

The file starts with a header followed by ``item_count`` item records of
``item_size`` bytes each, the first one at offset ``begin``. All integers are
little endian, records are packed.
"""

from struct import calcsize, pack, unpack_from

from typing_extensions import Self

from rkcfg.cfg.wide_string import CHAR16_SIZE, from_char16, to_char16
from rkcfg.exceptions import RKCfgLengthError, RKCfgValueError
from rkcfg.utils.abstract import BaseClass
from rkcfg.utils.misc import check_range

MAX_NAME_SIZE = 40
MAX_PATH_SIZE = 260
MAX_ITEM_COUNT = 0xFFFF


class RKCfgItem(BaseClass):
    """Partition entry of the configuration.

    Name and image path are kept as the raw UTF-16LE buffers, so a loaded item is
    written back byte by byte.
    """

    FORMAT = f"<BI{MAX_NAME_SIZE * CHAR16_SIZE}s{MAX_PATH_SIZE * CHAR16_SIZE}s"
    SIZE = calcsize(FORMAT)

    def __init__(
        self,
        name: str = "",
        address: int = 0,
        image_path: str = "",
        is_selected: bool = False,
    ) -> None:
        """Constructor.

        :param name: Partition name, at most ``MAX_NAME_SIZE - 1`` characters
        :param address: Flash address of the partition
        :param image_path: Path of the image flashed into the partition
        :param is_selected: The partition takes part in the flashing
        :raises RKCfgLengthError: Name or image path does not fit
        :raises RKCfgValueError: Address is not a 32-bit unsigned number
        """
        self._name = to_char16(name, MAX_NAME_SIZE)
        self._image_path = to_char16(image_path, MAX_PATH_SIZE)
        self.address = address
        self.is_selected = is_selected

    @property
    def address(self) -> int:
        """Flash address of the partition."""
        return self._address

    @address.setter
    def address(self, value: int) -> None:
        if not check_range(value):
            raise RKCfgValueError(f"Address {value:#x} is not a 32-bit unsigned value")
        self._address = value

    @property
    def name(self) -> str:
        """Partition name."""
        return from_char16(self._name, MAX_NAME_SIZE)

    @name.setter
    def name(self, value: str) -> None:
        self._name = to_char16(value, MAX_NAME_SIZE)

    @property
    def image_path(self) -> str:
        """Path of the image assigned to the partition."""
        return from_char16(self._image_path, MAX_PATH_SIZE)

    @image_path.setter
    def image_path(self, value: str) -> None:
        self._image_path = to_char16(value, MAX_PATH_SIZE)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.name!r}, {self.address:#x}, "
            f"{self.image_path!r}, {self.is_selected})"
        )

    def __str__(self) -> str:
        return (
            f"[{'x' if self.is_selected else ' '}] {self.address:#010x} "
            f"{self.name or '(empty)'} {self.image_path or '(empty)'}"
        )

    def export(self) -> bytes:
        """Binary representation of the item."""
        return pack(self.FORMAT, int(self.is_selected), self.address, self._name, self._image_path)

    @classmethod
    def parse(cls, data: bytes, offset: int = 0) -> Self:
        """Parse item record.

        :param data: Raw data as bytes or bytearray
        :param offset: Offset of the record in the data
        :raises RKCfgLengthError: Not enough data for the record
        :return: Parsed item
        """
        if len(data) < offset + cls.SIZE:
            raise RKCfgLengthError(
                f"Item at {offset:#x} needs {cls.SIZE} bytes, only {len(data) - offset} available"
            )
        is_selected, address, name, image_path = unpack_from(cls.FORMAT, data, offset)
        item = cls(address=address, is_selected=bool(is_selected))
        item._name = name
        item._image_path = image_path
        return item


class RKCfgHeader(BaseClass):
    """Header of the configuration file."""

    FORMAT = "<4s18sHHH10s"
    SIZE = calcsize(FORMAT)
    MAGIC = b"CFG\x00"

    def __init__(
        self,
        begin: int = SIZE,
        item_size: int = RKCfgItem.SIZE,
        item_count: int = 0,
        magic: bytes = MAGIC,
        reserved: bytes = bytes(18),
        padding: bytes = bytes(10),
    ) -> None:
        """Constructor.

        :param begin: Offset of the first item, size of the header by default
        :param item_size: Size of one item record
        :param item_count: Number of item records
        :param magic: File identification tag
        :param reserved: Reserved bytes following the magic
        :param padding: Reserved bytes at the end of the header
        """
        self.magic = magic
        self.reserved = reserved
        self.begin = begin
        self.item_size = item_size
        self.item_count = item_count
        self.padding = padding

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(begin={self.begin:#x}, item_size={self.item_size:#x}, "
            f"item_count={self.item_count})"
        )

    def __str__(self) -> str:
        return (
            f"{self.__class__.__name__} <BEGIN:{self.begin:#x}, ITEM_SIZE:{self.item_size:#x}, "
            f"ITEMS:{self.item_count}>"
        )

    @property
    def is_valid_magic(self) -> bool:
        """The magic tag identifies a RKCfg file."""
        return self.magic == self.MAGIC

    def export(self) -> bytes:
        """Binary representation of the header."""
        return pack(
            self.FORMAT,
            self.magic,
            self.reserved,
            self.begin,
            self.item_size,
            self.item_count,
            self.padding,
        )

    @classmethod
    def parse(cls, data: bytes) -> Self:
        """Parse header.

        :param data: Raw data as bytes or bytearray
        :raises RKCfgLengthError: Not enough data for the header
        :return: Parsed header
        """
        if len(data) < cls.SIZE:
            raise RKCfgLengthError(f"Header needs {cls.SIZE} bytes, only {len(data)} available")
        magic, reserved, begin, item_size, item_count, padding = unpack_from(cls.FORMAT, data)
        return cls(
            begin=begin,
            item_size=item_size,
            item_count=item_count,
            magic=magic,
            reserved=reserved,
            padding=padding,
        )
