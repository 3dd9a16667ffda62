#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""RKCfg configuration file.

The configuration is a header followed by an ordered list of partition items.
It can be loaded from the binary file, the JSON document or a parameter file
and saved as the binary file or the JSON document.
"""

import copy
import json
import logging
import os
from typing import Any, Iterator, Optional

import prettytable
from typing_extensions import Self

from rkcfg import RKCFG_JSON_INDENT
from rkcfg.cfg.error_codes import RKCfgLoadErrorCode, RKCfgSaveErrorCode
from rkcfg.cfg.exceptions import RKCfgLoadError, RKCfgSaveError
from rkcfg.cfg.filters import ItemFilterCollection
from rkcfg.cfg.items import MAX_ITEM_COUNT, RKCfgHeader, RKCfgItem
from rkcfg.cfg.parameter import AutoScanArgument, parameter_to_items
from rkcfg.cfg.schemas import SCH_RKCFG
from rkcfg.exceptions import RKCfgError, RKCfgIndexError, RKCfgLengthError
from rkcfg.utils.abstract import BaseClass
from rkcfg.utils.misc import find_first, load_binary, write_file
from rkcfg.utils.rk_enum import RKEnum
from rkcfg.utils.schema_validator import check_config

logger = logging.getLogger(__name__)


class SaveMode(RKEnum):
    """Output format of the configuration."""

    BINARY = (0, "cfg", "Binary RKCfg file")
    JSON = (1, "json", "JSON document")


class RKCfgFile(BaseClass):
    """RKCfg configuration.

    The item count in the header always equals the number of items.
    """

    def __init__(self) -> None:
        """Create empty configuration with the default header."""
        self._header = RKCfgHeader()
        self._items: list[RKCfgItem] = []

    @property
    def header(self) -> RKCfgHeader:
        """Configuration header."""
        return self._header

    @property
    def items(self) -> tuple[RKCfgItem, ...]:
        """Items in the partition order."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[RKCfgItem]:
        return iter(self._items)

    def __getitem__(self, index: int) -> RKCfgItem:
        return self._items[index]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._items)} items)"

    def __str__(self) -> str:
        return self.info()

    def find_item(self, name: str) -> Optional[RKCfgItem]:
        """Find the first item with given partition name.

        :param name: Partition name.
        :return: The item or None.
        """
        return find_first(self._items, lambda item: item.name == name)

    def add_item(self, item: RKCfgItem, auto_increase_length: bool = True) -> None:
        """Append item.

        :param item: Item to append.
        :param auto_increase_length: Increase the item count, disabled when the count
            is already known from a loaded header.
        :raises RKCfgLengthError: The configuration already holds the maximal count of items.
        """
        if auto_increase_length:
            self._check_item_count()
        self._items.append(item)
        if auto_increase_length:
            self._header.item_count += 1

    def insert_item(self, item: RKCfgItem, index: int, auto_increase_length: bool = True) -> None:
        """Insert item at the position.

        :param item: Item to insert.
        :param index: Position of the new item, at most the number of items.
        :param auto_increase_length: Increase the item count.
        :raises RKCfgLengthError: The configuration already holds the maximal count of items.
        :raises RKCfgIndexError: The position is out of range.
        """
        if not 0 <= index <= len(self._items):
            raise RKCfgIndexError(f"Can't insert item at {index}, there are {len(self)} items")
        if auto_increase_length:
            self._check_item_count()
        self._items.insert(index, item)
        if auto_increase_length:
            self._header.item_count += 1

    def remove_item(self, index: int) -> None:
        """Remove item at the position.

        :param index: Position of the item.
        :raises RKCfgIndexError: The position is out of range.
        """
        self._check_index(index)
        del self._items[index]
        self._header.item_count -= 1

    def remove_items(self, filters: ItemFilterCollection) -> None:
        """Remove all items matched by any of the filters.

        Filters are evaluated in order, the first match removes the item.

        :param filters: Filters called with the position and the item.
        """
        idx = 0
        while idx < len(self._items):
            if any(item_filter(idx, self._items[idx]) for item_filter in filters):
                del self._items[idx]
                self._header.item_count -= 1
                # the next item slid into this position
                continue
            idx += 1

    def update_item(self, index: int, item: RKCfgItem) -> None:
        """Replace item at the position.

        :param index: Position of the item.
        :param item: New item.
        :raises RKCfgIndexError: The position is out of range.
        """
        self._check_index(index)
        self._items[index] = item

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise RKCfgIndexError(f"Item index {index} out of range, there are {len(self)} items")

    def _check_item_count(self) -> None:
        if self._header.item_count >= MAX_ITEM_COUNT:
            raise RKCfgLengthError(f"Configuration can hold at most {MAX_ITEM_COUNT} items")

    # Binary file

    def export(self) -> bytes:
        """Binary representation of the configuration.

        Items follow the header directly, the begin offset is written as the header size.
        """
        header = copy.copy(self._header)
        header.begin = RKCfgHeader.SIZE
        return header.export() + b"".join(item.export() for item in self._items)

    @classmethod
    def parse(cls, data: bytes) -> Self:
        """Parse the binary configuration.

        :param data: Whole content of the binary file.
        :raises RKCfgLoadError: The data are not a valid configuration.
        :return: Parsed configuration.
        """
        if len(data) < RKCfgHeader.SIZE:
            raise RKCfgLoadError(
                RKCfgLoadErrorCode.IS_NOT_RKCFG_FILE, f"File shorter than {RKCfgHeader.SIZE} bytes"
            )
        result = cls()
        result._header = RKCfgHeader.parse(data)
        header = result._header
        if not header.is_valid_magic:
            raise RKCfgLoadError(RKCfgLoadErrorCode.IS_NOT_RKCFG_FILE, f"Magic {header.magic!r}")
        if header.item_size != RKCfgItem.SIZE:
            raise RKCfgLoadError(
                RKCfgLoadErrorCode.UNSUPPORTED_ITEM_SIZE,
                f"{header.item_size:#x}, expected {RKCfgItem.SIZE:#x}",
            )
        legal_size = RKCfgHeader.SIZE + header.item_size * header.item_count
        if len(data) != legal_size:
            logger.debug(f"file_size = {len(data):#x} (legal size = {legal_size:#x})")
            raise RKCfgLoadError(RKCfgLoadErrorCode.ABNORMAL_FILE_SIZE)
        for idx in range(header.item_count):
            offset = header.begin + idx * header.item_size
            if offset + header.item_size > len(data):
                logger.debug(f"Item {idx} at {offset:#x} exceeds the file")
                raise RKCfgLoadError(RKCfgLoadErrorCode.ABNORMAL_FILE_SIZE)
            result.add_item(RKCfgItem.parse(data, offset), auto_increase_length=False)
        return result

    @classmethod
    def from_file(cls, path: str) -> Self:
        """Load the binary configuration file.

        :param path: Path to the file.
        :raises RKCfgLoadError: The file does not exist, can't be read or is not valid.
        :return: Loaded configuration.
        """
        if not os.path.exists(path):
            raise RKCfgLoadError(RKCfgLoadErrorCode.FILE_NOT_EXISTS, path)
        try:
            file_size = os.path.getsize(path)
        except OSError as exc:
            raise RKCfgLoadError(RKCfgLoadErrorCode.UNABLE_TO_OPEN_FILE, str(exc)) from exc
        if file_size < RKCfgHeader.SIZE:
            raise RKCfgLoadError(
                RKCfgLoadErrorCode.IS_NOT_RKCFG_FILE, f"File shorter than {RKCfgHeader.SIZE} bytes"
            )
        try:
            data = load_binary(path)
        except OSError as exc:
            raise RKCfgLoadError(RKCfgLoadErrorCode.UNABLE_TO_OPEN_FILE, str(exc)) from exc
        return cls.parse(data)

    # Parameter file

    @classmethod
    def from_parameter(cls, path: str, auto_scan: Optional[AutoScanArgument] = None) -> Self:
        """Convert parameter file (boot log) into configuration.

        :param path: Path to the parameter file.
        :param auto_scan: Options of assigning image files to the partitions.
        :raises RKConvertParamError: Unreadable file, missing or malformed mtdparts line.
        :return: Configuration with the loader, the parameter and all partitions.
        """
        result = cls()
        for item in parameter_to_items(path, auto_scan):
            result.add_item(item)
        return result

    # JSON document

    def to_json(self) -> dict[str, Any]:
        """Get JSON representation of the configuration.

        :return: Dictionary ready for ``json.dump``.
        """
        return {
            "header": {"size": RKCfgHeader.SIZE, "item_size": self._header.item_size},
            "items": [
                {
                    "is_selected": bool(item.is_selected),
                    "address": item.address,
                    "name": item.name,
                    "image_path": item.image_path,
                }
                for item in self._items
            ],
        }

    @classmethod
    def from_json_data(cls, data: dict[str, Any]) -> Self:
        """Create configuration from the JSON representation.

        :param data: Parsed JSON document.
        :raises RKCfgLoadError: The document is not valid or does not fit the binary layout.
        :return: Configuration.
        """
        try:
            check_config(data, [SCH_RKCFG], check_unknown_props=True)
        except RKCfgError as exc:
            raise RKCfgLoadError(RKCfgLoadErrorCode.JSON_PARSE_ERROR, exc.description) from exc
        result = cls()
        if data["header"]["size"] != result._header.begin:
            raise RKCfgLoadError(
                RKCfgLoadErrorCode.UNSUPPORTED_HEADER_SIZE,
                f"{int(data['header']['size']):#x}, expected {result._header.begin:#x}",
            )
        if data["header"]["item_size"] != result._header.item_size:
            raise RKCfgLoadError(
                RKCfgLoadErrorCode.UNSUPPORTED_ITEM_SIZE,
                f"{int(data['header']['item_size']):#x}, expected {result._header.item_size:#x}",
            )
        for item_data in data["items"]:
            try:
                item = RKCfgItem(
                    name=item_data["name"],
                    address=int(item_data["address"]),
                    image_path=item_data["image_path"],
                    is_selected=item_data["is_selected"],
                )
            except RKCfgError as exc:
                raise RKCfgLoadError(RKCfgLoadErrorCode.JSON_PARSE_ERROR, exc.description) from exc
            result.add_item(item)
        return result

    @classmethod
    def from_json(cls, path: str) -> Self:
        """Load the JSON configuration file.

        :param path: Path to the file.
        :raises RKCfgLoadError: The file does not exist, can't be read or is not valid.
        :return: Loaded configuration.
        """
        if not os.path.exists(path):
            raise RKCfgLoadError(RKCfgLoadErrorCode.FILE_NOT_EXISTS, path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as exc:
            raise RKCfgLoadError(RKCfgLoadErrorCode.UNABLE_TO_OPEN_FILE, str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise RKCfgLoadError(RKCfgLoadErrorCode.JSON_PARSE_ERROR, str(exc)) from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise RKCfgLoadError(RKCfgLoadErrorCode.JSON_PARSE_ERROR, str(exc)) from exc
        return cls.from_json_data(data)

    # Saving

    def save(self, path: str, mode: SaveMode = SaveMode.BINARY) -> None:
        """Save the configuration.

        :param path: Path to the output file.
        :param mode: Output format.
        :raises RKCfgSaveError: The output file can't be written.
        """
        try:
            if mode == SaveMode.JSON:
                text = json.dumps(self.to_json(), indent=RKCFG_JSON_INDENT, ensure_ascii=False)
                write_file(text, path)
            else:
                write_file(self.export(), path, mode="wb")
        except OSError as exc:
            raise RKCfgSaveError(RKCfgSaveErrorCode.UNABLE_TO_OPEN_FILE, str(exc)) from exc
        logger.debug(f"Configuration saved as {mode.label} into {path}")

    # Diagnostics

    def info(self) -> str:
        """Get human readable description of the header and all items.

        :return: Multi line text.
        """
        table = prettytable.PrettyTable(["", "Address", "Name", "Path"])
        table.align = "l"
        table.border = False
        for item in self._items:
            table.add_row(
                [
                    "[x]" if item.is_selected else "[ ]",
                    f"{item.address:#010x}",
                    item.name or "(empty)",
                    item.image_path or "(empty)",
                ]
            )
        lines = [
            f"{'Header size:':<12} {self._header.begin:#x}",
            f"{'Item size:':<12} {self._header.item_size:#x}",
            f"Partitions({self._header.item_count}): ",
            table.get_string(),
        ]
        return "\n".join(lines)

    def print_debug_string(self) -> None:
        """Log the description of the configuration."""
        for line in self.info().splitlines():
            logger.info(line)
