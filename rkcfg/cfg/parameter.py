#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Conversion of a parameter file (boot log) into configuration items.

The partition table is taken from the ``mtdparts=`` kernel command line. Two
default items, the loader and the parameter file itself, are placed in front
of the partitions. Optionally, image files lying next to the parameter file
are assigned to the partitions by the file name prefix.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from rkcfg.cfg.error_codes import RKConvertParamErrorCode
from rkcfg.cfg.exceptions import RKConvertParamError
from rkcfg.cfg.items import RKCfgItem
from rkcfg.cfg.mtdparts import find_mtdparts, parse_mtdparts
from rkcfg.exceptions import RKCfgLengthError

logger = logging.getLogger(__name__)

LOADER_NAME = "Loader"
LOADER_IMAGE = "MiniLoaderAll.bin"
PARAMETER_NAME = "parameter"
AB_SLOT_SUFFIXES = ("_a", "_b")


@dataclass
class AutoScanArgument:
    """Options of assigning image files to the partitions.

    :param enabled: Search for the image files next to the parameter file
    :param prefix: Text prepended to every assigned image path
    """

    enabled: bool = False
    prefix: str = ""


def _scan(base_dir: str, image_name: str) -> Optional[str]:
    try:
        file_names = sorted(os.listdir(base_dir))
    except OSError as exc:
        raise RKConvertParamError(RKConvertParamErrorCode.UNABLE_TO_OPEN_FILE, str(exc)) from exc
    for file_name in file_names:
        if file_name.startswith(image_name) and os.path.isfile(os.path.join(base_dir, file_name)):
            return file_name
    return None


def find_image_file(base_dir: str, name: str) -> Optional[str]:
    """Find image file of a partition in the directory.

    When nothing matches the name, the A/B slot suffix is dropped and the search
    is repeated, so ``boot_a`` and ``boot_b`` both pick up ``boot.img``.

    :param base_dir: Directory to search in, not recursive.
    :param name: Partition name, the file name must start with it.
    :raises RKConvertParamError: The directory can't be listed.
    :return: File name of the image, None if there is no match.
    """
    image_name = _scan(base_dir, name)
    if image_name is None:
        stripped = name
        for suffix in AB_SLOT_SUFFIXES:
            stripped = stripped.removesuffix(suffix)
        if stripped != name:
            image_name = _scan(base_dir, stripped)
    return image_name


def _set_image_path(item: RKCfgItem, image_path: str) -> None:
    try:
        item.image_path = image_path
    except RKCfgLengthError as exc:
        logger.warning(f"Image of {item.name} not assigned: {exc.description}")


def read_parameter(path: str) -> list[str]:
    """Read lines of the parameter file.

    :param path: Path to the parameter file.
    :raises RKConvertParamError: The file does not exist or can't be read.
    :return: Lines of the file.
    """
    if not os.path.exists(path):
        raise RKConvertParamError(RKConvertParamErrorCode.FILE_NOT_EXISTS, path)
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.readlines()
    except OSError as exc:
        raise RKConvertParamError(RKConvertParamErrorCode.UNABLE_TO_OPEN_FILE, str(exc)) from exc


def parameter_to_items(path: str, auto_scan: Optional[AutoScanArgument] = None) -> list[RKCfgItem]:
    """Build the configuration items from a parameter file.

    :param path: Path to the parameter file.
    :param auto_scan: Options of assigning image files, disabled by default.
    :raises RKConvertParamError: Unreadable file, missing or malformed mtdparts line.
    :return: Loader, parameter and one item per partition, in this order.
    """
    auto_scan = auto_scan or AutoScanArgument()
    mtdparts = find_mtdparts(read_parameter(path))
    if mtdparts is None:
        raise RKConvertParamError(RKConvertParamErrorCode.MTD_PARTS_NOT_FOUND, path)
    parts = parse_mtdparts(mtdparts)

    base_dir = os.path.dirname(path) or "."
    logger.debug(f"base_dir: {base_dir}")

    loader = RKCfgItem(name=LOADER_NAME, address=0, is_selected=True)
    if auto_scan.enabled and os.path.exists(os.path.join(base_dir, LOADER_IMAGE)):
        _set_image_path(loader, auto_scan.prefix + LOADER_IMAGE)
    parameter = RKCfgItem(name=PARAMETER_NAME, address=0, is_selected=True)
    if auto_scan.enabled:
        _set_image_path(parameter, auto_scan.prefix + path)
    items = [loader, parameter]

    for part in parts:
        try:
            item = RKCfgItem(name=part.name, address=part.address, is_selected=True)
        except RKCfgLengthError as exc:
            raise RKConvertParamError(
                RKConvertParamErrorCode.ILLEGAL_MTD_PART_FORMAT, exc.description
            ) from exc
        if auto_scan.enabled:
            image_name = find_image_file(base_dir, part.name)
            if image_name:
                logger.info(f"Selected {image_name} as the image file of {item.name}.")
                _set_image_path(item, auto_scan.prefix + image_name)
        items.append(item)
    return items
