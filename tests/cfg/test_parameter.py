#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Test of the conversion of a parameter file into configuration."""

import logging
import os
import shutil
from typing import Any

import pytest

from rkcfg.cfg.cfg_file import RKCfgFile
from rkcfg.cfg.error_codes import RKConvertParamErrorCode
from rkcfg.cfg.exceptions import RKConvertParamError
from rkcfg.cfg.parameter import AutoScanArgument, find_image_file, parameter_to_items

PARTITIONS = ["uboot", "trust", "misc", "boot_a", "boot_b", "userdata", "userdisk"]


def _write_parameter(directory: Any, text: str, name: str = "parameter.txt") -> str:
    path = os.path.join(directory, name)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path


def _touch(directory: Any, *names: str) -> None:
    for name in names:
        with open(os.path.join(directory, name), "wb") as f:
            f.write(b"\x00")


@pytest.fixture
def image_dir(tmpdir: Any, data_dir: str) -> str:
    """Directory with the parameter file and some partition images."""
    shutil.copy(os.path.join(data_dir, "parameter.txt"), tmpdir)
    _touch(tmpdir, "MiniLoaderAll.bin", "uboot.img", "boot.img", "userdata.img", "misc")
    os.mkdir(os.path.join(tmpdir, "trust"))
    return str(tmpdir)


def test_convert_cmdline(tmpdir: Any) -> None:
    """Loader and parameter precede the partitions."""
    path = _write_parameter(
        tmpdir,
        "FIRMWARE_VER: 8.1\n"
        "CMDLINE: mtdparts=rk29xxnand:0x00002000@0x00004000(uboot),-@0x0123a000(userdisk:grow)\n",
    )
    cfg = RKCfgFile.from_parameter(path)
    assert [item.name for item in cfg] == ["Loader", "parameter", "uboot", "userdisk"]
    assert [item.address for item in cfg] == [0, 0, 0x4000, 0x0123A000]
    assert all(item.is_selected for item in cfg)
    assert all(item.image_path == "" for item in cfg)
    assert cfg.header.item_count == 4


def test_convert_data_file(data_dir: str) -> None:
    """Test conversion of a complete parameter file."""
    items = parameter_to_items(os.path.join(data_dir, "parameter.txt"))
    assert [item.name for item in items] == ["Loader", "parameter"] + PARTITIONS
    assert items[-1].address == 0x0123A000


def test_convert_auto_scan(image_dir: str, caplog: Any) -> None:
    """Images lying next to the parameter file are assigned by the name prefix."""
    caplog.set_level(logging.INFO)
    path = os.path.join(image_dir, "parameter.txt")
    cfg = RKCfgFile.from_parameter(path, AutoScanArgument(enabled=True))
    images = {item.name: item.image_path for item in cfg}
    assert images == {
        "Loader": "MiniLoaderAll.bin",
        "parameter": path,
        "uboot": "uboot.img",
        # directories are skipped
        "trust": "",
        "misc": "misc",
        "boot_a": "boot.img",
        "boot_b": "boot.img",
        "userdata": "userdata.img",
        "userdisk": "",
    }
    assert "Selected uboot.img as the image file of uboot." in caplog.text


def test_convert_auto_scan_prefix(image_dir: str, monkeypatch: Any) -> None:
    """Prefix is prepended to every assigned image path."""
    monkeypatch.chdir(image_dir)
    os.remove("MiniLoaderAll.bin")
    items = parameter_to_items("parameter.txt", AutoScanArgument(enabled=True, prefix="Image/"))
    assert items[0].image_path == ""
    assert items[1].image_path == "Image/parameter.txt"
    assert items[2].image_path == "Image/uboot.img"


def test_convert_auto_scan_disabled(image_dir: str) -> None:
    """No image is assigned without the auto scan."""
    items = parameter_to_items(os.path.join(image_dir, "parameter.txt"), AutoScanArgument())
    assert all(not item.image_path for item in items)


def test_convert_auto_scan_path_overflow(image_dir: str, caplog: Any) -> None:
    """Too long image path is reported and the image is left empty."""
    items = parameter_to_items(
        os.path.join(image_dir, "parameter.txt"), AutoScanArgument(enabled=True, prefix="x" * 300)
    )
    assert all(not item.image_path for item in items)
    assert "not assigned" in caplog.text


def test_find_image_file(image_dir: str) -> None:
    """Test the A/B slot fallback of the image search."""
    _touch(image_dir, "boot_b.img")
    assert find_image_file(image_dir, "boot_b") == "boot_b.img"
    assert find_image_file(image_dir, "boot_a") == "boot.img"
    assert find_image_file(image_dir, "system_a") is None
    assert find_image_file(image_dir, "recovery") is None


def test_convert_auto_scan_unreadable_dir(image_dir: str, monkeypatch: Any) -> None:
    """Directory which can't be listed is reported as unable to open."""

    def listdir(path: str) -> list[str]:
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr("rkcfg.cfg.parameter.os.listdir", listdir)
    with pytest.raises(RKConvertParamError) as exc:
        parameter_to_items(os.path.join(image_dir, "parameter.txt"), AutoScanArgument(enabled=True))
    assert exc.value.code == RKConvertParamErrorCode.UNABLE_TO_OPEN_FILE
    assert "Permission denied" in str(exc.value)


def test_convert_not_existing(tmpdir: Any) -> None:
    """Test conversion of a missing file."""
    with pytest.raises(RKConvertParamError) as exc:
        parameter_to_items(os.path.join(tmpdir, "parameter.txt"))
    assert exc.value.code == RKConvertParamErrorCode.FILE_NOT_EXISTS


def test_convert_unable_to_open(tmpdir: Any) -> None:
    """Test conversion of a path which can't be read as a file."""
    with pytest.raises(RKConvertParamError) as exc:
        parameter_to_items(str(tmpdir))
    assert exc.value.code == RKConvertParamErrorCode.UNABLE_TO_OPEN_FILE


def test_convert_mtdparts_not_found(tmpdir: Any) -> None:
    """Test conversion of a log without the partition table."""
    path = _write_parameter(tmpdir, "FIRMWARE_VER: 8.1\nCMDLINE: console=ttyFIQ0\n")
    with pytest.raises(RKConvertParamError) as exc:
        RKCfgFile.from_parameter(path)
    assert exc.value.code == RKConvertParamErrorCode.MTD_PARTS_NOT_FOUND


@pytest.mark.parametrize(
    "cmdline",
    [
        "CMDLINE: mtdparts=0x2000@0x4000(uboot)",
        "CMDLINE: mtdparts=rk29xxnand:0x2000@0x4000(uboot),0x2000@0x6000(trust",
        "CMDLINE: mtdparts=rk29xxnand:0x2000@0x4000(" + "n" * 40 + ")",
    ],
)
def test_convert_illegal_format(tmpdir: Any, cmdline: str) -> None:
    """Malformed partition table and too long partition name are rejected."""
    path = _write_parameter(tmpdir, cmdline + "\n")
    with pytest.raises(RKConvertParamError) as exc:
        RKCfgFile.from_parameter(path)
    assert exc.value.code == RKConvertParamErrorCode.ILLEGAL_MTD_PART_FORMAT
