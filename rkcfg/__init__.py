#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""RKCfg - Rockchip flashing configuration toolkit.

Read, build and write the fixed-layout flashing configuration (``.cfg``) that
describes the partition table of a device and the image assigned to each
partition. Configurations can be loaded from the binary file, from a boot log
with a kernel ``mtdparts=`` command line, or from a JSON document.
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs


def get_rkcfg_version() -> Version:
    """Get RKCfg version information.

    :return: Parsed version object.
    """
    from .__version__ import __version__ as rkcfg_version

    return parse(rkcfg_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_rkcfg_version()

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)

RKCFG_VERSION_BASE = version.base_version

RKCFG_PLATFORM_DIRS = PlatformDirs(
    appauthor="rkcfg",
    appname="rkcfg",
    version=RKCFG_VERSION_BASE,
    ensure_exists=False,
)

RKCFG_DEBUG = value_to_bool(os.environ.get("RKCFG_DEBUG"))

RKCFG_DEBUG_LOGGING_DISABLED = value_to_bool(os.environ.get("RKCFG_DEBUG_LOGGING_DISABLED"))
RKCFG_DEBUG_LOG_FILE = os.environ.get(
    "RKCFG_DEBUG_LOG_FILE", os.path.join(RKCFG_PLATFORM_DIRS.user_log_dir, "debug.log")
)
# Unknown properties in JSON configurations raise instead of warning
RKCFG_SCHEMA_STRICT = value_to_bool(os.environ.get("RKCFG_SCHEMA_STRICT"))

RKCFG_JSON_INDENT = 4
