#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Error codes reported by the RKCfg loaders, the parameter converter and the saver."""

from rkcfg.utils.rk_enum import RKEnum

########################################################################################################################
# RKCfg Error Codes
########################################################################################################################

# pylint: disable=line-too-long
# fmt: off
class RKCfgLoadErrorCode(RKEnum):
    """Failures of loading a configuration from the binary or the JSON file."""

    FILE_NOT_EXISTS         = (1, "FileNotExists", "The configuration file does not exist")
    UNABLE_TO_OPEN_FILE     = (2, "UnableToOpenFile", "Unable to open the configuration file")
    IS_NOT_RKCFG_FILE       = (3, "IsNotRKCfgFile", "The file is not a RKCfg configuration file")
    UNSUPPORTED_ITEM_SIZE   = (4, "UnsupportedItemSize", "Unsupported item size")
    ABNORMAL_FILE_SIZE      = (5, "AbnormalFileSize", "Abnormal file size")
    UNSUPPORTED_HEADER_SIZE = (6, "UnsupportedHeaderSize", "Unsupported header size")
    JSON_PARSE_ERROR        = (7, "JsonParseError", "Unable to parse the JSON configuration")


class RKConvertParamErrorCode(RKEnum):
    """Failures of converting a boot log (parameter file) into a configuration."""

    FILE_NOT_EXISTS         = (1, "FileNotExists", "The parameter file does not exist")
    UNABLE_TO_OPEN_FILE     = (2, "UnableToOpenFile", "Unable to open the parameter file")
    MTD_PARTS_NOT_FOUND     = (3, "MtdPartsNotFound", "No mtdparts command line found")
    ILLEGAL_MTD_PART_FORMAT = (4, "IllegalMtdPartFormat", "Illegal mtdparts format")


class RKCfgSaveErrorCode(RKEnum):
    """Failures of saving a configuration."""

    UNABLE_TO_OPEN_FILE     = (1, "UnableToOpenFile", "Unable to open the output file")
# fmt: on
