#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""RKCfg flashing configuration: records, parsers and serializers."""

from rkcfg.cfg.cfg_file import RKCfgFile, SaveMode
from rkcfg.cfg.error_codes import RKCfgLoadErrorCode, RKCfgSaveErrorCode, RKConvertParamErrorCode
from rkcfg.cfg.exceptions import RKCfgLoadError, RKCfgSaveError, RKConvertParamError
from rkcfg.cfg.items import RKCfgHeader, RKCfgItem
from rkcfg.cfg.parameter import AutoScanArgument

__all__ = [
    "AutoScanArgument",
    "RKCfgFile",
    "RKCfgHeader",
    "RKCfgItem",
    "RKCfgLoadError",
    "RKCfgLoadErrorCode",
    "RKCfgSaveError",
    "RKCfgSaveErrorCode",
    "RKConvertParamError",
    "RKConvertParamErrorCode",
    "SaveMode",
]
