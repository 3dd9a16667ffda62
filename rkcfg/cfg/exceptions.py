#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""RKCfg configuration exceptions.

Each entry operation reports its failures with its own exception class, the
kind of the failure is carried in the ``code`` attribute.
"""

from typing import Optional

from rkcfg.cfg.error_codes import RKCfgLoadErrorCode, RKCfgSaveErrorCode, RKConvertParamErrorCode
from rkcfg.exceptions import RKCfgError
from rkcfg.utils.rk_enum import RKEnum


class RKCfgCodedError(RKCfgError):
    """Base of the configuration errors with an error code.

    :cvar fmt: Format string template for error message display.
    """

    fmt = "RKCfg: {description}"

    def __init__(self, code: RKEnum, desc: Optional[str] = None) -> None:
        """Initialize the coded error.

        :param code: Kind of the failure.
        :param desc: Optional detail appended to the code description.
        """
        super().__init__(code.description if not desc else f"{code.description}: {desc}")
        self.code = code


class RKCfgLoadError(RKCfgCodedError):
    """Loading of a binary or JSON configuration failed."""

    fmt = "RKCfg load: {description}"

    def __init__(self, code: RKCfgLoadErrorCode, desc: Optional[str] = None) -> None:
        """Initialize the load error.

        :param code: Kind of the failure.
        :param desc: Optional detail of the failure.
        """
        super().__init__(code, desc)


class RKConvertParamError(RKCfgCodedError):
    """Conversion of a parameter file failed."""

    fmt = "RKCfg convert: {description}"

    def __init__(self, code: RKConvertParamErrorCode, desc: Optional[str] = None) -> None:
        """Initialize the conversion error.

        :param code: Kind of the failure.
        :param desc: Optional detail of the failure.
        """
        super().__init__(code, desc)


class RKCfgSaveError(RKCfgCodedError):
    """Saving of a configuration failed."""

    fmt = "RKCfg save: {description}"

    def __init__(self, code: RKCfgSaveErrorCode, desc: Optional[str] = None) -> None:
        """Initialize the save error.

        :param code: Kind of the failure.
        :param desc: Optional detail of the failure.
        """
        super().__init__(code, desc)
