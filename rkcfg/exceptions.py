#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""RKCfg exception classes.

This module defines the base exception of the library and a small set of
specializations mixing in the matching built-in exception types.
"""

from typing import Optional

#######################################################################
# # RKCfg Exceptions
#######################################################################


class RKCfgError(Exception):
    """RKCfg Base Exception.

    All library errors derive from this class, so callers can catch every
    failure of the toolkit with a single handler.

    :cvar fmt: Default error message format template.
    """

    fmt = "RKCfg: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base RKCfg Exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message as string.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class RKCfgKeyError(RKCfgError, KeyError):
    """RKCfg Key Error exception for missing or invalid keys."""


class RKCfgValueError(RKCfgError, ValueError):
    """RKCfg standard value error exception."""


class RKCfgLengthError(RKCfgError, ValueError):
    """RKCfg length error.

    Raised when a value does not fit into the fixed-width field it is written to.
    """


class RKCfgIndexError(RKCfgError, IndexError):
    """RKCfg standard index error exception."""


class RKCfgFileNotFoundError(FileNotFoundError, RKCfgError):
    """RKCfg file not found exception."""
