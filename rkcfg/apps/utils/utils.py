#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""RKCfg application utilities: error handling and click parameter types."""

import logging
import sys
from functools import wraps
from typing import Any, Callable, Optional

import click

from rkcfg import RKCFG_DEBUG_LOG_FILE, RKCFG_DEBUG_LOGGING_DISABLED
from rkcfg.exceptions import RKCfgError

logger = logging.getLogger(__name__)


class RKCfgAppError(RKCfgError):
    """RKCfg application error for the command line tool.

    :cvar fmt: Format string template for error message display.
    """

    fmt = "{description}"

    def __init__(self, desc: Optional[str] = None, error_code: int = 1) -> None:
        """Initialize the AppError.

        :param desc: Description to print out on command line, defaults to None
        :param error_code: Error code passed to OS, defaults to 1
        """
        super().__init__(desc)
        self.description = desc
        self.error_code = error_code


class INT(click.ParamType):
    """Click parameter type accepting integers with 0b, 0o and 0x prefixes.

    :cvar name: Parameter type name used by Click framework.
    """

    name = "integer"

    def __init__(self, base: int = 0) -> None:
        """Initialize custom INT param class.

        :param base: requested base for the number, defaults to 0
        """
        super().__init__()
        self.base = base

    # pylint: disable=inconsistent-return-statements
    def convert(
        self,
        value: Any,
        param: Optional[click.Parameter] = None,
        ctx: Optional[click.Context] = None,
    ) -> int:
        """Perform the conversion str -> int.

        :param value: value to convert
        :param param: Click parameter, defaults to None
        :param ctx: Click context, defaults to None
        :return: value as integer
        """
        if isinstance(value, int):
            return value
        try:
            return int(value, self.base)
        except TypeError:
            self.fail(
                "expected string for int() conversion, got "
                f"{value!r} of type {type(value).__name__}",
                param,
                ctx,
            )
        except ValueError:
            self.fail(f"{value!r} is not a valid integer", param, ctx)


def catch_rkcfg_error(function: Callable) -> Callable:
    """Catch and handle RKCfgError and other exceptions.

    RKCfgAppError exits with its error code, RKCfgError and AssertionError with 2,
    any other exception with 3.

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            retval = function(*args, **kwargs)
            return retval
        except RKCfgAppError as app_exc:
            if app_exc.description:
                click.echo(f"{app_exc.__class__.__name__}: {app_exc}", err=True)
            if 0 < app_exc.error_code < 256:
                sys.exit(app_exc.error_code)
            sys.exit(1)
        except (AssertionError, RKCfgError) as rk_exc:
            click.echo(f"{rk_exc.__class__.__name__}: {rk_exc}", err=True)
            logger.debug(str(rk_exc), exc_info=True)
            if not RKCFG_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {RKCFG_DEBUG_LOG_FILE} for more info", fg="yellow"
                )
            sys.exit(2)
        except (Exception, KeyboardInterrupt) as base_exc:  # pylint: disable=broad-except
            click.echo(f"GENERAL ERROR: {type(base_exc).__name__}: {base_exc}", err=True)
            logger.debug(str(base_exc), exc_info=True)
            if not RKCFG_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {RKCFG_DEBUG_LOG_FILE} for more info.", fg="yellow"
                )
            sys.exit(3)

    return wrapper
