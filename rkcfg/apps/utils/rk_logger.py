#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""RKCfg logging utilities with colored console output support."""

import logging
import logging.config
import logging.handlers
import os
import platform
import re
import sys
from datetime import datetime
from typing import Optional, TextIO

import colorama

from rkcfg import RKCFG_DEBUG, RKCFG_DEBUG_LOG_FILE, RKCFG_DEBUG_LOGGING_DISABLED, __version__
from rkcfg.exceptions import RKCfgError
from rkcfg.utils.misc import find_file, load_configuration

colorama.just_fix_windows_console()

logger = logging.getLogger(__name__)


def load_logging_config(search_paths: Optional[list[str]] = None) -> Optional[str]:
    """Apply ``logging.yaml`` dictionary configuration if there is one.

    :param search_paths: Directories to search, ``~/.rkcfg`` by default.
    :return: Path of the applied configuration, None if none was found.
    """
    search_paths = search_paths or [os.path.expanduser("~/.rkcfg")]
    config_file = find_file(
        "logging.yaml", use_cwd=False, search_paths=search_paths, raise_exc=False
    )
    if not config_file:
        return None
    try:
        logging.config.dictConfig(load_configuration(config_file))
    except (RKCfgError, ValueError, TypeError) as exc:
        logger.warning(f"Logging config {config_file} not applied: {exc}")
        return None
    return config_file


class ColoredFormatter(logging.Formatter):
    """RKCfg Colored Logging Formatter.

    :cvar COLORED_FORMATS: Color-coded format strings for each logging level.
    :cvar FORMATS: Plain text format strings for each logging level.
    """

    FORMAT = logging.BASIC_FORMAT
    FORMAT_DEBUG = FORMAT + " (%(relativeCreated)dms since start, %(filename)s:%(lineno)d)"

    COLORED_FORMATS = {
        logging.DEBUG: colorama.Fore.BLUE + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.INFO: colorama.Fore.WHITE
        + colorama.Style.BRIGHT
        + FORMAT
        + colorama.Fore.RESET
        + colorama.Style.RESET_ALL,
        logging.WARNING: colorama.Fore.YELLOW + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.ERROR: colorama.Fore.RED + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.CRITICAL: colorama.Fore.RED
        + colorama.Style.BRIGHT
        + FORMAT_DEBUG
        + colorama.Fore.RESET
        + colorama.Style.RESET_ALL,
    }
    FORMATS = {
        logging.DEBUG: FORMAT_DEBUG,
        logging.INFO: FORMAT,
        logging.WARNING: FORMAT_DEBUG,
        logging.ERROR: FORMAT_DEBUG,
        logging.CRITICAL: FORMAT_DEBUG,
    }

    def __init__(self, colored: bool = True) -> None:
        """Overloaded init method to add colored parameter."""
        super().__init__()

        self.colored = colored
        self.formats = self.COLORED_FORMATS if colored else self.FORMATS

    def format(self, record: logging.LogRecord) -> str:
        """Modified format method.

        :param record: Input logging record to print.
        :return: Formatted logging string.
        """
        fmt = self.formats.get(record.levelno)
        formatter = logging.Formatter(fmt)
        if not self.colored and isinstance(record.msg, str):
            record.msg = re.sub(r"\x1b\[\d{1,3}m", "", record.msg)
        return formatter.format(record)


def install(
    level: Optional[int] = None,
    stream: TextIO = sys.stderr,
    colored: Optional[bool] = None,
    logger: Optional[logging.Logger] = None,  # pylint: disable=redefined-outer-name
    create_debug_logger: bool = True,
) -> None:
    """Install RKCfg log handler for colored output.

    :param level: logging level, defaults to logging.WARNING (logging.DEBUG with RKCFG_DEBUG)
    :param stream: stream to output logging, defaults to sys.stderr
    :param colored: colored output, always colored if true
    :param logger: defaults to the ``rkcfg`` logger
    :param create_debug_logger: create rotating debug log file
    """
    load_logging_config()
    level = level or (logging.DEBUG if RKCFG_DEBUG else logging.WARNING)
    target_logger = logger or logging.getLogger("rkcfg")
    target_logger.setLevel(logging.DEBUG)

    color = True
    if "NO_COLOR" in os.environ:
        # For details see https://no-color.org/
        color = False
    if not hasattr(stream, "isatty") or not stream.isatty():
        color = False
    if colored is not None:
        color = colored

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(color))
    target_logger.addHandler(handler)
    target_logger.propagate = True

    if not create_debug_logger or RKCFG_DEBUG_LOGGING_DISABLED:
        return
    try:
        for h in target_logger.handlers:
            if (
                isinstance(h, logging.handlers.RotatingFileHandler)
                and h.baseFilename == RKCFG_DEBUG_LOG_FILE
            ):
                return
        os.makedirs(os.path.dirname(RKCFG_DEBUG_LOG_FILE), exist_ok=True)
        debug_handler = logging.handlers.RotatingFileHandler(
            RKCFG_DEBUG_LOG_FILE, mode="a", maxBytes=1_000_000, backupCount=5, encoding="utf-8"
        )
        debug_handler.setFormatter(ColoredFormatter(colored=False))
        debug_handler.setLevel(logging.DEBUG)
        target_logger.addHandler(debug_handler)

        starter = f"* RKCFG DEBUG LOGGING STARTED {datetime.now().strftime('%Y-%m-%d %H:%M:%S')} *"
        padding = len(starter) - 2
        target_logger.debug("*" * len(starter))
        target_logger.debug(starter)
        target_logger.debug(f"* RKCfg version: {__version__}".ljust(padding) + " *")
        target_logger.debug(f"* Python version: {sys.version.split()[0]}".ljust(padding) + " *")
        target_logger.debug(f"* OS version: {platform.platform()}".ljust(padding) + " *")
        target_logger.debug(f"* Last command: {sys.argv}".ljust(padding) + " *")
        target_logger.debug("*" * len(starter))
    except OSError as e:
        # the tool works without the debug log
        target_logger.warning(f"Failed to initialize debug logging: {str(e)}")
