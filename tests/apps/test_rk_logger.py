#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Test of the RKCfg logging setup."""

import io
import logging
import os
from typing import Any

import colorama

from rkcfg.apps.utils import rk_logger


def test_install_plain() -> None:
    """Messages below the level are filtered, plain output has no colors."""
    stream = io.StringIO()
    test_logger = logging.getLogger("rkcfg.test_install_plain")
    rk_logger.install(level=logging.INFO, stream=stream, logger=test_logger)
    test_logger.debug("hidden message")
    test_logger.info(colorama.Fore.GREEN + "visible message" + colorama.Fore.RESET)
    output = stream.getvalue()
    assert "hidden message" not in output
    assert "INFO:rkcfg.test_install_plain:visible message" in output
    assert "\x1b[" not in output


def test_install_colored() -> None:
    """Colored output wraps the record into color codes."""
    stream = io.StringIO()
    test_logger = logging.getLogger("rkcfg.test_install_colored")
    rk_logger.install(level=logging.WARNING, stream=stream, colored=True, logger=test_logger)
    test_logger.warning("colored warning")
    output = stream.getvalue()
    assert colorama.Fore.YELLOW in output
    assert "colored warning" in output


def test_load_logging_config(tmpdir: Any) -> None:
    """Logging configuration from the search path is applied."""
    with open(os.path.join(tmpdir, "logging.yaml"), "w", encoding="utf-8") as f:
        f.write(
            "version: 1\n"
            "disable_existing_loggers: false\n"
            "loggers:\n"
            "  rkcfg.test_logging_config:\n"
            "    level: ERROR\n"
        )
    path = rk_logger.load_logging_config([str(tmpdir)])
    assert path and path.endswith("logging.yaml")
    assert logging.getLogger("rkcfg.test_logging_config").level == logging.ERROR


def test_load_logging_config_invalid(tmpdir: Any, caplog: Any) -> None:
    """Broken configuration is reported and ignored."""
    with open(os.path.join(tmpdir, "logging.yaml"), "w", encoding="utf-8") as f:
        f.write("version: 7\n")
    assert rk_logger.load_logging_config([str(tmpdir)]) is None
    assert "not applied" in caplog.text
    assert rk_logger.load_logging_config([os.path.join(tmpdir, "empty")]) is None
