#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Validation schema of the JSON representation of the configuration."""

from typing import Any

from rkcfg.utils.misc import UINT32_MAX

SCH_RKCFG_HEADER: dict[str, Any] = {
    "type": "object",
    "title": "RKCfg header",
    "description": "Layout constants of the binary file the document was created for.",
    "required": ["size", "item_size"],
    "properties": {
        "size": {
            "type": "integer",
            "description": "Size of the header, offset of the first item",
            "minimum": 0,
        },
        "item_size": {
            "type": "integer",
            "description": "Size of one item record",
            "minimum": 0,
        },
    },
}

SCH_RKCFG_ITEM: dict[str, Any] = {
    "type": "object",
    "title": "RKCfg item",
    "required": ["is_selected", "address", "name", "image_path"],
    "properties": {
        "is_selected": {
            "type": "boolean",
            "description": "The partition takes part in the flashing",
        },
        "address": {
            "type": "integer",
            "description": "Flash address of the partition",
            "minimum": 0,
            "maximum": UINT32_MAX,
        },
        "name": {"type": "string", "description": "Partition name"},
        "image_path": {"type": "string", "description": "Path of the image of the partition"},
    },
}

SCH_RKCFG: dict[str, Any] = {
    "type": "object",
    "title": "RKCfg configuration",
    "required": ["header", "items"],
    "properties": {
        "header": SCH_RKCFG_HEADER,
        "items": {"type": "array", "items": SCH_RKCFG_ITEM},
    },
}
