#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Test of the JSON schema validation."""

from typing import Any

import pytest

from rkcfg.cfg.schemas import SCH_RKCFG, SCH_RKCFG_ITEM
from rkcfg.exceptions import RKCfgError
from rkcfg.utils import schema_validator
from rkcfg.utils.schema_validator import check_config

VALID_ITEM = {"is_selected": True, "address": 0x4000, "name": "uboot", "image_path": ""}


def test_check_config_valid() -> None:
    """Test validation of a valid document."""
    check_config({"header": {"size": 0x26, "item_size": 0x25D}, "items": [VALID_ITEM]}, [SCH_RKCFG])


def test_check_config_missing_field() -> None:
    """Missing fields are listed in the message."""
    with pytest.raises(RKCfgError) as exc:
        check_config({"is_selected": True, "address": 0}, [SCH_RKCFG_ITEM])
    assert "Missing field(s): name, image_path" in str(exc.value)


def test_check_config_merged_schemas() -> None:
    """Schemas are merged before the validation."""
    schema = {"properties": {"name": {"maxLength": 3}}}
    with pytest.raises(RKCfgError):
        check_config(VALID_ITEM, [SCH_RKCFG_ITEM, schema])
    assert "maxLength" not in SCH_RKCFG_ITEM["properties"]["name"]


def test_check_config_invalid_schema() -> None:
    """Broken schema is reported as RKCfg error."""
    with pytest.raises(RKCfgError):
        check_config({}, [{"type": "no-such-type"}])


def test_unknown_properties(caplog: Any, monkeypatch: Any) -> None:
    """Unknown properties warn, in the strict mode they fail."""
    item = dict(VALID_ITEM, color="red")
    check_config(item, [SCH_RKCFG_ITEM], check_unknown_props=True)
    assert "Unknown property found in configuration: 'color'" in caplog.text

    monkeypatch.setattr(schema_validator, "RKCFG_SCHEMA_STRICT", True)
    with pytest.raises(RKCfgError):
        check_config(item, [SCH_RKCFG_ITEM], check_unknown_props=True)


def test_unknown_nested_properties(caplog: Any) -> None:
    """Nested objects inside arrays are checked too."""
    doc = {
        "header": {"size": 0x26, "item_size": 0x25D},
        "items": [VALID_ITEM, dict(VALID_ITEM, extra=1)],
    }
    check_config(doc, [SCH_RKCFG], check_unknown_props=True)
    assert "items[1].extra" in caplog.text
