#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""RKCfg JSON schema validation of configuration documents."""

import copy
import logging
import re
from typing import Any

import fastjsonschema
from deepmerge import always_merger

from rkcfg import RKCFG_SCHEMA_STRICT
from rkcfg.exceptions import RKCfgError

logger = logging.getLogger(__name__)


def _print_validation_fail_reason(exc: fastjsonschema.JsonSchemaValueException) -> str:
    """Format JSON schema validation failure into human-readable error message.

    :param exc: The JSON schema validation exception to process.
    :return: Formatted error message explaining the validation failure reason.
    """
    message = str(exc)
    if exc.rule == "required" and isinstance(exc.value, dict):
        missing = filter(lambda x: x not in exc.value.keys(), exc.rule_definition)
        message += f"; Missing field(s): {', '.join(missing)}"
    return message


def check_unknown_properties(config_dict: dict, schema_dict: dict, path: str = "") -> None:
    """Recursively check for unknown properties in configuration against schema.

    :param config_dict: Configuration dictionary to validate
    :param schema_dict: JSON schema dictionary defining allowed properties
    :param path: Current path in the configuration for error reporting
    :raises RKCfgError: When unknown property is found and strict mode is enabled
    """
    if "properties" not in schema_dict and "patternProperties" not in schema_dict:
        return

    schema_props = set(schema_dict.get("properties", {}).keys())
    pattern_props = schema_dict.get("patternProperties", {})

    for key, value in config_dict.items():
        current_path = f"{path}.{key}" if path else key

        if key in schema_props:
            sub_schema = schema_dict["properties"].get(key, {})
            if isinstance(value, dict) and isinstance(sub_schema, dict):
                check_unknown_properties(value, sub_schema, current_path)
            elif isinstance(value, list) and "items" in sub_schema:
                for i, item in enumerate(value):
                    if isinstance(item, dict):
                        check_unknown_properties(item, sub_schema["items"], f"{current_path}[{i}]")
            continue

        if not any(re.match(pattern, key) for pattern in pattern_props):
            error_msg = f"Unknown property found in configuration: '{current_path}'"
            if RKCFG_SCHEMA_STRICT:
                raise RKCfgError(error_msg)
            logger.warning(error_msg)


def check_config(
    config: dict[str, Any],
    schemas: list[dict[str, Any]],
    check_unknown_props: bool = False,
) -> None:
    """Check the configuration by provided list of validation schemas.

    The schemas are merged together before the validation.

    :param config: Configuration dictionary to validate.
    :param schemas: List of JSON schema dictionaries for validation.
    :param check_unknown_props: Whether to check and warn about unknown properties in config.
    :raises RKCfgError: Invalid validation schema or configuration validation failed.
    """
    config_to_check = copy.deepcopy(config)

    schema: dict[str, Any] = {}
    for sch in schemas:
        always_merger.merge(schema, copy.deepcopy(sch))
    if check_unknown_props and "properties" in schema and isinstance(config_to_check, dict):
        check_unknown_properties(config_to_check, schema)

    try:
        validator = fastjsonschema.compile(schema)
    except (TypeError, fastjsonschema.JsonSchemaDefinitionException) as exc:
        raise RKCfgError(f"Invalid validation schema to check config: {str(exc)}") from exc
    try:
        validator(config_to_check)
    except fastjsonschema.JsonSchemaValueException as exc:
        message = _print_validation_fail_reason(exc)
        raise RKCfgError(f"Configuration validation failed: {message}") from exc
