#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""RKCfg enumeration with tag, label and description per member.

Used for the closed error-code taxonomies and the save modes, where every
member needs a stable numeric tag, a CLI-friendly label and a human-readable
description.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from typing_extensions import Self

from rkcfg.exceptions import RKCfgKeyError


@dataclass(frozen=True)
class RKEnumMember:
    """RKCfg Enum member representation."""

    tag: int
    label: str
    description: Optional[str] = None


class RKEnum(RKEnumMember, Enum):
    """RKCfg enhanced enumeration.

    Members compare equal to their tag and to their label, and can be looked up
    by the label.
    """

    def __eq__(self, __value: object) -> bool:
        """Check equality of enum value with another object.

        :param __value: Object to compare with this enum value.
        :return: True if the object equals tag or label, False otherwise.
        """
        return self.tag == __value or self.label == __value

    def __hash__(self) -> int:
        return hash((self.tag, self.label, self.description))

    @classmethod
    def labels(cls) -> list[str]:
        """Get list of labels of all enum members.

        :return: List of all labels.
        """
        return [value.label for value in cls.__members__.values()]

    @classmethod
    def from_label(cls, label: str) -> Self:
        """Get enum member with given label, case-insensitive.

        :param label: Label to be used for searching
        :raises RKCfgKeyError: If enum with given label is not found or label is not string
        :return: Found enum member
        """
        if not isinstance(label, str):
            raise RKCfgKeyError("Label must be string")
        for item in cls.__members__.values():
            if item.label.upper() == label.upper():
                return item
        raise RKCfgKeyError(f"There is no {cls.__name__} item with label {label} defined")
