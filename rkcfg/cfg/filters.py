#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Item filters used to remove items from a configuration.

A filter is any callable taking the position and the item and returning True
when the item shall be removed.
"""

from typing import Callable, Sequence

from rkcfg.cfg.items import RKCfgItem

ItemFilter = Callable[[int, RKCfgItem], bool]
ItemFilterCollection = Sequence[ItemFilter]


def name_filter(*names: str) -> ItemFilter:
    """Match items by partition name.

    :param names: Names of the items to match.
    :return: Item filter.
    """
    return lambda _index, item: item.name in names


def instance_filter(*items: RKCfgItem) -> ItemFilter:
    """Match the given item objects.

    Positions shift while items are being removed, select items by position
    before the removal and pass the objects here.

    :param items: Items to match.
    :return: Item filter.
    """
    return lambda _index, item: any(item is target for target in items)


def unselected_filter() -> ItemFilter:
    """Match items that are not selected for flashing."""
    return lambda _index, item: not item.is_selected


def empty_image_filter() -> ItemFilter:
    """Match items with no image assigned."""
    return lambda _index, item: not item.image_path
