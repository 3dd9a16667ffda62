#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""RKCfg configuration tool."""

import logging
import os
import sys
from typing import Optional

import click

from rkcfg.apps.utils import rk_logger
from rkcfg.apps.utils.common_cli_options import (
    CommandsTreeGroup,
    rkcfg_apps_common_options,
    rkcfg_input_option,
    rkcfg_output_option,
)
from rkcfg.apps.utils.utils import INT, RKCfgAppError, catch_rkcfg_error
from rkcfg.cfg.cfg_file import RKCfgFile, SaveMode
from rkcfg.cfg.filters import (
    ItemFilter,
    empty_image_filter,
    instance_filter,
    name_filter,
    unselected_filter,
)
from rkcfg.cfg.items import RKCfgItem
from rkcfg.cfg.parameter import AutoScanArgument

logger = logging.getLogger(__name__)


def detect_format(path: str, input_format: str = "auto") -> str:
    """Decide the format of the input file.

    :param path: Path to the input file.
    :param input_format: Format requested by the user, 'auto' decides by the file name.
    :return: One of 'cfg', 'json' or 'parameter'.
    """
    if input_format != "auto":
        return input_format
    file_name = os.path.basename(path).lower()
    if file_name.endswith(".json"):
        return "json"
    if file_name.endswith(".txt") or file_name.startswith("parameter"):
        return "parameter"
    return "cfg"


def load_cfg(
    path: str, input_format: str = "auto", auto_scan: Optional[AutoScanArgument] = None
) -> RKCfgFile:
    """Load configuration from any supported input.

    :param path: Path to the input file.
    :param input_format: Format of the input file.
    :param auto_scan: Image auto assignment used for parameter files.
    :return: Loaded configuration.
    """
    file_format = detect_format(path, input_format)
    logger.debug(f"Loading {path} as {file_format}")
    if file_format == "json":
        return RKCfgFile.from_json(path)
    if file_format == "parameter":
        return RKCfgFile.from_parameter(path, auto_scan)
    return RKCfgFile.from_file(path)


def _save_as_input(cfg: RKCfgFile, output: str, input_file: str, input_format: str) -> None:
    mode = SaveMode.JSON if detect_format(input_file, input_format) == "json" else SaveMode.BINARY
    cfg.save(output, mode)
    click.echo(f"Configuration with {len(cfg)} items saved into {output}")


@click.group(name="rkcfgtool", cls=CommandsTreeGroup)
@rkcfg_apps_common_options
def main(log_level: int) -> None:
    """RKCfg tool.

    Inspect, convert and edit Rockchip flashing configuration files.
    """
    rk_logger.install(level=log_level)


@main.command(name="info", no_args_is_help=True)
@rkcfg_input_option
def info(input_file: str, input_format: str) -> None:
    """Print the header and all items of a configuration."""
    cfg = load_cfg(input_file, input_format)
    click.echo(cfg.info())


@main.command(name="convert", no_args_is_help=True)
@rkcfg_input_option
@rkcfg_output_option(force=True)
@click.option(
    "-F",
    "--output-format",
    type=click.Choice(SaveMode.labels(), case_sensitive=False),
    default=SaveMode.BINARY.label,
    show_default=True,
    help="Format of the output file.",
)
@click.option(
    "--auto-scan/--no-auto-scan",
    default=False,
    help="Assign image files lying next to the parameter file to the partitions.",
)
@click.option("--prefix", default="", help="Prefix of the image paths assigned by auto scan.")
def convert(
    input_file: str,
    input_format: str,
    output: str,
    output_format: str,
    auto_scan: bool,
    prefix: str,
) -> None:
    """Convert a configuration, JSON document or parameter file."""
    cfg = load_cfg(input_file, input_format, AutoScanArgument(enabled=auto_scan, prefix=prefix))
    cfg.save(output, SaveMode.from_label(output_format))
    click.echo(f"Configuration with {len(cfg)} items saved into {output}")


@main.command(name="remove", no_args_is_help=True)
@rkcfg_input_option
@rkcfg_output_option(force=True)
@click.option("--name", "names", multiple=True, help="Remove items with this partition name.")
@click.option("--index", "indexes", type=INT(), multiple=True, help="Remove item at this position.")
@click.option("--unselected", is_flag=True, default=False, help="Remove unselected items.")
@click.option("--empty-image", is_flag=True, default=False, help="Remove items with no image.")
def remove(
    input_file: str,
    input_format: str,
    output: str,
    names: tuple[str, ...],
    indexes: tuple[int, ...],
    unselected: bool,
    empty_image: bool,
) -> None:
    """Remove items from a configuration."""
    cfg = load_cfg(input_file, input_format)
    filters: list[ItemFilter] = []
    if indexes:
        for index in indexes:
            if not 0 <= index < len(cfg):
                raise RKCfgAppError(f"Item index {index} out of range, there are {len(cfg)} items")
        filters.append(instance_filter(*(cfg[index] for index in indexes)))
    if names:
        filters.append(name_filter(*names))
    if unselected:
        filters.append(unselected_filter())
    if empty_image:
        filters.append(empty_image_filter())
    if not filters:
        raise RKCfgAppError("No filter specified, nothing to remove")
    cfg.remove_items(filters)
    _save_as_input(cfg, output, input_file, input_format)


@main.command(name="update", no_args_is_help=True)
@rkcfg_input_option
@rkcfg_output_option(force=True)
@click.option("--index", type=INT(), required=True, help="Position of the item to update.")
@click.option("--name", help="New partition name.")
@click.option("--address", type=INT(), help="New flash address.")
@click.option("--image-path", help="New image path.")
@click.option("--select/--deselect", "is_selected", default=None, help="Select the partition.")
def update(
    input_file: str,
    input_format: str,
    output: str,
    index: int,
    name: Optional[str],
    address: Optional[int],
    image_path: Optional[str],
    is_selected: Optional[bool],
) -> None:
    """Update one item of a configuration."""
    cfg = load_cfg(input_file, input_format)
    if not 0 <= index < len(cfg):
        raise RKCfgAppError(f"Item index {index} out of range, there are {len(cfg)} items")
    current = cfg[index]
    item = RKCfgItem(
        name=current.name if name is None else name,
        address=current.address if address is None else address,
        image_path=current.image_path if image_path is None else image_path,
        is_selected=current.is_selected if is_selected is None else is_selected,
    )
    cfg.update_item(index, item)
    _save_as_input(cfg, output, input_file, input_format)


@catch_rkcfg_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
