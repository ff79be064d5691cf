#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ******************************************************************************
# Project: HEIF Info Toolkit (heifinfo)
# Author: Eric Robeck <robeckgeo@gmail.com>
#
# Copyright (c) 2025, Eric Robeck
# Licensed under the MIT License
# ******************************************************************************

"""
Command-line interface for the HEIF Info Toolkit.

This script provides the main entry point for the `heifinfo` command,
parsing user arguments and dispatching them to the appropriate tool.
"""
import argparse
import logging
import sys
from importlib import metadata
from pathlib import Path
from heifinfo.utils.config_loader import config
from heifinfo.utils.log_helpers import parse_log_level, setup_logger
from heifinfo.utils.script_arguments import InfoArguments

try:
    __version__ = metadata.version("heifinfo")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0-dev"

def non_negative_int(value: str) -> int:
    """Validate that the value is an integer of zero or more."""
    try:
        ivalue = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a non-negative integer, got '{value}'")
    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"Expected a non-negative integer, got '{ivalue}'")
    return ivalue

def get_version_string() -> str:
    """Version banner for heifinfo and the decode library it runs on."""
    from heifinfo.utils.pillow_heif_gateway import get_library_versions
    versions = get_library_versions()
    return f"heifinfo v{__version__} pillow_heif v{versions['pillow_heif']} libheif v{versions['libheif']}"

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='heifinfo',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--version', action='store_true', dest='show_version', help='Print version information and exit.')
    subparsers = parser.add_subparsers(dest='tool', help='Available tools')

    # --- HEIF Info Tool ---
    info_parser = subparsers.add_parser(
        'info',
        help='Report the structure of a HEIF file or of every HEIF file in a directory.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    info_parser.add_argument('-i', '--input', required=True, type=Path, dest='input_path', help='Path to the input HEIF file or directory.')
    info_parser.add_argument('-o', '--output', type=Path, dest='output_path', help='Write the report to this file instead of stdout.')
    info_parser.add_argument('--indent', type=non_negative_int, dest='indent', help='Spaces per nesting level (default from config.toml).')
    info_parser.add_argument('-s', '--sections', type=str, nargs='*', dest='sections', help='Specific per-image sections to include in the report.')
    info_parser.add_argument('--log-file', type=Path, dest='log_file', help='Path to a log file for debugging.')
    info_parser.add_argument('-v', '--verbose', action='store_true', dest='verbose', help='Enable verbose logging.')
    return parser

def main(argv=None):
    """
    Main function to parse arguments and call the appropriate tool.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.show_version:
        print(get_version_string())
        return
    if not args.tool:
        parser.error('a tool is required')

    tool = args.tool
    args_dict = vars(args)
    args_dict.pop('tool', None)
    args_dict.pop('show_version', None)

    # --- Logger Setup ---
    if args.verbose:
        log_level = logging.DEBUG
    else:
        log_level = parse_log_level(config.get('logging.level', 'INFO'))
    log_file = args.log_file or config.get('logging.file') or None
    logger = setup_logger(log_file=str(log_file) if log_file else None, level=log_level)

    try:
        if tool == 'info':
            from heifinfo.tools.read_heif_info import read_heif_info
            script_args = InfoArguments(**args_dict)
            exit_code = read_heif_info(script_args)
            if exit_code:
                sys.exit(exit_code)
    except ValueError as e:
        logger.debug(f"Invalid arguments: {e}")
        sys.exit(2)
    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}", exc_info=True)
        sys.exit(1)

if __name__ == "__main__":
    main()
