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
File and Directory Path Utilities for heifinfo.

This module provides helper functions for file system operations, such as
recursively finding HEIF files below a directory in a stable order.
"""
import os
import logging
from typing import Iterable, List, Optional
from heifinfo.utils.config_loader import config
from heifinfo.utils.heif_constants import HEIF_EXTENSIONS

logger = logging.getLogger(__name__)

def get_supported_extensions() -> tuple:
    """File suffixes treated as HEIF files, from config.toml."""
    extensions = config.get('report.extensions') or HEIF_EXTENSIONS
    return tuple(ext.lower() for ext in extensions)

def get_heif_files(input_path: str, extensions: Optional[Iterable[str]] = None) -> List[str]:
    """
    Get a list of HEIF files from an input path (file or directory).

    A single file is returned as-is whatever its suffix, so the decode library
    decides whether it is readable. Directories are walked recursively and
    filtered by suffix; results are sorted so reports come out in a
    repeatable order.

    Args:
        input_path (str): The path to a single HEIF file or a directory.
        extensions: Optional suffix override (e.g. ['.heic']).

    Returns:
        List[str]: A list of absolute paths to HEIF files.
    """
    if os.path.isfile(input_path):
        return [os.path.abspath(input_path)]

    suffixes = tuple(e.lower() for e in extensions) if extensions else get_supported_extensions()
    heif_files = []
    if os.path.isdir(input_path):
        for root, dirs, files in os.walk(input_path):
            dirs.sort()
            for file in sorted(files):
                if file.lower().endswith(suffixes):
                    heif_files.append(os.path.abspath(os.path.join(root, file)))
        logger.debug(f"Found {len(heif_files)} HEIF file(s) under {input_path}")
    return heif_files
