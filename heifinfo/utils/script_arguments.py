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
Dataclass-based Argument Models for heifinfo Tools.

This module defines strongly-typed dataclasses for parsing and validating the
command-line arguments of each tool. It uses `__post_init__` for validation,
ensuring that the core logic receives clean and validated inputs.

Classes:
    BaseArguments: A base dataclass for common script arguments.
    InfoArguments: Arguments for the read_heif_info tool.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, List
from heifinfo.utils.section_registry import validate_section_ids

logger = logging.getLogger(__name__)

@dataclass
class BaseArguments:
    """A base dataclass for common script arguments."""
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    log_file: Optional[Path] = None
    verbose: bool = False

    def __post_init__(self):
        """Coerce path-like arguments to Path objects."""
        if self.input_path and isinstance(self.input_path, str):
            self.input_path = Path(self.input_path)
        if self.output_path and isinstance(self.output_path, str):
            self.output_path = Path(self.output_path)
        if self.log_file and isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)

    def handle_error(self, message: str):
        """Logs an error and raises ValueError."""
        logger.error(message)
        raise ValueError(message)

@dataclass
class InfoArguments(BaseArguments):
    """Arguments for the read_heif_info tool."""
    indent: Optional[int] = None
    sections: Optional[List[str]] = None

    def __post_init__(self):
        """Validation for read_heif_info arguments."""
        super().__post_init__()
        try:
            self._validate_info()
        except ValueError as e:
            self.handle_error(str(e))

    def _validate_info(self):
        """Perform validation checks for read_heif_info arguments."""
        if self.input_path is None:
            raise ValueError("An input file or directory is required.")
        if not self.input_path.exists():
            raise ValueError(f"Input path not found: {self.input_path}")
        if self.indent is not None and self.indent < 0:
            raise ValueError(f"Indent must be zero or positive, got {self.indent}")
        if self.sections is not None:
            validate_section_ids(self.sections)
