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
HEIF Structure Reporting Tool for heifinfo.

This module powers the 'info' command. It opens a HEIF container, walks every
top-level image with its thumbnails, depth images, metadata blocks, regions
and properties, and produces a plain-text report.

Report generation is all-or-nothing: if anything fails while a file is being
walked, no part of that file's report is returned.
"""

import logging
import sys
from typing import List, Optional
from heifinfo.utils.contexts import indent_context
from heifinfo.utils.exceptions import DecodeError, HeifInfoError
from heifinfo.utils.heif_gateway import HeifGateway
from heifinfo.utils.path_helpers import get_heif_files
from heifinfo.utils.report_builders import HeifInfoReportBuilder
from heifinfo.utils.script_arguments import InfoArguments
from heifinfo.utils.section_registry import validate_section_ids

logger = logging.getLogger('read_heif_info')


def get_default_gateway() -> HeifGateway:
    """Gateway backed by pillow_heif."""
    from heifinfo.utils.pillow_heif_gateway import PillowHeifGateway
    return PillowHeifGateway()


def generate_report(path: str, gateway: Optional[HeifGateway] = None,
                    section_ids: Optional[List[str]] = None) -> str:
    """
    Generate the text report for a HEIF file.

    Args:
        path: Path to the HEIF file.
        gateway: Decode library gateway. Defaults to the pillow_heif gateway.
        section_ids: Optional subset of per-image sections.

    Returns:
        The complete report.

    Raises:
        ValueError: If section_ids names an unknown section.
        OpenError: If the container cannot be opened.
        DecodeError: If anything fails while walking the container.
    """
    if section_ids is not None:
        validate_section_ids(section_ids)
    gateway = gateway or get_default_gateway()
    try:
        capability = gateway.capability
        with gateway.open_container(str(path)) as container:
            builder = HeifInfoReportBuilder(container, capability, section_ids)
            builder.build()
            return builder.render()
    except HeifInfoError:
        raise
    except Exception as e:
        raise DecodeError(f"Failed to read '{path}': {e}") from e


def try_generate_report(path: str, gateway: Optional[HeifGateway] = None,
                        section_ids: Optional[List[str]] = None) -> Optional[str]:
    """
    Generate the report for a HEIF file, or None on failure.

    The diagnostic is logged rather than raised.
    """
    try:
        return generate_report(path, gateway, section_ids)
    except HeifInfoError as e:
        logger.error(str(e))
        logger.debug("Report generation failed", exc_info=True)
        return None


def read_heif_info(args: InfoArguments, gateway: Optional[HeifGateway] = None) -> int:
    """
    Generate reports for one HEIF file or every HEIF file in a directory.

    Args:
        args: Validated command-line arguments.
        gateway: Optional gateway override.

    Returns:
        0 on success, 1 if any file failed
    """
    logger.debug("=== read_heif_info started ===")
    logger.debug(f"Arguments: {args}")

    files = get_heif_files(str(args.input_path))
    if not files:
        logger.error(f"No HEIF files found in {args.input_path}")
        return 1

    gateway = gateway or get_default_gateway()
    token = indent_context.set(args.indent)
    try:
        reports = []
        failures = 0
        for file_path in files:
            logger.debug(f"Reading {file_path}")
            report = try_generate_report(file_path, gateway, args.sections)
            if report is None:
                failures += 1
                continue
            if len(files) > 1:
                report = f"file: {file_path}\n{report}"
            reports.append(report)
    finally:
        indent_context.reset(token)

    output = "\n".join(reports)
    if args.output_path:
        try:
            with open(args.output_path, 'w', encoding='utf-8') as f:
                f.write(output)
            logger.info(f"Report written successfully: {args.output_path}")
        except IOError as e:
            logger.error(f"Failed to write report: {e}")
            return 1
    else:
        sys.stdout.write(output)
        sys.stdout.flush()

    if failures:
        logger.error(f"{failures} of {len(files)} file(s) could not be read")
        return 1
    logger.debug("Analysis completed successfully")
    return 0
