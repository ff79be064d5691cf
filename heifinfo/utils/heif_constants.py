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
Shared Constants for HEIF Reporting.

This module centralizes enumerations and fixed values used by the gateway
adapters and the report formatting rules.

Classes:
    DepthRepresentationType: Enum for auxiliary depth map encodings.
"""
from enum import Enum


# --- Enumerations ---

class DepthRepresentationType(Enum):
    """Encoding scheme of an auxiliary depth image (values follow libheif)."""
    UNIFORM_INVERSE_Z = 0
    UNIFORM_DISPARITY = 1
    UNIFORM_Z = 2
    NONUNIFORM_DISPARITY = 3
    UNKNOWN = -1

    @classmethod
    def from_value(cls, value) -> 'DepthRepresentationType':
        """Map a raw library value to a member, falling back to UNKNOWN."""
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            return cls.UNKNOWN


# --- Metadata block identification ---

EXIF_ITEM_TYPE = 'Exif'
MIME_ITEM_TYPE = 'mime'
XMP_CONTENT_TYPE = 'application/rdf+xml'

# --- mdcv box fixed-point units ---

CHROMATICITY_UNIT = 0.00002
LUMINANCE_UNIT = 0.0001

# --- Sentinels ---

UNDEFINED = 'undefined'

# File suffixes picked up when a directory is given as input
HEIF_EXTENSIONS = ('.heic', '.heif', '.hif', '.avif')
