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
Value Formatting Rules for HEIF Info Reports.

Pure functions mapping domain values (enums, optional numbers, flag pairs) to
the canonical strings used in the text report. None of these functions touch
the decode library.
"""
import math
from decimal import Decimal
from typing import Any, List, Optional
from heifinfo.utils.data_models import (
    MasteringDisplayColourVolume,
    MetadataBlockInfo,
    UserDescriptionProperty,
)
from heifinfo.utils.heif_constants import (
    EXIF_ITEM_TYPE,
    MIME_ITEM_TYPE,
    UNDEFINED,
    XMP_CONTENT_TYPE,
    DepthRepresentationType,
)

REPRESENTATION_NAMES = {
    DepthRepresentationType.UNIFORM_INVERSE_Z: 'inverse Z',
    DepthRepresentationType.UNIFORM_DISPARITY: 'uniform disparity',
    DepthRepresentationType.UNIFORM_Z: 'uniform Z',
    DepthRepresentationType.NONUNIFORM_DISPARITY: 'non-uniform disparity',
}


def format_number(value: Any) -> str:
    """
    Format a number using its shortest round-tripping form.

    Integral floats drop the trailing '.0' (2.0 -> '2', 2.5 -> '2.5'). Scientific
    notation uses an upper-case exponent and starts below 1E-04 and from 1E+15
    (1e-05 -> '1E-05', 1e15 -> '1E+15').
    """
    if isinstance(value, bool) or not isinstance(value, float):
        return str(value)
    text = repr(value)
    if 'e' in text:
        return text.upper()
    if math.isfinite(value) and abs(value) >= 1e15:
        return format(Decimal(text).normalize(), 'E')
    if text.endswith('.0'):
        text = text[:-2]
    return text


def format_optional_number(value: Optional[float]) -> str:
    """Format a number, or the 'undefined' sentinel when it is absent."""
    return UNDEFINED if value is None else format_number(value)


def get_color_profile_description(has_icc: bool, has_nclx: bool) -> str:
    """Describe which color profiles an image carries."""
    if has_icc:
        return 'icc, nclx' if has_nclx else 'icc'
    if has_nclx:
        return 'nclx'
    return 'none'


def get_alpha_channel_description(has_alpha: bool, is_premultiplied: bool) -> str:
    """Describe the alpha channel; premultiplication only matters with alpha present."""
    if not has_alpha:
        return 'no'
    return 'yes (premultiplied)' if is_premultiplied else 'yes'


def get_representation_string(representation_type: Any) -> str:
    """Map a depth representation type to its display name."""
    return REPRESENTATION_NAMES.get(representation_type, 'unknown')


def get_metadata_type_string(info: MetadataBlockInfo) -> str:
    """
    Label a metadata block.

    Exif blocks are labelled by item type, XMP is recognised from its MIME
    content type, and everything else is shown as 'itemType/contentType'.
    """
    if info.item_type == EXIF_ITEM_TYPE:
        return info.item_type
    if info.item_type == MIME_ITEM_TYPE and info.content_type == XMP_CONTENT_TYPE:
        return 'XMP'
    return f"{info.item_type}/{info.content_type}"


def format_image_header(image_id: Any, width: int, height: int, bit_depth: int, is_primary: bool) -> str:
    primary = ' primary' if is_primary else ''
    return f"image: {width}x{height} {bit_depth}-bit (id={image_id}){primary}"


def format_dimensions(width: int, height: int) -> str:
    return f"{width}x{height}"


def format_region_summary(region_id: Any, reference_width: int, reference_height: int, region_count: int) -> str:
    return (f"id={region_id} reference_width={reference_width} "
            f"reference_height={reference_height} {region_count} regions")


def format_user_description(item: UserDescriptionProperty) -> List[str]:
    """Field lines of a user description block (without the block header)."""
    return [
        f"language: {item.language}",
        f"name: {item.name}",
        f"description: {item.description}",
        f"tags: {item.tags}",
    ]


def format_chromaticity(x: float, y: float) -> str:
    return f"({format_number(x)};{format_number(y)})"


def format_mastering_display(data: MasteringDisplayColourVolume) -> List[str]:
    """Field lines of a mastering display colour volume block (without header)."""
    primaries = ', '.join(
        format_chromaticity(x, y)
        for x, y in zip(data.display_primaries_x, data.display_primaries_y)
    )
    return [
        f"display primaries (x,y): {primaries}",
        f"white point (x,y): {format_chromaticity(data.white_point_x, data.white_point_y)}",
        f"max display mastering luminance: {format_number(data.max_display_mastering_luminance)}",
        f"min display mastering luminance: {format_number(data.min_display_mastering_luminance)}",
    ]
