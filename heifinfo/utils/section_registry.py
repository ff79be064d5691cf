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
Section Registry for HEIF Info Reports.

Single source of truth for the per-image report sections.

Each section is defined once with all its properties:
- id: Unique identifier
- title: Header text in the report
- min_version: Decode library version that introduced the section's data
"""

from typing import Dict, List
from heifinfo.utils.capability import LibraryCapability
from heifinfo.utils.data_models import SectionConfig


# ============================================================================
# Section Configuration Registry
# ============================================================================

SECTION_CONFIGS: Dict[str, SectionConfig] = {
    # Always available
    'thumbnails': SectionConfig(id='thumbnails', title='thumbnails'),
    'color-profile': SectionConfig(id='color-profile', title='color profile'),
    'alpha': SectionConfig(id='alpha', title='alpha channel'),
    'depth': SectionConfig(id='depth', title='depth image'),
    'metadata': SectionConfig(id='metadata', title='metadata'),

    # Item properties exposed from libheif 1.16.0
    'transformations': SectionConfig(
        id='transformations',
        title='transformations',
        min_version=(1, 16, 0)
    ),
    'regions': SectionConfig(
        id='regions',
        title='region annotations',
        min_version=(1, 16, 0)
    ),
    'properties': SectionConfig(
        id='properties',
        title='properties',
        min_version=(1, 16, 0)
    ),

    # Decoded image properties exposed from libheif 1.15.0
    'pixel-aspect-ratio': SectionConfig(
        id='pixel-aspect-ratio',
        title='pixel aspect ratio',
        min_version=(1, 15, 0)
    ),
    'content-light-level': SectionConfig(
        id='content-light-level',
        title='content light level (clli)',
        min_version=(1, 15, 0)
    ),
    'mastering-display': SectionConfig(
        id='mastering-display',
        title='mastering display color volume',
        min_version=(1, 15, 0)
    ),
}


# ============================================================================
# Section Order
# ============================================================================

# Fixed per-image order. Sections read from the decoded image come last so a
# single decode serves all of them.
IMAGE_SECTIONS = [
    'thumbnails', 'color-profile', 'alpha', 'depth', 'metadata',
    'transformations', 'regions', 'properties',
    'pixel-aspect-ratio', 'content-light-level', 'mastering-display'
]

# Sections whose data comes from decoding the image
DECODED_SECTIONS = frozenset({'pixel-aspect-ratio', 'content-light-level', 'mastering-display'})


# ============================================================================
# Helper Functions
# ============================================================================

def get_title(id: str) -> str:
    """Get the header text for a section."""
    return SECTION_CONFIGS[id].title


def is_section_available(id: str, capability: LibraryCapability) -> bool:
    """
    Check whether the decode library is recent enough for a section.

    Example:
        >>> is_section_available('regions', LibraryCapability('1.15.2'))
        False
    """
    min_version = SECTION_CONFIGS[id].min_version
    if min_version is None:
        return True
    return capability.has_version(*min_version)


def filter_available_sections(section_ids: List[str], capability: LibraryCapability) -> List[str]:
    """
    Drop the sections the decode library cannot provide, keeping order.

    Gated sections are removed entirely rather than rendered as placeholders.
    """
    return [section_id for section_id in section_ids if is_section_available(section_id, capability)]


def validate_section_ids(section_ids: List[str]) -> None:
    """
    Validate that all section IDs exist in the registry.

    Raises:
        ValueError: If any section ID is invalid, with list of valid IDs
    """
    invalid = [sid for sid in section_ids if sid not in SECTION_CONFIGS]
    if invalid:
        valid_ids = ', '.join(sorted(SECTION_CONFIGS.keys()))
        raise ValueError(
            f"Invalid section ID(s): {', '.join(invalid)}\n"
            f"Valid section IDs are:\n{valid_ids}"
        )
