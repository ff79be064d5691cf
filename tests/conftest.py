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
Pytest configuration and shared fixtures for the heifinfo test suite.

This module provides:
- Shared fixtures for common mock containers
- Isolation of the configuration singleton between tests

Example:
    >>> def test_using_fixture(hdr_image):
    ...     '''Test using the hdr_image fixture.'''
    ...     assert hdr_image.decoded.content_light_level is not None
"""

import pytest
from heifinfo.utils.config_loader import config
from heifinfo.utils.data_models import (
    ContentLightLevel,
    DecodedImage,
    DepthRepresentationInfo,
    MasteringDisplayColourVolume,
    MetadataBlockInfo,
    PixelAspectRatio,
    PointGeometry,
    RectangleGeometry,
    RotationTransform,
    UserDescriptionProperty,
)
from heifinfo.utils.heif_constants import DepthRepresentationType
from tests.fixtures.mock_heif_factory import (
    MockDepthImage,
    MockGateway,
    MockHeifContainer,
    MockImage,
    MockRegion,
    MockThumbnail,
)


# =============================================================================
# Function-scope Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def default_report_config():
    """
    Pin the report settings every test relies on and restore them afterwards.
    """
    saved_indent = config.get('report.indent')
    config.set('report.indent', 0)
    yield config
    config.set('report.indent', saved_indent)


@pytest.fixture
def basic_image():
    """
    The 1920x1080 8-bit primary image with no sub-structures.

    Returns:
        MockImage: Image with id 1 and nothing attached
    """
    return MockImage(image_id=1, width=1920, height=1080, bit_depth=8, primary=True)


@pytest.fixture
def hdr_image():
    """
    A fully populated 10-bit image with every optional structure present.

    Returns:
        MockImage: Image with thumbnails, depth, metadata, regions,
        transformations, user descriptions and HDR metadata
    """
    return MockImage(
        image_id=7,
        width=4032,
        height=3024,
        bit_depth=10,
        primary=True,
        has_alpha=True,
        premultiplied_alpha=True,
        icc=True,
        nclx=True,
        thumbnails=[MockThumbnail(thumbnail_id=8, width=320, height=240, bit_depth=10)],
        depth_images=[MockDepthImage(
            depth_id=9,
            width=576,
            height=768,
            representation=DepthRepresentationInfo(
                z_near=0.5,
                z_far=None,
                d_min=2.5,
                d_max=None,
                representation_type=DepthRepresentationType.UNIFORM_DISPARITY,
                disparity_reference_view=1,
            ),
        )],
        metadata_blocks=[
            MetadataBlockInfo('Exif', '', 2048),
            MetadataBlockInfo('mime', 'application/rdf+xml', 4096),
        ],
        regions=[MockRegion(
            region_id=20,
            reference_width=4032,
            reference_height=3024,
            geometries=[PointGeometry(10, 20), RectangleGeometry(0, 0, 100, 50)],
            user_descriptions=[UserDescriptionProperty('en', 'face', 'a face', 'person')],
        )],
        transformations=[RotationTransform(90)],
        user_descriptions=[UserDescriptionProperty('de', 'Titel', 'Beschreibung', 'urlaub')],
        decoded=DecodedImage(
            pixel_aspect_ratio=PixelAspectRatio(4, 3),
            content_light_level=ContentLightLevel(1000, 400),
            mastering_display_colour_volume=MasteringDisplayColourVolume(
                display_primaries_x=(0.68, 0.265, 0.15),
                display_primaries_y=(0.32, 0.69, 0.06),
                white_point_x=0.3127,
                white_point_y=0.329,
                max_display_mastering_luminance=1000.0,
                min_display_mastering_luminance=0.0001,
            ),
        ),
    )


@pytest.fixture
def make_gateway():
    """
    Factory fixture building a MockGateway around a list of images.

    Example:
        >>> gateway = make_gateway([MockImage(image_id=1)], version='1.14.0')
    """
    def _make(images, version='1.17.6'):
        return MockGateway(MockHeifContainer(images), version=version)
    return _make
