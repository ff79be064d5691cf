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
Unit tests for the data model classes.

Tests cover:
- Depth representation disparity range detection
- Pixel aspect ratio squareness and rendering
- Fixed-point decoding of mastering display colour volume boxes
- String forms of transformations and region geometries
"""

import pytest
from heifinfo.utils.data_models import (
    CleanApertureTransform,
    DecodedImage,
    DepthRepresentationInfo,
    EllipseGeometry,
    MasteringDisplayColourVolume,
    MirrorTransform,
    PixelAspectRatio,
    PointGeometry,
    RectangleGeometry,
    RotationTransform,
    SectionConfig,
)
from heifinfo.utils.heif_constants import DepthRepresentationType


@pytest.mark.unit
class TestDepthRepresentationInfo:

    def test_defaults(self):
        info = DepthRepresentationInfo()
        assert info.z_near is None
        assert info.representation_type == DepthRepresentationType.UNKNOWN
        assert not info.has_disparity_range()

    def test_d_min_alone_is_a_range(self):
        assert DepthRepresentationInfo(d_min=2.5).has_disparity_range()

    def test_d_max_alone_is_a_range(self):
        assert DepthRepresentationInfo(d_max=0.0).has_disparity_range()

    def test_z_values_are_not_a_range(self):
        assert not DepthRepresentationInfo(z_near=1.0, z_far=10.0).has_disparity_range()


@pytest.mark.unit
class TestDepthRepresentationType:

    @pytest.mark.parametrize("value, expected", [
        (0, DepthRepresentationType.UNIFORM_INVERSE_Z),
        (3, DepthRepresentationType.NONUNIFORM_DISPARITY),
        (99, DepthRepresentationType.UNKNOWN),
        (None, DepthRepresentationType.UNKNOWN),
    ])
    def test_from_value(self, value, expected):
        assert DepthRepresentationType.from_value(value) == expected


@pytest.mark.unit
class TestPixelAspectRatio:

    def test_default_is_square(self):
        assert PixelAspectRatio().is_square

    def test_equal_spacings_are_square(self):
        assert PixelAspectRatio(3, 3).is_square

    def test_non_square_renders_as_ratio(self):
        ratio = PixelAspectRatio(4, 3)
        assert not ratio.is_square
        assert str(ratio) == '4:3'


@pytest.mark.unit
class TestMasteringDisplayColourVolume:

    def test_from_raw_scales_fixed_point_values(self):
        mdcv = MasteringDisplayColourVolume.from_raw(
            (34000, 13250, 7500), (16000, 34500, 3000),
            15635, 16450, 10000000, 50)
        assert mdcv.display_primaries_x == pytest.approx((0.68, 0.265, 0.15))
        assert mdcv.display_primaries_y == pytest.approx((0.32, 0.69, 0.06))
        assert mdcv.white_point_x == pytest.approx(0.3127)
        assert mdcv.white_point_y == pytest.approx(0.329)
        assert mdcv.max_display_mastering_luminance == pytest.approx(1000.0)
        assert mdcv.min_display_mastering_luminance == pytest.approx(0.005)

    def test_from_raw_requires_three_primaries(self):
        with pytest.raises(ValueError):
            MasteringDisplayColourVolume.from_raw((1, 2), (1, 2), 0, 0, 0, 0)


@pytest.mark.unit
class TestDecodedImage:

    def test_context_manager_closes(self):
        with DecodedImage() as image:
            assert not image.closed
        assert image.closed


@pytest.mark.unit
class TestCanonicalStrings:

    @pytest.mark.parametrize("item, expected", [
        (RotationTransform(270), 'rotate ccw: 270'),
        (MirrorTransform('horizontal'), 'mirror: horizontal'),
        (CleanApertureTransform(8, 4, 1904, 1072), 'clean aperture: left=8 top=4 width=1904 height=1072'),
        (PointGeometry(10, 20), 'point: x=10 y=20'),
        (RectangleGeometry(0, 0, 100, 50), 'rectangle: x=0 y=0 width=100 height=50'),
        (EllipseGeometry(50, 60, 5, 6), 'ellipse: x=50 y=60 radius_x=5 radius_y=6'),
    ])
    def test_string_form(self, item, expected):
        assert str(item) == expected


@pytest.mark.unit
class TestSectionConfig:

    def test_immutable(self):
        section = SectionConfig(id='regions', title='region annotations', min_version=(1, 16, 0))
        with pytest.raises(AttributeError):
            section.title = 'changed'
