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
Unit tests for the value formatting rules.

Each rule is a pure function, so the tests enumerate the decision tables
directly.
"""

import pytest
from heifinfo.utils.data_models import (
    MasteringDisplayColourVolume,
    MetadataBlockInfo,
    UserDescriptionProperty,
)
from heifinfo.utils.heif_constants import DepthRepresentationType
from heifinfo.utils.value_formatter import (
    format_image_header,
    format_mastering_display,
    format_number,
    format_optional_number,
    format_region_summary,
    format_user_description,
    get_alpha_channel_description,
    get_color_profile_description,
    get_metadata_type_string,
    get_representation_string,
)


@pytest.mark.unit
class TestColorProfileDescription:
    """The four icc/nclx combinations."""

    @pytest.mark.parametrize("has_icc, has_nclx, expected", [
        (False, False, 'none'),
        (True, False, 'icc'),
        (False, True, 'nclx'),
        (True, True, 'icc, nclx'),
    ])
    def test_all_combinations(self, has_icc, has_nclx, expected):
        assert get_color_profile_description(has_icc, has_nclx) == expected


@pytest.mark.unit
class TestAlphaChannelDescription:

    def test_no_alpha(self):
        assert get_alpha_channel_description(False, False) == 'no'

    def test_premultiplied_flag_ignored_without_alpha(self):
        assert get_alpha_channel_description(False, True) == 'no'

    def test_straight_alpha(self):
        assert get_alpha_channel_description(True, False) == 'yes'

    def test_premultiplied_alpha(self):
        assert get_alpha_channel_description(True, True) == 'yes (premultiplied)'


@pytest.mark.unit
class TestNumbers:

    def test_fractional_float(self):
        assert format_number(2.5) == '2.5'

    def test_integral_float_drops_decimal_point(self):
        assert format_number(2.0) == '2'

    def test_integer(self):
        assert format_number(1000) == '1000'

    def test_absent_value_is_undefined(self):
        assert format_optional_number(None) == 'undefined'

    def test_zero_is_not_undefined(self):
        assert format_optional_number(0.0) == '0'

    @pytest.mark.parametrize("value, expected", [
        (1e-05, '1E-05'),
        (2.5e-07, '2.5E-07'),
        (0.0001, '0.0001'),
        (1e15, '1E+15'),
        (1.5e15, '1.5E+15'),
        (1e16, '1E+16'),
        (123456789012345.0, '123456789012345'),
    ])
    def test_scientific_notation(self, value, expected):
        assert format_number(value) == expected


@pytest.mark.unit
class TestRepresentationString:

    @pytest.mark.parametrize("rep_type, expected", [
        (DepthRepresentationType.UNIFORM_INVERSE_Z, 'inverse Z'),
        (DepthRepresentationType.UNIFORM_DISPARITY, 'uniform disparity'),
        (DepthRepresentationType.UNIFORM_Z, 'uniform Z'),
        (DepthRepresentationType.NONUNIFORM_DISPARITY, 'non-uniform disparity'),
        (DepthRepresentationType.UNKNOWN, 'unknown'),
    ])
    def test_mapping(self, rep_type, expected):
        assert get_representation_string(rep_type) == expected

    def test_unrecognised_value_is_unknown(self):
        assert get_representation_string(42) == 'unknown'


@pytest.mark.unit
class TestMetadataTypeString:

    def test_exif_uses_item_type(self):
        assert get_metadata_type_string(MetadataBlockInfo('Exif', 'ignored', 10)) == 'Exif'

    def test_xmp_recognised_from_mime_content_type(self):
        assert get_metadata_type_string(MetadataBlockInfo('mime', 'application/rdf+xml', 10)) == 'XMP'

    def test_other_mime_type(self):
        assert get_metadata_type_string(MetadataBlockInfo('mime', 'image/jpeg', 10)) == 'mime/image/jpeg'

    def test_other_item_type(self):
        assert get_metadata_type_string(MetadataBlockInfo('uri ', 'urn:x', 10)) == 'uri /urn:x'


@pytest.mark.unit
class TestLineFormats:

    def test_primary_image_header(self):
        assert format_image_header(1, 1920, 1080, 8, True) == 'image: 1920x1080 8-bit (id=1) primary'

    def test_secondary_image_header(self):
        assert format_image_header(2, 640, 480, 10, False) == 'image: 640x480 10-bit (id=2)'

    def test_region_summary(self):
        assert format_region_summary(5, 100, 200, 3) == 'id=5 reference_width=100 reference_height=200 3 regions'

    def test_user_description_fields(self):
        lines = format_user_description(UserDescriptionProperty('en', 'n', 'd', 't'))
        assert lines == ['language: en', 'name: n', 'description: d', 'tags: t']

    def test_mastering_display(self):
        mdcv = MasteringDisplayColourVolume(
            display_primaries_x=(0.68, 0.265, 0.15),
            display_primaries_y=(0.32, 0.69, 0.06),
            white_point_x=0.3127,
            white_point_y=0.329,
            max_display_mastering_luminance=1000.0,
            min_display_mastering_luminance=0.005,
        )
        assert format_mastering_display(mdcv) == [
            'display primaries (x,y): (0.68;0.32), (0.265;0.69), (0.15;0.06)',
            'white point (x,y): (0.3127;0.329)',
            'max display mastering luminance: 1000',
            'min display mastering luminance: 0.005',
        ]
