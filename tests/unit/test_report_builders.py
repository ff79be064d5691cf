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
Unit tests for ReportBuilder line accumulation and rendering.
"""

import pytest
from heifinfo.utils.contexts import indent_context
from heifinfo.utils.report_builders import ReportBuilder, ReportLine


@pytest.fixture
def nested_builder():
    builder = ReportBuilder()
    builder.add_line('image: 64x64 8-bit (id=1) primary')
    builder.add_line('metadata:', depth=1)
    builder.add_line('Exif: 100 bytes', depth=2)
    return builder


@pytest.mark.unit
class TestReportBuilder:

    def test_empty_builder_renders_empty_string(self):
        assert ReportBuilder().render() == ''

    def test_lines_keep_emission_order(self, nested_builder):
        assert [line.text for line in nested_builder.lines] == [
            'image: 64x64 8-bit (id=1) primary', 'metadata:', 'Exif: 100 bytes']
        assert nested_builder.lines[2] == ReportLine(depth=2, text='Exif: 100 bytes')

    def test_default_render_is_flush_left(self, nested_builder):
        assert nested_builder.render() == (
            'image: 64x64 8-bit (id=1) primary\n'
            'metadata:\n'
            'Exif: 100 bytes\n'
        )

    def test_explicit_indent(self, nested_builder):
        assert nested_builder.render(indent=2) == (
            'image: 64x64 8-bit (id=1) primary\n'
            '  metadata:\n'
            '    Exif: 100 bytes\n'
        )

    def test_indent_from_context(self, nested_builder):
        token = indent_context.set(1)
        try:
            assert nested_builder.render().splitlines()[2] == '  Exif: 100 bytes'
        finally:
            indent_context.reset(token)

    def test_indent_from_config(self, nested_builder, default_report_config):
        default_report_config.set('report.indent', 4)
        assert nested_builder.render().splitlines()[1] == '    metadata:'

    def test_explicit_indent_beats_context(self, nested_builder):
        token = indent_context.set(8)
        try:
            assert nested_builder.render(indent=0).splitlines()[1] == 'metadata:'
        finally:
            indent_context.reset(token)

    def test_add_lines_and_clear(self):
        builder = ReportBuilder()
        builder.add_lines(['a', 'b'], depth=3)
        assert [line.depth for line in builder.lines] == [3, 3]
        builder.clear()
        assert builder.render() == ''
