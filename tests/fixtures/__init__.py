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
Test fixtures and mock data factories for heifinfo tests.

This package contains:
- MockHeifContainer: In-memory container implementing the gateway classes
- MockGateway: Gateway serving a prepared MockHeifContainer
"""

from tests.fixtures.mock_heif_factory import (
    MockDepthImage,
    MockGateway,
    MockHeifContainer,
    MockImage,
    MockRegion,
    MockThumbnail,
)

__all__ = [
    'MockDepthImage',
    'MockGateway',
    'MockHeifContainer',
    'MockImage',
    'MockRegion',
    'MockThumbnail',
]
