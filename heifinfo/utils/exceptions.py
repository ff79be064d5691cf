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
Custom Exceptions Module.

A centralized module for custom exceptions used throughout the HEIF Info Toolkit.
"""

class HeifInfoError(Exception):
    """Base exception for errors while reporting on a HEIF container."""
    pass

class OpenError(HeifInfoError):
    """The file is missing, is not a HEIF container, or uses an unsupported format."""
    pass

class DecodeError(HeifInfoError):
    """Failure while opening or decoding an image, thumbnail, depth image or region item."""
    pass
