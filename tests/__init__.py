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
HEIF Info Toolkit Test Suite.

This package contains tests for heifinfo components including:
- Unit tests for individual functions and classes
- Integration tests for the container walk and report assembly
- End-to-end tests for the CLI command
"""
