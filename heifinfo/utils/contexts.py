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
Context Variable Management for heifinfo.

This module defines context variables using Python's `contextvars`. They carry
per-invocation rendering settings down to the report builder without passing
them through every call, and keep concurrent report generations independent.
"""
from contextvars import ContextVar
from typing import Optional

# Spaces per nesting level when rendering the report; None defers to config.toml.
indent_context: ContextVar[Optional[int]] = ContextVar('indent', default=None)
