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
Decode Library Capability Checks.

Report sections that depend on newer decode library features are gated on the
library's version. This module parses the version string the library exposes
and answers "is the library at least version X.Y.Z?".

Classes:
    LibraryVersion: Three-part version triple with natural ordering
    LibraryCapability: Capability predicate over a LibraryVersion
"""
import re
from typing import NamedTuple, Union

_VERSION_PATTERN = re.compile(r'^\s*v?(\d+)(?:\.(\d+))?(?:\.(\d+))?')


class LibraryVersion(NamedTuple):
    """A (major, minor, patch) triple. Tuple ordering gives semantic ordering."""
    major: int
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, text: str) -> 'LibraryVersion':
        """
        Parse a version string such as '1.17.6' or '1.16'.

        Anything after the third component (build tags, '-rc1') is ignored.

        Raises:
            ValueError: If the string does not start with a version number.
        """
        match = _VERSION_PATTERN.match(text or '')
        if not match:
            raise ValueError(f"Invalid version string: '{text}'")
        major, minor, patch = (int(part) if part else 0 for part in match.groups())
        return cls(major, minor, patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


class LibraryCapability:
    """Answers version capability queries for a decode library."""

    def __init__(self, version: Union[LibraryVersion, str]):
        if isinstance(version, str):
            version = LibraryVersion.parse(version)
        self.version = LibraryVersion(*version)

    def has_version(self, major: int, minor: int, patch: int) -> bool:
        """Return True if the library version is at least major.minor.patch."""
        return self.version >= (major, minor, patch)

    def __repr__(self) -> str:
        return f"LibraryCapability('{self.version}')"
