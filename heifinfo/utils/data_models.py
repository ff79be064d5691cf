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
Data Models for the HEIF Info Toolkit.

This module defines strongly-typed data classes for the values a HEIF decode
library exposes about an opened container. They form the contract between the
gateway adapters and the report builder.

Report framework classes:
    SectionConfig: Configuration for a report section, including its version gate

Domain model classes (no suffix):
    DepthRepresentationInfo: Depth map encoding parameters
    MetadataBlockInfo: Type and size of an embedded metadata block
    UserDescriptionProperty: Language-tagged name/description/tags ('udes')
    PixelAspectRatio: Pixel spacing ratio ('pasp')
    ContentLightLevel: HDR content light level ('clli')
    MasteringDisplayColourVolume: HDR mastering display description ('mdcv')
    DecodedImage: Result of decoding a top-level image

Gateway-rendered values (the string form is canonical):
    RotationTransform, MirrorTransform, CleanApertureTransform
    PointGeometry, RectangleGeometry, EllipseGeometry
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple
from heifinfo.utils.heif_constants import (
    CHROMATICITY_UNIT,
    LUMINANCE_UNIT,
    DepthRepresentationType,
)


# ============================================================================
# Report framework classes
# ============================================================================

@dataclass(frozen=True)
class SectionConfig:
    """
    Static configuration for a report section.

    Attributes:
        id: Section identifier (e.g., 'thumbnails', 'regions')
        title: Header text written at the top of the section
        min_version: Minimum decode library version (major, minor, patch)
            needed for the section, or None if always available

    Example:
        >>> config = SectionConfig(
        ...     id='regions',
        ...     title='region annotations',
        ...     min_version=(1, 16, 0)
        ... )
    """
    id: str
    title: str
    min_version: Optional[Tuple[int, int, int]] = None


# ============================================================================
# Domain model classes (no suffix)
# ============================================================================

@dataclass
class DepthRepresentationInfo:
    """
    Depth representation parameters of an auxiliary depth image.

    Every numeric field is optional on its own; a None value is reported as
    'undefined'. disparity_reference_view only carries meaning when d_min or
    d_max is present.
    """
    z_near: Optional[float] = None
    z_far: Optional[float] = None
    d_min: Optional[float] = None
    d_max: Optional[float] = None
    representation_type: DepthRepresentationType = DepthRepresentationType.UNKNOWN
    disparity_reference_view: int = 0

    def has_disparity_range(self) -> bool:
        """True if d_min or d_max has a value."""
        return self.d_min is not None or self.d_max is not None


@dataclass
class MetadataBlockInfo:
    """Type information and payload size of a metadata block."""
    item_type: str
    content_type: str
    size: int


@dataclass
class UserDescriptionProperty:
    """A 'udes' property attached to an image or a region item."""
    language: str = ''
    name: str = ''
    description: str = ''
    tags: str = ''


@dataclass(frozen=True)
class PixelAspectRatio:
    """Relative width and height of a pixel."""
    horizontal_spacing: int = 1
    vertical_spacing: int = 1

    @property
    def is_square(self) -> bool:
        return self.horizontal_spacing == self.vertical_spacing

    def __str__(self) -> str:
        return f"{self.horizontal_spacing}:{self.vertical_spacing}"


@dataclass
class ContentLightLevel:
    """Content light level information (values in cd/m²)."""
    max_content_light_level: int
    max_picture_average_light_level: int


@dataclass
class MasteringDisplayColourVolume:
    """
    Decoded mastering display colour volume.

    Attributes:
        display_primaries_x: x chromaticity of the three display primaries
        display_primaries_y: y chromaticity of the three display primaries
        white_point_x: x chromaticity of the white point
        white_point_y: y chromaticity of the white point
        max_display_mastering_luminance: Maximum luminance in cd/m²
        min_display_mastering_luminance: Minimum luminance in cd/m²
    """
    display_primaries_x: Tuple[float, float, float]
    display_primaries_y: Tuple[float, float, float]
    white_point_x: float
    white_point_y: float
    max_display_mastering_luminance: float
    min_display_mastering_luminance: float

    @classmethod
    def from_raw(cls, display_primaries_x, display_primaries_y, white_point_x: int,
                 white_point_y: int, max_luminance: int, min_luminance: int) -> 'MasteringDisplayColourVolume':
        """
        Decode the fixed-point values stored in an 'mdcv' box.

        Chromaticities are stored in increments of 0.00002 and luminance in
        increments of 0.0001 cd/m².
        """
        if len(display_primaries_x) != 3 or len(display_primaries_y) != 3:
            raise ValueError("Exactly three display primaries are required")
        return cls(
            display_primaries_x=tuple(v * CHROMATICITY_UNIT for v in display_primaries_x),
            display_primaries_y=tuple(v * CHROMATICITY_UNIT for v in display_primaries_y),
            white_point_x=white_point_x * CHROMATICITY_UNIT,
            white_point_y=white_point_y * CHROMATICITY_UNIT,
            max_display_mastering_luminance=max_luminance * LUMINANCE_UNIT,
            min_display_mastering_luminance=min_luminance * LUMINANCE_UNIT,
        )


@dataclass
class DecodedImage:
    """
    Result of decoding a top-level image.

    Only the properties the report needs are kept. The object is a context
    manager so it is released as soon as the report no longer needs it.
    """
    pixel_aspect_ratio: PixelAspectRatio = field(default_factory=PixelAspectRatio)
    content_light_level: Optional[ContentLightLevel] = None
    mastering_display_colour_volume: Optional[MasteringDisplayColourVolume] = None
    closed: bool = False

    def close(self) -> None:
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


# ============================================================================
# Transformation properties
# ============================================================================

@dataclass(frozen=True)
class RotationTransform:
    """An 'irot' property: counter-clockwise rotation in degrees."""
    angle: int

    def __str__(self) -> str:
        return f"rotate ccw: {self.angle}"


@dataclass(frozen=True)
class MirrorTransform:
    """An 'imir' property: mirror direction ('horizontal' or 'vertical')."""
    direction: str

    def __str__(self) -> str:
        return f"mirror: {self.direction}"


@dataclass(frozen=True)
class CleanApertureTransform:
    """A 'clap' property, reduced to the resulting crop rectangle."""
    left: int
    top: int
    width: int
    height: int

    def __str__(self) -> str:
        return f"clean aperture: left={self.left} top={self.top} width={self.width} height={self.height}"


# ============================================================================
# Region geometries
# ============================================================================

@dataclass(frozen=True)
class PointGeometry:
    x: int
    y: int

    def __str__(self) -> str:
        return f"point: x={self.x} y={self.y}"


@dataclass(frozen=True)
class RectangleGeometry:
    x: int
    y: int
    width: int
    height: int

    def __str__(self) -> str:
        return f"rectangle: x={self.x} y={self.y} width={self.width} height={self.height}"


@dataclass(frozen=True)
class EllipseGeometry:
    x: int
    y: int
    radius_x: int
    radius_y: int

    def __str__(self) -> str:
        return f"ellipse: x={self.x} y={self.y} radius_x={self.radius_x} radius_y={self.radius_y}"
