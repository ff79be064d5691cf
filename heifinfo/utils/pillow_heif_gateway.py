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
pillow_heif Gateway for HEIF Containers.

This module adapts pillow_heif's object model (HeifFile, HeifImage,
HeifDepthImage) to the gateway classes in heif_gateway.

pillow_heif does not assign item ids, so images, thumbnails, depth images and
metadata blocks are numbered from 1 in the order pillow_heif lists them.
Some libheif features are not exposed by pillow_heif and are reported as
absent:
- region items, transformation and user description properties
- pixel aspect ratio (always square), clli and mdcv
- thumbnail bit depth (taken from the parent image)
"""
import logging
import os
from typing import Any, Dict, List, Optional
import pillow_heif
from heifinfo.utils.capability import LibraryCapability
from heifinfo.utils.data_models import DecodedImage, DepthRepresentationInfo, MetadataBlockInfo
from heifinfo.utils.exceptions import DecodeError, OpenError
from heifinfo.utils.heif_constants import (
    EXIF_ITEM_TYPE,
    MIME_ITEM_TYPE,
    XMP_CONTENT_TYPE,
    DepthRepresentationType,
)
from heifinfo.utils.heif_gateway import HeifContainer, HeifGateway, HeifImageHandle

logger = logging.getLogger(__name__)

# Exceptions pillow_heif raises for unreadable or undecodable data
LIBRARY_ERRORS = (RuntimeError, ValueError, OSError, EOFError)


def _lookup(items: List[Any], item_id: int, kind: str) -> Any:
    """Fetch a 1-based item, raising DecodeError for unknown ids."""
    if not isinstance(item_id, int) or not 1 <= item_id <= len(items):
        raise DecodeError(f"No {kind} with id {item_id}")
    return items[item_id - 1]


def thumbnail_size(width: int, height: int, box: int) -> tuple:
    """
    Size of a thumbnail that fits a square box, keeping the image's aspect ratio.

    pillow_heif reports each thumbnail by the length of its longest side.
    """
    if width >= height:
        return box, max(1, round(height * box / width))
    return max(1, round(width * box / height)), box


def build_metadata_blocks(info: Dict[str, Any]) -> List[MetadataBlockInfo]:
    """
    Rebuild the metadata block list of a HeifImage.

    pillow_heif moves Exif and XMP payloads out of info['metadata'] into
    info['exif'] and info['xmp'], so those come first, followed by the
    remaining blocks in library order. Blocks still present in
    info['metadata'] are never duplicated.
    """
    listed = [
        MetadataBlockInfo(
            item_type=block.get('type', ''),
            content_type=block.get('content_type', ''),
            size=len(block.get('data') or b''),
        )
        for block in info.get('metadata') or []
    ]
    has_exif = any(b.item_type == EXIF_ITEM_TYPE for b in listed)
    has_xmp = any(b.item_type == MIME_ITEM_TYPE and b.content_type == XMP_CONTENT_TYPE for b in listed)

    blocks = []
    if info.get('exif') and not has_exif:
        blocks.append(MetadataBlockInfo(EXIF_ITEM_TYPE, '', len(info['exif'])))
    if info.get('xmp') and not has_xmp:
        blocks.append(MetadataBlockInfo(MIME_ITEM_TYPE, XMP_CONTENT_TYPE, len(info['xmp'])))
    return blocks + listed


def build_depth_representation(metadata: Optional[Dict[str, Any]]) -> Optional[DepthRepresentationInfo]:
    """Convert a HeifDepthImage's info['metadata'] dictionary."""
    if not metadata:
        return None
    return DepthRepresentationInfo(
        z_near=metadata.get('z_near'),
        z_far=metadata.get('z_far'),
        d_min=metadata.get('d_min'),
        d_max=metadata.get('d_max'),
        representation_type=DepthRepresentationType.from_value(metadata.get('representation_type')),
        disparity_reference_view=int(metadata.get('disparity_reference_view') or 0),
    )


class PillowHeifThumbnailHandle(HeifImageHandle):
    """A thumbnail whose size is derived from pillow_heif's box size."""

    def __init__(self, width: int, height: int, bit_depth: int):
        self._width = width
        self._height = height
        self._bit_depth = bit_depth

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def bit_depth(self) -> int:
        return self._bit_depth


class PillowHeifDepthHandle(HeifImageHandle):
    """Wraps a pillow_heif.HeifDepthImage."""

    def __init__(self, depth_image):
        self._depth_image = depth_image

    @property
    def width(self) -> int:
        return self._depth_image.size[0]

    @property
    def height(self) -> int:
        return self._depth_image.size[1]

    @property
    def bit_depth(self) -> int:
        bit_depth = self._depth_image.info.get('bit_depth')
        if bit_depth:
            return int(bit_depth)
        return 8 if self._depth_image.mode == 'L' else 16

    def close(self) -> None:
        self._depth_image = None


class PillowHeifImageHandle(HeifImageHandle):
    """Wraps a top-level pillow_heif.HeifImage."""

    def __init__(self, heif_image):
        self._heif_image = heif_image
        info = heif_image.info
        self._thumbnails: List[int] = [box for box in info.get('thumbnails') or [] if box]
        self._depth_images: List[Any] = [d for d in info.get('depth_images') or [] if d is not None]
        self._metadata_blocks = build_metadata_blocks(info)

    @property
    def width(self) -> int:
        return self._heif_image.size[0]

    @property
    def height(self) -> int:
        return self._heif_image.size[1]

    @property
    def bit_depth(self) -> int:
        return int(self._heif_image.info.get('bit_depth', 8))

    @property
    def is_primary(self) -> bool:
        return bool(self._heif_image.info.get('primary', False))

    @property
    def has_alpha(self) -> bool:
        return bool(self._heif_image.has_alpha)

    @property
    def is_premultiplied_alpha(self) -> bool:
        return bool(self._heif_image.premultiplied_alpha)

    @property
    def has_icc_profile(self) -> bool:
        return bool(self._heif_image.info.get('icc_profile'))

    @property
    def has_nclx_profile(self) -> bool:
        return bool(self._heif_image.info.get('nclx_profile'))

    def get_depth_image_ids(self) -> List[int]:
        return list(range(1, len(self._depth_images) + 1))

    def get_thumbnail_image_ids(self) -> List[int]:
        return list(range(1, len(self._thumbnails) + 1))

    def get_metadata_block_ids(self) -> List[int]:
        return list(range(1, len(self._metadata_blocks) + 1))

    def get_depth_image(self, depth_id: int) -> PillowHeifDepthHandle:
        return PillowHeifDepthHandle(_lookup(self._depth_images, depth_id, 'depth image'))

    def get_depth_metadata(self, depth_id: int) -> Optional[Dict[str, Any]]:
        depth_image = _lookup(self._depth_images, depth_id, 'depth image')
        return depth_image.info.get('metadata')

    def get_thumbnail_image(self, thumbnail_id: int) -> PillowHeifThumbnailHandle:
        box = _lookup(self._thumbnails, thumbnail_id, 'thumbnail')
        width, height = thumbnail_size(self.width, self.height, box)
        return PillowHeifThumbnailHandle(width, height, self.bit_depth)

    def get_metadata_block_info(self, block_id: int) -> MetadataBlockInfo:
        return _lookup(self._metadata_blocks, block_id, 'metadata block')

    def decode(self) -> DecodedImage:
        try:
            self._heif_image.load()
        except LIBRARY_ERRORS as e:
            raise DecodeError(f"Failed to decode image: {e}") from e
        return DecodedImage()

    def close(self) -> None:
        self._depth_images = []
        self._heif_image = None


class PillowHeifContainer(HeifContainer):
    """Wraps a pillow_heif.HeifFile."""

    def __init__(self, heif_file, path: str):
        self.path = path
        self._heif_file = heif_file
        self._images = list(heif_file)

    def get_top_level_image_ids(self) -> List[int]:
        return list(range(1, len(self._images) + 1))

    def get_image_handle(self, image_id: int) -> PillowHeifImageHandle:
        return PillowHeifImageHandle(_lookup(self._images, image_id, 'top-level image'))

    def get_depth_representation_info(self, handle: HeifImageHandle,
                                      depth_id: int) -> Optional[DepthRepresentationInfo]:
        if not isinstance(handle, PillowHeifImageHandle):
            raise DecodeError(f"Handle {handle!r} does not belong to this container")
        return build_depth_representation(handle.get_depth_metadata(depth_id))

    def close(self) -> None:
        self._images = []
        self._heif_file = None


class PillowHeifGateway(HeifGateway):
    """
    Gateway backed by pillow_heif (libheif bindings).

    Example:
        >>> gateway = PillowHeifGateway()
        >>> with gateway.open_container('photo.heic') as container:
        ...     print(container.get_top_level_image_ids())
        [1]
    """

    def __init__(self):
        self._capability: Optional[LibraryCapability] = None

    @property
    def capability(self) -> LibraryCapability:
        if self._capability is None:
            self._capability = LibraryCapability(pillow_heif.libheif_version())
        return self._capability

    def open_container(self, path: str) -> PillowHeifContainer:
        if not os.path.isfile(path):
            raise OpenError(f"File not found: {path}")
        try:
            if not pillow_heif.is_supported(path):
                raise OpenError(f"Not a supported HEIF file: {path}")
            heif_file = pillow_heif.open_heif(path, convert_hdr_to_8bit=False)
        except LIBRARY_ERRORS as e:
            raise OpenError(f"Failed to open '{path}': {e}") from e
        logger.debug(f"Opened {path} with libheif {self.capability.version}")
        return PillowHeifContainer(heif_file, path)


def get_library_versions() -> Dict[str, str]:
    """Versions of the pillow_heif binding and the libheif it wraps."""
    return {
        'pillow_heif': pillow_heif.__version__,
        'libheif': pillow_heif.libheif_version(),
    }
