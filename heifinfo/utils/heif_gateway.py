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
Decode Library Gateway for HEIF Containers.

This module defines the abstract surface the report builder needs from a HEIF
decode library. Concrete gateways wrap a real library; the report builder only
ever talks to these classes.

Every object that holds library resources (container, image handle, region
item) is a context manager and must be used in a `with` block so it is
released on every exit path.

Classes:
    HeifImageHandle: An accessible image (top-level, thumbnail or depth)
    HeifRegionItem: A region annotation item
    HeifContainer: An opened HEIF file
    HeifGateway: Entry point that opens containers and reports capabilities
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Union
from heifinfo.utils.capability import LibraryCapability
from heifinfo.utils.data_models import (
    DecodedImage,
    DepthRepresentationInfo,
    MetadataBlockInfo,
    UserDescriptionProperty,
)
from heifinfo.utils.exceptions import DecodeError

ItemId = Any


class _ScopedResource(ABC):
    """Context manager plumbing shared by all gateway resources."""

    def close(self) -> None:
        """Release the underlying library resources. Must be idempotent."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class HeifImageHandle(_ScopedResource):
    """
    An image inside a container.

    Top-level images, thumbnails and depth images are all handles; the
    sub-image lists are only meaningful on top-level handles.
    """

    @property
    @abstractmethod
    def width(self) -> int:
        pass

    @property
    @abstractmethod
    def height(self) -> int:
        pass

    @property
    @abstractmethod
    def bit_depth(self) -> int:
        pass

    @property
    def is_primary(self) -> bool:
        return False

    @property
    def has_alpha(self) -> bool:
        return False

    @property
    def is_premultiplied_alpha(self) -> bool:
        return False

    @property
    def has_icc_profile(self) -> bool:
        return False

    @property
    def has_nclx_profile(self) -> bool:
        return False

    @property
    def has_depth_image(self) -> bool:
        return bool(self.get_depth_image_ids())

    def get_depth_image_ids(self) -> List[ItemId]:
        return []

    def get_thumbnail_image_ids(self) -> List[ItemId]:
        return []

    def get_metadata_block_ids(self) -> List[ItemId]:
        return []

    def get_region_item_ids(self) -> List[ItemId]:
        return []

    def get_depth_image(self, depth_id: ItemId) -> 'HeifImageHandle':
        """Open the depth image with the given id. Raises DecodeError."""
        raise DecodeError(f"No depth image with id {depth_id}")

    def get_thumbnail_image(self, thumbnail_id: ItemId) -> 'HeifImageHandle':
        """Open the thumbnail image with the given id. Raises DecodeError."""
        raise DecodeError(f"No thumbnail with id {thumbnail_id}")

    def get_metadata_block_info(self, block_id: ItemId) -> MetadataBlockInfo:
        raise DecodeError(f"No metadata block with id {block_id}")

    def decode(self) -> DecodedImage:
        """
        Decode the image without requesting a colorspace or chroma conversion.

        Raises:
            DecodeError: If the pixel data cannot be decoded.
        """
        raise DecodeError(f"{type(self).__name__} does not support decoding")


class HeifRegionItem(_ScopedResource):
    """A region annotation item: a set of geometries over a reference size."""

    @property
    @abstractmethod
    def id(self) -> ItemId:
        pass

    @property
    @abstractmethod
    def reference_width(self) -> int:
        pass

    @property
    @abstractmethod
    def reference_height(self) -> int:
        pass

    @abstractmethod
    def get_region_geometries(self) -> Sequence[Any]:
        """Geometries in item order; str() of each is its canonical rendering."""
        pass


class HeifContainer(_ScopedResource):
    """An opened HEIF file."""

    @abstractmethod
    def get_top_level_image_ids(self) -> List[ItemId]:
        """Ids of the top-level images in container order."""
        pass

    @abstractmethod
    def get_image_handle(self, image_id: ItemId) -> HeifImageHandle:
        """Open a top-level image. Raises DecodeError."""
        pass

    def get_region_item(self, region_id: ItemId) -> HeifRegionItem:
        """Open a region item. Raises DecodeError."""
        raise DecodeError(f"No region item with id {region_id}")

    def get_depth_representation_info(self, handle: HeifImageHandle,
                                      depth_id: ItemId) -> Optional[DepthRepresentationInfo]:
        return None

    def get_transformation_properties(self, handle: HeifImageHandle) -> Sequence[Any]:
        return []

    def get_user_description_properties(
            self, owner: Union[HeifImageHandle, ItemId]) -> List[UserDescriptionProperty]:
        """User descriptions attached to an image handle or to a region item id."""
        return []


class HeifGateway(ABC):
    """Entry point to a HEIF decode library."""

    @property
    @abstractmethod
    def capability(self) -> LibraryCapability:
        pass

    @abstractmethod
    def open_container(self, path: str) -> HeifContainer:
        """
        Open a HEIF file.

        Raises:
            OpenError: If the file is missing, not a HEIF container, or unsupported.
        """
        pass
