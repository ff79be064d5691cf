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
Report Builders for heifinfo.

Builders walk an opened HEIF container and accumulate the lines of the text
report. Line content is decided by the value formatting rules; indentation is
applied only when the report is rendered, so the same build can be rendered
flush left or nested.

Classes:
    ReportLine: A single line of report text and its nesting depth
    ReportBuilder: Accumulates ordered report lines and renders them
    HeifInfoReportBuilder: Walks a container and builds the per-image report
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional
from heifinfo.utils.capability import LibraryCapability
from heifinfo.utils.config_loader import config
from heifinfo.utils.contexts import indent_context
from heifinfo.utils.data_models import DecodedImage, DepthRepresentationInfo, UserDescriptionProperty
from heifinfo.utils.heif_gateway import HeifContainer, HeifImageHandle
from heifinfo.utils.section_registry import (
    DECODED_SECTIONS,
    IMAGE_SECTIONS,
    filter_available_sections,
    get_title,
    validate_section_ids,
)
from heifinfo.utils.value_formatter import (
    format_dimensions,
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

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportLine:
    depth: int
    text: str


class ReportBuilder:
    """
    Accumulates report lines in emission order.

    Attributes:
        lines: List of ReportLine objects in the order they were added

    Example:
        >>> builder = ReportBuilder()
        >>> builder.add_line('image: 64x64 8-bit (id=1)')
        >>> builder.add_line('thumbnails: none', depth=1)
        >>> builder.render(indent=2)
        'image: 64x64 8-bit (id=1)\\n  thumbnails: none\\n'
    """

    def __init__(self):
        """Initialize builder with an empty line list."""
        self.lines: List[ReportLine] = []

    def add_line(self, text: str, depth: int = 0) -> None:
        self.lines.append(ReportLine(depth=depth, text=text))

    def add_lines(self, texts: Iterable[str], depth: int = 0) -> None:
        for text in texts:
            self.add_line(text, depth)

    def clear(self) -> None:
        self.lines = []

    def render(self, indent: Optional[int] = None) -> str:
        """
        Render the accumulated lines, each terminated by a newline.

        Args:
            indent: Spaces per nesting level. Falls back to the indent context
                variable, then to `report.indent` in config.toml.

        Returns:
            The report text, or an empty string if nothing was added.
        """
        if indent is None:
            indent = indent_context.get()
        if indent is None:
            indent = int(config.get('report.indent', 0))
        return ''.join(f"{' ' * (indent * line.depth)}{line.text}\n" for line in self.lines)


class HeifInfoReportBuilder(ReportBuilder):
    """
    Builds the report for every top-level image of an opened container.

    Images are reported in container order. For each image the sections in
    IMAGE_SECTIONS are emitted in their fixed order, minus the sections the
    decode library is too old to provide. Every handle opened along the way
    is released before the walk moves on; an exception from the gateway
    propagates unchanged and leaves the builder's lines incomplete, so callers
    must discard the builder on error.

    Example:
        >>> with gateway.open_container('photo.heic') as container:
        ...     builder = HeifInfoReportBuilder(container, gateway.capability)
        ...     builder.build()
        ...     report = builder.render()
    """

    def __init__(self, container: HeifContainer, capability: LibraryCapability,
                 section_ids: Optional[List[str]] = None):
        """
        Initialize the report builder.

        Args:
            container: The opened container to report on.
            capability: Capability of the decode library behind the container.
            section_ids: Optional subset of sections to include. Order is
                always the fixed report order regardless of the order given.
        """
        super().__init__()
        self.container = container
        self.capability = capability
        if section_ids is not None:
            validate_section_ids(section_ids)
            requested = set(section_ids)
            section_ids = [sid for sid in IMAGE_SECTIONS if sid in requested]
        else:
            section_ids = list(IMAGE_SECTIONS)
        self.section_ids = filter_available_sections(section_ids, capability)
        skipped = [sid for sid in section_ids if sid not in self.section_ids]
        if skipped:
            logger.debug(f"Decode library {capability.version} lacks sections: {skipped}")

        # The section_map routes section IDs to their corresponding adder methods.
        self._handle_sections = {
            'thumbnails': self._add_thumbnails_section,
            'color-profile': self._add_color_profile_section,
            'alpha': self._add_alpha_section,
            'depth': self._add_depth_section,
            'metadata': self._add_metadata_section,
            'transformations': self._add_transformations_section,
            'regions': self._add_regions_section,
            'properties': self._add_properties_section,
        }
        self._decoded_sections = {
            'pixel-aspect-ratio': self._add_pixel_aspect_ratio_section,
            'content-light-level': self._add_content_light_level_section,
            'mastering-display': self._add_mastering_display_section,
        }

    def build(self) -> None:
        """Walk all top-level images and add their report lines."""
        image_ids = self.container.get_top_level_image_ids()
        logger.debug(f"Container has {len(image_ids)} top-level image(s)")
        for image_id in image_ids:
            self._add_image(image_id)

    def _add_image(self, image_id: Any) -> None:
        with self.container.get_image_handle(image_id) as handle:
            self.add_line(format_image_header(
                image_id, handle.width, handle.height, handle.bit_depth, handle.is_primary))

            decoded_ids = [sid for sid in self.section_ids if sid in DECODED_SECTIONS]
            for section_id in self.section_ids:
                if section_id not in DECODED_SECTIONS:
                    self._handle_sections[section_id](handle)

            if decoded_ids:
                logger.debug(f"Decoding image {image_id} for {decoded_ids}")
                with handle.decode() as image:
                    for section_id in decoded_ids:
                        self._decoded_sections[section_id](image)

    # --- Handle sections ---

    def _add_thumbnails_section(self, handle: HeifImageHandle) -> None:
        title = get_title('thumbnails')
        thumbnail_ids = handle.get_thumbnail_image_ids()
        if not thumbnail_ids:
            self.add_line(f"{title}: none", 1)
            return
        self.add_line(f"{title}:", 1)
        for thumbnail_id in thumbnail_ids:
            with handle.get_thumbnail_image(thumbnail_id) as thumbnail:
                self.add_line(
                    f"thumbnail: {format_dimensions(thumbnail.width, thumbnail.height)} {thumbnail.bit_depth}-bit", 2)

    def _add_color_profile_section(self, handle: HeifImageHandle) -> None:
        description = get_color_profile_description(handle.has_icc_profile, handle.has_nclx_profile)
        self.add_line(f"{get_title('color-profile')}: {description}", 1)

    def _add_alpha_section(self, handle: HeifImageHandle) -> None:
        description = get_alpha_channel_description(handle.has_alpha, handle.is_premultiplied_alpha)
        self.add_line(f"{get_title('alpha')}: {description}", 1)

    def _add_depth_section(self, handle: HeifImageHandle) -> None:
        title = get_title('depth')
        if not handle.has_depth_image:
            self.add_line(f"{title}: no", 1)
            return
        self.add_line(f"{title}: yes", 1)
        for depth_id in handle.get_depth_image_ids():
            # Dimensions are the parent image's; the depth handle is opened to
            # confirm the depth image is accessible.
            with handle.get_depth_image(depth_id):
                self.add_line(f"depth: {format_dimensions(handle.width, handle.height)}", 2)
            info = self.container.get_depth_representation_info(handle, depth_id)
            if info is not None:
                self._add_depth_representation(info)

    def _add_depth_representation(self, info: DepthRepresentationInfo) -> None:
        self.add_lines([
            f"z-near: {format_optional_number(info.z_near)}",
            f"z-far: {format_optional_number(info.z_far)}",
            f"d-min: {format_optional_number(info.d_min)}",
            f"d-max: {format_optional_number(info.d_max)}",
            f"representation: {get_representation_string(info.representation_type)}",
        ], 2)
        if info.has_disparity_range():
            self.add_line(f"disparity reference view: {info.disparity_reference_view}", 2)

    def _add_metadata_section(self, handle: HeifImageHandle) -> None:
        title = get_title('metadata')
        block_ids = handle.get_metadata_block_ids()
        if not block_ids:
            self.add_line(f"{title}: none", 1)
            return
        self.add_line(f"{title}:", 1)
        for block_id in block_ids:
            info = handle.get_metadata_block_info(block_id)
            self.add_line(f"{get_metadata_type_string(info)}: {info.size} bytes", 2)

    def _add_transformations_section(self, handle: HeifImageHandle) -> None:
        title = get_title('transformations')
        transformations = self.container.get_transformation_properties(handle)
        if not transformations:
            self.add_line(f"{title}: none", 1)
            return
        self.add_line(f"{title}:", 1)
        self.add_lines((str(item) for item in transformations), 2)

    def _add_regions_section(self, handle: HeifImageHandle) -> None:
        self.add_line(f"{get_title('regions')}:", 1)
        for region_id in handle.get_region_item_ids():
            with self.container.get_region_item(region_id) as region_item:
                geometries = list(region_item.get_region_geometries())
                self.add_line(format_region_summary(
                    region_item.id,
                    region_item.reference_width,
                    region_item.reference_height,
                    len(geometries)), 2)
                self.add_lines((str(geometry) for geometry in geometries), 3)
                self._add_user_descriptions(
                    self.container.get_user_description_properties(region_item.id))

    def _add_properties_section(self, handle: HeifImageHandle) -> None:
        self.add_line(f"{get_title('properties')}:", 1)
        self._add_user_descriptions(self.container.get_user_description_properties(handle))

    def _add_user_descriptions(self, items: Iterable[UserDescriptionProperty]) -> None:
        for item in items:
            self.add_line("user description:", 2)
            self.add_lines(format_user_description(item), 3)

    # --- Decoded image sections ---

    def _add_pixel_aspect_ratio_section(self, image: DecodedImage) -> None:
        ratio = image.pixel_aspect_ratio
        if ratio is not None and not ratio.is_square:
            self.add_line(f"{get_title('pixel-aspect-ratio')}: {ratio}", 1)

    def _add_content_light_level_section(self, image: DecodedImage) -> None:
        clli = image.content_light_level
        if clli is None:
            return
        self.add_line(f"{get_title('content-light-level')}:", 1)
        self.add_lines([
            f"max content light level: {format_number(clli.max_content_light_level)}",
            f"max picture average light level: {format_number(clli.max_picture_average_light_level)}",
        ], 2)

    def _add_mastering_display_section(self, image: DecodedImage) -> None:
        mdcv = image.mastering_display_colour_volume
        if mdcv is None:
            return
        self.add_line(f"{get_title('mastering-display')}:", 1)
        self.add_lines(format_mastering_display(mdcv), 2)
