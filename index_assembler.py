#!/usr/bin/env python3
"""IndexAssembler - turn rendered-file and subdirectory metadata into pages."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Iterable, List, Mapping, Optional

import config as cfg
import utils as U
from utils.file_tags import TagValue


@dataclass(frozen=True)
class FileMetadata:
    """Public face of one rendered (or cached) file."""
    public_name: str
    tags: Mapping[str, TagValue] = field(default_factory=dict)
    source: str = ""

    def has_tag(self, key: str) -> bool:
        return key in self.tags

    @property
    def extension(self) -> str:
        return PurePosixPath(self.public_name).suffix.lower()


@dataclass(frozen=True)
class DirectoryMetadata:
    """What a directory reports to its parent once fully built."""
    name: str
    thumbnail: Optional[str] = None
    hidden: bool = False


@dataclass
class IndexListing:
    special_images: List[str] = field(default_factory=list)
    images: List[str] = field(default_factory=list)
    videos: List[str] = field(default_factory=list)
    others: List[str] = field(default_factory=list)
    subdirectories: List[DirectoryMetadata] = field(default_factory=list)


class IndexAssembler:
    """Fill the page template for directory indexes and single markup pages."""

    def __init__(self, template: str):
        self.template = template

    def listing(
        self,
        files: Iterable[FileMetadata],
        subdirectories: Iterable[DirectoryMetadata] = (),
    ) -> IndexListing:
        result = IndexListing()
        for meta in files:
            if meta.extension in cfg.IMAGE_EXTENSIONS:
                if meta.has_tag(cfg.SPECIAL_TAG):
                    result.special_images.append(meta.public_name)
                else:
                    result.images.append(meta.public_name)
            elif meta.extension == cfg.VIDEO_OUTPUT_EXTENSION:
                result.videos.append(meta.public_name)
            else:
                result.others.append(meta.public_name)
        result.subdirectories = [d for d in subdirectories if not d.hidden]
        return result

    def render_index(self, rel_dir: str, body: str, listing: IndexListing) -> str:
        files_html = (
            U.render_gallery(listing.special_images, cfg.SPECIAL_TAG)
            + U.render_video_gallery(listing.videos)
            + U.render_gallery(listing.images)
            + U.render_file_list(listing.others)
        )
        subdirs_html = "\n".join(
            U.render_subdir_entry(d.name, d.thumbnail) for d in listing.subdirectories
        )
        name = PurePosixPath(rel_dir).name
        return U.apply_template(
            self.template,
            {
                "TITLE": U.render_name(name) if name else "Home",
                "BODY": body,
                "BREADCRUMB": U.render_breadcrumbs(rel_dir),
                "FILES": files_html,
                "SUBDIRS": subdirs_html,
            },
        )

    def render_page(self, rel_path: str, body: str) -> str:
        """Single markup page: breadcrumb ends with the page itself, no listings."""
        path = PurePosixPath(rel_path)
        title = U.parse_file_name(path.name).stem
        return U.apply_template(
            self.template,
            {
                "TITLE": U.render_name(title),
                "BODY": body,
                "BREADCRUMB": U.render_breadcrumbs(str(path.parent), current=title),
            },
        )
