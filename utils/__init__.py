"""Reexporta helpers comunes del builder."""

from utils.build_cache import BuildCache, file_checksum
from utils.errors import (
    BuildError,
    CacheCorruptionError,
    ConfigurationError,
    OutputCollisionError,
    RenderError,
)
from utils.file_ops import copy_file, ensure_dir, remove_path, split_entries
from utils.file_tags import ParsedName, parse_file_name, rendered_extension
from utils.html_tools import (
    apply_template,
    render_breadcrumbs,
    render_file_list,
    render_gallery,
    render_name,
    render_subdir_entry,
    render_video_gallery,
)
from utils.markdown_utils import (
    convert_urls_to_links,
    extract_html_body,
    markdown_to_html_body,
)

__all__ = [
    "BuildCache",
    "BuildError",
    "CacheCorruptionError",
    "ConfigurationError",
    "OutputCollisionError",
    "ParsedName",
    "RenderError",
    "apply_template",
    "convert_urls_to_links",
    "copy_file",
    "ensure_dir",
    "extract_html_body",
    "file_checksum",
    "markdown_to_html_body",
    "parse_file_name",
    "remove_path",
    "render_breadcrumbs",
    "render_file_list",
    "render_gallery",
    "render_name",
    "render_subdir_entry",
    "render_video_gallery",
    "rendered_extension",
    "split_entries",
]
