"""Tags embedded in file names.

A file name carries its public name followed by tag segments::

    flower+++main.jpg          -> flower.jpg   {"main": True}
    sunset+++by=Alice.jpg      -> sunset.jpg   {"by": "Alice"}

There is no escaping: values cannot contain the delimiter nor ``=``.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Dict, NamedTuple, Union

import config as cfg

TagValue = Union[str, bool]


class ParsedName(NamedTuple):
    canonical_name: str
    tags: Dict[str, TagValue]
    stem: str
    extension: str


def rendered_extension(extension: str) -> str:
    """Map a source extension to the extension of its published artifact."""
    lower = extension.lower()
    if lower in cfg.MARKUP_EXTENSIONS:
        return cfg.MARKUP_OUTPUT_EXTENSION
    if lower in cfg.VIDEO_EXTENSIONS:
        return cfg.VIDEO_OUTPUT_EXTENSION
    return extension


def parse_tags(segments) -> Dict[str, TagValue]:
    tags: Dict[str, TagValue] = {}
    for segment in segments:
        segment = segment.strip()
        if not segment:
            continue
        if "=" in segment:
            key, value = segment.split("=", 1)
            tags[key.strip()] = value.strip()
        else:
            tags[segment] = True
    return tags


def parse_file_name(name: str, delimiter: str | None = None) -> ParsedName:
    """Split ``name`` into its canonical output name and its tags."""
    delimiter = delimiter or cfg.TAG_DELIMITER
    path = PurePath(name)
    extension = path.suffix
    segments = path.stem.split(delimiter)
    stem = segments[0].strip()
    tags = parse_tags(segments[1:])
    return ParsedName(f"{stem}{rendered_extension(extension)}", tags, stem, extension)
