#!/usr/bin/env python3
"""
Build the static archive.

Usage:
    python build_site.py [--content DIR] [--output DIR] [--jobs N] [--force] [--clean]

Notes:
- Files whose content was already published by a previous build are skipped
  (see .build_cache). Use --force to ignore the cache, --clean to start over.
- Tags go in file names after the delimiter: "flower+++main.jpg" makes
  flower.jpg the thumbnail of its directory.
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable

import config as cfg
from site_builder import SiteBuilder
from utils.errors import BuildError


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Incremental static archive builder: pages, videos and galleries.",
        epilog=(
            f"Tags are added to file names after '{cfg.TAG_DELIMITER}': "
            f"'photo{cfg.TAG_DELIMITER}main.jpg' is used as the directory thumbnail, "
            f"'photo{cfg.TAG_DELIMITER}special.jpg' goes to the special gallery."
        ),
    )
    p.add_argument("--content", type=Path, default=cfg.CONTENT_DIR,
                   help=f"Source content tree (default: {cfg.CONTENT_DIR})")
    p.add_argument("--output", type=Path, default=cfg.OUTPUT_DIR,
                   help=f"Output tree (default: {cfg.OUTPUT_DIR})")
    p.add_argument("--template", type=Path, default=cfg.TEMPLATE_FILE,
                   help=f"Page template (default: {cfg.TEMPLATE_FILE})")
    p.add_argument("--stylesheet", type=Path, default=cfg.STYLESHEET_FILE,
                   help=f"Stylesheet copied to the output root (default: {cfg.STYLESHEET_FILE})")
    p.add_argument("--cache-file", type=Path, default=cfg.CACHE_FILE,
                   help=f"Build cache (default: {cfg.CACHE_FILE})")
    p.add_argument("-j", "--jobs", type=int, default=cfg.MAX_WORKERS,
                   help="Files rendered in parallel (ARCHIVE_JOBS or CPU count)")
    p.add_argument("-f", "--force", action="store_true",
                   help="Ignore the previous cache and render everything again")
    p.add_argument("--clean", action="store_true",
                   help="Delete the output tree and the cache before building")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Also report files skipped thanks to the cache")
    return p.parse_args(argv)


def main(argv: Iterable[str] | None = None) -> int:
    args = parse_args(argv)
    builder = SiteBuilder(
        args.content,
        args.output,
        template_file=args.template,
        stylesheet_file=args.stylesheet,
        cache_file=args.cache_file,
        jobs=max(1, args.jobs),
        force=args.force,
        verbose=args.verbose,
    )

    try:
        if args.clean:
            builder.clean()
        builder.build()
    except BuildError as exc:
        print(f"❌ Build failed: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
