#!/usr/bin/env python3
"""
SiteBuilder - clase principal que orquesta un build incremental completo.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from contextlib import nullcontext
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import config as cfg
import utils as U
from directory_walker import DirectoryWalker
from file_renderer import FileRenderer, VideoEncoder
from index_assembler import DirectoryMetadata, IndexAssembler


@dataclass(frozen=True)
class BuildReport:
    root: DirectoryMetadata
    rendered: int
    cached: int
    directories: int


class SiteBuilder:
    """Build the output tree from the content tree, reusing the previous cache."""

    def __init__(
        self,
        content_dir: Path = cfg.CONTENT_DIR,
        output_dir: Path = cfg.OUTPUT_DIR,
        *,
        template_file: Path = cfg.TEMPLATE_FILE,
        stylesheet_file: Path = cfg.STYLESHEET_FILE,
        cache_file: Path = cfg.CACHE_FILE,
        jobs: Optional[int] = None,
        force: bool = False,
        verbose: bool = False,
        converter: Optional[Callable[[str], str]] = None,
        encoder: Optional[VideoEncoder] = None,
    ):
        self.content_dir = Path(content_dir)
        self.output_dir = Path(output_dir)
        self.template_file = Path(template_file)
        self.stylesheet_file = Path(stylesheet_file)
        self.cache_file = Path(cache_file)
        self.jobs = jobs or cfg.MAX_WORKERS
        self.force = force
        self.verbose = verbose
        self.converter = converter
        self.encoder = encoder

    def build(self) -> BuildReport:
        """Run the whole build. Any BuildError aborts it before the cache is persisted."""
        template = self._load_template()
        cache = self._load_cache()
        U.ensure_dir(self.output_dir)

        renderer = FileRenderer(
            self.content_dir,
            self.output_dir,
            cache,
            IndexAssembler(template),
            converter=self.converter,
            encoder=self.encoder,
            verbose=self.verbose,
        )

        pool = ThreadPoolExecutor(max_workers=self.jobs) if self.jobs > 1 else nullcontext()
        with pool as executor:
            walker = DirectoryWalker(renderer, executor, reserved_root_names=[self.stylesheet_file.name])
            root = walker.walk()

        U.copy_file(self.stylesheet_file, self.output_dir / self.stylesheet_file.name)
        cache.persist()

        report = BuildReport(root, renderer.rendered, renderer.cached, walker.directories)
        print(
            f"✅ Build completed: {report.rendered} rendered, {report.cached} cached, "
            f"{report.directories} director(ies) → {self.output_dir}"
        )
        return report

    def clean(self) -> None:
        """Remove the output tree and the cache so the next build starts from scratch."""
        U.remove_path(self.output_dir)
        U.remove_path(self.cache_file)
        print(f"🧹 Removed {self.output_dir} and {self.cache_file}")

    # --------- helpers ---------
    def _load_template(self) -> str:
        if not self.content_dir.is_dir():
            raise U.ConfigurationError(f"content directory not found: {self.content_dir}")
        if not self.template_file.is_file():
            raise U.ConfigurationError(f"template not found: {self.template_file}")
        if not self.stylesheet_file.is_file():
            raise U.ConfigurationError(f"stylesheet not found: {self.stylesheet_file}")
        return self.template_file.read_text(encoding="utf-8")

    def _load_cache(self) -> U.BuildCache:
        if self.force:
            return U.BuildCache.empty(self.cache_file)
        cache = U.BuildCache.load(self.cache_file)
        if len(cache) and not self.output_dir.is_dir():
            # Entries describe an output tree that is gone.
            print(f"⚠️  {self.output_dir} does not exist, ignoring {len(cache)} cache entries")
            return U.BuildCache.empty(self.cache_file)
        return cache
