#!/usr/bin/env python3
"""
DirectoryWalker - recorre el árbol de contenido en post-orden.

Each directory is finished only after all of its subdirectories (including
their own index pages) and all of its files are rendered; it then writes its
``index.html`` and reports a DirectoryMetadata to its parent.
"""
from __future__ import annotations

from concurrent.futures import Executor
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import config as cfg
import utils as U
from file_renderer import FileRenderer, is_ignored
from index_assembler import DirectoryMetadata, FileMetadata


class DirectoryWalker:
    """Build every directory of the content tree, children before parents."""

    def __init__(
        self,
        renderer: FileRenderer,
        executor: Optional[Executor] = None,
        reserved_root_names: Iterable[str] = (),
    ):
        self.renderer = renderer
        # Names written to the output root by the builder itself (the stylesheet)
        self.reserved_root_names = frozenset(reserved_root_names)
        self.assembler = renderer.assembler
        self.content_dir = renderer.content_dir
        self.output_dir = renderer.output_dir
        self.executor = executor
        self.directories = 0

    def walk(self, rel_dir: str = "") -> DirectoryMetadata:
        source_dir = self.content_dir / rel_dir
        out_dir = U.ensure_dir(self.output_dir / rel_dir)

        subdirectories, files = U.split_entries(source_dir)

        children = [self.walk(self._child(rel_dir, sub.name)) for sub in subdirectories]

        renderable = [
            path for path in files
            if path.name not in cfg.INDEX_FILES and not is_ignored(path.name)
        ]
        self._check_collisions(rel_dir, renderable)
        rendered = [meta for meta in self._render_files(renderable) if meta is not None]

        listing = self.assembler.listing(rendered, children)
        index_path = out_dir / cfg.INDEX_OUTPUT
        try:
            page = self.assembler.render_index(rel_dir, self._index_body(source_dir), listing)
            index_path.write_text(page, encoding="utf-8")
        except U.BuildError:
            raise
        except Exception as exc:
            raise U.RenderError(self._child(rel_dir, cfg.INDEX_OUTPUT), str(exc)) from exc
        self.directories += 1
        print(f"📁 Index\t/{rel_dir}")

        return DirectoryMetadata(
            name=source_dir.name,
            thumbnail=self._thumbnail(rendered),
            hidden=(source_dir / cfg.HIDE_MARKER).is_file(),
        )

    # --------- helpers ---------
    @staticmethod
    def _child(rel_dir: str, name: str) -> str:
        return f"{rel_dir}/{name}" if rel_dir else name

    def _render_files(self, files: List[Path]) -> List[Optional[FileMetadata]]:
        # Results keep source order whatever order the workers finish in.
        if self.executor is None:
            return [self.renderer.render(path) for path in files]
        return list(self.executor.map(self.renderer.render, files))

    def _index_body(self, source_dir: Path) -> str:
        index_md = source_dir / "index.md"
        index_html = source_dir / "index.html"
        if index_md.is_file():
            return self.renderer.converter(index_md.read_text(encoding="utf-8"))
        if index_html.is_file():
            return U.extract_html_body(index_html.read_text(encoding="utf-8"))
        return ""

    @staticmethod
    def _thumbnail(files: List[FileMetadata]) -> Optional[str]:
        for meta in files:
            if meta.has_tag(cfg.MAIN_TAG):
                return meta.public_name
        return None

    def _check_collisions(self, rel_dir: str, files: List[Path]) -> None:
        owners: Dict[str, str] = {}
        for path in files:
            public_name = U.parse_file_name(path.name).canonical_name
            rel_path = self._child(rel_dir, path.name)
            if public_name == cfg.INDEX_OUTPUT:
                raise U.OutputCollisionError(rel_path, f"would overwrite the index of /{rel_dir}")
            if not rel_dir and public_name in self.reserved_root_names:
                raise U.OutputCollisionError(rel_path, f"{public_name} is reserved at the output root")
            if public_name in owners:
                raise U.OutputCollisionError(
                    rel_path, f"same output name as {owners[public_name]} ({public_name})"
                )
            owners[public_name] = rel_path
