#!/usr/bin/env python3
"""FileRenderer - publish one source file, skipping content already built."""
from __future__ import annotations

from pathlib import Path, PurePath
from typing import Callable, Optional, Protocol
import subprocess
import threading

import config as cfg
import utils as U
from index_assembler import FileMetadata, IndexAssembler
from utils.file_ops import copy_file


class VideoEncoder(Protocol):
    """Interfaz del transcodificador, fácil de mockear en tests."""
    def encode(self, source: Path, destination: Path) -> None:
        ...


class FfmpegVideoEncoder:
    """Real implementation running ffmpeg with the fixed web profile."""

    def __init__(self, binary: str | None = None):
        self.binary = binary or cfg.FFMPEG_BIN

    def command(self, source: Path, destination: Path) -> list[str]:
        return [self.binary, "-i", str(source), *cfg.FFMPEG_PROFILE, str(destination)]

    def encode(self, source: Path, destination: Path) -> None:
        try:
            subprocess.run(self.command(source, destination), check=True, capture_output=True, text=True)
        except FileNotFoundError as exc:
            raise U.RenderError(source, f"video encoder not found: {self.binary}") from exc
        except subprocess.CalledProcessError as exc:
            reason = f"{self.binary} exited with status {exc.returncode}"
            stderr_lines = (exc.stderr or "").strip().splitlines()
            if stderr_lines:
                reason += f": {stderr_lines[-1]}"
            raise U.RenderError(source, reason) from exc


def is_ignored(name: str) -> bool:
    return PurePath(name).stem in cfg.IGNORE_FOR_RENDER


def file_family(extension: str) -> str:
    lower = extension.lower()
    if lower in cfg.MARKUP_EXTENSIONS:
        return "markup"
    if lower in cfg.VIDEO_EXTENSIONS:
        return "video"
    return "other"


class FileRenderer:
    """Render files of the content tree into the output tree."""

    def __init__(
        self,
        content_dir: Path,
        output_dir: Path,
        cache: U.BuildCache,
        assembler: IndexAssembler,
        *,
        converter: Optional[Callable[[str], str]] = None,
        encoder: Optional[VideoEncoder] = None,
        verbose: bool = False,
    ):
        self.content_dir = Path(content_dir)
        self.output_dir = Path(output_dir)
        self.cache = cache
        self.assembler = assembler
        self.converter = converter or U.markdown_to_html_body
        self.encoder = encoder or FfmpegVideoEncoder()
        self.verbose = verbose
        self.rendered = 0
        self.cached = 0
        self._lock = threading.Lock()
        # Outputs this build is (re)writing
        self._claimed: set[Path] = set()

    def output_path(self, source: Path) -> Path:
        rel_parent = source.parent.relative_to(self.content_dir)
        return self.output_dir / rel_parent / U.parse_file_name(source.name).canonical_name

    def render(self, source: Path) -> Optional[FileMetadata]:
        """Publish ``source`` and return its metadata, or None for ignored files."""
        source = Path(source)
        if is_ignored(source.name):
            return None

        rel_path = source.relative_to(self.content_dir).as_posix()
        parsed = U.parse_file_name(source.name)
        metadata = FileMetadata(parsed.canonical_name, dict(parsed.tags), rel_path)
        destination = self.output_path(source)

        try:
            content_hash = U.file_checksum(source)
        except OSError as exc:
            raise U.RenderError(rel_path, f"cannot read file: {exc}") from exc

        cached_path = self.cache.lookup(content_hash)
        # A hit needs this very path to have produced the hash, and its output still on disk.
        if cached_path == rel_path and destination.exists():
            if self.verbose:
                print(f"⏭️  Cached\t{rel_path}")
            self.cache.record(content_hash, rel_path)
            self._count(cached=True)
            return metadata

        self._claim(destination)
        try:
            if cached_path is not None and self._reuse(cached_path, content_hash, source, destination):
                if self.verbose:
                    print(f"♻️  Reused\t{rel_path} ← {cached_path}")
                self.cache.record(content_hash, rel_path)
                self._count(cached=True)
                return metadata

            print(f"🎬 Rendering\t{rel_path}")
            self._transform(source, rel_path, parsed.extension.lower(), destination)
        except U.BuildError:
            raise
        except Exception as exc:
            raise U.RenderError(rel_path, str(exc)) from exc

        self.cache.record(content_hash, rel_path)
        self._count(cached=False)
        return metadata

    # --------- helpers ---------
    def _claim(self, destination: Path) -> None:
        with self._lock:
            self._claimed.add(destination)

    def _reuse(self, cached_path: str, content_hash: str, source: Path, destination: Path) -> bool:
        """Copy the output another path built from the same bytes, if it is still valid.

        Markup pages embed their own breadcrumb, so only videos and verbatim
        copies are shared. The other source must still hold the same bytes and
        its output must not be rewritten by this build.
        """
        family = file_family(source.suffix)
        if family == "markup":
            return False
        other_source = self.content_dir / cached_path
        if not other_source.is_file() or file_family(other_source.suffix) != family:
            return False
        other_output = self.output_path(other_source)
        if not other_output.is_file():
            return False
        with self._lock:
            if other_output in self._claimed:
                return False
        if U.file_checksum(other_source) != content_hash:
            return False
        copy_file(other_output, destination)
        return True

    def _transform(self, source: Path, rel_path: str, extension: str, destination: Path) -> None:
        if extension in cfg.MARKUP_EXTENSIONS:
            self._render_markup(source, rel_path, extension, destination)
        elif extension in cfg.VIDEO_EXTENSIONS:
            if not destination.parent.is_dir():
                raise U.RenderError(rel_path, f"output directory missing: {destination.parent}")
            self.encoder.encode(source, destination)
        else:
            copy_file(source, destination)

    def _render_markup(self, source: Path, rel_path: str, extension: str, destination: Path) -> None:
        text = source.read_text(encoding="utf-8")
        if extension in cfg.MARKDOWN_EXTENSIONS:
            body = self.converter(text)
        else:
            body = U.extract_html_body(text)
        page = self.assembler.render_page(rel_path, body)
        destination.write_text(page, encoding="utf-8")

    def _count(self, *, cached: bool) -> None:
        with self._lock:
            if cached:
                self.cached += 1
            else:
                self.rendered += 1
