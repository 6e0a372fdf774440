"""Content-addressable cache of files rendered by previous builds.

The cache maps the MD5 digest of a source file to the path that produced
it. Lookups only see the table loaded from disk at the start of the build;
new entries go to a separate buffer that replaces the file on ``persist``.
"""

from __future__ import annotations

import hashlib
import os
import re
import tempfile
import threading
from pathlib import Path
from typing import Dict, Optional

from utils.errors import CacheCorruptionError

_HASH_RE = re.compile(r"^[0-9a-f]{32}$")
_CHUNK_SIZE = 1024 * 1024


def file_checksum(path: Path) -> str:
    """Return the hex MD5 digest of the file contents, streamed in chunks."""
    digest = hashlib.md5()
    with open(path, "rb") as fh:
        for chunk in iter(lambda: fh.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def _parse_cache(path: Path) -> Dict[str, str]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}

    table: Dict[str, str] = {}
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        parts = line.split(maxsplit=1)
        if len(parts) != 2 or not _HASH_RE.match(parts[0]):
            raise CacheCorruptionError(path, line_number, raw)
        table[parts[0]] = parts[1]
    return table


class BuildCache:
    """Read table from the previous build plus a write buffer for this one."""

    def __init__(self, path: Path, table: Optional[Dict[str, str]] = None):
        self.path = Path(path)
        self._table: Dict[str, str] = dict(table or {})
        self._pending: Dict[str, str] = {}
        self._lock = threading.Lock()

    @classmethod
    def load(cls, path: Path) -> "BuildCache":
        """Load the cache persisted by the last successful build (empty if absent)."""
        return cls(path, _parse_cache(Path(path)))

    @classmethod
    def empty(cls, path: Path) -> "BuildCache":
        return cls(path)

    def __len__(self) -> int:
        return len(self._table)

    def lookup(self, content_hash: str) -> Optional[str]:
        return self._table.get(content_hash)

    def record(self, content_hash: str, source_path: str) -> None:
        """Buffer ``content_hash -> source_path``.

        One path is kept per hash: the first one recorded, unless the path
        that owned the hash in the previous build records it too.
        """
        with self._lock:
            if content_hash not in self._pending or self._table.get(content_hash) == source_path:
                self._pending[content_hash] = source_path

    @property
    def pending(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._pending)

    def persist(self) -> None:
        """Atomically replace the cache file with the entries recorded in this build."""
        lines = [f"{content_hash} {source}\n" for content_hash, source in self.pending.items()]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=self.path.name + ".", suffix=".tmp", dir=str(self.path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.writelines(lines)
            os.replace(tmp_name, self.path)
        finally:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
