from pathlib import Path
from typing import List, Tuple
import shutil


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def copy_file(src: Path, dest: Path) -> Path:
    """Byte-for-byte copy. The destination directory must already exist."""
    shutil.copyfile(src, dest)
    return dest


def _is_hidden_name(name: str) -> bool:
    return name.startswith(".")


def split_entries(directory: Path) -> Tuple[List[Path], List[Path]]:
    """Return (subdirectories, regular files) of ``directory`` sorted by name.

    Symlinks are skipped, as are hidden subdirectories.
    """
    subdirectories: List[Path] = []
    files: List[Path] = []
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_symlink():
            continue
        if entry.is_dir():
            if not _is_hidden_name(entry.name):
                subdirectories.append(entry)
        elif entry.is_file():
            files.append(entry)
    return subdirectories, files


def remove_path(path: Path) -> None:
    if path.is_dir():
        shutil.rmtree(path)
    elif path.exists():
        path.unlink()
