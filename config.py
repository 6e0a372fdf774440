from pathlib import Path
import os

CONTENT_DIR = Path(os.getenv("ARCHIVE_CONTENT_DIR", "content"))
OUTPUT_DIR = Path(os.getenv("ARCHIVE_OUTPUT_DIR", ".build"))
TEMPLATE_FILE = Path(os.getenv("ARCHIVE_TEMPLATE", "template.html"))
STYLESHEET_FILE = Path(os.getenv("ARCHIVE_STYLESHEET", "style.css"))
CACHE_FILE = Path(os.getenv("ARCHIVE_CACHE_FILE", ".build_cache"))


def get_default_jobs() -> int:
    """
    Number of worker threads used to render files.

    Priority:
    - ARCHIVE_JOBS if defined
    - CPU count of the machine
    """
    env_value = os.getenv("ARCHIVE_JOBS")
    if env_value:
        return max(1, int(env_value))
    return os.cpu_count() or 1


MAX_WORKERS = get_default_jobs()

# Separates the real name from tags: "flower+++main.jpg", "sunset+++by=Alice.jpg"
TAG_DELIMITER = os.getenv("ARCHIVE_TAG_DELIMITER", "+++")
MAIN_TAG = "main"
SPECIAL_TAG = "special"

# Stems of files that are never rendered nor listed
IGNORE_FOR_RENDER = {".DS_Store", "IGNORE"}
# A directory holding this file is built but left out of its parent's listing
HIDE_MARKER = "IGNORE"
INDEX_FILES = ("index.md", "index.html")
INDEX_OUTPUT = "index.html"

MARKDOWN_EXTENSIONS = {".md", ".markdown"}
HTML_EXTENSIONS = {".html", ".htm"}
MARKUP_EXTENSIONS = MARKDOWN_EXTENSIONS | HTML_EXTENSIONS
MARKUP_OUTPUT_EXTENSION = ".html"
VIDEO_EXTENSIONS = {".mov", ".mp4", ".m4v"}
VIDEO_OUTPUT_EXTENSION = ".mp4"
IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}

FFMPEG_BIN = os.getenv("ARCHIVE_FFMPEG", "ffmpeg")
FFMPEG_PROFILE = (
    "-c:v", "libx264",
    "-crf", "23",
    "-c:a", "aac",
    "-movflags", "faststart",
    "-y",
)
