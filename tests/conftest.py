import sys
from pathlib import Path

import pytest

# Ensure the repo root is on sys.path for absolute imports.
REPO_ROOT = Path(__file__).resolve().parents[1]
repo_root_str = str(REPO_ROOT)
if repo_root_str not in sys.path:
    sys.path.insert(0, repo_root_str)

TEMPLATE = (
    "<html><head><title>{TITLE}</title></head><body>"
    "<nav>{BREADCRUMB}</nav><main>{BODY}</main>"
    "<section>{FILES}</section><ul>{SUBDIRS}</ul>"
    "</body></html>"
)


class FakeEncoder:
    """Stands in for ffmpeg: writes a marker file and remembers the calls."""

    def __init__(self, fail: bool = False):
        self.calls = []
        self.fail = fail

    def encode(self, source: Path, destination: Path) -> None:
        from utils.errors import RenderError

        self.calls.append((source, destination))
        if self.fail:
            raise RenderError(source, "ffmpeg exited with status 1")
        destination.write_bytes(b"mp4:" + source.read_bytes())


class CountingConverter:
    def __init__(self):
        self.calls = 0

    def __call__(self, text: str) -> str:
        from utils.markdown_utils import markdown_to_html_body

        self.calls += 1
        return markdown_to_html_body(text)


@pytest.fixture
def site(tmp_path: Path):
    """Content tree, output tree, template, stylesheet and cache paths under tmp_path."""
    content = tmp_path / "content"
    content.mkdir()
    template = tmp_path / "template.html"
    template.write_text(TEMPLATE, encoding="utf-8")
    stylesheet = tmp_path / "style.css"
    stylesheet.write_text("body { margin: 6%; }\n", encoding="utf-8")

    class Site:
        root = tmp_path
        output = tmp_path / "build"
        cache_file = tmp_path / ".build_cache"

    Site.content = content
    Site.template = template
    Site.stylesheet = stylesheet
    return Site


@pytest.fixture
def fake_encoder() -> FakeEncoder:
    return FakeEncoder()


@pytest.fixture
def converter() -> CountingConverter:
    return CountingConverter()
