import html
from pathlib import PurePosixPath
from typing import Iterable, Mapping, Sequence
from urllib.parse import quote

PLACEHOLDERS = ("{TITLE}", "{BODY}", "{BREADCRUMB}", "{FILES}", "{SUBDIRS}")


def apply_template(template: str, values: Mapping[str, str]) -> str:
    """
    Literal substitution of ``{NAME}`` placeholders.

    Placeholders without a value are replaced with an empty string so that
    single pages do not leak ``{FILES}`` or ``{SUBDIRS}``.
    """
    rendered = template
    for placeholder in PLACEHOLDERS:
        key = placeholder[1:-1]
        rendered = rendered.replace(placeholder, values.get(key, ""))
    return rendered


def render_name(name: str) -> str:
    """Display name: dashes become spaces, first letter upper-cased."""
    spaced = name.replace("-", " ")
    return spaced[:1].upper() + spaced[1:]


def _href(value: str) -> str:
    return quote(value, safe="/~!*()'")


def render_breadcrumbs(rel_path: str, current: str | None = None) -> str:
    """Trail from the site root to ``rel_path``, optionally ending with ``current``."""
    parts = [part for part in PurePosixPath(rel_path).parts if part not in ("", ".", "/")]
    items = ['<li><a href="/">home</a></li>']
    for i, part in enumerate(parts):
        url = "/" + "/".join(parts[: i + 1]) + "/"
        items.append(f'<li><a href="{_href(url)}">{html.escape(render_name(part))}</a></li>')
    if current:
        items.append(f"<li>{html.escape(render_name(current))}</li>")
    return f"<ul>{''.join(items)}</ul>"


def render_gallery(images: Sequence[str], class_name: str = "") -> str:
    if not images:
        return ""
    entries = []
    for image in images:
        href = _href(image)
        entries.append(
            f"<div class='image {class_name}'><a href='{href}'><img src='{href}'></a></div>"
        )
    return (
        f"\n<div class='image-gallery {class_name}'>\n"
        + "\n".join(entries)
        + "\n</div>\n"
    )


def render_video_gallery(videos: Sequence[str]) -> str:
    if not videos:
        return ""
    entries = [
        "<div class='video'>\n"
        "  <video controls>\n"
        f"    <source src=\"{_href(video)}\" type=\"video/mp4\">\n"
        "  </video>\n"
        "</div>"
        for video in videos
    ]
    return "\n<div class='video-gallery'>\n" + "\n".join(entries) + "\n</div>\n"


def render_file_list(files: Iterable[str]) -> str:
    items = [f'<li><a href="{_href(name)}">{html.escape(name)}</a></li>' for name in files]
    if not items:
        return ""
    return "<ul class='file-list'>\n" + "\n".join(items) + "\n</ul>\n"


def render_subdir_entry(name: str, thumbnail: str | None) -> str:
    href = _href(name)
    label = html.escape(render_name(name))
    if thumbnail:
        src = _href(f"{name}/{thumbnail}")
        return f'<li><a href="{href}/"><img src="{src}" class="thumbnail">{label}</a></li>'
    return f'<li><a href="{href}/">{label}</a></li>'
