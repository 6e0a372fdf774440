from index_assembler import DirectoryMetadata, FileMetadata, IndexAssembler
from utils import html_tools

from conftest import TEMPLATE


def test_listing_partitions_files_by_kind():
    assembler = IndexAssembler(TEMPLATE)
    files = [
        FileMetadata("cover.jpg", {"special": True}),
        FileMetadata("beach.png", {"main": True}),
        FileMetadata("clip.mp4"),
        FileMetadata("notes.html"),
        FileMetadata("paper.pdf"),
    ]

    listing = assembler.listing(files, [DirectoryMetadata("a"), DirectoryMetadata("b", hidden=True)])

    assert listing.special_images == ["cover.jpg"]
    assert listing.images == ["beach.png"]
    assert listing.videos == ["clip.mp4"]
    assert listing.others == ["notes.html", "paper.pdf"]
    assert [d.name for d in listing.subdirectories] == ["a"]


def test_render_index_fills_every_placeholder():
    assembler = IndexAssembler(TEMPLATE)
    listing = assembler.listing(
        [FileMetadata("flower.jpg", {"main": True}), FileMetadata("clip.mp4")],
        [DirectoryMetadata("summer-trip", "beach.jpg")],
    )

    page = assembler.render_index("travel", "<h1>Travel</h1>", listing)

    assert "<title>Travel</title>" in page
    assert "<main><h1>Travel</h1></main>" in page
    assert "<img src='flower.jpg'>" in page
    assert '<source src="clip.mp4" type="video/mp4">' in page
    assert '<img src="summer-trip/beach.jpg" class="thumbnail">Summer trip</a>' in page
    assert page.index("video-gallery") < page.index("image-gallery")
    assert "{" not in page


def test_root_index_title_and_breadcrumb():
    page = IndexAssembler(TEMPLATE).render_index("", "", IndexAssembler(TEMPLATE).listing([]))

    assert "<title>Home</title>" in page
    assert '<nav><ul><li><a href="/">home</a></li></ul></nav>' in page


def test_breadcrumbs_link_every_ancestor():
    trail = html_tools.render_breadcrumbs("travel/summer-trip", current="day-one")

    assert trail == (
        '<ul><li><a href="/">home</a></li>'
        '<li><a href="/travel/">Travel</a></li>'
        '<li><a href="/travel/summer-trip/">Summer trip</a></li>'
        "<li>Day one</li></ul>"
    )


def test_subdir_entry_without_thumbnail():
    assert html_tools.render_subdir_entry("old-stuff", None) == '<li><a href="old-stuff/">Old stuff</a></li>'


def test_links_are_quoted():
    fragment = html_tools.render_file_list(["my notes.html"])

    assert 'href="my%20notes.html"' in fragment
    assert ">my notes.html<" in fragment


def test_apply_template_is_literal():
    out = html_tools.apply_template("{BODY}|{BODY}|{FILES}", {"BODY": "$1 \\g<0>"})

    assert out == "$1 \\g<0>|$1 \\g<0>|"
