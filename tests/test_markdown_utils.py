import pytest

pytest.importorskip("markdown")
pytest.importorskip("bs4")

from utils.markdown_utils import convert_urls_to_links, extract_html_body, markdown_to_html_body


def test_markdown_body_is_a_fragment():
    body = markdown_to_html_body("# Gallery\n\nSome *text*")

    assert '<h1 id="gallery">Gallery</h1>' in body
    assert "<em>text</em>" in body
    assert "<html" not in body


def test_bare_urls_become_links():
    body = markdown_to_html_body("Visita https://example.com")

    assert '<a href="https://example.com">https://example.com</a>' in body


def test_existing_links_are_left_alone():
    text = "See [this](https://example.com) and <a href=\"https://x.com\">x</a>"

    assert convert_urls_to_links(text) == text


def test_extract_body_from_full_document():
    html = "<!DOCTYPE html><html><head><title>t</title></head><body>\n<p>Hi</p>\n</body></html>"

    assert extract_html_body(html) == "<p>Hi</p>"


def test_fragment_is_returned_unchanged():
    assert extract_html_body("<p>Fragment</p>") == "<p>Fragment</p>"
