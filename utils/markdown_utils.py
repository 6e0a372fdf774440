import re

import markdown
from bs4 import BeautifulSoup

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "toc", "attr_list"]

_URL_RE = re.compile(r'https?://[^\s\)\]>"\']+')
_LINK_CONTEXT_ATTRS = ('href=', 'src=', 'srcset=', 'poster=', 'data-src=')


def convert_urls_to_links(text: str) -> str:
    """Turn bare URLs into Markdown links, leaving existing links and attributes alone."""
    processed_lines = []

    for line in text.split('\n'):
        if 'http' in line:
            for match in reversed(list(_URL_RE.finditer(line))):
                prefix = line[:match.start()].lower()
                words = prefix.split()
                last_word = words[-1] if words else ""

                in_markdown_link = prefix.endswith('](') or prefix.endswith('[')
                in_attribute = any(attr in last_word for attr in _LINK_CONTEXT_ATTRS)
                if in_markdown_link or in_attribute or '<' + match.group() in line:
                    continue
                url = match.group()
                line = line[:match.start()] + f'[{url}]({url})' + line[match.end():]

        processed_lines.append(line)

    return '\n'.join(processed_lines)


def markdown_to_html_body(md_text: str) -> str:
    """Convert Markdown text to an HTML fragment ready to drop into a template."""
    md_text = md_text.replace('\xa0', ' ')
    md_text = convert_urls_to_links(md_text)
    return markdown.markdown(md_text, extensions=MARKDOWN_EXTENSIONS, output_format="html5")


def extract_html_body(html: str) -> str:
    """Return the inner HTML of <body> for full documents, the text unchanged otherwise."""
    if not re.search(r"<body[\s>]", html, re.IGNORECASE):
        return html
    soup = BeautifulSoup(html, "html.parser")
    return soup.body.decode_contents().strip()
