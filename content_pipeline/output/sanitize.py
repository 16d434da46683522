"""
HTML sanitization for rendered article bodies.

Article bodies may come from untrusted contributors, and Python-Markdown
passes raw HTML through unchanged. The converted fragment is therefore
filtered against an allowlist with BeautifulSoup:
- Script-like elements are removed together with their contents
- Other unknown elements are unwrapped, keeping their text
- Attributes outside the per-tag allowlist (including every ``on*`` handler)
  are dropped
- ``href``/``src`` values with a non-web scheme (``javascript:``, ``data:``,
  ``vbscript:``, ...) are dropped
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from bs4 import BeautifulSoup, Comment

DROP_TAGS = [
    "script",
    "style",
    "iframe",
    "frame",
    "frameset",
    "object",
    "embed",
    "applet",
    "form",
    "input",
    "button",
    "select",
    "textarea",
    "link",
    "meta",
    "base",
    "noscript",
    "template",
    "svg",
    "math",
]

ALLOWED_TAGS = {
    "p", "br", "hr", "h1", "h2", "h3", "h4", "h5", "h6",
    "em", "strong", "b", "i", "u", "s", "del", "ins", "mark", "small", "sub", "sup",
    "code", "pre", "kbd", "samp", "blockquote",
    "ul", "ol", "li", "dl", "dt", "dd",
    "a", "img", "abbr", "span", "div", "figure", "figcaption",
    "table", "thead", "tbody", "tfoot", "tr", "th", "td", "caption",
}

GLOBAL_ATTRS = {"id", "title"}
ALLOWED_ATTRS = {
    "a": {"href"},
    "img": {"src", "alt", "width", "height"},
    "ol": {"start"},
    "code": {"class"},
    "th": {"align", "colspan", "rowspan"},
    "td": {"align", "colspan", "rowspan"},
}

URL_ATTRS = {"href", "src"}
SAFE_SCHEMES = {"", "http", "https", "mailto"}

_CONTROL_RE = re.compile(r"[\x00-\x20\x7f]+")


def sanitize_html(html: str) -> str:
    """Return ``html`` with executable content removed."""
    soup = BeautifulSoup(html, "html.parser")

    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()

    for tag in soup.find_all(DROP_TAGS):
        # nested matches are already gone with their parent
        if tag.decomposed:
            continue
        tag.decompose()

    for tag in soup.find_all(True):
        if tag.name not in ALLOWED_TAGS:
            tag.unwrap()
            continue
        allowed = GLOBAL_ATTRS | ALLOWED_ATTRS.get(tag.name, set())
        for attr in list(tag.attrs):
            if attr not in allowed:
                del tag[attr]
            elif attr in URL_ATTRS and not is_safe_url(tag[attr]):
                del tag[attr]

    return str(soup)


def is_safe_url(value: str) -> bool:
    """Check that a link target uses a web scheme or is relative."""
    cleaned = _CONTROL_RE.sub("", value)
    try:
        scheme = urlsplit(cleaned).scheme.lower()
    except ValueError:
        return False
    return scheme in SAFE_SCHEMES
