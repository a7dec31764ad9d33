"""Cleaning of user supplied comment text, HTML and URLs."""

import re
from urllib.parse import urlsplit, urlunsplit

import bleach
from bleach.html5lib_shim import Filter

from .base import Service

ALLOWED_TAGS = frozenset(
    {
        # Basic formatting
        "p", "br", "hr",
        # Headings
        "h1", "h2", "h3", "h4", "h5", "h6",
        # Text formatting
        "strong", "b", "em", "i", "u", "s", "del", "code", "pre",
        # Lists
        "ul", "ol", "li",
        "blockquote",
        "a",
        "img",
        # Tables
        "table", "thead", "tbody", "tfoot", "tr", "th", "td",
        "div", "span",
    }
)

ALLOWED_ATTRIBUTES = ["href", "title", "alt", "src", "class", "id", "target", "rel"]

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

# Elements removed together with everything inside them
_DROPPED_CONTENT = re.compile(
    r"<(script|style|iframe|noscript|template|svg|math)\b[^>]*>.*?</\1\s*>",
    re.IGNORECASE | re.DOTALL,
)

_WEB_SCHEMES = ("http", "https")


class SafeLinkFilter(Filter):
    """Make every link open in a new browsing context without an opener."""

    def __iter__(self):
        for token in super().__iter__():
            if token["type"] in ("StartTag", "EmptyTag") and token["name"] == "a":
                attrs = dict(token["data"])
                if (None, "href") in attrs:
                    attrs[(None, "target")] = "_blank"
                    attrs[(None, "rel")] = "noopener noreferrer"
                    token["data"] = attrs
            yield token


class Sanitizer(Service):
    """Sanitizer for comment input.

    - ``sanitize_text`` strips all markup
    - ``sanitize_html`` keeps an allow-listed set of formatting tags
    - ``sanitize_url`` accepts only absolute http/https URLs
    """

    def __init__(self) -> None:
        self._html_cleaner = bleach.Cleaner(
            tags=ALLOWED_TAGS,
            attributes=ALLOWED_ATTRIBUTES,
            protocols=ALLOWED_PROTOCOLS,
            strip=True,
            strip_comments=True,
            filters=[SafeLinkFilter],
        )
        self._text_cleaner = bleach.Cleaner(
            tags=frozenset(),
            attributes={},
            strip=True,
            strip_comments=True,
        )

    def sanitize_text(self, text: str) -> str:
        """Remove every tag, keeping only text."""
        if not text:
            return ""
        return self._text_cleaner.clean(_DROPPED_CONTENT.sub("", text))

    def sanitize_html(self, html: str) -> str:
        """Reduce HTML to the allow-listed tags and attributes.

        Scripts, styles and frames are removed with their content, event
        handler attributes never survive, and links get
        ``target="_blank" rel="noopener noreferrer"``.
        """
        if not html:
            return ""
        return self._html_cleaner.clean(_DROPPED_CONTENT.sub("", html))

    def sanitize_url(self, url: str) -> str:
        """Return the normalized URL, or an empty string if it is not http(s)."""
        if not url:
            return ""
        try:
            parts = urlsplit(url.strip())
        except ValueError:
            return ""
        if parts.scheme.lower() not in _WEB_SCHEMES or not parts.netloc:
            return ""
        # Only the host is case-insensitive; credentials keep their case
        userinfo, at, host = parts.netloc.rpartition("@")
        return urlunsplit(
            (
                parts.scheme.lower(),
                userinfo + at + host.lower(),
                parts.path or "/",
                parts.query,
                parts.fragment,
            )
        )
