"""Lightweight Markdown and HTML conversions.

These are line-level rewrites for the inline subset (headings, emphasis,
code spans, links, lists, quotes). They are not full Markdown or HTML parsers.
"""
import html
import re
from html.parser import HTMLParser
from typing import List, Pattern, Tuple

from ..domain.errors import DecodeError

Rule = Tuple[Pattern[str], str]


def _rules(*pairs: Tuple[str, str], flags: int = 0) -> List[Rule]:
    return [(re.compile(pattern, flags), replacement) for pattern, replacement in pairs]


MARKDOWN_TO_HTML = _rules(
    (r"^###### (.+)$", r"<h6>\1</h6>"),
    (r"^##### (.+)$", r"<h5>\1</h5>"),
    (r"^#### (.+)$", r"<h4>\1</h4>"),
    (r"^### (.+)$", r"<h3>\1</h3>"),
    (r"^## (.+)$", r"<h2>\1</h2>"),
    (r"^# (.+)$", r"<h1>\1</h1>"),
    (r"\*\*\*(.+?)\*\*\*", r"<strong><em>\1</em></strong>"),
    (r"\*\*(.+?)\*\*", r"<strong>\1</strong>"),
    (r"\*(.+?)\*", r"<em>\1</em>"),
    (r"~~(.+?)~~", r"<del>\1</del>"),
    (r"`(.+?)`", r"<code>\1</code>"),
    (r"!\[(.*?)\]\((.+?)\)", r'<img src="\2" alt="\1">'),
    (r"\[(.+?)\]\((.+?)\)", r'<a href="\2">\1</a>'),
    flags=re.MULTILINE,
)

MARKDOWN_TO_PLAIN = _rules(
    (r"^#{1,6}\s+", ""),
    (r"\*\*\*(.+?)\*\*\*", r"\1"),
    (r"\*\*(.+?)\*\*", r"\1"),
    (r"\*(.+?)\*", r"\1"),
    (r"~~(.+?)~~", r"\1"),
    (r"`(.+?)`", r"\1"),
    (r"!\[.*?\]\(.+?\)", ""),
    (r"\[(.+?)\]\(.+?\)", r"\1"),
    (r"^>\s?", ""),
    (r"^[-*+]\s", ""),
    (r"^\d+\.\s", ""),
    (r"^---+$", ""),
    flags=re.MULTILINE,
)

HTML_TO_MARKDOWN = _rules(
    (r"<h1[^>]*>(.*?)</h1>", r"# \1"),
    (r"<h2[^>]*>(.*?)</h2>", r"## \1"),
    (r"<h3[^>]*>(.*?)</h3>", r"### \1"),
    (r"<h4[^>]*>(.*?)</h4>", r"#### \1"),
    (r"<(?:strong|b)(?:\s[^>]*)?>(.*?)</(?:strong|b)>", r"**\1**"),
    (r"<(?:em|i)(?:\s[^>]*)?>(.*?)</(?:em|i)>", r"*\1*"),
    (r"<code[^>]*>(.*?)</code>", r"`\1`"),
    (r'<a[^>]*href="([^"]*)"[^>]*>(.*?)</a>', r"[\2](\1)"),
    (r"<br\s*/?>", "\n"),
    (r"<p[^>]*>(.*?)</p>", "\\1\n"),
    (r"<li[^>]*>(.*?)</li>", r"- \1"),
    (r"</?[^>]+>", ""),
    flags=re.IGNORECASE | re.DOTALL,
)


def _apply(rules: List[Rule], text: str) -> str:
    for pattern, replacement in rules:
        text = pattern.sub(replacement, text)
    return text


class _TextExtractor(HTMLParser):
    """Collects character data, dropping tags, scripts and styles."""

    _SKIPPED = {"script", "style"}

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.parts: List[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag, attrs):
        if tag in self._SKIPPED:
            self._skip_depth += 1

    def handle_endtag(self, tag):
        if tag in self._SKIPPED and self._skip_depth:
            self._skip_depth -= 1

    def handle_data(self, data):
        if not self._skip_depth:
            self.parts.append(data)


def markdown_to_html(text: str) -> str:
    return _apply(MARKDOWN_TO_HTML, text)


def markdown_to_plain(text: str) -> str:
    return _apply(MARKDOWN_TO_PLAIN, text).strip()


def html_to_markdown(text: str) -> str:
    return html.unescape(_apply(HTML_TO_MARKDOWN, text)).strip()


def html_to_plain(text: str) -> str:
    extractor = _TextExtractor()
    try:
        extractor.feed(text)
        extractor.close()
    except AssertionError as exc:
        # HTMLParser asserts on malformed <![ marked sections.
        raise DecodeError(f"Malformed HTML: {exc}") from exc
    return "".join(extractor.parts)


def plain_to_html(text: str) -> str:
    """Wrap blank-line separated paragraphs in ``<p>``, single newlines become ``<br>``."""
    paragraphs = re.split(r"\n\n+", text)
    return "\n".join(
        "<p>" + html.escape(paragraph, quote=False).replace("\n", "<br>") + "</p>"
        for paragraph in paragraphs
    )
