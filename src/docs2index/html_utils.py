"""Shared HTML utilities: parsing, visible-text flattening and normalization."""

from __future__ import annotations

import re
from typing import Iterator

from docs2index.config import DOCS2INDEX_HTML_PARSER

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, PageElement, PreformattedString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


# Elements that never render text.
_HIDDEN_TAGS = frozenset(
    {
        "base",
        "head",
        "link",
        "meta",
        "noscript",
        "script",
        "style",
        "template",
        "title",
    }
)
_BLOCK_TAGS = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "body",
        "caption",
        "dd",
        "details",
        "dialog",
        "div",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hr",
        "html",
        "li",
        "main",
        "nav",
        "ol",
        "pre",
        "section",
        "summary",
        "table",
        "tbody",
        "tfoot",
        "thead",
        "tr",
        "ul",
    }
)
# Adjacent table cells stay separate words.
_CELL_TAGS = ["td", "th"]
_CELL_SEPARATOR = " "
_COLLAPSIBLE_RE = re.compile(r"[ \t\n\r\f]+")
_SPACE_RUN_RE = re.compile(r" {2,}")
_LINE_EDGE_RE = re.compile(r" *\n *")

_WHITESPACE_RUN_RE = re.compile(r"\s\s+")
_LINE_BREAK_RE = re.compile(r"\r\n|\n|\r")
_AMPERSAND_RE = re.compile(r"&(?!(?:amp|lt|gt|quot);)")


def parse_html(html: str) -> BeautifulSoup:
    """Parse page markup. Malformed markup never raises, it degrades the tree."""
    return BeautifulSoup(html, DOCS2INDEX_HTML_PARSER)


def flatten_text(node: PageElement) -> str:
    """Return the visible text of a node, roughly as a browser's innerText.

    Block elements start and end lines (paragraphs leave a blank line), ``br``
    breaks a line, hidden elements are skipped and whitespace inside ordinary
    text collapses to single spaces. ``pre`` content keeps its line breaks.
    """
    if isinstance(node, NavigableString):
        return "" if isinstance(node, PreformattedString) else str(node)
    if not isinstance(node, Tag):
        return ""

    chunks: list[str | int] = []
    _collect_text(node, chunks, preformatted=node.name == "pre")
    return _join_chunks(chunks)


def normalize_text(text: str) -> str:
    """Collapse whitespace, drop line terminators and escape ``& < > "``.

    An ``&`` that already starts one of the produced entities is left alone so
    normalizing twice gives the same result as normalizing once.
    """
    text = _WHITESPACE_RUN_RE.sub(" ", text)
    text = _LINE_BREAK_RE.sub(" ", text)
    text = _AMPERSAND_RE.sub("&amp;", text)
    text = text.replace("<", "&lt;")
    text = text.replace(">", "&gt;")
    return text.replace('"', "&quot;")


def get_content(node: PageElement) -> str:
    """Flatten a subtree and normalize the result."""
    return normalize_text(flatten_text(node))


def _collect_text(
    element: Tag, chunks: list[str | int], *, preformatted: bool
) -> None:
    # Integers in ``chunks`` are required line breaks between text runs.
    # Walks with an explicit stack so nesting depth is not bounded by recursion.
    stack: list[tuple[Iterator[PageElement], bool, int]] = [
        (iter(element.children), preformatted, 0)
    ]
    while stack:
        children, in_pre, closing_breaks = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            if closing_breaks:
                chunks.append(closing_breaks)
            continue

        if isinstance(child, NavigableString):
            if isinstance(child, PreformattedString):
                continue
            text = str(child)
            chunks.append(text if in_pre else _COLLAPSIBLE_RE.sub(" ", text))
            continue
        if not isinstance(child, Tag) or child.name in _HIDDEN_TAGS:
            continue
        if child.name == "br":
            chunks.append("\n")
            continue
        if child.name in _CELL_TAGS and child.find_previous_sibling(_CELL_TAGS):
            chunks.append(_CELL_SEPARATOR)

        breaks = 2 if child.name == "p" else 1 if child.name in _BLOCK_TAGS else 0
        if breaks:
            chunks.append(breaks)
        stack.append((iter(child.children), in_pre or child.name == "pre", breaks))


def _join_chunks(chunks: list[str | int]) -> str:
    runs: list[tuple[int, str]] = []
    pending = 0
    buffer: list[str] = []

    for chunk in chunks:
        if isinstance(chunk, int):
            text = _trim_run("".join(buffer))
            if text:
                runs.append((pending, text))
                pending = 0
            buffer = []
            pending = max(pending, chunk)
        else:
            buffer.append(chunk)

    text = _trim_run("".join(buffer))
    if text:
        runs.append((pending, text))
    if not runs:
        return ""

    # Breaks before the first run and after the last one are dropped.
    parts = [runs[0][1]]
    parts.extend("\n" * breaks + text for breaks, text in runs[1:])
    return "".join(parts)


def _trim_run(text: str) -> str:
    text = _SPACE_RUN_RE.sub(" ", text)
    return _LINE_EDGE_RE.sub("\n", text).strip(" ")
