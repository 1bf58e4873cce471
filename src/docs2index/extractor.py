"""Extract search records from rendered documentation pages."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Mapping

from docs2index.html_utils import flatten_text, get_content, parse_html
from docs2index.schemas import PageRecord, SearchRecord, SectionRecord

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, PageElement, PreformattedString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_MARKDOWN_SELECTOR = ".markdown"
_ANCHOR_CLASS = "anchor"
_SEARCH_CHILDREN_ATTR = "data-search-children"
_SECTION_HEADING_TAGS = frozenset({"h2", "h3"})
_KEYWORDS_SELECTOR = 'meta[name="keywords"]'
_VERSION_SELECTOR = 'meta[name="docsearch:version"]'

_LEADING_HASHES_RE = re.compile(r"^#+\s*")
_TRAILING_HASH_RE = re.compile(r"#$")


@dataclass
class HeadingNode:
    """A section heading found while partitioning one page."""

    title: str
    ref: str
    tag_name: str
    pieces: list[str] = field(default_factory=list)

    @property
    def indexed_content(self) -> str:
        return "".join(self.pieces)


def extract_page(
    html: str, url: str, versions: Mapping[str, str] | None = None
) -> Iterator[SearchRecord]:
    """Parse page markup and yield its search records."""
    return scan_document(parse_html(html), url, versions)


def scan_document(
    soup: BeautifulSoup, url: str, versions: Mapping[str, str] | None = None
) -> Iterator[SearchRecord]:
    """Yield the page record followed by one record per section heading.

    Pages without an ``article``, a markdown body inside it or an ``h1`` title
    are not indexable and yield nothing.

    Args:
        soup: Parsed page.
        url: Canonical page URL; section URLs append ``#<ref>`` to it.
        versions: Optional table mapping ``docsearch:version`` values to the
            version stored on every record. ``None`` disables the lookup.
    """
    article = soup.find("article")
    if not article:
        return
    markdown = article.select_one(_MARKDOWN_SELECTOR)
    if not markdown:
        return
    page_title_element = article.find("h1")
    if not page_title_element:
        return

    page_title = flatten_text(page_title_element)
    headings = collect_section_headings(markdown)
    keywords = _extract_keywords(soup)
    version = _resolve_version(soup, versions) if versions is not None else None

    yield PageRecord(
        title=page_title,
        url=url,
        content="" if headings else get_content(markdown),
        keywords=keywords,
        version=version,
    )

    for heading in headings:
        yield SectionRecord(
            title=heading.title,
            page_title=page_title,
            url=f"{url}#{heading.ref}",
            content=heading.indexed_content,
            version=version,
            tag_name=heading.tag_name,
        )


def collect_section_headings(markdown: Tag) -> list[HeadingNode]:
    """Partition the markdown body into text bound to its nearest heading.

    A block belongs to the closest preceding ``h2``/``h3`` sibling at its own
    level of the tree. Containers marked with ``data-search-children`` are
    opened up, and inside them every non-paragraph element is opened up too,
    so headings and blocks nested in panels take part.
    """
    headings: list[HeadingNode] = []
    # Each frame is (children, indexing_children, current heading) of one level.
    stack: list[tuple[Iterator[PageElement], bool, HeadingNode | None]] = [
        (iter(markdown.children), False, None)
    ]
    while stack:
        children, indexing_children, current = stack[-1]
        node = next(children, None)
        if node is None:
            stack.pop()
        elif _is_section_heading(node):
            current = _track_heading(node)
            headings.append(current)
            stack[-1] = (children, indexing_children, current)
        elif _should_index_children(node):
            stack.append((iter(node.children), True, current))
        elif indexing_children and isinstance(node, Tag) and node.name != "p":
            stack.append((iter(node.children), True, current))
        elif current is not None and _is_content_block(node):
            current.pieces.append(get_content(node) + " ")
    return headings


def _is_section_heading(node: PageElement) -> bool:
    return isinstance(node, Tag) and node.name in _SECTION_HEADING_TAGS


def _should_index_children(node: PageElement) -> bool:
    return isinstance(node, Tag) and node.has_attr(_SEARCH_CHILDREN_ATTR)


def _is_content_block(node: PageElement) -> bool:
    if isinstance(node, Tag):
        return True
    # Comments and whitespace between elements are not blocks.
    if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
        return bool(node.strip())
    return False


def _track_heading(node: Tag) -> HeadingNode:
    title = _LEADING_HASHES_RE.sub("", flatten_text(node))
    title = _TRAILING_HASH_RE.sub("", title)
    anchor = _find_anchor(node)
    ref = (anchor.get("id") if anchor else None) or "#"
    return HeadingNode(title=title, ref=str(ref), tag_name=node.name or "#")


def _find_anchor(heading: Tag) -> Tag | None:
    if _ANCHOR_CLASS in heading.get("class", []):
        return heading
    return heading.select_one(f".{_ANCHOR_CLASS}")


def _extract_keywords(soup: BeautifulSoup) -> str:
    keywords: list[str] = []
    for meta in soup.select(_KEYWORDS_SELECTOR):
        content = meta.get("content")
        if content:
            keywords.append(content.replace(",", " "))
    return " ".join(keywords)


def _resolve_version(soup: BeautifulSoup, versions: Mapping[str, str]) -> str | None:
    meta = soup.select_one(_VERSION_SELECTOR)
    if not meta:
        return None
    return versions.get(meta.get("content", ""))
