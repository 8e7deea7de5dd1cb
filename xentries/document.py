"""Pull title, tags and summary out of an HTML document."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

HTML_PARSER = "lxml"

TITLE_SELECTOR = "title"
KEYWORDS_SELECTOR = 'head > meta[name="keywords"]'

# Body children left out of the summary
SUMMARY_EXCLUDE = ("h1", "address", "footer")


@dataclass(frozen=True)
class Document:
    title: str
    tags: Tuple[str, ...]
    summary: str


def find_title(soup: BeautifulSoup) -> str:
    el = soup.select_one(TITLE_SELECTOR)
    if el is None:
        return ""
    return el.get_text()


def find_tags(soup: BeautifulSoup) -> List[str]:
    """Split the keywords meta tag on commas.

    Empty pieces are kept, so a page without keywords yields ``[""]``.
    """
    el = soup.select_one(KEYWORDS_SELECTOR)
    content = el.get("content", "") if el is not None else ""
    return [t.strip() for t in content.split(",")]


def find_summary(soup: BeautifulSoup) -> str:
    """Concatenate the markup of the body's element children.

    Text and comments directly under <body> are dropped, as are the
    elements named in SUMMARY_EXCLUDE.
    """
    body = soup.body
    if body is None:
        return ""
    parts = []
    for node in body.children:
        if not isinstance(node, Tag) or node.name in SUMMARY_EXCLUDE:
            continue
        parts.append(str(node))
    return "".join(parts)


def parse_document(text: str) -> Document:
    soup = BeautifulSoup(text, HTML_PARSER)
    return Document(
        title=find_title(soup),
        tags=tuple(find_tags(soup)),
        summary=find_summary(soup),
    )


def read_document(path: str | Path) -> Document:
    raw = Path(path).read_text(encoding="utf-8", errors="replace")
    return parse_document(raw)
