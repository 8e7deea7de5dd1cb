"""Entries and their XML serialization."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Iterator, List, Tuple
from xml.sax.saxutils import escape as xml_escape
from xml.sax.saxutils import quoteattr

INDENT = "  "

# Characters outside the XML 1.0 Char production
INVALID_XML_CHARS = re.compile("[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


@dataclass(frozen=True)
class Entry:
    path: str
    ctime: datetime
    mtime: datetime
    title: str = ""
    tags: Tuple[str, ...] = ("",)
    summary: str = ""

    def tagged(self, target: str) -> bool:
        return target in self.tags


@dataclass
class Entries:
    """Entries in input order, plus the tag they were filtered on."""

    entries: List[Entry] = field(default_factory=list)
    tag: str = ""

    def select(self, tag: str) -> "Entries":
        if not tag:
            return Entries(list(self.entries), self.tag)
        return Entries([e for e in self.entries if e.tagged(tag)], tag)

    def to_xml(self) -> str:
        return render_entries(self.entries, self.tag)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)


def format_time(when: datetime) -> str:
    """RFC 3339, keeping the author's UTC offset; UTC is written as Z."""
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    s = when.isoformat()
    if s.endswith("+00:00"):
        s = s[:-6] + "Z"
    return s


def xml_safe(text: str) -> str:
    """Replace characters XML 1.0 cannot carry with U+FFFD."""
    return INVALID_XML_CHARS.sub("\ufffd", text)


def escape_text(text: str) -> str:
    return xml_escape(xml_safe(text))


def escape_attr(text: str) -> str:
    return quoteattr(xml_safe(text))


def cdata(text: str) -> str:
    if not text:
        return ""
    return "<![CDATA[" + xml_safe(text).replace("]]>", "]]]]><![CDATA[>") + "]]>"


def render_entry(entry: Entry, depth: int = 1) -> str:
    pad = INDENT * depth
    inner = pad + INDENT
    lines = [
        f"{pad}<entry>",
        f"{inner}<path>{escape_text(entry.path)}</path>",
        f"{inner}<ctime>{format_time(entry.ctime)}</ctime>",
        f"{inner}<mtime>{format_time(entry.mtime)}</mtime>",
        f"{inner}<title>{escape_text(entry.title)}</title>",
    ]
    if entry.tags:
        lines.append(f"{inner}<tags>")
        for tag in entry.tags:
            lines.append(f"{inner}{INDENT}<tag>{escape_text(tag)}</tag>")
        lines.append(f"{inner}</tags>")
    lines.append(f"{inner}<summary>{cdata(entry.summary)}</summary>")
    lines.append(f"{pad}</entry>")
    return "\n".join(lines)


def render_entries(entries: Iterable[Entry], tag: str = "") -> str:
    attr = f" tag={escape_attr(tag)}" if tag else ""
    items_xml = [render_entry(e) for e in entries]
    if items_xml:
        body = f"<entries{attr}>\n" + "\n".join(items_xml) + "\n</entries>"
    else:
        body = f"<entries{attr}></entries>"
    return f"""<?xml version="1.0" encoding="UTF-8"?>
{body}
"""
