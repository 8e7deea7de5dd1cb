"""Build an XML entry collection from HTML documents tracked in git.

Usage:
    xentries pages/*.html                  # all documents to stdout
    xentries -t python -o python.xml pages/*.html
    python -m xentries -v --root site site/posts/*.html
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from xentries.document import read_document
from xentries.feed import Entries, Entry
from xentries.history import HistoryError, find_repo, path_commits

LOG_FORMAT = "xentries: %(levelname)s: %(message)s"

log = logging.getLogger("xentries")


def create_entry(repo: Path, path: str) -> Entry:
    """Build one entry; raises HistoryError or OSError."""
    commits = path_commits(repo, path)
    ctime = commits[-1].when
    mtime = commits[0].when
    doc = read_document(path)
    return Entry(
        path=path,
        ctime=ctime,
        mtime=mtime,
        title=doc.title,
        tags=doc.tags,
        summary=doc.summary,
    )


def build_entries(repo: Path, paths: Iterable[str], tag: str = "") -> Entries:
    entries: List[Entry] = []
    for path in paths:
        log.info("creating entry for %s", path)
        try:
            entry = create_entry(repo, path)
        except (HistoryError, OSError) as e:
            log.warning("unable to create entry %s: %s", path, e)
            continue
        entries.append(entry)
    return Entries(entries).select(tag)


def configure_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    log.setLevel(level)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="xentries",
        description="XMLify HTML documents for syndication feed post-processing",
    )
    parser.add_argument("documents", nargs="+", help="HTML documents to include")
    parser.add_argument("-t", "--tag", default="", help="only include entries with this tag")
    parser.add_argument("-v", "--verbose", action="store_true", help="increase verbosity")
    parser.add_argument("--root", default=".", help="Directory to start the repository search from")
    parser.add_argument("-o", "--output", help="Write XML here instead of stdout")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        repo = find_repo(Path(args.root))
    except HistoryError as e:
        log.error("%s", e)
        return 1

    entries = build_entries(repo, args.documents, args.tag)
    feed_xml = entries.to_xml()

    if not args.output:
        sys.stdout.write(feed_xml)
        return 0

    out = Path(args.output)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(feed_xml, encoding="utf-8")
    except OSError as e:
        log.error("unable to write %s: %s", out, e)
        return 1
    log.info("wrote %d entries to %s", len(entries), out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
