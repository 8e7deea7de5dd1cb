"""Creation and modification times from git history.

A document's creation time is the author date of the oldest commit that
touches it; its modification time is that of the newest one.
"""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List

GIT_BIN = os.environ.get("XENTRIES_GIT", "git")

# %x09 is a tab; author names go last since they may contain anything else
LOG_FORMAT = "--pretty=format:%H%x09%aI%x09%an"

log = logging.getLogger(__name__)


class HistoryError(RuntimeError):
    """Raised when git cannot answer a history query."""


@dataclass(frozen=True)
class Commit:
    sha: str
    when: datetime
    author: str


def _run_git(args: List[str], cwd: Path) -> str:
    try:
        res = subprocess.run(
            [GIT_BIN, *args],
            cwd=str(cwd),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except FileNotFoundError as e:
        raise HistoryError(f"git executable not found: {GIT_BIN}") from e
    if res.returncode != 0:
        raise HistoryError(res.stderr.strip() or "git command failed")
    return res.stdout.strip()


def find_repo(path: Path) -> Path:
    """Return the work-tree root of the repository containing *path*."""
    start = Path(path).resolve()
    if not start.is_dir():
        raise HistoryError(f"no repository found for directory: {start}")
    try:
        top = _run_git(["rev-parse", "--show-toplevel"], cwd=start)
    except HistoryError as e:
        log.debug("repository lookup failed: %s", e)
        raise HistoryError(f"no repository found for directory: {start}") from e
    return Path(top).resolve()


def _repo_relative(repo: Path, path: str | Path) -> str:
    abs_path = Path(path).resolve()
    try:
        return abs_path.relative_to(repo).as_posix()
    except ValueError:
        raise HistoryError(f"path is outside repository {repo}: {path}") from None


def parse_log_line(line: str) -> Commit:
    sha, date_str, author = line.split("\t", 2)
    return Commit(sha=sha, when=datetime.fromisoformat(date_str), author=author)


def path_commits(repo: Path, path: str | Path) -> List[Commit]:
    """All commits on HEAD touching *path*, newest first."""
    rel = _repo_relative(repo, path)
    out = _run_git(["log", LOG_FORMAT, "HEAD", "--", rel], cwd=repo)
    commits = [parse_log_line(line) for line in out.splitlines() if line.strip()]
    if not commits:
        raise HistoryError(f"no commit for path: {path}")
    return commits


def first_commit(repo: Path, path: str | Path) -> Commit:
    return path_commits(repo, path)[-1]


def last_commit(repo: Path, path: str | Path) -> Commit:
    return path_commits(repo, path)[0]
