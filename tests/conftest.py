import os
import shutil
import subprocess
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


class GitRepo:
    """Throwaway repository with commits at fixed author dates."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.env = {
            **os.environ,
            "HOME": str(root.parent),
            "GIT_CONFIG_NOSYSTEM": "1",
        }
        self.git("init", "-q")

    def git(self, *args: str) -> str:
        res = subprocess.run(
            [
                "git",
                "-c", "user.name=Test Author",
                "-c", "user.email=author@example.com",
                "-c", "commit.gpgsign=false",
                *args,
            ],
            cwd=str(self.root),
            env=self.env,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            check=True,
        )
        return res.stdout

    def commit(self, files: dict, date: str, message: str = "update") -> None:
        for name, content in files.items():
            path = self.root / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            self.git("add", name)
        self.env["GIT_AUTHOR_DATE"] = date
        self.env["GIT_COMMITTER_DATE"] = date
        self.git("commit", "-q", "-m", message)


@pytest.fixture
def git_repo(tmp_path):
    root = tmp_path / "site"
    root.mkdir()
    return GitRepo(root)


def page(title="Post", keywords=None, body="<p>Hello</p>"):
    meta = f'<meta name="keywords" content="{keywords}">' if keywords is not None else ""
    return (
        "<!DOCTYPE html>\n"
        f"<html><head><title>{title}</title>{meta}</head>"
        f"<body>{body}</body></html>\n"
    )
