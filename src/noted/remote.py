"""Remote repository creation.

The parent repository can be published to a freshly created GitHub
repository. Creation is a collaborator passed into ``init_parent`` so tests
can substitute a fake; the default shells out to the GitHub CLI.
"""

from __future__ import annotations

import re
import subprocess
from pathlib import Path
from typing import Protocol
from urllib.parse import urlparse

from noted.git.repo import get_remote_url

_SCP_LIKE = re.compile(r"^[\w.-]+@[\w.-]+:[\w./~-]+$")


class RemoteCreator(Protocol):
    def create_remote_repo(self, name: str, repo_path: Path) -> str:
        """Create a remote repository, wire it up as a remote, return its URL."""
        ...


def is_valid_url(url: str | None) -> bool:
    """Whether url looks like something git can push to.

    Accepts scheme-based URLs with a location (https://, ssh://, file://)
    and scp-like ``user@host:path`` addresses.
    """
    if not url:
        return False
    if _SCP_LIKE.match(url):
        return True
    parsed = urlparse(url)
    if not parsed.scheme or len(parsed.scheme) < 2:
        return False
    return bool(parsed.netloc or (parsed.scheme == "file" and parsed.path))


class GitHubCliRemoteCreator:
    """Create repositories with ``gh repo create``."""

    def __init__(self, visibility: str = "private", remote: str = "origin"):
        if visibility not in ("private", "public", "internal"):
            raise ValueError(f"Unknown visibility: {visibility}")
        self.visibility = visibility
        self.remote = remote

    def _run_gh(self, args: list[str], cwd: Path) -> subprocess.CompletedProcess:
        try:
            return subprocess.run(
                ["gh"] + args,
                cwd=cwd,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as exc:
            raise RuntimeError("GitHub CLI (gh) is not installed") from exc

    def create_remote_repo(self, name: str, repo_path: Path) -> str:
        auth = self._run_gh(["auth", "status"], repo_path)
        if auth.returncode != 0:
            raise RuntimeError("Not authenticated with GitHub CLI. Run `gh auth login` first.")

        result = self._run_gh(
            ["repo", "create", name, f"--{self.visibility}",
             "--source=.", f"--remote={self.remote}"],
            repo_path,
        )
        if result.returncode != 0:
            raise RuntimeError(f"Error creating GitHub repository {name}: {result.stderr.strip()}")

        url = get_remote_url(repo_path, self.remote)
        if not url:
            raise RuntimeError(f"GitHub repository {name} created but remote {self.remote} is missing")
        return url
