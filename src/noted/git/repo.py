"""Repository location and low-level git queries.

Every function takes an explicit path and re-queries git on each call;
nothing about a repository is cached between calls.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable

from noted.paths import MARKER_FILE

logger = logging.getLogger(__name__)


class NoRepositoryError(RuntimeError):
    """Raised when a path is not inside any git working tree."""


def _run_git(args: list[str], cwd: Path) -> subprocess.CompletedProcess:
    """Run a git command and return the result."""
    logger.debug("git %s (in %s)", " ".join(args), cwd)
    return subprocess.run(
        ["git"] + args,
        cwd=cwd,
        capture_output=True,
        text=True,
    )


def _walk_up(start_path: Path | str, stop: Callable[[Path], bool]) -> Path | None:
    """Return the first directory from start_path upward satisfying stop."""
    current = Path(start_path).resolve()
    if current.is_file():
        current = current.parent
    while True:
        if stop(current):
            return current
        if current.parent == current:
            return None
        current = current.parent


def find_repository_root(start_path: Path | str) -> Path | None:
    """Find the root of the git working tree enclosing start_path.

    A submodule checkout has a ``.git`` file rather than a directory; both
    count as repository metadata.

    Returns:
        Absolute path of the repository root, or None if start_path is not
        inside a repository.
    """
    return _walk_up(start_path, lambda p: (p / ".git").exists())


def find_tool_root(start_path: Path | str) -> Path | None:
    """Find the nearest ancestor holding a .notedconfig marker."""
    return _walk_up(start_path, lambda p: (p / MARKER_FILE).is_file())


def is_tool_root(path: Path | str) -> bool:
    """Whether path is itself the top-level notes repository."""
    return (Path(path) / MARKER_FILE).is_file()


def current_branch(repo_root: Path) -> str | None:
    """Return the checked-out branch name, or None when HEAD is detached."""
    result = _run_git(["symbolic-ref", "--short", "-q", "HEAD"], repo_root)
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def branch_exists(repo_root: Path, branch: str) -> bool:
    result = _run_git(["rev-parse", "--verify", "--quiet", f"refs/heads/{branch}"], repo_root)
    return result.returncode == 0


def ensure_branch(repo_root: Path, branch: str = "main") -> subprocess.CompletedProcess | None:
    """Move a detached HEAD onto a named branch.

    Checks out ``branch`` if it exists locally, otherwise creates it at the
    current commit. Does nothing when a branch is already checked out.

    Returns:
        The checkout result, or None if no checkout was needed.
    """
    if current_branch(repo_root) is not None:
        return None

    if branch_exists(repo_root, branch):
        logger.info("Detached HEAD in %s, checking out %s", repo_root, branch)
        return _run_git(["checkout", branch], repo_root)

    logger.info("Detached HEAD in %s, creating branch %s", repo_root, branch)
    return _run_git(["checkout", "-b", branch], repo_root)


def head_sha(repo_root: Path) -> str | None:
    result = _run_git(["rev-parse", "HEAD"], repo_root)
    if result.returncode != 0:
        return None
    return result.stdout.strip()


def has_remote(repo_root: Path, name: str = "origin") -> bool:
    """Whether a remote called name is configured."""
    result = _run_git(["remote"], repo_root)
    if result.returncode != 0:
        return False
    return name in result.stdout.split()


def get_remote_url(repo_root: Path, name: str = "origin") -> str | None:
    """Get the URL of a remote."""
    result = _run_git(["remote", "get-url", name], repo_root)
    if result.returncode == 0:
        return result.stdout.strip()
    return None


def ahead_count(repo_root: Path) -> int | None:
    """Count commits on HEAD not yet on its upstream.

    Returns:
        The count, or None when the branch has no upstream configured.
    """
    result = _run_git(["rev-list", "--count", "@{upstream}..HEAD"], repo_root)
    if result.returncode != 0:
        return None
    return int(result.stdout.strip() or 0)


def is_clean(repo_root: Path) -> bool:
    """Whether the working tree has no staged, unstaged or untracked changes."""
    result = _run_git(["status", "--porcelain"], repo_root)
    return result.returncode == 0 and not result.stdout.strip()


def change_summary(repo_root: Path) -> dict[str, int]:
    """Count pending changes in the working tree by kind.

    Returns:
        Dict with keys: created, modified, deleted.
    """
    counts = {"created": 0, "modified": 0, "deleted": 0}
    result = _run_git(["status", "--porcelain", "--untracked-files=all"], repo_root)
    if result.returncode != 0:
        return counts

    for line in result.stdout.splitlines():
        if not line.strip():
            continue
        status = line[:2]
        if status == "??" or "A" in status:
            counts["created"] += 1
        elif "D" in status:
            counts["deleted"] += 1
        else:
            counts["modified"] += 1
    return counts
