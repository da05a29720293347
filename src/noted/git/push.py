"""Push committed history to a repository's remote."""

from __future__ import annotations

import logging
from pathlib import Path

from noted.git.propagate import (
    FAILED,
    PUSH_SKIPPED_NO_REMOTE,
    PUSHED,
    UP_TO_DATE,
    RepoOutcome,
)
from noted.git.repo import _run_git, ahead_count, current_branch, has_remote

logger = logging.getLogger(__name__)


def push_repository(
    repo_root: Path | str,
    branch: str = "main",
    remote: str = "origin",
) -> RepoOutcome:
    """Push a repository's current branch if it has somewhere to go.

    A repository without the named remote is skipped. One whose branch
    tracks an upstream and is not ahead of it is reported up-to-date.
    Otherwise the branch is pushed and set to track the remote.

    Args:
        repo_root: Root of the working tree.
        branch: Branch to push when HEAD is detached.
        remote: Remote name.

    Returns:
        RepoOutcome with status pushed, push-skipped-no-remote, up-to-date
        or failed.
    """
    root = Path(repo_root).resolve()
    if not has_remote(root, remote):
        logger.info("%s has no remote %s, skipping push", root, remote)
        return RepoOutcome(root, PUSH_SKIPPED_NO_REMOTE)

    ahead = ahead_count(root)
    if ahead == 0:
        return RepoOutcome(root, UP_TO_DATE)

    target_branch = current_branch(root) or branch
    result = _run_git(["push", "-u", remote, target_branch], root)
    if result.returncode != 0:
        return RepoOutcome(root, FAILED, f"push failed: {result.stderr.strip()}")

    logger.info("Pushed %s to %s/%s", root, remote, target_branch)
    return RepoOutcome(root, PUSHED, f"{remote}/{target_branch}")
