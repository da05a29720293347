"""Commit propagation toward the root of a nested repository tree.

Commits a directory's pending changes at its repository root, then, while
that repository is a submodule, stages and commits the updated submodule
pointer in each enclosing superproject in turn.

Nothing here pushes; see noted.git.push. Nothing is rolled back: a failure
in a superproject leaves the commits already made below it in place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from noted.git.repo import (
    NoRepositoryError,
    _run_git,
    ensure_branch,
    find_repository_root,
    head_sha,
)
from noted.git.superproject import detect_superproject

logger = logging.getLogger(__name__)

COMMITTED = "committed"
NOTHING_TO_COMMIT = "nothing-to-commit"
PUSHED = "pushed"
PUSH_SKIPPED_NO_REMOTE = "push-skipped-no-remote"
UP_TO_DATE = "up-to-date"
FAILED = "failed"


@dataclass
class RepoOutcome:
    """What happened to one repository during a commit or push step."""

    repo: Path
    status: str
    detail: str = ""
    commit: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != FAILED

    def describe(self) -> str:
        text = f"{self.repo.name}: {self.status}"
        if self.commit:
            text += f" ({self.commit[:8]})"
        if self.detail:
            text += f" - {self.detail}"
        return text


@dataclass
class CommitOutcome:
    """Per-repository results of one propagate_commit call, in climb order."""

    message: str
    repositories: list[RepoOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.repositories)

    @property
    def committed(self) -> list[RepoOutcome]:
        return [r for r in self.repositories if r.status == COMMITTED]

    def for_repo(self, repo: Path | str) -> RepoOutcome | None:
        target = Path(repo).resolve()
        for entry in self.repositories:
            if entry.repo == target:
                return entry
        return None


def _pathspec(target: Path, repo_root: Path) -> str:
    """Path of target relative to repo_root, "." for the root itself."""
    if target == repo_root:
        return "."
    try:
        return target.relative_to(repo_root).as_posix()
    except ValueError:
        return target.name


def commit_scope(
    repo_root: Path,
    pathspec: str,
    message: str,
    branch: str = "main",
) -> RepoOutcome:
    """Stage and commit only the changes under pathspec in one repository.

    Args:
        repo_root: Root of the working tree.
        pathspec: Path relative to repo_root ("." for everything).
        message: Commit message.
        branch: Branch to move onto if HEAD is detached.

    Returns:
        RepoOutcome with status committed, nothing-to-commit or failed.
    """
    checkout = ensure_branch(repo_root, branch)
    if checkout is not None and checkout.returncode != 0:
        return RepoOutcome(
            repo_root, FAILED,
            f"could not check out {branch}: {checkout.stderr.strip()}",
        )

    # match the path literally, never as a glob or magic pathspec
    spec = pathspec if pathspec == "." else f":(literal){pathspec}"

    add = _run_git(["add", "-A", "--", spec], repo_root)
    if add.returncode != 0:
        return RepoOutcome(repo_root, FAILED, f"staging failed: {add.stderr.strip()}")

    # exit 0: nothing staged, 1: staged changes, anything else: error
    staged = _run_git(["diff", "--cached", "--quiet", "--", spec], repo_root)
    if staged.returncode == 0:
        logger.info("Nothing to commit under %s in %s", pathspec, repo_root)
        return RepoOutcome(repo_root, NOTHING_TO_COMMIT)
    if staged.returncode != 1:
        return RepoOutcome(repo_root, FAILED, staged.stderr.strip())

    commit_args = ["commit", "-m", message]
    if pathspec != ".":
        commit_args += ["--", spec]
    commit = _run_git(commit_args, repo_root)
    if commit.returncode != 0:
        reason = commit.stderr.strip() or commit.stdout.strip()
        return RepoOutcome(repo_root, FAILED, f"commit rejected: {reason}")

    sha = head_sha(repo_root)
    logger.info("Committed %s in %s: %s", sha, repo_root, message)
    return RepoOutcome(repo_root, COMMITTED, message, commit=sha)


def propagate_commit(
    path: Path | str,
    message: str,
    branch: str = "main",
    cascade: bool = True,
    strict: bool = False,
) -> CommitOutcome:
    """Commit changes under path and cascade the submodule pointer upward.

    Args:
        path: Directory (or file) whose changes to commit.
        message: Commit message for the repository containing path.
        branch: Branch to land commits on if a repository's HEAD is detached.
        cascade: If False, only the repository containing path is committed.
        strict: If True, a failed superproject query is reported as a
            failure instead of being treated as "not a submodule".

    Returns:
        CommitOutcome with one entry per repository touched.

    Raises:
        NoRepositoryError: If path is not inside a git working tree.
    """
    target = Path(path).resolve()
    repo_root = find_repository_root(target)
    if repo_root is None:
        raise NoRepositoryError(f"Not inside a git repository: {target}")

    outcome = CommitOutcome(message=message)
    level_message = message
    visited: set[Path] = set()

    while repo_root not in visited:
        visited.add(repo_root)
        entry = commit_scope(repo_root, _pathspec(target, repo_root), level_message, branch)
        outcome.repositories.append(entry)
        if not entry.ok or not cascade:
            break

        detection = detect_superproject(repo_root)
        if detection.inconclusive and strict:
            outcome.repositories.append(RepoOutcome(
                repo_root, FAILED,
                f"could not determine superproject: {detection.error}",
            ))
            break
        if detection.path is None:
            break

        logger.info("%s is a submodule of %s", repo_root, detection.path)
        target = repo_root
        level_message = f"Update submodule: {repo_root.name} - {message}"
        repo_root = detection.path

    return outcome
