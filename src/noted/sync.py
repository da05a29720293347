"""Commit-and-push of workspaces (``noted update`` / ``noted upload``).

Both commands commit pending work and push every repository that has an
origin. They differ only in the commit messages: ``upload`` summarizes the
pending change counts of each workspace.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from noted.git.propagate import FAILED, RepoOutcome, propagate_commit
from noted.git.push import push_repository
from noted.git.repo import NoRepositoryError, change_summary, find_repository_root, is_tool_root
from noted.git.superproject import find_superproject_root, list_submodule_paths

logger = logging.getLogger(__name__)


@dataclass
class SyncReport:
    """Ordered commit and push outcomes of one sync run."""

    outcomes: list[RepoOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(o.ok for o in self.outcomes)

    def extend(self, outcomes: list[RepoOutcome]) -> None:
        self.outcomes.extend(outcomes)


def _upload_message(repo_root: Path) -> str:
    counts = change_summary(repo_root)
    return (
        f'Updated submodule "{repo_root.name}" with {counts["created"]} new files, '
        f'{counts["modified"]} modified files, and {counts["deleted"]} deleted files.'
    )


def _push_all(outcomes: list[RepoOutcome], branch: str, remote: str) -> list[RepoOutcome]:
    """Push each successfully committed repository, bottom-up."""
    pushes = []
    for entry in outcomes:
        if not entry.ok:
            break
        pushes.append(push_repository(entry.repo, branch=branch, remote=remote))
    return pushes


def sync_workspace(
    path: Path | str,
    branch: str = "main",
    remote: str = "origin",
    summarize: bool = False,
) -> SyncReport:
    """Commit and push the workspace containing path, then its parents.

    Args:
        path: Any path inside the workspace.
        branch: Branch to land commits on if HEAD is detached.
        remote: Remote to push to.
        summarize: Use the change-count summary as the commit message.

    Raises:
        NoRepositoryError: If path is not inside a git repository.
        RuntimeError: If that repository is not a workspace (submodule).
    """
    root = find_repository_root(path)
    if root is None:
        raise NoRepositoryError("Could not find the root of the workspace. Make sure you are inside a workspace.")
    if find_superproject_root(root) is None:
        raise RuntimeError("Update can only be run inside a workspace (submodule).")

    message = _upload_message(root) if summarize else f"Update workspace: {root.name}"
    commit = propagate_commit(root, message, branch=branch)

    report = SyncReport()
    report.extend(commit.repositories)
    report.extend(_push_all(commit.repositories, branch, remote))
    return report


def sync_all(
    path: Path | str,
    branch: str = "main",
    remote: str = "origin",
    summarize: bool = False,
) -> SyncReport:
    """Commit and push every workspace of the parent repository, then the parent.

    Raises:
        NoRepositoryError: If path is not inside a git repository.
        RuntimeError: If not run from the parent repository.
    """
    root = find_repository_root(path)
    if root is None:
        raise NoRepositoryError("Could not find the root of the workspace. Make sure you are inside a workspace.")
    if not is_tool_root(root):
        raise RuntimeError("The --all option can only be run from the main noted repository.")

    report = SyncReport()
    workspaces = list_submodule_paths(root)
    for workspace_path in workspaces:
        if not (workspace_path / ".git").exists():
            report.outcomes.append(RepoOutcome(workspace_path, FAILED, "workspace is not initialized"))
            continue

        logger.info("Processing workspace %s", workspace_path.name)
        message = (
            _upload_message(workspace_path) if summarize
            else f"Update workspace: {workspace_path.name}"
        )
        commit = propagate_commit(workspace_path, message, branch=branch, cascade=False)
        report.extend(commit.repositories)
        report.extend(_push_all(commit.repositories, branch, remote))

    if summarize and workspaces:
        names = ", ".join(p.name for p in workspaces)
        parent_message = f"Updated submodules: {names} to latest commit in parent repository."
    else:
        parent_message = "Update workspaces to latest commits"
    commit = propagate_commit(root, parent_message, branch=branch, cascade=False)
    report.extend(commit.repositories)
    report.extend(_push_all(commit.repositories, branch, remote))
    return report
