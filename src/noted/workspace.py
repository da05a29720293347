"""Workspace management inside the parent repository.

Each workspace is its own git repository registered in place as a
submodule of the parent. Every change ends with a propagated commit in the
parent repository.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from noted.git.propagate import CommitOutcome, propagate_commit
from noted.git.repo import _run_git, has_remote, is_tool_root
from noted.naming import check_name, existing_entries, next_available_name
from noted.paths import GITMODULES_FILE
from noted.templates import render_workspace_readme

logger = logging.getLogger(__name__)


def _require_parent(parent_root: Path) -> None:
    if not is_tool_root(parent_root):
        raise RuntimeError("Workspaces can only be managed within the main noted repository.")
    if not (parent_root / ".git").exists():
        raise RuntimeError("Parent repository not initialized or not a valid git repository.")


def _require_workspace(parent_root: Path, name: str) -> Path:
    workspace_path = parent_root / check_name(name)
    if not workspace_path.is_dir():
        raise FileNotFoundError(f"Workspace '{name}' does not exist.")
    return workspace_path


def _check(result, action: str) -> None:
    if result.returncode != 0:
        raise RuntimeError(f"{action} failed: {result.stderr.strip() or result.stdout.strip()}")


def add_workspace(
    parent_root: Path | str,
    name: str = "untitled-workspace",
    url: str | None = None,
    branch: str = "main",
    remote_name: str = "origin",
) -> dict:
    """Create a workspace repository and register it as a submodule.

    Args:
        parent_root: Root of the parent repository.
        name: Requested name; a -N suffix is appended if it is taken.
        url: Optional remote URL for the workspace. Recorded in .gitmodules
            in place of the local path.
        branch: Initial branch of the workspace.
        remote_name: Remote to configure when url is given.

    Returns:
        Dict with keys: name, path, url, outcome.
    """
    root = Path(parent_root).resolve()
    _require_parent(root)
    check_name(name)

    final_name = next_available_name(name, existing_entries(root))
    workspace_path = root / final_name
    workspace_path.mkdir()
    logger.info("Created workspace directory %s", workspace_path)

    _check(_run_git(["init", "-b", branch], workspace_path), "git init")
    (workspace_path / "README.md").write_text(render_workspace_readme(final_name))
    _run_git(["add", "README.md"], workspace_path)
    _check(
        _run_git(["commit", "-m", f"{final_name} initial commit"], workspace_path),
        "Initial workspace commit",
    )

    if url:
        _check(_run_git(["remote", "add", remote_name, url], workspace_path), "Adding remote")

    # An existing repository at the path is registered in place, not cloned.
    submodule_url = url or str(workspace_path)
    _check(
        _run_git(["submodule", "add", "--", submodule_url, final_name], root),
        "Adding submodule",
    )

    outcome = propagate_commit(root, f"Add workspace: {final_name}", branch=branch)
    return {"name": final_name, "path": workspace_path, "url": url, "outcome": outcome}


def delete_workspace(
    parent_root: Path | str,
    name: str,
    branch: str = "main",
) -> CommitOutcome:
    """Deinitialize and remove a workspace submodule, then commit the removal."""
    root = Path(parent_root).resolve()
    _require_workspace(root, name)

    _check(_run_git(["submodule", "deinit", "-f", "--", name], root), "Deinitializing submodule")
    _check(_run_git(["rm", "-f", "--", name], root), "Removing submodule from index")

    module_git_dir = root / ".git" / "modules" / name
    if module_git_dir.exists():
        shutil.rmtree(module_git_dir)
        logger.info("Deleted submodule git directory %s", module_git_dir)
    if (root / name).exists():
        shutil.rmtree(root / name)

    return propagate_commit(root, f"Delete workspace: {name}", branch=branch)


def list_workspaces(parent_root: Path | str) -> list[dict]:
    """List submodules of the parent repository.

    Returns:
        List of dicts with: name, sha, state ("current", "modified",
        "not-initialized" or "conflict").
    """
    root = Path(parent_root).resolve()
    result = _run_git(["submodule", "status"], root)
    if result.returncode != 0:
        return []

    states = {" ": "current", "+": "modified", "-": "not-initialized", "U": "conflict"}
    workspaces = []
    for line in result.stdout.rstrip("\n").split("\n"):
        if not line.strip():
            continue

        # Format: "<prefix><sha> <path> (<describe>)"
        prefix = line[0]
        parts = line[1:].strip().split()
        if len(parts) < 2:
            continue
        workspaces.append({
            "name": parts[1],
            "sha": parts[0],
            "state": states.get(prefix, "unknown"),
            "line": line.strip(),
        })
    return workspaces


def _set_gitmodules_url(root: Path, name: str, url: str) -> None:
    _check(
        _run_git(["config", "--file", GITMODULES_FILE, f"submodule.{name}.url", url], root),
        "Updating .gitmodules",
    )
    _run_git(["config", f"submodule.{name}.url", url], root)


def add_workspace_remote(
    parent_root: Path | str,
    name: str,
    url: str,
    branch: str = "main",
    remote_name: str = "origin",
) -> CommitOutcome:
    """Add a remote to a workspace and record it in .gitmodules."""
    root = Path(parent_root).resolve()
    workspace_path = _require_workspace(root, name)

    if has_remote(workspace_path, remote_name):
        raise RuntimeError(f"Workspace '{name}' already has a remote {remote_name}.")
    _check(_run_git(["remote", "add", remote_name, url], workspace_path), "Adding remote")
    _set_gitmodules_url(root, name, url)

    return propagate_commit(root, f"Add remote origin to workspace: {name}", branch=branch)


def remove_workspace_remote(
    parent_root: Path | str,
    name: str,
    branch: str = "main",
    remote_name: str = "origin",
) -> CommitOutcome:
    """Remove a workspace's remote; .gitmodules falls back to the local path."""
    root = Path(parent_root).resolve()
    workspace_path = _require_workspace(root, name)

    if not has_remote(workspace_path, remote_name):
        raise RuntimeError(f"No remote {remote_name} found for workspace: {name}")
    _check(_run_git(["remote", "remove", remote_name], workspace_path), "Removing remote")
    _set_gitmodules_url(root, name, str(workspace_path))

    return propagate_commit(root, f"Remove remote origin from workspace: {name}", branch=branch)
