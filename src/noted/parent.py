"""Parent repository initialization and the .notedconfig marker.

The parent repository is the top-level git repo holding every workspace as
a submodule. It is recognized by the .notedconfig marker at its root:

    {
      "parent_type": "local" | "remote",
      "remote_type": "github" | "url" | null,
      "remote_url": str | null,
      "createdAt": ISO-8601 timestamp
    }
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from noted.git.push import push_repository
from noted.git.repo import _run_git
from noted.paths import MARKER_FILE
from noted.remote import GitHubCliRemoteCreator, RemoteCreator, is_valid_url
from noted.templates import render_parent_readme

logger = logging.getLogger(__name__)

REMOTE_MODES = ("local", "github", "url")


def read_marker(root: Path | str) -> dict:
    """Load .notedconfig from a parent repository root.

    Raises:
        FileNotFoundError: If root has no marker.
    """
    with open(Path(root) / MARKER_FILE) as f:
        return json.load(f)


def write_marker(root: Path | str, data: dict) -> None:
    """Write .notedconfig with consistent formatting."""
    with open(Path(root) / MARKER_FILE, "w") as f:
        json.dump(data, f, indent=2)
        f.write("\n")


def _commit_files(repo_path: Path, files: list[str], message: str) -> None:
    _run_git(["add", "--"] + files, repo_path)
    result = _run_git(["commit", "-m", message], repo_path)
    if result.returncode != 0:
        raise RuntimeError(f"Commit failed in {repo_path}: {result.stderr.strip() or result.stdout.strip()}")


def init_parent(
    name: str,
    location: Path | str,
    remote: str = "local",
    remote_url: str | None = None,
    creator: RemoteCreator | None = None,
    branch: str = "main",
    remote_name: str = "origin",
) -> dict:
    """Create and initialize a new parent repository.

    Creates the directory, runs git init, writes README.md and .notedconfig,
    and makes the initial commit. For remote modes the remote is wired up,
    the marker updated and committed, and the branch pushed.

    Args:
        name: Directory name of the new repository.
        location: Directory to create it in.
        remote: One of "local", "github", "url".
        remote_url: Remote URL, required for the "url" mode.
        creator: Remote creator for the "github" mode. Defaults to the
            GitHub CLI.
        branch: Initial branch name.
        remote_name: Name of the remote to configure.

    Returns:
        Dict with keys: path, config, push (a RepoOutcome or None).

    Raises:
        ValueError: Unknown remote mode or invalid URL.
        FileExistsError: If the target directory already exists.
    """
    if remote not in REMOTE_MODES:
        raise ValueError(f"Unknown remote mode: {remote}. Valid: {', '.join(REMOTE_MODES)}")
    if remote == "url" and not is_valid_url(remote_url):
        raise ValueError(f"Invalid remote URL: {remote_url}")

    repo_path = Path(location).resolve() / name
    if repo_path.exists():
        raise FileExistsError(f'Directory "{name}" already exists in {repo_path.parent}')

    repo_path.mkdir(parents=True)
    logger.info("Created directory %s", repo_path)

    init = _run_git(["init", "-b", branch], repo_path)
    if init.returncode != 0:
        raise RuntimeError(f"git init failed in {repo_path}: {init.stderr.strip()}")

    config = {
        "parent_type": "local" if remote == "local" else "remote",
        "remote_type": None,
        "remote_url": None,
        "createdAt": datetime.now(timezone.utc).isoformat(),
    }

    (repo_path / "README.md").write_text(render_parent_readme(name))
    write_marker(repo_path, config)
    _commit_files(repo_path, ["README.md", MARKER_FILE], "Initial commit: Add README.md and .notedconfig")

    result = {"path": repo_path, "config": config, "push": None}
    if remote == "local":
        return result

    if remote == "github":
        creator = creator or GitHubCliRemoteCreator(remote=remote_name)
        config["remote_url"] = creator.create_remote_repo(name, repo_path)
        config["remote_type"] = "github"
    else:
        added = _run_git(["remote", "add", remote_name, remote_url], repo_path)
        if added.returncode != 0:
            raise RuntimeError(f"Could not add remote {remote_url}: {added.stderr.strip()}")
        config["remote_url"] = remote_url
        config["remote_type"] = "url"

    write_marker(repo_path, config)
    _commit_files(repo_path, [MARKER_FILE], "Update .notedconfig with remote info")

    result["push"] = push_repository(repo_path, branch=branch, remote=remote_name)
    return result
