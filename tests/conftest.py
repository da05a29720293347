"""Shared test fixtures for noted."""

import subprocess
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def git_env(tmp_path_factory, monkeypatch):
    """Isolate git identity and config from the developer's machine."""
    home = tmp_path_factory.mktemp("home")
    gitconfig = home / ".gitconfig"
    gitconfig.write_text(
        "[init]\n"
        "\tdefaultBranch = main\n"
        "[protocol \"file\"]\n"
        "\tallow = always\n"
    )
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(gitconfig))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for var in ("GIT_AUTHOR_NAME", "GIT_COMMITTER_NAME"):
        monkeypatch.setenv(var, "test")
    for var in ("GIT_AUTHOR_EMAIL", "GIT_COMMITTER_EMAIL"):
        monkeypatch.setenv(var, "t@t")
    monkeypatch.setenv("NOTED_CONFIG_DIR", str(home / ".config" / "noted"))
    monkeypatch.delenv("NOTED_SETTINGS", raising=False)
    return home


@pytest.fixture
def git():
    """Run a git command in a directory and return its stripped stdout."""
    def _git(cwd, *args):
        result = subprocess.run(
            ["git", *args], cwd=cwd, capture_output=True, text=True, check=True,
        )
        return result.stdout.strip()
    return _git


@pytest.fixture
def make_repo(git):
    """Create a git repository with one committed README."""
    def _make(path: Path, readme: str = "# repo\n") -> Path:
        path.mkdir(parents=True, exist_ok=True)
        git(path, "init", "-b", "main")
        (path / "README.md").write_text(readme)
        git(path, "add", "README.md")
        git(path, "commit", "-m", "init")
        return path.resolve()
    return _make


@pytest.fixture
def nest(git, make_repo):
    """Create a repository under parent and register it there as a submodule."""
    def _nest(parent: Path, name: str) -> Path:
        child = make_repo(parent / name)
        git(parent, "submodule", "add", "--", str(child), name)
        git(parent, "commit", "-m", f"add {name}")
        return child
    return _nest


@pytest.fixture
def bare_remote(tmp_path, git):
    """An empty bare repository usable as origin, returned as a file:// URL."""
    remote = tmp_path / "remotes" / "origin.git"
    remote.mkdir(parents=True)
    git(remote, "init", "--bare", "-b", "main")
    return remote.resolve().as_uri()


@pytest.fixture
def notes_parent(tmp_path):
    """A freshly initialized local parent repository."""
    from noted.parent import init_parent

    result = init_parent("Noted", tmp_path)
    return result["path"]


@pytest.fixture
def journal(notes_parent):
    """A workspace called journal inside the parent repository."""
    from noted.workspace import add_workspace

    return add_workspace(notes_parent, "journal")["path"]
