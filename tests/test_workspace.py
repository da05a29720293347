"""Tests for workspace management."""

import pytest

from noted.git.propagate import COMMITTED
from noted.git.repo import get_remote_url, has_remote, is_clean
from noted.git.superproject import find_superproject_root
from noted.workspace import (
    add_workspace,
    add_workspace_remote,
    delete_workspace,
    list_workspaces,
    remove_workspace_remote,
)


class TestAddWorkspace:
    def test_creates_registered_submodule(self, notes_parent, git):
        result = add_workspace(notes_parent, "journal")

        ws = result["path"]
        assert result["name"] == "journal"
        assert (ws / "README.md").read_text() == "# journal"
        assert git(ws, "log", "-1", "--format=%s") == "journal initial commit"
        assert find_superproject_root(ws) == notes_parent
        assert "journal" in (notes_parent / ".gitmodules").read_text()

    def test_parent_commit_is_propagated(self, notes_parent, git):
        result = add_workspace(notes_parent, "journal")

        statuses = [r.status for r in result["outcome"].repositories]
        assert statuses == [COMMITTED]
        assert git(notes_parent, "log", "-1", "--format=%s") == "Add workspace: journal"
        assert is_clean(notes_parent)

    def test_name_collision_gets_suffix(self, notes_parent):
        add_workspace(notes_parent, "journal")
        second = add_workspace(notes_parent, "journal")
        third = add_workspace(notes_parent, "journal")
        assert second["name"] == "journal-1"
        assert third["name"] == "journal-2"

    def test_with_url_records_remote(self, notes_parent, bare_remote, git):
        result = add_workspace(notes_parent, "journal", url=bare_remote)

        assert get_remote_url(result["path"], "origin") == bare_remote
        url = git(notes_parent, "config", "--file", ".gitmodules", "submodule.journal.url")
        assert url == bare_remote

    def test_requires_parent_marker(self, tmp_path, make_repo):
        repo = make_repo(tmp_path / "plain")
        with pytest.raises(RuntimeError, match="main noted repository"):
            add_workspace(repo, "journal")


class TestListAndDelete:
    def test_list_workspaces(self, notes_parent, journal):
        add_workspace(notes_parent, "ideas")

        workspaces = list_workspaces(notes_parent)

        assert [w["name"] for w in workspaces] == ["ideas", "journal"]
        assert all(w["state"] == "current" for w in workspaces)
        assert all(len(w["sha"]) == 40 for w in workspaces)

    def test_list_empty(self, notes_parent):
        assert list_workspaces(notes_parent) == []

    def test_modified_state(self, notes_parent, journal, git):
        (journal / "note.md").write_text("x\n")
        git(journal, "add", "note.md")
        git(journal, "commit", "-m", "local only")

        (ws,) = list_workspaces(notes_parent)
        assert ws["state"] == "modified"

    def test_delete_workspace(self, notes_parent, journal, git):
        outcome = delete_workspace(notes_parent, "journal")

        assert outcome.repositories[0].status == COMMITTED
        assert not journal.exists()
        assert not (notes_parent / ".git" / "modules" / "journal").exists()
        assert list_workspaces(notes_parent) == []
        assert git(notes_parent, "log", "-1", "--format=%s") == "Delete workspace: journal"

    def test_delete_missing(self, notes_parent):
        with pytest.raises(FileNotFoundError):
            delete_workspace(notes_parent, "nope")


class TestWorkspaceRemotes:
    def test_add_remote(self, notes_parent, journal, bare_remote, git):
        outcome = add_workspace_remote(notes_parent, "journal", bare_remote)

        assert has_remote(journal, "origin")
        url = git(notes_parent, "config", "--file", ".gitmodules", "submodule.journal.url")
        assert url == bare_remote
        assert outcome.repositories[0].status == COMMITTED

    def test_add_remote_twice(self, notes_parent, journal, bare_remote):
        add_workspace_remote(notes_parent, "journal", bare_remote)
        with pytest.raises(RuntimeError, match="already has a remote"):
            add_workspace_remote(notes_parent, "journal", bare_remote)

    def test_remove_remote_falls_back_to_local_path(self, notes_parent, journal, bare_remote, git):
        add_workspace_remote(notes_parent, "journal", bare_remote)

        remove_workspace_remote(notes_parent, "journal")

        assert not has_remote(journal, "origin")
        url = git(notes_parent, "config", "--file", ".gitmodules", "submodule.journal.url")
        assert url == str(journal)

    def test_remove_missing_remote(self, notes_parent, journal):
        with pytest.raises(RuntimeError, match="No remote"):
            remove_workspace_remote(notes_parent, "journal")
