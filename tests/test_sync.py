"""Tests for update/upload (commit + push) and the push layer."""

import pytest

from noted.git.propagate import (
    COMMITTED,
    FAILED,
    NOTHING_TO_COMMIT,
    PUSH_SKIPPED_NO_REMOTE,
    PUSHED,
    UP_TO_DATE,
)
from noted.git.push import push_repository
from noted.git.repo import NoRepositoryError, ahead_count, head_sha
from noted.notes import add_note
from noted.sync import sync_all, sync_workspace
from noted.workspace import add_workspace, add_workspace_remote


def _statuses(report):
    return [(o.repo.name, o.status) for o in report.outcomes]


class TestPushRepository:
    def test_no_remote(self, tmp_path, make_repo):
        repo = make_repo(tmp_path / "repo")
        assert push_repository(repo).status == PUSH_SKIPPED_NO_REMOTE

    def test_first_push_sets_upstream(self, tmp_path, make_repo, bare_remote, git):
        repo = make_repo(tmp_path / "repo")
        git(repo, "remote", "add", "origin", bare_remote)

        outcome = push_repository(repo)

        assert outcome.status == PUSHED
        assert ahead_count(repo) == 0
        assert push_repository(repo).status == UP_TO_DATE

    def test_push_failure_is_reported(self, tmp_path, make_repo, git):
        repo = make_repo(tmp_path / "repo")
        git(repo, "remote", "add", "origin", (tmp_path / "missing.git").as_uri())

        outcome = push_repository(repo)

        assert outcome.status == FAILED
        assert outcome.detail.startswith("push failed")


class TestSyncWorkspace:
    def test_commits_and_pushes(self, notes_parent, journal, bare_remote, git, tmp_path):
        add_workspace_remote(notes_parent, "journal", bare_remote)
        add_note(journal, "today", track=False)

        report = sync_workspace(journal)

        assert _statuses(report) == [
            ("journal", COMMITTED),
            ("Noted", COMMITTED),
            ("journal", PUSHED),
            ("Noted", PUSH_SKIPPED_NO_REMOTE),
        ]
        assert report.ok
        assert git(journal, "log", "-1", "--format=%s") == "Update workspace: journal"
        remote_dir = tmp_path / "remotes" / "origin.git"
        assert git(remote_dir, "rev-parse", "main") == head_sha(journal)

    def test_second_run_has_nothing_to_do(self, notes_parent, journal, bare_remote):
        add_workspace_remote(notes_parent, "journal", bare_remote)
        sync_workspace(journal)

        report = sync_workspace(journal)

        assert _statuses(report) == [
            ("journal", NOTHING_TO_COMMIT),
            ("Noted", NOTHING_TO_COMMIT),
            ("journal", UP_TO_DATE),
            ("Noted", PUSH_SKIPPED_NO_REMOTE),
        ]

    def test_upload_message_summarizes_changes(self, journal, git):
        add_note(journal, "one", track=False)
        add_note(journal, "two", track=False)
        (journal / "README.md").write_text("# changed\n")

        sync_workspace(journal, summarize=True)

        assert git(journal, "log", "-1", "--format=%s") == (
            'Updated submodule "journal" with 2 new files, 1 modified files, and 0 deleted files.'
        )

    def test_run_from_inside_a_folder(self, journal):
        (journal / "ideas").mkdir()
        (journal / "ideas" / "a.md").write_text("a\n")
        (journal / "b.md").write_text("b\n")

        report = sync_workspace(journal / "ideas")

        assert report.outcomes[0].status == COMMITTED
        assert report.outcomes[0].repo == journal

    def test_not_a_workspace(self, notes_parent):
        with pytest.raises(RuntimeError, match="inside a workspace"):
            sync_workspace(notes_parent)

    def test_outside_any_repository(self, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()
        with pytest.raises(NoRepositoryError):
            sync_workspace(empty)


class TestSyncAll:
    def test_processes_every_workspace_then_parent(self, notes_parent, journal, git):
        ideas = add_workspace(notes_parent, "ideas")["path"]
        add_note(journal, "a", track=False)
        add_note(ideas, "b", track=False)

        report = sync_all(notes_parent)

        assert _statuses(report) == [
            ("journal", COMMITTED),
            ("journal", PUSH_SKIPPED_NO_REMOTE),
            ("ideas", COMMITTED),
            ("ideas", PUSH_SKIPPED_NO_REMOTE),
            ("Noted", COMMITTED),
            ("Noted", PUSH_SKIPPED_NO_REMOTE),
        ]
        assert git(notes_parent, "log", "-1", "--format=%s") == "Update workspaces to latest commits"

    def test_upload_all_parent_message(self, notes_parent, journal, git):
        add_note(journal, "a", track=False)

        sync_all(notes_parent, summarize=True)

        assert git(notes_parent, "log", "-1", "--format=%s") == (
            "Updated submodules: journal to latest commit in parent repository."
        )

    def test_requires_parent(self, journal):
        with pytest.raises(RuntimeError, match="--all"):
            sync_all(journal)
