"""Tests for remote URL validation and GitHub repository creation."""

import subprocess

import pytest

from noted.remote import GitHubCliRemoteCreator, is_valid_url


class TestIsValidUrl:
    @pytest.mark.parametrize("url", [
        "https://github.com/user/notes.git",
        "ssh://git@github.com/user/notes.git",
        "git@github.com:user/notes.git",
        "file:///srv/git/notes.git",
    ])
    def test_valid(self, url):
        assert is_valid_url(url)

    @pytest.mark.parametrize("url", [None, "", "notes", "not a url", "C:/notes", "https://"])
    def test_invalid(self, url):
        assert not is_valid_url(url)


def _completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestGitHubCliRemoteCreator:
    def test_unknown_visibility(self):
        with pytest.raises(ValueError):
            GitHubCliRemoteCreator(visibility="secret")

    def test_requires_authentication(self, tmp_path, monkeypatch):
        creator = GitHubCliRemoteCreator()
        monkeypatch.setattr(creator, "_run_gh", lambda args, cwd: _completed(returncode=1))

        with pytest.raises(RuntimeError, match="gh auth login"):
            creator.create_remote_repo("Noted", tmp_path)

    def test_create_runs_gh_and_reads_remote(self, tmp_path, make_repo, git, monkeypatch):
        repo = make_repo(tmp_path / "Noted")
        calls = []

        def fake_gh(args, cwd):
            calls.append(args)
            if args[0] == "repo":
                git(cwd, "remote", "add", "origin", "git@github.com:me/Noted.git")
            return _completed()

        creator = GitHubCliRemoteCreator(visibility="public")
        monkeypatch.setattr(creator, "_run_gh", fake_gh)

        url = creator.create_remote_repo("Noted", repo)

        assert url == "git@github.com:me/Noted.git"
        assert calls[1] == ["repo", "create", "Noted", "--public", "--source=.", "--remote=origin"]

    def test_create_failure(self, tmp_path, monkeypatch):
        creator = GitHubCliRemoteCreator()
        results = iter([_completed(), _completed(returncode=1, stderr="name already exists")])
        monkeypatch.setattr(creator, "_run_gh", lambda args, cwd: next(results))

        with pytest.raises(RuntimeError, match="name already exists"):
            creator.create_remote_repo("Noted", tmp_path)

    def test_missing_gh_binary(self, tmp_path, monkeypatch):
        def boom(*args, **kwargs):
            raise FileNotFoundError("gh")

        monkeypatch.setattr("noted.remote.subprocess.run", boom)
        with pytest.raises(RuntimeError, match="not installed"):
            GitHubCliRemoteCreator().create_remote_repo("Noted", tmp_path)
