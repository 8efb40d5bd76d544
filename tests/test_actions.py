"""Tests for gitscope.git.commit and gitscope.git.remote actions."""

from unittest.mock import patch

import pytest

from gitscope.git.commit import add, commit, init
from gitscope.git.errors import NoRemoteConfigured, NotARepository, OperationFailed
from gitscope.git.remote import clone, fetch_all, list_remotes, pull, sync, update_repo
from gitscope.git.runner import GitResult
from gitscope.git.status import is_repository
from gitscope.lib.config import GitConfig, set_git_config

from conftest import commit_file, git, requires_git

OK = GitResult(returncode=0, stdout="", stderr="")


class TestUpdateRepo:
    """Test update_repo remote selection with mocked helpers."""

    @patch("gitscope.git.remote.pull")
    @patch("gitscope.git.remote.list_remotes")
    def test_pulls_first_remote(self, mock_remotes, mock_pull, tmp_path):
        mock_remotes.return_value = ["upstream", "origin"]
        mock_pull.return_value = OK
        update_repo(tmp_path, "dev")
        mock_pull.assert_called_once_with(tmp_path, "upstream", "dev")

    @patch("gitscope.git.remote.pull")
    @patch("gitscope.git.remote.list_remotes")
    def test_branch_defaults_to_config(self, mock_remotes, mock_pull, tmp_path):
        set_git_config(GitConfig(default_branch="trunk"))
        mock_remotes.return_value = ["origin"]
        mock_pull.return_value = OK
        update_repo(tmp_path)
        mock_pull.assert_called_once_with(tmp_path, "origin", "trunk")

    @patch("gitscope.git.remote.pull")
    @patch("gitscope.git.remote.list_remotes")
    def test_no_remote(self, mock_remotes, mock_pull, tmp_path):
        mock_remotes.return_value = []
        with pytest.raises(NoRemoteConfigured):
            update_repo(tmp_path)
        mock_pull.assert_not_called()


class TestSync:

    @patch("gitscope.git.remote.clone")
    @patch("gitscope.git.remote.update_repo")
    @patch("gitscope.git.remote.is_repository")
    def test_updates_existing_repository(self, mock_is_repo, mock_update, mock_clone, tmp_path):
        mock_is_repo.return_value = True
        sync("https://example.com/r.git", tmp_path, "master")
        mock_update.assert_called_once_with(tmp_path, "master")
        mock_clone.assert_not_called()

    @patch("gitscope.git.remote.clone")
    @patch("gitscope.git.remote.update_repo")
    @patch("gitscope.git.remote.is_repository")
    def test_clones_otherwise(self, mock_is_repo, mock_update, mock_clone, tmp_path):
        mock_is_repo.return_value = False
        sync("https://example.com/r.git", tmp_path / "r")
        mock_clone.assert_called_once_with("https://example.com/r.git", tmp_path / "r")
        mock_update.assert_not_called()


class TestArgumentShapes:
    """Each action forwards a fixed argv shape."""

    @patch("gitscope.git.remote.run_git")
    def test_fetch_all(self, mock_run, tmp_path):
        mock_run.return_value = OK
        fetch_all(tmp_path)
        assert mock_run.call_args[0][0] == ["fetch", "--all"]

    @patch("gitscope.git.remote.run_git")
    def test_pull(self, mock_run, tmp_path):
        mock_run.return_value = OK
        pull(tmp_path, "origin", "master")
        assert mock_run.call_args[0][0] == ["pull", "origin", "master"]

    @patch("gitscope.git.remote.run_git")
    def test_clone(self, mock_run, tmp_path):
        mock_run.return_value = OK
        clone("https://example.com/r.git", tmp_path / "r")
        assert mock_run.call_args[0][0] == ["clone", "https://example.com/r.git", str(tmp_path / "r")]

    @patch("gitscope.git.remote.run_git")
    def test_pull_failure_carries_diagnostic(self, mock_run, tmp_path):
        mock_run.return_value = GitResult(1, "", "fatal: couldn't find remote ref dev\n")
        with pytest.raises(OperationFailed) as exc:
            pull(tmp_path, "origin", "dev")
        assert "couldn't find remote ref" in exc.value.diagnostic


@requires_git
class TestActionsAgainstGit:

    def test_init_creates_repository(self, tmp_path):
        target = tmp_path / "new"
        init(target)
        assert is_repository(target)

    def test_commit_outside_repository(self, tmp_path):
        with pytest.raises(NotARepository):
            commit(tmp_path, "nothing")

    def test_commit_with_nothing_staged_fails(self, repo):
        with pytest.raises(OperationFailed) as exc:
            commit(repo, "empty")
        assert "nothing" in exc.value.diagnostic

    def test_add_missing_file_fails(self, repo):
        with pytest.raises(OperationFailed):
            add("missing.txt", repo)

    def test_commit_message_is_kept_verbatim(self, repo):
        (repo / "abc").write_text("x")
        add("abc", repo)
        commit(repo, "add abc")
        assert git(repo, "log", "-1", "--format=%s") == "add abc"

    def test_sync_clones_then_pulls(self, repo, tmp_path):
        target = tmp_path / "mirror"
        sync(str(repo), target)
        assert list_remotes(target) == ["origin"]

        sha = commit_file(repo, "later.txt", "x", "later")
        sync(str(repo), target, "master")
        assert git(target, "rev-parse", "HEAD") == sha

    def test_fetch_all(self, repo, tmp_path):
        target = tmp_path / "mirror"
        clone(str(repo), target)
        sha = commit_file(repo, "later.txt", "x", "later")
        fetch_all(target)
        assert git(target, "rev-parse", "origin/master") == sha

    def test_update_without_remote(self, repo):
        with pytest.raises(NoRemoteConfigured):
            update_repo(repo)
