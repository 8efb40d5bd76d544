"""Shared fixtures: isolated git environment and a fresh gitscope config."""

import shutil
import subprocess
from pathlib import Path

import pytest

from gitscope.lib.config import ENV_KEYS, ENV_PREFIX, set_git_config

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


@pytest.fixture(autouse=True)
def isolated_git_env(tmp_path_factory, monkeypatch):
    """Keep user/system git config and GITSCOPE_* settings out of tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_CONFIG_COUNT", "1")
    monkeypatch.setenv("GIT_CONFIG_KEY_0", "init.defaultBranch")
    monkeypatch.setenv("GIT_CONFIG_VALUE_0", "master")
    for suffix in ENV_KEYS:
        monkeypatch.delenv(ENV_PREFIX + suffix, raising=False)
    set_git_config(None)
    yield
    set_git_config(None)


def git(repo: Path, *args: str) -> str:
    """Run git directly, bypassing gitscope, for test setup."""
    result = subprocess.run(
        ["git", *args], cwd=str(repo), capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


def commit_file(repo: Path, name: str, content: str, message: str) -> str:
    """Write, stage and commit a file; return the new commit SHA."""
    (repo / name).write_text(content)
    git(repo, "add", name)
    git(repo, "commit", "-m", message)
    return git(repo, "rev-parse", "HEAD")


@pytest.fixture
def repo(tmp_path) -> Path:
    """An initialized repository on branch master with one commit."""
    path = tmp_path / "repo"
    path.mkdir()
    git(path, "init")
    git(path, "symbolic-ref", "HEAD", "refs/heads/master")
    commit_file(path, "README", "hello\n", "initial")
    return path
