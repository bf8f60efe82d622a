"""Fixtures for integration tests that run the real git executable."""

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def run_git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


def init_git_repo(repo: Path, default_branch: str) -> None:
    """Initialize a repository with one commit on default_branch."""
    run_git(repo, "init", "-b", default_branch)
    run_git(repo, "config", "user.email", "test@example.com")
    run_git(repo, "config", "user.name", "Test User")
    run_git(repo, "config", "commit.gpgsign", "false")
    commit_file(repo, "README.md", "# Test\n", "Initial commit")


def commit_file(repo: Path, name: str, content: str, message: str) -> str:
    """Write a file, commit it, and return the new HEAD SHA."""
    (repo / name).write_text(content, encoding="utf-8")
    run_git(repo, "add", name)
    run_git(repo, "commit", "-m", message)
    return run_git(repo, "rev-parse", "HEAD")


@dataclass(frozen=True)
class StackedRepo:
    """A clone whose HEAD is `feature` on top of `stage` on top of `main`.

    feature is 2 commits past stage; stage is 3 commits past main.
    """

    work: Path
    remote: Path


@pytest.fixture
def stacked_repo(tmp_path: Path) -> StackedRepo:
    remote = tmp_path / "remote.git"
    remote.mkdir()
    run_git(remote, "init", "--bare", "-b", "main")

    work = tmp_path / "work"
    work.mkdir()
    init_git_repo(work, "main")
    run_git(work, "remote", "add", "origin", str(remote))
    run_git(work, "push", "-u", "origin", "main")

    run_git(work, "checkout", "-b", "stage")
    for i in range(3):
        commit_file(work, f"stage{i}.txt", f"{i}\n", f"Stage change {i}")
    run_git(work, "push", "-u", "origin", "stage")

    run_git(work, "checkout", "-b", "feature/add-new-user")
    commit_file(work, "user.py", "class User: ...\n", "Add user model")
    commit_file(work, "form.py", "class Form: ...\n", "Add user form")

    return StackedRepo(work=work, remote=remote)
