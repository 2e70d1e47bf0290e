"""Tests for git repository setup."""

from pathlib import Path

import pytest

from conftest import FakeShell
from newnew.git import GitError, GitOperations


@pytest.fixture
def git_shell() -> FakeShell:
    return FakeShell(installed=["git", "gh"])


def test_init_repository(git_shell: FakeShell, tmp_path: Path) -> None:
    """Test init_repository runs init, add and commit in the project."""
    GitOperations(git_shell).init_repository(tmp_path, branch="trunk")

    assert git_shell.commands == [
        ["git", "init", "-b", "trunk"],
        ["git", "add", "."],
        ["git", "commit", "-m", "Initial commit"],
    ]
    assert all(cwd == tmp_path for _, cwd in git_shell.calls)


def test_init_repository_without_git(tmp_path: Path) -> None:
    shell = FakeShell()
    with pytest.raises(GitError, match="Git is not installed"):
        GitOperations(shell).init_repository(tmp_path)
    assert shell.calls == []


def test_init_repository_command_failure(tmp_path: Path) -> None:
    shell = FakeShell(installed=["git"], returncodes={"git": 128})
    with pytest.raises(GitError, match="initialize git repository"):
        GitOperations(shell).init_repository(tmp_path)
    assert len(shell.calls) == 1


def test_init_repository_spawn_failure(tmp_path: Path) -> None:
    shell = FakeShell(installed=["git"], spawn_errors=["git"])
    with pytest.raises(GitError):
        GitOperations(shell).init_repository(tmp_path)


def test_create_github_repository(git_shell: FakeShell, tmp_path: Path) -> None:
    GitOperations(git_shell).create_github_repository(tmp_path, "demo")

    assert git_shell.commands == [
        ["gh", "repo", "create", "demo", "--private", "--source", ".", "--remote", "origin"],
        ["git", "push", "-u", "origin", "main"],
    ]


def test_create_public_github_repository(git_shell: FakeShell, tmp_path: Path) -> None:
    GitOperations(git_shell).create_github_repository(
        tmp_path, "demo", private=False, branch="trunk"
    )
    assert "--public" in git_shell.commands[0]
    assert git_shell.commands[1][-1] == "trunk"


def test_create_github_repository_without_gh(tmp_path: Path) -> None:
    shell = FakeShell(installed=["git"])
    with pytest.raises(GitError, match="GitHub CLI is not installed"):
        GitOperations(shell).create_github_repository(tmp_path, "demo")


def test_push_not_attempted_after_create_failure(tmp_path: Path) -> None:
    shell = FakeShell(installed=["git", "gh"], returncodes={"gh": 1})
    with pytest.raises(GitError, match="create GitHub repository"):
        GitOperations(shell).create_github_repository(tmp_path, "demo")
    assert shell.commands[-1][0] == "gh"
