"""Git repository setup for newly created projects."""

from pathlib import Path

from newnew.console import console
from newnew.errors import GitError
from newnew.shell import ShellRunner

GIT_INSTALL_INFO = "Git is not installed. Please install Git from https://git-scm.com"
GH_INSTALL_INFO = (
    "GitHub CLI is not installed. Please install it from https://cli.github.com"
)


class GitOperations:
    """Post-creation git operations (init, commit, GitHub repo, push)."""

    def __init__(self, shell: ShellRunner | None = None) -> None:
        """Initialize with the command runner to use."""
        self._shell = shell or ShellRunner()

    def _run(self, argv: list[str], cwd: Path, action: str) -> None:
        try:
            returncode = self._shell.run(argv, cwd=cwd)
        except OSError as e:
            raise GitError(f"Failed to {action}: {e}") from e
        if returncode != 0:
            raise GitError(f"Failed to {action}: '{' '.join(argv)}' exited with {returncode}")

    def init_repository(self, path: Path, branch: str = "main") -> None:
        """Initialize a repository in ``path`` and commit everything in it.

        Raises:
            GitError: if git is missing or any git command fails.
        """
        if not self._shell.command_exists("git"):
            raise GitError(GIT_INSTALL_INFO)

        console.print("📦 Initializing Git repository...")
        self._run(["git", "init", "-b", branch], path, "initialize git repository")
        self._run(["git", "add", "."], path, "stage files")
        self._run(
            ["git", "commit", "-m", "Initial commit"], path, "create initial commit"
        )

    def create_github_repository(
        self,
        path: Path,
        name: str,
        private: bool = True,
        branch: str = "main",
    ) -> None:
        """Create a GitHub repository for ``path`` with gh and push to it.

        The project must already be a git repository with a commit.

        Raises:
            GitError: if gh is missing or any command fails.
        """
        if not self._shell.command_exists("gh"):
            raise GitError(GH_INSTALL_INFO)

        visibility = "--private" if private else "--public"
        console.print("🌐 Creating GitHub repository...")
        self._run(
            ["gh", "repo", "create", name, visibility, "--source", ".", "--remote", "origin"],
            path,
            "create GitHub repository",
        )

        console.print("⬆️  Pushing to GitHub...")
        self._run(["git", "push", "-u", "origin", branch], path, "push to GitHub")
