"""Git operations for newnew."""

from newnew.errors import GitError
from newnew.git.operations import GitOperations

__all__ = [
    "GitError",
    "GitOperations",
]
