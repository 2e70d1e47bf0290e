"""Shell command execution and command availability checks."""

import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


class ShellRunner:
    """Runs external commands synchronously with inherited stdio."""

    def run(self, argv: Sequence[str], cwd: Path) -> int:
        """Run ``argv`` in ``cwd`` and return its exit code.

        Raises OSError if the program cannot be started.
        """
        logger.debug("Running %s in %s", list(argv), cwd)
        result = subprocess.run(list(argv), cwd=cwd, check=False)
        return result.returncode

    def command_exists(self, command: str) -> bool:
        """Check if ``command`` is available in PATH."""
        return shutil.which(command) is not None
