"""Temporary local workspace for a review."""

import logging
import threading
import time
from pathlib import Path

from ric.errors import DirectoryCreationError
from ric.models.pr import ResolvedSource
from ric.workspace.base import CommandRunner, run_command, working_directory

logger = logging.getLogger(__name__)

WORKSPACE_PREFIX = "ric"

_stamp_lock = threading.Lock()
_last_stamp = 0


def _next_stamp() -> int:
    """Epoch milliseconds, strictly increasing within this process."""
    global _last_stamp
    with _stamp_lock:
        stamp = max(time.time_ns() // 1_000_000, _last_stamp + 1)
        _last_stamp = stamp
        return stamp


def workspace_name(repo_name: str) -> str:
    """Directory name for a new workspace, e.g. ``ric-widgets-1700000000000``."""
    return f"{WORKSPACE_PREFIX}-{repo_name}-{_next_stamp()}"


class LocalWorkspace:
    """A freshly created directory holding one clone."""

    def __init__(self, directory: Path, runner: CommandRunner = run_command):
        """
        Args:
            directory: Workspace directory, created by ``create``
            runner: Command runner, replaceable in tests
        """
        self.directory = directory
        self.runner = runner

    @classmethod
    def create(
        cls, temp_root: Path, repo_name: str, runner: CommandRunner = run_command
    ) -> "LocalWorkspace":
        """
        Create a new uniquely named workspace directory.

        Raises:
            DirectoryCreationError: If the directory cannot be created
        """
        directory = Path(temp_root) / workspace_name(repo_name)
        try:
            directory.mkdir(exist_ok=False)
        except OSError as e:
            raise DirectoryCreationError(directory, e) from e

        logger.debug("Created workspace %s", directory)
        return cls(directory, runner=runner)

    async def clone(self, source: ResolvedSource, deep: bool) -> None:
        """
        Clone the source into the workspace.

        Prompts for credentials are disabled so that private or missing
        repositories fail instead of waiting for terminal input.

        Args:
            source: Repository to clone
            deep: Clone full history; otherwise only the latest commit
        """
        command = ["git", "clone"]
        if not deep:
            command += ["--depth", "1"]
        command += [source.clone_url, "."]

        result = await self.runner(command, env={"GIT_TERMINAL_PROMPT": "0"})
        result.check()

    async def checkout(self, branch: str) -> None:
        """Check out a branch in the workspace."""
        result = await self.runner(["git", "checkout", branch])
        result.check()

    async def populate(self, source: ResolvedSource, deep: bool, reporter=None) -> None:
        """
        Clone and check out inside the workspace directory.

        The working directory is restored whether or not the commands succeed.

        Args:
            source: Repository and branch to fetch
            deep: Clone full history
            reporter: Optional StatusReporter for progress messages
        """
        with working_directory(self.directory):
            if reporter:
                reporter.start(
                    f"Cloning {reporter.name(source.clone_url)} into temporary directory"
                )
            await self.clone(source, deep)

            if reporter:
                reporter.update(f"Checking out {reporter.name(source.branch)}")
            await self.checkout(source.branch)
