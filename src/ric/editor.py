"""Open the workspace in the configured editor."""

import logging
import shlex
from pathlib import Path

from ric.config import DEFAULT_EDITOR_COMMAND
from ric.workspace.base import CommandRunner, run_command

logger = logging.getLogger(__name__)


class EditorLauncher:
    """Runs the editor command and waits for it to exit."""

    def __init__(
        self, command: str = DEFAULT_EDITOR_COMMAND, runner: CommandRunner = run_command
    ):
        self.command = command
        self.runner = runner

    def build_command(self, directory: Path) -> list[str]:
        """Split the editor command and append the workspace path."""
        return [*shlex.split(self.command), str(directory)]

    async def open(self, directory: Path) -> None:
        """
        Open ``directory`` and block until the editor exits.

        Raises:
            SubprocessError: If the editor exits non-zero
        """
        command = self.build_command(directory)
        logger.debug("Opening editor: %s", command)
        result = await self.runner(command)
        result.check()
