"""External command execution."""

import asyncio
import contextlib
import logging
import os
import time
from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from ric.errors import SubprocessError

logger = logging.getLogger(__name__)


@dataclass
class ExecResult:
    """Result of command execution."""

    command: list[str]
    stdout: str
    stderr: str
    return_code: int
    duration_sec: float = 0.0

    @property
    def ok(self) -> bool:
        return self.return_code == 0

    def check(self) -> "ExecResult":
        """Raise SubprocessError unless the command exited with 0."""
        if not self.ok:
            raise SubprocessError(self.command, self.return_code, self.stderr)
        return self


CommandRunner = Callable[..., Awaitable[ExecResult]]


async def run_command(
    command: list[str],
    cwd: str | Path | None = None,
    env: dict[str, str] | None = None,
) -> ExecResult:
    """
    Run a command silently and capture its output.

    Args:
        command: Program and arguments
        cwd: Working directory, defaults to the current one
        env: Extra environment variables merged over ``os.environ``

    Returns:
        ExecResult with stdout, stderr, and return code
    """
    environment = {**os.environ, **(env or {})}
    logger.debug("Running %s", " ".join(command))

    start_time = time.time()
    try:
        proc = await asyncio.create_subprocess_exec(
            *command,
            cwd=cwd,
            env=environment,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        return ExecResult(
            command=command,
            stdout="",
            stderr=str(e),
            return_code=127,
            duration_sec=time.time() - start_time,
        )

    stdout, stderr = await proc.communicate()
    result = ExecResult(
        command=command,
        stdout=stdout.decode(errors="replace"),
        stderr=stderr.decode(errors="replace"),
        return_code=proc.returncode,
        duration_sec=time.time() - start_time,
    )
    logger.debug("%s exited with %d", command[0], result.return_code)
    return result


@contextlib.contextmanager
def working_directory(path: str | Path) -> Iterator[Path]:
    """Change into ``path`` and restore the previous directory on exit."""
    previous = Path.cwd()
    os.chdir(path)
    try:
        yield Path(path)
    finally:
        os.chdir(previous)
