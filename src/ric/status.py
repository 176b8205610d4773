"""Progress reporting for the review pipeline."""

from typing import Protocol

from rich.console import Console
from rich.markup import escape
from rich.status import Status


class StatusReporter(Protocol):
    """Receives progress updates; each message supersedes the previous one."""

    def name(self, text: str) -> str: ...

    def start(self, message: str) -> None: ...

    def update(self, message: str) -> None: ...

    def succeed(self, message: str) -> None: ...

    def fail(self, message: str) -> None: ...

    def stop(self) -> None: ...


class ConsoleStatusReporter:
    """Spinner-based reporter writing to a rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self._status: Status | None = None

    def name(self, text: str) -> str:
        """Highlight a path, URL or branch name."""
        return f"[italic blue]{escape(text)}[/italic blue]"

    def start(self, message: str) -> None:
        if self._status is None:
            self._status = self.console.status(message)
            self._status.start()
        else:
            self._status.update(message)

    def update(self, message: str) -> None:
        self.start(message)

    def succeed(self, message: str) -> None:
        self.stop()
        self.console.print(f"[green]✓[/green] {message}")

    def fail(self, message: str) -> None:
        self.stop()
        self.console.print(f"[red]✗[/red] {message}")

    def stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None
