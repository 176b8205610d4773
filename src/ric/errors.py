"""Exceptions raised by the review pipeline."""


class RicError(Exception):
    """Base class for all ric errors."""


class MalformedUrlError(RicError):
    """The source argument is not a usable absolute URL."""

    def __init__(self, url: str, reason: str = "not a valid URL"):
        self.url = url
        super().__init__(f"Invalid URL {url!r}: {reason}")


class ApiError(RicError):
    """Pull request metadata could not be fetched or decoded."""


class DirectoryCreationError(RicError):
    """The workspace directory could not be created."""

    def __init__(self, path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to create workspace directory {path}: {cause}")


class SubprocessError(RicError):
    """An external command exited with a non-zero status."""

    def __init__(self, command: list[str], return_code: int, stderr: str = ""):
        self.command = command
        self.return_code = return_code
        self.stderr = stderr
        message = f"Command {' '.join(command)!r} failed with exit code {return_code}"
        if stderr.strip():
            message += f":\n{stderr.strip()}"
        super().__init__(message)
