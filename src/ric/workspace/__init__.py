"""Workspace provisioning."""

from ric.workspace.base import ExecResult, run_command, working_directory
from ric.workspace.local import LocalWorkspace

__all__ = ["ExecResult", "LocalWorkspace", "run_command", "working_directory"]
