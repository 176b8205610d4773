"""Tests for workspace provisioning and command execution."""

import asyncio
import os
import sys
from pathlib import Path

import pytest

from ric.errors import DirectoryCreationError, SubprocessError
from ric.models.pr import ResolvedSource
from ric.workspace.base import ExecResult, run_command, working_directory
from ric.workspace.local import LocalWorkspace, workspace_name

SOURCE = ResolvedSource(clone_url="https://github.com/contributor/widgets", branch="feature-x")


class TestRunCommand:
    """Tests for run_command."""

    def test_captures_output(self) -> None:
        result = asyncio.run(
            run_command([sys.executable, "-c", "import sys; print('out'); print('err', file=sys.stderr)"])
        )
        assert result.ok
        assert result.stdout.strip() == "out"
        assert result.stderr.strip() == "err"

    def test_nonzero_exit(self) -> None:
        result = asyncio.run(run_command([sys.executable, "-c", "import sys; sys.exit(3)"]))
        assert result.return_code == 3
        with pytest.raises(SubprocessError) as exc_info:
            result.check()
        assert exc_info.value.return_code == 3

    def test_merges_environment(self) -> None:
        result = asyncio.run(
            run_command(
                [sys.executable, "-c", "import os; print(os.environ['RIC_TEST_VAR'])"],
                env={"RIC_TEST_VAR": "hello"},
            )
        )
        assert result.stdout.strip() == "hello"

    def test_runs_in_cwd(self, tmp_path: Path) -> None:
        result = asyncio.run(
            run_command([sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path)
        )
        assert Path(result.stdout.strip()).resolve() == tmp_path.resolve()

    def test_missing_executable(self) -> None:
        result = asyncio.run(run_command(["ric-definitely-not-installed"]))
        assert result.return_code == 127
        with pytest.raises(SubprocessError):
            result.check()


class TestExecResult:
    """Tests for ExecResult.check."""

    def test_error_carries_stderr(self) -> None:
        result = ExecResult(command=["git", "clone"], stdout="", stderr="fatal: nope", return_code=128)
        with pytest.raises(SubprocessError, match="fatal: nope") as exc_info:
            result.check()
        assert exc_info.value.command == ["git", "clone"]

    def test_success_returns_self(self) -> None:
        result = ExecResult(command=["true"], stdout="", stderr="", return_code=0)
        assert result.check() is result


class TestWorkingDirectory:
    """Tests for the working_directory context manager."""

    def test_restores_on_success(self, tmp_path: Path, restore_cwd: Path) -> None:
        with working_directory(tmp_path):
            assert Path.cwd().resolve() == tmp_path.resolve()
        assert Path.cwd() == restore_cwd

    def test_restores_on_error(self, tmp_path: Path, restore_cwd: Path) -> None:
        with pytest.raises(RuntimeError):
            with working_directory(tmp_path):
                raise RuntimeError("boom")
        assert Path.cwd() == restore_cwd


class TestWorkspaceName:
    """Tests for workspace naming."""

    def test_format(self) -> None:
        prefix, repo, stamp = workspace_name("widgets").rsplit("-", 2)
        assert prefix == "ric"
        assert repo == "widgets"
        assert stamp.isdigit()

    def test_rapid_names_do_not_collide(self) -> None:
        names = [workspace_name("widgets") for _ in range(50)]
        assert len(set(names)) == len(names)


class TestLocalWorkspace:
    """Tests for LocalWorkspace."""

    def test_create_makes_directory(self, tmp_path: Path) -> None:
        workspace = LocalWorkspace.create(tmp_path, "widgets")
        assert workspace.directory.is_dir()
        assert workspace.directory.parent == tmp_path
        assert workspace.directory.name.startswith("ric-widgets-")

    def test_consecutive_workspaces_differ(self, tmp_path: Path) -> None:
        first = LocalWorkspace.create(tmp_path, "widgets")
        second = LocalWorkspace.create(tmp_path, "widgets")
        assert first.directory != second.directory

    def test_create_failure(self, tmp_path: Path) -> None:
        missing_root = tmp_path / "does-not-exist"
        with pytest.raises(DirectoryCreationError):
            LocalWorkspace.create(missing_root, "widgets")

    def test_shallow_clone_command(self, tmp_path: Path, fake_runner, restore_cwd) -> None:
        workspace = LocalWorkspace.create(tmp_path, "widgets", runner=fake_runner)
        asyncio.run(workspace.populate(SOURCE, deep=False))

        assert fake_runner.commands == [
            ["git", "clone", "--depth", "1", "https://github.com/contributor/widgets", "."],
            ["git", "checkout", "feature-x"],
        ]
        assert fake_runner.calls[0]["env"] == {"GIT_TERMINAL_PROMPT": "0"}

    def test_deep_clone_command(self, tmp_path: Path, fake_runner, restore_cwd) -> None:
        workspace = LocalWorkspace.create(tmp_path, "widgets", runner=fake_runner)
        asyncio.run(workspace.populate(SOURCE, deep=True))

        assert fake_runner.commands[0] == [
            "git", "clone", "https://github.com/contributor/widgets", ".",
        ]

    def test_commands_run_inside_workspace(self, tmp_path: Path, fake_runner, restore_cwd) -> None:
        workspace = LocalWorkspace.create(tmp_path, "widgets", runner=fake_runner)
        asyncio.run(workspace.populate(SOURCE, deep=True))

        for call in fake_runner.calls:
            assert call["cwd_at_call"].resolve() == workspace.directory.resolve()

    def test_clone_failure_skips_checkout(self, tmp_path: Path, make_runner, restore_cwd) -> None:
        runner = make_runner(failures={"git clone": 128})
        workspace = LocalWorkspace.create(tmp_path, "widgets", runner=runner)

        with pytest.raises(SubprocessError):
            asyncio.run(workspace.populate(SOURCE, deep=True))

        assert runner.commands == [
            ["git", "clone", "https://github.com/contributor/widgets", "."],
        ]
        assert os.getcwd() == str(restore_cwd)

    def test_reports_progress(self, tmp_path: Path, fake_runner, reporter, restore_cwd) -> None:
        workspace = LocalWorkspace.create(tmp_path, "widgets", runner=fake_runner)
        asyncio.run(workspace.populate(SOURCE, deep=True, reporter=reporter))

        assert reporter.messages == [
            "Cloning https://github.com/contributor/widgets into temporary directory",
            "Checking out feature-x",
        ]
