"""Review execution."""

import logging
from datetime import datetime

from ric.editor import EditorLauncher
from ric.github.client import GitHubClient
from ric.models.pr import ResolvedSource
from ric.models.review import ReviewConfig, ReviewResult
from ric.status import StatusReporter
from ric.workspace.base import CommandRunner, run_command
from ric.workspace.local import LocalWorkspace

logger = logging.getLogger(__name__)


async def run_review(
    config: ReviewConfig,
    github_client: GitHubClient,
    reporter: StatusReporter,
    runner: CommandRunner = run_command,
) -> ReviewResult:
    """
    Fetch the target into a new workspace and review it in the editor.

    Steps run strictly in order and any failure propagates:
    1. Resolve the source (PR head for pull requests)
    2. Create the workspace directory
    3. Clone and check out
    4. Open the editor and wait for it to close

    Args:
        config: Review configuration
        github_client: Client used to resolve pull requests
        reporter: Progress reporter
        runner: Command runner shared by git and the editor

    Returns:
        ReviewResult describing what was reviewed
    """
    target = config.target
    started_at = datetime.now()

    source = ResolvedSource(clone_url=target.repo_url, branch=config.default_branch)
    if target.is_pull_request:
        reporter.start(f"Retrieving PR info {reporter.name(target.display_name)}")
        source = await github_client.resolve_source(target)

    workspace = LocalWorkspace.create(config.temp_root, target.repo_name, runner=runner)
    reporter.succeed(
        f"Files will temporarily reside in {reporter.name(str(workspace.directory))}"
    )

    logger.debug(
        "Cloning %s (%s) into %s",
        source.clone_url,
        "deep" if config.options.deep else "shallow",
        workspace.directory,
    )
    await workspace.populate(source, config.options.deep, reporter=reporter)
    reporter.stop()

    editor = EditorLauncher(config.editor_command, runner=runner)
    reporter.start(f"Reviewing {reporter.name(target.display_name)} in editor")
    await editor.open(workspace.directory)
    reporter.succeed(f"Done reviewing {reporter.name(target.display_name)}")

    return ReviewResult(
        target=target,
        source=source,
        workspace_dir=workspace.directory,
        started_at=started_at,
        finished_at=datetime.now(),
    )
