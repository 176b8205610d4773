"""GitHub API client for fetching PR information."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ric.errors import ApiError
from ric.models.pr import PullRequest, ResolvedSource
from ric.models.target import TargetReference

logger = logging.getLogger(__name__)


class GitHubClient:
    """Client for interacting with GitHub API."""

    def __init__(
        self,
        token: str | None = None,
        base_url: str = "https://api.github.com",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize GitHub client.

        Args:
            token: GitHub API token, sent as a bearer token when given
            base_url: REST API base URL
            transport: Optional httpx transport, used by tests
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.transport = transport
        self.headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.token:
            self.headers["Authorization"] = f"Bearer {self.token}"

    async def get_pull_request(self, owner: str, repo: str, pr_number: int) -> PullRequest:
        """
        Fetch pull request metadata.

        Args:
            owner: Base repository owner
            repo: Base repository name
            pr_number: PR number

        Returns:
            PullRequest decoded from the response

        Raises:
            ApiError: If the request fails or the payload lacks head information
        """
        url = f"{self.base_url}/repos/{owner}/{repo}/pulls/{pr_number}"
        logger.debug("GET %s", url)

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(url, headers=self.headers, timeout=30.0)
                response.raise_for_status()
                pr_data: dict[str, Any] = response.json()
        except httpx.HTTPStatusError as e:
            raise ApiError(
                f"GitHub API returned {e.response.status_code} for "
                f"{owner}/{repo}#{pr_number}"
            ) from e
        except httpx.HTTPError as e:
            raise ApiError(f"Failed to fetch {owner}/{repo}#{pr_number}: {e}") from e
        except ValueError as e:
            raise ApiError(f"GitHub API returned invalid JSON for {url}") from e

        try:
            return PullRequest.model_validate(pr_data)
        except ValidationError as e:
            raise ApiError(
                f"Unexpected pull request payload for {owner}/{repo}#{pr_number}:\n{e}"
            ) from e

    async def resolve_source(self, target: TargetReference) -> ResolvedSource:
        """
        Resolve the head repository and branch of a pull request target.

        Args:
            target: Pull request target

        Returns:
            ResolvedSource pointing at the PR head
        """
        pr = await self.get_pull_request(target.owner, target.repo_name, target.pr_number)
        source = ResolvedSource.from_head(pr.head)
        logger.debug(
            "Resolved %s to %s @ %s", target.display_name, source.clone_url, source.branch
        )
        return source
