"""Pull request models."""

from pydantic import BaseModel, Field

from ric.models.target import GITHUB_URL


class HeadRepository(BaseModel):
    """Repository that holds the PR head branch."""

    name: str = Field(..., description="Repository name")


class PullRequestHead(BaseModel):
    """The ``head`` object of a GitHub pull request."""

    label: str = Field(..., description="Head label formatted as user:branch")
    ref: str | None = Field(default=None, description="Head branch name")
    sha: str | None = Field(default=None, description="Head commit SHA")
    repo: HeadRepository = Field(..., description="Head repository")

    @property
    def user(self) -> str:
        """Login of the head repository owner."""
        return self.label.partition(":")[0]

    @property
    def branch(self) -> str:
        """Head branch name taken from the label."""
        return self.label.partition(":")[2]


class PullRequest(BaseModel):
    """Subset of the GitHub pull request payload used for review."""

    number: int | None = Field(default=None, description="PR number")
    title: str | None = Field(default=None, description="PR title")
    head: PullRequestHead = Field(..., description="PR head")


class ResolvedSource(BaseModel):
    """Where to clone from and what to check out."""

    clone_url: str = Field(..., description="HTTPS URL passed to git clone")
    branch: str = Field(..., description="Branch checked out after cloning")

    @classmethod
    def from_head(cls, head: PullRequestHead) -> "ResolvedSource":
        """Source pointing at a PR head repository and branch."""
        return cls(
            clone_url=f"{GITHUB_URL}/{head.user}/{head.repo.name}",
            branch=head.branch,
        )
