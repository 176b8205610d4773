"""Review target models."""

from pydantic import BaseModel, ConfigDict, Field

GITHUB_URL = "https://github.com"


class TargetReference(BaseModel):
    """A repository or pull request parsed from the source URL."""

    model_config = ConfigDict(frozen=True)

    raw_url: str = Field(..., description="URL as given on the command line")
    is_pull_request: bool = Field(..., description="Does the URL point at a PR?")
    owner: str = Field(default="", description="Repository owner/organization")
    repo_name: str = Field(default="", description="Repository name")
    pr_number: int = Field(default=0, description="PR number, 0 for repositories")

    @property
    def full_name(self) -> str:
        """``owner/repo``."""
        return f"{self.owner}/{self.repo_name}"

    @property
    def display_name(self) -> str:
        """Name shown in progress messages."""
        if self.is_pull_request:
            return f"{self.full_name}#{self.pr_number}"
        return self.full_name

    @property
    def repo_url(self) -> str:
        """HTTPS URL of the target repository."""
        return f"{GITHUB_URL}/{self.full_name}"


class RunOptions(BaseModel):
    """Options controlling how the target is cloned."""

    deep: bool = Field(..., description="Clone full history instead of depth 1")

    @classmethod
    def for_target(cls, target: TargetReference, deep: bool | None = None) -> "RunOptions":
        """
        Build options, applying the default depth for the target type.

        Pull requests are cloned deep by default since their commits may not
        be reachable from a depth-1 clone; repositories are cloned shallow.

        Args:
            target: Parsed target
            deep: Explicit choice from the command line, or None

        Returns:
            RunOptions
        """
        if deep is None:
            deep = target.is_pull_request
        return cls(deep=deep)
