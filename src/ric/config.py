"""Runtime settings loaded from the environment."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EDITOR_COMMAND = "code --wait"


class Settings(BaseSettings):
    """Settings read once at startup.

    The editor command keeps the historical ``VIC_EDITOR_COMMAND`` name and
    also accepts ``RIC_EDITOR_COMMAND``.
    """

    model_config = SettingsConfigDict(env_prefix="RIC_", populate_by_name=True)

    editor_command: str = Field(
        default=DEFAULT_EDITOR_COMMAND,
        validation_alias=AliasChoices("VIC_EDITOR_COMMAND", "RIC_EDITOR_COMMAND"),
        description="Command used to open the workspace; the path is appended",
    )
    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_TOKEN", "RIC_GITHUB_TOKEN"),
        description="Optional token sent to the GitHub API",
    )
    github_api_url: str = Field(
        default="https://api.github.com", description="GitHub REST API base URL"
    )
    default_branch: str = Field(
        default="master", description="Branch checked out for plain repositories"
    )
    log_level: str = Field(default="WARNING", description="Logging level")


def load_settings() -> Settings:
    """Load settings from the current environment."""
    return Settings()
