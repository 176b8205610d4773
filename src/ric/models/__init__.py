"""Data models for ric."""

from ric.models.pr import PullRequest, PullRequestHead, ResolvedSource
from ric.models.review import ReviewConfig, ReviewResult
from ric.models.target import RunOptions, TargetReference

__all__ = [
    "PullRequest",
    "PullRequestHead",
    "ResolvedSource",
    "ReviewConfig",
    "ReviewResult",
    "RunOptions",
    "TargetReference",
]
