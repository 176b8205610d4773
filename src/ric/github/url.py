"""Classify GitHub repository and pull request URLs."""

import re
from urllib.parse import urlsplit

from ric.errors import MalformedUrlError
from ric.models.target import TargetReference

PULL_REQUEST_PATTERN = re.compile(r"/pull/\d+")
PATH_PATTERN = re.compile(
    r"^/(?P<owner>[^/]+)/(?P<repo>[^/]+)(?:/pull/(?P<number>\d+))?"
)


def get_path(url: str) -> str:
    """
    Return the path component of an absolute URL.

    Args:
        url: URL given on the command line

    Returns:
        The URL path, e.g. ``/owner/repo/pull/1``

    Raises:
        MalformedUrlError: If the URL cannot be parsed or has no scheme/host
    """
    try:
        parts = urlsplit(url.strip())
    except ValueError as e:
        raise MalformedUrlError(url, str(e)) from e

    if not parts.scheme or not parts.netloc:
        raise MalformedUrlError(url, "expected an absolute URL with scheme and host")
    return parts.path


def is_pull_request_path(path: str) -> bool:
    """Check whether ``/pull/<digits>`` occurs anywhere in the path."""
    return PULL_REQUEST_PATTERN.search(path) is not None


def parse_target(url: str) -> TargetReference:
    """
    Parse a GitHub URL into a target reference.

    Parsing is lenient: segments that do not match come back empty and the
    PR number falls back to 0. An empty owner or repository only shows up
    later as a failing clone.

    Args:
        url: GitHub repository or pull request URL

    Returns:
        TargetReference

    Raises:
        MalformedUrlError: If the URL itself is unparseable
    """
    path = get_path(url)
    match = PATH_PATTERN.match(path)
    groups = match.groupdict(default="") if match else {}

    return TargetReference(
        raw_url=url,
        is_pull_request=is_pull_request_path(path),
        owner=groups.get("owner", ""),
        repo_name=groups.get("repo", ""),
        pr_number=int(groups.get("number") or 0),
    )
