"""
Exceptions raised by thanks-contributors.

GitHub and transport failures are translated into this hierarchy by
``classify_github_error`` so the command-line layer only has to handle
``ThanksContributorsError``.
"""

from typing import Optional

import requests

try:
    from github import BadCredentialsException, GithubException
except Exception as e:
    raise RuntimeError("PyGithub is required. Install with: pip install PyGithub") from e


class ThanksContributorsError(RuntimeError):
    """Base class for all errors reported to the user."""


class ConfigurationError(ThanksContributorsError):
    """Missing or invalid configuration (e.g. no access token)."""


class EmptyCommitRangeError(ThanksContributorsError):
    """The base...head range did not contain any commits."""

    def __init__(self, base: Optional[str] = None, head: Optional[str] = None) -> None:
        self.base = base
        self.head = head
        msg = ("Couldn't find any relevant commits. Are you sure you used the correct "
               "head & base, and your excludes are correct?")
        if base is not None and head is not None:
            msg = f"{msg} (range: {base}...{head})"
        super().__init__(msg)


class CommitRangeError(ThanksContributorsError):
    """The dates of the base or head commit could not be resolved."""


class OutputError(ThanksContributorsError):
    """The changelog could not be written to disk."""


class RequestError(ThanksContributorsError):
    """An unknown error occurred while talking to GitHub."""


class InvalidPermissionsError(RequestError):
    """The access token was rejected or lacks the required scopes."""

    def __init__(self, status: Optional[int] = None) -> None:
        self.status = status
        super().__init__("token has incorrect permissions")


class RequestStatusError(RequestError):
    """GitHub answered with an unexpected status code."""

    def __init__(self, status: int, detail: str = "") -> None:
        self.status = status
        msg = f"unexpected status code {status}"
        super().__init__(f"{msg}: {detail}" if detail else msg)


class RequestTimeoutError(RequestError):
    """The request to GitHub timed out."""


def _github_detail(exc: GithubException) -> str:
    data = exc.data
    if isinstance(data, dict):
        return str(data.get("message") or "")
    return ""


def classify_github_error(exc: Exception) -> ThanksContributorsError:
    """
    Map a PyGithub or requests exception to a ThanksContributorsError.

    Args:
        exc: Exception raised while talking to GitHub

    Returns:
        The matching error; callers raise it ``from exc``.
    """
    if isinstance(exc, ThanksContributorsError):
        return exc
    if isinstance(exc, BadCredentialsException):
        return InvalidPermissionsError(exc.status)
    if isinstance(exc, GithubException):
        if exc.status == 403 and "rate limit" not in _github_detail(exc).lower():
            return InvalidPermissionsError(exc.status)
        return RequestStatusError(exc.status, _github_detail(exc))
    if isinstance(exc, requests.exceptions.Timeout):
        return RequestTimeoutError(f"request timed out: {exc}")
    return RequestError(f"an unknown error occurred while sending the request: {exc}")
