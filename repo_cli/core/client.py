"""GitHub REST client wrapper for repository creation."""

from __future__ import annotations

import logging
from typing import Dict, Optional

import httpx

from .config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from .repository import RepoRequest

logger = logging.getLogger(__name__)

USER_AGENT = "github-repo-creater"
GITHUB_MEDIA_TYPE = "application/vnd.github+json"


class GitHubAPIError(RuntimeError):
    """The GitHub API rejected the request or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GitHubClient:
    """Thin wrapper around :class:`httpx.Client` hiding the GitHub specifics."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.client = httpx.Client(
            base_url=base_url,
            headers=self._headers(token),
            timeout=timeout,
            transport=transport,
        )

    @staticmethod
    def _headers(token: str) -> Dict[str, str]:
        return {
            "Accept": GITHUB_MEDIA_TYPE,
            "User-Agent": USER_AGENT,
            "Authorization": f"Bearer {token}",
        }

    def create_repository(self, request: RepoRequest) -> str:
        """Create a repository for the authenticated user and return its ``html_url``."""
        logger.debug("POST /user/repos name=%r private=%s", request.name, request.private)
        try:
            response = self.client.post("/user/repos", json=request.to_payload())
        except httpx.HTTPError as exc:
            raise GitHubAPIError(f"request to GitHub failed: {exc}") from exc

        if not response.is_success:
            logger.debug("GitHub answered %d", response.status_code)
            raise GitHubAPIError(
                f"GitHub API error: {response.text}", status_code=response.status_code
            )

        try:
            return response.json()["html_url"]
        except (ValueError, KeyError) as exc:
            raise GitHubAPIError(f"unexpected response from GitHub: {response.text}") from exc

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
