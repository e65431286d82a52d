import os
import requests

from devconnector.common.constants import (
    GITHUB_API_URL,
    GITHUB_USER_REPOS_PATH,
    GITHUB_REPOS_PER_PAGE,
    GITHUB_REPOS_SORT,
    GITHUB_REPOS_DIRECTION,
    GITHUB_REQUEST_TIMEOUT_SECONDS,
    GITHUB_USER_AGENT,
    NO_GITHUB_PROFILE_MESSAGE,
)
from devconnector.common.environment_constants import GITHUB_TOKEN
from devconnector.dto.github_repo_dto import GithubRepoDto


class GithubProfileNotFoundError(Exception):
    """GitHub has no public repositories listing for the requested login."""


class GithubService:
    """
    Thin client for the public GitHub REST API.

    Calls are blocking; async callers run them in a worker thread.
    """

    def __init__(self, logger, github_token: str | None = None):
        """
        Args:
            logger: The logger instance for logging messages.
            github_token (str | None): Optional personal access token. Falls back
                to the GITHUB_TOKEN environment variable; anonymous if neither is set.
        """
        self.logger = logger
        self.github_token = github_token or os.getenv(GITHUB_TOKEN)

    def get_user_repositories(self, username: str) -> list[GithubRepoDto]:
        """
        Fetch the most recently created public repositories of a GitHub user.

        Args:
            username (str): GitHub login.

        Returns:
            list[GithubRepoDto]: At most GITHUB_REPOS_PER_PAGE repositories.

        Raises:
            GithubProfileNotFoundError: If GitHub answers with anything but 200.
            RuntimeError: If GitHub cannot be reached.
        """
        url = GITHUB_API_URL + GITHUB_USER_REPOS_PATH.format(username=username)
        headers = {"User-Agent": GITHUB_USER_AGENT}
        if self.github_token:
            headers["Authorization"] = f"token {self.github_token}"

        try:
            response = requests.get(
                url,
                params={
                    "per_page": GITHUB_REPOS_PER_PAGE,
                    "sort": GITHUB_REPOS_SORT,
                    "direction": GITHUB_REPOS_DIRECTION,
                },
                headers=headers,
                timeout=GITHUB_REQUEST_TIMEOUT_SECONDS,
            )
        except requests.RequestException as e:
            self.logger.error(
                "[GithubService] request for user %s failed: %s", username, str(e)
            )
            raise RuntimeError(f"Github request failed: {e}") from e

        if response.status_code != 200:
            self.logger.warning(
                "[GithubService] github returned %s for user %s",
                response.status_code,
                username,
            )
            raise GithubProfileNotFoundError(NO_GITHUB_PROFILE_MESSAGE)

        return [GithubRepoDto.model_validate(repo) for repo in response.json()]
