import aiohttp
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from src.domain.exceptions import RemoteStatusException

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.github.com/"
USER_PATH = "users/{username}"
REPOS_PATH = "users/{username}/repos"
REQUEST_TIMEOUT = aiohttp.ClientTimeout(total=30, connect=10)

class GitHubRestClient:
    """
    Client for the two GitHub REST endpoints the browser uses.
    Each call is a single GET: there is no retry and no rate limit management.
    """

    def __init__(self, token: Optional[str] = None):
        self.headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "github-user-browser",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            self.headers["Authorization"] = f"Bearer {token}"
        self.api_url = API_BASE_URL

    def _build_url(self, template: str, username: str) -> str:
        return self.api_url + template.format(username=quote(username, safe=""))

    async def _get_json(self, session: aiohttp.ClientSession, url: str) -> Any:
        async with session.get(url, headers=self.headers, timeout=REQUEST_TIMEOUT) as response:
            if not 200 <= response.status < 300:
                logger.debug(f"GET {url} -> {response.status}")
                raise RemoteStatusException(status=response.status, message=response.reason or "")

            # An empty body decodes to None.
            return await response.json(content_type=None)

    async def fetch_user(self, session: aiohttp.ClientSession, username: str) -> Optional[Dict[str, Any]]:
        """
        Fetches the profile of a single user.

        Returns:
            The decoded JSON object, or None when GitHub sent no body.

        Raises:
            RemoteStatusException: On a non-success HTTP status.
        """
        return await self._get_json(session, self._build_url(USER_PATH, username))

    async def fetch_repositories(self, session: aiohttp.ClientSession, username: str) -> Optional[List[Dict[str, Any]]]:
        """Fetches the public repositories of a user. Same contract as fetch_user."""
        return await self._get_json(session, self._build_url(REPOS_PATH, username))
