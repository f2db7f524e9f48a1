import asyncio
import logging
from typing import List, Optional
import aiohttp

from src.infrastructure.github_client import GitHubRestClient
from src.infrastructure.acl import GitHubTranslator
from src.infrastructure.cache import UserCache
from src.domain.exceptions import RemoteStatusException
from src.domain.models import LookupResult, UserProfile

logger = logging.getLogger(__name__)


class GitHubRepository:
    """
    Cache-backed access to GitHub user data.

    A username is fetched from GitHub at most once per session; every later
    lookup and search is answered from the cache.
    """

    def __init__(
            self,
            github_client: GitHubRestClient,
            session: aiohttp.ClientSession,
            cache: Optional[UserCache] = None,
    ):
        self.github_client = github_client
        self.session = session
        self.cache = cache if cache is not None else UserCache()

    async def get_user(self, username: str) -> LookupResult:
        """
        Returns the cached record for username, fetching it from GitHub on a miss.

        The profile and repository list are requested one after the other. A record
        is cached only when both requests succeed; if the repository request fails,
        the already fetched profile is discarded.
        """
        cached = self.cache.get(username)
        if cached is not None:
            logger.info(f"Cache hit for '{username}'.")
            return LookupResult.found(cached, from_cache=True)

        if not username.strip():
            return LookupResult.not_found("Username must not be empty.")

        try:
            raw_user = await self.github_client.fetch_user(self.session, username)
            if raw_user is None:
                logger.warning(f"Empty profile body for '{username}'.")
                return LookupResult.not_found()

            raw_repos = await self.github_client.fetch_repositories(self.session, username)
            profile = GitHubTranslator.to_domain(raw_user, raw_repos)

        except RemoteStatusException as e:
            logger.warning(f"Lookup of '{username}' failed: {e}")
            return LookupResult.remote_error(e.status, e.message)

        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Error while fetching '{username}': {e!r}")
            return LookupResult.not_found(str(e) or e.__class__.__name__)

        stored = self.cache.add(username, profile)
        logger.info(f"Cached '{username}' with {len(stored.repositories)} repositories.")
        return LookupResult.found(stored)

    def list_cached_users(self) -> List[UserProfile]:
        return self.cache.values()

    def search_user(self, username: str) -> Optional[UserProfile]:
        """Exact-key cache lookup. Never contacts GitHub."""
        return self.cache.get(username)

    def search_by_repository(self, fragment: str) -> List[UserProfile]:
        """Cached users owning a repository whose name contains fragment, ignoring case."""
        needle = fragment.lower()
        return [
            user for user in self.cache.values()
            if any(needle in repo.lower() for repo in user.repositories)
        ]
