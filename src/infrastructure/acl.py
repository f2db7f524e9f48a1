from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from src.domain.models import UserProfile


class UserResponse(BaseModel):
    """Subset of the `GET /users/{username}` payload the browser reads."""
    model_config = ConfigDict(extra="ignore")

    login: str
    followers: int = Field(..., ge=0)
    following: int = Field(..., ge=0)
    created_at: str


class RepoResponse(BaseModel):
    """Single entry of the `GET /users/{username}/repos` payload."""
    model_config = ConfigDict(extra="ignore")

    name: str


class GitHubTranslator:
    """
    Anti-corruption layer that translates raw GitHub REST JSON responses into UserProfile instances.
    """

    @staticmethod
    def to_domain(raw_user: Dict[str, Any], raw_repos: Optional[List[Dict[str, Any]]]) -> UserProfile:
        """
        Merges a raw user payload and a raw repository list into a UserProfile.

        Args:
            raw_user (Dict[str, Any]): The JSON object returned by the user endpoint.
            raw_repos (Optional[List[Dict[str, Any]]]): The JSON array returned by the repos endpoint.
                None is treated as an empty list.

        Returns:
            UserProfile: The merged domain record.

        Raises:
            ValueError: If either payload does not have the expected shape.
        """
        user = UserResponse.model_validate(raw_user)

        if raw_repos is None:
            raw_repos = []
        if not isinstance(raw_repos, list):
            raise ValueError("Repository payload must be a JSON array.")

        # Remote order is preserved.
        repo_names = tuple(RepoResponse.model_validate(repo).name for repo in raw_repos)

        return UserProfile(
            username=user.login,
            followers=user.followers,
            following=user.following,
            created_at=user.created_at,
            repositories=repo_names,
        )
