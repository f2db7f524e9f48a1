from enum import Enum
from typing import Optional, Tuple
from pydantic import BaseModel, Field, ConfigDict

class UserProfile(BaseModel):
    """
    Immutable domain model representing a GitHub user merged with the names of their public repositories.
    This is the record stored in the session cache.
    """
    # Enforces immutability: once cached, a profile is never modified.
    model_config = ConfigDict(frozen=True)

    username: str = Field(..., description="Login name of the GitHub user")
    followers: int = Field(..., ge=0, description="Number of followers")
    following: int = Field(..., ge=0, description="Number of followed accounts")
    created_at: str = Field(..., description="Account creation timestamp, kept as returned by GitHub")
    repositories: Tuple[str, ...] = Field(
        default_factory=tuple,
        description="Public repository names in the order GitHub returned them"
    )


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    REMOTE_ERROR = "remote_error"


class LookupResult(BaseModel):
    """
    Outcome of a fetch-or-cache lookup.

    REMOTE_ERROR carries the HTTP status code and message returned by GitHub.
    NOT_FOUND may carry a message describing a transport fault.
    """
    model_config = ConfigDict(frozen=True)

    status: LookupStatus
    user: Optional[UserProfile] = None
    status_code: Optional[int] = None
    message: Optional[str] = None
    from_cache: bool = False

    @classmethod
    def found(cls, user: UserProfile, from_cache: bool = False) -> "LookupResult":
        return cls(status=LookupStatus.FOUND, user=user, from_cache=from_cache)

    @classmethod
    def not_found(cls, message: Optional[str] = None) -> "LookupResult":
        return cls(status=LookupStatus.NOT_FOUND, message=message)

    @classmethod
    def remote_error(cls, status_code: int, message: str) -> "LookupResult":
        return cls(status=LookupStatus.REMOTE_ERROR, status_code=status_code, message=message)

    @property
    def ok(self) -> bool:
        return self.status is LookupStatus.FOUND
