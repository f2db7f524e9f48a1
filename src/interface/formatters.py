"""
Text rendering for the interactive shell.

Functions here only build strings; printing is left to the shell.
"""

from typing import Iterable, List

from src.domain.models import UserProfile

MENU = "\n".join([
    "",
    "--- GitHub User Menu ---",
    "1. Fetch user by username",
    "2. List cached users",
    "3. Search cached users by username",
    "4. Search cached users by repository name",
    "5. Exit",
])


def format_user(user: UserProfile, title: str = "User details") -> str:
    """
    Render the full details block for one user.

    Example:
        >>> print(format_user(user))
        --- User details ---
        Username: octocat
        Followers: 5
        Following: 2
        Account created: 2020-01-01
        Public repositories:
        - Hello-World
    """
    lines: List[str] = [
        "",
        f"--- {title} ---",
        f"Username: {user.username}",
        f"Followers: {user.followers}",
        f"Following: {user.following}",
        f"Account created: {user.created_at}",
        "Public repositories:",
    ]
    if user.repositories:
        lines.extend(f"- {name}" for name in user.repositories)
    else:
        lines.append("No repositories found.")
    return "\n".join(lines)


def format_usernames(users: Iterable[UserProfile], title: str) -> str:
    lines = ["", f"--- {title} ---"]
    lines.extend(f"- {user.username}" for user in users)
    return "\n".join(lines)
