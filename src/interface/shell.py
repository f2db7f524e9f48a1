import logging
from typing import Callable, Dict

from src.application.github_repository import GitHubRepository
from src.domain.models import LookupStatus
from src.interface.formatters import MENU, format_user, format_usernames

logger = logging.getLogger(__name__)

EXIT_CHOICE = "5"


class InteractiveShell:
    """
    Numbered menu loop over a GitHubRepository.

    Input and output go through the read_line and write callables so the loop can
    be driven without a terminal.
    """

    def __init__(
            self,
            repository: GitHubRepository,
            read_line: Callable[[str], str] = input,
            write: Callable[[str], None] = print,
    ):
        self.repository = repository
        self.read_line = read_line
        self.write = write
        self._handlers: Dict[str, Callable] = {
            "1": self._fetch_user,
            "2": self._list_cached_users,
            "3": self._search_user,
            "4": self._search_by_repository,
        }

    def _prompt(self, text: str) -> str:
        return self.read_line(text).strip()

    async def run(self) -> None:
        """Loop until the user picks Exit or input ends."""
        while True:
            self.write(MENU)
            try:
                choice = self._prompt("Your choice: ")
            except (EOFError, KeyboardInterrupt):
                logger.info("Input closed, leaving the menu.")
                self.write("\nExiting. Goodbye!")
                return

            if choice == EXIT_CHOICE:
                self.write("Exiting. Goodbye!")
                return

            handler = self._handlers.get(choice)
            if handler is None:
                self.write("Invalid choice. Please try again.")
                continue

            try:
                await handler()
            except (EOFError, KeyboardInterrupt):
                self.write("\nExiting. Goodbye!")
                return

    async def _fetch_user(self) -> None:
        username = self._prompt("Enter username: ")
        result = await self.repository.get_user(username)

        if result.ok:
            if result.from_cache:
                self.write("User data retrieved from cache.")
            self.write(format_user(result.user))
        elif result.status is LookupStatus.REMOTE_ERROR:
            self.write(f"Error fetching user data: {result.status_code} - {result.message}")
        else:
            if result.message:
                self.write(f"Request failed: {result.message}")
            self.write(f"User '{username}' not found or an error occurred.")

    async def _list_cached_users(self) -> None:
        users = self.repository.list_cached_users()
        if not users:
            self.write("No users in cache.")
        else:
            self.write(format_usernames(users, "Cached users"))

    async def _search_user(self) -> None:
        username = self._prompt("Username to search: ")
        user = self.repository.search_user(username)
        if user is not None:
            self.write(format_user(user, title="User found"))
        else:
            self.write(f"User '{username}' is not in the cache.")

    async def _search_by_repository(self) -> None:
        fragment = self._prompt("Repository name to search: ")
        users = self.repository.search_by_repository(fragment)
        if not users:
            self.write(f"No users found with a repository containing '{fragment}'.")
        else:
            self.write(format_usernames(users, f"Users with a repository containing '{fragment}'"))
