import unittest

from src.domain.models import LookupResult, UserProfile
from src.interface.shell import InteractiveShell


OCTOCAT = UserProfile(
    username="octocat",
    followers=5,
    following=2,
    created_at="2020-01-01",
    repositories=("Hello-World",),
)


class _FakeRepository:
    def __init__(self, results=None, cached=None) -> None:
        self.results = results or {}
        self.cached = cached or []
        self.requested = []

    async def get_user(self, username):
        self.requested.append(username)
        return self.results.get(username, LookupResult.not_found())

    def list_cached_users(self):
        return list(self.cached)

    def search_user(self, username):
        return next((u for u in self.cached if u.username == username), None)

    def search_by_repository(self, fragment):
        return [u for u in self.cached if any(fragment.lower() in r.lower() for r in u.repositories)]


class _Script:
    """Feeds canned input lines; raises EOFError once exhausted."""

    def __init__(self, *lines: str) -> None:
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class TestInteractiveShell(unittest.IsolatedAsyncioTestCase):
    async def _run(self, repository, *lines: str) -> str:
        output = []
        shell = InteractiveShell(repository, read_line=_Script(*lines), write=output.append)
        await shell.run()
        return "\n".join(output)

    async def test_exit_choice_stops_loop(self) -> None:
        text = await self._run(_FakeRepository(), "5")

        self.assertIn("5. Exit", text)
        self.assertTrue(text.endswith("Exiting. Goodbye!"))

    async def test_end_of_input_stops_loop(self) -> None:
        text = await self._run(_FakeRepository())

        self.assertIn("Goodbye!", text)

    async def test_invalid_choice(self) -> None:
        text = await self._run(_FakeRepository(), "9", "5")

        self.assertIn("Invalid choice. Please try again.", text)

    async def test_fetch_user_prints_details(self) -> None:
        repository = _FakeRepository(results={"octocat": LookupResult.found(OCTOCAT)})

        text = await self._run(repository, "1", " octocat ", "5")

        self.assertEqual(repository.requested, ["octocat"])
        self.assertIn("Username: octocat", text)
        self.assertIn("Followers: 5", text)
        self.assertIn("Following: 2", text)
        self.assertIn("Account created: 2020-01-01", text)
        self.assertIn("- Hello-World", text)
        self.assertNotIn("retrieved from cache", text)

    async def test_fetch_user_reports_cache_hit(self) -> None:
        repository = _FakeRepository(results={"octocat": LookupResult.found(OCTOCAT, from_cache=True)})

        text = await self._run(repository, "1", "octocat", "5")

        self.assertIn("User data retrieved from cache.", text)

    async def test_fetch_user_reports_remote_error(self) -> None:
        repository = _FakeRepository(results={"ghost": LookupResult.remote_error(404, "Not Found")})

        text = await self._run(repository, "1", "ghost", "5")

        self.assertIn("Error fetching user data: 404 - Not Found", text)

    async def test_fetch_user_reports_not_found(self) -> None:
        text = await self._run(_FakeRepository(), "1", "ghost", "5")

        self.assertIn("User 'ghost' not found or an error occurred.", text)

    async def test_user_without_repositories(self) -> None:
        empty = UserProfile(username="nobody", followers=0, following=0, created_at="2019-05-05")
        repository = _FakeRepository(results={"nobody": LookupResult.found(empty)})

        text = await self._run(repository, "1", "nobody", "5")

        self.assertIn("No repositories found.", text)

    async def test_list_cached_users(self) -> None:
        self.assertIn("No users in cache.", await self._run(_FakeRepository(), "2", "5"))

        text = await self._run(_FakeRepository(cached=[OCTOCAT]), "2", "5")
        self.assertIn("- octocat", text)

    async def test_search_user(self) -> None:
        repository = _FakeRepository(cached=[OCTOCAT])

        text = await self._run(repository, "3", "octocat", "3", "defunkt", "5")

        self.assertIn("--- User found ---", text)
        self.assertIn("User 'defunkt' is not in the cache.", text)
        self.assertEqual(repository.requested, [])

    async def test_search_by_repository(self) -> None:
        repository = _FakeRepository(cached=[OCTOCAT])

        text = await self._run(repository, "4", "hello", "4", "linux", "5")

        self.assertIn("--- Users with a repository containing 'hello' ---", text)
        self.assertIn("No users found with a repository containing 'linux'.", text)

    async def test_end_of_input_inside_prompt_stops_loop(self) -> None:
        repository = _FakeRepository()

        text = await self._run(repository, "1")

        self.assertIn("Goodbye!", text)
        self.assertEqual(repository.requested, [])
