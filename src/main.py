import asyncio
import os
import signal
import sys
import logging
import aiohttp
from dotenv import load_dotenv

from src.infrastructure.github_client import GitHubRestClient
from src.application.github_repository import GitHubRepository
from src.interface.shell import InteractiveShell

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = logging.WARNING

def resolve_log_level(level_name: str) -> int:
    """Map a level name such as "info" to its number. Unknown names fall back to WARNING."""
    level = logging.getLevelName(level_name.strip().upper())
    if isinstance(level, int):
        return level
    return DEFAULT_LOG_LEVEL

def configure_logging(level_name: str) -> None:
    # stdout belongs to the menu, so log records go to stderr
    logging.basicConfig(
        level=resolve_log_level(level_name),
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )

async def main():
    # asyncio.run cancels the main task on SIGINT instead of raising, which
    # leaves a blocking input() waiting. Ctrl-C must raise KeyboardInterrupt there.
    signal.signal(signal.SIGINT, signal.default_int_handler)

    # Load environment variables from .env file
    load_dotenv()

    configure_logging(os.getenv("LOG_LEVEL", "WARNING"))

    # Optional: unauthenticated requests work, a token only raises GitHub's quota
    github_token = os.getenv("GITHUB_TOKEN")
    github_client = GitHubRestClient(token=github_token)

    async with aiohttp.ClientSession() as session:
        repository = GitHubRepository(github_client=github_client, session=session)
        shell = InteractiveShell(repository)

        try:
            await shell.run()
        except KeyboardInterrupt:
            logger.info("Interrupted by user. Exiting gracefully.")

def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass

if __name__ == "__main__":
    run()
