class GitHubBrowserException(Exception):
    """Base exception for all GitHub user browser errors."""
    pass

class RemoteStatusException(GitHubBrowserException):
    """Raised when the GitHub REST API answers with a non-success status."""
    def __init__(self, status: int, message: str = ""):
        self.status = status
        self.message = message
        super().__init__(f"GitHub API returned {status}: {message}")
