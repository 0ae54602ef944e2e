"""Interactive CLI for creating GitHub repositories.

Features
--------
1. Raw-mode line editor: every prompt supports the arrow keys, Home/End,
   Backspace/Delete and Ctrl+C to cancel, and always leaves the terminal
   in its normal mode afterwards.
2. The repository name is required; empty answers are re-prompted.
3. Repositories are created with an initial README and are private unless
   you answer ``n``.

Run `python -m repo_cli --token TOKEN` or use the `repo-cli` entry point.

Environment variables
---------------------
* GITHUB_TOKEN – personal access token (used when --token is not given)
* GITHUB_API_URL – custom API base URL (optional, e.g. GitHub Enterprise)
* GITHUB_API_TIMEOUT – HTTP timeout in seconds (optional)
"""
# Re-export useful symbols for convenience
from .core import RepoRequest, Settings, load_settings
from .core.client import GitHubClient, GitHubAPIError
from .editor import InputCancelled, read_line, read_non_empty_line
from .cli import RepoCreatorCLI, run_cli

__all__ = [
    "RepoRequest",
    "Settings",
    "load_settings",
    "GitHubClient",
    "GitHubAPIError",
    "InputCancelled",
    "read_line",
    "read_non_empty_line",
    "RepoCreatorCLI",
    "run_cli",
]
