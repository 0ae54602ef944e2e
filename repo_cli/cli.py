"""Interactive command-line front end for creating GitHub repositories."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from .core import ConfigError, RepoRequest, load_settings, parse_private_answer, ssh_clone_url
from .core.client import GitHubAPIError, GitHubClient
from .editor import InputCancelled, Terminal, read_line, read_non_empty_line
from .utils import (
    Ansi,
    ERROR_LABEL,
    SUCCESS_LABEL,
    Spinner,
    console,
    err_console,
)

logger = logging.getLogger(__name__)

NAME_PROMPT = "Enter repository name: "
DESCRIPTION_PROMPT = "Enter repository description (optional): "
PRIVATE_PROMPT = "Do you want the repository to be private? (Y/n): "

EXIT_OK = 0
EXIT_FAILURE = 1
# Conventional status for "terminated by Ctrl+C"
EXIT_CANCELLED = 130


# ---------------------------------------------------------------------------
# Helper classes
# ---------------------------------------------------------------------------


class RepoCreatorCLI:
    """Asks for the repository details and hands them to the API client."""

    def __init__(self, client: GitHubClient, terminal: Optional[Terminal] = None):
        self.client = client
        self.terminal = terminal

    # -------------- Prompts ---------------

    def collect_request(self) -> RepoRequest:
        """Prompt for name, description and visibility.

        Raises :class:`InputCancelled` as soon as any prompt is cancelled.
        """
        name = read_non_empty_line(NAME_PROMPT, self.terminal)
        description = read_line(DESCRIPTION_PROMPT, self.terminal)

        console.print(f"Creating a new GitHub repository: {name}", markup=False)

        private = parse_private_answer(read_line(PRIVATE_PROMPT, self.terminal))
        return RepoRequest(name=name, description=description, private=private)

    # -------------- Main flow ---------------

    def run(self) -> int:
        """Run the prompts and the API call, returning the exit status."""
        console.print(Panel.fit("GitHub Repository Creator", style="bold magenta"))
        console.print(
            Ansi.style("Arrow keys, Home/End and Backspace/Delete edit the line. Ctrl+C cancels.", Ansi.FG_YELLOW)
        )

        try:
            request = self.collect_request()
        except InputCancelled:
            console.print("[cancelled]", markup=False)
            return EXIT_CANCELLED
        except OSError as exc:
            err_console.print(Ansi.style(f"Terminal error: {escape(str(exc))}", Ansi.FG_RED))
            return EXIT_FAILURE

        console.print(f"Creating a {request.visibility} repository...")

        try:
            with Spinner(prefix="Contacting GitHub "):
                url = self.client.create_repository(request)
        except GitHubAPIError as exc:
            logger.debug("repository creation failed", exc_info=True)
            err_console.print(f"{ERROR_LABEL} {escape(str(exc))}")
            return EXIT_FAILURE

        console.print()
        console.print(SUCCESS_LABEL)
        console.print(f"Repository URL: {url}", markup=False)
        console.print("\nYou can clone it with:")
        console.print(f"git clone {ssh_clone_url(url)}", markup=False)
        return EXIT_OK


# ---------------------------------------------------------------------------
# Entrypoint helpers (keeping it separate simplifies __main__ handling)
# ---------------------------------------------------------------------------


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Interactively create a new GitHub repository."
    )
    parser.add_argument("--token", "-t", help="GitHub personal access token (default: $GITHUB_TOKEN)")
    parser.add_argument("--api-url", help="GitHub API base URL (default: $GITHUB_API_URL or api.github.com)")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds (default: 30)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output to stderr")
    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def run_cli(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    _configure_logging(args.verbose)

    try:
        settings = load_settings(args.token, args.api_url, args.timeout)
    except ConfigError as exc:
        err_console.print(f"Error: {exc}", markup=False)
        return EXIT_FAILURE

    with GitHubClient(settings.token, settings.api_url, settings.timeout) as client:
        return RepoCreatorCLI(client).run()


def main() -> None:  # pragma: no cover
    sys.exit(run_cli())


if __name__ == "__main__":  # pragma: no cover
    main()
