"""Repository creation request and helpers around the GitHub response."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

GITHUB_WEB_PREFIX = "https://github.com/"
GITHUB_SSH_PREFIX = "git@github.com:"


@dataclass
class RepoRequest:
    """Body of ``POST /user/repos``."""

    name: str
    description: Optional[str] = None
    private: bool = True
    # Creates an initial commit with a README so the repo is clonable
    auto_init: bool = True

    def __post_init__(self) -> None:
        # An empty description means "no description", not "".
        if not self.description:
            self.description = None

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)

    @property
    def visibility(self) -> str:
        return "private" if self.private else "public"


def parse_private_answer(answer: str) -> bool:
    """Interpret the answer to the "private? (Y/n)" prompt.

    Anything other than an explicit ``n`` keeps the repository private.
    """
    return answer.lower() != "n"


def ssh_clone_url(html_url: str) -> str:
    """Turn ``https://github.com/owner/repo`` into ``git@github.com:owner/repo.git``."""
    return html_url.replace(GITHUB_WEB_PREFIX, GITHUB_SSH_PREFIX).replace(".git", "") + ".git"
