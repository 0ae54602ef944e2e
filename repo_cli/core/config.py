"""Runtime configuration: GitHub token, API endpoint and timeout."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0

TOKEN_ENV = "GITHUB_TOKEN"
API_URL_ENV = "GITHUB_API_URL"
TIMEOUT_ENV = "GITHUB_API_TIMEOUT"

_ZSHRC_TOKEN_PATTERN = re.compile(
    r"(?:export\s+)?" + TOKEN_ENV + r"\s*=\s*['\"]?([^'\"\n]+)['\"]?"
)


class ConfigError(ValueError):
    """Raised when required configuration is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    token: str
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT


def _token_from_zshrc(path: Path) -> Optional[str]:
    # Convenience for macOS users who only export the token from ~/.zshrc
    if not path.exists():
        return None
    match = _ZSHRC_TOKEN_PATTERN.search(path.read_text())
    if match:
        return match.group(1).strip()
    return None


def resolve_token(cli_token: Optional[str], zshrc_path: Optional[Path] = None) -> str:
    """Return the token from the CLI, the environment or ``~/.zshrc``, in that order."""
    if cli_token:
        return cli_token
    token = os.getenv(TOKEN_ENV)
    if token:
        return token
    token = _token_from_zshrc(zshrc_path or Path.home() / ".zshrc")
    if token:
        return token
    raise ConfigError(
        f"No GitHub token given. Pass --token or set {TOKEN_ENV}.\n"
        "(Tried the command line, the environment and ~/.zshrc)"
    )


def load_settings(
    cli_token: Optional[str] = None,
    api_url: Optional[str] = None,
    timeout: Optional[float] = None,
    zshrc_path: Optional[Path] = None,
) -> Settings:
    """Build :class:`Settings`, letting explicit arguments override the environment."""
    token = resolve_token(cli_token, zshrc_path)
    url = api_url or os.getenv(API_URL_ENV) or DEFAULT_API_URL

    if timeout is None:
        raw_timeout = os.getenv(TIMEOUT_ENV)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigError(f"{TIMEOUT_ENV} must be a number, got {raw_timeout!r}") from None
        else:
            timeout = DEFAULT_TIMEOUT
    if timeout <= 0:
        raise ConfigError(f"timeout must be positive, got {timeout}")

    return Settings(token=token, api_url=url.rstrip("/"), timeout=timeout)
