from .config import Settings, ConfigError, load_settings, resolve_token
from .repository import RepoRequest, parse_private_answer, ssh_clone_url
# client module is imported directly where needed (it pulls in httpx).

__all__ = [
    "Settings",
    "ConfigError",
    "load_settings",
    "resolve_token",
    "RepoRequest",
    "parse_private_answer",
    "ssh_clone_url",
]
