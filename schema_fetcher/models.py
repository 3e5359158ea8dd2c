"""Data models and constants for schema fetching."""

from dataclasses import dataclass
from enum import Enum


class Provider(str, Enum):
    GITHUB = "github"
    GITLAB = "gitlab"
    NONE = "none"


PROVIDER_PREFIXES: dict[Provider, str] = {
    Provider.GITHUB: "https://raw.githubusercontent.com/",
    Provider.GITLAB: "https://gitlab.com/",
    Provider.NONE: "",  # caller supplies a complete URL
}

AVAILABLE_PROVIDERS = "Available: github, gitlab and none."

DEFAULT_PROVIDER = Provider.GITHUB.value
DEFAULT_TIMEOUT = "30s"


@dataclass
class FetchResult:
    """Outcome of a successful schema download."""

    url: str
    destination: str
    bytes_written: int = 0
