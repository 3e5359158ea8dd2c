"""Fetch a single schema file from a raw-content host and save it locally.

Providers map to a fixed URL prefix (GitHub raw content, GitLab) or pass the
URL through untouched.
"""

from .cli import main
from .errors import FetchError
from .models import FetchResult, Provider
from .paths import resolve_destination
from .transfer import fetch_schema
from .urls import build_url

__all__ = ["main", "build_url", "resolve_destination", "fetch_schema", "Provider", "FetchResult", "FetchError"]

if __name__ == "__main__":
    main()
