"""Build the fetch URL from a provider name and a source locator."""

import logging

from .errors import ConfigurationError
from .models import AVAILABLE_PROVIDERS, PROVIDER_PREFIXES, Provider

logger = logging.getLogger(__name__)


def parse_provider(value: str | Provider) -> Provider:
    """Convert a raw provider name into a Provider, or raise ConfigurationError."""
    try:
        return Provider(value)
    except ValueError:
        raise ConfigurationError(f"Not available provider. {AVAILABLE_PROVIDERS}") from None


def build_url(provider: str | Provider, url: str) -> str:
    """Prefix ``url`` with the provider's raw-content base URL.

    No escaping or validation is done; a malformed locator surfaces later as a
    transport error.
    """
    full_url = PROVIDER_PREFIXES[parse_provider(provider)] + url
    logger.debug("Built URL %s for provider %s", full_url, provider)
    return full_url
