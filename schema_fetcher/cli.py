"""CLI entrypoint for fetching a schema file."""

import argparse
import logging
import sys

from .errors import FetchError, UsageError
from .models import AVAILABLE_PROVIDERS
from .paths import resolve_destination
from .settings import get_settings
from .transfer import fetch_schema
from .urls import build_url
from .utils import parse_duration

logger = logging.getLogger(__name__)


def _duration(value: str) -> float:
    try:
        seconds = parse_duration(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None
    if seconds < 0:
        raise argparse.ArgumentTypeError(f"negative duration {value!r}")
    return seconds


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="schema-fetch",
        description="Fetch a schema file from GitHub, GitLab or any URL",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-provider",
        "--provider",
        default=settings.provider,
        help=f"The name of provider. {AVAILABLE_PROVIDERS}",
    )
    parser.add_argument(
        "-url",
        "--url",
        default="",
        help=(
            "The URL of the schema like this: "
            "first-debug/lk-graphql-schemas/master/schemas/user-provider/schema.graphql"
        ),
    )
    parser.add_argument(
        "-output",
        "--output",
        default="",
        help="The path to save the schema file.",
    )
    parser.add_argument(
        "-timeout",
        "--timeout",
        type=_duration,
        default=settings.timeout,
        help="The timeout for the HTTP request (e.g. 10s, 1m; 0 disables it).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each step to stderr",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("schema_fetcher").setLevel(level)
    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


def run(provider: str, url: str, output: str, timeout: float | None) -> str:
    """Fetch ``url`` via ``provider`` into ``output``; return the confirmation line."""
    if not url:
        raise UsageError("The -url flag is required.")
    if not output:
        raise UsageError("The -output flag is required.")

    destination = resolve_destination(output, url)
    full_url = build_url(provider, url)
    result = fetch_schema(full_url, destination, timeout)
    return f"Schema successfully fetched from {result.url} and saved to {result.destination}"


def main():
    parser = _build_parser()
    args = parser.parse_args()
    _configure_logging(args.verbose)

    try:
        message = run(args.provider, args.url, args.output, args.timeout)
    except FetchError as e:
        logger.debug("Fetch failed", exc_info=True)
        print(e, file=sys.stderr)
        sys.exit(1)

    print(message)


if __name__ == "__main__":
    main()
