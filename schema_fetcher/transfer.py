"""Download a schema over HTTP and stream it to a file."""

import logging
import threading
import time

import httpx

from .errors import DestinationError, HTTPStatusError, TransferError, TransportError
from .models import FetchResult
from .utils import format_duration

logger = logging.getLogger(__name__)


class _DeadlineExceeded(Exception):
    pass


def get_http_client(timeout: float | None) -> httpx.Client:
    """Client used for the single schema request. ``None`` disables the timeout."""
    return httpx.Client(timeout=timeout, follow_redirects=True)


def _timed_out(timeout: float | None) -> str:
    if timeout is None:
        return "timed out"
    return f"timed out after {format_duration(timeout)}"


def _send(client: httpx.Client, request: httpx.Request, deadline: float | None) -> httpx.Response:
    """Send ``request`` and wait for the response headers until ``deadline``.

    httpx only bounds each socket operation, so a server trickling its headers
    could hold ``send`` open indefinitely. The send runs on a daemon thread and
    is abandoned once the deadline passes.
    """
    if deadline is None:
        return client.send(request, stream=True)

    outcome = {}
    abandoned = threading.Event()

    def worker():
        try:
            response = client.send(request, stream=True)
        except Exception as e:
            outcome["error"] = e
            return
        if abandoned.is_set():
            response.close()
        else:
            outcome["response"] = response

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    thread.join(max(0.0, deadline - time.monotonic()))
    if thread.is_alive():
        abandoned.set()
        raise _DeadlineExceeded()
    if "error" in outcome:
        raise outcome["error"]

    response = outcome["response"]
    if time.monotonic() > deadline:
        response.close()
        raise _DeadlineExceeded()
    return response


def _copy_body(response: httpx.Response, file, deadline: float | None) -> int:
    written = 0
    for chunk in response.iter_bytes():
        if deadline is not None and time.monotonic() > deadline:
            raise _DeadlineExceeded()
        file.write(chunk)
        written += len(chunk)
    return written


def fetch_schema(url: str, destination: str, timeout: float | None = 30.0) -> FetchResult:
    """GET ``url`` and write the body to ``destination``.

    The destination is created (or truncated) before the request is made and is
    left on disk when the request or the copy fails.

    Args:
        url: Absolute URL to fetch.
        destination: File path to write; its directory must already exist.
        timeout: Seconds allowed for the whole request, or None/0 for no limit.

    Returns:
        FetchResult with the URL, destination and number of bytes written.
    """
    if not timeout:
        timeout = None

    try:
        file = open(destination, "wb")
    except OSError as e:
        raise DestinationError(f"failed to open output file: {e}") from e

    with file, get_http_client(timeout) as client:
        deadline = time.monotonic() + timeout if timeout is not None else None
        try:
            response = _send(client, client.build_request("GET", url), deadline)
        except (_DeadlineExceeded, httpx.TimeoutException) as e:
            raise TransportError(f"failed to fetch schema: {_timed_out(timeout)}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"failed to fetch schema: {e}") from e

        try:
            logger.debug("GET %s -> %s", url, response.status_code)
            if response.status_code != httpx.codes.OK:
                raise HTTPStatusError(response.status_code, response.reason_phrase)

            try:
                written = _copy_body(response, file, deadline)
            except (_DeadlineExceeded, httpx.TimeoutException) as e:
                raise TransferError(f"failed to write schema to file: {_timed_out(timeout)}") from e
            except (httpx.HTTPError, OSError) as e:
                raise TransferError(f"failed to write schema to file: {e}") from e
        finally:
            response.close()

    logger.debug("Wrote %d bytes to %s", written, destination)
    return FetchResult(url=url, destination=destination, bytes_written=written)
