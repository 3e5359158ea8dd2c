"""Resolve where the fetched schema is written."""

import logging
import os
from pathlib import Path

from .errors import DestinationError
from .utils import last_segment

logger = logging.getLogger(__name__)

DIR_MODE = 0o755


def resolve_destination(output: str | Path, url: str) -> str:
    """Create the parent directories of ``output`` and return the file path to write.

    When ``output`` is an existing directory, the last ``/`` segment of the
    source locator ``url`` is used as the filename inside it. An output with a
    trailing separator names the directory itself.
    """
    output = os.fspath(output)
    path = Path(output)
    parent = path if output.endswith(("/", os.sep)) else path.parent
    try:
        parent.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise DestinationError(f"failed to create output directory: {e}") from e

    if path.is_dir():
        destination = os.path.join(output, last_segment(url))
    else:
        destination = output

    logger.debug("Resolved destination %s", destination)
    return destination
