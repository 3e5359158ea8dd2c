"""Small parsing helpers shared by the CLI and the fetch stages."""

import re

# Seconds per duration unit, Go-style ("300ms", "1h30m", "1.5s").
DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(value: str) -> float:
    """Parse a duration string like ``10s``, ``1m`` or ``1h30m`` into seconds.

    A leading sign is allowed and the bare string ``0`` means zero. Raises
    ValueError for anything else, including a number without a unit.
    """
    text = value.strip()
    if not text:
        raise ValueError(f"invalid duration {value!r}")

    sign = 1.0
    if text[0] in "+-":
        sign = -1.0 if text[0] == "-" else 1.0
        text = text[1:]

    if text == "0":
        return 0.0

    total = 0.0
    pos = 0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        if not match:
            raise ValueError(f"invalid duration {value!r}")
        number, unit = match.groups()
        total += float(number) * DURATION_UNITS[unit]
        pos = match.end()

    if pos == 0:
        raise ValueError(f"invalid duration {value!r}")
    return sign * total


def format_duration(seconds: float) -> str:
    """Render seconds back in the short form used by ``parse_duration``."""
    if seconds == 0:
        return "0s"
    if seconds < 1:
        return f"{seconds * 1000:g}ms"
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(int(minutes), 60)
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if secs or not parts:
        parts.append(f"{secs:g}s")
    return "".join(parts)


def last_segment(locator: str) -> str:
    """Return the part of ``locator`` after its last ``/``.

    The whole locator when it has no ``/``, and an empty string when it ends
    with one.
    """
    return locator.rsplit("/", 1)[-1]
