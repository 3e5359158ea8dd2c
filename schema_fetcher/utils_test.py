"""Unit tests for utils module."""

import pytest

from schema_fetcher.utils import format_duration, last_segment, parse_duration


def describe_parse_duration():
    def it_parses_seconds():
        assert parse_duration("30s") == 30.0

    def it_parses_minutes():
        assert parse_duration("1m") == 60.0

    def it_parses_compound_durations():
        assert parse_duration("1h30m") == 5400.0

    def it_parses_milliseconds():
        assert parse_duration("300ms") == pytest.approx(0.3)

    def it_parses_fractions():
        assert parse_duration("1.5s") == 1.5

    def it_parses_microseconds_in_both_spellings():
        assert parse_duration("5us") == pytest.approx(5e-6)
        assert parse_duration("5µs") == pytest.approx(5e-6)

    def it_accepts_bare_zero():
        assert parse_duration("0") == 0.0

    def it_keeps_the_sign():
        assert parse_duration("-2s") == -2.0

    @pytest.mark.parametrize("value", ["", "10", "s", "ten seconds", "1d", "1s2", "-"])
    def it_rejects_malformed_input(value):
        with pytest.raises(ValueError, match="invalid duration"):
            parse_duration(value)


def describe_format_duration():
    def it_formats_whole_seconds():
        assert format_duration(30.0) == "30s"

    def it_formats_minutes_and_hours():
        assert format_duration(5400.0) == "1h30m"

    def it_formats_sub_second_values():
        assert format_duration(0.25) == "250ms"

    def it_formats_zero():
        assert format_duration(0) == "0s"


def describe_last_segment():
    def it_returns_text_after_last_slash():
        assert last_segment("owner/repo/main/schemas/schema.graphql") == "schema.graphql"

    def it_returns_whole_locator_without_slash():
        assert last_segment("schema.graphql") == "schema.graphql"

    def it_returns_empty_for_trailing_slash():
        assert last_segment("owner/repo/main/") == ""
