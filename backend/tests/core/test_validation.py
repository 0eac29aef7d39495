"""Input Validation — verifies pure field checks and parsers.

Tests:
    - Calendar dates are strict (exact format, real day)
    - Usernames normalize to upper-first/lower-rest
    - limit resolves absent → 20 and 0 → 1
    - Loose dates accept common forms and reject garbage
    - Durations coerce numeric strings and reject the rest
"""

from datetime import date

import pytest

from app.core.errors import InputValidationError
from app.core.validation import (
    check_username,
    is_valid_calendar_date,
    normalize_username,
    parse_duration,
    parse_limit,
    parse_loose_date,
)


# --- is_valid_calendar_date ---------------------------------------------------

def test_calendar_date_accepts_leap_day():
    assert is_valid_calendar_date("2024-02-29")


def test_calendar_date_rejects_impossible_day():
    assert not is_valid_calendar_date("2024-02-30")


def test_calendar_date_rejects_non_leap_feb_29():
    assert not is_valid_calendar_date("2023-02-29")


@pytest.mark.parametrize("value", [
    "2024-2-5", "24-02-05", "2024/02/05", "2024-02-05T00:00:00",
    "2024-02-05\n", " 2024-02-05", "", "not a date",
])
def test_calendar_date_rejects_loose_formats(value):
    assert not is_valid_calendar_date(value)


def test_calendar_date_rejects_non_strings():
    assert not is_valid_calendar_date(20240205)
    assert not is_valid_calendar_date(None)


# --- usernames ----------------------------------------------------------------

@pytest.mark.parametrize("raw, expected", [
    ("jOHN", "John"), ("amy", "Amy"), ("MARY-JANE", "Mary-jane"), ("x", "X"),
])
def test_normalize_username(raw, expected):
    assert normalize_username(raw) == expected


def test_normalize_username_empty_string():
    assert normalize_username("") == ""


def test_check_username_accepts_three_characters():
    assert check_username("bob") == "bob"


@pytest.mark.parametrize("value", [None, "", "ab", 12345, ["abc"]])
def test_check_username_rejects_short_or_non_string(value):
    with pytest.raises(InputValidationError) as exc:
        check_username(value)
    assert exc.value.http_status == 400
    assert exc.value.message.startswith("Invalid username")


# --- parse_limit --------------------------------------------------------------

def test_limit_defaults_to_twenty():
    assert parse_limit(None) == 20
    assert parse_limit("") == 20


def test_limit_zero_means_one():
    assert parse_limit("0") == 1


def test_limit_positive_is_kept():
    assert parse_limit("7") == 7


@pytest.mark.parametrize("value", ["abc", "2.5", "-3"])
def test_limit_rejects_non_integers_and_negatives(value):
    with pytest.raises(InputValidationError):
        parse_limit(value)


# --- parse_loose_date ---------------------------------------------------------

@pytest.mark.parametrize("value", [
    "2024-10-31",
    "2024-10-31T18:30:00",
    "2024-10-31T18:30:00Z",
    "2024/10/31",
    "10/31/2024",
    "October 31, 2024",
    "Oct 31, 2024",
    "31 October 2024",
    "Thu, 31 Oct 2024 10:00:00 GMT",
])
def test_loose_date_accepts_common_forms(value):
    assert parse_loose_date(value, "from") == date(2024, 10, 31)


def test_loose_date_rejects_garbage_and_names_field():
    with pytest.raises(InputValidationError) as exc:
        parse_loose_date("yesterday-ish", "to")
    assert exc.value.field == "to"
    assert "'to'" in exc.value.message


# --- parse_duration -----------------------------------------------------------

def test_duration_whole_string_becomes_int():
    assert parse_duration("30") == 30
    assert isinstance(parse_duration("30"), int)


def test_duration_fractional_string_stays_float():
    assert parse_duration("12.5") == 12.5


def test_duration_numbers_pass_through():
    assert parse_duration(45) == 45
    assert parse_duration(45.0) == 45


@pytest.mark.parametrize("value", ["abc", "nan", "inf", True])
def test_duration_rejects_non_numbers(value):
    with pytest.raises(InputValidationError) as exc:
        parse_duration(value)
    assert exc.value.field == "duration"
