import pytest

from app.services import validators
from app.services.validators import (
    CONFIRM_PASSWORD_REQUIRED,
    EMAIL_INVALID,
    EMAIL_REQUIRED,
    EMAIL_TOO_LONG,
    PASSWORD_COMPLEXITY,
    PASSWORD_LENGTH,
    PASSWORD_REQUIRED,
    PASSWORDS_DO_NOT_MATCH,
    PHONE_FORMAT,
    PHONE_LENGTH,
    PHONE_REQUIRED,
    USERNAME_CHARACTERS,
    USERNAME_LENGTH,
    USERNAME_REQUIRED,
    passwords_match,
    validate_confirm_password,
    validate_email_address,
    validate_password,
    validate_phone_number,
    validate_username,
)


# -----------------------------------------------------------------------------
# Username
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
def test_username_blank_is_required(value):
    assert validate_username(value) == [USERNAME_REQUIRED]


@pytest.mark.parametrize("value", ["ab", "a" * 21])
def test_username_length_out_of_range(value):
    assert validate_username(value) == [USERNAME_LENGTH]


def test_username_length_checked_before_characters():
    # Too short AND invalid characters: only the first failing rule is reported.
    assert validate_username("a!") == [USERNAME_LENGTH]


@pytest.mark.parametrize("value", ["john doe", "john!", "jöhn", "ab."])
def test_username_invalid_characters(value):
    assert validate_username(value) == [USERNAME_CHARACTERS]


@pytest.mark.parametrize("value", ["abc", "john_doe", "John-Doe-99", "a" * 20])
def test_username_valid(value):
    assert validate_username(value) == []


# -----------------------------------------------------------------------------
# Email
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("value", [None, "", "  "])
def test_email_blank_is_required(value):
    assert validate_email_address(value) == [EMAIL_REQUIRED]


@pytest.mark.parametrize("value", ["not-an-email", "john@", "@example.com", "john doe@example.com"])
def test_email_invalid_format(value):
    assert validate_email_address(value) == [EMAIL_INVALID]


def test_email_too_long_but_well_formed_reports_length_only():
    value = "john.doe@" + "sub." * 60 + "example.com"

    assert validate_email_address(value) == [EMAIL_TOO_LONG]


def test_email_long_local_part_is_only_a_length_problem():
    value = "a" * 250 + "@example.com"

    assert validate_email_address(value) == [EMAIL_TOO_LONG]


def test_email_too_long_and_malformed_reports_both():
    value = "not an email " * 25

    assert validate_email_address(value) == [EMAIL_INVALID, EMAIL_TOO_LONG]


@pytest.mark.parametrize("value", ["john.doe@example.com", "a+tag@mail.example.org", "john@example.test"])
def test_email_valid(value):
    assert validate_email_address(value) == []


# -----------------------------------------------------------------------------
# Phone number
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("value", [None, "", "   "])
def test_phone_blank_is_required(value):
    assert validate_phone_number(value) == [PHONE_REQUIRED]


@pytest.mark.parametrize(
    "value",
    ["+1 123-456-7890", "11234567890", "1 (123) 456-7890", "+1 (123) 456-7890", "+1.123.456.7890", "+44 123 456 7890"],
)
def test_phone_valid(value):
    assert validate_phone_number(value) == []


@pytest.mark.parametrize("value", ["123-456-7890", "1234567890", "(123) 456-7890"])
def test_phone_ten_digits_without_country_code_is_rejected(value):
    # At least one country-code digit is required; lengths are within range.
    assert validate_phone_number(value) == [PHONE_FORMAT]


def test_phone_bad_format_with_valid_length():
    assert validate_phone_number("123-456-789a") == [PHONE_FORMAT]


def test_phone_too_short_reports_format_and_length():
    assert validate_phone_number("12345") == [PHONE_FORMAT, PHONE_LENGTH]


def test_phone_too_long_reports_format_and_length():
    assert validate_phone_number("123-456-7890123456789") == [PHONE_FORMAT, PHONE_LENGTH]


# -----------------------------------------------------------------------------
# Password
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("value", [None, "", "        "])
def test_password_blank_is_required(value):
    assert validate_password(value) == [PASSWORD_REQUIRED]


def test_password_short_reports_length_and_complexity():
    assert validate_password("short") == [PASSWORD_LENGTH, PASSWORD_COMPLEXITY]


def test_password_short_but_complex_reports_length_only():
    assert validate_password("Ab1!") == [PASSWORD_LENGTH]


def test_password_too_long_reuses_length_message():
    value = "Aa1!" + "a" * 125

    assert validate_password(value) == [PASSWORD_LENGTH]


@pytest.mark.parametrize(
    "value",
    ["alllowercase1!", "ALLUPPERCASE1!", "NoDigitsHere!", "NoSymbols123"],
)
def test_password_missing_a_character_class(value):
    assert validate_password(value) == [PASSWORD_COMPLEXITY]


@pytest.mark.parametrize("value", ["Passw0rd!", "Str0ng Pass", "a" * 124 + "B1#x"])
def test_password_valid(value):
    assert validate_password(value) == []


class _TimingOutPattern:
    def __init__(self):
        self.timeouts = []

    def match(self, value, timeout=None):
        self.timeouts.append(timeout)
        raise TimeoutError("regex timed out")


def test_password_complexity_timeout_counts_as_failed_match(monkeypatch):
    pattern = _TimingOutPattern()
    monkeypatch.setattr(validators, "PASSWORD_COMPLEXITY_PATTERN", pattern)

    assert validate_password("Passw0rd!") == [PASSWORD_COMPLEXITY]
    assert pattern.timeouts == [1.0]


def test_password_complexity_real_pattern_honours_timeout():
    assert validators._meets_complexity("Passw0rd!") is True

    # Large input with a tiny budget: either the match gives up or it fails
    # on its own; it never raises.
    value = "a" * 5_000_000
    assert validators._meets_complexity(value, timeout=0.000001) is False


# -----------------------------------------------------------------------------
# Trailing newlines
# -----------------------------------------------------------------------------
def test_username_with_trailing_newline_is_rejected():
    assert validate_username("john_doe\n") == [USERNAME_CHARACTERS]


def test_phone_with_trailing_newline_is_rejected():
    assert validate_phone_number("+1 123-456-7890\n") == [PHONE_FORMAT]


def test_password_with_trailing_newline_still_meets_complexity():
    # The complexity pattern keeps its ^...$ anchors, which allow a final newline.
    assert validate_password("Passw0rd!\n") == []


# -----------------------------------------------------------------------------
# Confirm password / cross-field
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("value", [None, "", "   "])
def test_confirm_password_blank_is_required(value):
    assert validate_confirm_password(value, "Passw0rd!") == [CONFIRM_PASSWORD_REQUIRED]


def test_confirm_password_mismatch():
    assert validate_confirm_password("Passw0rd?", "Passw0rd!") == [PASSWORDS_DO_NOT_MATCH]


def test_confirm_password_mismatch_when_password_missing():
    assert validate_confirm_password("Passw0rd!", None) == [PASSWORDS_DO_NOT_MATCH]


def test_confirm_password_matches():
    assert validate_confirm_password("Passw0rd!", "Passw0rd!") == []


def test_passwords_match_cross_field():
    assert passwords_match("Passw0rd!", "Passw0rd!") == []
    assert passwords_match("Passw0rd!", "passw0rd!") == [PASSWORDS_DO_NOT_MATCH]


@pytest.mark.parametrize("confirm", [None, "", "  "])
def test_passwords_match_leaves_blank_confirm_to_required_rule(confirm):
    assert passwords_match("Passw0rd!", confirm) == []
