"""
Field-level validation rules for the sign-up payload.

Each validator is a pure function taking the raw field value (possibly None)
and returning the list of error messages for that field. An empty list means
the value is valid.
"""

import re
from typing import Callable, List, Optional

import regex
from email_validator import EmailNotValidError, validate_email

from app.utils.logging import logger

FieldValidator = Callable[[Optional[str]], List[str]]

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20
EMAIL_MAX_LENGTH = 255
PHONE_MIN_LENGTH = 10
PHONE_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128

# Hard ceiling (seconds) on the password complexity match.
PASSWORD_PATTERN_TIMEOUT = 1.0

USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9_-]+")
PHONE_PATTERN = re.compile(r"\+?\d{1,3}?[-.\s]?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
PASSWORD_COMPLEXITY_PATTERN = regex.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[^A-Za-z0-9]).*$"
)

USERNAME_REQUIRED = "Username is required."
USERNAME_LENGTH = "Username must be between 3 and 20 characters."
USERNAME_CHARACTERS = "Username contains invalid characters (only alphanumeric, _, - allowed)."
EMAIL_REQUIRED = "Email is required."
EMAIL_INVALID = "Please enter a valid email address."
EMAIL_TOO_LONG = "Email address is too long."
PHONE_REQUIRED = "Phone number is required."
PHONE_FORMAT = "Please enter a valid phone number format (e.g., 123-456-7890)."
PHONE_LENGTH = "Phone number length is invalid."
PASSWORD_REQUIRED = "Password is required."
# Reused for both bounds.
PASSWORD_LENGTH = "Password must be at least 8 characters long."
PASSWORD_COMPLEXITY = (
    "Password must contain at least one uppercase, one lowercase, "
    "one number, and one special character."
)
CONFIRM_PASSWORD_REQUIRED = "Confirm Password is required."
PASSWORDS_DO_NOT_MATCH = "Passwords do not match."


def is_blank(value: Optional[str]) -> bool:
    """True for None, the empty string, or whitespace only."""
    return value is None or not value.strip()


def validate_username(value: Optional[str]) -> List[str]:
    # Only the first failing rule is reported.
    if is_blank(value):
        return [USERNAME_REQUIRED]
    if not USERNAME_MIN_LENGTH <= len(value) <= USERNAME_MAX_LENGTH:
        return [USERNAME_LENGTH]
    if not USERNAME_PATTERN.fullmatch(value):
        return [USERNAME_CHARACTERS]
    return []


# email-validator reports length limits as plain syntax errors; these phrases
# are the ones it uses for the address, domain and label limits.
_LENGTH_LIMIT_PHRASES = ("is too long", "so many characters")


def _is_length_limit_error(exc: EmailNotValidError) -> bool:
    message = str(exc)
    return any(phrase in message for phrase in _LENGTH_LIMIT_PHRASES)


def _is_email_address(value: str) -> bool:
    """
    Structural parse of `local-part@domain`.

    Deliverability (DNS lookup) is disabled: validation must stay free of I/O.
    email-validator's own length limits are ignored here; length is reported
    separately against EMAIL_MAX_LENGTH.
    """
    try:
        validate_email(value, check_deliverability=False, test_environment=True)
    except EmailNotValidError as exc:
        return _is_length_limit_error(exc)
    return True


def validate_email_address(value: Optional[str]) -> List[str]:
    if is_blank(value):
        return [EMAIL_REQUIRED]

    errors = []
    if not _is_email_address(value):
        errors.append(EMAIL_INVALID)
    if len(value) > EMAIL_MAX_LENGTH:
        errors.append(EMAIL_TOO_LONG)
    return errors


def validate_phone_number(value: Optional[str]) -> List[str]:
    if is_blank(value):
        return [PHONE_REQUIRED]

    errors = []
    if not PHONE_PATTERN.fullmatch(value):
        errors.append(PHONE_FORMAT)
    if not PHONE_MIN_LENGTH <= len(value) <= PHONE_MAX_LENGTH:
        errors.append(PHONE_LENGTH)
    return errors


def _meets_complexity(value: str, timeout: float = PASSWORD_PATTERN_TIMEOUT) -> bool:
    """
    Lowercase, uppercase, digit and symbol, each at least once.

    The match is bounded by `timeout` seconds; running out of time counts as
    a failed match.
    """
    try:
        return PASSWORD_COMPLEXITY_PATTERN.match(value, timeout=timeout) is not None
    except TimeoutError:
        logger.warning(
            f"Password complexity check timed out after {timeout}s "
            f"(length: {len(value)}); treating as not matched."
        )
        return False


def validate_password(value: Optional[str]) -> List[str]:
    if is_blank(value):
        return [PASSWORD_REQUIRED]

    errors = []
    if not PASSWORD_MIN_LENGTH <= len(value) <= PASSWORD_MAX_LENGTH:
        errors.append(PASSWORD_LENGTH)
    if not _meets_complexity(value):
        errors.append(PASSWORD_COMPLEXITY)
    return errors


def validate_confirm_password(value: Optional[str], password: Optional[str]) -> List[str]:
    if is_blank(value):
        return [CONFIRM_PASSWORD_REQUIRED]
    if value != password:
        return [PASSWORDS_DO_NOT_MATCH]
    return []


def passwords_match(password: Optional[str], confirm_password: Optional[str]) -> List[str]:
    """
    Cross-field check: confirm-password must equal password.

    A blank confirm-password is left to `validate_confirm_password`, which
    reports it as required.
    """
    if is_blank(confirm_password):
        return []
    if confirm_password != password:
        return [PASSWORDS_DO_NOT_MATCH]
    return []
