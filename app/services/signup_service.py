from typing import List, Optional, Tuple

from app.models.schemas import SignUpRequest
from app.services.error_report import Accepted, Rejected, ValidationOutcome, ValidationReport
from app.services.validators import (
    FieldValidator,
    passwords_match,
    validate_confirm_password,
    validate_email_address,
    validate_password,
    validate_phone_number,
    validate_username,
)

ACCEPTED_MESSAGE = "Sign-up data successfully validated and received!"

# Report keys, in the order fields appear in the error map.
USERNAME = "Username"
EMAIL = "Email"
PHONE_NUMBER = "PhoneNumber"
PASSWORD = "Password"
CONFIRM_PASSWORD = "ConfirmPassword"


def _single_field_checks(request: SignUpRequest) -> List[Tuple[str, FieldValidator, Optional[str]]]:
    return [
        (USERNAME, validate_username, request.username),
        (EMAIL, validate_email_address, request.email),
        (PHONE_NUMBER, validate_phone_number, request.phone_number),
        (PASSWORD, validate_password, request.password),
    ]


def validate_signup(request: SignUpRequest) -> ValidationReport:
    """
    Run every validation rule against `request` and collect the messages.

    Steps:
    - Field validators, in field declaration order.
    - Cross-field check (confirm password == password), merged into the
      same report so a mismatch seen by both passes is reported once.
    """
    report = ValidationReport()

    # 1) Independent field validators.
    for field_name, validator, value in _single_field_checks(request):
        report.extend(field_name, validator(value))

    report.extend(
        CONFIRM_PASSWORD,
        validate_confirm_password(request.confirm_password, request.password),
    )

    # 2) Cross-field pass.
    report.extend(CONFIRM_PASSWORD, passwords_match(request.password, request.confirm_password))

    return report


def evaluate_signup(request: SignUpRequest) -> ValidationOutcome:
    """
    Decide whether a sign-up submission is accepted.

    Returns:
        Accepted          → no rule produced a message.
        Rejected(report)  → at least one message; `report` holds all of them.

    Never raises for invalid input: every failure ends up in the report.
    """
    report = validate_signup(request)
    if not report:
        return Accepted()
    return Rejected(report)
