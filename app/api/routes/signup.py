from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.models.schemas import SignUpAccepted, SignUpRejected, SignUpRequest
from app.services.error_report import Rejected
from app.services.signup_service import ACCEPTED_MESSAGE, evaluate_signup
from app.utils.logging import describe_field, logger, redact_email

router = APIRouter(tags=["signup"])


def _log_received(payload: SignUpRequest) -> None:
    # Values other than the (redacted) email never reach the logs.
    logger.info("Received sign-up data for /signup")
    logger.info(f"Username {describe_field(payload.username)}")
    logger.info(f"Email {redact_email(payload.email)} {describe_field(payload.email)}")
    logger.info(f"Phone number {describe_field(payload.phone_number)}")
    logger.info(f"Password {describe_field(payload.password)}")
    logger.info(f"Confirm password {describe_field(payload.confirm_password)}")


@router.post(
    "/signup",
    response_model=SignUpAccepted,
    responses={status.HTTP_400_BAD_REQUEST: {"model": SignUpRejected}},
)
def signup(payload: SignUpRequest):
    _log_received(payload)

    outcome = evaluate_signup(payload)

    if isinstance(outcome, Rejected):
        for field_name, messages in outcome.report.items():
            for message in messages:
                logger.warning(f"Validation error: {field_name}: {message}")
        logger.warning("Sign-up validation failed; returning 400 Bad Request.")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": outcome.report.to_dict()},
        )

    logger.info("Sign-up validation succeeded; returning 200 OK.")
    return {"message": ACCEPTED_MESSAGE}
