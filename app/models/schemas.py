from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SignUpRequest(BaseModel):
    """
    Raw sign-up payload as received on the wire.

    Every field is optional: missing and null values are both accepted here
    and reported as "required" by the validation service instead.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    username: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")
    password: Optional[str] = None
    confirm_password: Optional[str] = Field(default=None, alias="confirmPassword")


class SignUpAccepted(BaseModel):
    message: str


class SignUpRejected(BaseModel):
    errors: Dict[str, List[str]]


class ProblemDetails(BaseModel):
    """Body returned when the payload cannot be parsed into a SignUpRequest."""

    title: str
    status: int
    detail: str
    instance: str
    errors: Dict[str, List[str]]
