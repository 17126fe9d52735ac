import os
from typing import Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes.signup import router as signup_router
from app.models.schemas import ProblemDetails
from app.utils.logging import logger

# Comma-separated list of origins allowed to call the API.
# Default: the React dev server.
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

# OpenAPI docs (/docs, /openapi.json) are only exposed in development.
APP_ENV = os.getenv("APP_ENV", "production").lower()


def _model_errors(exc: RequestValidationError) -> Dict[str, List[str]]:
    """
    Group framework-level validation errors by member.

    The member name is the error location without its leading "body" segment,
    e.g. ("body", "phoneNumber") → "phoneNumber". A body that is not an object
    at all is reported under "body".
    """
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] == "body":
            loc = loc[1:]
        member = ".".join(loc) or "body"
        messages = errors.setdefault(member, [])
        if error["msg"] not in messages:
            messages.append(error["msg"])
    return errors


async def model_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Fallback for payloads that cannot even be parsed into a SignUpRequest
    (invalid JSON, non-object body, non-string field values).
    """
    errors = _model_errors(exc)

    logger.warning(f"Automatic model validation failed for {request.url.path}")
    for member, messages in errors.items():
        for message in messages:
            logger.warning(f"- Member: '{member}', Error: '{message}'")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ProblemDetails(
            title="One or more validation errors occurred.",
            status=status.HTTP_400_BAD_REQUEST,
            detail="One or more validation errors occurred.",
            instance=request.url.path,
            errors=errors,
        ).model_dump(),
    )


def create_app() -> FastAPI:
    """
    Application factory for better structure and easier testing.
    """
    docs_enabled = APP_ENV == "development"

    app = FastAPI(
        title="Sign-Up Validation API",
        version="1.0.0",
        description="Validates user sign-up submissions and reports field-level errors.",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, model_validation_handler)

    app.include_router(signup_router)

    @app.get("/health", tags=["system"])
    def health_check():
        return {"status": "ok"}

    return app


# Create the FastAPI app instance
app = create_app()
