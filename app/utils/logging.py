import logging
import os
from typing import Optional

# -----------------------------------------------------------------------------
# Logger configuration for the "registration" domain
# -----------------------------------------------------------------------------
def resolve_log_level(name: Optional[str]) -> str:
    """
    Map a level name to one the logging module knows.

    Unknown names (e.g. "verbose") fall back to INFO instead of failing at import.
    """
    level = (name or "").strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return "INFO"


LOG_LEVEL = resolve_log_level(os.getenv("LOG_LEVEL", "INFO"))

logger = logging.getLogger("registration")
logger.setLevel(LOG_LEVEL)

handler = logging.StreamHandler()
formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")
handler.setFormatter(formatter)

# Avoid adding duplicate handlers if the module is imported multiple times
if not logger.handlers:
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Email redaction utility
# -----------------------------------------------------------------------------
def redact_email(email: Optional[str]) -> str:
    """
    Redact an email address for logging.

    Rules:
    - Keep first and last character of the local part
    - Replace all middle characters with '*'
    - Keep the domain intact

    Examples:
        "john.doe@gmail.com" → "j******e@gmail.com"
        "a@gmail.com"        → "a@gmail.com"
        "ab@gmail.com"       → "a*b@gmail.com"
        None / "no-at-sign"  → "<redacted>"
    """
    if not email or "@" not in email:
        return "<redacted>"

    local, domain = email.split("@", 1)

    if len(local) <= 2:
        if not local:
            return f"@{domain}"
        # Not enough length to mask; return minimal masking
        return f"{local[0]}*{local[-1]}@{domain}" if len(local) == 2 else f"{local}@{domain}"

    # Normal case: first + stars + last
    masked_local = local[0] + ("*" * (len(local) - 2)) + local[-1]

    return f"{masked_local}@{domain}"


# -----------------------------------------------------------------------------
# Field summary utility
# -----------------------------------------------------------------------------
def describe_field(value: Optional[str]) -> str:
    """
    Summarize a received field without exposing its content.

    Examples:
        None     → "(is null: True, length: -1)"
        ""       → "(is null: False, length: 0)"
        "secret" → "(is null: False, length: 6)"
    """
    length = len(value) if value is not None else -1
    return f"(is null: {value is None}, length: {length})"
