from typing import Any, Mapping
from loguru import logger

from flipside.agents.auth import AuthAgent, AuthError, AuthErrorCause

SIGN_IN_MESSAGES = {
    AuthErrorCause.CREDENTIALS_SIGNIN: "Invalid credentials.",
}
SIGN_UP_MESSAGES = {
    AuthErrorCause.EMAIL_EXISTS: "Email already exists.",
    AuthErrorCause.MISSING_CREDENTIALS: "Email and password are required.",
}

async def authenticate(prev_state: str | None, form: Mapping[str, Any], auth: AuthAgent | None = None) -> str | None:
    """Sign in with the submitted credentials; returns the message to show, or None on success."""
    try:
        await (auth or AuthAgent()).sign_in(form.get("email"), form.get("password"))
    except AuthError as e:
        logger.info("Sign-in failed: {}", e.cause.value)
        return SIGN_IN_MESSAGES.get(e.cause, "Something went wrong.")
    return None

async def sign_up(prev_state: str | None, form: Mapping[str, Any], auth: AuthAgent | None = None) -> str | None:
    try:
        await (auth or AuthAgent()).create_user(form.get("email"), form.get("password"))
    except AuthError as e:
        logger.info("Sign-up failed: {}", e.cause.value)
        return SIGN_UP_MESSAGES.get(e.cause, "Something went wrong during signup.")
    return None
