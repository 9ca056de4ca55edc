from enum import Enum
import bcrypt
from sqlalchemy.exc import IntegrityError

from flipside.agents.postgres import PostgresAgent, default_agent
from flipside.config import settings

class AuthErrorCause(str, Enum):
    CREDENTIALS_SIGNIN = "CredentialsSignin"
    EMAIL_EXISTS = "EmailExists"
    MISSING_CREDENTIALS = "MissingCredentials"

class AuthError(Exception):
    def __init__(self, cause: AuthErrorCause):
        super().__init__(cause.value)
        self.cause = cause

def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("utf-8")

def check_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))

class AuthAgent:
    """Email and password credentials stored in the users table."""

    def __init__(self, postgres_agent: PostgresAgent | None = None):
        self.postgres_agent = postgres_agent or default_agent()

    async def sign_in(self, email: str | None, password: str | None):
        if not email or not password:
            raise AuthError(AuthErrorCause.CREDENTIALS_SIGNIN)

        user = await self.postgres_agent.get_user_by_email(email.strip().lower())
        if user is None or not check_password(password, user.password):
            raise AuthError(AuthErrorCause.CREDENTIALS_SIGNIN)
        return user

    async def create_user(self, email: str | None, password: str | None):
        if not email or not password:
            raise AuthError(AuthErrorCause.MISSING_CREDENTIALS)

        email = email.strip().lower()
        if await self.postgres_agent.get_user_by_email(email) is not None:
            raise AuthError(AuthErrorCause.EMAIL_EXISTS)
        try:
            return await self.postgres_agent.insert_user(email, hash_password(password))
        except IntegrityError as e:
            raise AuthError(AuthErrorCause.EMAIL_EXISTS) from e
