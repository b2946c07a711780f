import asyncio
import logging
from datetime import timedelta
from typing import Annotated

from fastapi import Depends, Header, Request
from passlib.context import CryptContext
from sqlmodel import Session, select

from ..core.errors import Forbidden, Unauthenticated
from ..core.settings import settings
from ..models.Token import Identity
from ..models.User import User
from .revocation import RevocationList
from .tokens import TokenService

logger = logging.getLogger(__name__)

# Password hashing
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__time_cost=2,
    argon2__memory_cost=102400,
    argon2__parallelism=8
)

# Process-wide token state, created once at import from settings
token_service = TokenService(
    settings.JWT_SECRET,
    algorithm=settings.ALGORITHM,
    expires_delta=timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS),
)
revocation_list = RevocationList(token_service)


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password + settings.PASSWORD_PEPPER, hashed_password)

def get_password_hash(password):
    return pwd_context.hash(password + settings.PASSWORD_PEPPER)


def get_token_service() -> TokenService:
    return token_service

def get_revocation_list() -> RevocationList:
    return revocation_list


def extract_bearer_token(authorization: str) -> str | None:
    """
    Returns the token from a 'Bearer <token>' header value, or None if malformed.
    """
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


async def get_current_identity(
    request: Request,
    authorization: Annotated[str | None, Header()] = None,
    tokens: TokenService = Depends(get_token_service),
    revocations: RevocationList = Depends(get_revocation_list),
) -> Identity:
    """
    Access guard for protected routes.

    No Authorization header -> 401. Malformed, forged, expired or revoked
    token -> 403. Otherwise the identity is attached to request.state.
    """
    if authorization is None:
        raise Unauthenticated()

    token = extract_bearer_token(authorization)
    identity = tokens.verify(token) if token else None
    if identity is None or revocations.is_revoked(token):
        raise Forbidden()

    request.state.identity = identity
    return identity


def authenticate_user(session: Session, email: str, password: str) -> User | None:
    statement = select(User).where(User.email == email)
    user = session.exec(statement).first()
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


async def revocation_sweep_loop(revocations: RevocationList, interval_seconds: float) -> None:
    """Periodically drop revocation entries for tokens that have expired."""
    while True:
        try:
            await asyncio.sleep(interval_seconds)
            removed = revocations.prune_expired()
            if removed > 0:
                logger.info(f"Revocation sweep removed {removed} expired entries")
        except asyncio.CancelledError:
            break
        except Exception as e:
            logger.warning(f"Revocation sweep error: {e}")
