"""Request authentication for API routes."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Annotated, TypeAlias

from fastapi import Depends, Header

from maica.core.exceptions import InvalidTokenError, MissingTokenError
from maica.core.security import TokenExpiredError, TokenValidationError, decode_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedUser:
    user_id: str
    email: str | None = None


def get_current_user(authorization: str | None = Header(None)) -> AuthenticatedUser:
    if not authorization or not authorization.startswith("Bearer "):
        logger.info("auth.token.parse error=missing_token")
        raise MissingTokenError()
    token = authorization.split(" ", 1)[1]
    try:
        payload = decode_token(token)
    except TokenExpiredError as exc:
        logger.info("auth.token.expired")
        raise InvalidTokenError("expired") from exc
    except TokenValidationError as exc:
        logger.info("auth.token.invalid")
        raise InvalidTokenError("invalid") from exc
    return AuthenticatedUser(user_id=str(payload["userId"]), email=payload.get("email"))


CurrentUserDep: TypeAlias = Annotated[AuthenticatedUser, Depends(get_current_user)]
