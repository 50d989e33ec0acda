# auth.py
"""
Bearer-token authentication and role checks.

Tokens are verified before any claim is trusted: against the Cognito
user pool's published JWKS (RS256) when a pool is configured, otherwise
against the shared JWT_SECRET. The role comes from the "custom:role"
claim of the verified token.

Usage:
     @router.get("/leases", dependencies=[Depends(require_roles("manager", "tenant"))])
     def get_leases(...): ...

     @router.post("/applications")
     def create(..., user: AuthenticatedUser = Depends(require_roles("tenant"))): ...
"""
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Optional

import requests
from fastapi import Request
from jose import ExpiredSignatureError, JWTError, jwt

import config
from errors import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedUser:
     """Identity extracted from a verified token."""
     id: str
     role: str


def user_from_claims(claims: dict) -> AuthenticatedUser:
     """Build the caller's identity from verified claims; the role is lower-cased."""
     subject = claims.get("sub")
     if not subject:
          raise UnauthorizedError("Token has no subject")
     role = (claims.get(config.ROLE_CLAIM) or "").lower()
     return AuthenticatedUser(id=str(subject), role=role)


def _issuer() -> Optional[str]:
     if not config.COGNITO_USER_POOL_ID:
          return None
     return f"https://cognito-idp.{config.COGNITO_REGION}.amazonaws.com/{config.COGNITO_USER_POOL_ID}"


@lru_cache(maxsize=1)
def fetch_jwks() -> dict:
     """The user pool's signing keys, fetched once per process."""
     response = requests.get(f"{_issuer()}/.well-known/jwks.json", timeout=config.HTTP_TIMEOUT)
     response.raise_for_status()
     return response.json()


def verify_token(token: str) -> dict:
     """
     Verify signature and expiry (plus issuer/audience for Cognito) and return the claims.

     Raises:
          UnauthorizedError: If the token is malformed, forged, or expired
     """
     try:
          if config.COGNITO_USER_POOL_ID:
               return jwt.decode(
                    token,
                    fetch_jwks(),
                    algorithms=["RS256"],
                    issuer=_issuer(),
                    audience=config.COGNITO_APP_CLIENT_ID,
                    options={"verify_aud": bool(config.COGNITO_APP_CLIENT_ID), "verify_at_hash": False},
               )
          if not config.JWT_SECRET:
               logger.error("No token verification key configured (set COGNITO_USER_POOL_ID or JWT_SECRET)")
               raise UnauthorizedError("Token verification is not configured")
          return jwt.decode(
               token,
               config.JWT_SECRET,
               algorithms=[config.JWT_ALGORITHM],
               options={"verify_aud": False},
          )
     except ExpiredSignatureError:
          raise UnauthorizedError("Token has expired")
     except JWTError as e:
          logger.info("Rejected bearer token: %s", e)
          raise UnauthorizedError("Missing or invalid authorization token")


def get_current_user(request: Request) -> AuthenticatedUser:
     """FastAPI dependency: the authenticated caller, or 401."""
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise UnauthorizedError("Missing or invalid authorization token")
     token = auth.split(" ", 1)[1].strip()
     if not token:
          raise UnauthorizedError("Missing or invalid authorization token")
     return user_from_claims(verify_token(token))


def require_roles(*allowed_roles: str) -> Callable[[Request], AuthenticatedUser]:
     """
     Dependency factory that admits only callers whose role is in allowed_roles.

     Missing or invalid token -> 401; role not allowed -> 403.
     """
     allowed = {role.lower() for role in allowed_roles}

     def dependency(request: Request) -> AuthenticatedUser:
          user = get_current_user(request)
          if user.role not in allowed:
               raise ForbiddenError("Forbidden: insufficient role")
          request.state.user = user
          return user

     return dependency


def require_self(user: AuthenticatedUser, cognito_id: str) -> None:
     """Reject access to another user's profile resources."""
     if user.id != cognito_id:
          raise ForbiddenError("Forbidden: resource belongs to another user")
