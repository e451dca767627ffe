# /app/core/identity.py

"""
Identity Provider Client.

Authentication is delegated to an external identity provider. Callers present
the provider-issued token as `Authorization: Bearer <token>`; this module only
verifies the signature and standard claims and exposes the caller's subject.
It never creates sessions or issues tokens of its own.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from pydantic import BaseModel

from . import config
from .errors import Unauthenticated

# auto_error=False lets us answer with our own 401 body instead of FastAPI's 403.
bearer_scheme = HTTPBearer(auto_error=False)


class IdentityClaims(BaseModel):
    """The subset of token claims the application relies on."""
    subject: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class IdentityProviderClient:
    def __init__(
        self,
        secret: str = config.IDENTITY_PROVIDER_SECRET,
        algorithm: str = config.IDENTITY_PROVIDER_ALGORITHM,
        audience: Optional[str] = config.IDENTITY_PROVIDER_AUDIENCE,
        issuer: Optional[str] = config.IDENTITY_PROVIDER_ISSUER,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.audience = audience
        self.issuer = issuer

    def verify(self, token: str) -> IdentityClaims:
        """Decodes and validates a provider token, raising `Unauthenticated` on any failure."""
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
                options={"verify_aud": self.audience is not None},
            )
        except JWTError:
            raise Unauthenticated("Unauthorized")

        subject = payload.get("sub")
        if not subject:
            raise Unauthenticated("Unauthorized")

        return IdentityClaims(
            subject=str(subject),
            email=payload.get("email"),
            first_name=payload.get("given_name") or payload.get("first_name"),
            last_name=payload.get("family_name") or payload.get("last_name"),
        )


identity_client = IdentityProviderClient()


def get_identity_client() -> IdentityProviderClient:
    return identity_client


def get_caller_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    client: IdentityProviderClient = Depends(get_identity_client),
) -> IdentityClaims:
    """FastAPI dependency yielding the verified caller identity or raising 401."""
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("Unauthorized")
    return client.verify(credentials.credentials)
