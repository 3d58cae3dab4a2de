"""
Authentication dependency for the Creator Dashboard API
Validates HS256 JWT bearer tokens and provides the seller context
"""
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from pydantic import BaseModel

from .config import settings


# Security scheme for bearer tokens
security = HTTPBearer(auto_error=False)

JWT_ALGORITHM = "HS256"


class TokenUser(BaseModel):
    """Seller data extracted from JWT token"""
    id: int
    email: Optional[str] = None
    name: Optional[str] = None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"}
    )


def decode_token(token: str) -> dict:
    """
    Decode and validate a JWT token.

    Expected payload:
    {
        "sub": "42",
        "id": 42,
        "email": "seller@example.com",
        "name": "Seller",
        "exp": 1234567890
    }
    """
    secret = settings.AUTH_SECRET
    if not secret:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="AUTH_SECRET is not configured"
        )

    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[JWT_ALGORITHM],
            options={"verify_aud": False}
        )
    except JWTError as e:
        if "expired" in str(e).lower():
            raise _unauthorized("Token has expired")
        raise _unauthorized(f"Invalid token: {str(e)}")


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> TokenUser:
    """
    Dependency that extracts and validates the current seller from JWT.

    Usage:
        @router.get("/protected")
        async def protected_route(user: TokenUser = Depends(get_current_user)):
            return {"seller": user.id}
    """
    if not credentials:
        raise _unauthorized("Authentication required")

    payload = decode_token(credentials.credentials)

    user_id = payload.get("id") or payload.get("sub")
    if user_id is None:
        raise _unauthorized("Invalid token payload: missing user id")

    try:
        seller_id = int(user_id)
    except (TypeError, ValueError):
        raise _unauthorized("Invalid token payload: user id must be numeric")

    return TokenUser(
        id=seller_id,
        email=payload.get("email"),
        name=payload.get("name"),
    )
