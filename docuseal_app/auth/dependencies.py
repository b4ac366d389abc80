"""
Authentication dependencies for FastAPI.
"""
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from docuseal_app.auth.utils import decode_access_token
from docuseal_app.models.user import UserResponse
from docuseal_app.services.firestore import FirestoreService

# HTTP Bearer token scheme
security = HTTPBearer(auto_error=False)


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> UserResponse:
    """
    Dependency to get the current authenticated user from JWT token.
    """
    if credentials is None:
        raise _credentials_exception()

    # Decode token
    token_data = decode_access_token(credentials.credentials)
    if token_data is None:
        raise _credentials_exception()

    # Get user from database
    firestore = FirestoreService()
    user = await firestore.get_user_by_id(token_data.user_id)

    if user is None:
        raise _credentials_exception()

    return user.to_response()


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """
    Dependency to get just the current user's ID from JWT token.
    """
    if credentials is None:
        raise _credentials_exception()

    token_data = decode_access_token(credentials.credentials)
    if token_data is None:
        raise _credentials_exception()

    return token_data.user_id


async def get_optional_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """
    Like get_current_user_id, but returns None instead of rejecting.
    Used by routes that also serve anonymous callers.
    """
    if credentials is None:
        return None

    token_data = decode_access_token(credentials.credentials)
    if token_data is None:
        return None

    return token_data.user_id
