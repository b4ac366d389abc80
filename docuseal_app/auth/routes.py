"""
Authentication routes.
"""
import logging
from datetime import timedelta
from fastapi import APIRouter, HTTPException, status, Depends

from docuseal_app.config import get_settings
from docuseal_app.auth.utils import hash_password, verify_password, create_access_token
from docuseal_app.auth.dependencies import get_current_user
from docuseal_app.models.user import LoginRequest, SignupRequest, Token, UserResponse
from docuseal_app.services.firestore import FirestoreService

settings = get_settings()
router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def signup(request: SignupRequest):
    """
    Register a new user with email and password.
    """
    firestore = FirestoreService()

    existing = await firestore.get_user_by_email(request.email)
    if existing is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A user with this email already exists",
        )

    user = await firestore.create_user(
        email=request.email,
        password_hash=hash_password(request.password),
        name=request.name,
        created_by="signup",
    )
    logger.info("Registered user %s", user.id)

    return user.to_response()


@router.post("/login", response_model=Token)
async def login(request: LoginRequest):
    """
    Authenticate user and return JWT token.
    """
    firestore = FirestoreService()

    # Get user by email
    user = await firestore.get_user_by_email(request.email)

    if user is None or not verify_password(request.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Create access token
    access_token_expires = timedelta(minutes=settings.access_token_expire_minutes)
    access_token = create_access_token(
        data={"sub": user.id, "email": user.email},
        expires_delta=access_token_expires,
    )

    return Token(access_token=access_token, token_type="bearer")


@router.post("/logout")
async def logout():
    """
    Logout user.
    Note: With JWT, logout is handled client-side by discarding the token.
    """
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user)):
    """
    Get current authenticated user info.
    """
    return current_user
