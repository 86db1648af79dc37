"""Authentication routes (signup, login, profile)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_user_repo
from api.models import LoginRequest, MessageResponse, SignupRequest, TokenResponse, UserResponse
from api.security import create_access_token, get_current_user_id
from domain.model.errors import AuthError, ConflictError, DependencyError, NotFoundError, ValidationError
from port.user_repository import UserRepository
from services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/signup", response_model=MessageResponse)
def signup(request: SignupRequest, repo: UserRepository = Depends(get_user_repo)):
    """Register a new user. No token is issued here; the client logs in next.

    Raises:
        HTTPException: 400 if the email is taken or input is invalid, 500 on store failure
    """
    try:
        auth_service.register(repo, name=request.name, email=request.email, password=request.password)
    except (ConflictError, ValidationError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DependencyError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error registering user")

    return MessageResponse(message="User registered successfully!")


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, repo: UserRepository = Depends(get_user_repo)):
    """Check credentials and return a one-hour bearer token.

    Raises:
        HTTPException: 400 for unknown email or wrong password, 500 on store failure
    """
    try:
        user = auth_service.authenticate(repo, email=request.email, password=request.password)
    except (NotFoundError, AuthError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DependencyError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error logging in")

    return TokenResponse(token=create_access_token(user.id))


@router.get("/user", response_model=UserResponse)
def get_user(
    user_id: str = Depends(get_current_user_id),
    repo: UserRepository = Depends(get_user_repo),
):
    """Return the profile of the token holder, without the password hash."""
    try:
        user = auth_service.get_profile(repo, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DependencyError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error fetching user")

    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
