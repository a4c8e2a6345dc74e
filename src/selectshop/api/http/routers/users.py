"""Signup and login router."""

from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from src.selectshop.api.http.deps import get_db_session, get_user_service
from src.selectshop.api.http.schemas import (
    LoginRequest,
    SignupRequest,
    TokenResponse,
    UserResponse,
)
from src.selectshop.core.services import UserService
from src.selectshop.core.services.database import commit

router = APIRouter(prefix="/user", tags=["users"])


@router.post("/signup", response_model=UserResponse, status_code=201)
def signup(
    request: SignupRequest,
    users: UserService = Depends(get_user_service),
    session: Session = Depends(get_db_session),
) -> UserResponse:
    user = users.signup(
        username=request.username,
        password=request.password,
        email=request.email,
        admin=request.admin,
        admin_token=request.admin_token,
    )
    commit(session)
    return UserResponse.from_user(user)


@router.post("/login", response_model=TokenResponse)
def login(
    request: LoginRequest,
    response: Response,
    users: UserService = Depends(get_user_service),
) -> TokenResponse:
    """Exchange credentials for an access token, also sent in the Authorization header."""
    token = users.login(request.username, request.password)
    response.headers["Authorization"] = f"Bearer {token}"
    return TokenResponse(access_token=token)
