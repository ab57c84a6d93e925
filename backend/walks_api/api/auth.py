"""Authentication API endpoints."""
from fastapi import APIRouter, Depends

from walks_api.auth.jwt import create_access_token
from walks_api.config import get_settings
from walks_api.exceptions import AuthenticationError
from walks_api.repositories import UserRepository, get_user_repository
from walks_api.schemas.user import LoginRequest, TokenResponse
from walks_api.utils.audit import log_audit_event

router = APIRouter(prefix="/Authentication", tags=["Authentication"])
settings = get_settings()


@router.post("/login", response_model=TokenResponse)
async def login(
    login_request: LoginRequest,
    user_repository: UserRepository = Depends(get_user_repository),
):
    """Login with username and password; returns a signed bearer token."""
    user = await user_repository.authenticate(login_request.username, login_request.password)

    if user is None:
        log_audit_event("login_failed", details={"username": login_request.username})
        raise AuthenticationError()

    token = create_access_token(user)

    log_audit_event(
        "login_succeeded",
        details={"user_id": user.id, "username": user.username, "roles": user.role_names},
    )

    return TokenResponse(
        token=token,
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
