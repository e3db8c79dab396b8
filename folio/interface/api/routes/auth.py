"""Admin authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import BaseModel

from folio.application.usecase.auth import (
    GetCurrentAdminRequest,
    GetCurrentAdminResponse,
    GetCurrentAdminUseCase,
    LoginRequest,
    LoginUseCase,
)
from folio.config import Settings
from folio.domain.error import AuthenticationError
from folio.domain.service import AuthService
from folio.util.jwt import JWTError
from folio.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/admin", tags=["authentication"], route_class=DishkaRoute)


class LoginAPIRequest(BaseModel):
    """API request for admin login."""

    password: str


class LoginAPIResponse(BaseModel):
    """Login response (the token itself only travels in the cookie)."""

    success: bool


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /admin/me to report the session without raising an error.
    """

    authenticated: bool
    admin: GetCurrentAdminResponse | None = None


def require_admin(request: Request, auth_service: AuthService) -> None:
    """Reject the request unless it carries a valid admin session cookie.

    Args:
        request: Incoming request
        auth_service: Admin authentication domain service

    Raises:
        HTTPException: 401 if the cookie is missing, invalid or expired
    """
    token = request.cookies.get(auth_service.auth_settings.cookie_name)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    try:
        auth_service.verify_token(token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


@router.post("/login", response_model=LoginAPIResponse)
async def login(
    request: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginAPIResponse:
    """Log the admin in and set the session cookie.

    Args:
        request: Login data
        response: FastAPI response object
        login_use_case: Login use case from DI
        settings: Application settings from DI

    Returns:
        Login success

    Raises:
        HTTPException: 401 if the password is wrong
    """
    try:
        result = await login_use_case.execute(LoginRequest(password=request.password))
    except AuthenticationError as e:
        logger.warning("Rejected admin login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )

    # Cross-site cookies need secure=True, which needs HTTPS
    is_production = settings.environment == "production"
    cookie_max_age = settings.auth.jwt_expiry_days * 24 * 60 * 60

    response.set_cookie(
        key=settings.auth.cookie_name,
        value=result.token,
        httponly=True,
        secure=is_production,
        samesite="lax",
        path="/",
        max_age=cookie_max_age,
    )
    logger.info(
        f"Admin logged in, cookie set: secure={is_production}, max_age={cookie_max_age}"
    )
    return LoginAPIResponse(success=True)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Log out by clearing the session cookie.

    Args:
        response: FastAPI response object
        settings: Application settings from DI

    Returns:
        Logout success message
    """
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_admin(
    request: Request,
    get_current_admin_use_case: FromDishka[GetCurrentAdminUseCase],
    settings: FromDishka[Settings],
) -> AuthStatusResponse:
    """Report whether the request carries a valid admin session.

    Safe to call without authentication: returns authenticated=false
    instead of raising.

    Args:
        request: Incoming request
        get_current_admin_use_case: Get current admin use case from DI
        settings: Application settings from DI

    Returns:
        Authentication status
    """
    token = request.cookies.get(settings.auth.cookie_name)
    if not token:
        return AuthStatusResponse(authenticated=False)

    try:
        admin = await get_current_admin_use_case.execute(
            GetCurrentAdminRequest(token=token)
        )
        return AuthStatusResponse(authenticated=True, admin=admin)
    except JWTError:
        # Invalid or expired token - expected, not an error
        return AuthStatusResponse(authenticated=False)
