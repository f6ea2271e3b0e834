"""
Signup, login and logout endpoints.

Login answers with the session token twice: as the HTTP-only
``webToken`` cookie used by the browser and in the JSON body.
"""

from fastapi import APIRouter, Depends, Response

from flashcards_api.app.api.deps import get_user_service
from flashcards_api.app.core.config import settings
from flashcards_api.app.schemas.user import LoginResult, UserCreate, UserLogin, UserRead
from flashcards_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/login", response_model=LoginResult)
async def login(
    credentials: UserLogin,
    response: Response,
    service: UserService = Depends(get_user_service),
) -> LoginResult:
    """Authenticate with email and password.

    Any failure answers 400 ``email or password is incorrect``, without
    telling an unknown email from a wrong password.
    """
    result = await service.login(credentials.email, credentials.password)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=result.token,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    return result


@router.api_route("/logout", methods=["POST", "DELETE"])
async def logout() -> Response:
    """Clear the session cookie.  Tokens are not tracked server side."""
    response = Response()
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    return response


@router.post("/users", response_model=UserRead)
async def create_user(
    user: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Register a new user.  Answers 400 if the email is taken."""
    return await service.create_user(user)
