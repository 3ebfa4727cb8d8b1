from fastapi import APIRouter, Request, Response, status

from app.api.deps import CurrentUser, UserServiceDep
from app.core.config import settings
from app.core.limiter import limiter
from app.models import User
from app.schemas import AuthSession, UserCreate, UserCredentials, UserRead

router = APIRouter()


def _session(user: User, token: str) -> AuthSession:
    return AuthSession(user=UserRead.model_validate(user), access_token=token)


@router.post(
    "/signup",
    response_model=AuthSession,
    status_code=status.HTTP_201_CREATED,
    summary="Register with email and password",
)
@limiter.limit(settings.AUTH_RATE_LIMIT)
def sign_up(request: Request, payload: UserCreate, users: UserServiceDep) -> AuthSession:
    return _session(*users.sign_up(payload.email, payload.password))


@router.post("/signin", response_model=AuthSession, summary="Sign in with email and password")
@limiter.limit(settings.AUTH_RATE_LIMIT)
def sign_in(request: Request, payload: UserCredentials, users: UserServiceDep) -> AuthSession:
    return _session(*users.sign_in(payload.email, payload.password))


@router.post(
    "/signin/anonymous",
    response_model=AuthSession,
    summary="Create an anonymous account and sign in",
)
@limiter.limit(settings.AUTH_RATE_LIMIT)
def sign_in_anonymously(request: Request, users: UserServiceDep) -> AuthSession:
    return _session(*users.sign_in_anonymously())


@router.post(
    "/signout",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Revoke all tokens of the current user",
)
def sign_out(current_user: CurrentUser, users: UserServiceDep) -> Response:
    users.sign_out(current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=UserRead, summary="Current user")
def read_me(current_user: CurrentUser) -> User:
    return current_user
