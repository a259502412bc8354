"""Bearer token authentication for API routes."""

from fastapi import HTTPException, Request, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from waresys.domain.service import JWTService
from waresys.util.jwt import JWTError, TokenPayload

bearer_scheme = HTTPBearer(auto_error=False)


async def require_client(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> TokenPayload:
    """Authenticate a request via ``Authorization: Bearer <token>``.

    The JWT service is taken from the request's DI container, so tests
    can swap it like any other dependency.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    jwt_service = await request.state.dishka_container.get(JWTService)
    try:
        return jwt_service.verify_token(credentials.credentials)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
