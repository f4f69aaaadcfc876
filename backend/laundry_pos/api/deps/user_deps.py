# backend/laundry_pos/api/deps/user_deps.py
"""
Authentication and role checks for protected routes.

AuthenticatedRoute and AdminRoute check the bearer token (and the role) before
FastAPI reads the request body, so an anonymous caller gets 401 whatever it
sent. get_current_user hands the caller's identity to the handler as an
AuthContext.
"""
from dataclasses import dataclass
from typing import Callable, Optional
from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.routing import APIRoute
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from laundry_pos.core.security import InvalidToken, decode_access_token
import logging

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

@dataclass(frozen=True)
class AuthContext:
    user_id: str
    username: str
    role: str

def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"}
    )

def authenticate(credentials: Optional[HTTPAuthorizationCredentials]) -> AuthContext:
    if credentials is None:
        logger.warning("Request without a bearer token")
        raise _unauthorized("Authorization header missing or invalid")

    try:
        payload = decode_access_token(credentials.credentials)
    except InvalidToken as e:
        logger.warning(f"Invalid token: {str(e)}")
        raise _unauthorized("Invalid token")

    return AuthContext(user_id=payload.id, username=payload.username, role=payload.role)

def check_role(current_user: AuthContext, role: str) -> AuthContext:
    if current_user.role != role:
        logger.warning(f"Forbidden access for {current_user.username} with role {current_user.role}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Forbidden: Only {role}s can access this endpoint"
        )
    return current_user

class AuthenticatedRoute(APIRoute):
    required_role: Optional[str] = None

    def get_route_handler(self) -> Callable:
        handler = super().get_route_handler()
        required_role = self.required_role

        async def authenticated_handler(request: Request) -> Response:
            current_user = authenticate(await bearer_scheme(request))
            if required_role is not None:
                check_role(current_user, required_role)
            request.state.current_user = current_user
            return await handler(request)

        return authenticated_handler

class AdminRoute(AuthenticatedRoute):
    required_role = "admin"

async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> AuthContext:
    # Already set when the route is an AuthenticatedRoute
    current_user = getattr(request.state, "current_user", None)
    if current_user is None:
        current_user = authenticate(credentials)
    return current_user
