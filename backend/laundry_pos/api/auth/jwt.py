from typing import Any
from fastapi import APIRouter, Depends, HTTPException, status
from laundry_pos.schemas.auth_schema import LoginRequest
from laundry_pos.schemas.user_schema import UserAuth, UserOut
from laundry_pos.services.user_service import UserService, UsernameTakenError
from laundry_pos.core.security import create_access_token
from laundry_pos.api.deps.user_deps import AdminRoute, AuthContext, get_current_user
import pymongo
import logging

logger = logging.getLogger(__name__)
auth_router = APIRouter()
# Token and admin role are checked before the body is read
register_router = APIRouter(route_class=AdminRoute)

@auth_router.post('/login', summary="Exchange username and password for a bearer token")
async def login(credentials: LoginRequest) -> Any:
    user = await UserService.authenticate(username=credentials.username, password=credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"}
        )

    token = create_access_token(str(user.id), user.username, user.role.value)
    logger.info(f"User {user.username} logged in")
    return {
        "message": "Login successful",
        "token": token,
        "user": UserOut.from_user(user)
    }

# Older clients post to /Register
@register_router.post('/Register', include_in_schema=False)
@register_router.post('/register', summary="Register a new employee account (admin only)")
async def register(data: UserAuth, current_user: AuthContext = Depends(get_current_user)) -> Any:
    try:
        user = await UserService.create_user(data)
    except (UsernameTakenError, pymongo.errors.DuplicateKeyError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists"
        )
    except Exception as e:
        logger.error(f"Error registering user {data.username}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create user"
        )

    logger.info(f"Admin {current_user.username} registered {user.username}")
    return {
        "message": "User registered successfully",
        "user": UserOut.from_user(user)
    }
