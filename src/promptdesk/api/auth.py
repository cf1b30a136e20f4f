"""Login endpoint."""

from typing import Any, Dict
from fastapi import APIRouter, Body, Depends

from ..errors import ValidationError
from ..models import UserOut
from ..services.auth_service import AuthService
from .deps import get_auth_service

router = APIRouter()


@router.post("/auth/login", response_model=UserOut)
async def login(
    request: Dict[str, Any] = Body(...),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Check a username/password pair and return the user descriptor.

    Request body:
    {
        "username": "admin",
        "password": "admin123"
    }
    """
    username = request.get("username")
    password = request.get("password")

    if not username or not password:
        raise ValidationError("Username and password are required")
    if not isinstance(username, str) or not isinstance(password, str):
        raise ValidationError("Username and password must be strings")

    return await auth_service.authenticate(username, password)
