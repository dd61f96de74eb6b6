# farmlog/api/auth.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from farmlog.api.deps import get_store, require_user
from farmlog.errors import NotAuthenticated
from farmlog.models.user import User
from farmlog.schemas import LoginRequest, UserOut
from farmlog.services.auth import authenticate_user, login_user, logout_user
from farmlog.services.store import RecordStore

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=UserOut)
def login(payload: LoginRequest, request: Request, store: RecordStore = Depends(get_store)):
    user = authenticate_user(store, payload.username, payload.password)
    if user is None:
        raise NotAuthenticated("Invalid username or password")
    login_user(request, user)
    return user


@router.post("/logout")
def logout(request: Request):
    logout_user(request)
    return {"message": "Logged out"}


@router.get("/user", response_model=UserOut)
def current_user(user: User = Depends(require_user)):
    return user
