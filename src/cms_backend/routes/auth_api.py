# src/cms_backend/routes/auth_api.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cms_backend.crud.users import authenticate_user
from cms_backend.schemas.auth import LoginRequest, LoginResponse, LoginUser
from cms_backend.utils.auth import issue_token
from cms_backend.utils.database import get_db
from cms_backend.utils.exceptions import Unauthorized
from cms_backend.utils.response import success

logger = logging.getLogger(__name__)

auth_api = APIRouter(tags=["Auth"])


@auth_api.post("/login")
async def login(payload: LoginRequest, db: AsyncSession = Depends(get_db)):
    if not payload.name or not payload.password:
        raise Unauthorized("invalid credentials")

    user = await authenticate_user(db, payload.name, payload.password)
    if user is None:
        logger.info("login failed for name=%s", payload.name)
        raise Unauthorized("invalid credentials")

    body = LoginResponse(
        token=issue_token(user.id),
        user=LoginUser(
            id=user.id,
            name=user.name,
            realname=user.realname,
            cellphone=user.cellphone or "",
            enable=user.enable,
        ),
    )
    return success(body)


@auth_api.get("/test")
async def token_probe():
    return success({"valid": True})
