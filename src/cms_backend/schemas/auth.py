# src/cms_backend/schemas/auth.py
from __future__ import annotations

from cms_backend.schemas.common import CamelModel


class LoginRequest(CamelModel):
    name: str = ""
    password: str = ""


class LoginUser(CamelModel):
    id: int
    name: str
    realname: str
    cellphone: str = ""
    enable: int


class LoginResponse(CamelModel):
    token: str
    user: LoginUser
