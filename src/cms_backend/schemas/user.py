# src/cms_backend/schemas/user.py
from __future__ import annotations
from datetime import datetime
from typing import Optional

from pydantic import SecretStr

from cms_backend.schemas.common import CamelModel, Int64


# -------------------------------------------------------------------
# Requests
# -------------------------------------------------------------------
class UserCreate(CamelModel):
    name: str
    realname: str
    password: SecretStr                      # hashed before it reaches the DB
    cellphone: Optional[str] = None
    department_id: Optional[Int64] = None
    role_id: Optional[Int64] = None


class UserUpdate(CamelModel):
    password: Optional[SecretStr] = None
    cellphone: Optional[str] = None


# -------------------------------------------------------------------
# Responses (password never leaves the server)
# -------------------------------------------------------------------
class UserOut(CamelModel):
    id: int
    name: str
    realname: str
    cellphone: Optional[str] = None
    enable: int
    department_id: Optional[Int64] = None
    role_id: Optional[Int64] = None
    create_at: Optional[datetime] = None
    update_at: Optional[datetime] = None
