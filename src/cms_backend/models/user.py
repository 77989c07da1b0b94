# src/cms_backend/models/user.py
from datetime import datetime

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from cms_backend.utils.database import Base, TZDateTime
from cms_backend.utils.timezone import now_local

class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)
    realname: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    cellphone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    enable: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    department_id: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    role_id: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    create_at: Mapped[datetime | None] = mapped_column(
        TZDateTime(timezone=True),
        default=now_local,
        nullable=True,
    )
    update_at: Mapped[datetime | None] = mapped_column(
        TZDateTime(timezone=True),
        default=now_local,
        onupdate=now_local,
        nullable=True,
    )
