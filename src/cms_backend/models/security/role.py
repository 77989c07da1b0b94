# src/cms_backend/models/security/role.py
from sqlalchemy import Column, Integer, String
from cms_backend.utils.database import Base, TZDateTime
from cms_backend.utils.timezone import now_local

class Role(Base):
    __tablename__ = "roles"

    id        = Column(Integer, primary_key=True, autoincrement=True)
    name      = Column(String(50), nullable=False, unique=True)
    intro     = Column(String(255), nullable=True)
    create_at = Column(TZDateTime(timezone=True), default=now_local, nullable=True)
    update_at = Column(TZDateTime(timezone=True), default=now_local, onupdate=now_local, nullable=True)
