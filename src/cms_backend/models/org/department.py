# src/cms_backend/models/org/department.py
from sqlalchemy import Column, Integer, BigInteger, String
from cms_backend.utils.database import Base, TZDateTime
from cms_backend.utils.timezone import now_local

class Department(Base):
    __tablename__ = "departments"

    id        = Column(Integer, primary_key=True, autoincrement=True)
    name      = Column(String(100), nullable=False)
    parent_id = Column(BigInteger, nullable=True)
    leader    = Column(String(50), nullable=True)
    create_at = Column(TZDateTime(timezone=True), default=now_local, nullable=True)
    update_at = Column(TZDateTime(timezone=True), default=now_local, onupdate=now_local, nullable=True)
