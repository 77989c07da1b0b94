# src/cms_backend/models/security/role_menu.py
from sqlalchemy import Column, BigInteger, PrimaryKeyConstraint
from cms_backend.utils.database import Base

class RoleMenu(Base):
    """menu_id is visible under role_id. Neither side is a foreign key."""

    __tablename__ = "role_menus"
    __table_args__ = (PrimaryKeyConstraint("role_id", "menu_id"),)

    role_id = Column(BigInteger, nullable=False)
    menu_id = Column(BigInteger, nullable=False)
