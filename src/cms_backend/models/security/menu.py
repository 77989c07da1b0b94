# src/cms_backend/models/security/menu.py
from sqlalchemy import Column, Integer, BigInteger, String
from cms_backend.utils.database import Base, TZDateTime
from cms_backend.utils.timezone import now_local

# kind values: 1 = directory, 2 = menu item, 3 = action/button
MENU_TYPES = (1, 2, 3)

class Menu(Base):
    __tablename__ = "menus"

    id        = Column(Integer, primary_key=True, autoincrement=True)
    name      = Column(String(100), nullable=False)
    type      = Column(Integer, nullable=False)
    url       = Column(String(255), nullable=True)
    icon      = Column(String(100), nullable=True)
    sort      = Column(Integer, nullable=True)                 # NULL sorts as 0
    parent_id = Column(BigInteger, nullable=True, index=True)  # NULL = root; not a foreign key
    create_at = Column(TZDateTime(timezone=True), default=now_local, nullable=True)
    update_at = Column(TZDateTime(timezone=True), default=now_local, onupdate=now_local, nullable=True)
