# src/cms_backend/models/__init__.py
# Importing the model modules registers every table on Base.metadata.
from cms_backend.models.user import User
from cms_backend.models.org.department import Department
from cms_backend.models.security.menu import Menu
from cms_backend.models.security.role import Role
from cms_backend.models.security.role_menu import RoleMenu

__all__ = ["User", "Department", "Menu", "Role", "RoleMenu"]
