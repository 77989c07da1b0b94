# src/cms_backend/utils/security.py
from __future__ import annotations

from passlib.context import CryptContext

# ---- Password hashing policy ----
pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
)


# ---------------------------------------------------------------------
# Password Handling
# ---------------------------------------------------------------------
def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    if not hashed or not pwd_context.identify(hashed):
        return False
    return pwd_context.verify(plain, hashed)
