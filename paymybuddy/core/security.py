# paymybuddy/core/security.py
import secrets
from typing import Optional, Tuple

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class PasswordHasher:
    """One-way transform for user credentials, backed by a passlib CryptContext"""

    def __init__(self, context: CryptContext = pwd_context):
        self.context = context

    def encode(self, raw_password: str) -> str:
        return self.context.hash(raw_password)

    def verify(self, raw_password: str, hashed_password: str) -> bool:
        return self.context.verify(raw_password, hashed_password)


class PasswordHelper:
    """
    Adapts PasswordHasher to the password helper protocol fastapi-users
    expects, so login checks credentials with the same hasher used at
    registration.
    """

    def __init__(self, hasher: Optional[PasswordHasher] = None):
        self.hasher = hasher or PasswordHasher()

    def verify_and_update(self, plain_password: str, hashed_password: str) -> Tuple[bool, Optional[str]]:
        verified, updated_hash = self.hasher.context.verify_and_update(plain_password, hashed_password)
        return verified, updated_hash

    def hash(self, password: str) -> str:
        return self.hasher.encode(password)

    def generate(self) -> str:
        return secrets.token_urlsafe()


password_hasher = PasswordHasher()

def get_password_hasher() -> PasswordHasher:
    return password_hasher
